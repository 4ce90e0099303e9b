"""Keybinding help overlay and the set of all overlays."""

from __future__ import annotations

from typing import Mapping, Optional, Protocol, Sequence

from procdeck.ansi import Style, box, display_width
from procdeck.branch_picker import BranchPicker
from procdeck.group_picker import GroupPicker
from procdeck.inputs import CommandInput, FilterInput
from procdeck.keys import Binding
from procdeck.toast import ToastStack

_BOX = Style(padding=(1, 2), background="234", foreground="252")
_TITLE = Style(bold=True, foreground="212", margin_bottom=1)
_KEY = Style(foreground="212")
_DESC = Style(foreground="245")

_COLUMN_SEP = "    "
_ELLIPSIS = " …"
_MAX_BOX_WIDTH = 60


class KeyMapProvider(Protocol):
    def short_help(self) -> list[Binding]: ...

    def full_help(self) -> list[list[Binding]]: ...


def _pad(text: str, width: int) -> str:
    return text + " " * (width - display_width(text))


def _column(bindings: Sequence[Binding]) -> list[str]:
    shown = [b for b in bindings if b.enabled]
    if not shown:
        return []
    key_w = max(display_width(b.help_key) for b in shown)
    desc_w = max(display_width(b.help_desc) for b in shown)
    return [
        _KEY.render(_pad(b.help_key, key_w)) + " " + _DESC.render(_pad(b.help_desc, desc_w))
        for b in shown
    ]


def _join_columns(columns: list[list[str]], separator: str) -> str:
    if not columns:
        return ""
    height = max(len(c) for c in columns)
    widths = [max(display_width(line) for line in c) for c in columns]
    rows = []
    for y in range(height):
        cells = [c[y] if y < len(c) else " " * w for c, w in zip(columns, widths)]
        rows.append(separator.join(cells).rstrip())
    return "\n".join(rows)


def full_help_view(groups: Sequence[Sequence[Binding]], width: int) -> str:
    """Lay out binding groups as columns, stopping before width is exceeded."""
    columns: list[list[str]] = []
    total = 0
    for group in groups:
        column = _column(group)
        if not column:
            continue
        col_w = max(display_width(line) for line in column)
        sep_w = len(_COLUMN_SEP) if columns else 0
        if width > 0 and total + sep_w + col_w > width:
            if columns and total + len(_ELLIPSIS) <= width:
                columns[-1] = [columns[-1][0] + _ELLIPSIS] + columns[-1][1:]
            break
        columns.append(column)
        total += sep_w + col_w
    return _join_columns(columns, _COLUMN_SEP)


class HelpOverlay:
    """Bordered box listing every keybinding."""

    def __init__(self) -> None:
        self.visible = False

    def toggle(self) -> None:
        """Flip visibility."""
        self.visible = not self.visible

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def view(self, keymap: KeyMapProvider, width: int = 0, height: int = 0) -> str:
        """Render the help box sized to its content, or "" when hidden."""
        if not self.visible:
            return ""
        box_width = _MAX_BOX_WIDTH
        if width - 4 > 0 and box_width > width - 4:
            box_width = width - 4
        title = _TITLE.render("Keybindings")
        body = full_help_view(keymap.full_help() or [], box_width)
        return box(_BOX.render(title + "\n" + body))


class OverlaySet:
    """All overlays the main view composes."""

    def __init__(
        self,
        groups: Optional[Mapping[str, Sequence[str]]] = None,
        branches: Optional[Sequence[str]] = None,
    ):
        self.help = HelpOverlay()
        self.group = GroupPicker(groups or {})
        self.branch = BranchPicker(branches)
        self.filter = FilterInput()
        self.command = CommandInput()
        self.toasts = ToastStack()