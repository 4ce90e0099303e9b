"""Overlay that lists configured groups and starts the one picked."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from procdeck.ansi import Style, box
from procdeck.keys import Binding, KeyMsg

_BOX = Style(padding=(1, 2), background="234", foreground="252")
_TITLE = Style(bold=True, foreground="212", margin_bottom=1)
_SELECTED = Style(bold=True, foreground="255", background="62")
_NORMAL = Style(foreground="252")

_UP = Binding(("k", "up"))
_DOWN = Binding(("j", "down"))
_ENTER = Binding(("enter",))
_ESC = Binding(("esc", "q"))


@dataclass(frozen=True)
class StartGroupMsg:
    """Request to start every process in the named group."""

    name: str


class GroupPicker:
    """Sorted list of group names with a cursor."""

    def __init__(self, groups: Mapping[str, Sequence[str]]):
        self.groups: list[str] = sorted(groups)
        self.cursor = 0
        self.visible = False

    def show(self) -> None:
        """Make the overlay visible with the cursor on the first group."""
        self.visible = True
        self.cursor = 0

    def hide(self) -> None:
        """Hide the overlay."""
        self.visible = False

    def update(self, msg: KeyMsg) -> Optional[StartGroupMsg]:
        """Handle a key; return the start request when a group is confirmed."""
        if _UP.matches(msg):
            if self.cursor > 0:
                self.cursor -= 1
        elif _DOWN.matches(msg):
            if self.cursor < len(self.groups) - 1:
                self.cursor += 1
        elif _ENTER.matches(msg):
            if self.groups:
                self.visible = False
                return StartGroupMsg(self.groups[self.cursor])
        elif _ESC.matches(msg):
            self.visible = False
        return None

    def view(self, width: int = 0, height: int = 0) -> str:
        """Render as a compact bordered box, or "" when hidden."""
        if not self.visible:
            return ""
        title = _TITLE.render("Start Group")
        if self.groups:
            rows = "".join(
                (_SELECTED.render("> " + name) if i == self.cursor else _NORMAL.render("  " + name)) + "\n"
                for i, name in enumerate(self.groups)
            )
        else:
            rows = _NORMAL.render("(no groups configured)") + "\n"
        return box(_BOX.render(title + "\n" + rows))