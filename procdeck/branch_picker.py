"""Overlay that lists git branches behind a live filter and checks one out."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from procdeck.ansi import Style, box
from procdeck.keys import Binding, KeyMsg, KeyType

_BOX = Style(padding=(1, 2), background="234", foreground="252")
_TITLE = Style(bold=True, foreground="212", margin_bottom=1)
_FILTER = Style(foreground="212", margin_bottom=1)
_SELECTED = Style(bold=True, foreground="255", background="62")
_NORMAL = Style(foreground="252")

# Arrow keys only, so printable letters (j, k, q, ...) reach the filter.
_UP = Binding(("up",))
_DOWN = Binding(("down",))
_ENTER = Binding(("enter",))
_ESC = Binding(("esc",))

_DEFAULT_BRANCHES = ("main", "dev")


@dataclass(frozen=True)
class CheckoutBranchMsg:
    """Request to check out the named branch."""

    branch: str


class BranchPicker:
    """Branch list with a case-insensitive substring filter and a cursor.

    Printable keys narrow the list, Backspace pops the last character and
    Esc first clears a non-empty filter, then closes the overlay.
    """

    def __init__(self, branches: Optional[Sequence[str]] = None):
        self.branches: list[str] = list(branches) if branches else list(_DEFAULT_BRANCHES)
        self.filter = ""
        self.filtered: list[int] = []
        self.cursor = 0
        self.visible = False
        self._rebuild_filter()

    def show(self) -> None:
        """Make the overlay visible with an empty filter."""
        self.visible = True
        self._reset_filter()

    def hide(self) -> None:
        """Hide the overlay."""
        self.visible = False

    def set_branches(self, branches: Sequence[str]) -> None:
        """Replace the branch list and reset the filter and cursor."""
        self.branches = list(branches)
        self._reset_filter()

    def _reset_filter(self) -> None:
        self.filter = ""
        self.cursor = 0
        self._rebuild_filter()

    def _set_filter(self, text: str) -> None:
        self.filter = text
        self.cursor = 0
        self._rebuild_filter()

    def _rebuild_filter(self) -> None:
        needle = self.filter.lower()
        self.filtered = [i for i, name in enumerate(self.branches) if needle in name.lower()]
        if self.cursor >= len(self.filtered):
            self.cursor = 0

    def update(self, msg: KeyMsg) -> Optional[CheckoutBranchMsg]:
        """Handle a key; return the checkout request when a branch is confirmed."""
        if _UP.matches(msg):
            if self.cursor > 0:
                self.cursor -= 1
            return None
        if _DOWN.matches(msg):
            if self.cursor < len(self.filtered) - 1:
                self.cursor += 1
            return None
        if _ENTER.matches(msg):
            if not self.filtered:
                return None
            self.visible = False
            return CheckoutBranchMsg(self.branches[self.filtered[self.cursor]])
        if _ESC.matches(msg):
            if self.filter:
                self._reset_filter()
            else:
                self.visible = False
            return None

        if msg.type is KeyType.BACKSPACE:
            if self.filter:
                self._set_filter(self.filter[:-1])
            return None
        if msg.type is KeyType.RUNES and msg.runes:
            self._set_filter(self.filter + msg.runes)
        elif msg.type is KeyType.SPACE:
            self._set_filter(self.filter + " ")
        return None

    def view(self, width: int = 0, height: int = 0) -> str:
        """Render as a compact bordered box, or "" when hidden."""
        if not self.visible:
            return ""
        title = _TITLE.render("Checkout Branch")
        filter_row = _FILTER.render("/ " + self.filter)
        if self.filtered:
            rows = "".join(
                (
                    _SELECTED.render("> " + self.branches[idx])
                    if i == self.cursor
                    else _NORMAL.render("  " + self.branches[idx])
                )
                + "\n"
                for i, idx in enumerate(self.filtered)
            )
        elif not self.branches:
            rows = _NORMAL.render("(no branches)") + "\n"
        else:
            rows = _NORMAL.render("(no matches)") + "\n"
        return box(_BOX.render(title + "\n" + filter_row + "\n" + rows))