"""Single-line text inputs: the `/` log filter bar and the `:` command bar."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

from procdeck.ansi import Style, display_width, truncate
from procdeck.keys import KeyMsg, KeyType
from procdeck.toast import ToastLevel

_CURSOR = Style(reverse=True)
_PLACEHOLDER = Style(foreground="240")

_FILTER_PROMPT = Style(foreground="212", bold=True)
_FILTER_ERR = Style(foreground="196")
_FILTER_BAR = Style(background="236", foreground="252")

_COMMAND_PROMPT = Style(foreground="214", bold=True)
_COMMAND_BAR = Style(background="236", foreground="252")


@dataclass(frozen=True)
class ShowToastMsg:
    """Request to show a toast."""

    text: str
    level: int = ToastLevel.INFO


@dataclass(frozen=True)
class FilterCommitMsg:
    """Filter confirmed; regex is None when the filter was cleared."""

    regex: Optional[re.Pattern]
    text: str


@dataclass(frozen=True)
class FilterCancelMsg:
    """Filter input dismissed without change."""


@dataclass(frozen=True)
class CommandRunMsg:
    """A non-empty command was entered."""

    text: str


@dataclass(frozen=True)
class CommandCancelMsg:
    """Command bar dismissed, or confirmed while empty."""


class TextInput:
    """Editable single line of text with a cursor."""

    def __init__(self, placeholder: str = "", char_limit: int = 0, width: int = 0, prompt: str = ""):
        self.placeholder = placeholder
        self.char_limit = char_limit
        self.width = width
        self.prompt = prompt
        self.value = ""
        self.position = 0
        self.focused = False

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def _clip(self, text: str) -> str:
        return text[: self.char_limit] if self.char_limit > 0 else text

    def set_value(self, value: str) -> None:
        """Replace the text and move the cursor to its end."""
        self.value = self._clip(value)
        self.position = len(self.value)

    def _insert(self, text: str) -> None:
        if self.char_limit > 0:
            text = text[: max(self.char_limit - len(self.value), 0)]
        self.value = self.value[: self.position] + text + self.value[self.position :]
        self.position += len(text)

    def _delete_word_backward(self) -> None:
        head = self.value[: self.position].rstrip()
        cut = len(head)
        while cut > 0 and not head[cut - 1].isspace():
            cut -= 1
        self.value = self.value[:cut] + self.value[self.position :]
        self.position = cut

    def update(self, msg: KeyMsg) -> bool:
        """Apply an editing key; return whether it was handled."""
        if not self.focused:
            return False
        kind = msg.type
        if kind is KeyType.RUNES and msg.runes and not msg.alt:
            self._insert(msg.runes)
        elif kind is KeyType.SPACE:
            self._insert(" ")
        elif kind in (KeyType.BACKSPACE, KeyType.CTRL_H):
            if self.position > 0:
                self.value = self.value[: self.position - 1] + self.value[self.position :]
                self.position -= 1
        elif kind in (KeyType.DELETE, KeyType.CTRL_D):
            self.value = self.value[: self.position] + self.value[self.position + 1 :]
        elif kind in (KeyType.LEFT, KeyType.CTRL_B):
            self.position = max(self.position - 1, 0)
        elif kind in (KeyType.RIGHT, KeyType.CTRL_F):
            self.position = min(self.position + 1, len(self.value))
        elif kind in (KeyType.HOME, KeyType.CTRL_A):
            self.position = 0
        elif kind in (KeyType.END, KeyType.CTRL_E):
            self.position = len(self.value)
        elif kind is KeyType.CTRL_U:
            self.value = self.value[self.position :]
            self.position = 0
        elif kind is KeyType.CTRL_K:
            self.value = self.value[: self.position]
        elif kind is KeyType.CTRL_W:
            self._delete_word_backward()
        else:
            return False
        return True

    def view(self) -> str:
        """Render the prompt and text, with the cursor when focused."""
        if not self.value and self.placeholder:
            head, rest = self.placeholder[0], self.placeholder[1:]
            first = _CURSOR.render(head) if self.focused else _PLACEHOLDER.render(head)
            return self.prompt + first + (_PLACEHOLDER.render(rest) if rest else "")

        start = 0
        if self.width > 0 and self.position >= self.width:
            start = self.position - self.width + 1
        end = start + self.width if self.width > 0 else len(self.value)
        window = self.value[start:end]
        offset = self.position - start
        before = window[:offset]
        at = window[offset] if offset < len(window) else " "
        after = window[offset + 1 :]
        cursor = _CURSOR.render(at) if self.focused else at
        return self.prompt + before + cursor + after


def _bar(style: Style, content: str, width: int) -> str:
    if display_width(content) > width:
        content = truncate(content, width, "…")
    return Style(
        foreground=style.foreground, background=style.background, width=width
    ).render(content)


class FilterInput:
    """The `/` bar: a case-insensitive regex over the log lines."""

    def __init__(self) -> None:
        self.input = TextInput(placeholder="regex (case-insensitive)", char_limit=200, width=60)
        self.visible = False
        self.err_msg = ""

    @property
    def value(self) -> str:
        return self.input.value

    def show(self) -> None:
        """Open and focus the bar."""
        self.visible = True
        self.err_msg = ""
        self.input.focus()

    def hide(self) -> None:
        """Close and blur the bar."""
        self.visible = False
        self.input.blur()

    def set_value(self, value: str) -> None:
        """Set the input text, e.g. to restore the previous filter."""
        self.input.set_value(value)

    def update(
        self, msg: KeyMsg
    ) -> Union[FilterCommitMsg, FilterCancelMsg, ShowToastMsg, None]:
        """Handle a key; Esc cancels, Enter commits or reports a bad regex."""
        key = str(msg)
        if key == "esc":
            self.hide()
            return FilterCancelMsg()
        if key == "enter":
            text = self.input.value
            self.hide()
            if not text:
                return FilterCommitMsg(None, "")
            try:
                regex = re.compile(text, re.IGNORECASE)
            except re.error as exc:
                self.err_msg = f"invalid regex: {exc}"
                self.visible = True
                self.input.focus()
                return ShowToastMsg(self.err_msg, ToastLevel.WARN)
            self.err_msg = ""
            return FilterCommitMsg(regex, text)
        self.input.update(msg)
        return None

    def view(self, width: int = 0) -> str:
        """Render as a single row filling width, or "" when hidden."""
        if not self.visible:
            return ""
        if width <= 0:
            width = 80
        bar = _FILTER_PROMPT.render("/") + self.input.view()
        if self.err_msg:
            bar += "  " + _FILTER_ERR.render(self.err_msg)
        return _bar(_FILTER_BAR, bar, width)


class CommandInput:
    """The `:` bar that gates actions such as quit behind a typed command."""

    def __init__(self) -> None:
        self.input = TextInput(placeholder="q, quit", char_limit=64, width=40)
        self.visible = False

    @property
    def value(self) -> str:
        return self.input.value

    def show(self) -> None:
        """Open the bar with empty text and focus it."""
        self.visible = True
        self.input.set_value("")
        self.input.focus()

    def hide(self) -> None:
        """Close and blur the bar."""
        self.visible = False
        self.input.blur()

    def update(self, msg: KeyMsg) -> Union[CommandRunMsg, CommandCancelMsg, None]:
        """Handle a key; Enter runs non-empty text, Esc or empty Enter cancels."""
        key = str(msg)
        if key == "esc":
            self.hide()
            return CommandCancelMsg()
        if key == "enter":
            text = self.input.value
            self.hide()
            return CommandRunMsg(text) if text else CommandCancelMsg()
        self.input.update(msg)
        return None

    def view(self, width: int = 0) -> str:
        """Render as a single row filling width, or "" when hidden."""
        if not self.visible:
            return ""
        if width <= 0:
            width = 80
        bar = _COMMAND_PROMPT.render(":") + self.input.view()
        return _bar(_COMMAND_BAR, bar, width)