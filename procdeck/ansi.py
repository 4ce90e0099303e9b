"""Minimal ANSI styling, width measurement and truncation for terminal output."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional

from wcwidth import wcwidth

_ANSI_RE = re.compile(
    r"\x1b\[[0-?]*[ -/]*[@-~]"
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"
    r"|\x1b[@-Z\\-_]"
)

_RESET = "\x1b[0m"


def strip_ansi(text: str) -> str:
    """Remove all ANSI escape sequences from text."""
    return _ANSI_RE.sub("", text)


def _char_width(char: str) -> int:
    return max(wcwidth(char), 0)


def display_width(text: str) -> int:
    """Number of terminal columns the visible part of text occupies."""
    return sum(_char_width(c) for c in strip_ansi(text))


def _tokens(text: str) -> Iterator[tuple[bool, str]]:
    """Yield (is_escape, piece): escapes whole, visible text one char at a time."""
    pos = 0
    for match in _ANSI_RE.finditer(text):
        for char in text[pos : match.start()]:
            yield False, char
        yield True, match.group()
        pos = match.end()
    for char in text[pos:]:
        yield False, char


def truncate(text: str, width: int, tail: str = "") -> str:
    """Cut text to at most width columns, ending with tail when cut.

    Escape sequences are kept so styling stays balanced.
    """
    if display_width(text) <= width:
        return text
    budget = max(width - display_width(tail), 0)
    out: list[str] = []
    used = 0
    cut = False
    for is_escape, piece in _tokens(text):
        if is_escape:
            out.append(piece)
            continue
        if cut:
            continue
        w = _char_width(piece)
        if used + w > budget:
            cut = True
            out.append(tail)
            continue
        out.append(piece)
        used += w
    return "".join(out)


@dataclass(frozen=True)
class Style:
    """Text style: 256-colour foreground/background, attributes and layout."""

    foreground: Optional[str] = None
    background: Optional[str] = None
    bold: bool = False
    reverse: bool = False
    padding: tuple[int, int] = (0, 0)
    width: int = 0
    margin_bottom: int = 0

    def _sgr(self) -> str:
        codes = []
        if self.bold:
            codes.append("1")
        if self.reverse:
            codes.append("7")
        if self.foreground is not None:
            codes.append(f"38;5;{self.foreground}")
        if self.background is not None:
            codes.append(f"48;5;{self.background}")
        return f"\x1b[{';'.join(codes)}m" if codes else ""

    def render(self, text: str) -> str:
        """Apply the style to text, padding every line to a common width."""
        lines = text.split("\n")
        vertical, horizontal = self.padding
        inner = max(display_width(line) for line in lines)
        block = max(inner + 2 * horizontal, self.width)
        side = " " * horizontal

        body = [" " * block] * vertical
        for line in lines:
            padded = side + line + " " * (inner - display_width(line)) + side
            body.append(padded + " " * (block - display_width(padded)))
        body.extend([" " * block] * vertical)

        sgr = self._sgr()
        if sgr:
            body = [f"{sgr}{line}{_RESET}" for line in body]
        body.extend([" " * block] * self.margin_bottom)
        return "\n".join(body)


_BORDER = Style(foreground="62")


def box(text: str) -> str:
    """Surround text with a rounded border."""
    lines = text.split("\n")
    inner = max(display_width(line) for line in lines)
    edge = "─" * inner
    rows = [_BORDER.render(f"╭{edge}╮")]
    for line in lines:
        fill = " " * (inner - display_width(line))
        rows.append(_BORDER.render("│") + line + fill + _BORDER.render("│"))
    rows.append(_BORDER.render(f"╰{edge}╯"))
    return "\n".join(rows)