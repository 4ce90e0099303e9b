"""Bounded stack of transient notifications."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass
from typing import Iterator, Optional

from procdeck.ansi import Style, display_width, truncate

MAX_TOASTS = 5
DEFAULT_TOAST_TTL = 3.0


class ToastLevel(enum.IntEnum):
    """Severity of a toast."""

    INFO = 0
    WARN = 1
    ERR = 2


_STYLES = {
    ToastLevel.INFO: Style(background="22", foreground="255", padding=(0, 1)),
    ToastLevel.WARN: Style(background="130", foreground="255", padding=(0, 1)),
    ToastLevel.ERR: Style(background="160", foreground="255", padding=(0, 1)),
}


@dataclass(frozen=True)
class Toast:
    """A single notification; expires_at is on the monotonic clock."""

    text: str
    level: int
    expires_at: float


class ToastStack:
    """Most recent notifications, oldest dropped beyond the limit."""

    def __init__(self) -> None:
        self._items: list[Toast] = []

    def add(self, text: str, level: int = ToastLevel.INFO) -> None:
        """Add a toast with the default lifetime."""
        self.add_with_ttl(text, level, DEFAULT_TOAST_TTL)

    def add_with_ttl(self, text: str, level: int, ttl: float) -> None:
        """Add a toast that lives for ttl seconds."""
        self._items.append(Toast(text, level, time.monotonic() + ttl))
        self._items = self._items[-MAX_TOASTS:]

    def prune(self, now: Optional[float] = None) -> None:
        """Drop toasts that have expired by now (monotonic seconds)."""
        if now is None:
            now = time.monotonic()
        self._items = [t for t in self._items if t.expires_at > now]

    def last(self) -> Optional[Toast]:
        """The most recently added toast, or None when empty."""
        return self._items[-1] if self._items else None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Toast]:
        return iter(list(self._items))

    def view(self, width: int = 0, height: int = 0) -> str:
        """Render the toasts one per line, each clipped to width columns."""
        if not self._items:
            return ""
        max_width = width if width > 0 else 80
        lines = []
        for toast in self._items:
            style = _STYLES.get(toast.level, _STYLES[ToastLevel.INFO])
            rendered = style.render(toast.text)
            if display_width(rendered) > max_width:
                rendered = truncate(rendered, max_width, "…")
            lines.append(rendered)
        return "\n".join(lines)