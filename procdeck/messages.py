"""Messages passed around the UI loop and the small decisions their handlers make."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from procdeck.toast import ToastLevel

QUIT_ARM_WINDOW = 2.0
"""Seconds within which a second Ctrl+C quits."""

QUIT_HINT = "Press Ctrl+C again to quit"

_EMBEDDED_MIN_COLS = 20
_EMBEDDED_MIN_ROWS = 5
_PTY_MIN_COLS = 40
_PTY_MIN_ROWS = 10
_PTY_INSET = 4


@dataclass(frozen=True)
class RuntimeChangedMsg:
    """The runtime store changed; snapshot is a stable, sorted copy of all runtimes."""

    snapshot: Sequence[Any] = field(default_factory=tuple)


@dataclass(frozen=True)
class StartGroupRequest:
    """Request to start every process in the named group."""

    name: str


@dataclass(frozen=True)
class AttachRequestMsg:
    """Request to hand the whole terminal to the project's PTY."""

    id: str


@dataclass(frozen=True)
class EmbeddedAttachRequestMsg:
    """Request to render the project's PTY inside the content pane."""

    id: str


@dataclass(frozen=True)
class GitInfoMsg:
    """Fresh git information for a project."""

    id: str
    info: Any = None


@dataclass(frozen=True)
class PortInfoMsg:
    """Detected TCP listen port for a project; 0 when none was found."""

    id: str
    port: int = 0


@dataclass(frozen=True)
class ProcStatsMsg:
    """CPU percentage (may exceed 100) and resident memory in bytes.

    ok is False when sampling failed, so the UI can clear the segment quietly.
    """

    id: str
    cpu: float = 0.0
    rss: int = 0
    ok: bool = False


@dataclass(frozen=True)
class ConfigEditedMsg:
    """The external editor exited; error is set when it failed, skipping reload."""

    error: Optional[BaseException] = None


@dataclass
class QuitArm:
    """Double-press-to-quit state for Ctrl+C.

    The first press arms; a second press within ``window`` seconds quits.
    A press after the window has passed arms again instead of quitting.
    """

    window: float = QUIT_ARM_WINDOW
    armed_at: Optional[float] = None

    def press(self, now: Optional[float] = None) -> bool:
        """Register a press at monotonic time now; return True to quit."""
        if now is None:
            now = time.monotonic()
        if self.armed_at is not None and now - self.armed_at <= self.window:
            return True
        self.armed_at = now
        return False


def attach_end_toast(reason: str) -> tuple[str, ToastLevel]:
    """Toast text and level for leaving embedded attach mode."""
    text = reason.strip() or "detached"
    level = ToastLevel.ERR if "fail" in text or "error" in text else ToastLevel.INFO
    return text, level


def embedded_dimensions(log_width: int, content_height: int) -> tuple[int, int]:
    """Columns and rows of the embedded terminal, which fills the log pane."""
    return max(_EMBEDDED_MIN_COLS, log_width), max(_EMBEDDED_MIN_ROWS, content_height)


def pty_dimensions(log_width: int, content_height: int) -> tuple[int, int]:
    """Columns and rows given to a selected project's PTY on resize."""
    return (
        max(_PTY_MIN_COLS, log_width - _PTY_INSET),
        max(_PTY_MIN_ROWS, content_height - _PTY_INSET),
    )


def copied_toast(lines: int, chars: int) -> str:
    """Toast text after a yank to the clipboard."""
    unit = "line" if lines == 1 else "lines"
    return f"copied {lines} {unit} ({chars} chars)"


def quick_jump_index(n: int, row_count: int) -> Optional[int]:
    """Zero-based row for the 1-based digit n, or None when out of range."""
    if n < 1 or n - 1 >= row_count:
        return None
    return n - 1