"""Esc Esc detach handshake for embedded attach, and paste normalisation."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from procdeck.keys import KeyMsg, KeyType

DETACH_TIMEOUT = 0.4
"""Seconds within which the second Esc must arrive to detach."""

RAW_ESC = b"\x1b"


def normalise_paste(text: str) -> str:
    """Turn CRLF and LF into CR, which terminal apps treat as Enter."""
    return text.replace("\r\n", "\r").replace("\n", "\r")


@dataclass
class KeyDetach:
    """Watches key events for the Esc Esc detach handshake.

    The first Esc is swallowed and arms the detector. A second Esc within
    ``timeout`` seconds completes the handshake. Any other key, or the window
    running out, hands the swallowed Esc back so the child still sees it.
    """

    timeout: float = DETACH_TIMEOUT
    clock: Callable[[], float] = time.monotonic
    _armed_at: Optional[float] = field(default=None, init=False, repr=False)
    _flush: bytes = field(default=b"", init=False, repr=False)

    @property
    def armed(self) -> bool:
        """Whether the detector is waiting for a follow-up key."""
        return self._armed_at is not None

    def _arm(self, now: float) -> None:
        self._armed_at = now
        self._flush = RAW_ESC

    def _disarm(self) -> bytes:
        pending = self._flush
        self._armed_at = None
        self._flush = b""
        return pending

    def feed(self, msg: KeyMsg) -> tuple[bool, bool, bytes]:
        """Process one key event; return (consumed, detached, flush).

        ``flush`` holds bytes to write to the PTY before handling the key.
        """
        is_esc = msg.type is KeyType.ESC
        now = self.clock()

        if self._armed_at is not None and now - self._armed_at > self.timeout:
            pending = self._disarm()
            if is_esc:
                self._arm(now)
                return True, False, pending
            return False, False, pending

        if self._armed_at is not None:
            if is_esc:
                self._disarm()
                return True, True, b""
            return False, False, self._disarm()

        if is_esc:
            self._arm(now)
            return True, False, b""
        return False, False, b""

    def flush_if_expired(self) -> bytes:
        """Return the swallowed bytes once the window has elapsed, else b""."""
        if self._armed_at is None:
            return b""
        if self.clock() - self._armed_at <= self.timeout:
            return b""
        return self._disarm()