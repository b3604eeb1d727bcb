"""Single-keypress reader for the terminal frontend.

Keys map to session actions: arrows and WASD slide, ``u``/``z`` undo,
``r`` restarts, ``n`` starts a new puzzle and ``q``/Escape/Ctrl-C quit.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager

# Reads one character, waiting at most the given seconds (None = forever).
Reader = Callable[[float | None], str | None]

ESCAPE = "\x1b"
ESCAPE_WAIT = 0.1

ACTIONS: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "u": "undo",
    "z": "undo",
    "r": "restart",
    "n": "new",
    "q": "quit",
    "\x03": "quit",
    "\r": "enter",
    "\n": "enter",
}

ARROWS: dict[str, str] = {"A": "up", "B": "down", "C": "right", "D": "left"}


def resolve(ch: str) -> str:
    """Action for a single character; letters are case-insensitive.

    Unmapped printable characters come back unchanged, anything else as "".
    """
    action = ACTIONS.get(ch.lower() if ch.isalpha() else ch)
    if action is not None:
        return action
    return ch if ch.isprintable() else ""


def _decode(first: str, read: Reader) -> str:
    if first != ESCAPE:
        return resolve(first)
    # A bare Escape is not followed by "[" within ESCAPE_WAIT.
    if read(ESCAPE_WAIT) != "[":
        return "quit"
    return ARROWS.get(read(ESCAPE_WAIT) or "", "")


# -- platform readers ---------------------------------------------------------


@contextmanager
def _raw_terminal() -> Iterator[int]:
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        yield fd
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _posix_reader(fd: int) -> Reader:
    import select

    def read(wait: float | None) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        # os.read bypasses Python's buffer so select sees the arrow bytes.
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    return read


def _windows_read(wait: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    end = None if wait is None else time.monotonic() + wait
    while not msvcrt.kbhit():
        if end is not None and time.monotonic() >= end:
            return None
        time.sleep(0.02)
    return msvcrt.getch().decode("utf-8", errors="ignore")


# -- public API ---------------------------------------------------------------


def get_key_timeout(timeout: float | None) -> str | None:
    """Wait up to *timeout* seconds for a key and return its action.

    Returns ``None`` when nothing was pressed so the caller can repaint the
    clock. ``timeout=None`` blocks.
    """
    if os.name == "nt":
        first = _windows_read(timeout)
        return None if first is None else _decode(first, _windows_read)

    with _raw_terminal() as fd:
        read = _posix_reader(fd)
        first = read(timeout)
        return None if first is None else _decode(first, read)


def get_key() -> str:
    """Block for one keypress and return its action."""
    return get_key_timeout(None) or ""
