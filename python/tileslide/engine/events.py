"""Per-session notification contract.

Each ``GamePlay`` owns one ``EventEmitter``; there is no process-wide bus.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum
from typing import Any

logger = logging.getLogger(__name__)

Listener = Callable[[dict[str, Any]], None]


class GameEvent(StrEnum):
    TILE_MOVED = "tile_moved"
    INVALID_MOVE = "invalid_move"
    PUZZLE_SOLVED = "puzzle_solved"
    GAME_OVER = "game_over"
    PUZZLE_RESET = "puzzle_reset"
    MOVE_UNDONE = "move_undone"
    PUZZLE_GENERATED = "puzzle_generated"
    PUZZLE_STATE_SET = "puzzle_state_set"
    PUZZLE_IMPORTED = "puzzle_imported"


class EventEmitter:
    """Registers listeners per event and calls them in subscription order.

    Listener exceptions propagate to whoever triggered the emit.
    """

    def __init__(self) -> None:
        self._listeners: dict[GameEvent, list[tuple[Listener, bool]]] = {}

    def on(self, event: GameEvent, listener: Listener) -> Listener:
        """Subscribe *listener*; returns it so this works as a decorator."""
        self._listeners.setdefault(GameEvent(event), []).append((listener, False))
        return listener

    def once(self, event: GameEvent, listener: Listener) -> Listener:
        self._listeners.setdefault(GameEvent(event), []).append((listener, True))
        return listener

    def off(self, event: GameEvent, listener: Listener | None = None) -> None:
        """Remove *listener*, or every listener for *event* when omitted."""
        event = GameEvent(event)
        if listener is None:
            self._listeners.pop(event, None)
            return
        remaining = [
            entry for entry in self._listeners.get(event, [])
            if entry[0] != listener
        ]
        if remaining:
            self._listeners[event] = remaining
        else:
            self._listeners.pop(event, None)

    def emit(self, event: GameEvent, **payload: Any) -> bool:
        """Call every listener for *event*; True if there was at least one."""
        entries = list(self._listeners.get(event, []))
        if not entries:
            return False

        logger.debug("Emitting %s to %d listener(s)", event, len(entries))
        for entry in entries:
            listener, once = entry
            if once:
                self._discard(event, entry)
            listener(dict(payload, event=event))
        return True

    def listener_count(self, event: GameEvent) -> int:
        return len(self._listeners.get(GameEvent(event), []))

    def _discard(self, event: GameEvent, entry: tuple[Listener, bool]) -> None:
        # Only this exact entry goes; an ``on`` of the same callable stays.
        registered = self._listeners.get(event, [])
        for i, candidate in enumerate(registered):
            if candidate is entry:
                del registered[i]
                break
        if not registered:
            self._listeners.pop(event, None)
