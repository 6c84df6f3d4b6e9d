"""Bounded recent-moves log and the text shown for each move."""

from __future__ import annotations

from collections import deque

from snakes_ladders.board import TeleportKind
from snakes_ladders.engine import MoveResult

DEFAULT_CAPACITY = 5


class MoveLog:
    """Newest-first list of move descriptions; old entries fall off the end."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"Capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._entries: deque[str] = deque(maxlen=capacity)

    def record(self, text: str) -> None:
        # appendleft on a full deque drops the rightmost (oldest) entry
        self._entries.appendleft(text)

    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


def describe_move(result: MoveResult) -> list[str]:
    """Log lines for *result*, oldest first (record them in this order)."""
    lines = [f"Player {result.player_id} rolled {result.die_value}"]

    if result.teleport is TeleportKind.SNAKE:
        lines.append(
            f"🐍 Snake bite! Slid down from {result.raw_position} to {result.final_position}"
        )
    elif result.teleport is TeleportKind.LADDER:
        lines.append(
            f"🪜 Climbed ladder from {result.raw_position} to {result.final_position}!"
        )

    if result.won:
        lines.append(f"🎉 Player {result.winner} wins!")

    return lines


def record(log: MoveLog, text: str) -> None:
    log.record(text)


def entries(log: MoveLog) -> tuple[str, ...]:
    return log.entries()
