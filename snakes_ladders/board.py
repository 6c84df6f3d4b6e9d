"""Board topology for Snakes & Ladders: track size and the teleport map."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

BOARD_SIZE = 100

# fmt: off
SNAKES: Mapping[int, int] = MappingProxyType({
    # head → tail (go DOWN)
    16:  6,  47: 26,  49: 11,  56: 53,  62: 19,
    64: 60,  87: 24,  93: 73,  95: 75,  98: 78,
})

LADDERS: Mapping[int, int] = MappingProxyType({
    # bottom → top (go UP)
     1: 38,   4: 14,   9: 31,  21: 42,  28: 84,
    36: 44,  51: 67,  71: 91,  80: 100,
})
# fmt: on


class TeleportKind(str, enum.Enum):
    SNAKE = "snake"
    LADDER = "ladder"
    NONE = "none"


@dataclass(frozen=True)
class Board:
    """Immutable track layout.

    Construction rejects maps that contradict themselves. Chains (a
    teleport landing on another teleport's source) are allowed here and
    reported by :meth:`chains`; the engine only ever applies one hop.
    """

    size: int = BOARD_SIZE
    snakes: Mapping[int, int] = field(default_factory=dict)
    ladders: Mapping[int, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.size < 2:
            raise ValueError(f"Board size must be at least 2, got {self.size}")

        # Freeze copies so callers can't mutate the map behind our back
        object.__setattr__(self, "snakes", MappingProxyType(dict(self.snakes)))
        object.__setattr__(self, "ladders", MappingProxyType(dict(self.ladders)))

        overlap = set(self.snakes) & set(self.ladders)
        if overlap:
            raise ValueError(f"Cells are both snake and ladder: {sorted(overlap)}")

        for head, tail in self.snakes.items():
            self._check_cells("snake", head, tail)
            if tail >= head:
                raise ValueError(f"Snake {head} → {tail} must go down")

        for bottom, top in self.ladders.items():
            self._check_cells("ladder", bottom, top)
            if top <= bottom:
                raise ValueError(f"Ladder {bottom} → {top} must go up")

    def _check_cells(self, kind: str, source: int, target: int) -> None:
        # The finish cell is never a teleport source
        if not 1 <= source < self.size:
            raise ValueError(f"{kind.capitalize()} source {source} is off the track")
        if not 1 <= target <= self.size:
            raise ValueError(f"{kind.capitalize()} target {target} is off the track")

    # ── lookups ──────────────────────────────────────────────────────

    def is_snake(self, cell: int) -> bool:
        return cell in self.snakes

    def is_ladder(self, cell: int) -> bool:
        return cell in self.ladders

    def snake_tail(self, cell: int) -> int | None:
        return self.snakes.get(cell)

    def ladder_top(self, cell: int) -> int | None:
        return self.ladders.get(cell)

    def teleport(self, cell: int) -> tuple[TeleportKind, int]:
        """Return the teleport kind at *cell* and where it leads.

        Cells without a snake or ladder map to themselves.
        """
        tail = self.snakes.get(cell)
        if tail is not None:
            return TeleportKind.SNAKE, tail
        top = self.ladders.get(cell)
        if top is not None:
            return TeleportKind.LADDER, top
        return TeleportKind.NONE, cell

    def chains(self) -> list[tuple[int, int]]:
        """List ``(source, target)`` pairs whose target is itself a source."""
        sources = set(self.snakes) | set(self.ladders)
        teleports = {**self.snakes, **self.ladders}
        return sorted(
            (src, dest) for src, dest in teleports.items() if dest in sources
        )

    @property
    def finish(self) -> int:
        return self.size


CANONICAL_BOARD = Board(size=BOARD_SIZE, snakes=SNAKES, ladders=LADDERS)

if CANONICAL_BOARD.chains():
    raise RuntimeError(f"Canonical board has chained teleports: {CANONICAL_BOARD.chains()}")
