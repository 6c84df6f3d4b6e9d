"""Game runner — drives a session with dice, the move log, and an observer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Protocol

from snakes_ladders.dice import roll_die
from snakes_ladders.engine import MoveResult, Session, create_session
from snakes_ladders.move_log import MoveLog, describe_move


# ── Structured types ────────────────────────────────────────────────

@dataclass
class GameResult:
    winner: int | None  # player id, or None if the game was cut off
    reason: str  # "win" | "max_turns"
    turns: int = 0


# ── Observer ────────────────────────────────────────────────────────

class GameObserver(Protocol):
    """Receives every move result as the game is played."""

    def on_move(self, result: MoveResult) -> None: ...


@dataclass
class ListObserver:
    """Default observer — collects results into a list."""

    results: list[MoveResult] = field(default_factory=list)

    def on_move(self, result: MoveResult) -> None:
        self.results.append(result)


# ── Runner ───────────────────────────────────────────────────────────

MAX_TURNS = 1000  # safety valve; a clamped game practically always ends sooner


class GameRunner:
    """Play one session until someone wins."""

    def __init__(
        self,
        session: Session | None = None,
        roll: Callable[[], int] = roll_die,
        log: MoveLog | None = None,
        observer: GameObserver | None = None,
        max_turns: int = MAX_TURNS,
    ):
        self.session = session or create_session()
        self.roll = roll
        self.log = log if log is not None else MoveLog()
        self.observer = observer or ListObserver()
        self.max_turns = max_turns
        self.turns = 0

    def step(self) -> MoveResult:
        """Play a single turn for whoever is up."""
        result = self.session.apply_roll(self.roll())
        self.turns += 1
        for line in describe_move(result):
            self.log.record(line)
        self.observer.on_move(result)
        return result

    def play(self) -> GameResult:
        while self.turns < self.max_turns:
            result = self.step()
            if result.won:
                return GameResult(winner=result.winner, reason="win", turns=self.turns)

        return GameResult(winner=None, reason="max_turns", turns=self.turns)
