"""Aggregate statistics over many simulated games and die rolls."""

from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass, field

from snakes_ladders.dice import roll_die
from snakes_ladders.game import GameResult, GameRunner


@dataclass
class SimulationSummary:
    """Outcome counts for a batch of games."""

    games: int = 0
    wins: dict[int, int] = field(default_factory=dict)  # player id → wins
    unfinished: int = 0
    mean_turns: float = 0.0
    min_turns: int = 0
    max_turns: int = 0


def sample_rolls(n: int, rng: random.Random | None = None) -> Counter[int]:
    """Roll the die *n* times and count each face (all six always present)."""
    counts: Counter[int] = Counter({face: 0 for face in range(1, 7)})
    for _ in range(n):
        counts[roll_die(rng)] += 1
    return counts


def simulate_games(n: int, rng: random.Random | None = None) -> list[GameResult]:
    """Play *n* independent sessions with the biased die."""
    results = []
    for _ in range(n):
        runner = GameRunner(roll=lambda: roll_die(rng))
        results.append(runner.play())
    return results


def summarize(results: list[GameResult]) -> SimulationSummary:
    summary = SimulationSummary(games=len(results))
    if not results:
        return summary

    for r in results:
        if r.winner is None:
            summary.unfinished += 1
        else:
            summary.wins[r.winner] = summary.wins.get(r.winner, 0) + 1

    turns = [r.turns for r in results]
    summary.mean_turns = sum(turns) / len(turns)
    summary.min_turns = min(turns)
    summary.max_turns = max(turns)
    return summary
