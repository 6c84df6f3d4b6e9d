"""CLI entry point: python -m snakes_ladders {play,simulate,chart,board}."""

from __future__ import annotations

import argparse
import random
import sys
import time

from snakes_ladders.board import CANONICAL_BOARD
from snakes_ladders.chart import make_roll_chart
from snakes_ladders.dice import roll_die
from snakes_ladders.engine import MoveResult
from snakes_ladders.game import MAX_TURNS, GameRunner
from snakes_ladders.render import render_board, render_log, render_status
from snakes_ladders.stats import sample_rolls, simulate_games, summarize


def _make_rng(seed: int | None) -> random.Random:
    return random.Random(seed)


def _prompt(message: str) -> str | None:
    """Read a line from stdin; None on EOF."""
    try:
        return input(message)
    except EOFError:
        return None


# ── play ─────────────────────────────────────────────────────────────

class _PrintObserver:
    """Echo each move to stdout as it happens."""

    def on_move(self, result: MoveResult) -> None:
        line = (
            f"Player {result.player_id} rolled {result.die_value}: "
            f"{result.position_before} → {result.raw_position}"
        )
        if result.teleported:
            line += f" → {result.final_position} ({result.teleport.value})"
        print(line)


def _show(runner: GameRunner) -> None:
    session = runner.session
    print()
    print(render_board(session.board, session.positions))
    print(render_status(session))
    print("Recent moves:")
    print(render_log(runner.log))


def cmd_play(args: argparse.Namespace) -> None:
    """Play games in the terminal; a new session is created for each game."""
    rng = _make_rng(args.seed)

    while True:
        runner = GameRunner(
            roll=lambda: roll_die(rng),
            observer=_PrintObserver(),
            max_turns=args.max_turns,
        )
        _show(runner)

        while not runner.session.game_over and runner.turns < runner.max_turns:
            if args.auto:
                if args.delay:
                    time.sleep(args.delay)
            else:
                player = runner.session.current_player
                answer = _prompt(f"Player {player.id}, press Enter to roll (q to quit): ")
                if answer is None or answer.strip().lower() == "q":
                    print("Bye.")
                    return
            runner.step()
            _show(runner)

        if runner.session.game_over:
            winner = runner.session.winner
            print(f"\n🎉 Player {winner} Wins! 🎉")
            print(f"Congratulations! You've reached position {runner.session.board.finish}!")
        else:
            print(f"\nNo winner after {runner.turns} turns.")

        if args.auto or args.once:
            return
        answer = _prompt("Play again? [y/N] ")
        if answer is None or answer.strip().lower() != "y":
            return


# ── simulate ─────────────────────────────────────────────────────────

def cmd_simulate(args: argparse.Namespace) -> None:
    """Play many games automatically and report who wins how often."""
    if args.games < 1:
        print("--games must be at least 1.", file=sys.stderr)
        sys.exit(1)

    results = simulate_games(args.games, rng=_make_rng(args.seed))
    summary = summarize(results)

    print(f"\nSimulated {summary.games} games")
    print("=" * 40)
    for player_id in sorted(summary.wins):
        wins = summary.wins[player_id]
        print(f"  Player {player_id} wins {wins:6d} ({wins / summary.games:6.1%})")
    if summary.unfinished:
        print(f"  Unfinished      {summary.unfinished:6d}")
    print(
        f"  Turns: mean {summary.mean_turns:.1f}, "
        f"min {summary.min_turns}, max {summary.max_turns}"
    )


# ── chart ────────────────────────────────────────────────────────────

def cmd_chart(args: argparse.Namespace) -> None:
    """Sample the die and save a distribution chart."""
    if args.samples < 1:
        print("--samples must be at least 1.", file=sys.stderr)
        sys.exit(1)

    counts = sample_rolls(args.samples, rng=_make_rng(args.seed))
    out = args.output or "die_distribution.png"
    make_roll_chart(counts, output_path=out)
    print(f"Chart saved to {out}")


# ── board ────────────────────────────────────────────────────────────

def cmd_board(args: argparse.Namespace) -> None:
    """Print the empty board with its snakes and ladders."""
    board = CANONICAL_BOARD
    print(render_board(board, []))
    print("\nSnakes:  " + ", ".join(f"{h}→{t}" for h, t in sorted(board.snakes.items())))
    print("Ladders: " + ", ".join(f"{b}→{t}" for b, t in sorted(board.ladders.items())))


# ── main ─────────────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="snakes_ladders",
        description="Two-player Snakes & Ladders",
    )
    sub = parser.add_subparsers(dest="command")

    p_play = sub.add_parser("play", help="Play in the terminal")
    p_play.add_argument("--auto", action="store_true", help="Roll automatically until someone wins")
    p_play.add_argument("--delay", type=float, default=0.0, help="Seconds between automatic rolls")
    p_play.add_argument("--once", action="store_true", help="Don't offer a rematch")
    p_play.add_argument("--seed", type=int, help="Seed for the die")
    p_play.add_argument("--max-turns", type=int, default=MAX_TURNS, help="Give up after this many turns")

    p_sim = sub.add_parser("simulate", help="Simulate many games")
    p_sim.add_argument("--games", type=int, default=1000, help="Number of games (default 1000)")
    p_sim.add_argument("--seed", type=int, help="Seed for the die")

    p_chart = sub.add_parser("chart", help="Generate die distribution chart")
    p_chart.add_argument("--samples", type=int, default=10000, help="Number of rolls to sample")
    p_chart.add_argument("--seed", type=int, help="Seed for the die")
    p_chart.add_argument("--output", "-o", help="Output PNG path")

    sub.add_parser("board", help="Show the board")

    args = parser.parse_args(argv)
    if args.command == "play":
        cmd_play(args)
    elif args.command == "simulate":
        cmd_simulate(args)
    elif args.command == "chart":
        cmd_chart(args)
    elif args.command == "board":
        cmd_board(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
