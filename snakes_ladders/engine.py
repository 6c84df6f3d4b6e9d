"""Turn state machine — applies die rolls to a two-player session."""

from __future__ import annotations

from dataclasses import dataclass, field

from snakes_ladders.board import CANONICAL_BOARD, Board, TeleportKind

PLAYER_COUNT = 2
DIE_FACES = range(1, 7)


# ── Errors ───────────────────────────────────────────────────────────

class SnakesLaddersError(Exception):
    """Base class for engine errors."""


class InvalidTransition(SnakesLaddersError):
    """A roll was applied to a session that has already finished."""


class InvalidRoll(SnakesLaddersError, ValueError):
    """A die value outside 1..6 was passed to the engine."""


# ── Structured types ────────────────────────────────────────────────

@dataclass
class Player:
    id: int
    position: int = 0  # 0 = not yet on the board


@dataclass(frozen=True)
class MoveResult:
    """What happened when a die roll was applied."""

    die_value: int
    player_id: int
    position_before: int
    raw_position: int  # after the clamped move, before any teleport
    teleport: TeleportKind
    final_position: int
    winner: int | None = None

    @property
    def teleported(self) -> bool:
        return self.teleport is not TeleportKind.NONE

    @property
    def won(self) -> bool:
        return self.winner is not None


@dataclass
class Session:
    """Mutable state for one game, from first roll to a win.

    A finished session is never reset; start a new one instead.
    """

    board: Board = CANONICAL_BOARD
    players: list[Player] = field(
        default_factory=lambda: [Player(id=i + 1) for i in range(PLAYER_COUNT)]
    )
    current_player_index: int = 0
    game_over: bool = False

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    @property
    def positions(self) -> list[int]:
        return [p.position for p in self.players]

    @property
    def winner(self) -> int | None:
        if not self.game_over:
            return None
        return self.current_player.id

    def apply_roll(self, die_value: int) -> MoveResult:
        """Move the current player by *die_value* and pass the turn.

        Movement is clamped at the finish cell, so no roll is wasted.
        Exactly one teleport lookup happens on the landing cell: if a
        snake or ladder drops the player onto another snake or ladder,
        that second one is ignored. Landing on the finish (directly or
        via a ladder) ends the game and keeps the turn with the winner.
        """
        if self.game_over:
            raise InvalidTransition(
                f"Game is over, player {self.winner} already won."
            )
        # bool is an int subclass; True is not a die face
        if isinstance(die_value, bool) or not isinstance(die_value, int):
            raise InvalidRoll(f"Die value must be an integer, got {die_value!r}")
        if die_value not in DIE_FACES:
            raise InvalidRoll(f"Die value must be 1–6, got {die_value}")

        player = self.current_player
        before = player.position
        raw = min(before + die_value, self.board.finish)
        kind, final = self.board.teleport(raw)

        player.position = final

        winner = None
        if final >= self.board.finish:
            self.game_over = True
            winner = player.id
        else:
            self.current_player_index = (
                (self.current_player_index + 1) % len(self.players)
            )

        return MoveResult(
            die_value=die_value,
            player_id=player.id,
            position_before=before,
            raw_position=raw,
            teleport=kind,
            final_position=final,
            winner=winner,
        )


def create_session(board: Board = CANONICAL_BOARD) -> Session:
    """Fresh two-player session: everyone off the board, player 1 to move."""
    return Session(board=board)


def apply_roll(session: Session, die_value: int) -> MoveResult:
    return session.apply_roll(die_value)
