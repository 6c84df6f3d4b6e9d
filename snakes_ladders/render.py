"""Plain-text rendering of the board, player status, and move log."""

from __future__ import annotations

from snakes_ladders.board import Board
from snakes_ladders.engine import Session
from snakes_ladders.move_log import MoveLog

ROW_LENGTH = 10

LEGEND = "S snake head  s snake tail  L ladder bottom  l ladder top  * finish"


def _cell_marker(board: Board, cell: int) -> str:
    if cell == board.finish:
        return "*"
    if board.is_snake(cell):
        return "S"
    if board.is_ladder(cell):
        return "L"
    if cell in board.snakes.values():
        return "s"
    if cell in board.ladders.values():
        return "l"
    return " "


def render_board(board: Board, positions: list[int]) -> str:
    """Draw the track as rows of ``ROW_LENGTH``, highest cell top-left.

    Players still at 0 have not entered the board and are not drawn.
    """
    lines = []
    for row_start in range(board.size, 0, -ROW_LENGTH):
        cells = []
        for cell in range(row_start, max(row_start - ROW_LENGTH, 0), -1):
            tokens = "".join(
                str(idx + 1) for idx, pos in enumerate(positions) if pos == cell
            )
            cells.append(f"{cell:>3}{_cell_marker(board, cell)}{tokens:<2}")
        lines.append(" ".join(cells).rstrip())
    lines.append(LEGEND)
    return "\n".join(lines)


def render_status(session: Session) -> str:
    parts = []
    for idx, player in enumerate(session.players):
        where = "start" if player.position == 0 else str(player.position)
        marker = ">" if idx == session.current_player_index and not session.game_over else " "
        parts.append(f"{marker} Player {player.id}: {where}")
    return "\n".join(parts)


def render_log(log: MoveLog) -> str:
    if not len(log):
        return "  (no moves yet)"
    return "\n".join(f"  {line}" for line in log.entries())
