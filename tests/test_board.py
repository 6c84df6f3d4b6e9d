"""Tests for snakes_ladders.board."""

import pytest

from snakes_ladders.board import (
    BOARD_SIZE,
    CANONICAL_BOARD,
    LADDERS,
    SNAKES,
    Board,
    TeleportKind,
)


# ── constants ────────────────────────────────────────────────────────

def test_canonical_board_has_9_ladders():
    assert len(LADDERS) == 9
    assert all(top > bottom for bottom, top in LADDERS.items())


def test_canonical_board_has_10_snakes():
    assert len(SNAKES) == 10
    assert all(tail < head for head, tail in SNAKES.items())


def test_all_cells_in_range():
    for src, dest in {**SNAKES, **LADDERS}.items():
        assert 1 <= src < BOARD_SIZE
        assert 1 <= dest <= BOARD_SIZE


def test_no_cell_is_both_snake_and_ladder():
    assert not set(SNAKES) & set(LADDERS)


def test_canonical_board_has_no_chains():
    assert CANONICAL_BOARD.chains() == []


def test_finish_is_not_a_teleport_source():
    kind, dest = CANONICAL_BOARD.teleport(100)
    assert kind is TeleportKind.NONE
    assert dest == 100


# ── lookups ──────────────────────────────────────────────────────────

def test_is_ladder():
    assert CANONICAL_BOARD.is_ladder(1) is True      # 1 → 38
    assert CANONICAL_BOARD.is_ladder(28) is True     # 28 → 84
    assert CANONICAL_BOARD.is_ladder(50) is False
    assert CANONICAL_BOARD.is_ladder(16) is False    # snake, not ladder


def test_is_snake():
    assert CANONICAL_BOARD.is_snake(16) is True      # 16 → 6
    assert CANONICAL_BOARD.is_snake(98) is True      # 98 → 78
    assert CANONICAL_BOARD.is_snake(50) is False
    assert CANONICAL_BOARD.is_snake(1) is False      # ladder, not snake


def test_snake_tail_and_ladder_top():
    assert CANONICAL_BOARD.snake_tail(47) == 26
    assert CANONICAL_BOARD.snake_tail(4) is None
    assert CANONICAL_BOARD.ladder_top(80) == 100
    assert CANONICAL_BOARD.ladder_top(47) is None


def test_teleport():
    assert CANONICAL_BOARD.teleport(1) == (TeleportKind.LADDER, 38)
    assert CANONICAL_BOARD.teleport(98) == (TeleportKind.SNAKE, 78)
    assert CANONICAL_BOARD.teleport(50) == (TeleportKind.NONE, 50)


def test_teleport_kind_values():
    assert TeleportKind.SNAKE == "snake"
    assert TeleportKind.LADDER == "ladder"
    assert TeleportKind.NONE == "none"


# ── custom boards ────────────────────────────────────────────────────

def test_custom_board_lookup():
    board = Board(size=20, snakes={15: 3}, ladders={2: 12})
    assert board.finish == 20
    assert board.teleport(15) == (TeleportKind.SNAKE, 3)
    assert board.teleport(2) == (TeleportKind.LADDER, 12)


def test_chains_are_reported():
    board = Board(size=20, snakes={12: 5}, ladders={2: 12})
    assert board.chains() == [(2, 12)]


def test_board_is_immutable():
    source = {2: 12}
    board = Board(size=20, ladders=source)
    source[3] = 15
    assert not board.is_ladder(3)
    with pytest.raises(TypeError):
        board.ladders[4] = 10  # type: ignore[index]


def test_rejects_cell_in_both_maps():
    with pytest.raises(ValueError, match="both snake and ladder"):
        Board(size=20, snakes={10: 2}, ladders={10: 15})


def test_rejects_upward_snake():
    with pytest.raises(ValueError, match="must go down"):
        Board(size=20, snakes={5: 10})


def test_rejects_downward_ladder():
    with pytest.raises(ValueError, match="must go up"):
        Board(size=20, ladders={10: 5})


def test_rejects_finish_as_source():
    with pytest.raises(ValueError, match="off the track"):
        Board(size=20, snakes={20: 4})


def test_rejects_target_off_track():
    with pytest.raises(ValueError, match="off the track"):
        Board(size=20, ladders={4: 25})
