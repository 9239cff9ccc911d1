"""
Tests for the board and move primitives.

Covers:
1. Board construction and layout validation
2. Move geometry, descriptors and ordering key
3. Move validation, apply and undo
4. Fingerprints and peg counting

Usage:
    pytest tests/test_board.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from resta_um.solver import Board, Cell, Move


EMPTY_CROSS = [
    "- - 0 0 0 - -",
    "- - 0 0 0 - -",
    "0 0 0 0 0 0 0",
    "0 0 0 0 0 0 0",
    "0 0 0 0 0 0 0",
    "- - 0 0 0 - -",
    "- - 0 0 0 - -",
]


def board_with_pegs(*pegs):
    """Cross board with pegs only at the given (row, col) cells."""
    rows = Board.from_pattern(EMPTY_CROSS).to_list()
    for r, c in pegs:
        rows[r][c] = Cell.OCCUPIED
    return Board.from_rows(rows)


def reachable_boards(board, depth):
    """Every distinct board reachable within `depth` jumps (including the start)."""
    seen = {board.fingerprint(): board.copy()}
    frontier = [board.copy()]
    for _ in range(depth):
        next_frontier = []
        for current in frontier:
            for move in current.valid_moves():
                child = current.copy()
                child.apply_move(move)
                if child.fingerprint() not in seen:
                    seen[child.fingerprint()] = child
                    next_frontier.append(child)
        frontier = next_frontier
    return list(seen.values())


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def test_initial_board_layout():
    board = Board.initial()

    assert board.remaining_piece_count() == 32
    assert board.get_cell(3, 3) == Cell.EMPTY

    playable = 0
    for r in range(7):
        for c in range(7):
            corner = (r < 2 or r > 4) and (c < 2 or c > 4)
            if corner:
                assert board.get_cell(r, c) == Cell.INVALID
            else:
                playable += 1
                assert board.get_cell(r, c) != Cell.INVALID
    assert playable == 33


def test_get_cell_out_of_bounds_returns_none():
    board = Board.initial()
    assert board.get_cell(-1, 3) is None
    assert board.get_cell(3, 7) is None
    assert board.get_cell(7, 7) is None


def test_from_pattern_matches_from_rows():
    board = board_with_pegs((3, 1), (3, 2))
    assert board.remaining_piece_count() == 2
    assert board.get_cell(3, 1) == Cell.OCCUPIED
    assert board.get_cell(3, 3) == Cell.EMPTY
    assert Board.from_rows(board.to_list()) == board


def test_from_rows_rejects_wrong_shape():
    rows = Board.initial().to_list()
    with pytest.raises(ValueError):
        Board.from_rows(rows[:6])
    rows[2] = rows[2][:6]
    with pytest.raises(ValueError):
        Board.from_rows(rows)


def test_from_rows_rejects_unknown_value():
    rows = Board.initial().to_list()
    rows[3][3] = 2
    with pytest.raises(ValueError, match="Invalid cell value"):
        Board.from_rows(rows)


def test_from_rows_rejects_broken_cross_layout():
    rows = Board.initial().to_list()
    rows[0][0] = Cell.OCCUPIED
    with pytest.raises(ValueError, match="cross layout"):
        Board.from_rows(rows)

    rows = Board.initial().to_list()
    rows[3][3] = Cell.INVALID
    with pytest.raises(ValueError, match="cross layout"):
        Board.from_rows(rows)


def test_from_pattern_rejects_unknown_character():
    lines = list(EMPTY_CROSS)
    lines[3] = "0 0 0 x 0 0 0"
    with pytest.raises(ValueError, match="Unknown board character"):
        Board.from_pattern(lines)


def test_copy_is_independent():
    board = Board.initial()
    clone = board.copy()
    clone.apply_move(Move(1, 3, 2, 0))

    assert board.remaining_piece_count() == 32
    assert clone.remaining_piece_count() == 31
    assert board != clone


def test_boards_are_unhashable():
    with pytest.raises(TypeError):
        hash(Board.initial())


# ---------------------------------------------------------------------------
# Move
# ---------------------------------------------------------------------------

def test_move_geometry():
    move = Move(1, 3, 2, 0)
    assert move.origin == (1, 3)
    assert move.middle == (2, 3)
    assert move.destination == (3, 3)


def test_move_descriptor_is_one_indexed():
    assert Move(1, 3, 2, 0).describe() == "(2,4) -> (4,4)"
    assert str(Move(3, 2, 0, -2)) == "(4,3) -> (4,1)"


def test_move_rejects_unknown_delta():
    with pytest.raises(ValueError):
        Move(3, 3, 1, 0)
    with pytest.raises(ValueError):
        Move(3, 3, 2, 2)


def test_centrality_key():
    # Lands on the centre from distance 2
    assert Move(1, 3, 2, 0).centrality_key == 2
    # Moves outward from distance 1 to distance 3
    assert Move(3, 2, 0, -2).centrality_key == -2
    # Sideways along row 2: distance stays 2
    assert Move(2, 4, 0, -2).centrality_key == 0


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def test_initial_valid_moves_in_enumeration_order():
    assert Board.initial().valid_moves() == [
        Move(1, 3, 2, 0),
        Move(3, 1, 0, 2),
        Move(3, 5, 0, -2),
        Move(5, 3, -2, 0),
    ]


def test_is_valid_move_rejects_out_of_bounds_destination():
    board = Board.initial()
    assert not board.is_valid_move(Move(0, 3, -2, 0))
    assert not board.is_valid_move(Move(3, 6, 0, 2))


def test_is_valid_move_rejects_occupied_destination():
    board = Board.initial()
    assert not board.is_valid_move(Move(3, 0, 0, 2))


def test_is_valid_move_rejects_empty_middle():
    board = board_with_pegs((3, 1))
    assert not board.is_valid_move(Move(3, 1, 0, 2))


def test_is_valid_move_rejects_invalid_middle():
    board = Board.initial()
    # Middle (1,1) and destination (0,1) both lie outside the cross
    assert not board.is_valid_move(Move(2, 1, -2, 0))


def test_is_valid_move_rejects_invalid_origin():
    board = board_with_pegs((1, 2))
    # Middle holds a peg and destination is empty, only the origin is outside
    assert board.get_cell(1, 3) == Cell.EMPTY
    assert not board.is_valid_move(Move(1, 1, 0, 2))


def test_is_valid_move_rejects_empty_origin():
    board = board_with_pegs((3, 2))
    assert not board.is_valid_move(Move(3, 1, 0, 2))


def test_is_valid_move_has_no_side_effects():
    board = Board.initial()
    before = board.fingerprint()
    for move in board.valid_moves():
        board.is_valid_move(move)
    assert board.fingerprint() == before


# ---------------------------------------------------------------------------
# Apply / undo
# ---------------------------------------------------------------------------

def test_apply_move_updates_three_cells():
    board = Board.initial()
    assert board.apply_move(Move(1, 3, 2, 0))

    assert board.get_cell(1, 3) == Cell.EMPTY
    assert board.get_cell(2, 3) == Cell.EMPTY
    assert board.get_cell(3, 3) == Cell.OCCUPIED
    assert board.remaining_piece_count() == 31


def test_apply_invalid_move_is_noop():
    board = Board.initial()
    before = board.to_list()

    assert not board.apply_move(Move(3, 0, 0, 2))
    assert board.to_list() == before
    assert board.remaining_piece_count() == 32


def test_undo_restores_previous_board():
    board = Board.initial()
    move = Move(3, 5, 0, -2)
    board.apply_move(move)
    board.undo_move(move)
    assert board == Board.initial()


def test_apply_undo_round_trip_on_reachable_boards():
    for board in reachable_boards(Board.initial(), 3):
        before_key = board.fingerprint()
        before_cells = board.to_list()
        before_pegs = board.remaining_piece_count()
        for move in board.valid_moves():
            assert board.apply_move(move)
            assert board.fingerprint() != before_key
            board.undo_move(move)
            assert board.fingerprint() == before_key
            assert board.to_list() == before_cells
            assert board.remaining_piece_count() == before_pegs


# ---------------------------------------------------------------------------
# Fingerprints and counting
# ---------------------------------------------------------------------------

def test_equal_boards_share_fingerprint():
    a = Board.initial()
    b = Board.initial()
    assert a.fingerprint() == b.fingerprint()

    # Same contents reached by different move orders
    a.apply_move(Move(1, 3, 2, 0))
    b.apply_move(Move(1, 3, 2, 0))
    assert a.fingerprint() == b.fingerprint()


def test_incremental_fingerprint_matches_fresh_board():
    for board in reachable_boards(Board.initial(), 3):
        # copy() recomputes fingerprint and count from the cells
        fresh = board.copy()
        assert fresh.fingerprint() == board.fingerprint()
        assert fresh.remaining_piece_count() == board.remaining_piece_count()


def test_different_boards_never_share_fingerprint():
    boards = reachable_boards(Board.initial(), 4)
    keys = {board.fingerprint() for board in boards}
    contents = {tuple(map(tuple, board.to_list())) for board in boards}
    assert len(keys) == len(contents) == len(boards)

    single = [board_with_pegs((r, c)) for r in range(2, 5) for c in range(7)]
    assert len({board.fingerprint() for board in single}) == len(single)


def test_remaining_piece_count_matches_cells():
    for board in reachable_boards(Board.initial(), 2):
        counted = sum(row.count(Cell.OCCUPIED) for row in board.to_list())
        assert board.remaining_piece_count() == counted


def test_single_peg_board_counts_one():
    assert board_with_pegs((0, 2)).remaining_piece_count() == 1
