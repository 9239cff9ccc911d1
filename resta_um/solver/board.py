"""
Board Module - Mutable 7x7 cross-shaped board for the Resta Um puzzle.
"""

from enum import IntEnum
from typing import Iterable, List, Optional, Sequence, Tuple

from .move import DIRECTIONS, Move

SIZE = 7


class Cell(IntEnum):
    """
    Cell states.

    States:
        INVALID: Outside the cross, never changes
        EMPTY: Playable hole without a peg
        OCCUPIED: Playable hole holding a peg
    """
    INVALID = -1
    EMPTY = 0
    OCCUPIED = 1


_PATTERN_CHARS = {"-": Cell.INVALID, "0": Cell.EMPTY, "1": Cell.OCCUPIED}

# Weight of each cell in the base-3 fingerprint
_POW3 = [3 ** i for i in range(SIZE * SIZE)]


def is_playable(row: int, col: int) -> bool:
    """True if (row, col) lies inside the cross (corner 2x2 blocks removed)."""
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        return False
    return not ((row < 2 or row > 4) and (col < 2 or col > 4))


def _index(row: int, col: int) -> int:
    return row * SIZE + col


def _build_jump_table() -> List[Tuple[int, int, int, Move]]:
    """
    Every jump whose three cells lie inside the cross.

    Entries are ordered by origin (row-major) then DIRECTIONS, which is
    the enumeration order the search relies on for tie-breaking.
    """
    table = []
    for row in range(SIZE):
        for col in range(SIZE):
            if not is_playable(row, col):
                continue
            for d_row, d_col in DIRECTIONS:
                mid_row, mid_col = row + d_row // 2, col + d_col // 2
                dest_row, dest_col = row + d_row, col + d_col
                if is_playable(mid_row, mid_col) and is_playable(dest_row, dest_col):
                    table.append((
                        _index(row, col),
                        _index(mid_row, mid_col),
                        _index(dest_row, dest_col),
                        Move(row, col, d_row, d_col),
                    ))
    return table


_JUMPS = _build_jump_table()


class Board:
    """
    Mutable board state.

    Cells are stored row-major in a flat list of ints (-1/0/1). The peg
    count and the fingerprint are kept up to date on every cell write,
    so both are O(1) to read during the search.

    Boards compare equal when their cells match. They are mutable and
    therefore unhashable; use fingerprint() as a set or dict key.
    """

    def __init__(self, cells: Sequence[int]):
        """
        Create a board from a flat row-major sequence of 49 cell values.

        Prefer the initial(), from_rows() and from_pattern() constructors,
        which validate their input.
        """
        self._cells: List[int] = [int(v) for v in cells]
        self._pegs = sum(1 for v in self._cells if v == Cell.OCCUPIED)
        self._key = sum((v + 1) * _POW3[i] for i, v in enumerate(self._cells))

    @classmethod
    def initial(cls) -> 'Board':
        """
        Standard starting position: every hole filled except the centre.

        Returns:
            Board with 32 pegs
        """
        cells = []
        for row in range(SIZE):
            for col in range(SIZE):
                cells.append(Cell.OCCUPIED if is_playable(row, col) else Cell.INVALID)
        cells[_index(3, 3)] = Cell.EMPTY
        return cls(cells)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> 'Board':
        """
        Create a board from a 7x7 nested sequence of -1/0/1 values.

        Args:
            rows: Seven rows of seven cell values

        Returns:
            Board instance

        Raises:
            ValueError: If the shape, a value or the cross layout is wrong
        """
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError(f"Board must be {SIZE}x{SIZE}")

        cells = []
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                try:
                    cell = Cell(value)
                except ValueError:
                    raise ValueError(f"Invalid cell value {value!r} at ({r},{c})") from None
                if (cell == Cell.INVALID) == is_playable(r, c):
                    raise ValueError(f"Cell ({r},{c}) does not match the cross layout")
                cells.append(cell)
        return cls(cells)

    @classmethod
    def from_pattern(cls, lines: Iterable[str]) -> 'Board':
        """
        Create a board from seven text lines.

        Characters: "-" outside the cross, "0" empty hole, "1" peg.
        Whitespace is ignored, so rows may be spaced for readability.

        Example:
            Board.from_pattern([
                "- - 0 0 0 - -",
                "- - 0 0 0 - -",
                "0 0 0 0 0 0 0",
                "0 1 1 0 0 0 0",
                "0 0 0 0 0 0 0",
                "- - 0 0 0 - -",
                "- - 0 0 0 - -",
            ])

        Raises:
            ValueError: On unknown characters or a malformed layout
        """
        rows = []
        for line in lines:
            chars = [ch for ch in line if not ch.isspace()]
            try:
                rows.append([_PATTERN_CHARS[ch] for ch in chars])
            except KeyError as e:
                raise ValueError(f"Unknown board character: {e.args[0]!r}") from None
        return cls.from_rows(rows)

    def copy(self) -> 'Board':
        """Independent copy of this board."""
        return Board(self._cells)

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """
        Get the state of a cell.

        Args:
            row: Row index
            col: Column index

        Returns:
            Cell state, or None if outside the 7x7 grid
        """
        if 0 <= row < SIZE and 0 <= col < SIZE:
            return Cell(self._cells[_index(row, col)])
        return None

    def is_valid_move(self, move: Move) -> bool:
        """
        Check whether a jump is legal on the current board.

        The origin must hold a peg, the jumped-over cell must hold a peg
        and the destination must be an empty hole inside the grid.
        """
        if self.get_cell(move.row, move.col) != Cell.OCCUPIED:
            return False
        if self.get_cell(*move.destination) != Cell.EMPTY:
            return False
        return self.get_cell(*move.middle) == Cell.OCCUPIED

    def apply_move(self, move: Move) -> bool:
        """
        Perform a jump in place.

        Returns:
            True if the move was applied, False (board untouched) if invalid
        """
        if not self.is_valid_move(move):
            return False
        mid_row, mid_col = move.middle
        dest_row, dest_col = move.destination
        self._write(_index(move.row, move.col), Cell.EMPTY)
        self._write(_index(mid_row, mid_col), Cell.EMPTY)
        self._write(_index(dest_row, dest_col), Cell.OCCUPIED)
        return True

    def undo_move(self, move: Move) -> None:
        """
        Reverse a jump previously applied with apply_move().

        The caller guarantees the move was the last one applied.
        """
        mid_row, mid_col = move.middle
        dest_row, dest_col = move.destination
        self._write(_index(move.row, move.col), Cell.OCCUPIED)
        self._write(_index(mid_row, mid_col), Cell.OCCUPIED)
        self._write(_index(dest_row, dest_col), Cell.EMPTY)

    def valid_moves(self) -> List[Move]:
        """
        All legal jumps, origin row-major then in DIRECTIONS order.

        Returns:
            List of valid Move objects
        """
        cells = self._cells
        return [
            move for origin, mid, dest, move in _JUMPS
            if cells[origin] == 1 and cells[mid] == 1 and cells[dest] == 0
        ]

    def remaining_piece_count(self) -> int:
        """Number of pegs left on the board."""
        return self._pegs

    def fingerprint(self) -> int:
        """
        Canonical key for the full board contents.

        Each cell contributes one base-3 digit (value + 1), so two boards
        share a fingerprint exactly when every cell matches.
        """
        return self._key

    def to_list(self) -> List[List[int]]:
        """
        Convert to a 2D list of ints.

        Returns:
            Seven rows of -1/0/1 values
        """
        return [self._cells[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]

    def _write(self, index: int, value: int) -> None:
        old = self._cells[index]
        if old == value:
            return
        self._cells[index] = value
        self._key += (value - old) * _POW3[index]
        if old == Cell.OCCUPIED:
            self._pegs -= 1
        elif value == Cell.OCCUPIED:
            self._pegs += 1

    def __eq__(self, other):
        """Boards are equal when every cell matches."""
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None

    def __repr__(self) -> str:
        return f"Board(pegs={self._pegs})"
