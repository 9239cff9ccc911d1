"""
Move Module - Represents a single jump on the Resta Um board.
"""

from dataclasses import dataclass
from typing import Tuple

# Jump vectors, in the order candidate moves are enumerated
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-2, 0), (2, 0), (0, -2), (0, 2))

# Centre cell the ordering heuristic pulls pegs towards
CENTER: Tuple[int, int] = (3, 3)


def manhattan_to_center(row: int, col: int) -> int:
    """Manhattan distance from (row, col) to the board centre."""
    return abs(row - CENTER[0]) + abs(col - CENTER[1])


@dataclass(frozen=True)
class Move:
    """
    A jump of one peg over a neighbour into an empty hole.

    Coordinates are 0-indexed. The delta is always one of DIRECTIONS,
    so the jumped-over cell sits exactly halfway between origin and
    destination.

    Attributes:
        row: Origin row
        col: Origin column
        d_row: Row delta (-2, 0 or 2)
        d_col: Column delta (-2, 0 or 2)
    """
    row: int
    col: int
    d_row: int
    d_col: int

    def __post_init__(self):
        if (self.d_row, self.d_col) not in DIRECTIONS:
            raise ValueError(f"Invalid jump delta: ({self.d_row}, {self.d_col})")

    @property
    def origin(self) -> Tuple[int, int]:
        """Cell the peg leaves."""
        return (self.row, self.col)

    @property
    def middle(self) -> Tuple[int, int]:
        """Cell whose peg is captured."""
        return (self.row + self.d_row // 2, self.col + self.d_col // 2)

    @property
    def destination(self) -> Tuple[int, int]:
        """Cell the peg lands on."""
        return (self.row + self.d_row, self.col + self.d_col)

    @property
    def centrality_key(self) -> int:
        """
        Sort key for the centre-distance ordering.

        Origin distance to the centre minus destination distance. The
        key is positive when the peg lands closer to the centre and
        negative when it lands further out.
        """
        dest_row, dest_col = self.destination
        return manhattan_to_center(self.row, self.col) - manhattan_to_center(dest_row, dest_col)

    def describe(self) -> str:
        """
        Human-readable descriptor with 1-indexed coordinates.

        Returns:
            String like "(2,4) -> (4,4)"
        """
        dest_row, dest_col = self.destination
        return f"({self.row + 1},{self.col + 1}) -> ({dest_row + 1},{dest_col + 1})"

    def __str__(self) -> str:
        return self.describe()
