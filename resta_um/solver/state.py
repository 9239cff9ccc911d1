"""
Search State Module - Mutable bookkeeping for a single backtracking run.
"""

from dataclasses import dataclass, field
from typing import List, Set

from .board import Board
from .move import Move


@dataclass
class SearchState:
    """
    Everything a depth-first search mutates while it runs.

    One instance is created per solve and threaded through every
    recursion frame; nothing is shared between searches.

    Attributes:
        board: Board being explored, owned by this search
        moves: Applied moves, doubling as the undo log and solution trace
        visited: Fingerprints of every board a frame has explored
        total_moves: Count of apply AND undo operations
        states_explored: Frames that passed the dedup check
        pruned_branches: Frames rejected because the board was already seen
        depth_cutoffs: Frames rejected by the depth limit
        max_depth_reached: Deepest frame that passed the dedup check
        cancelled: Set once the search stops on cancellation or timeout
    """
    board: Board
    moves: List[Move] = field(default_factory=list)
    visited: Set[int] = field(default_factory=set)
    total_moves: int = 0
    states_explored: int = 0
    pruned_branches: int = 0
    depth_cutoffs: int = 0
    max_depth_reached: int = 0
    cancelled: bool = False

    def apply_move(self, move: Move) -> bool:
        """
        Apply a move to the board and record it.

        Returns:
            False without side effects if the move is not legal
        """
        if not self.board.apply_move(move):
            return False
        self.moves.append(move)
        self.total_moves += 1
        return True

    def undo_move(self, move: Move) -> None:
        """
        Undo the most recently applied move.

        The operation counter is incremented, not decremented: it counts
        work performed, not the length of the current trace.
        """
        self.board.undo_move(move)
        self.moves.pop()
        self.total_moves += 1

    def mark_visited(self) -> bool:
        """
        Record the current board as explored.

        Returns:
            True if the board is new, False if it was seen before
        """
        key = self.board.fingerprint()
        if key in self.visited:
            return False
        self.visited.add(key)
        return True

    @property
    def descriptors(self) -> List[str]:
        """Trace as 1-indexed "(r1,c1) -> (r2,c2)" strings."""
        return [move.describe() for move in self.moves]
