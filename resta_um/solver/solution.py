"""
Solution Module - Result of a strategy computation.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .board import Board
from .move import Move


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of distinct boards expanded
        pruned_branches: Frames pruned because the board was already visited
        depth_cutoffs: Frames pruned by the depth limit
        max_depth_reached: Deepest frame that was expanded
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    pruned_branches: int = 0
    depth_cutoffs: int = 0
    max_depth_reached: int = 0
    strategy_name: str = ""


@dataclass
class Solution:
    """
    Result of a strategy computation.

    Attributes:
        solved: True if the trace leaves exactly one peg
        moves: Ordered jumps from the initial board to the final one
        total_moves: Apply plus undo operations performed by the search
        initial_board: Board the search started from
        final_board: Board after the trace (equals initial_board on failure)
        was_cancelled: True if stopped by cancellation or timeout
        metrics: Performance statistics
    """
    solved: bool = False
    moves: List[Move] = field(default_factory=list)
    total_moves: int = 0
    initial_board: Optional[Board] = None
    final_board: Optional[Board] = None
    was_cancelled: bool = False
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def move_count(self) -> int:
        """Number of jumps in the solution trace."""
        return len(self.moves)

    @property
    def has_moves(self) -> bool:
        """Check if solution has any moves."""
        return len(self.moves) > 0

    @property
    def descriptors(self) -> List[str]:
        """Moves formatted as "(r1,c1) -> (r2,c2)", 1-indexed."""
        return [move.describe() for move in self.moves]

    def get_move(self, index: int) -> Move:
        """
        Get move at specific index.

        Args:
            index: Move index (0-based)

        Returns:
            Move at index

        Raises:
            IndexError: If index out of range
        """
        return self.moves[index]

    def board_states(self) -> List[Board]:
        """
        Replay the trace from the initial board.

        Returns:
            Board before the first move, then the board after each move

        Raises:
            ValueError: If there is no initial board or a move does not apply
        """
        if self.initial_board is None:
            raise ValueError("Solution has no initial board to replay from")

        board = self.initial_board.copy()
        states = [board.copy()]
        for i, move in enumerate(self.moves):
            if not board.apply_move(move):
                raise ValueError(f"Move {i + 1} ({move}) is not legal during replay")
            states.append(board.copy())
        return states
