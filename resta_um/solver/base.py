"""
Base Strategy Module - Abstract base class for solving strategies.
"""

from abc import ABC, abstractmethod
from typing import List

from .board import Board
from .move import Move
from .context import SolutionContext
from .solution import Solution


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for the CLI
    """
    name: str = "base"
    description: str = "Base strategy"

    @abstractmethod
    def solve(self, context: SolutionContext) -> Solution:
        """
        Search for a sequence of jumps leaving a single peg.

        Must periodically check context.is_cancelled() and stop
        searching if True.

        Args:
            context: Solution context with board, limits, cancellation

        Returns:
            Solution with moves and metrics
        """
        pass

    def find_all_valid_moves(self, board: Board) -> List[Move]:
        """
        Find all legal jumps on the board, in enumeration order.

        Args:
            board: Current board

        Returns:
            List of valid Move objects
        """
        return board.valid_moves()

    def order_moves(self, moves: List[Move]) -> List[Move]:
        """
        Order candidate moves before they are tried.

        The default keeps enumeration order.

        Args:
            moves: Candidates in enumeration order

        Returns:
            Candidates in the order to explore them
        """
        return moves

    def _check_cancelled(self, context: SolutionContext) -> bool:
        """
        Convenience method to check cancellation.

        Args:
            context: Solution context

        Returns:
            True if strategy should stop
        """
        return context.is_cancelled()
