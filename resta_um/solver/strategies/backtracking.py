"""
Backtracking Strategies - Depth-first search with undo and visited-state pruning.

Each frame of the search:
  1. Stops if the context was cancelled or timed out
  2. Fails if deeper than the context's max_depth
  3. Fails if the board was already explored, otherwise records it
  4. Succeeds if a single peg remains
  5. Tries every legal jump in order_moves() order, undoing failures

The visited set lives for the whole search, so a board abandoned in one
branch is never expanded again through a different move order.
"""

import time
import logging
from typing import List

from ..base import SolverStrategy
from ..board import Board
from ..move import Move
from ..context import SolutionContext
from ..solution import Solution, SolutionMetrics
from ..state import SearchState
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@register_strategy
class CentralityStrategy(SolverStrategy):
    """
    Backtracking search ordered by distance to the centre.

    Candidates are sorted ascending by Move.centrality_key, the origin's
    Manhattan distance to the centre minus the destination's. Jumps that
    carry a peg outward come first and centre-bound jumps last. The sort
    is stable, so ties keep enumeration order and the search is fully
    deterministic.
    """
    name = "centrality"
    description = "Backtracking, ordered by centre-distance gain"

    def solve(self, context: SolutionContext) -> Solution:
        """
        Run the depth-first search from depth 0.

        Args:
            context: Solution context with board, limits and cancellation

        Returns:
            Solution; moves is empty unless solved
        """
        start_time = time.perf_counter()

        initial_board = context.board.copy()
        state = SearchState(board=context.board.copy())

        logger.debug(f"{self.name}: starting search, {initial_board.remaining_piece_count()} pegs, "
                     f"max depth {context.max_depth}")
        solved = self._search(state, context, 0)

        return self._build_solution(state, initial_board, solved, start_time)

    def order_moves(self, moves: List[Move]) -> List[Move]:
        """Stable ascending sort by centrality_key."""
        return sorted(moves, key=lambda m: m.centrality_key)

    def _search(self, state: SearchState, context: SolutionContext, depth: int) -> bool:
        """
        One recursion frame.

        Returns:
            True if the moves now on state.moves solve the board
        """
        if state.cancelled or self._check_cancelled(context):
            state.cancelled = True
            return False

        if depth > context.max_depth:
            state.depth_cutoffs += 1
            return False

        if not state.mark_visited():
            state.pruned_branches += 1
            return False

        state.states_explored += 1
        if depth > state.max_depth_reached:
            state.max_depth_reached = depth
        if state.states_explored % context.progress_interval == 0:
            self._report_progress(state, context)

        if state.board.remaining_piece_count() == 1:
            return True

        candidates = self.order_moves(self.find_all_valid_moves(state.board))
        for move in candidates:
            if not state.apply_move(move):
                continue
            if self._search(state, context, depth + 1):
                return True
            state.undo_move(move)

        return False

    def _report_progress(self, state: SearchState, context: SolutionContext) -> None:
        """Report the deepest level reached so far."""
        fraction = state.max_depth_reached / context.max_depth if context.max_depth else 1.0
        message = (f"{state.states_explored} states, deepest {state.max_depth_reached}, "
                   f"{state.total_moves} operations")
        logger.debug(f"{self.name}: {message}")
        context.report_progress(min(0.99, fraction), message)

    def _build_solution(
        self,
        state: SearchState,
        initial_board: Board,
        solved: bool,
        start_time: float
    ) -> Solution:
        """Build Solution object from search results."""
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        return Solution(
            solved=solved,
            moves=list(state.moves),
            total_moves=state.total_moves,
            initial_board=initial_board,
            final_board=state.board,
            was_cancelled=state.cancelled,
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                states_explored=state.states_explored,
                pruned_branches=state.pruned_branches,
                depth_cutoffs=state.depth_cutoffs,
                max_depth_reached=state.max_depth_reached,
                strategy_name=self.name
            )
        )


@register_strategy
class NaiveStrategy(CentralityStrategy):
    """
    Same backtracking search, candidates tried in enumeration order.

    Useful as a baseline on small positions; on the full board it is far
    slower than the centre-biased ordering.
    """
    name = "naive"
    description = "Backtracking, jumps in board order"

    def order_moves(self, moves: List[Move]) -> List[Move]:
        return moves
