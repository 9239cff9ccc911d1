"""
Solution Context Module - Shared context for strategy execution.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .board import Board

# Depth limit matching the 31 jumps of a classic solution
MAX_DEPTH = 31


@dataclass
class SolutionContext:
    """
    Shared context passed to strategies containing the board to solve,
    search limits, cancellation, and progress reporting.

    Attributes:
        board: Board to solve (strategies search on a copy)
        max_depth: Deepest recursion frame allowed
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds, None for no limit
        start_time: When computation started
        progress_callback: Optional callback for progress updates
        progress_interval: Explored states between progress reports
    """
    board: Board = field(default_factory=Board.initial)
    max_depth: int = MAX_DEPTH
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: Optional[float] = None
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[float, str], None]] = None
    progress_interval: int = 100_000

    def __post_init__(self):
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")

    def is_cancelled(self) -> bool:
        """
        Check if cancellation requested or timeout exceeded.

        Returns:
            True if strategy should stop execution
        """
        if self.cancel_flag.is_set():
            return True
        if self.timeout_sec is not None and self.elapsed_time() > self.timeout_sec:
            return True
        return False

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)

    def elapsed_time(self) -> float:
        """
        Get seconds elapsed since computation started.

        Returns:
            Elapsed time in seconds
        """
        return time.time() - self.start_time
