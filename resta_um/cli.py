"""
Resta Um Solver - Entry Point

Builds the standard starting board, searches for a sequence of jumps
leaving a single peg and prints the result.

Example:
    python -m resta_um
    resta-um
    resta-um --strategy naive --max-depth 20
    resta-um --steps --timeout 60
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from resta_um.display import print_report, render_board
from resta_um.settings import DEFAULT_SETTINGS, SETTINGS_FILE, load_settings, save_settings
from resta_um.solver import (
    Board,
    Solution,
    SolutionContext,
    create_strategy,
    get_strategy_info,
    get_strategy_names,
)

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False, log_file: Optional[str] = "solver.log") -> None:
    """
    Configure logging - output to both console and file.

    Args:
        debug: Log at DEBUG level (progress reports) instead of INFO
        log_file: File receiving a copy of the log, None to disable
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True
    )


class Application:
    """
    Command-line application controller.

    Resolves options against the saved settings, runs the selected
    strategy and prints the report.
    """

    def __init__(self, strategy_name: Optional[str] = None, max_depth: Optional[int] = None,
                 timeout_sec: Optional[float] = None, show_steps: bool = False,
                 board: Optional[Board] = None, settings_path: Path = SETTINGS_FILE):
        """
        Initialize the application.

        Args:
            strategy_name: Strategy to run (overrides saved setting)
            max_depth: Depth limit (overrides saved setting)
            timeout_sec: Time limit in seconds (overrides saved setting)
            show_steps: Print the board after every move
            board: Starting board (default: the standard starting position)
            settings_path: Settings file to read and write
        """
        self.settings_path = settings_path
        self.settings = load_settings(settings_path)
        self._validate_settings()

        # CLI values override saved settings
        self.strategy_name = strategy_name or self.settings["strategy_name"]
        self.max_depth = max_depth if max_depth is not None else self.settings["max_depth"]
        self.timeout_sec = timeout_sec if timeout_sec is not None else self.settings["timeout_sec"]
        self.show_steps = show_steps
        self.board = board if board is not None else Board.initial()

    def _validate_settings(self) -> None:
        """Replace saved values the solver cannot use with their defaults."""
        saved_strategy = self.settings.get("strategy_name")
        if saved_strategy not in get_strategy_names():
            logger.warning(f"Saved strategy '{saved_strategy}' not found, using default")
            self.settings["strategy_name"] = DEFAULT_SETTINGS["strategy_name"]

        saved_depth = self.settings.get("max_depth")
        if isinstance(saved_depth, bool) or not isinstance(saved_depth, int) or saved_depth < 0:
            logger.warning(f"Saved max_depth {saved_depth!r} is not a non-negative integer, using default")
            self.settings["max_depth"] = DEFAULT_SETTINGS["max_depth"]

        saved_timeout = self.settings.get("timeout_sec")
        if saved_timeout is not None and (isinstance(saved_timeout, bool)
                                          or not isinstance(saved_timeout, (int, float))
                                          or saved_timeout < 0):
            logger.warning(f"Saved timeout_sec {saved_timeout!r} is not a non-negative number, using default")
            self.settings["timeout_sec"] = DEFAULT_SETTINGS["timeout_sec"]

    def save(self) -> None:
        """Persist the effective options as the new defaults."""
        self.settings["strategy_name"] = self.strategy_name
        self.settings["max_depth"] = self.max_depth
        self.settings["timeout_sec"] = self.timeout_sec
        save_settings(self.settings, self.settings_path)
        logger.info(f"Settings saved to {self.settings_path}")

    def solve(self) -> Solution:
        """
        Run the configured strategy on the starting board.

        Returns:
            Search result
        """
        strategy = create_strategy(self.strategy_name)
        context = SolutionContext(
            board=self.board,
            max_depth=self.max_depth,
            timeout_sec=self.timeout_sec,
            progress_callback=self._on_progress
        )
        logger.info(f"Running '{strategy.name}' strategy, max depth {context.max_depth}")
        solution = strategy.solve(context)

        metrics = solution.metrics
        logger.info(f"Search finished in {metrics.computation_time_ms:.0f}ms: "
                    f"{metrics.states_explored} states explored, "
                    f"{metrics.pruned_branches} revisits pruned, "
                    f"{metrics.depth_cutoffs} depth cutoffs")
        return solution

    def run(self) -> int:
        """
        Run the application.

        Returns:
            Exit code (0 when a solution was found)
        """
        print(render_board(self.board), end="")
        print("Please wait, processing...")

        solution = self.solve()
        print_report(solution, show_steps=self.show_steps)
        return 0 if solution.solved else 1

    def _on_progress(self, percent: float, message: str) -> None:
        """Handle progress report from the strategy."""
        logger.debug(f"Progress {percent * 100:.0f}%: {message}")


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    strategies = ", ".join(f"{info['name']} ({info['description']})" for info in get_strategy_info())
    parser = argparse.ArgumentParser(
        description="Resta Um Solver - finds a jump sequence leaving a single peg"
    )
    parser.add_argument(
        "--strategy", "-s",
        choices=get_strategy_names(),
        help=f"Search strategy (default: saved setting). Available: {strategies}"
    )
    parser.add_argument(
        "--max-depth", "-m",
        type=int,
        help="Maximum search depth (default: saved setting, 31)"
    )
    parser.add_argument(
        "--timeout", "-t",
        type=float,
        help="Give up after this many seconds (default: no limit)"
    )
    parser.add_argument(
        "--steps",
        action="store_true",
        help="Print the board after every move of the solution"
    )
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Store the effective options in config.json"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging (search progress)"
    )
    args = parser.parse_args(argv)
    if args.max_depth is not None and args.max_depth < 0:
        parser.error("--max-depth must be non-negative")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Solve the puzzle from the command line."""
    args = parse_args(argv)

    application = Application(
        strategy_name=args.strategy,
        max_depth=args.max_depth,
        timeout_sec=args.timeout,
        show_steps=args.steps
    )
    configure_logging(debug=args.debug or bool(application.settings.get("debug_enabled")))

    if args.save_settings:
        application.save()

    return application.run()


if __name__ == "__main__":
    sys.exit(main())
