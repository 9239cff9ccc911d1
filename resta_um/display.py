"""
Display Module for Resta Um Solver

Text rendering of boards, move lists and the final search report.
"""

from typing import List

from resta_um.solver import Board, Cell, Solution


NO_SOLUTION_MESSAGE = "No solution found."
CANCELLED_MESSAGE = "Search cancelled."


def render_board(board: Board) -> str:
    """
    Render a board as text.

    Cells outside the cross print as two spaces, holes as "0 " and pegs
    as "1 ". Rows end with a newline and the grid is followed by a blank
    line.

    Args:
        board: Board to render

    Returns:
        Multi-line string
    """
    lines = []
    for row in board.to_list():
        lines.append("".join("  " if cell == Cell.INVALID else f"{cell} " for cell in row))
    return "\n".join(lines) + "\n\n"


def render_steps(solution: Solution) -> str:
    """
    Render the board after every move of a solution.

    Args:
        solution: Solution with an initial board

    Returns:
        One block per move, headed by its number and descriptor
    """
    states = solution.board_states()
    blocks = []
    for i, (move, board) in enumerate(zip(solution.moves, states[1:]), start=1):
        blocks.append(f"Move {i}: {move.describe()}\n" + render_board(board))
    return "".join(blocks)


def format_report(solution: Solution, show_steps: bool = False) -> List[str]:
    """
    Build the lines printed once the search finishes.

    On success: the final board, every move descriptor in order, the
    operation counter (applies plus undos) and the solution length.

    Args:
        solution: Search result
        show_steps: Include the board after every move

    Returns:
        Lines of output (boards are multi-line entries)
    """
    if not solution.solved:
        return [CANCELLED_MESSAGE if solution.was_cancelled else NO_SOLUTION_MESSAGE]

    lines = ["Solution found:", render_board(solution.final_board)]
    if show_steps:
        lines.append(render_steps(solution))
    lines.append("Moves:")
    lines.extend(solution.descriptors)
    lines.append(f"Total moves: {solution.total_moves}")
    lines.append(f"Solution length: {solution.move_count}")
    return lines


def print_report(solution: Solution, show_steps: bool = False) -> None:
    """Print format_report() lines to stdout."""
    for line in format_report(solution, show_steps=show_steps):
        # Rendered boards already end with their own newlines
        print(line, end="" if line.endswith("\n") else "\n")
