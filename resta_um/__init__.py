"""
Resta Um Solver

Finds a sequence of jumps that reduces the English peg solitaire board
to a single peg.
"""

__version__ = "1.0.0"
