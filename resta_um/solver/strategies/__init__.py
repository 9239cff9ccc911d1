"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .backtracking import CentralityStrategy, NaiveStrategy

__all__ = [
    "CentralityStrategy",
    "NaiveStrategy",
]
