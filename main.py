"""
Resta Um Solver - Entry Point

Example:
    python main.py
    python main.py --strategy naive --max-depth 20
"""

import sys

from resta_um.cli import main


if __name__ == "__main__":
    sys.exit(main())
