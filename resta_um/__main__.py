"""Run the solver with ``python -m resta_um``."""

import sys

from resta_um.cli import main

sys.exit(main())
