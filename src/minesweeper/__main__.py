"""Run the game with ``python -m minesweeper``."""
import sys

from .cli import main

sys.exit(main())
