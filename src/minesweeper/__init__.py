"""
Terminal Minesweeper.

Provides the board engine, score persistence and the console front end.
"""

__version__ = "1.0.0"
