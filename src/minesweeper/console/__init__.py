"""
Console front end.

Renders boards with rich, reads validated input and drives the menu.
"""
from .render import DEFAULT_THEME, render_board, render_grid
from .prompts import Prompter
from .menu import MenuApp

__all__ = [
    "DEFAULT_THEME",
    "render_board",
    "render_grid",
    "Prompter",
    "MenuApp",
]
