#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [--scores PATH] [--seed N] [--no-color] [--verbose]
"""
import sys

from src.minesweeper.cli import main


if __name__ == "__main__":
    sys.exit(main())
