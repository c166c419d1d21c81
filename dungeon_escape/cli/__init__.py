"""
Command-line interface for Dungeon Escape.
"""

from dungeon_escape.cli.repl import GameREPL, main, run_game

__all__ = [
    "GameREPL",
    "main",
    "run_game",
]
