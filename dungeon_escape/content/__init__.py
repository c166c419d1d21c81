"""
Pre-built game content for Dungeon Escape.
"""

from dungeon_escape.content.starter_world import StarterWorldResult, create_starter_world

__all__ = [
    "StarterWorldResult",
    "create_starter_world",
]
