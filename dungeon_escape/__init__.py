"""
Dungeon Escape - a small turn-based text adventure.

Explore the dungeon, find the sword, and defeat the goblin guarding
the treasure.
"""

__version__ = "0.1.0"
