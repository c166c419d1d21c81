"""
Core Data Models for Dungeon Escape.

These models define the game's state:
- World: the rooms, their exits, items, and enemies
- Player: location, health, and inventory
- GameConfig: the rule values shared by setup and combat
"""

from dungeon_escape.models.config import GameConfig
from dungeon_escape.models.player import Player
from dungeon_escape.models.world import Enemy, Room, World

__all__ = [
    # World
    "World",
    "Room",
    "Enemy",
    # Player
    "Player",
    # Config
    "GameConfig",
]
