"""
Starter World for Dungeon Escape.

Provides the pre-built dungeon: three rooms, a sword to find,
and a goblin guarding the treasure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from dungeon_escape.models import Enemy, GameConfig, Player, Room, World

logger = logging.getLogger(__name__)


@dataclass
class StarterWorldResult:
    """Result of creating a starter world."""

    world: World
    player: Player
    rooms: dict[str, str]  # key -> room name


def create_starter_world(config: GameConfig | None = None) -> StarterWorldResult:
    """
    Create the dungeon for immediate gameplay.

    Returns a world with:
    - The Entrance as the starting room
    - A Hallway holding a sword, reachable north of the Entrance
    - A Treasure Room east of the Hallway, guarded by a Goblin

    The Hallway -> Treasure Room exit is one-way; nothing leads back out.

    Args:
        config: Game rules (starting health)

    Returns:
        StarterWorldResult with the world and a player standing in the Entrance
    """
    config = config or GameConfig()
    rooms: dict[str, str] = {}

    # =========================================================================
    # Create Rooms
    # =========================================================================
    entrance = Room(
        name="Entrance",
        description="You stand at the dungeon entrance. A hallway lies north.",
    )
    rooms["entrance"] = entrance.name

    hallway = Room(
        name="Hallway",
        description="A dimly lit hallway. Paths lead south and east.",
    )
    rooms["hallway"] = hallway.name

    treasure_room = Room(
        name="Treasure Room",
        description="A room glittering with treasure. But danger lurks here...",
    )
    rooms["treasure_room"] = treasure_room.name

    # =========================================================================
    # Link Exits
    # =========================================================================
    entrance.exits["north"] = hallway.name
    hallway.exits["south"] = entrance.name
    hallway.exits["east"] = treasure_room.name

    # =========================================================================
    # Place Items and Enemies
    # =========================================================================
    hallway.items.append("sword")
    treasure_room.enemy = Enemy(name="Goblin", health=30, damage=10)

    world = World.from_rooms([entrance, hallway, treasure_room], starting_room=entrance.name)

    # =========================================================================
    # Create Player
    # =========================================================================
    player = Player(current_room=world.starting_room, health=config.player_health)
    player.visit_current_room()

    logger.debug("Starter world created with %d rooms", len(world.rooms))
    return StarterWorldResult(world=world, player=player, rooms=rooms)
