"""
Player Actions for Dungeon Escape.

Each action works on the Player and the World and reports back through an
ActionResult. A failed action never mutates state.
"""

from __future__ import annotations

import logging

from dungeon_escape.engine.models import ActionResult
from dungeon_escape.models import Player, World

logger = logging.getLogger(__name__)


def move(player: Player, world: World, direction: str) -> ActionResult:
    """
    Move the player through an exit of the current room.

    Args:
        player: The player to move
        world: World owning the rooms
        direction: Exit label, e.g. "north"

    Returns:
        ActionResult describing the new room, or a failure message
    """
    target = world.exit_target(player.current_room, direction)
    if target is None:
        return ActionResult(success=False, message="You can't go that way.")

    logger.debug("Player moves %s: %s -> %s", direction, player.current_room, target.name)
    player.current_room = target.name
    player.visit_current_room()
    return ActionResult(
        success=True,
        message=f"You move {direction} to {target.name}.\n{target.description}",
    )


def take(player: Player, world: World, item: str) -> ActionResult:
    """
    Pick up one occurrence of an item lying in the current room.

    Args:
        player: The player picking up the item
        world: World owning the rooms
        item: Item name

    Returns:
        ActionResult confirming the pickup, or reporting the item is absent
    """
    room = world.get_room(player.current_room)
    if item not in room.items:
        return ActionResult(success=False, message=f"There is no {item} here.")

    room.items.remove(item)
    player.inventory.append(item)
    player.visit_current_room()
    logger.debug("Player picked up %r in %s", item, room.name)
    return ActionResult(success=True, message=f"You picked up a {item}.")


def show_inventory(player: Player) -> ActionResult:
    """List carried items in pickup order."""
    if not player.inventory:
        return ActionResult(success=True, message="Your inventory is empty.")
    return ActionResult(
        success=True, message=f"You are carrying: {', '.join(player.inventory)}"
    )


def look(player: Player, world: World) -> ActionResult:
    """Describe the current room."""
    return ActionResult(success=True, message=world.get_room(player.current_room).description)


def show_map(player: Player, world: World) -> ActionResult:
    """List every room, marking the visited ones with '*'."""
    lines = ["Dungeon Map (visited rooms marked with *)"]
    for name in world.room_names():
        marker = "*" if name in player.visited_rooms else " "
        lines.append(f"{marker} {name}")
    return ActionResult(success=True, message="\n".join(lines))
