"""
Player Model for Dungeon Escape.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Player(BaseModel):
    """
    The adventurer's mutable state.

    ``current_room`` is the name of a room owned by the World, not a copy
    of it; moving only rebinds the name.
    """

    current_room: str
    health: int = Field(default=100, description="Hit points; defeated at zero or below")
    inventory: list[str] = Field(
        default_factory=list, description="Carried items in pickup order"
    )
    visited_rooms: set[str] = Field(
        default_factory=set, description="Rooms shown as visited on the map"
    )

    def is_alive(self) -> bool:
        """Check if the player can still act."""
        return self.health > 0

    def has_item(self, item: str) -> bool:
        """Check if the player carries at least one of an item."""
        return item in self.inventory

    def visit_current_room(self) -> None:
        """Mark the current room as visited."""
        self.visited_rooms.add(self.current_room)
