"""
World Models for Dungeon Escape.

Defines the room graph the player explores:
Rooms, the Enemies that occupy them, and the World that owns them all.

Exits are stored as room names, never as nested Room objects, so the
graph can contain cycles (Entrance <-> Hallway) without ownership loops.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class Enemy(BaseModel):
    """An adversary bound to a single room."""

    name: str = Field(min_length=1)
    health: int = Field(description="Current hit points; alive while positive")
    damage: int = Field(gt=0, description="Fixed damage dealt on each retaliation")

    @model_validator(mode="after")
    def _starts_alive(self) -> Enemy:
        if self.health <= 0:
            raise ValueError(f"Enemy {self.name!r} must start with positive health")
        return self

    def is_alive(self) -> bool:
        """Check if the enemy can still fight."""
        return self.health > 0


class Room(BaseModel):
    """
    A node in the dungeon graph.

    Topology (name, description, exits) is fixed once the world is built;
    only the item list and the enemy's health change during play.
    """

    name: str = Field(min_length=1)
    description: str = ""
    exits: dict[str, str] = Field(
        default_factory=dict, description="Direction label -> target room name"
    )
    items: list[str] = Field(default_factory=list, description="Items lying in the room")
    enemy: Enemy | None = None

    def has_living_enemy(self) -> bool:
        """Check if an enemy here is still alive."""
        return self.enemy is not None and self.enemy.is_alive()


class World(BaseModel):
    """
    The aggregate of all rooms.

    The world is the single owner of every Room. Insertion order of
    ``rooms`` is the canonical order used when listing the map.
    """

    rooms: dict[str, Room]
    starting_room: str

    @model_validator(mode="after")
    def _check_topology(self) -> World:
        for key, room in self.rooms.items():
            if key != room.name:
                raise ValueError(f"Room stored under {key!r} is named {room.name!r}")
            for direction, target in room.exits.items():
                if target not in self.rooms:
                    raise ValueError(
                        f"Exit {direction!r} from {room.name!r} leads to unknown room {target!r}"
                    )
        if self.starting_room not in self.rooms:
            raise ValueError(f"Unknown starting room: {self.starting_room!r}")
        return self

    @classmethod
    def from_rooms(cls, rooms: list[Room], starting_room: str) -> World:
        """Build a world from an ordered list of rooms."""
        return cls(rooms={room.name: room for room in rooms}, starting_room=starting_room)

    def get_room(self, name: str) -> Room:
        """Look up a room by name. Raises KeyError for unknown rooms."""
        return self.rooms[name]

    def exit_target(self, room_name: str, direction: str) -> Room | None:
        """Follow an exit. Returns None when there is no exit that way."""
        target = self.get_room(room_name).exits.get(direction)
        if target is None:
            return None
        return self.rooms[target]

    def room_names(self) -> list[str]:
        """All room names in canonical order."""
        return list(self.rooms)
