"""
Game Configuration for Dungeon Escape.

Rule values the world builder and the combat resolver read.
Damage values are strictly positive so every fight terminates.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GameConfig(BaseModel):
    """Game rule configuration."""

    player_health: int = Field(default=100, ge=1, description="Starting player hit points")
    weapon_item: str = Field(
        default="sword", min_length=1, description="Item that upgrades attacks"
    )
    weapon_damage: int = Field(default=15, ge=1, description="Damage of an armed strike")
    unarmed_damage: int = Field(default=5, ge=1, description="Damage of an unarmed punch")
