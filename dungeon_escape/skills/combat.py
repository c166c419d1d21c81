"""
Combat Resolution for Dungeon Escape.

Implements the fight loop as a state machine:

    NO_ENCOUNTER -> ENGAGED -> PLAYER_VICTORY | PLAYER_DEFEAT

A fight always runs to a terminal state within one call. Each round the
player attacks first; the enemy only retaliates if it survived the blow.
There is no randomness, so the outcome is fully determined by the starting
health values, the enemy's damage, and whether the player carries the weapon.

The resolver reports the terminal state; it never ends the process itself.
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, Field

from dungeon_escape.models import GameConfig, Player, Room

logger = logging.getLogger(__name__)


class CombatState(str, Enum):
    """States of the combat state machine."""

    NO_ENCOUNTER = "no_encounter"
    ENGAGED = "engaged"
    PLAYER_VICTORY = "player_victory"
    PLAYER_DEFEAT = "player_defeat"


class AttackKind(str, Enum):
    """How the player attacked."""

    STRIKE = "strike"
    PUNCH = "punch"


class CombatRound(BaseModel):
    """One player attack and the enemy's answer to it."""

    number: int = Field(ge=1)
    attack: AttackKind
    damage_dealt: int = Field(description="Damage the player dealt")
    enemy_health: int = Field(description="Enemy health after the attack")
    damage_taken: int = Field(default=0, description="Damage from the retaliation, if any")
    player_health: int = Field(description="Player health at the end of the round")


class CombatResult(BaseModel):
    """Result of resolving a fight."""

    state: CombatState
    enemy_name: str | None = None
    rounds: list[CombatRound] = Field(default_factory=list)
    messages: list[str] = Field(default_factory=list)

    @property
    def is_terminal(self) -> bool:
        """Check if the fight ended the game."""
        return self.state in (CombatState.PLAYER_VICTORY, CombatState.PLAYER_DEFEAT)

    @property
    def narrative(self) -> str:
        """All combat messages as display text."""
        return "\n".join(self.messages)


def get_attack(player: Player, config: GameConfig) -> tuple[AttackKind, int]:
    """
    Pick the player's attack for this round.

    Carrying the weapon item is the only thing that upgrades a punch
    to a strike.
    """
    if player.has_item(config.weapon_item):
        return AttackKind.STRIKE, config.weapon_damage
    return AttackKind.PUNCH, config.unarmed_damage


def resolve_fight(player: Player, room: Room, config: GameConfig | None = None) -> CombatResult:
    """
    Fight the enemy in a room until one side is defeated.

    Args:
        player: The attacking player (health is reduced in place)
        room: Room holding the enemy (enemy health is reduced in place)
        config: Damage rules

    Returns:
        CombatResult with NO_ENCOUNTER if there is nothing alive to fight,
        otherwise PLAYER_VICTORY or PLAYER_DEFEAT
    """
    config = config or GameConfig()
    enemy = room.enemy
    if enemy is None or not enemy.is_alive():
        return CombatResult(
            state=CombatState.NO_ENCOUNTER,
            messages=["There's nothing to fight here."],
        )

    result = CombatResult(
        state=CombatState.ENGAGED,
        enemy_name=enemy.name,
        messages=[f"You engage the {enemy.name}!"],
    )
    logger.info("Combat started with %s in %s", enemy.name, room.name)

    while result.state == CombatState.ENGAGED:
        kind, damage = get_attack(player, config)
        enemy.health -= damage
        if kind == AttackKind.STRIKE:
            result.messages.append(f"You strike the {enemy.name}! Enemy health: {enemy.health}")
        else:
            result.messages.append(f"You punch the {enemy.name}. Enemy health: {enemy.health}")

        combat_round = CombatRound(
            number=len(result.rounds) + 1,
            attack=kind,
            damage_dealt=damage,
            enemy_health=enemy.health,
            player_health=player.health,
        )
        result.rounds.append(combat_round)

        # A lethal blow ends the fight before the enemy can answer
        if not enemy.is_alive():
            result.state = CombatState.PLAYER_VICTORY
            result.messages.append(f"You defeated the {enemy.name}! The treasure is yours.")
            result.messages.append("You win!")
            break

        player.health -= enemy.damage
        combat_round.damage_taken = enemy.damage
        combat_round.player_health = player.health
        result.messages.append(f"The {enemy.name} hits you! Your health: {player.health}")

        if not player.is_alive():
            result.state = CombatState.PLAYER_DEFEAT
            result.messages.append("You were defeated... Game Over.")

    logger.info(
        "Combat with %s ended in %s after %d rounds (player health %d)",
        enemy.name,
        result.state.value,
        len(result.rounds),
        player.health,
    )
    return result
