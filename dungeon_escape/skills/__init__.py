"""
Game Rule Skills for Dungeon Escape.

Skills resolve mechanics on the models they are given and return
structured results. They never read input or print output.
"""

from dungeon_escape.skills.combat import (
    AttackKind,
    CombatResult,
    CombatRound,
    CombatState,
    get_attack,
    resolve_fight,
)

__all__ = [
    # Combat
    "resolve_fight",
    "get_attack",
    "CombatResult",
    "CombatRound",
    "CombatState",
    "AttackKind",
]
