"""
Core Engine for Dungeon Escape.

The engine orchestrates:
- Command parsing (understanding player input)
- Action dispatch (movement, items, looking around)
- Combat resolution (handing fights to the combat skill)
"""

from __future__ import annotations

from dungeon_escape.engine.actions import look, move, show_inventory, show_map, take
from dungeon_escape.engine.game import Command, GameEngine
from dungeon_escape.engine.models import ActionResult, GameOutcome, ParsedCommand, TurnResult
from dungeon_escape.engine.parser import normalize_input, parse_command

__all__ = [
    # Main engine
    "GameEngine",
    "Command",
    # Models
    "ActionResult",
    "GameOutcome",
    "ParsedCommand",
    "TurnResult",
    # Parsing
    "normalize_input",
    "parse_command",
    # Actions
    "move",
    "take",
    "show_inventory",
    "look",
    "show_map",
]
