"""
Engine Data Models for Dungeon Escape.

Defines the core data structures for the game loop:
- ParsedCommand: Normalized player input
- ActionResult: Outcome of a single player action
- TurnResult: Response to the player
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class GameOutcome(str, Enum):
    """Ways a session can end."""

    QUIT = "quit"
    VICTORY = "victory"
    DEFEAT = "defeat"


class ParsedCommand(BaseModel):
    """Normalized player input."""

    name: str = Field(description="Command token, case-folded")
    args: list[str] = Field(default_factory=list, description="Remaining tokens")
    raw: str = Field(description="The player's original input")

    @property
    def argument(self) -> str | None:
        """The first argument token, if any."""
        return self.args[0] if self.args else None


class ActionResult(BaseModel):
    """Result of executing a player action."""

    success: bool
    message: str = Field(description="Human-readable result")


class TurnResult(BaseModel):
    """Result returned to the player."""

    narrative: str = Field(default="", description="Text to display")
    outcome: GameOutcome | None = Field(
        default=None, description="Set when this turn ended the session"
    )

    @property
    def game_over(self) -> bool:
        """Check if the session should terminate."""
        return self.outcome is not None
