"""
Command Parser for Dungeon Escape.

Turns a raw line of player input into a ParsedCommand.
"""

from __future__ import annotations

from dungeon_escape.engine.models import ParsedCommand


def normalize_input(text: str) -> str:
    """Trim surrounding whitespace and case-fold."""
    return text.strip().lower()


def parse_command(text: str) -> ParsedCommand | None:
    """
    Parse player input into a command token and argument tokens.

    Args:
        text: Raw input line

    Returns:
        ParsedCommand, or None for blank input
    """
    parts = normalize_input(text).split()
    if not parts:
        return None
    return ParsedCommand(name=parts[0], args=parts[1:], raw=text)
