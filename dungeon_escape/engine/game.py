"""
Game Engine for Dungeon Escape.

The orchestration layer that processes player turns.
Parses input, dispatches to player actions or combat, and reports
when the session should end.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from dungeon_escape.content import create_starter_world
from dungeon_escape.engine import actions
from dungeon_escape.engine.models import ActionResult, GameOutcome, ParsedCommand, TurnResult
from dungeon_escape.engine.parser import parse_command
from dungeon_escape.models import GameConfig, Player, World
from dungeon_escape.skills.combat import CombatState, resolve_fight

logger = logging.getLogger(__name__)

UNKNOWN_COMMAND = "I don't understand that command."
GAME_OVER = "The game is over."

_COMBAT_OUTCOMES = {
    CombatState.PLAYER_VICTORY: GameOutcome.VICTORY,
    CombatState.PLAYER_DEFEAT: GameOutcome.DEFEAT,
}


@dataclass
class Command:
    """A command the player can type."""

    name: str
    usage: str
    description: str
    handler: Callable[[ParsedCommand], TurnResult]
    aliases: list[str] = field(default_factory=list)
    missing_argument: str | None = None
    """Prompt shown when a required argument is missing; None if no argument."""


class GameEngine:
    """
    Turn processor for a single game session.

    Owns the world and the player. Every turn runs to completion,
    including a whole fight, before the next one starts.
    """

    def __init__(self, world: World, player: Player, config: GameConfig | None = None) -> None:
        self.world = world
        self.player = player
        self.config = config or GameConfig()
        self.outcome: GameOutcome | None = None
        self.commands: dict[str, Command] = {}
        self._register_commands()

    @classmethod
    def new_game(cls, config: GameConfig | None = None) -> GameEngine:
        """Create an engine for a fresh starter world."""
        config = config or GameConfig()
        starter = create_starter_world(config)
        return cls(starter.world, starter.player, config)

    def _register_commands(self) -> None:
        """Register all player commands."""
        commands = [
            Command(
                name="go",
                usage="go <direction>",
                description="Move north, south, east, or west",
                handler=self._cmd_go,
                aliases=["move"],
                missing_argument="Go where?",
            ),
            Command(
                name="take",
                usage="take <item>",
                description="Pick up an item in the room",
                handler=self._cmd_take,
                aliases=["get"],
                missing_argument="Take what?",
            ),
            Command(
                name="inventory",
                usage="inventory",
                description="Show what you're carrying",
                handler=self._cmd_inventory,
                aliases=["inv", "i"],
            ),
            Command(
                name="look",
                usage="look",
                description="Look around the current room",
                handler=self._cmd_look,
                aliases=["l"],
            ),
            Command(
                name="fight",
                usage="fight",
                description="Fight an enemy if one is present",
                handler=self._cmd_fight,
                aliases=["attack"],
            ),
            Command(
                name="map",
                usage="map",
                description="See a map of visited rooms",
                handler=self._cmd_map,
            ),
            Command(
                name="help",
                usage="help",
                description="Show this help menu",
                handler=self._cmd_help,
                aliases=["?", "h"],
            ),
            Command(
                name="quit",
                usage="quit",
                description="Exit the game",
                handler=self._cmd_quit,
                aliases=["exit", "q"],
            ),
        ]

        for cmd in commands:
            self.commands[cmd.name] = cmd
            for alias in cmd.aliases:
                self.commands[alias] = cmd

    @property
    def game_over(self) -> bool:
        """Check if the session has ended."""
        return self.outcome is not None

    def process_turn(self, text: str) -> TurnResult:
        """
        Process one line of player input.

        Args:
            text: Raw input line

        Returns:
            TurnResult with the text to show and, if the session ended,
            the outcome
        """
        if self.game_over:
            return TurnResult(narrative=GAME_OVER, outcome=self.outcome)

        parsed = parse_command(text)
        if parsed is None:
            return TurnResult()

        logger.debug("Parsed command %r with args %r", parsed.name, parsed.args)
        cmd = self.commands.get(parsed.name)
        if cmd is None:
            return TurnResult(narrative=UNKNOWN_COMMAND)

        if cmd.missing_argument is not None and parsed.argument is None:
            return TurnResult(narrative=cmd.missing_argument)

        result = cmd.handler(parsed)
        if result.outcome is not None:
            self.outcome = result.outcome
            logger.info("Session ended: %s", result.outcome.value)
        return result

    def help_text(self) -> str:
        """Build the command summary."""
        lines = ["Available commands:"]
        seen = set()
        for cmd in self.commands.values():
            if cmd.name not in seen:
                lines.append(f"- {cmd.usage:<17}: {cmd.description}")
                seen.add(cmd.name)
        return "\n".join(lines)

    # =========================================================================
    # Command Handlers
    # =========================================================================

    def _reply(self, result: ActionResult) -> TurnResult:
        return TurnResult(narrative=result.message)

    def _cmd_go(self, cmd: ParsedCommand) -> TurnResult:
        """Handle go command."""
        return self._reply(actions.move(self.player, self.world, cmd.argument))

    def _cmd_take(self, cmd: ParsedCommand) -> TurnResult:
        """Handle take command."""
        return self._reply(actions.take(self.player, self.world, cmd.argument))

    def _cmd_inventory(self, cmd: ParsedCommand) -> TurnResult:
        """Handle inventory command."""
        return self._reply(actions.show_inventory(self.player))

    def _cmd_look(self, cmd: ParsedCommand) -> TurnResult:
        """Handle look command."""
        return self._reply(actions.look(self.player, self.world))

    def _cmd_map(self, cmd: ParsedCommand) -> TurnResult:
        """Handle map command."""
        return self._reply(actions.show_map(self.player, self.world))

    def _cmd_help(self, cmd: ParsedCommand) -> TurnResult:
        """Handle help command."""
        return TurnResult(narrative=self.help_text())

    def _cmd_quit(self, cmd: ParsedCommand) -> TurnResult:
        """Handle quit command - the session loop prints the farewell."""
        return TurnResult(outcome=GameOutcome.QUIT)

    def _cmd_fight(self, cmd: ParsedCommand) -> TurnResult:
        """Handle fight command - resolves the whole fight in one turn."""
        room = self.world.get_room(self.player.current_room)
        combat = resolve_fight(self.player, room, self.config)
        return TurnResult(
            narrative=combat.narrative,
            outcome=_COMBAT_OUTCOMES.get(combat.state),
        )
