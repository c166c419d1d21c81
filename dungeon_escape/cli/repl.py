"""
Interactive REPL for Dungeon Escape.

Provides a text-based interface for playing the game.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable

from dungeon_escape.engine import GameEngine
from dungeon_escape.models import GameConfig

logger = logging.getLogger(__name__)

PROMPT = "> "
FAREWELL = "Thanks for playing!"


class GameREPL:
    """
    Interactive REPL for playing Dungeon Escape.

    Reads one line at a time, hands it to the engine, and prints the reply.
    Blank lines are ignored.
    """

    def __init__(
        self,
        engine: GameEngine,
        *,
        input_func: Callable[[str], str] | None = None,
    ) -> None:
        self.engine = engine
        self.input_func = input_func or input
        self.running = False

    def _print_banner(self) -> None:
        """Print the welcome banner and the starting room."""
        print("Welcome to the Dungeon Escape!")
        print("Type 'help' to see available commands, or 'quit' to exit.\n")
        print(self.engine.world.get_room(self.engine.player.current_room).description)

    def run(self) -> int:
        """
        Run the interactive REPL.

        Returns:
            Process exit code; every ending, including defeat, is 0
        """
        self._print_banner()
        self.running = True

        while self.running:
            try:
                user_input = self.input_func(PROMPT).strip()
            except (EOFError, KeyboardInterrupt):
                print()
                break

            if not user_input:
                continue

            result = self.engine.process_turn(user_input)
            if result.narrative:
                print(result.narrative)
            if result.game_over:
                self.running = False

        self.running = False
        print(FAREWELL)
        return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(description="Dungeon Escape Text Adventure")
    parser.add_argument(
        "--health",
        type=int,
        default=GameConfig().player_health,
        help="Starting player health",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Diagnostic logging level (written to stderr)",
    )
    return parser


def run_game(config: GameConfig | None = None) -> int:
    """
    Run Dungeon Escape on stdin/stdout.

    Args:
        config: Game rules for the new session

    Returns:
        Process exit code
    """
    engine = GameEngine.new_game(config)
    return GameREPL(engine).run()


def main(argv: list[str] | None = None) -> int:
    """Console entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = GameConfig(player_health=args.health)
    logger.debug("Starting game with %r", config)
    return run_game(config)


if __name__ == "__main__":
    raise SystemExit(main())
