"""
Tests for the game engine's command dispatch.
"""

from __future__ import annotations

import pytest

from dungeon_escape.engine import GameEngine, GameOutcome
from dungeon_escape.models import GameConfig


@pytest.fixture
def engine():
    """Create an engine for a fresh starter world."""
    return GameEngine.new_game()


def play(engine: GameEngine, *lines: str):
    """Feed several lines and return the last result."""
    result = None
    for line in lines:
        result = engine.process_turn(line)
    return result


class TestDispatch:
    """Tests for routing input to actions."""

    def test_blank_input(self, engine):
        """Blank input produces no output."""
        result = engine.process_turn("   ")
        assert result.narrative == ""
        assert not result.game_over

    def test_unknown_command(self, engine):
        """Unknown commands are reported without changing state."""
        result = engine.process_turn("dance")
        assert result.narrative == "I don't understand that command."
        assert engine.player.current_room == "Entrance"

    def test_case_and_whitespace_insensitive(self, engine):
        """Commands are trimmed and case-folded."""
        result = engine.process_turn("   GO North  ")
        assert result.narrative.startswith("You move north to Hallway.")
        assert engine.player.current_room == "Hallway"

    @pytest.mark.parametrize(
        ("line", "prompt"),
        [("go", "Go where?"), ("take", "Take what?"), ("GO  ", "Go where?")],
    )
    def test_missing_argument(self, engine, line, prompt):
        """Commands missing their argument ask for it."""
        result = engine.process_turn(line)
        assert result.narrative == prompt
        assert engine.player.current_room == "Entrance"
        assert engine.player.inventory == []

    def test_aliases(self, engine):
        """Aliases reach the same handler."""
        assert engine.process_turn("i").narrative == "Your inventory is empty."
        assert engine.process_turn("l").narrative == engine.process_turn("look").narrative

    def test_take_and_inventory(self, engine):
        """Picking up the sword shows in the inventory."""
        result = play(engine, "go north", "take sword", "inventory")
        assert result.narrative == "You are carrying: sword"
        assert engine.world.get_room("Hallway").items == []

    def test_map(self, engine):
        """The map lists every room."""
        result = play(engine, "go north", "map")
        assert "* Hallway" in result.narrative
        assert "  Treasure Room" in result.narrative

    def test_help_lists_commands(self, engine):
        """Help mentions every command once."""
        narrative = engine.process_turn("help").narrative
        assert narrative.startswith("Available commands:")
        for name in ("go", "take", "inventory", "look", "fight", "map", "help", "quit"):
            assert f"- {name}" in narrative
        assert narrative.count("- go ") == 1


class TestFightCommand:
    """Tests for fighting through the engine."""

    def test_nothing_to_fight_is_idempotent(self, engine):
        """Fighting in an empty room repeats the same message."""
        for _ in range(3):
            result = engine.process_turn("fight")
            assert result.narrative == "There's nothing to fight here."
            assert not result.game_over
        assert engine.player.health == 100

    def test_armed_victory_ends_game(self, engine):
        """Winning the fight ends the session with a victory."""
        result = play(engine, "go north", "take sword", "go east", "fight")

        assert result.outcome == GameOutcome.VICTORY
        assert result.game_over
        assert engine.game_over
        assert engine.player.health == 90
        assert result.narrative.endswith("You win!")

    def test_unarmed_victory(self, engine):
        """Fighting bare-handed still wins, at a cost."""
        result = play(engine, "go north", "go east", "fight")

        assert result.outcome == GameOutcome.VICTORY
        assert engine.player.health == 50

    def test_defeat_ends_game(self):
        """Losing the fight ends the session with a defeat."""
        engine = GameEngine.new_game(GameConfig(player_health=20))

        result = play(engine, "go north", "go east", "fight")

        assert result.outcome == GameOutcome.DEFEAT
        assert result.narrative.endswith("You were defeated... Game Over.")

    def test_turns_after_game_over(self, engine):
        """Nothing happens once the game has ended."""
        play(engine, "go north", "go east", "fight")

        result = engine.process_turn("go west")
        assert result.narrative == "The game is over."
        assert engine.player.current_room == "Treasure Room"


class TestQuit:
    """Tests for quitting."""

    def test_quit(self, engine):
        """Quit ends the session silently."""
        result = play(engine, "go north", "take sword", "quit")

        assert result.outcome == GameOutcome.QUIT
        assert result.narrative == ""
        assert engine.game_over

    def test_quit_aliases(self, engine):
        """exit also quits."""
        assert engine.process_turn("EXIT").outcome == GameOutcome.QUIT
