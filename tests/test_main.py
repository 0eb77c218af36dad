"""
Tests for Main Module
Tests command line handling and running a full game.
"""

from unittest.mock import patch

import pytest

from cluedo.config import GameSettings
from cluedo.main import check_api_key, main, run_game
from cluedo.tools import get_active_game


class TestMain:
    """Test argument parsing."""

    def test_unknown_mode(self, capsys):
        """Unknown modes print usage."""
        assert main(["demo"]) == 2
        assert "Usage" in capsys.readouterr().out

    @pytest.mark.parametrize("count", ["1", "7"])
    def test_player_count_out_of_range(self, count):
        """Two to six players."""
        assert main(["auto", count]) == 2

    def test_player_count_not_a_number(self):
        """Player count must be numeric."""
        assert main(["auto", "many"]) == 2

    @patch("cluedo.main.run_game")
    def test_auto_mode(self, mock_run):
        """auto runs computer players with the requested count."""
        assert main(["auto", "4"]) == 0
        assert mock_run.call_args[0][:2] == ("auto", 4)

    @patch("cluedo.main.run_game")
    def test_agents_mode_needs_key(self, mock_run, monkeypatch):
        """Gemini agents need GOOGLE_API_KEY."""
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
        monkeypatch.delenv("CLUEDO_LLM_MODEL", raising=False)
        assert main(["agents", "3"]) == 1
        mock_run.assert_not_called()

    def test_check_api_key_other_provider(self, monkeypatch):
        """Non-Gemini models do not need the Google key."""
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
        assert check_api_key("openai/gpt-4o-mini")


class TestRunGame:
    """Test running a complete computer game."""

    def test_auto_game_has_winner(self, capsys):
        """A seeded computer game finishes with a winner."""
        settings = GameSettings(seed=1, max_turns=2000)
        result = run_game("auto", 3, settings)

        assert result.winner is not None
        out = capsys.readouterr().out
        assert f"Winner: {result.winner.name}" in out
        assert f"Solution: {result.solution}" in out

    def test_tools_unbound_after_game(self):
        """The active game is cleared once the game ends."""
        run_game("auto", 2, GameSettings(seed=2, max_turns=2000))
        with pytest.raises(RuntimeError):
            get_active_game()
