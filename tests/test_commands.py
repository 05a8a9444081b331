"""Tests for the command classifier."""

import pytest

from bot.commands import ABOUT, BOT_COMMANDS, START, About, Query, Start, classify


class TestClassify:
    @pytest.mark.parametrize("text", ["/start", "/START", "/Start", "/sTaRt"])
    def test_start_any_case(self, text):
        assert classify(text) == Start()

    @pytest.mark.parametrize("text", ["/about", "/ABOUT", "/About"])
    def test_about_any_case(self, text):
        assert classify(text) == About()

    @pytest.mark.parametrize(
        "text",
        [
            "cats",
            "/unknown",
            "/start now",
            "/start@PhotoBot",
            " /start",
            "/about ",
            "   ",
            "Закат над морем",
        ],
    )
    def test_everything_else_is_query(self, text):
        assert classify(text) == Query(text)

    def test_query_text_is_verbatim(self):
        """Case and surrounding whitespace of a query are preserved."""
        command = classify("  Red Cars ")
        assert isinstance(command, Query)
        assert command.text == "  Red Cars "


class TestBotCommands:
    def test_registered_commands_match_classifier(self):
        names = {"/" + c.command for c in BOT_COMMANDS}
        assert names == {START, ABOUT}

    def test_descriptions_present(self):
        assert all(c.description for c in BOT_COMMANDS)
