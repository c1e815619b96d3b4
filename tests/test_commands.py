"""Tests for command parsing and handling."""

from types import SimpleNamespace

import pytest

from verse_viewer.commands import CommandHandler, parse_command
from verse_viewer.commands.parser import COMMAND_ALIASES, get_command_names


class TestParseCommand:
    """Test command parsing."""

    def test_simple_command(self):
        """Simple command should parse."""
        cmd = parse_command("quit")
        assert cmd.name == "quit"
        assert cmd.arg == ""
        assert cmd.words == []

    def test_command_alias(self):
        """Command aliases should resolve."""
        assert parse_command("q").name == "quit"
        cmd = parse_command("T NIV")
        assert cmd.name == "translation"
        assert cmd.arg == "NIV"

    def test_leading_colon(self):
        """A typed ':' prefix is ignored."""
        cmd = parse_command(":goto john 3:16")
        assert cmd.name == "goto"
        assert cmd.arg == "john 3:16"

    def test_argument_verbatim(self):
        """Argument text keeps inner spacing and apostrophes."""
        assert parse_command("goto 1 john  1:1").arg == "1 john  1:1"
        assert parse_command("goto John's 3:16").arg == "John's 3:16"

    def test_quoted_argument(self):
        """One pair of surrounding quotes is removed."""
        assert parse_command('background "light green"').arg == "light green"
        assert parse_command("background 'light green'").arg == "light green"

    def test_unbalanced_quotes_kept(self):
        """Unmatched quotes stay in the argument."""
        assert parse_command('goto "john 3:16').arg == '"john 3:16'

    def test_words(self):
        """Words split the argument on whitespace."""
        cmd = parse_command("recent clear now")
        assert cmd.words == ["clear", "now"]
        assert cmd.first_word == "clear"
        assert parse_command("recent").first_word == ""

    def test_empty_command(self):
        """Empty command should return empty name."""
        assert parse_command("").name == ""
        assert parse_command("   ").name == ""
        assert parse_command(":").name == ""

    def test_aliases_target_commands(self):
        """Every alias points at a known command."""
        names = get_command_names()
        for target in COMMAND_ALIASES.values():
            assert target in names


class TestCommandHandler:
    """Test command results."""

    @pytest.fixture
    def handler(self, corpus):
        return CommandHandler(SimpleNamespace(corpus=corpus))

    def test_unknown(self, handler):
        """Unknown commands are reported."""
        result = handler.execute(parse_command("frobnicate"))
        assert not result.success
        assert result.message == "Unknown command: frobnicate"

    def test_empty(self, handler):
        """Empty input is not a command."""
        assert not handler.execute(parse_command("")).success

    def test_quit(self, handler):
        """Quit asks the app to exit."""
        assert handler.execute(parse_command("q")).action == "quit"

    def test_help(self, handler):
        """Help returns the command summary."""
        result = handler.execute(parse_command("help"))
        assert ":goto" in result.message

    def test_goto(self, handler):
        """Goto resolves with fuzzy book names."""
        result = handler.execute(parse_command("goto jhn 3:16"))
        assert result.success
        assert result.action == "goto"
        assert result.data == {"book": "John", "chapter": "3", "verse": "16"}

    def test_goto_unresolved(self, handler):
        """Unresolved references are declined without a message."""
        result = handler.execute(parse_command("goto john 3:99"))
        assert not result.success
        assert result.action == ""
        assert result.message == ""

    def test_goto_without_corpus(self):
        """Nothing resolves before a corpus loads."""
        handler = CommandHandler(SimpleNamespace(corpus=None))
        assert not handler.execute(parse_command("goto john 3:16")).success

    def test_goto_usage(self, handler):
        """Goto needs a reference."""
        assert handler.execute(parse_command("goto")).message.startswith("Usage")

    def test_search(self, handler):
        """Search carries its query."""
        result = handler.execute(parse_command("search the light"))
        assert result.action == "search"
        assert result.data == {"query": "the light"}

    def test_translation_picker(self, handler):
        """Translation without a code opens the picker."""
        assert handler.execute(parse_command("translation")).action == "translation_picker"

    def test_set_translation(self, handler):
        """Translation codes are normalized."""
        result = handler.execute(parse_command("tr niv"))
        assert result.action == "set_translation"
        assert result.data == {"translation": "NIV"}

    def test_unknown_translation(self, handler):
        """Unknown translations list the known ones."""
        result = handler.execute(parse_command("translation KJV"))
        assert not result.success
        assert "RVR1960" in result.message

    def test_recent(self, handler):
        """Recent shows or clears the list."""
        assert handler.execute(parse_command("recent")).action == "show_recent"
        assert handler.execute(parse_command("recent clear")).action == "clear_recent"
        assert handler.execute(parse_command("r CLEAR")).action == "clear_recent"

    def test_color(self, handler):
        """Named text colors map to hex values."""
        result = handler.execute(parse_command("color Blue"))
        assert result.action == "set_color"
        assert result.data == {"field": "text_color", "value": "#2563eb"}

    def test_background(self, handler):
        """Background names may contain spaces."""
        result = handler.execute(parse_command("bg light green"))
        assert result.data == {"field": "background_color", "value": "#f0fdf4"}

    def test_unknown_color(self, handler):
        """Unknown colors list the choices."""
        result = handler.execute(parse_command("color orange"))
        assert not result.success
        assert "Purple" in result.message
        assert handler.execute(parse_command("color")).message.startswith("Choose one of")
