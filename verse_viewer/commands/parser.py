"""Parser for the ':' command line."""

from dataclasses import dataclass
from typing import Dict, List


@dataclass
class ParsedCommand:
    """A command name and the text typed after it."""

    name: str
    arg: str = ""
    raw: str = ""

    @property
    def words(self) -> List[str]:
        """Return the argument split on whitespace."""
        return self.arg.split()

    @property
    def first_word(self) -> str:
        """Get the first word of the argument or empty string."""
        words = self.words
        return words[0] if words else ""


# Short forms accepted for each command
COMMAND_ALIASES: Dict[str, str] = {
    "q": "quit",
    "h": "help",
    "g": "goto",
    "t": "translation",
    "tr": "translation",
    "r": "recent",
    "bg": "background",
    "s": "search",
}

_QUOTES = "\"'"


def parse_command(command_str: str) -> ParsedCommand:
    """Split a command line into its name and argument text.

    The argument is kept as typed apart from outer whitespace, so
    references like "John's 3:16" or "1 John 1:1" reach the resolver
    intact. One pair of surrounding quotes is removed, which lets
    :background "light green" work as well as :background light green.

    Args:
        command_str: Text of the command line, with or without the leading ':'

    Returns:
        ParsedCommand with the alias-resolved, lowercased name
    """
    raw = command_str.strip()
    if raw.startswith(":"):
        raw = raw[1:].lstrip()
    if not raw:
        return ParsedCommand(name="", raw=raw)

    parts = raw.split(None, 1)
    name = parts[0].lower()
    name = COMMAND_ALIASES.get(name, name)
    arg = _unquote(parts[1].strip()) if len(parts) > 1 else ""
    return ParsedCommand(name=name, arg=arg, raw=raw)


def _unquote(text: str) -> str:
    if len(text) >= 2 and text[0] in _QUOTES and text[-1] == text[0]:
        return text[1:-1].strip()
    return text


def get_command_names() -> List[str]:
    """Get list of available command names.

    Returns:
        List of command names for completion
    """
    return [
        "quit",
        "help",
        "goto",
        "search",
        "translation",
        "recent",
        "color",
        "background",
    ]
