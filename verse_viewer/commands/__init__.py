"""Command parsing and handling for verse-viewer."""

from verse_viewer.commands.parser import parse_command, ParsedCommand
from verse_viewer.commands.handlers import CommandHandler, CommandResult

__all__ = ["parse_command", "ParsedCommand", "CommandHandler", "CommandResult"]
