"""Command handlers for verse-viewer."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from verse_viewer.backend.translations import TRANSLATIONS, find_translation
from verse_viewer.commands.parser import ParsedCommand
from verse_viewer.config import BACKGROUND_COLORS, TEXT_COLORS, find_color
from verse_viewer.resolver import resolve

if TYPE_CHECKING:
    from verse_viewer.app import VerseViewerApp


HELP_TEXT = """
Commands:
  :goto <ref>          - Open a verse, e.g. :goto john 3:16
  :search <text>       - Search verses
  :translation [code]  - Switch translation
  :recent [clear]      - Recent verses
  :color <name>        - Text color
  :background <name>   - Background color
  :quit, :q            - Quit

Keys:
  /       - Search
  Enter   - Open typed reference
  left    - Previous verse
  right   - Next verse
  r       - Recent verses
  t       - Translation picker
  Esc     - Back
  q       - Quit
"""


@dataclass
class CommandResult:
    """Result of command execution."""

    success: bool
    message: str = ""
    action: str = ""  # Special action to take: "quit", "goto", etc.
    data: Optional[dict] = None


class CommandHandler:
    """Handles command execution."""

    def __init__(self, app: "VerseViewerApp") -> None:
        self.app = app

    def execute(self, cmd: ParsedCommand) -> CommandResult:
        """Execute a parsed command.

        Args:
            cmd: Parsed command

        Returns:
            CommandResult with status and message
        """
        if not cmd.name:
            return CommandResult(success=False, message="No command")

        handler_name = f"_cmd_{cmd.name.replace('-', '_')}"
        handler = getattr(self, handler_name, None)

        if handler:
            return handler(cmd)
        return CommandResult(success=False, message=f"Unknown command: {cmd.name}")

    def _cmd_quit(self, cmd: ParsedCommand) -> CommandResult:
        """Handle :quit command."""
        return CommandResult(success=True, action="quit")

    def _cmd_help(self, cmd: ParsedCommand) -> CommandResult:
        """Handle :help command."""
        return CommandResult(success=True, message=HELP_TEXT)

    def _cmd_goto(self, cmd: ParsedCommand) -> CommandResult:
        """Handle :goto command.

        A reference that does not resolve is declined without a message,
        the same as pressing Enter in the search box.
        """
        if not cmd.arg:
            return CommandResult(success=False, message="Usage: :goto <reference>")

        ref = resolve(cmd.arg, self.app.corpus)
        if ref is None:
            return CommandResult(success=False)

        return CommandResult(
            success=True,
            action="goto",
            data={"book": ref.book, "chapter": ref.chapter, "verse": ref.verse},
        )

    def _cmd_search(self, cmd: ParsedCommand) -> CommandResult:
        """Handle :search command."""
        return CommandResult(success=True, action="search", data={"query": cmd.arg})

    def _cmd_translation(self, cmd: ParsedCommand) -> CommandResult:
        """Handle :translation command."""
        if not cmd.arg:
            return CommandResult(success=True, action="translation_picker")

        translation = find_translation(cmd.arg)
        if translation is None:
            known = ", ".join(t.code for t in TRANSLATIONS)
            return CommandResult(
                success=False,
                message=f"Unknown translation: {cmd.arg} (known: {known})",
            )

        return CommandResult(
            success=True,
            action="set_translation",
            data={"translation": translation.code},
        )

    def _cmd_recent(self, cmd: ParsedCommand) -> CommandResult:
        """Handle :recent command."""
        if cmd.first_word.lower() == "clear":
            return CommandResult(success=True, action="clear_recent", message="Recent verses cleared")
        return CommandResult(success=True, action="show_recent")

    def _cmd_color(self, cmd: ParsedCommand) -> CommandResult:
        """Handle :color command."""
        return self._set_color(cmd, TEXT_COLORS, "text_color")

    def _cmd_background(self, cmd: ParsedCommand) -> CommandResult:
        """Handle :background command."""
        return self._set_color(cmd, BACKGROUND_COLORS, "background_color")

    def _set_color(self, cmd: ParsedCommand, options: dict, field_name: str) -> CommandResult:
        """Pick a named color for a config field."""
        choices = ", ".join(options)
        if not cmd.arg:
            return CommandResult(success=False, message=f"Choose one of: {choices}")

        value = find_color(cmd.arg, options)
        if value is None:
            return CommandResult(
                success=False,
                message=f"Unknown color: {cmd.arg} (choose one of: {choices})",
            )

        return CommandResult(
            success=True,
            action="set_color",
            data={"field": field_name, "value": value},
        )
