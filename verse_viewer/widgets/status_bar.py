"""Status bar widget."""

from typing import Optional

from rich.text import Text
from textual.widgets import Static


class StatusBar(Static):
    """Status bar showing the current verse, translation and key hints."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)
        self._mode = "main"
        self._reference = ""
        self._translation = ""
        self._loading = False
        self._message: Optional[str] = None

    def set_mode(self, mode: str) -> None:
        """Set the current mode: main, verse, recent, command."""
        self._mode = mode
        self._message = None
        self._update()

    def set_reference(self, reference: str) -> None:
        """Set the reference of the verse on display."""
        self._reference = reference
        self._update()

    def set_translation(self, label: str, loading: bool = False) -> None:
        """Set the translation label and loading state."""
        self._translation = label
        self._loading = loading
        self._update()

    def show_message(self, message: str) -> None:
        """Show a temporary message."""
        self._message = message
        self._update()

    def clear_message(self) -> None:
        """Clear the temporary message."""
        self._message = None
        self._update()

    def _update(self) -> None:
        """Update the status bar display."""
        text = Text()

        if self._reference:
            text.append(self._reference, style="bold")

        if self._translation:
            if self._reference:
                text.append(" | ")
            text.append(f"[{self._translation}]", style="cyan")
            if self._loading:
                text.append(" loading...", style="italic")

        if self._message:
            text.append("  ")
            text.append(self._message, style="yellow")
        else:
            hints = self._get_hints()
            if hints:
                text.append("  ")
                for i, (key, desc) in enumerate(hints):
                    if i > 0:
                        text.append(" ", style="dim")
                    text.append(key, style="bold yellow")
                    text.append(f" {desc}", style="dim")

        self.update(text)

    def _get_hints(self) -> list[tuple[str, str]]:
        """Get keybinding hints for the current mode."""
        if self._mode == "main":
            return [
                ("Enter", "go"),
                ("down", "results"),
                ("^R", "recent"),
                ("^T", "translation"),
            ]
        elif self._mode == "verse":
            return [
                ("left/right", "verse"),
                ("/", "search"),
                ("r", "recent"),
                (":", "command"),
                ("Esc", "back"),
            ]
        elif self._mode == "recent":
            return [
                ("up/down", "select"),
                ("Enter", "open"),
                ("Esc", "close"),
            ]
        elif self._mode == "command":
            return [
                ("Enter", "run"),
                ("Esc", "cancel"),
            ]
        return []
