"""Ex-style command line."""

from typing import List, Optional

from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, Static

MAX_HISTORY = 50


class CommandInput(Widget):
    """Command line with history and completion of names and arguments."""

    DEFAULT_CSS = """
    CommandInput {
        dock: bottom;
        height: 1;
        layout: horizontal;
        background: $surface;
    }

    CommandInput > .command-prefix {
        width: 1;
        height: 1;
        color: $text;
    }

    CommandInput > .command-text {
        width: 1fr;
        height: 1;
        border: none;
        padding: 0;
        background: $surface;
    }

    CommandInput > .command-text:focus {
        border: none;
    }
    """

    class CommandSubmitted(Message):
        """Message sent when a command is submitted."""

        def __init__(self, command: str) -> None:
            self.command = command
            super().__init__()

    class CommandCancelled(Message):
        """Message sent when command input is cancelled."""

        pass

    def __init__(
        self,
        commands: Optional[List[str]] = None,
        translations: Optional[List[str]] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._commands = commands or []
        self._translations = translations or []
        self._history: List[str] = []
        self._history_index = -1
        self._saved_input = ""

    def compose(self) -> ComposeResult:
        yield Static(":", classes="command-prefix")
        yield Input(placeholder="", classes="command-text", id="cmd-input")

    @property
    def input_widget(self) -> Input:
        """Get the input widget."""
        return self.query_one("#cmd-input", Input)

    def reset(self) -> None:
        """Empty the line and leave history browsing."""
        self.input_widget.value = ""
        self._history_index = -1
        self._saved_input = ""

    def focus(self, scroll_visible: bool = True) -> None:
        """Focus the input widget."""
        self.input_widget.focus(scroll_visible=scroll_visible)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key."""
        event.stop()
        command = self.input_widget.value.strip()
        if command:
            self._add_to_history(command)
        self.post_message(self.CommandSubmitted(command))

    def on_key(self, event) -> None:
        """Handle special keys."""
        key = event.key
        if key == "escape":
            event.prevent_default()
            event.stop()
            self.post_message(self.CommandCancelled())
        elif key == "up":
            event.prevent_default()
            event.stop()
            self._history_previous()
        elif key == "down":
            event.prevent_default()
            event.stop()
            self._history_next()
        elif key == "tab":
            event.prevent_default()
            event.stop()
            self._complete()

    def _add_to_history(self, command: str) -> None:
        """Append a command, skipping repeats of the last one."""
        if self._history and self._history[-1] == command:
            return
        self._history.append(command)
        if len(self._history) > MAX_HISTORY:
            self._history = self._history[-MAX_HISTORY:]

    def _history_previous(self) -> None:
        """Navigate to previous history entry."""
        if not self._history:
            return
        if self._history_index == -1:
            self._saved_input = self.input_widget.value
            self._history_index = len(self._history) - 1
        elif self._history_index > 0:
            self._history_index -= 1
        self.input_widget.value = self._history[self._history_index]

    def _history_next(self) -> None:
        """Navigate to next history entry."""
        if self._history_index == -1:
            return
        if self._history_index < len(self._history) - 1:
            self._history_index += 1
            self.input_widget.value = self._history[self._history_index]
        else:
            self._history_index = -1
            self.input_widget.value = self._saved_input

    def _complete(self) -> None:
        """Complete the command name, or a translation code after :translation."""
        current = self.input_widget.value.lstrip()
        if not current:
            return

        parts = current.split(maxsplit=1)
        if len(parts) == 1 and not current.endswith(" "):
            completed = _complete_word(parts[0], self._commands)
            if completed:
                self.input_widget.value = completed
            return

        if parts[0] in ("translation", "t", "tr"):
            arg = parts[1] if len(parts) > 1 else ""
            completed = _complete_word(arg, self._translations, case_sensitive=False)
            if completed:
                self.input_widget.value = f"{parts[0]} {completed}"


def _complete_word(word: str, options: List[str], case_sensitive: bool = True) -> str:
    """Return ``word`` extended to a unique option or the common prefix.

    A unique match gets a trailing space. Returns "" when nothing
    extends the word.
    """
    def fold(s: str) -> str:
        return s if case_sensitive else s.lower()

    matches = [o for o in options if fold(o).startswith(fold(word))]
    if len(matches) == 1:
        return matches[0] + " "
    if len(matches) > 1:
        common = matches[0]
        for match in matches[1:]:
            while not fold(match).startswith(fold(common)):
                common = common[:-1]
        if len(common) > len(word):
            return common
    return ""
