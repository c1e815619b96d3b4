"""Translation picker widget."""

from typing import List, Sequence

from rich.text import Text
from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import ListItem, ListView, Static

from verse_viewer.data.types import Translation


class TranslationPicker(Widget):
    """Widget for choosing the translation to read."""

    DEFAULT_CSS = """
    TranslationPicker {
        width: 50;
        dock: top;
        height: 14;
        background: $surface;
        border: solid $primary;
        padding: 1;
    }

    TranslationPicker > .picker-title {
        height: 1;
        text-style: bold;
        color: $primary;
    }

    TranslationPicker > .picker-list {
        height: 1fr;
    }

    TranslationPicker > .picker-hint {
        height: 1;
        color: $text-muted;
    }
    """

    class TranslationSelected(Message):
        """Message sent when a translation is selected."""

        def __init__(self, translation: Translation) -> None:
            self.translation = translation
            super().__init__()

    class Cancelled(Message):
        """Message sent when picker is cancelled."""

        pass

    def __init__(
        self,
        translations: List[Translation],
        current: str = "",
        available: Sequence[str] = (),
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._translations = list(translations)
        self._current = current
        self._available = set(available)

    def compose(self) -> ComposeResult:
        yield Static("Translation", classes="picker-title")
        yield ListView(classes="picker-list", id="picker-list")
        yield Static("Enter=select, Esc=cancel", classes="picker-hint")

    def on_mount(self) -> None:
        """Fill the list and focus it."""
        lst = self.query_one("#picker-list", ListView)
        current_index = 0
        for i, translation in enumerate(self._translations):
            text = Text()
            if translation.code == self._current:
                text.append("* ", style="bold green")
                current_index = i
            else:
                text.append("  ")
            style = "bold cyan" if translation.code in self._available else "dim"
            text.append(translation.label.ljust(12), style=style)
            if translation.code not in self._available:
                text.append("not installed", style="dim italic")
            lst.append(ListItem(Static(text)))
        if self._translations:
            lst.index = current_index
        lst.focus()

    def on_key(self, event) -> None:
        """Handle key events."""
        if event.key == "escape":
            event.stop()
            self.post_message(self.Cancelled())

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Handle list item selection."""
        event.stop()
        lst = self.query_one("#picker-list", ListView)
        if lst.index is not None and lst.index < len(self._translations):
            self.post_message(self.TranslationSelected(self._translations[lst.index]))
