"""Recent verses view."""

from typing import List, Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import ListItem, ListView, Static


class RecentSelected(Message):
    """Message sent when a recent entry is selected for navigation."""

    def __init__(self, entry: str) -> None:
        self.entry = entry
        super().__init__()


class RecentView(Vertical):
    """Widget showing recently viewed verses, newest first."""

    DEFAULT_CSS = """
    RecentView {
        width: 100%;
        max-width: 60;
        height: auto;
        border: round $primary;
        padding: 0 1;
    }

    RecentView > #recent-header {
        height: 1;
        text-style: bold;
    }

    RecentView > #recent-list {
        height: auto;
        max-height: 22;
    }

    RecentView > #recent-list > ListItem {
        padding: 0 1;
    }

    RecentView .no-entries {
        padding: 1;
        color: $text-muted;
        text-style: italic;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._entries: List[str] = []

    def compose(self) -> ComposeResult:
        yield Static("Recent Verses", id="recent-header")
        yield Static("No recent verses", classes="no-entries", id="recent-empty")
        yield ListView(id="recent-list")

    @property
    def list_widget(self) -> ListView:
        """Get the list widget."""
        return self.query_one("#recent-list", ListView)

    def update_entries(self, entries: List[str]) -> None:
        """Fill the list, marking the newest entry."""
        self._entries = list(entries)
        self.query_one("#recent-empty", Static).display = not self._entries

        lst = self.list_widget
        lst.clear()
        for i, entry in enumerate(self._entries):
            text = Text()
            text.append(entry, style="bold")
            if i == 0:
                text.append("  Most Recent", style="dim")
            lst.append(ListItem(Static(text)))
        if self._entries:
            lst.index = 0

    def get_selected_entry(self) -> Optional[str]:
        """Return the highlighted entry."""
        index = self.list_widget.index
        if index is not None and 0 <= index < len(self._entries):
            return self._entries[index]
        return None

    def focus_list(self) -> None:
        """Focus the list."""
        self.list_widget.focus()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Forward a picked entry."""
        event.stop()
        entry = self.get_selected_entry()
        if entry is not None:
            self.post_message(RecentSelected(entry))
