"""Search box with a live list of matching verses."""

import re
from typing import List, Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Input, ListItem, ListView, Static

from verse_viewer.data.types import SearchResult

# Longest snippet shown per result
SNIPPET_LENGTH = 120


class ResultList(ListView):
    """List of search results with the query highlighted."""

    DEFAULT_CSS = """
    ResultList {
        height: auto;
        max-height: 20;
        background: $surface;
    }

    ResultList > ListItem {
        padding: 0 1;
        height: auto;
    }

    ResultList > ListItem.--highlight {
        background: $accent;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._results: List[SearchResult] = []
        self._query = ""

    @property
    def results(self) -> List[SearchResult]:
        """Return the results on display."""
        return list(self._results)

    def set_results(self, results: List[SearchResult], query: str) -> None:
        """Replace the displayed results."""
        self._results = list(results)
        self._query = query
        self.clear()
        for result in self._results:
            self.append(ListItem(Static(self._render_result(result))))
        if self._results:
            self.index = 0

    def clear_results(self) -> None:
        """Remove all results."""
        self._results = []
        self._query = ""
        self.clear()

    def get_selected_result(self) -> Optional[SearchResult]:
        """Return the highlighted result, if any."""
        if self.index is not None and 0 <= self.index < len(self._results):
            return self._results[self.index]
        return None

    def _render_result(self, result: SearchResult) -> Text:
        """Render a reference line and a highlighted snippet."""
        text = Text()
        text.append(result.reference, style="bold")
        text.append("\n")
        snippet = result.text
        if len(snippet) > SNIPPET_LENGTH:
            snippet = snippet[: SNIPPET_LENGTH - 3] + "..."
        self._append_with_highlight(text, snippet)
        return text

    def _append_with_highlight(self, text: Text, content: str) -> None:
        """Append text with search term highlighting."""
        if not self._query:
            text.append(content, style="dim")
            return

        pattern = re.compile(re.escape(self._query), re.IGNORECASE)
        last_end = 0
        for match in pattern.finditer(content):
            if match.start() > last_end:
                text.append(content[last_end : match.start()], style="dim")
            text.append(match.group(), style="bold black on yellow")
            last_end = match.end()
        if last_end < len(content):
            text.append(content[last_end:], style="dim")


class SearchView(Vertical):
    """Search input, live results and a status line."""

    DEFAULT_CSS = """
    SearchView {
        width: 100%;
        max-width: 80;
        height: auto;
    }

    SearchView #search-label {
        text-style: bold;
        height: 1;
    }

    SearchView #search-status {
        height: auto;
        color: $text-muted;
        padding: 0 1;
    }
    """

    class QueryChanged(Message):
        """The search text changed."""

        def __init__(self, query: str) -> None:
            self.query = query
            super().__init__()

    class ReferenceSubmitted(Message):
        """Enter was pressed in the search box."""

        def __init__(self, text: str) -> None:
            self.text = text
            super().__init__()

    class ResultChosen(Message):
        """A search result was picked."""

        def __init__(self, result: SearchResult) -> None:
            self.result = result
            super().__init__()

    def compose(self) -> ComposeResult:
        yield Static("Search for a verse", id="search-label")
        yield Input(
            placeholder="Type book name, chapter, and verse...",
            id="search-input",
        )
        yield Static("", id="search-status")
        yield ResultList(id="result-list")

    @property
    def input_widget(self) -> Input:
        """Get the input widget."""
        return self.query_one("#search-input", Input)

    @property
    def result_list(self) -> ResultList:
        """Get the result list."""
        return self.query_one("#result-list", ResultList)

    @property
    def value(self) -> str:
        """Return the current search text."""
        return self.input_widget.value

    def focus_input(self) -> None:
        """Put the cursor in the search box."""
        self.input_widget.focus()

    def clear(self) -> None:
        """Empty the search box and results."""
        self.input_widget.value = ""
        self.clear_results()

    def show_searching(self) -> None:
        """Indicate that a search is pending."""
        self.query_one("#search-status", Static).update("Searching...")

    def set_results(self, results: List[SearchResult], query: str) -> None:
        """Show completed search results."""
        status = self.query_one("#search-status", Static)
        if results:
            status.update("")
        else:
            status.update(f'No verses found matching "{query}"')
        self.result_list.set_results(results, query.strip())

    def clear_results(self) -> None:
        """Hide results and status."""
        self.query_one("#search-status", Static).update("")
        self.result_list.clear_results()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Forward search text changes."""
        if event.input.id != "search-input":
            return
        event.stop()
        self.post_message(self.QueryChanged(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Forward Enter as a reference lookup."""
        if event.input.id != "search-input":
            return
        event.stop()
        self.post_message(self.ReferenceSubmitted(event.value))

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Forward a picked result."""
        event.stop()
        result = self.result_list.get_selected_result()
        if result:
            self.post_message(self.ResultChosen(result))

    def on_key(self, event) -> None:
        """Move between the search box and the results."""
        if event.key == "down" and self.input_widget.has_focus and self.result_list.results:
            event.stop()
            self.result_list.focus()
        elif event.key == "up" and self.result_list.has_focus and self.result_list.index in (0, None):
            event.stop()
            self.focus_input()
