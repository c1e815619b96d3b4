"""Full-screen single verse view."""

from typing import Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Center, Vertical
from textual.widgets import Static

from verse_viewer.data.types import SearchResult


class VerseView(Vertical, can_focus=True):
    """Shows one verse with its reference and previous/next hints."""

    DEFAULT_CSS = """
    VerseView {
        width: 100%;
        height: 100%;
        align: center middle;
        padding: 1 4;
    }

    VerseView #verse-title {
        width: 100%;
        content-align: center middle;
        text-style: bold;
        margin-bottom: 1;
    }

    VerseView #verse-text {
        width: 100%;
        max-width: 100;
        height: auto;
        content-align: center middle;
        text-align: center;
        text-style: bold;
    }

    VerseView #verse-hints {
        width: 100%;
        content-align: center middle;
        margin-top: 1;
        color: $text-muted;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._result: Optional[SearchResult] = None

    def compose(self) -> ComposeResult:
        yield Static("", id="verse-title")
        with Center():
            yield Static("", id="verse-text")
        yield Static("", id="verse-hints")

    @property
    def result(self) -> Optional[SearchResult]:
        """Return the verse on display."""
        return self._result

    def show(self, result: SearchResult, has_prev: bool, has_next: bool) -> None:
        """Display a verse.

        Args:
            result: Verse to show
            has_prev: Whether the previous verse is in the same chapter
            has_next: Whether the next verse is in the same chapter
        """
        self._result = result
        self.query_one("#verse-title", Static).update(result.reference)
        self.query_one("#verse-text", Static).update(result.text)

        hints = Text()
        hints.append("< prev" if has_prev else "      ", style="bold")
        hints.append("    ")
        hints.append("next >" if has_next else "      ", style="bold")
        self.query_one("#verse-hints", Static).update(hints)

    def clear(self) -> None:
        """Show nothing."""
        self._result = None
        self.query_one("#verse-title", Static).update("")
        self.query_one("#verse-text", Static).update("")
        self.query_one("#verse-hints", Static).update("")

    def set_colors(self, text_color: str, background_color: str) -> None:
        """Apply appearance preferences."""
        self.styles.color = text_color
        self.styles.background = background_color
