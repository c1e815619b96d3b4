"""Main Textual application for verse-viewer."""

import logging
from functools import partial
from pathlib import Path
from typing import List, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical
from textual.timer import Timer
from textual.widgets import Header
from textual.worker import Worker, WorkerState

from verse_viewer.backend import (
    TRANSLATIONS,
    available_translations,
    fallback_corpus,
    find_translation,
    load_translation,
)
from verse_viewer.backend.translations import FALLBACK_CODE
from verse_viewer.commands import CommandHandler, CommandResult, parse_command
from verse_viewer.commands.parser import get_command_names
from verse_viewer.config import Config, get_config
from verse_viewer.corpus import CorpusIndex
from verse_viewer.data.types import Direction, Reference
from verse_viewer.history import RecentStore, record
from verse_viewer.navigation import has_neighbour_in_chapter, step
from verse_viewer.resolver import parse_recent, resolve
from verse_viewer.search import SearchScheduler, search
from verse_viewer.widgets import (
    CommandInput,
    RecentSelected,
    RecentView,
    SearchView,
    StatusBar,
    TranslationPicker,
    VerseView,
)

logger = logging.getLogger(__name__)


class VerseViewerApp(App):
    """Verse lookup and reading application."""

    TITLE = "Verse Viewer"

    CSS = """
    #main-area {
        height: 1fr;
        align: center top;
        padding: 2 2;
    }

    #verse-view {
        height: 1fr;
    }

    #recent-area {
        height: 1fr;
        padding: 1 2;
    }
    """

    BINDINGS = [
        Binding("ctrl+r", "show_recent", "Recent", priority=True),
        Binding("ctrl+t", "translation_picker", "Translation", priority=True),
        Binding("q", "quit", "Quit", show=False),
        Binding("left", "prev_verse", "Previous verse", show=False),
        Binding("right", "next_verse", "Next verse", show=False),
        Binding("slash", "focus_search", "Search", show=False),
        Binding("r", "show_recent", "Recent", show=False),
        Binding("t", "translation_picker", "Translation", show=False),
        Binding("colon", "command_mode", "Command", show=False),
        Binding("escape", "escape", "Back", show=False),
    ]

    def __init__(
        self,
        config: Optional[Config] = None,
        store: Optional[RecentStore] = None,
        config_path: Optional[Path] = None,
    ) -> None:
        super().__init__()

        self._config = config or get_config()
        self._config_path = config_path
        self._store = store or RecentStore()
        self._recent: List[str] = self._store.load()

        # Corpus and cursor are replaced together when the translation changes
        self._translation = self._config.translation
        self._corpus: Optional[CorpusIndex] = None
        self._cursor: Optional[Reference] = None
        self._load_worker: Optional[Worker] = None

        # Screen state: "main", "verse" or "recent"
        self._mode = "main"
        self._prev_mode = "main"
        self._in_command_mode = False
        self._in_picker_mode = False

        # Debounced live search
        self._scheduler = SearchScheduler()
        self._search_timer: Optional[Timer] = None

        self._command_handler = CommandHandler(self)

    @property
    def corpus(self) -> Optional[CorpusIndex]:
        """Return the loaded corpus, or None while loading."""
        return self._corpus

    @property
    def cursor(self) -> Optional[Reference]:
        """Return the verse on display."""
        return self._cursor

    @property
    def recent(self) -> List[str]:
        """Return a copy of the recent list."""
        return list(self._recent)

    @property
    def mode(self) -> str:
        """Return the current screen mode."""
        return self._mode

    @property
    def config(self) -> Config:
        """Return the session config."""
        return self._config

    def compose(self) -> ComposeResult:
        """Create the UI layout."""
        yield Header()
        with Vertical(id="main-area"):
            yield SearchView(id="search-view")
        yield VerseView(id="verse-view")
        with Center(id="recent-area"):
            yield RecentView(id="recent-view")
        yield CommandInput(
            commands=get_command_names(),
            translations=[t.code for t in TRANSLATIONS],
            id="command-input",
        )
        yield StatusBar(id="status-bar")

    def on_mount(self) -> None:
        """Initialize the app after mounting."""
        self.query_one("#command-input").display = False
        self._apply_colors()
        self._show_mode("main")
        self._start_load(self._translation)

    # ==================== Modes ====================

    def _show_mode(self, mode: str) -> None:
        """Switch between the search, verse and recent screens."""
        self._mode = mode
        self.query_one("#main-area").display = mode == "main"
        self.query_one("#verse-view").display = mode == "verse"
        self.query_one("#recent-area").display = mode == "recent"
        self.query_one("#status-bar", StatusBar).set_mode(mode)

        if mode == "main":
            self.query_one("#search-view", SearchView).focus_input()
        elif mode == "verse":
            self.query_one("#verse-view", VerseView).focus()
        elif mode == "recent":
            recent_view = self.query_one("#recent-view", RecentView)
            recent_view.update_entries(self._recent)
            recent_view.focus_list()

    def action_escape(self) -> None:
        """Go back one screen, or clear the search box on the main screen."""
        if self._mode == "recent":
            back = self._prev_mode
            if back == "verse" and self._cursor is None:
                back = "main"
            self._show_mode(back)
        elif self._mode == "verse":
            self._show_mode("main")
        else:
            search_view = self.query_one("#search-view", SearchView)
            if search_view.value:
                search_view.clear()

    def action_focus_search(self) -> None:
        """Return to the search box."""
        self._show_mode("main")

    def action_show_recent(self) -> None:
        """Open the recent verses list."""
        if self._mode == "recent" or self._in_command_mode:
            return
        self._prev_mode = self._mode
        self._show_mode("recent")

    # ==================== Translation loading ====================

    def _start_load(self, code: str) -> None:
        """Load a translation in a worker.

        The previous corpus and cursor are dropped at once, so nothing can
        navigate until the new corpus is installed.
        """
        self._translation = code
        self._set_corpus(None)

        translation = find_translation(code)
        label = translation.label if translation else code
        self.query_one("#status-bar", StatusBar).set_translation(label, loading=True)

        self._load_worker = self.run_worker(
            partial(load_translation, code, self._config.data_path),
            name=code,
            group="load",
            thread=True,
            exclusive=True,
            exit_on_error=False,
        )

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Install a finished translation load."""
        worker = event.worker
        if worker is not self._load_worker:
            # Superseded by a newer load
            return

        if event.state == WorkerState.SUCCESS:
            self._load_worker = None
            self._install_corpus(worker.result)
        elif event.state == WorkerState.ERROR:
            self._load_worker = None
            logger.error("Could not load %s: %s", worker.name, worker.error)
            self._install_corpus(fallback_corpus())
            self.query_one("#status-bar", StatusBar).show_message(
                f"{worker.error} - showing demo verses"
            )

    def _set_corpus(self, index: Optional[CorpusIndex]) -> None:
        """Replace the corpus, clearing the cursor and any search state."""
        self._corpus = index
        self._cursor = None
        self._cancel_search()
        self.query_one("#search-view", SearchView).clear_results()
        self.query_one("#verse-view", VerseView).clear()
        self.query_one("#status-bar", StatusBar).set_reference("")
        if self._mode == "verse":
            self._show_mode("main")

    def _install_corpus(self, index: CorpusIndex) -> None:
        """Make a loaded corpus current and refresh the live search."""
        self._set_corpus(index)
        if index.translation == FALLBACK_CODE:
            label = "Demo"
        else:
            translation = find_translation(index.translation)
            label = translation.label if translation else index.translation
        self.query_one("#status-bar", StatusBar).set_translation(label)
        logger.info("Using %s (%d verses)", index.translation, index.verse_count())

        query = self.query_one("#search-view", SearchView).value
        if query.strip():
            self._schedule_search(query)

    def _switch_translation(self, code: str) -> None:
        """Persist and load another translation."""
        if self._corpus is not None and self._corpus.translation == code:
            return
        self._config.translation = code
        self._save_config()
        self._start_load(code)

    def action_translation_picker(self) -> None:
        """Open the translation picker."""
        if self._in_picker_mode or self._in_command_mode:
            return
        self._in_picker_mode = True
        available = [t.code for t in available_translations(self._config.data_path)]
        picker = TranslationPicker(TRANSLATIONS, current=self._translation, available=available)
        self.mount(picker)

    def on_translation_picker_translation_selected(
        self, event: TranslationPicker.TranslationSelected
    ) -> None:
        """Handle translation selection from picker."""
        self._close_picker()
        self._switch_translation(event.translation.code)

    def on_translation_picker_cancelled(self, event: TranslationPicker.Cancelled) -> None:
        """Handle picker cancellation."""
        self._close_picker()

    def _close_picker(self) -> None:
        """Remove the picker and restore focus."""
        for picker in self.query(TranslationPicker):
            picker.remove()
        self._in_picker_mode = False
        self._show_mode(self._mode)

    # ==================== Search ====================

    def on_search_view_query_changed(self, event: SearchView.QueryChanged) -> None:
        """Schedule a live search for the new text."""
        self._schedule_search(event.query)

    def _schedule_search(self, query: str) -> None:
        """Run a search after the configured delay, superseding older ones."""
        self._cancel_search()
        search_view = self.query_one("#search-view", SearchView)
        if self._corpus is None or not query.strip():
            search_view.clear_results()
            return

        token = self._scheduler.schedule()
        search_view.show_searching()
        self._search_timer = self.set_timer(
            self._config.search_delay, partial(self._run_search, query, token)
        )

    def _cancel_search(self) -> None:
        """Stop the pending search timer and invalidate running searches."""
        if self._search_timer is not None:
            self._search_timer.stop()
            self._search_timer = None
        self._scheduler.cancel()

    def _run_search(self, query: str, token: int) -> None:
        """Search and publish results if this is still the newest search."""
        if not self._scheduler.is_current(token):
            return
        self._search_timer = None
        results = search(query, self._corpus, self._config.search_limit)
        self.query_one("#search-view", SearchView).set_results(results, query)

    def on_search_view_reference_submitted(self, event: SearchView.ReferenceSubmitted) -> None:
        """Open a typed reference. Unresolvable input is ignored."""
        ref = resolve(event.text, self._corpus)
        if ref is None:
            return
        self._cancel_search()
        self.query_one("#search-view", SearchView).clear_results()
        self._open_verse(ref, remember=True)

    def on_search_view_result_chosen(self, event: SearchView.ResultChosen) -> None:
        """Open a picked search result."""
        self.query_one("#search-view", SearchView).clear()
        self._cancel_search()
        self._open_verse(event.result.to_reference(), remember=True)

    # ==================== Verses ====================

    def _open_verse(self, ref: Reference, remember: bool = False) -> None:
        """Show a verse full screen, optionally recording it as recent."""
        self._cursor = ref
        if remember:
            self._remember(ref.reference)
        self._render_cursor()
        self._show_mode("verse")

    def _render_cursor(self) -> None:
        """Redraw the verse view for the cursor."""
        if self._corpus is None or self._cursor is None:
            return
        result = self._corpus.lookup(self._cursor)
        if result is None:
            return
        self.query_one("#verse-view", VerseView).show(
            result,
            has_prev=has_neighbour_in_chapter(self._cursor, Direction.BACKWARD, self._corpus),
            has_next=has_neighbour_in_chapter(self._cursor, Direction.FORWARD, self._corpus),
        )
        self.query_one("#status-bar", StatusBar).set_reference(self._cursor.reference)

    def action_next_verse(self) -> None:
        """Move to the next verse (right arrow)."""
        self._step(Direction.FORWARD)

    def action_prev_verse(self) -> None:
        """Move to the previous verse (left arrow)."""
        self._step(Direction.BACKWARD)

    def _step(self, direction: Direction) -> None:
        """Step the cursor when a verse is on display."""
        if self._mode != "verse" or self._corpus is None or self._cursor is None:
            return
        moved = step(self._cursor, direction, self._corpus)
        if moved != self._cursor:
            self._cursor = moved
            self._render_cursor()

    # ==================== Recent verses ====================

    def _remember(self, reference: str) -> None:
        """Record a reference as most recent and persist the list."""
        self._recent = record(self._recent, reference)
        self._save_recent()

    def _save_recent(self) -> None:
        try:
            self._store.save(self._recent)
        except OSError as e:
            logger.warning("Could not save recent verses: %s", e)

    def on_recent_selected(self, message: RecentSelected) -> None:
        """Open a recent entry if it exists in the loaded translation."""
        ref = parse_recent(message.entry)
        if ref is None or self._corpus is None or ref not in self._corpus:
            return
        self._open_verse(ref)

    # ==================== Command Mode ====================

    def action_command_mode(self) -> None:
        """Enter command mode."""
        if self._in_command_mode or self._in_picker_mode:
            return
        self._in_command_mode = True
        status = self.query_one("#status-bar", StatusBar)
        status.display = False
        cmd_input = self.query_one("#command-input", CommandInput)
        cmd_input.display = True
        cmd_input.reset()
        cmd_input.focus()

    def _close_command_mode(self) -> None:
        """Close command mode."""
        self._in_command_mode = False
        self.query_one("#command-input", CommandInput).display = False
        self.query_one("#status-bar", StatusBar).display = True
        self._show_mode(self._mode)

    def on_command_input_command_submitted(self, event: CommandInput.CommandSubmitted) -> None:
        """Handle submitted command."""
        self._close_command_mode()
        result = self._command_handler.execute(parse_command(event.command))
        self._handle_command_result(result)

    def on_command_input_command_cancelled(self, event: CommandInput.CommandCancelled) -> None:
        """Handle cancelled command."""
        self._close_command_mode()

    def _handle_command_result(self, result: CommandResult) -> None:
        """Carry out the action a command asked for."""
        status = self.query_one("#status-bar", StatusBar)
        data = result.data or {}

        if result.action == "quit":
            self.exit()
            return
        elif result.action == "goto":
            self._open_verse(Reference(data["book"], data["chapter"], data["verse"]), remember=True)
        elif result.action == "search":
            self._show_mode("main")
            self.query_one("#search-view", SearchView).input_widget.value = data.get("query", "")
        elif result.action == "translation_picker":
            self.action_translation_picker()
        elif result.action == "set_translation":
            self._switch_translation(data["translation"])
        elif result.action == "show_recent":
            self.action_show_recent()
        elif result.action == "clear_recent":
            self._recent = []
            self._save_recent()
            if self._mode == "recent":
                self._show_mode("recent")
        elif result.action == "set_color":
            setattr(self._config, data["field"], data["value"])
            self._apply_colors()
            self._save_config()

        if result.message:
            if "\n" in result.message:
                self.notify(result.message, title="Help", timeout=30)
            else:
                status.show_message(result.message)

    # ==================== Preferences ====================

    def _apply_colors(self) -> None:
        self.query_one("#verse-view", VerseView).set_colors(
            self._config.text_color, self._config.background_color
        )

    def _save_config(self) -> None:
        try:
            self._config.save(self._config_path)
        except OSError as e:
            logger.warning("Could not save config: %s", e)
