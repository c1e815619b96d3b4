"""Textual widgets for verse-viewer."""

from verse_viewer.widgets.command_input import CommandInput
from verse_viewer.widgets.recent_view import RecentSelected, RecentView
from verse_viewer.widgets.search_view import ResultList, SearchView
from verse_viewer.widgets.status_bar import StatusBar
from verse_viewer.widgets.translation_picker import TranslationPicker
from verse_viewer.widgets.verse_view import VerseView

__all__ = [
    "CommandInput",
    "RecentSelected",
    "RecentView",
    "ResultList",
    "SearchView",
    "StatusBar",
    "TranslationPicker",
    "VerseView",
]
