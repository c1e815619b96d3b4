"""Incremental verse search over a loaded corpus."""

import re
from typing import List, Optional

from verse_viewer.corpus import CorpusIndex
from verse_viewer.data.distance import distance
from verse_viewer.data.types import SearchResult
from verse_viewer.resolver import resolve_book

DEFAULT_LIMIT = 5

# Book names within this many edits of the whole query match every verse
BOOK_MATCH_DISTANCE = 2

# Looser than the resolver pattern: anything may precede "chapter:verse"
_QUERY_REFERENCE = re.compile(r"^(?P<book>.+?)\s+(?P<chapter>\d+):(?P<verse>\d+)$")


def search(
    query: str,
    index: Optional[CorpusIndex],
    limit: int = DEFAULT_LIMIT,
) -> List[SearchResult]:
    """Search the corpus for a reference or a phrase.

    A query shaped like "book chapter:verse" is a single targeted lookup
    with fuzzy book matching. Anything else scans in reading order and
    keeps the first ``limit`` verses where the book name is close to the
    query, the reference string contains it, or the verse text does.

    Args:
        query: Raw text from the search box
        index: Loaded corpus, or None while nothing is loaded
        limit: Maximum number of results

    Returns:
        Matches in reading order
    """
    if index is None or not query.strip():
        return []

    term = query.lower().strip()

    match = _QUERY_REFERENCE.match(term)
    if match:
        return _lookup_reference(
            index,
            match.group("book").strip(),
            match.group("chapter"),
            match.group("verse"),
        )

    results: List[SearchResult] = []
    for book in index.books:
        if len(results) >= limit:
            break
        # Same for every verse in the book
        book_matches = distance(term, book.lower()) <= BOOK_MATCH_DISTANCE

        for chapter in index.chapters(book):
            if len(results) >= limit:
                break
            for verse in index.verses(book, chapter):
                if len(results) >= limit:
                    break
                text = index.text(book, chapter, verse) or ""
                reference = f"{book} {chapter}:{verse}".lower()
                if book_matches or term in reference or term in text.lower():
                    results.append(SearchResult(book, chapter, verse, text))

    return results


def _lookup_reference(
    index: CorpusIndex, fragment: str, chapter: str, verse: str
) -> List[SearchResult]:
    """Return the single verse a reference-shaped query points at."""
    book = resolve_book(fragment, index)
    if book is None:
        return []
    text = index.text(book, chapter, verse)
    if not text:
        return []
    return [SearchResult(book, chapter, verse, text)]


class SearchScheduler:
    """Bookkeeping for debounced searches.

    Every scheduled search gets a token; only the newest token may
    publish results. Scheduling again or cancelling makes earlier
    tokens stale.
    """

    def __init__(self) -> None:
        self._generation = 0

    def schedule(self) -> int:
        """Start a new search and return its token."""
        self._generation += 1
        return self._generation

    def cancel(self) -> None:
        """Invalidate every outstanding search."""
        self._generation += 1

    def is_current(self, token: int) -> bool:
        """Check whether a token belongs to the newest search."""
        return token == self._generation
