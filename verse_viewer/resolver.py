"""Reference parsing and fuzzy resolution against a loaded corpus."""

import re
from typing import Optional, Tuple

from verse_viewer.corpus import CorpusIndex
from verse_viewer.data.distance import closest
from verse_viewer.data.types import Reference

# Typed reference: "Book Chapter:Verse", book made of word characters and spaces
REFERENCE_PATTERN = re.compile(r"^(?P<book>[\w\s]+)\s+(?P<chapter>\d+):(?P<verse>\d+)$")

# Stored recent entry, split on the last space
RECENT_PATTERN = re.compile(r"^(?P<book>.*) (?P<chapter>\d+):(?P<verse>\d+)$")


def parse_reference(ref_str: str) -> Optional[Tuple[str, str, str]]:
    """Parse a Bible reference string.

    Supports:
    - "John 3:16" -> ("John", "3", "16")
    - "1 Kings 3:16" -> ("1 Kings", "3", "16")
    - "song of solomon 2:1" -> ("song of solomon", "2", "1")

    Chapter and verse stay strings so they match corpus keys.

    Args:
        ref_str: Reference string

    Returns:
        Tuple of (book, chapter, verse) or None if malformed
    """
    match = REFERENCE_PATTERN.match(ref_str.strip())
    if not match:
        return None
    return (match.group("book").strip(), match.group("chapter"), match.group("verse"))


def resolve_book(fragment: str, index: CorpusIndex) -> Optional[str]:
    """Return the book whose name is closest to ``fragment``."""
    return closest(fragment, index.books)


def resolve(ref_str: str, index: Optional[CorpusIndex]) -> Optional[Reference]:
    """Resolve a typed reference to a verse that exists.

    The book fragment is matched to the nearest book name by edit
    distance; chapter and verse must exist exactly. Malformed input,
    a missing verse or a missing corpus all return None.
    """
    if index is None:
        return None
    parsed = parse_reference(ref_str)
    if not parsed:
        return None

    fragment, chapter, verse = parsed
    book = resolve_book(fragment, index)
    if book is None or not index.exists(book, chapter, verse):
        return None
    return Reference(book, chapter, verse)


def parse_recent(entry: str) -> Optional[Reference]:
    """Split a stored "Book Chapter:Verse" string without fuzzy matching."""
    match = RECENT_PATTERN.match(entry)
    if not match:
        return None
    return Reference(match.group("book"), match.group("chapter"), match.group("verse"))
