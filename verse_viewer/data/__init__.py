"""Data types and Bible metadata."""

from verse_viewer.data.types import Direction, Reference, SearchResult, Translation
from verse_viewer.data.canon import (
    FIXED_ORDERS,
    book_index,
    book_order,
    next_book,
    prev_book,
)
from verse_viewer.data.distance import closest, distance

__all__ = [
    "Direction",
    "Reference",
    "SearchResult",
    "Translation",
    "FIXED_ORDERS",
    "book_index",
    "book_order",
    "next_book",
    "prev_book",
    "closest",
    "distance",
]
