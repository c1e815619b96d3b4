"""Verse-by-verse navigation in reading order across chapters and books."""

from typing import Iterable, Optional

from verse_viewer.corpus import CorpusIndex
from verse_viewer.data.canon import next_book, prev_book
from verse_viewer.data.types import Direction, Reference


def step(ref: Reference, direction: Direction, index: CorpusIndex) -> Reference:
    """Return the adjacent verse in reading order.

    Forward moves to the next verse of the chapter, then the first verse
    of the next chapter, then the first verse of the next book. Backward
    mirrors this with last verses. Chapters or books without verses are
    skipped. At either end of the corpus, or for a reference the corpus
    does not contain, ``ref`` is returned unchanged.
    """
    if ref not in index:
        return ref

    forward = direction is Direction.FORWARD
    books = index.books
    chapters = index.chapters(ref.book)
    verses = index.verses(ref.book, ref.chapter)

    v_idx = verses.index(ref.verse)
    if forward and v_idx < len(verses) - 1:
        return Reference(ref.book, ref.chapter, verses[v_idx + 1])
    if not forward and v_idx > 0:
        return Reference(ref.book, ref.chapter, verses[v_idx - 1])

    c_idx = chapters.index(ref.chapter)
    later = chapters[c_idx + 1:] if forward else reversed(chapters[:c_idx])
    found = _edge_of(index, ref.book, later, forward)
    if found:
        return found

    adjacent = next_book if forward else prev_book
    book = adjacent(ref.book, books)
    while book is not None:
        book_chapters = index.chapters(book)
        found = _edge_of(index, book, book_chapters if forward else reversed(book_chapters), forward)
        if found:
            return found
        book = adjacent(book, books)

    return ref


def _edge_of(
    index: CorpusIndex, book: str, chapters: Iterable[str], forward: bool
) -> Optional[Reference]:
    """Return the first (or last) verse of the first chapter that has any."""
    for chapter in chapters:
        verses = index.verses(book, chapter)
        if verses:
            return Reference(book, chapter, verses[0] if forward else verses[-1])
    return None


def next_verse(ref: Reference, index: CorpusIndex) -> Reference:
    """Step one verse forward."""
    return step(ref, Direction.FORWARD, index)


def prev_verse(ref: Reference, index: CorpusIndex) -> Reference:
    """Step one verse backward."""
    return step(ref, Direction.BACKWARD, index)


def can_step(ref: Reference, direction: Direction, index: CorpusIndex) -> bool:
    """Check whether a step would move off ``ref``."""
    return step(ref, direction, index) != ref


def has_neighbour_in_chapter(ref: Reference, direction: Direction, index: CorpusIndex) -> bool:
    """Check whether the adjacent verse lies in the same chapter."""
    verses = index.verses(ref.book, ref.chapter)
    if ref.verse not in verses:
        return False
    v_idx = verses.index(ref.verse)
    if direction is Direction.FORWARD:
        return v_idx < len(verses) - 1
    return v_idx > 0
