"""Ordered index over a loaded book -> chapter -> verse -> text corpus."""

from typing import Dict, Iterator, Mapping, Optional, Sequence, Tuple

from verse_viewer.data.types import Reference, SearchResult

CorpusData = Mapping[str, Mapping[str, Mapping[str, str]]]


class CorpusIndex:
    """A loaded translation plus its canonical book order.

    The index is built once per load and never mutated; switching
    translation means building a new one. Chapter and verse key lists
    keep the corpus's own key order and are computed on first use.
    """

    def __init__(
        self,
        data: CorpusData,
        book_order: Optional[Sequence[str]] = None,
        translation: str = "",
    ) -> None:
        """Wrap a corpus mapping.

        Args:
            data: Nested mapping of book -> chapter -> verse -> text
            book_order: Traversal order of books (defaults to source order)
            translation: Code of the translation the data came from

        Raises:
            ValueError: If the data is not a nested mapping or the order
                names a book the data does not contain
        """
        if not isinstance(data, Mapping):
            raise ValueError("Corpus must be a mapping of books")
        for book, chapters in data.items():
            if not isinstance(chapters, Mapping):
                raise ValueError(f"Book {book!r} must map chapters to verses")
            for chapter, verses in chapters.items():
                if not isinstance(verses, Mapping):
                    raise ValueError(f"{book} {chapter} must map verses to text")

        order = tuple(dict.fromkeys(book_order if book_order is not None else data.keys()))
        missing = [name for name in order if name not in data]
        if missing:
            raise ValueError(f"Book order names unknown books: {', '.join(missing)}")

        self._data = data
        self._books: Tuple[str, ...] = order
        self.translation = translation
        self._chapters: Dict[str, Tuple[str, ...]] = {}
        self._verses: Dict[Tuple[str, str], Tuple[str, ...]] = {}

    @property
    def books(self) -> Tuple[str, ...]:
        """Return the canonical book order."""
        return self._books

    def chapters(self, book: str) -> Tuple[str, ...]:
        """Return the ordered chapter keys of a book (empty if unknown)."""
        keys = self._chapters.get(book)
        if keys is None:
            keys = tuple(self._data.get(book, {}).keys())
            self._chapters[book] = keys
        return keys

    def verses(self, book: str, chapter: str) -> Tuple[str, ...]:
        """Return the ordered verse keys of a chapter (empty if unknown)."""
        keys = self._verses.get((book, chapter))
        if keys is None:
            keys = tuple(self._data.get(book, {}).get(chapter, {}).keys())
            self._verses[(book, chapter)] = keys
        return keys

    def text(self, book: str, chapter: str, verse: str) -> Optional[str]:
        """Return the verse text, or None if the verse does not exist."""
        return self._data.get(book, {}).get(chapter, {}).get(verse)

    def exists(self, book: str, chapter: str, verse: str) -> bool:
        """Check that a verse exists and has text."""
        return bool(self.text(book, chapter, verse))

    def __contains__(self, ref: object) -> bool:
        if not isinstance(ref, Reference):
            return False
        return self.exists(ref.book, ref.chapter, ref.verse)

    def lookup(self, ref: Reference) -> Optional[SearchResult]:
        """Materialize a reference with its text."""
        text = self.text(ref.book, ref.chapter, ref.verse)
        if not text:
            return None
        return SearchResult(ref.book, ref.chapter, ref.verse, text)

    def iter_verses(self) -> Iterator[SearchResult]:
        """Yield every verse in reading order (book, chapter, verse)."""
        for book in self._books:
            chapters = self._data[book]
            for chapter in self.chapters(book):
                verses = chapters[chapter]
                for verse in self.verses(book, chapter):
                    yield SearchResult(book, chapter, verse, verses[verse])

    def first_reference(self) -> Optional[Reference]:
        """Return the first verse in reading order."""
        for result in self.iter_verses():
            return result.to_reference()
        return None

    def last_reference(self) -> Optional[Reference]:
        """Return the last verse in reading order."""
        for book in reversed(self._books):
            for chapter in reversed(self.chapters(book)):
                verses = self.verses(book, chapter)
                if verses:
                    return Reference(book, chapter, verses[-1])
        return None

    def verse_count(self) -> int:
        """Return the total number of verses."""
        return sum(
            len(self.verses(book, chapter))
            for book in self._books
            for chapter in self.chapters(book)
        )

    def __len__(self) -> int:
        return len(self._books)

    def __repr__(self) -> str:
        return f"CorpusIndex(translation={self.translation!r}, books={len(self._books)})"
