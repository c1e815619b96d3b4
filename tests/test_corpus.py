"""Tests for the corpus index."""

import pytest

from verse_viewer.corpus import CorpusIndex
from verse_viewer.data.types import Reference, SearchResult

from conftest import SAMPLE_DATA


class TestCorpusIndex:
    """Test ordered access to a corpus."""

    def test_books_in_source_order(self, corpus):
        """Books default to the order of the data."""
        assert corpus.books == ("Genesis", "Exodus", "John", "1 John")
        assert len(corpus) == 4

    def test_explicit_order(self):
        """A book order overrides the source order."""
        index = CorpusIndex(SAMPLE_DATA, ["John", "Genesis", "Exodus", "1 John"])
        assert index.books[0] == "John"

    def test_order_with_unknown_book(self):
        """Ordering a book the data lacks is rejected."""
        with pytest.raises(ValueError):
            CorpusIndex(SAMPLE_DATA, ["Genesis", "Tobit"])

    def test_not_a_mapping(self):
        """Data must be nested mappings."""
        with pytest.raises(ValueError):
            CorpusIndex(["Genesis"])
        with pytest.raises(ValueError):
            CorpusIndex({"Genesis": "In the beginning"})
        with pytest.raises(ValueError):
            CorpusIndex({"Genesis": {"1": ["text"]}})

    def test_chapters_and_verses(self, corpus):
        """Chapter and verse keys keep data order."""
        assert corpus.chapters("Genesis") == ("1", "2")
        assert corpus.verses("Genesis", "1") == ("1", "2", "3")
        assert corpus.verses("John", "3") == ("16", "17")

    def test_unknown_keys_empty(self, corpus):
        """Unknown books and chapters have no keys."""
        assert corpus.chapters("Tobit") == ()
        assert corpus.verses("Genesis", "50") == ()

    def test_text(self, corpus):
        """Text lookup by keys."""
        assert corpus.text("Genesis", "1", "3").startswith("And God said")
        assert corpus.text("Genesis", "1", "9") is None

    def test_exists_requires_text(self):
        """A verse with empty text does not exist."""
        index = CorpusIndex({"Genesis": {"1": {"1": "", "2": "text"}}})
        assert not index.exists("Genesis", "1", "1")
        assert index.exists("Genesis", "1", "2")

    def test_contains(self, corpus):
        """References can be checked with ``in``."""
        assert Reference("John", "3", "16") in corpus
        assert Reference("John", "3", "18") not in corpus
        assert "John 3:16" not in corpus

    def test_lookup(self, corpus):
        """Lookup returns the verse with its text."""
        result = corpus.lookup(Reference("Exodus", "1", "2"))
        assert result == SearchResult("Exodus", "1", "2", "Reuben, Simeon, Levi, and Judah.")
        assert corpus.lookup(Reference("Exodus", "2", "1")) is None

    def test_iter_verses_reading_order(self, corpus):
        """Iteration walks books, chapters and verses in order."""
        refs = [r.reference for r in corpus.iter_verses()]
        assert refs[:4] == ["Genesis 1:1", "Genesis 1:2", "Genesis 1:3", "Genesis 2:1"]
        assert refs[-1] == "1 John 1:1"
        assert len(refs) == corpus.verse_count() == 10

    def test_first_and_last(self, corpus, sparse_corpus):
        """First and last verses skip empty chapters."""
        assert corpus.first_reference() == Reference("Genesis", "1", "1")
        assert corpus.last_reference() == Reference("1 John", "1", "1")
        assert sparse_corpus.last_reference() == Reference("Gamma", "1", "2")

    def test_empty_corpus(self):
        """An empty corpus has no first or last verse."""
        index = CorpusIndex({})
        assert index.first_reference() is None
        assert index.last_reference() is None
        assert index.verse_count() == 0
