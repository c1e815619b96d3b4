"""Tests for canon module."""

from verse_viewer.data.canon import FIXED_ORDERS, book_index, book_order, next_book, prev_book


class TestBookOrder:
    """Test canonical book ordering."""

    def test_source_order_kept(self):
        """Without a fixed order the source order is used."""
        books = ["Exodus", "Genesis", "John"]
        assert book_order(books) == books
        assert book_order(books, "NIV") == books

    def test_duplicates_dropped(self):
        """Repeated names appear once."""
        assert book_order(["Genesis", "Genesis", "Exodus"]) == ["Genesis", "Exodus"]

    def test_rvr1960_reordered(self):
        """RVR1960 follows its fixed order."""
        books = ["San Juan", "Éxodo", "Génesis"]
        assert book_order(books, "RVR1960") == ["Génesis", "Éxodo", "San Juan"]

    def test_unlisted_books_appended(self):
        """Books outside the fixed order stay reachable at the end."""
        books = ["Apéndice", "San Juan", "Génesis"]
        assert book_order(books, "RVR1960") == ["Génesis", "San Juan", "Apéndice"]

    def test_rvr1960_has_66_books(self):
        """The Spanish order lists the whole canon."""
        assert len(FIXED_ORDERS["RVR1960"]) == 66
        assert FIXED_ORDERS["RVR1960"][0] == "Génesis"
        assert FIXED_ORDERS["RVR1960"][-1] == "Apocalipsis"


class TestBookNavigation:
    """Test book index helpers."""

    ORDER = ["Genesis", "Exodus", "Leviticus"]

    def test_book_index(self):
        """Test book index lookup."""
        assert book_index("Genesis", self.ORDER) == 0
        assert book_index("Leviticus", self.ORDER) == 2
        assert book_index("NonExistent", self.ORDER) == -1

    def test_next_book(self):
        """Next book stops at the end."""
        assert next_book("Genesis", self.ORDER) == "Exodus"
        assert next_book("Leviticus", self.ORDER) is None

    def test_prev_book(self):
        """Previous book stops at the start."""
        assert prev_book("Exodus", self.ORDER) == "Genesis"
        assert prev_book("Genesis", self.ORDER) is None
