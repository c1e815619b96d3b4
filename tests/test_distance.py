"""Tests for edit distance helpers."""

from verse_viewer.data.distance import closest, distance


class TestDistance:
    """Test Levenshtein distance."""

    def test_identical(self):
        """Equal strings are zero apart."""
        assert distance("genesis", "genesis") == 0

    def test_classic_example(self):
        """kitten -> sitting takes three edits."""
        assert distance("kitten", "sitting") == 3

    def test_empty(self):
        """Distance to the empty string is the length."""
        assert distance("", "john") == 4

    def test_case_sensitive(self):
        """Comparison itself does not fold case."""
        assert distance("John", "john") == 1

    def test_symmetric(self):
        """Order of arguments does not matter."""
        for a, b in [("genesis", "exodus"), ("jhn", "1 john"), ("", "ruth")]:
            assert distance(a, b) == distance(b, a)


class TestClosest:
    """Test nearest name lookup."""

    def test_exact(self):
        """Exact names win."""
        assert closest("Exodus", ["Genesis", "Exodus"]) == "Exodus"

    def test_ignores_case(self):
        """Fragment and names are compared lowercased."""
        assert closest("GENESIS", ["Genesis", "Exodus"]) == "Genesis"

    def test_typo(self):
        """A misspelling picks the nearest name."""
        assert closest("jhn", ["Genesis", "John", "1 John"]) == "John"

    def test_tie_goes_to_first(self):
        """Equal distances keep the earliest name."""
        assert closest("jon", ["John", "Job"]) == "John"
        assert closest("jon", ["Job", "John"]) == "Job"

    def test_empty_names(self):
        """No candidates gives None."""
        assert closest("john", []) is None
