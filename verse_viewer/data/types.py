"""Data types for verse-viewer."""

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Reading direction for verse navigation."""

    FORWARD = 1
    BACKWARD = -1


@dataclass(frozen=True)
class Reference:
    """A single verse location. Keys are kept as the corpus stores them."""

    book: str
    chapter: str
    verse: str

    @property
    def reference(self) -> str:
        """Return formatted reference string."""
        return f"{self.book} {self.chapter}:{self.verse}"

    def __str__(self) -> str:
        return self.reference


@dataclass(frozen=True)
class SearchResult:
    """A search match with its verse text."""

    book: str
    chapter: str
    verse: str
    text: str

    @property
    def reference(self) -> str:
        """Return formatted reference string."""
        return f"{self.book} {self.chapter}:{self.verse}"

    def to_reference(self) -> Reference:
        """Drop the text and return the bare location."""
        return Reference(self.book, self.chapter, self.verse)


@dataclass(frozen=True)
class Translation:
    """A known Bible translation and where its JSON lives."""

    code: str
    label: str
    filename: str  # relative to the data directory
