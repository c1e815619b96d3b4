"""Edit distance helpers for fuzzy book-name matching."""

from typing import Iterable, Optional

from Levenshtein import distance as _levenshtein


def distance(a: str, b: str) -> int:
    """Return the Levenshtein distance between two strings.

    Callers lowercase both sides first; the comparison itself is exact.
    """
    return _levenshtein(a, b)


def closest(fragment: str, names: Iterable[str]) -> Optional[str]:
    """Return the name closest to ``fragment``, compared case-insensitively.

    Ties go to the first name in iteration order. Returns None when
    ``names`` is empty.
    """
    needle = fragment.lower()
    best: Optional[str] = None
    best_dist = 0
    for name in names:
        dist = distance(needle, name.lower())
        if best is None or dist < best_dist:
            best = name
            best_dist = dist
    return best
