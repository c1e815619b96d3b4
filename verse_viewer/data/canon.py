"""Canonical book orders and book-level navigation helpers."""

from typing import Dict, Iterable, List, Optional, Sequence


# Reina-Valera 1960 ships its books out of canonical order
_RVR1960_ORDER: Sequence[str] = (
    # Antiguo Testamento
    "Génesis", "Éxodo", "Levítico", "Números", "Deuteronomio",
    "Josué", "Jueces", "Rut", "1 Samuel", "2 Samuel",
    "1 Reyes", "2 Reyes", "1 Crónicas", "2 Crónicas", "Esdras",
    "Nehemías", "Ester", "Job", "Salmos", "Proverbios",
    "Eclesiastés", "Cantares", "Isaías", "Jeremías", "Lamentaciones",
    "Ezequiel", "Daniel", "Oseas", "Joel", "Amós",
    "Abdías", "Jonás", "Miqueas", "Nahúm", "Habacuc",
    "Sofonías", "Hageo", "Zacarías", "Malaquías",
    # Nuevo Testamento
    "San Mateo", "San Marcos", "San Lucas", "San Juan", "Hechos",
    "Romanos", "1 Corintios", "2 Corintios", "Gálatas", "Efesios",
    "Filipenses", "Colosenses", "1 Tesalonicenses", "2 Tesalonicenses", "1 Timoteo",
    "2 Timoteo", "Tito", "Filemón", "Hebreos", "Santiago",
    "1 Pedro", "2 Pedro", "1 Juan", "2 Juan", "3 Juan",
    "Judas", "Apocalipsis",
)

# Translations whose loaded book order is replaced by a fixed one
FIXED_ORDERS: Dict[str, Sequence[str]] = {
    "RVR1960": _RVR1960_ORDER,
}


def book_order(books: Iterable[str], translation: str = "") -> List[str]:
    """Return the canonical book order for a loaded corpus.

    Without a fixed order for ``translation`` the source order is kept.
    A fixed order is filtered to the books present; books it does not
    name are appended in source order so every book stays reachable.
    """
    present = list(dict.fromkeys(books))
    fixed = FIXED_ORDERS.get(translation)
    if not fixed:
        return present

    available = set(present)
    ordered = [name for name in fixed if name in available]
    seen = set(ordered)
    ordered.extend(name for name in present if name not in seen)
    return ordered


def book_index(name: str, order: Sequence[str]) -> int:
    """Return the index of a book in ``order`` (0-based), or -1."""
    try:
        return list(order).index(name)
    except ValueError:
        return -1


def next_book(name: str, order: Sequence[str]) -> Optional[str]:
    """Return the book after ``name``, or None at the end."""
    idx = book_index(name, order)
    if 0 <= idx < len(order) - 1:
        return order[idx + 1]
    return None


def prev_book(name: str, order: Sequence[str]) -> Optional[str]:
    """Return the book before ``name``, or None at the start."""
    idx = book_index(name, order)
    if idx > 0:
        return order[idx - 1]
    return None
