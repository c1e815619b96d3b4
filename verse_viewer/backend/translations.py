"""Translation discovery and JSON corpus loading."""

import json
import logging
from pathlib import Path
from typing import List, Optional

from verse_viewer.corpus import CorpusIndex
from verse_viewer.data.canon import book_order
from verse_viewer.data.types import Translation

logger = logging.getLogger(__name__)

TRANSLATIONS: List[Translation] = [
    Translation("NASB1995", "NASB 1995", "NASB1995/NASB1995_bible.json"),
    Translation("NIV", "NIV", "NIV/NIV_bible.json"),
    Translation("NKJV", "NKJV", "NKJV/NKJV_bible.json"),
    Translation("NLT", "NLT", "NLT/NLT_bible.json"),
    Translation("RVR1960", "RVR1960", "RVR1960/RVR1960-Spanish.json"),
]

FALLBACK_CODE = "DEMO"


class TranslationError(Exception):
    """A translation could not be loaded."""


class UnknownTranslation(TranslationError):
    """The code is not in the translation table."""


class TranslationNotFound(TranslationError):
    """The translation's JSON file is missing."""


def find_translation(code: str) -> Optional[Translation]:
    """Find a translation by code or label (case-insensitive)."""
    wanted = code.strip().lower()
    for translation in TRANSLATIONS:
        if wanted in (translation.code.lower(), translation.label.lower()):
            return translation
    return None


def translation_path(translation: Translation, data_dir: Path) -> Path:
    """Return where a translation's JSON is expected."""
    return data_dir / translation.filename


def available_translations(data_dir: Path) -> List[Translation]:
    """Return the translations whose JSON file exists under ``data_dir``."""
    return [t for t in TRANSLATIONS if translation_path(t, data_dir).is_file()]


def load_translation(code: str, data_dir: Path) -> CorpusIndex:
    """Load a translation into a corpus index.

    Args:
        code: Translation code or label, e.g. "NIV"
        data_dir: Directory holding the per-translation folders

    Returns:
        CorpusIndex with the translation's canonical book order

    Raises:
        UnknownTranslation: If the code is not known
        TranslationNotFound: If the JSON file does not exist
        TranslationError: If the file cannot be read or is not a corpus
    """
    translation = find_translation(code)
    if translation is None:
        raise UnknownTranslation(f"Unknown translation: {code}")

    path = translation_path(translation, data_dir)
    if not path.is_file():
        raise TranslationNotFound(f"{translation.label} not found at {path}")

    logger.info("Loading %s from %s", translation.code, path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
        raise TranslationError(f"Could not read {path}: {e}") from e

    return index_corpus(data, translation.code)


def index_corpus(data: dict, code: str) -> CorpusIndex:
    """Build an index for loaded data, applying the translation's book order."""
    try:
        index = CorpusIndex(data, book_order(data.keys(), code), translation=code)
    except (ValueError, AttributeError) as e:
        raise TranslationError(f"{code} is not a book/chapter/verse corpus: {e}") from e
    logger.info("Loaded %s: %d books", code, len(index))
    return index


def fallback_corpus() -> CorpusIndex:
    """Return a small built-in corpus used when no translation is installed."""
    return CorpusIndex(_DEMO_DATA, translation=FALLBACK_CODE)


# King James Version, public domain
_DEMO_DATA = {
    "Genesis": {
        "1": {
            "1": "In the beginning God created the heaven and the earth.",
            "2": "And the earth was without form, and void; and darkness was upon the face of the deep. And the Spirit of God moved upon the face of the waters.",
            "3": "And God said, Let there be light: and there was light.",
            "4": "And God saw the light, that it was good: and God divided the light from the darkness.",
            "5": "And God called the light Day, and the darkness he called Night. And the evening and the morning were the first day.",
        },
    },
    "Psalms": {
        "23": {
            "1": "The LORD is my shepherd; I shall not want.",
            "2": "He maketh me to lie down in green pastures: he leadeth me beside the still waters.",
            "3": "He restoreth my soul: he leadeth me in the paths of righteousness for his name's sake.",
            "4": "Yea, though I walk through the valley of the shadow of death, I will fear no evil: for thou art with me; thy rod and thy staff they comfort me.",
            "5": "Thou preparest a table before me in the presence of mine enemies: thou anointest my head with oil; my cup runneth over.",
            "6": "Surely goodness and mercy shall follow me all the days of my life: and I will dwell in the house of the LORD for ever.",
        },
    },
    "John": {
        "3": {
            "16": "For God so loved the world, that he gave his only begotten Son, that whosoever believeth in him should not perish, but have everlasting life.",
            "17": "For God sent not his Son into the world to condemn the world; but that the world through him might be saved.",
        },
    },
}
