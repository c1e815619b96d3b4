"""Translation loading backend."""

from verse_viewer.backend.translations import (
    TRANSLATIONS,
    TranslationError,
    TranslationNotFound,
    UnknownTranslation,
    available_translations,
    fallback_corpus,
    find_translation,
    load_translation,
)

__all__ = [
    "TRANSLATIONS",
    "TranslationError",
    "TranslationNotFound",
    "UnknownTranslation",
    "available_translations",
    "fallback_corpus",
    "find_translation",
    "load_translation",
]
