"""Shared fixtures for verse-viewer tests."""

import json

import pytest

from verse_viewer.corpus import CorpusIndex

SAMPLE_DATA = {
    "Genesis": {
        "1": {
            "1": "In the beginning God created the heaven and the earth.",
            "2": "And the earth was without form, and void.",
            "3": "And God said, Let there be light: and there was light.",
        },
        "2": {
            "1": "Thus the heavens and the earth were finished.",
            "2": "And on the seventh day God ended his work.",
        },
    },
    "Exodus": {
        "1": {
            "1": "Now these are the names of the children of Israel.",
            "2": "Reuben, Simeon, Levi, and Judah.",
        },
    },
    "John": {
        "3": {
            "16": "For God so loved the world, that he gave his only begotten Son.",
            "17": "For God sent not his Son into the world to condemn the world.",
        },
    },
    "1 John": {
        "1": {
            "1": "That which was from the beginning, which we have heard.",
        },
    },
}

# Chapters and books without verses
SPARSE_DATA = {
    "Alpha": {
        "1": {"1": "first"},
        "2": {},
        "3": {"1": "second"},
    },
    "Beta": {
        "1": {},
    },
    "Gamma": {
        "1": {"1": "third", "2": "fourth"},
    },
}


@pytest.fixture
def corpus():
    """Small corpus in reading order."""
    return CorpusIndex(SAMPLE_DATA, translation="TEST")


@pytest.fixture
def sparse_corpus():
    """Corpus with empty chapters and an empty book."""
    return CorpusIndex(SPARSE_DATA)


@pytest.fixture
def data_dir(tmp_path):
    """Data directory with an NIV file holding the sample corpus."""
    niv = tmp_path / "data" / "NIV"
    niv.mkdir(parents=True)
    with open(niv / "NIV_bible.json", "w", encoding="utf-8") as f:
        json.dump(SAMPLE_DATA, f)
    return tmp_path / "data"
