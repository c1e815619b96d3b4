"""Recently viewed verses, most recent first."""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from verse_viewer.config import CONFIG_DIR

logger = logging.getLogger(__name__)

MAX_RECENT = 20
RECENT_FILE = CONFIG_DIR / "recent.json"


def record(recent: Sequence[str], reference: str) -> List[str]:
    """Return a new list with ``reference`` moved or added to the front.

    Existing occurrences are removed first and the result is capped at
    MAX_RECENT entries, so the oldest entry drops off.
    """
    updated = [reference]
    updated.extend(entry for entry in recent if entry != reference)
    return updated[:MAX_RECENT]


def normalize(entries: Iterable[str]) -> List[str]:
    """Deduplicate and cap a list read from outside, keeping its order."""
    result: List[str] = []
    for entry in entries:
        if isinstance(entry, str) and entry not in result:
            result.append(entry)
    return result[:MAX_RECENT]


class RecentStore:
    """Loads and saves the recent list as JSON."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path or RECENT_FILE

    @property
    def path(self) -> Path:
        """Return the backing file path."""
        return self._path

    def load(self) -> List[str]:
        """Load recent entries, or an empty list if none can be read."""
        if not self._path.exists():
            return []
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable recent list %s: %s", self._path, e)
            return []
        if not isinstance(data, dict) or not isinstance(data.get("recent"), list):
            logger.warning("Ignoring malformed recent list %s", self._path)
            return []
        return normalize(data["recent"])

    def save(self, recent: Sequence[str]) -> None:
        """Write recent entries to disk."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w", encoding="utf-8") as f:
            json.dump({"recent": list(recent)}, f, indent=2, ensure_ascii=False)
        logger.debug("Saved %d recent verses to %s", len(recent), self._path)
