"""Configuration management for verse-viewer."""

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, Optional


logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "verse-viewer"
CONFIG_FILE = CONFIG_DIR / "config.json"
DEFAULT_DATA_DIR = Path.home() / ".local" / "share" / "verse-viewer"

DEFAULT_TRANSLATION = "NASB1995"

# Appearance choices, name -> hex color
TEXT_COLORS: Dict[str, str] = {
    "Black": "#1f2937",
    "White": "#ffffff",
    "Blue": "#2563eb",
    "Purple": "#7c3aed",
    "Green": "#059669",
    "Red": "#e11d48",
}
BACKGROUND_COLORS: Dict[str, str] = {
    "White": "#f3f4f6",
    "Black": "#000000",
    "Brown": "#271608",
    "Light Pink": "#fff3fd",
    "Light Purple": "#faf5ff",
    "Light Green": "#f0fdf4",
}


def find_color(name: str, options: Dict[str, str]) -> Optional[str]:
    """Look up a color by name, ignoring case and spacing."""
    wanted = name.lower().replace(" ", "")
    for label, value in options.items():
        if label.lower().replace(" ", "") == wanted:
            return value
    return None


@dataclass
class Config:
    """Application configuration."""

    translation: str = DEFAULT_TRANSLATION
    data_dir: str = str(DEFAULT_DATA_DIR)
    text_color: str = TEXT_COLORS["Black"]
    background_color: str = BACKGROUND_COLORS["White"]
    search_limit: int = 5
    search_delay: float = 0.15

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load config from file, or return defaults."""
        path = path or CONFIG_FILE
        if not path.exists():
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            defaults = cls()
            return cls(
                translation=data.get("translation", defaults.translation),
                data_dir=data.get("data_dir", defaults.data_dir),
                text_color=data.get("text_color", defaults.text_color),
                background_color=data.get("background_color", defaults.background_color),
                search_limit=int(data.get("search_limit", defaults.search_limit)),
                search_delay=float(data.get("search_delay", defaults.search_delay)),
            )
        except (json.JSONDecodeError, OSError, AttributeError, TypeError, ValueError) as e:
            logger.warning("Using default config, could not read %s: %s", path, e)
            return cls()

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to file."""
        path = path or CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent=2)

    @property
    def data_path(self) -> Path:
        """Return the translation data directory as a path."""
        return Path(self.data_dir).expanduser()


def get_config() -> Config:
    """Get the application config."""
    return Config.load()
