"""Tests for configuration."""

import json

from verse_viewer.config import (
    BACKGROUND_COLORS,
    DEFAULT_TRANSLATION,
    TEXT_COLORS,
    Config,
    find_color,
)


class TestConfig:
    """Test loading and saving config."""

    def test_defaults(self, tmp_path):
        """A missing file gives defaults."""
        config = Config.load(tmp_path / "config.json")
        assert config.translation == DEFAULT_TRANSLATION == "NASB1995"
        assert config.text_color == "#1f2937"
        assert config.background_color == "#f3f4f6"
        assert config.search_limit == 5
        assert config.search_delay == 0.15

    def test_save_and_load(self, tmp_path):
        """Saved values load back."""
        path = tmp_path / "sub" / "config.json"
        Config(translation="NIV", data_dir=str(tmp_path), text_color="#2563eb").save(path)
        config = Config.load(path)
        assert config.translation == "NIV"
        assert config.data_dir == str(tmp_path)
        assert config.text_color == "#2563eb"
        assert config.data_path == tmp_path

    def test_partial_file(self, tmp_path):
        """Missing keys fall back to defaults."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"translation": "NLT"}), encoding="utf-8")
        config = Config.load(path)
        assert config.translation == "NLT"
        assert config.search_limit == 5

    def test_corrupt_file(self, tmp_path):
        """Unreadable files give defaults."""
        path = tmp_path / "config.json"
        path.write_text("[1, 2", encoding="utf-8")
        assert Config.load(path) == Config()
        path.write_text('{"search_limit": "many"}', encoding="utf-8")
        assert Config.load(path) == Config()


class TestFindColor:
    """Test named colors."""

    def test_lookup(self):
        """Names ignore case and spaces."""
        assert find_color("blue", TEXT_COLORS) == "#2563eb"
        assert find_color("lightgreen", BACKGROUND_COLORS) == "#f0fdf4"
        assert find_color("Light Pink", BACKGROUND_COLORS) == "#fff3fd"

    def test_unknown(self):
        """Unknown names give None."""
        assert find_color("Brown", TEXT_COLORS) is None
