"""Entry point for verse-viewer."""

import argparse
import logging
from typing import List, Optional

from textual.logging import TextualHandler

from verse_viewer.app import VerseViewerApp
from verse_viewer.backend import TRANSLATIONS, find_translation
from verse_viewer.config import get_config

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="verse-viewer",
        description="Look up, search and page through Bible verses.",
    )
    parser.add_argument(
        "--data-dir",
        help="directory holding the translation JSON files",
    )
    parser.add_argument(
        "--translation",
        help="translation to open with ({})".format(", ".join(t.code for t in TRANSLATIONS)),
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=LOG_LEVELS,
        type=str.upper,
        help="logging level (default: %(default)s)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Run the verse-viewer application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, handlers=[TextualHandler()])

    config = get_config()
    if args.data_dir:
        config.data_dir = args.data_dir
    if args.translation:
        translation = find_translation(args.translation)
        if translation is None:
            parser.error(f"unknown translation: {args.translation}")
        config.translation = translation.code

    app = VerseViewerApp(config=config)
    app.run()


if __name__ == "__main__":
    main()
