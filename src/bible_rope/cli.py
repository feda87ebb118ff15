#!/usr/bin/env python3
"""
CLI for Bible Rope - Loads plain-text Bible translations and looks up a verse in all of them.

Usage:
    python -m bible_rope                                   # All translations in the index
    python -m bible_rope --translation "King James Bible"  # Only one translation
    python -m bible_rope --file kjv.txt --file web.txt     # Local files instead of the index
    python -m bible_rope --book John --chapterNumber 3 --verseNumber 16
"""

import argparse
import logging
from typing import Optional

from .config import (
    DEFAULT_INDEX_URL,
    DEFAULT_RETRIES,
    DEFAULT_TIMEOUT,
    Settings,
    log_level_for,
)
from .fetcher import (
    FetchError,
    fetch_bible_index,
    fetch_translations,
    load_translation,
    make_session,
    read_translation_files,
)
from .lookup import run_lookup
from .models import Translation
from .parser import ParseError

logger = logging.getLogger(__name__)


# =============================================================================
# Loading
# =============================================================================

def load_translations(
    settings: Settings,
    files: Optional[list[str]] = None,
    titles: Optional[list[str]] = None,
) -> list[Translation]:
    """
    Load translations from local files, or from the index when no files are given.

    A translation with an unparsable line is reported and left out.

    Raises:
        FetchError: if the index or any translation text cannot be retrieved
    """
    if files:
        texts = read_translation_files(files)
    else:
        with make_session(settings) as session:
            index = fetch_bible_index(settings.index_url, session, settings.timeout)
            for title in titles or []:
                if title not in index:
                    logger.warning("Translation %r is not in the index", title)
            texts = fetch_translations(index, session, settings, titles)

    translations = []
    for title, source, text in texts:
        try:
            translations.append(load_translation(title, text, source, settings))
        except ParseError as e:
            logger.error("Could not load %s (%s): %s", title, source, e)
    return translations


# =============================================================================
# CLI Entry Point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Look up a Bible verse across several plain-text translations."
    )
    parser.add_argument(
        "--book",
        type=str,
        help="The name of the book, like Genesis, Mark, Luke, capitalized"
    )
    parser.add_argument(
        "--chapterNumber",
        type=int,
        help="The number of the chapter, like 3 in John 3:16"
    )
    parser.add_argument(
        "--verseNumber",
        type=int,
        help="The number of the verse, like 16 in John 3:16"
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--file", "-f",
        dest="files",
        action="append",
        metavar="PATH",
        help="Load a translation from a local file (repeatable); skips the index"
    )
    source.add_argument(
        "--translation", "-t",
        dest="titles",
        action="append",
        metavar="TITLE",
        help="Only download this translation from the index (repeatable)"
    )
    parser.add_argument(
        "--index-url",
        type=str,
        default=DEFAULT_INDEX_URL,
        help=f"URL of the 'title = url' Bible index (default: {DEFAULT_INDEX_URL})"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Seconds to wait for each HTTP request (default: {DEFAULT_TIMEOUT:g})"
    )
    parser.add_argument(
        "--retries",
        type=int,
        default=DEFAULT_RETRIES,
        help=f"Retries for failed HTTP requests (default: {DEFAULT_RETRIES})"
    )
    parser.add_argument(
        "--skip-bad-lines",
        action="store_true",
        help="Skip unparsable verse lines instead of rejecting the translation"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Show progress (-v) or debugging output (-vv)"
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=log_level_for(args.verbose),
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = Settings(
        index_url=args.index_url,
        timeout=args.timeout,
        retries=args.retries,
        skip_bad_lines=args.skip_bad_lines,
    )

    try:
        translations = load_translations(settings, files=args.files, titles=args.titles)
    except FetchError as e:
        logger.error("%s", e)
        return 1

    if not translations:
        logger.error("No translations could be loaded")
        return 1

    try:
        run_lookup(
            translations,
            book=args.book,
            chapter=args.chapterNumber,
            verse=args.verseNumber,
        )
    except (EOFError, KeyboardInterrupt):
        print("\nNo verse selected.")
        return 1

    return 0


if __name__ == "__main__":
    exit(main())
