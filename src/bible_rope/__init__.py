"""
Bible Rope - Loads plain-text Bible translations and looks up verses across them.
"""

from .models import VerseRecord, VerseTable, Translation
from .parser import (
    ParseError,
    LinePatternError,
    VerseNumberError,
    parse_verse,
    build_verse_table,
    parse_bible_index,
)
from .fetcher import FetchError, fetch_bible_index, fetch_text, read_bible_file
from .lookup import run_lookup, find_verse, BIBLE_BOOKS

__all__ = [
    "VerseRecord",
    "VerseTable",
    "Translation",
    "ParseError",
    "LinePatternError",
    "VerseNumberError",
    "parse_verse",
    "build_verse_table",
    "parse_bible_index",
    "FetchError",
    "fetch_bible_index",
    "fetch_text",
    "read_bible_file",
    "run_lookup",
    "find_verse",
    "BIBLE_BOOKS",
]

__version__ = "0.1.0"
