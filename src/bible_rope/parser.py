"""Parsing of plain-text Bible translations and the Bible index file."""

import logging
import re
from typing import Optional

from .config import HEADER_LINES
from .models import VerseRecord, VerseTable

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

# e.g. "Genesis 1:1\tIn the beginning God created the heaven and the earth."
# The greedy book group keeps multi-word names such as "1 Corinthians" intact.
VERSE_LINE_RE = re.compile(r"(.*) ([0-9]+):([0-9]+)\t(.*)")

# Largest chapter or verse number accepted (a signed 64-bit int).
MAX_NUMBER = 2 ** 63 - 1


# =============================================================================
# Errors
# =============================================================================

class ParseError(ValueError):
    """A line of a translation could not be turned into a verse record."""

    def __init__(self, message: str, line: str, line_number: Optional[int] = None):
        self.line = line
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class LinePatternError(ParseError):
    """The line is not of the form '<book> <chapter>:<verse><TAB><text>'."""


class VerseNumberError(ParseError):
    """The chapter or verse number is not a positive integer."""


# =============================================================================
# Line Parser
# =============================================================================

def split_lines(text: str) -> list[str]:
    """Split into lines on LF only, dropping a trailing CR from each line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _to_positive_int(
    value: str, what: str, line: str, line_number: Optional[int]
) -> int:
    try:
        number = int(value)
    except ValueError as e:
        raise VerseNumberError(
            f"{what} {value[:20]!r}... is not a usable number", line, line_number
        ) from e
    if number < 1:
        raise VerseNumberError(
            f"{what} {value!r} is not a positive number", line, line_number
        )
    if number > MAX_NUMBER:
        raise VerseNumberError(
            f"{what} {value[:20]!r}... is out of range", line, line_number
        )
    return number


def parse_verse(line: str, line_number: Optional[int] = None) -> VerseRecord:
    """
    Parse one verse line into a VerseRecord.

    Args:
        line: A line like 'Genesis 1:1<TAB>In the beginning ...'
        line_number: Position of the line in its file, for error messages

    Returns:
        The parsed VerseRecord

    Raises:
        LinePatternError: if the line does not match the verse line pattern
        VerseNumberError: if the chapter or verse is not a positive integer
    """
    match = VERSE_LINE_RE.match(line)
    if not match:
        raise LinePatternError(f"not a verse line: {line!r}", line, line_number)

    book, chapter, verse, text = match.groups()
    return VerseRecord(
        book=book,
        chapter=_to_positive_int(chapter, "chapter", line, line_number),
        verse=_to_positive_int(verse, "verse", line, line_number),
        text=text,
    )


# =============================================================================
# Verse Table Builder
# =============================================================================

def build_verse_table(
    text: str,
    skip_bad_lines: bool = False,
) -> tuple[VerseTable, int]:
    """
    Build a VerseTable from the full text of one translation.

    The first HEADER_LINES lines are metadata and are always discarded.

    Args:
        text: Entire translation text
        skip_bad_lines: Log and skip unparsable lines instead of raising

    Returns:
        (table, line_count) where line_count is the number of lines read,
        header included
    """
    table = VerseTable()
    line_count = 0
    skipped = 0

    for line_number, line in enumerate(split_lines(text), start=1):
        line_count = line_number
        if line_number <= HEADER_LINES:
            continue

        try:
            record = parse_verse(line, line_number)
        except ParseError as e:
            if not skip_bad_lines:
                raise
            skipped += 1
            logger.warning("Skipping %s", e)
            continue

        table.add_record(record)

    if skipped:
        logger.warning("Skipped %d unparsable lines", skipped)
    logger.info("We got %d lines, %d verses", line_count, len(table))
    return table, line_count


# =============================================================================
# Bible Index
# =============================================================================

def parse_bible_index(text: str) -> dict[str, str]:
    """
    Parse a Bible index of 'title = url' lines into an ordered title -> url dict.

    Lines are split on the first '='. Blank lines, lines without '=' and lines
    with an empty title or url are ignored. A repeated title keeps its last url.
    """
    index: dict[str, str] = {}

    for line in split_lines(text):
        title, sep, url = line.partition("=")
        title, url = title.strip(), url.strip()
        if not sep or not title or not url:
            if line.strip():
                logger.debug("Ignoring index line: %r", line)
            continue
        index[title] = url

    logger.debug("Parsed index: %s", index)
    return index
