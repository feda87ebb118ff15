"""Data models for loaded Bible translations."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class VerseRecord:
    """One parsed verse line."""

    book: str  # e.g., "1 Corinthians"
    chapter: int
    verse: int
    text: str


class VerseTable:
    """Lookup table of verse text keyed by book, chapter and verse number.

    Stored as nested dicts: book -> chapter -> verse -> text. Adding the same
    reference twice keeps the most recent text.
    """

    def __init__(self):
        self.books: dict[str, dict[int, dict[int, str]]] = {}

    def add(self, book: str, chapter: int, verse: int, text: str):
        """Insert or replace the text of a single verse."""
        chapters = self.books.setdefault(book, {})
        verses = chapters.setdefault(chapter, {})
        verses[verse] = text

    def add_record(self, record: VerseRecord):
        self.add(record.book, record.chapter, record.verse, record.text)

    def get(self, book: str, chapter: int, verse: int) -> Optional[str]:
        """Return the verse text, or None if the reference is not in the table."""
        return self.books.get(book, {}).get(chapter, {}).get(verse)

    def has_book(self, book: str) -> bool:
        return book in self.books

    def chapter_numbers(self, book: str) -> list[int]:
        """Sorted chapter numbers present for a book (empty if unknown)."""
        return sorted(self.books.get(book, {}))

    def verse_numbers(self, book: str, chapter: int) -> list[int]:
        """Sorted verse numbers present for a chapter (empty if unknown)."""
        return sorted(self.books.get(book, {}).get(chapter, {}))

    def __len__(self) -> int:
        return sum(
            len(verses)
            for chapters in self.books.values()
            for verses in chapters.values()
        )


@dataclass
class Translation:
    """A loaded Bible translation: display title plus its verse table."""

    title: str  # e.g., "King James Version"
    table: VerseTable = field(default_factory=VerseTable)
    source: str = ""  # URL or file path it was loaded from

    def lookup(self, book: str, chapter: int, verse: int) -> Optional[str]:
        return self.table.get(book, chapter, verse)
