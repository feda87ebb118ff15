"""Interactive verse lookup across all loaded translations."""

import logging
from typing import Callable, Optional, TypeVar, Union

from .models import Translation, VerseTable

logger = logging.getLogger(__name__)

T = TypeVar("T")
Ask = Callable[[str], str]
Say = Callable[[str], None]


# =============================================================================
# Constants
# =============================================================================

# Spelled as they appear in the plain-text translations ("Psalm", not "Psalms").
BIBLE_BOOKS = [
    # Old Testament
    "Genesis", "Exodus", "Leviticus", "Numbers", "Deuteronomy",
    "Joshua", "Judges", "Ruth", "1 Samuel", "2 Samuel",
    "1 Kings", "2 Kings", "1 Chronicles", "2 Chronicles",
    "Ezra", "Nehemiah", "Esther", "Job", "Psalm", "Proverbs",
    "Ecclesiastes", "Song of Solomon", "Isaiah", "Jeremiah", "Lamentations",
    "Ezekiel", "Daniel", "Hosea", "Joel", "Amos", "Obadiah",
    "Jonah", "Micah", "Nahum", "Habakkuk", "Zephaniah",
    "Haggai", "Zechariah", "Malachi",
    # New Testament
    "Matthew", "Mark", "Luke", "John", "Acts",
    "Romans", "1 Corinthians", "2 Corinthians", "Galatians",
    "Ephesians", "Philippians", "Colossians",
    "1 Thessalonians", "2 Thessalonians",
    "1 Timothy", "2 Timothy", "Titus", "Philemon",
    "Hebrews", "James", "1 Peter", "2 Peter",
    "1 John", "2 John", "3 John", "Jude", "Revelation",
]

BOOK_PROMPT = "Enter the book, like 'Genesis' or '2 Corinthians': "
CHAPTER_PROMPT = "Enter the chapter number: "
VERSE_PROMPT = "Enter the verse number: "


# =============================================================================
# Prompting
# =============================================================================

def _prompt_until_valid(
    prompt: str,
    accept: Callable[[str], Optional[T]],
    reject: Callable[[str], str],
    ask: Optional[Ask],
    say: Optional[Say],
    preset: Optional[Union[str, int]] = None,
) -> T:
    """Ask until accept() returns a value. A preset answer is tried first."""
    ask = ask or input
    say = say or print
    answer = None if preset is None else str(preset)
    while True:
        if answer is None:
            answer = ask(prompt)
        answer = answer.strip()

        value = accept(answer)
        if value is not None:
            return value

        say(reject(answer))
        answer = None


def _as_member(answer: str, numbers: list[int]) -> Optional[int]:
    if not (answer.isascii() and answer.isdigit()):
        return None
    number = int(answer)
    return number if number in numbers else None


def choose_book(
    reference: VerseTable,
    ask: Optional[Ask] = None,
    say: Optional[Say] = None,
    preset: Optional[str] = None,
) -> str:
    """Prompt for a book name that is canonical and present in the reference table."""

    def accept(answer: str) -> Optional[str]:
        if answer in BIBLE_BOOKS and reference.has_book(answer):
            return answer
        return None

    def reject(answer: str) -> str:
        if answer in BIBLE_BOOKS:
            return f"{answer} is not in the first loaded translation, please pick another book\n"
        return f"{answer} is NOT in the list of valid books:\n{BIBLE_BOOKS}\n"

    return _prompt_until_valid(BOOK_PROMPT, accept, reject, ask, say, preset)


def choose_chapter(
    reference: VerseTable,
    book: str,
    ask: Optional[Ask] = None,
    say: Optional[Say] = None,
    preset: Optional[int] = None,
) -> int:
    """Prompt for a chapter number present for the book in the reference table."""
    return _prompt_until_valid(
        CHAPTER_PROMPT,
        lambda answer: _as_member(answer, reference.chapter_numbers(book)),
        lambda answer: (
            f"{answer} is NOT in the list of valid chapters of {book}:\n"
            f"{reference.chapter_numbers(book)}\n"
        ),
        ask,
        say,
        preset,
    )


def choose_verse(
    reference: VerseTable,
    book: str,
    chapter: int,
    ask: Optional[Ask] = None,
    say: Optional[Say] = None,
    preset: Optional[int] = None,
) -> int:
    """Prompt for a verse number present in the chapter of the reference table."""
    return _prompt_until_valid(
        VERSE_PROMPT,
        lambda answer: _as_member(answer, reference.verse_numbers(book, chapter)),
        lambda answer: (
            f"{answer} is NOT in the list of valid verse numbers of {book}:{chapter}, "
            f"and so please enter a verse number from this list:\n"
            f"{reference.verse_numbers(book, chapter)}\n"
        ),
        ask,
        say,
        preset,
    )


# =============================================================================
# Lookup
# =============================================================================

def find_verse(
    translations: list[Translation], book: str, chapter: int, verse: int
) -> list[tuple[str, str]]:
    """Return (text, title) for every translation containing the verse, in load order."""
    found = []
    for translation in translations:
        text = translation.lookup(book, chapter, verse)
        if text is None:
            logger.debug("%s has no %s %d:%d", translation.title, book, chapter, verse)
            continue
        found.append((text, translation.title))
    return found


def format_result(text: str, title: str) -> str:
    return f"{text}:    {title}"


def run_lookup(
    translations: list[Translation],
    ask: Optional[Ask] = None,
    say: Optional[Say] = None,
    book: Optional[str] = None,
    chapter: Optional[int] = None,
    verse: Optional[int] = None,
) -> list[tuple[str, str]]:
    """
    Narrow a reference against the first translation, then print it from all.

    Args:
        translations: Loaded translations; the first one is the reference
        ask: Reads one line of user input given a prompt
        say: Writes one line of output
        book, chapter, verse: Answers to try before prompting

    Returns:
        The (text, title) pairs that were printed
    """
    if not translations:
        raise ValueError("no translations loaded")
    say = say or print

    reference = translations[0].table
    book = choose_book(reference, ask, say, book)
    chapter = choose_chapter(reference, book, ask, say, chapter)
    verse = choose_verse(reference, book, chapter, ask, say, verse)

    found = find_verse(translations, book, chapter, verse)
    say(f"{book} {chapter}:{verse}")
    for text, title in found:
        say(format_result(text, title))
    return found
