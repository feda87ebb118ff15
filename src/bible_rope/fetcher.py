"""Retrieval of the Bible index and translation texts over HTTP or from disk."""

import logging
from pathlib import Path
from typing import Iterable, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import Settings
from .models import Translation
from .parser import build_verse_table, parse_bible_index

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """A translation or index could not be retrieved or decoded."""

    def __init__(self, message: str, source: str):
        self.source = source
        super().__init__(f"{source}: {message}")


# =============================================================================
# HTTP
# =============================================================================

def make_session(settings: Settings) -> requests.Session:
    """Create a session, retrying connection errors and 5xx if configured."""
    session = requests.Session()
    session.headers.update({"User-Agent": "bible-rope"})
    if settings.retries > 0:
        adapter = HTTPAdapter(
            max_retries=Retry(
                total=settings.retries,
                backoff_factor=0.5,
                status_forcelist=[429, 500, 502, 503, 504],
                raise_on_status=False,
            )
        )
        session.mount("http://", adapter)
        session.mount("https://", adapter)
    return session


def _decode(body: bytes, source: str) -> str:
    try:
        return body.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise FetchError(f"unreadable body: {e}", source) from e


def fetch_text(url: str, session: requests.Session, timeout: float) -> str:
    """
    GET a URL and return its body as text.

    Raises:
        FetchError: on transport failure, a non-200 status or an undecodable body
    """
    logger.info("About to fetch %s", url)
    try:
        with session.get(url, timeout=timeout) as response:
            if response.status_code != 200:
                raise FetchError(
                    f"received non-OK HTTP status: {response.status_code} {response.reason}",
                    url,
                )
            body = response.content
    except requests.RequestException as e:
        raise FetchError(f"error making HTTP request: {e}", url) from e

    return _decode(body, url)


def fetch_bible_index(url: str, session: requests.Session, timeout: float) -> dict[str, str]:
    """Fetch the index of available translations as an ordered title -> URL dict."""
    index = parse_bible_index(fetch_text(url, session, timeout))
    logger.info("Index lists %d translations", len(index))
    return index


# =============================================================================
# Local files
# =============================================================================

def read_bible_file(path: str) -> str:
    """Read a translation text from disk."""
    try:
        body = Path(path).read_bytes()
    except OSError as e:
        raise FetchError(f"error reading file: {e}", path) from e
    return _decode(body, path)


# =============================================================================
# Translation loading
# =============================================================================

def load_translation(title: str, text: str, source: str, settings: Settings) -> Translation:
    """Parse a translation text into a Translation. Raises ParseError on a bad line."""
    table, line_count = build_verse_table(text, skip_bad_lines=settings.skip_bad_lines)
    logger.info("%s: read %d lines, %d verses", title, line_count, len(table))
    return Translation(title=title, table=table, source=source)


def fetch_translations(
    index: dict[str, str],
    session: requests.Session,
    settings: Settings,
    titles: Optional[Iterable[str]] = None,
) -> list[tuple[str, str, str]]:
    """
    Download translation texts listed in the index, in index order.

    Args:
        index: title -> URL
        session: HTTP session
        settings: Loader settings
        titles: Restrict to these titles (None = all)

    Returns:
        List of (title, url, text)
    """
    wanted = set(titles) if titles else None
    texts = []

    for title, url in index.items():
        if wanted is not None and title not in wanted:
            continue
        texts.append((title, url, fetch_text(url, session, settings.timeout)))

    return texts


def read_translation_files(paths: Iterable[str]) -> list[tuple[str, str, str]]:
    """Read translation texts from disk; each title is the file name stem."""
    return [(Path(path).stem, path, read_bible_file(path)) for path in paths]
