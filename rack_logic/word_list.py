import logging
import os
from typing import Iterable, Iterator, List, Optional

import requests
from nltk.corpus import words as nltk_words

from .constants import (DOWNLOAD_TIMEOUT_SECONDS, MAX_WORD_LENGTH,
                        MIN_WORD_LENGTH, MINIMAL_WORD_SET, WORD_LIST_FILENAME,
                        WORD_LIST_URL)

logger = logging.getLogger(__name__)


def normalize_words(lines: Iterable[str]) -> Iterator[str]:
    """
    Upper-cases and strips each line, keeping A-Z words of playable
    length. A line equal to the line before it (after upper-casing) is
    dropped, which removes entries that only differed in capitalization.
    """
    last_line = None
    for raw in lines:
        line = raw.strip().upper()
        if (line != last_line and line.isascii() and line.isalpha()
                and MIN_WORD_LENGTH <= len(line) <= MAX_WORD_LENGTH):
            yield line
        last_line = line


def download_word_list(url: str = WORD_LIST_URL,
                       timeout: float = DOWNLOAD_TIMEOUT_SECONDS) -> List[str]:
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    return resp.text.splitlines()


def has_words(path: str) -> bool:
    """True when path is a readable file with at least one non-blank line."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return any(line.strip() for line in f)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading word list {path}: {e}")
        return False


def cache_word_list(path: str, url: str = WORD_LIST_URL) -> bool:
    """
    Downloads and writes the normalized list to path unless a usable copy
    already exists. Returns False when nothing usable could be cached.
    """
    if os.path.exists(path):
        if has_words(path):
            return True
        logger.warning(f"Cached word list {path} is empty or unreadable. Downloading again.")
    try:
        lines = download_word_list(url)
    except requests.RequestException as e:
        logger.error(f"Failed to load word list from {url}: {e}")
        return False

    tmp_path = path + ".tmp"
    count = 0
    try:
        with open(tmp_path, 'w', encoding='utf-8') as f:
            for word in normalize_words(lines):
                f.write(word + "\n")
                count += 1
        if count == 0:
            logger.warning(f"Word list from {url} contained no valid words.")
            return False
        os.replace(tmp_path, path)
    except OSError as e:
        logger.error(f"Failed to write word list {path}: {e}")
        return False
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)

    logger.info(f"Cached {count} words from {url} to {path}")
    return True


class WordList:
    """
    Re-iterable word source. File backed lists are streamed line by line on
    every pass, so a scan never holds the whole file in memory.
    """

    def __init__(self, path: Optional[str] = None) -> None:
        self.path = path
        self._words: Optional[List[str]] = None

    @classmethod
    def from_words(cls, words: Iterable[str]) -> 'WordList':
        """Create a word list from memory without file I/O."""
        word_list = cls()
        word_list._words = list(normalize_words(words))
        return word_list

    def __iter__(self) -> Iterator[str]:
        if self._words is not None:
            yield from self._words
            return
        with open(self.path, 'r', encoding='utf-8') as f:
            for line in f:
                word = line.strip()
                if word:
                    yield word

    def __repr__(self) -> str:
        if self._words is not None:
            return f"WordList({len(self._words)} words in memory)"
        return f"WordList({self.path!r})"


def _candidate_paths() -> List[str]:
    return [
        WORD_LIST_FILENAME,
        os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(
            __file__))), WORD_LIST_FILENAME),
    ]


def load_nltk_words() -> List[str]:
    """Words from the nltk corpus; raises LookupError when it is not installed."""
    return list(normalize_words(sorted(set(w.upper() for w in nltk_words.words()))))


def initialize_word_list(path: Optional[str] = None, url: str = WORD_LIST_URL) -> WordList:
    possible_paths = [path] if path else _candidate_paths()
    for candidate in possible_paths:
        if not os.path.exists(candidate):
            continue
        if has_words(candidate):
            logger.info(f"Using word list {candidate}")
            return WordList(candidate)
        logger.warning(f"Word list {candidate} was empty or contained no valid words. Ignoring it.")

    cache_path = possible_paths[0]
    logger.warning(f"No usable {cache_path}. Downloading word list from {url}.")
    if cache_word_list(cache_path, url):
        return WordList(cache_path)

    logger.warning("No usable download. Falling back to the nltk words corpus.")
    try:
        corpus_words = load_nltk_words()
    except LookupError as e:
        logger.warning(f"nltk words corpus unavailable ({e}). Using minimal word set.")
        return WordList.from_words(MINIMAL_WORD_SET)
    logger.info(f"Loaded {len(corpus_words)} words from the nltk corpus")
    return WordList.from_words(corpus_words)
