"""
Dictionary loading: one word per line from a text file.
"""

import logging
import os
from typing import List, Optional

logger = logging.getLogger(__name__)


class DictionaryError(Exception):
    """Raised when a word list cannot be read."""

    def __init__(self, path: str, original: Optional[Exception] = None) -> None:
        self.path = path
        self.original = original
        super().__init__(f"cannot read dictionary {path}: {original}")


def read_words(
    path: str,
    upper: bool = False,
    length: Optional[int] = None,
) -> List[str]:
    """Read a word list.

    Args:
        path: Text file with one word per line.
        upper: Upper-case every word.
        length: If given, keep only words of this length.

    Returns:
        Words in file order. Blank lines and lines with inner whitespace
        are skipped; duplicates are kept (inserting them is harmless).

    Raises:
        DictionaryError: if the file cannot be opened or decoded.
    """
    if not os.path.isfile(path):
        raise DictionaryError(path, FileNotFoundError(path))

    words: List[str] = []
    skipped = 0
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                word = line.strip()
                if not word or len(word.split()) > 1:
                    skipped += 1
                    continue
                if upper:
                    word = word.upper()
                if length is not None and len(word) != length:
                    continue
                words.append(word)
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryError(path, exc) from exc

    logger.info(
        "Loaded %d word(s) from %s (%d malformed line(s) skipped).",
        len(words), path, skipped,
    )
    return words
