"""Lexicon loading and length filtering."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Set, Union

from wordladder.config import LADDER_CONFIG
from wordladder.errors import LexiconOpenError, LexiconReadError
from wordladder.logging import get_logger
from wordladder.types import Lexicon, Word

logger = get_logger(__name__)


def read_lexicon(path: Union[str, Path], encoding: Optional[str] = None) -> Set[Word]:
    """
    Load a whitespace-delimited word list into a set.

    Words are split on any whitespace, so one word per line and several words
    per line are both accepted. Duplicates collapse.

    Args:
        path: Path to the text file.
        encoding: Text encoding; defaults to ``LADDER_CONFIG.encoding``.

    Returns:
        The set of words found in the file.

    Raises:
        LexiconOpenError: If the file cannot be opened.
        LexiconReadError: If reading fails before the end of the file.
    """
    encoding = encoding or LADDER_CONFIG.encoding
    try:
        fh = open(path, "r", encoding=encoding)
    except OSError as exc:
        raise LexiconOpenError(path) from exc

    lexicon: Set[Word] = set()
    with fh:
        try:
            for line in fh:
                lexicon.update(line.split())
        except (OSError, UnicodeDecodeError) as exc:
            raise LexiconReadError(path) from exc

    logger.debug(f"Loaded {len(lexicon):,} words from {path}")
    return lexicon


def filter_lexicon(start: Word, lexicon: Lexicon) -> Set[Word]:
    """
    Return the words of ``lexicon`` that are as long as ``start``.

    The start word itself is not required to be in ``lexicon``; callers are
    responsible for that precondition.
    """
    size = len(start)
    return {word for word in lexicon if len(word) == size}
