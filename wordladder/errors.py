"""Exceptions raised while loading a lexicon."""

from __future__ import annotations

from pathlib import Path
from typing import Union


class LexiconError(Exception):
    """Base class for lexicon loading failures.

    Attributes:
        path: The source that failed to load.
    """

    def __init__(self, message: str, path: Union[str, Path]) -> None:
        self.path = path
        super().__init__(message)


class LexiconOpenError(LexiconError):
    """The lexicon source could not be opened."""

    def __init__(self, path: Union[str, Path]) -> None:
        super().__init__(f"Failed to open file: {path}", path)


class LexiconReadError(LexiconError):
    """Reading stopped with an error before the end of the lexicon source."""

    def __init__(self, path: Union[str, Path]) -> None:
        super().__init__(f"Error reading file: {path}", path)
