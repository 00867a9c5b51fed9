"""Shared lexicon fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def hit_lexicon() -> set:
    """Three-letter lexicon with two shortest ladders from 'hit' to 'log'."""
    return {"hit", "hot", "dot", "dog", "cog", "log", "lot", "hog"}


@pytest.fixture
def cat_lexicon() -> set:
    """Lexicon with a single four-step ladder from 'cat' to 'dog'."""
    return {"cat", "bat", "bet", "bot", "bog", "dog"}


@pytest.fixture
def lexicon_file(tmp_path, hit_lexicon):
    """Word list on disk with one word per line, plus some noise."""
    path = tmp_path / "words.txt"
    words = sorted(hit_lexicon) + ["hit", "a", "abcd"]
    path.write_text("\n".join(words) + "\n", encoding="utf-8")
    return path
