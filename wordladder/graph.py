"""Construction of the one-character-difference word graph."""

from __future__ import annotations

from collections import defaultdict
from itertools import combinations
from typing import Dict, List, Optional, Tuple

from wordladder.config import LADDER_CONFIG
from wordladder.types import AdjacencyMap, Lexicon, Word


def build_adjacency(lexicon: Lexicon, wildcard: Optional[str] = None) -> AdjacencyMap:
    """
    Build the undirected adjacency map of ``lexicon`` using wildcard buckets.

    Each word is filed under one pattern per position, the word with that
    position replaced by ``wildcard``. Words sharing a pattern differ only at
    the masked position, so every distinct pair in a bucket is an edge. This
    avoids comparing every pair of words in the lexicon.

    All words in ``lexicon`` are expected to share one length.

    Args:
        lexicon: Words to connect.
        wildcard: Single-character marker; defaults to ``LADDER_CONFIG.wildcard``.

    Returns:
        A map from every word to the set of its neighbors. Words with no
        neighbors map to an empty set.

    Raises:
        ValueError: If ``wildcard`` is not exactly one character long.
    """
    wildcard = LADDER_CONFIG.wildcard if wildcard is None else wildcard
    if len(wildcard) != 1:
        raise ValueError(f"Wildcard must be a single character, got {wildcard!r}")

    # Keyed by (position, pattern) so a wildcard character occurring inside
    # a word cannot merge patterns masked at different positions.
    buckets: Dict[Tuple[int, str], List[Word]] = defaultdict(list)
    adjacency: AdjacencyMap = {}
    for word in lexicon:
        if word in adjacency:
            continue
        adjacency[word] = set()
        for i in range(len(word)):
            buckets[i, word[:i] + wildcard + word[i + 1 :]].append(word)

    for bucket in buckets.values():
        if len(bucket) < 2:
            continue
        for word_1, word_2 in combinations(bucket, 2):
            adjacency[word_1].add(word_2)
            adjacency[word_2].add(word_1)

    return adjacency


def build_adjacency_pairwise(lexicon: Lexicon) -> AdjacencyMap:
    """
    Build the same adjacency map as :func:`build_adjacency` by testing every pair.

    Quadratic in the number of words. Kept as a reference implementation for
    validating the bucketed construction.
    """
    words = list(dict.fromkeys(lexicon))
    adjacency: AdjacencyMap = {word: set() for word in words}
    for word_1, word_2 in combinations(words, 2):
        if is_one_char_diff(word_1, word_2):
            adjacency[word_1].add(word_2)
            adjacency[word_2].add(word_1)
    return adjacency


def is_one_char_diff(word_1: Word, word_2: Word) -> bool:
    """Return True if the words have equal length and differ at exactly one position."""
    if len(word_1) != len(word_2):
        return False

    diff_count = 0
    for char_1, char_2 in zip(word_1, word_2):
        if char_1 != char_2:
            diff_count += 1
            if diff_count > 1:
                return False
    return diff_count == 1
