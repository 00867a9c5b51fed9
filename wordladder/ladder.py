"""Word graph for a fixed start word and the shortest-ladder query."""

from __future__ import annotations

from typing import AbstractSet, FrozenSet, Iterator, Mapping, Optional

from wordladder.config import LADDER_CONFIG, LadderConfig
from wordladder.graph import build_adjacency
from wordladder.lexicon import filter_lexicon
from wordladder.logging import get_logger
from wordladder.search import bfs_find_depth, resolve_ladders
from wordladder.types import AdjacencyMap, Lexicon, LadderSet, Word

logger = get_logger(__name__)


class LadderGraph:
    """
    One-character-difference graph over the words as long as a start word.

    The lexicon is filtered and the adjacency map built once, on construction.
    :meth:`path_search` can then be called for any number of targets; each
    call uses its own depth map and result list and leaves the graph untouched.

    The start word is expected to be in the lexicon. Words of other lengths
    are dropped.
    """

    def __init__(
        self,
        start: Word,
        lexicon: Lexicon,
        config: Optional[LadderConfig] = None,
    ) -> None:
        """
        Args:
            start: Word every ladder begins with.
            lexicon: Permitted words, of any length.
            config: Settings for adjacency construction; defaults to ``LADDER_CONFIG``.
        """
        self._config = config or LADDER_CONFIG
        self._start = start
        self._lexicon = frozenset(filter_lexicon(start, lexicon))
        self._adjacency: AdjacencyMap = build_adjacency(
            self._lexicon, wildcard=self._config.wildcard
        )
        logger.debug(
            f"Built word graph for '{start}': {len(self._adjacency):,} words, "
            f"{self.number_of_edges():,} edges"
        )

    @property
    def start(self) -> Word:
        return self._start

    @property
    def lexicon(self) -> FrozenSet[Word]:
        """Words of the start word's length."""
        return self._lexicon

    @property
    def adjacency(self) -> Mapping[Word, AbstractSet[Word]]:
        """Adjacency map of the graph. Must not be modified."""
        return self._adjacency

    def neighbors(self, word: Word) -> FrozenSet[Word]:
        """Return the words one character away from ``word``.

        Raises:
            KeyError: If ``word`` is not in the graph.
        """
        return frozenset(self._adjacency[word])

    def number_of_edges(self) -> int:
        return sum(len(neighbors) for neighbors in self._adjacency.values()) // 2

    def __contains__(self, word: object) -> bool:
        return word in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[Word]:
        return iter(self._adjacency)

    def path_search(self, target: Word) -> LadderSet:
        """
        Find every shortest ladder from the start word to ``target``.

        Runs a breadth-first search to label words with their distance from
        the start, then enumerates the ladders whose depth grows by one at
        every step.

        A target equal to the start word gives the single one-word ladder.
        An unreachable target, including one missing from the lexicon, gives
        an empty list.

        Args:
            target: Word every ladder ends with.

        Returns:
            All minimum-length ladders, sorted lexicographically.

        Raises:
            KeyError: If the start word is not in the graph.
        """
        if target == self._start and self._start in self._adjacency:
            return [[self._start]]

        found, depth = bfs_find_depth(self._adjacency, self._start, target)
        if not found:
            logger.debug(
                f"No ladder from '{self._start}' to '{target}' "
                f"({len(depth):,} words reachable)"
            )
            return []

        ladders = sorted(resolve_ladders(self._adjacency, self._start, target, depth))
        logger.debug(
            f"Found {len(ladders):,} ladders from '{self._start}' to '{target}' "
            f"with {depth[target]} steps"
        )
        return ladders


def generate(
    start: Word,
    target: Word,
    lexicon: Lexicon,
    config: Optional[LadderConfig] = None,
) -> LadderSet:
    """
    Return all shortest ladders from ``start`` to ``target`` through ``lexicon``.

    Preconditions, not checked: ``start`` and ``target`` have the same length
    and both are in ``lexicon``.

    Args:
        start: First word of every ladder.
        target: Last word of every ladder.
        lexicon: Permitted words.
        config: Optional settings; defaults to ``LADDER_CONFIG``.

    Returns:
        The sorted list of ladders; empty when no ladder exists.
    """
    return LadderGraph(start, lexicon, config=config).path_search(target)
