"""Type aliases shared across the word ladder modules."""

from __future__ import annotations

from typing import AbstractSet, Dict, Iterable, List, Set

#: A single word. All words compared in one query share the same length.
Word = str

#: Words permitted in a query. Any iterable is accepted; order is irrelevant.
Lexicon = Iterable[Word]

#: Undirected one-character-difference relation. Every vertex maps to the set
#: of its neighbors; isolated words map to an empty set.
AdjacencyMap = Dict[Word, Set[Word]]

#: Read-only view of a neighbor set.
Neighbors = AbstractSet[Word]

#: BFS hop distance from the start word for every word reached so far.
DepthMap = Dict[Word, int]

#: Ordered sequence of words from start to target.
Ladder = List[Word]

#: All minimum-length ladders, sorted lexicographically.
LadderSet = List[Ladder]
