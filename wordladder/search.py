"""Breadth-first depth labeling and shortest-ladder enumeration."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, List, Mapping, Tuple

from wordladder.types import DepthMap, Ladder, Neighbors, Word


def bfs_find_depth(
    adjacency: Mapping[Word, Neighbors],
    start: Word,
    target: Word,
) -> Tuple[bool, DepthMap]:
    """
    Label words with their hop distance from ``start`` until ``target`` is reached.

    The search stops as soon as ``target`` is first discovered, so only words
    closer than the target, plus part of the target's own layer, end up in
    the depth map. That is enough for :func:`resolve_ladders`, since every
    word on a shortest ladder to ``target`` is closer than it.

    Only newly discovered neighbors are compared with ``target``; when
    ``start == target`` the search reports failure.

    Args:
        adjacency: Word graph.
        start: Word to search from.
        target: Word to search for.

    Returns:
        A tuple of (found, depth):
          - found: Whether ``target`` was reached.
          - depth: Maps each labeled word to its distance from ``start``.

    Raises:
        KeyError: If ``start`` is not a vertex of ``adjacency``.
    """
    if start not in adjacency:
        raise KeyError(f"Start word '{start}' is not in the graph.")

    depth: DepthMap = {start: 0}
    queue: Deque[Word] = deque([start])

    while queue:
        word = queue.popleft()
        next_depth = depth[word] + 1
        for neighbor in adjacency[word]:
            if neighbor in depth:
                continue
            depth[neighbor] = next_depth
            queue.append(neighbor)
            if neighbor == target:
                return True, depth

    return False, depth


def resolve_ladders(
    adjacency: Mapping[Word, Neighbors],
    start: Word,
    target: Word,
    depth: DepthMap,
) -> Iterator[Ladder]:
    """
    Enumerate every ladder from ``start`` to ``target`` along depth-increasing edges.

    Walks the shortest-path DAG induced by ``depth`` with an explicit stack,
    so deep ladders do not hit the recursion limit. Ladders are yielded in
    no particular order.

    Args:
        adjacency: Word graph.
        start: First word of every ladder.
        target: Last word of every ladder.
        depth: Depth map produced by :func:`bfs_find_depth`.

    Yields:
        A new list of words for each ladder.
    """
    if start not in depth or target not in depth:
        return

    if start == target:
        yield [start]
        return

    target_depth = depth[target]
    path: List[Word] = [start]
    # Each stack entry: (word, iterator over its neighbors)
    stack: List[Tuple[Word, Iterator[Word]]] = [(start, iter(adjacency[start]))]

    while stack:
        word, neighbors = stack[-1]
        next_depth = depth[word] + 1

        for neighbor in neighbors:
            if depth.get(neighbor) != next_depth:
                continue
            if neighbor == target:
                yield path + [neighbor]
                continue
            # Words in the target's layer cannot lead to it
            if next_depth >= target_depth:
                continue
            path.append(neighbor)
            stack.append((neighbor, iter(adjacency[neighbor])))
            break
        else:
            # Neighbors exhausted, backtrack
            stack.pop()
            path.pop()
