"""NetworkX export of word graphs.

Example:
    >>> import networkx as nx
    >>> from wordladder import LadderGraph
    >>> from wordladder.nx import to_networkx
    >>>
    >>> graph = LadderGraph("cat", {"cat", "bat", "bot"})
    >>> G = to_networkx(graph.adjacency)
    >>> nx.shortest_path_length(G, "cat", "bot")
    2
"""

from __future__ import annotations

from typing import Mapping

import networkx as nx

from wordladder.types import Neighbors, Word


def to_networkx(adjacency: Mapping[Word, Neighbors]) -> nx.Graph:
    """Convert an adjacency map into an undirected ``networkx.Graph``.

    Every word becomes a node, including words without neighbors.

    Args:
        adjacency: Map from each word to its neighbors.

    Returns:
        A new graph with one node per word and one edge per adjacent pair.
    """
    G = nx.Graph()
    G.add_nodes_from(adjacency)
    G.add_edges_from(
        (word, neighbor)
        for word, neighbors in adjacency.items()
        for neighbor in neighbors
    )
    return G
