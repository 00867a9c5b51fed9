"""wordladder: shortest word ladders through a lexicon.

A word ladder turns one word into another by changing a single character at
a time, with every intermediate word taken from a lexicon.

Primary API:
    generate() - All shortest ladders between two words
    LadderGraph - Word graph for one start word, reusable across targets
    read_lexicon() - Load a word list from a text file

Example:
    from wordladder import generate

    lexicon = {"hit", "hot", "dot", "dog", "cog", "log", "lot", "hog"}
    generate("hit", "log", lexicon)
    # [['hit', 'hot', 'hog', 'log'], ['hit', 'hot', 'lot', 'log']]
"""

from __future__ import annotations

from wordladder import cli, logging
from wordladder._version import __version__
from wordladder.config import LADDER_CONFIG, LadderConfig
from wordladder.errors import LexiconError, LexiconOpenError, LexiconReadError
from wordladder.graph import build_adjacency, build_adjacency_pairwise, is_one_char_diff
from wordladder.ladder import LadderGraph, generate
from wordladder.lexicon import filter_lexicon, read_lexicon
from wordladder.search import bfs_find_depth, resolve_ladders

__all__ = [
    # Version
    "__version__",
    # Query
    "generate",
    "LadderGraph",
    # Lexicon
    "read_lexicon",
    "filter_lexicon",
    # Graph and search
    "build_adjacency",
    "build_adjacency_pairwise",
    "is_one_char_diff",
    "bfs_find_depth",
    "resolve_ladders",
    # Configuration
    "LadderConfig",
    "LADDER_CONFIG",
    # Errors
    "LexiconError",
    "LexiconOpenError",
    "LexiconReadError",
    # Utilities
    "cli",
    "logging",
]
