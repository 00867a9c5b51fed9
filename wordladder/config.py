"""Configuration classes for word ladder components."""

from dataclasses import dataclass


@dataclass
class LadderConfig:
    """Configuration for lexicon loading and adjacency construction."""

    # Marker substituted at one position to bucket words by pattern
    wildcard: str = "*"

    # Text encoding used when reading lexicon files
    encoding: str = "utf-8"

    # Separator between words when a ladder is printed
    joiner: str = " -> "


# Global configuration instance
LADDER_CONFIG = LadderConfig()
