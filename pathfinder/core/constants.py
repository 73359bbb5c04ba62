"""Shared constants and enumerations for the word-search engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class WildcardScoring(str, Enum):
    """How a wildcard tile contributes to a path score."""

    STORED_POINTS = "STORED_POINTS"
    LETTER_POINTS = "LETTER_POINTS"


WILDCARD_SYMBOL = "*"
SLOT_COUNT = 5
MIN_WORD_LENGTH = 2
DEFAULT_BOARD_SIZE = 4

# Order matters: path enumeration visits neighbours in this order.
NEIGHBOR_STEPS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),
    (1, 0),
    (0, 1),
    (0, -1),
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
)

ALPHABET = "abcdefghijklmnopqrstuvwxyz"

LETTER_FREQUENCIES: Dict[str, float] = {
    "a": 0.078,
    "b": 0.02,
    "c": 0.04,
    "d": 0.038,
    "e": 0.11,
    "f": 0.014,
    "g": 0.03,
    "h": 0.023,
    "i": 0.086,
    "j": 0.0021,
    "k": 0.0097,
    "l": 0.053,
    "m": 0.027,
    "n": 0.072,
    "o": 0.061,
    "p": 0.028,
    "q": 0.0019,
    "r": 0.073,
    "s": 0.087,
    "t": 0.067,
    "u": 0.033,
    "v": 0.01,
    "w": 0.0091,
    "x": 0.0027,
    "y": 0.016,
    "z": 0.0044,
}


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
