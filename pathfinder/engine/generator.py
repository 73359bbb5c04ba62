"""Random board generation weighted by English letter frequencies."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..core.constants import ALPHABET, DEFAULT_BOARD_SIZE, LETTER_FREQUENCIES, WILDCARD_SYMBOL
from ..core.exceptions import BoardError
from ..core.models import Position, Tile
from ..utils.logger import get_logger
from .board import Board
from .scoring import letter_points


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    """Configuration values for board generation.

    ``frequency_interpolation`` blends letter weights between uniform (0.0)
    and the English frequency table (1.0).
    """

    size: int = DEFAULT_BOARD_SIZE
    seed: Optional[int] = None
    wildcard_positions: Optional[Sequence[Tuple[int, int]]] = None
    frequency_interpolation: float = 1.0

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("Board size must be positive")
        if not 0.0 <= self.frequency_interpolation <= 1.0:
            raise ValueError("frequency_interpolation must be between 0 and 1")


def wildcard_pairs(size: int) -> List[Tuple[Position, Position]]:
    """The two diagonally opposite pairs of interior corner tiles."""

    if size < 4:
        return []
    near, far = 1, size - 2
    return [
        (Position(near, near), Position(far, far)),
        (Position(near, far), Position(far, near)),
    ]


class BoardGenerator:
    """Builds boards of frequency-weighted letters with two wildcard tiles."""

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig()
        self.rng = random.Random(self.config.seed)
        self._letters = list(ALPHABET)
        self._weights = self.letter_weights()

    def letter_weights(self) -> List[float]:
        blend = self.config.frequency_interpolation
        uniform = 1 / len(self._letters)
        return [
            uniform * (1 - blend) + LETTER_FREQUENCIES[letter] * blend
            for letter in self._letters
        ]

    def random_letter(self) -> str:
        return self.rng.choices(self._letters, weights=self._weights, k=1)[0]

    def choose_wildcards(self) -> Tuple[Position, ...]:
        size = self.config.size
        if self.config.wildcard_positions is not None:
            positions = tuple(Position(*position) for position in self.config.wildcard_positions)
            for position in positions:
                if not (0 <= position.row < size and 0 <= position.col < size):
                    raise BoardError(f"Wildcard position {tuple(position)} outside {size}x{size} board")
            return positions
        pairs = wildcard_pairs(size)
        if not pairs:
            return ()
        return self.rng.choice(pairs)

    def generate(self) -> Board:
        size = self.config.size
        wildcards = set(self.choose_wildcards())
        rows: List[List[Tile]] = []
        for r in range(size):
            row: List[Tile] = []
            for c in range(size):
                position = Position(r, c)
                if position in wildcards:
                    row.append(Tile(WILDCARD_SYMBOL, 0, True, position))
                    continue
                letter = self.random_letter()
                row.append(Tile(letter, letter_points(letter), False, position))
            rows.append(row)

        board = Board(rows)
        LOGGER.debug("Generated %dx%d board with wildcards at %s", size, size, sorted(wildcards))
        return board


__all__ = ["BoardGenerator", "GeneratorConfig", "wildcard_pairs"]
