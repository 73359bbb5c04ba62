"""Letter point values and per-path scoring policy."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict

from ..core.constants import LETTER_FREQUENCIES, WILDCARD_SYMBOL, WildcardScoring
from ..core.models import Path


BACKENDS = ("search", "cpsat")


@dataclass
class ScoringConfig:
    """Configuration values driving group scoring."""

    wildcard_scoring: WildcardScoring = WildcardScoring.STORED_POINTS
    backend: str = "search"
    solver_timeout: float = 10.0

    def __post_init__(self) -> None:
        self.wildcard_scoring = WildcardScoring(self.wildcard_scoring)
        if self.backend not in BACKENDS:
            raise ValueError(f"Unknown scoring backend '{self.backend}', expected one of {BACKENDS}")
        if self.solver_timeout <= 0:
            raise ValueError(f"solver_timeout must be positive, got {self.solver_timeout}")


def letter_points(letter: str) -> int:
    """Rarer letters are worth more: ``floor(log2(freq(e) / freq(letter))) + 1``."""

    letter = letter.lower()
    if letter == WILDCARD_SYMBOL:
        return 0
    frequency = LETTER_FREQUENCIES.get(letter)
    if frequency is None:
        raise ValueError(f"No frequency for letter '{letter}'")
    return math.floor(math.log2(LETTER_FREQUENCIES["e"] / frequency)) + 1


def letter_point_table() -> Dict[str, int]:
    points = {WILDCARD_SYMBOL: 0}
    for letter in LETTER_FREQUENCIES:
        points[letter] = letter_points(letter)
    return points


def path_score(path: Path, config: ScoringConfig | None = None) -> int:
    """Sum the tile points along ``path`` under the configured wildcard policy."""

    policy = (config or ScoringConfig()).wildcard_scoring
    score = 0
    for index, tile in enumerate(path.tiles):
        if tile.is_wildcard and policy == WildcardScoring.LETTER_POINTS:
            score += letter_points(path.word[index])
        else:
            score += tile.points
    return score


__all__ = ["BACKENDS", "ScoringConfig", "letter_points", "letter_point_table", "path_score"]
