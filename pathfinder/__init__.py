"""Word-search engine for letter boards with wildcard tiles.

This package exposes the public API surface via:

- ``pathfinder.engine.board.Board``: the immutable tile grid.
- ``pathfinder.engine.paths.find_all_paths``: every way to trace a word.
- ``pathfinder.engine.optimizer.score_answer_group``: best consistent paths for a word group.
- ``pathfinder.engine.validator.validate_all_answers``: the full answer validation pass.
- ``pathfinder.engine.generator.BoardGenerator``: random frequency-weighted boards.
- ``pathfinder.data.wordlist.WordList``: a plain word list usable as the dictionary.
"""

from .engine.board import Board
from .engine.generator import BoardGenerator, GeneratorConfig
from .engine.optimizer import score_answer_group
from .engine.paths import find_all_paths, find_best_path
from .engine.scoring import ScoringConfig
from .engine.validator import AnswerValidator, ValidatorConfig, validate_all_answers
from .data.wordlist import WordList, WordListConfig

__all__ = [
    "AnswerValidator",
    "Board",
    "BoardGenerator",
    "GeneratorConfig",
    "ScoringConfig",
    "ValidatorConfig",
    "WordList",
    "WordListConfig",
    "find_all_paths",
    "find_best_path",
    "score_answer_group",
    "validate_all_answers",
]

__version__ = "0.1.0"
