"""Validation of a batch of submitted answers against one board."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from ..core.constants import MIN_WORD_LENGTH, SLOT_COUNT
from ..core.exceptions import UnsatisfiableConstraint
from ..core.models import Answer, ValidationOutcome
from ..utils.logger import get_logger
from .board import Board
from .constraints import merge_all_answer_group_constraint_sets
from .optimizer import score_answer_group
from .paths import find_all_paths, find_best_path
from .scoring import ScoringConfig


LOGGER = get_logger(__name__)


@dataclass
class ValidatorConfig:
    """Policy values for what counts as a submittable word."""

    slot_count: int = SLOT_COUNT
    min_word_length: int = MIN_WORD_LENGTH
    scoring: ScoringConfig = field(default_factory=ScoringConfig)


def validate_all_answers(
    board: Board,
    words: Sequence[Optional[str]],
    dictionary_loaded: bool,
    dictionary_lookup: Optional[Callable[[str], bool]],
    focused_index: int = -1,
    config: Optional[ValidatorConfig] = None,
) -> ValidationOutcome:
    """Validate and score every answer slot together.

    Ineligible words are dropped slot by slot, but a group whose surviving
    words cannot agree on the wildcard letters is rejected as a whole. The
    focused slot skips the eligibility filter so an in-progress word can still
    be traced; it never counts as valid or scores unless it is eligible.
    """

    config = config or ValidatorConfig()
    if len(words) > config.slot_count:
        raise ValueError(f"Expected at most {config.slot_count} answers, got {len(words)}")

    slots = [(word or "").lower() for word in words]
    slots.extend([""] * (config.slot_count - len(slots)))
    outcome = ValidationOutcome.empty(config.slot_count)

    def passes_basic_checks(word: str) -> bool:
        if not word or len(word) < config.min_word_length:
            return False
        if dictionary_loaded and dictionary_lookup is not None and not dictionary_lookup(word):
            return False
        return True

    survivors: List[Tuple[int, Answer]] = []
    used_words = set()
    for index, word in enumerate(slots):
        if index != focused_index and not passes_basic_checks(word):
            continue
        if not word or word in used_words:
            continue
        answer = find_all_paths(board, word)
        if not answer.is_feasible:
            LOGGER.debug("Slot %d: '%s' cannot be traced", index, word)
            continue
        survivors.append((index, answer))
        used_words.add(word)

    if not survivors:
        return outcome

    try:
        merge_all_answer_group_constraint_sets([answer.alternatives for _, answer in survivors])
    except UnsatisfiableConstraint as exc:
        LOGGER.info("Rejecting answer group %s: %s", [answer.word for _, answer in survivors], exc)
        return outcome

    group = score_answer_group(
        [answer.word for _, answer in survivors],
        board,
        config.scoring,
        answers=[answer for _, answer in survivors],
    )
    if not group.feasible:
        LOGGER.error("Optimizer found no combination for a group that passed the merge check")
        return outcome

    for index, answer in survivors:
        path = find_best_path(board, answer.word, group.assignment, config.scoring, answer=answer)
        if path is None:
            LOGGER.error("Slot %d: no path for '%s' under %s", index, answer.word, group.assignment)
            continue
        outcome.valid[index] = True
        outcome.scores[index] = group.scores.get(answer.word, 0)
        outcome.paths[index] = path

    outcome.constraint_sets = list(group.optimal_constraint_sets)
    outcome.assignment = group.assignment

    if 0 <= focused_index < config.slot_count and not passes_basic_checks(slots[focused_index]):
        outcome.valid[focused_index] = False
        outcome.scores[focused_index] = 0

    LOGGER.debug("Validated %s: valid=%s scores=%s", slots, outcome.valid, outcome.scores)
    return outcome


class AnswerValidator:
    """Runs answer validation with a dictionary held by the caller.

    ``dictionary`` is any object exposing ``is_loaded`` and
    ``is_valid_word(word)``, such as :class:`pathfinder.data.wordlist.WordList`.
    """

    def __init__(self, dictionary=None, config: Optional[ValidatorConfig] = None) -> None:
        self.dictionary = dictionary
        self.config = config or ValidatorConfig()

    def validate(
        self,
        board: Board,
        words: Sequence[Optional[str]],
        focused_index: int = -1,
    ) -> ValidationOutcome:
        loaded = bool(self.dictionary is not None and self.dictionary.is_loaded)
        lookup = self.dictionary.is_valid_word if self.dictionary is not None else None
        return validate_all_answers(board, words, loaded, lookup, focused_index, self.config)
