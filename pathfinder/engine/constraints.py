"""Wildcard constraint compatibility and group feasibility checks."""

from __future__ import annotations

from typing import List, Sequence, Set

from ..core.exceptions import UnsatisfiableConstraint
from ..core.models import Answer, AnswerAlternatives, AnswerGroupConstraintSet, WildcardAssignment
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def is_compatible(first: WildcardAssignment, second: WildcardAssignment) -> bool:
    """Two assignments agree on every wildcard they both bind."""

    if len(first) > len(second):
        first, second = second, first
    lookup = second.as_dict()
    for position, letter in first.bindings:
        existing = lookup.get(position)
        if existing is not None and existing != letter:
            return False
    return True


def merge_assignments(first: WildcardAssignment, second: WildcardAssignment) -> WildcardAssignment:
    """Union of two assignments; raises ``UnsatisfiableConstraint`` on conflict."""

    if not is_compatible(first, second):
        raise UnsatisfiableConstraint()
    return WildcardAssignment(first.bindings + second.bindings)


def merge_all_answer_group_constraint_sets(
    alternatives_per_word: Sequence[AnswerAlternatives],
) -> AnswerGroupConstraintSet:
    """Decide whether one path constraint per word can be chosen without conflict.

    Words are processed in order. Each running assignment is extended by every
    alternative of the next word it is compatible with; conflicting
    alternatives are dropped locally. The group is unsatisfiable only once a
    word leaves no running assignment extendable.
    """

    alternatives = tuple(alternatives_per_word)
    if not alternatives:
        return AnswerGroupConstraintSet()

    running: List[WildcardAssignment] = [WildcardAssignment()]
    for item in alternatives:
        options = item.distinct()
        extended: List[WildcardAssignment] = []
        seen: Set[WildcardAssignment] = set()
        for current in running:
            for option in options:
                if not is_compatible(current, option):
                    continue
                merged = merge_assignments(current, option)
                if merged in seen:
                    continue
                seen.add(merged)
                extended.append(merged)
        if not extended:
            LOGGER.debug(
                "'%s' has %d alternative(s), none compatible with %d running assignment(s)",
                item.word,
                len(options),
                len(running),
            )
            raise UnsatisfiableConstraint(item.word)
        running = extended

    return AnswerGroupConstraintSet(alternatives=alternatives, path_constraint_sets=tuple(running))


def is_valid_set(answers: Sequence[Answer]) -> bool:
    """Boolean form of the feasibility check over enumerated answers."""

    try:
        merge_all_answer_group_constraint_sets([answer.alternatives for answer in answers])
    except UnsatisfiableConstraint:
        return False
    return True


__all__ = [
    "is_compatible",
    "is_valid_set",
    "merge_all_answer_group_constraint_sets",
    "merge_assignments",
]
