"""Best-scoring, wildcard-consistent path selection for a group of words.

Every word in the group must be traced by exactly one of its paths, the
wildcard letters implied by the chosen paths must agree, and the sum of the
path scores must be maximal. Two interchangeable backends are available:

- ``search``: branch-and-bound over per-word candidates in word order.
- ``cpsat``: the same problem handed to OR-Tools (see ``solver.py``). A
  solver run that ends without a usable status falls back to ``search``.

Both return the lexicographically first optimal choice over the candidate
order produced by :func:`build_candidates`, so results are reproducible.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..core.exceptions import SolverError
from ..core.models import Answer, GroupScore, Path, WildcardAssignment
from ..utils.logger import get_logger
from .board import Board
from .constraints import is_compatible, merge_assignments
from .paths import find_all_paths
from .scoring import ScoringConfig, path_score
from .solver import solve_answer_group


LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class Candidate:
    """One path choice for a word, with its score under the active policy."""

    path: Path
    score: int

    @property
    def constraint(self) -> WildcardAssignment:
        return self.path.constraint


def build_candidates(answer: Answer, config: Optional[ScoringConfig] = None) -> List[Candidate]:
    """Collapse paths sharing constraint and score, best score first.

    Paths with identical wildcard bindings and score are interchangeable for
    the optimizer; the first one enumerated is kept. Sorting is stable, so
    equal scores stay in enumeration order.
    """

    seen = set()
    candidates: List[Candidate] = []
    for path in answer.paths:
        score = path_score(path, config)
        key = (path.constraint, score)
        if key in seen:
            continue
        seen.add(key)
        candidates.append(Candidate(path=path, score=score))
    candidates.sort(key=lambda candidate: -candidate.score)
    return candidates


def score_answer_group(
    words: Sequence[str],
    board: Board,
    config: Optional[ScoringConfig] = None,
    answers: Optional[Sequence[Answer]] = None,
) -> GroupScore:
    """Score ``words`` together, choosing the best mutually consistent paths.

    Repeated words are scored once. If any word has no path, or no combination
    of paths agrees on the wildcards, every score is zero and no constraint is
    returned. ``answers`` may carry paths already enumerated for these words.
    """

    config = config or ScoringConfig()
    unique_words: List[str] = []
    for word in words:
        word = word.lower()
        if word not in unique_words:
            unique_words.append(word)
    if not unique_words:
        return GroupScore()

    known = {answer.word: answer for answer in answers or ()}
    candidates = [
        build_candidates(known.get(word) or find_all_paths(board, word), config)
        for word in unique_words
    ]
    for word, options in zip(unique_words, candidates):
        if not options:
            LOGGER.debug("'%s' cannot be traced on this board", word)
            return GroupScore.infeasible(unique_words)

    if config.backend == "cpsat":
        try:
            choice = solve_answer_group(candidates, timeout=config.solver_timeout)
        except SolverError as exc:
            LOGGER.error("CP-SAT failed for %s (%s); falling back to search", unique_words, exc)
            choice = search_answer_group(candidates)
    else:
        choice = search_answer_group(candidates)

    if choice is None:
        LOGGER.debug("No consistent path combination for %s", unique_words)
        return GroupScore.infeasible(unique_words)

    result = GroupScore()
    assignment = WildcardAssignment()
    for word, options, index in zip(unique_words, candidates, choice):
        candidate = options[index]
        result.scores[word] = candidate.score
        result.paths[word] = candidate.path
        result.optimal_constraint_sets.append(candidate.constraint)
        assignment = merge_assignments(assignment, candidate.constraint)
    result.assignment = assignment
    LOGGER.debug("Group %s scored %d via %s", unique_words, result.total, config.backend)
    return result


def search_answer_group(candidates: Sequence[Sequence[Candidate]]) -> Optional[List[int]]:
    """Branch-and-bound over candidate indices; ``None`` when nothing is consistent.

    Each word's candidates must be ordered best score first, as returned by
    :func:`build_candidates`.
    """

    count = len(candidates)
    # optimistic[i]: best conceivable score of words i.. ignoring wildcards
    optimistic = [0] * (count + 1)
    for depth in range(count - 1, -1, -1):
        optimistic[depth] = optimistic[depth + 1] + max(
            (candidate.score for candidate in candidates[depth]), default=0
        )

    best_total = -1
    best_choice: Optional[List[int]] = None
    chosen: List[int] = []

    def visit(depth: int, assignment: WildcardAssignment, total: int) -> None:
        nonlocal best_total, best_choice
        if depth == count:
            if total > best_total:
                best_total = total
                best_choice = list(chosen)
            return
        for index, candidate in enumerate(candidates[depth]):
            if total + candidate.score + optimistic[depth + 1] <= best_total:
                break
            if not is_compatible(assignment, candidate.constraint):
                continue
            chosen.append(index)
            visit(depth + 1, merge_assignments(assignment, candidate.constraint), total + candidate.score)
            chosen.pop()

    visit(0, WildcardAssignment(), 0)
    return best_choice


__all__ = ["Candidate", "build_candidates", "score_answer_group", "search_answer_group"]
