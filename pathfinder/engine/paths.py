"""Exhaustive path enumeration for words traced on a board."""

from __future__ import annotations

from typing import List, Optional, Sequence, Set

from ..core.models import Answer, Path, Position, Tile, WildcardAssignment
from ..utils.logger import get_logger
from .board import Board
from .scoring import ScoringConfig, path_score


LOGGER = get_logger(__name__)


def find_all_paths(board: Board, word: str) -> Answer:
    """Return every simple path of adjacent tiles that can spell ``word``.

    Wildcards match any character at enumeration time; the letter each one
    stands for is recorded in the path's constraint. An infeasible word yields
    an ``Answer`` with no paths.
    """

    word = word.lower()
    if not word:
        return Answer(word)

    found: List[Path] = []
    for start in board.positions():
        tile = board.tile(start)
        if not tile.matches(word[0]):
            continue
        _extend(board, word, [tile], {start}, found)

    LOGGER.debug("Found %d path(s) for '%s'", len(found), word)
    return Answer(word, tuple(found))


def _extend(
    board: Board,
    word: str,
    trail: List[Tile],
    visited: Set[Position],
    found: List[Path],
) -> None:
    if len(trail) == len(word):
        found.append(Path(word, tuple(trail)))
        return

    char = word[len(trail)]
    for neighbor in board.neighbors(trail[-1].position):
        if neighbor in visited:
            continue
        tile = board.tile(neighbor)
        if not tile.matches(char):
            continue
        trail.append(tile)
        visited.add(neighbor)
        _extend(board, word, trail, visited, found)
        trail.pop()
        visited.discard(neighbor)


def is_valid_path(board: Board, word: str, positions: Sequence[Position]) -> bool:
    """Check adjacency, simplicity, and letter agreement for ``positions``."""

    word = word.lower()
    if not word or len(positions) != len(word):
        return False
    positions = [Position(*position) for position in positions]
    if len(set(positions)) != len(positions):
        return False
    for index, position in enumerate(positions):
        if not board.bounds.contains(position.row, position.col):
            return False
        if not board.tile(position).matches(word[index]):
            return False
        if index and not positions[index - 1].is_adjacent(position):
            return False
    return True


def minimal_wildcard_paths(paths: Sequence[Path]) -> List[Path]:
    """Keep only the paths that use the fewest wildcards."""

    if not paths:
        return []
    fewest = min(path.wildcard_count for path in paths)
    return [path for path in paths if path.wildcard_count == fewest]


def find_best_path(
    board: Board,
    word: str,
    assignment: Optional[WildcardAssignment] = None,
    config: Optional[ScoringConfig] = None,
    answer: Optional[Answer] = None,
) -> Optional[Path]:
    """Pick the preferred path whose wildcard bindings all appear in ``assignment``.

    Preference: highest score, fewest wildcards, fewest diagonal moves, latest
    final diagonal move, then enumeration order.
    """

    assignment = assignment or WildcardAssignment()
    if answer is None:
        answer = find_all_paths(board, word)
    candidates = [
        (index, path)
        for index, path in enumerate(answer.paths)
        if path.constraint.issubset(assignment)
    ]
    if not candidates:
        return None

    def preference(item):
        index, path = item
        return (
            -path_score(path, config),
            path.wildcard_count,
            path.diagonal_count,
            -path.last_diagonal_index,
            index,
        )

    return min(candidates, key=preference)[1]


__all__ = ["find_all_paths", "find_best_path", "is_valid_path", "minimal_wildcard_paths"]
