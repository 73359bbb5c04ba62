"""Enumerate every dictionary word that can be traced on a board."""

from __future__ import annotations

from typing import List, Set

from ..core.constants import ALPHABET
from ..core.models import Answer, Position
from ..utils.logger import get_logger
from .board import Board
from .paths import find_all_paths


LOGGER = get_logger(__name__)


def find_all_valid_words(board: Board, word_list, min_length: int = 3, max_length: int = 16) -> List[Answer]:
    """Return every formable word of ``word_list``, sorted, with all of its paths.

    ``word_list`` must expose ``has_prefix(prefix)`` and ``is_valid_word(word)``.
    Wildcards stand for every letter in turn, so one walk can yield many words.
    """

    found: Set[str] = set()
    for start in board.positions():
        _walk(board, word_list, start, "", {start}, found, min_length, max_length)

    answers = [find_all_paths(board, word) for word in sorted(found)]
    LOGGER.info("Found %d word(s) on the board", len(answers))
    return answers


def _walk(
    board: Board,
    word_list,
    position: Position,
    prefix: str,
    visited: Set[Position],
    found: Set[str],
    min_length: int,
    max_length: int,
) -> None:
    tile = board.tile(position)
    letters = ALPHABET if tile.is_wildcard else tile.letter
    for letter in letters:
        word = prefix + letter
        if not word_list.has_prefix(word):
            continue
        if len(word) >= min_length and word_list.is_valid_word(word):
            found.add(word)
        if len(word) >= max_length:
            continue
        for neighbor in board.neighbors(position):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            _walk(board, word_list, neighbor, word, visited, found, min_length, max_length)
            visited.discard(neighbor)


__all__ = ["find_all_valid_words"]
