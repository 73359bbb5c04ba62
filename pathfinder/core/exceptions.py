"""Custom exception hierarchy for the word-search engine."""

from __future__ import annotations

from typing import Optional


class PathfinderError(Exception):
    """Base exception for engine failures."""


class UnsatisfiableConstraint(PathfinderError):
    """Raised when no wildcard assignment satisfies every word of a group."""

    def __init__(self, word: Optional[str] = None) -> None:
        self.word = word
        if word is None:
            super().__init__("Constraints cannot be satisfied")
        else:
            super().__init__(f"Constraints cannot be satisfied once '{word}' is added")


class BoardError(PathfinderError):
    """Raised when a board is malformed (gaps, misplaced tiles, bad letters)."""


class DictionaryLoadError(PathfinderError):
    """Raised when the word list cannot be read."""


class SolverError(PathfinderError):
    """Raised when the CP-SAT backend ends in an unexpected state."""
