"""Data models shared by the path enumerator, merger, and optimizer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Mapping, NamedTuple, Optional, Tuple


class Position(NamedTuple):
    """A grid cell identified by row and column."""

    row: int
    col: int

    def is_adjacent(self, other: Position) -> bool:
        row_diff = abs(self.row - other.row)
        col_diff = abs(self.col - other.col)
        return row_diff <= 1 and col_diff <= 1 and (row_diff, col_diff) != (0, 0)

    def is_diagonal_to(self, other: Position) -> bool:
        return abs(self.row - other.row) == 1 and abs(self.col - other.col) == 1

    def key(self) -> str:
        return f"{self.row}-{self.col}"


@dataclass(frozen=True)
class Tile:
    """A single board tile. Wildcards keep a placeholder letter."""

    letter: str
    points: int
    is_wildcard: bool
    position: Position

    @property
    def row(self) -> int:
        return self.position.row

    @property
    def col(self) -> int:
        return self.position.col

    def matches(self, char: str) -> bool:
        return self.is_wildcard or self.letter == char


@dataclass(frozen=True)
class WildcardAssignment:
    """Immutable binding of wildcard positions to the letters they stand for.

    Bindings are stored sorted by position so that two assignments holding the
    same pairs compare and hash equal regardless of how they were built.
    """

    bindings: Tuple[Tuple[Position, str], ...] = ()

    def __post_init__(self) -> None:
        merged: Dict[Position, str] = {}
        for position, letter in self.bindings:
            position = Position(*position)
            existing = merged.get(position)
            if existing is not None and existing != letter:
                raise ValueError(
                    f"Wildcard {position.key()} bound to both '{existing}' and '{letter}'"
                )
            merged[position] = letter
        object.__setattr__(self, "bindings", tuple(sorted(merged.items())))

    @classmethod
    def from_mapping(cls, mapping: Mapping[Position, str]) -> WildcardAssignment:
        return cls(tuple(mapping.items()))

    def get(self, position: Position) -> Optional[str]:
        for bound, letter in self.bindings:
            if bound == position:
                return letter
        return None

    def as_dict(self) -> Dict[Position, str]:
        return dict(self.bindings)

    def positions(self) -> FrozenSet[Position]:
        return frozenset(position for position, _ in self.bindings)

    def issubset(self, other: WildcardAssignment) -> bool:
        """True when every binding here also appears in ``other``."""

        other_map = other.as_dict()
        return all(other_map.get(position) == letter for position, letter in self.bindings)

    def to_jsonable(self) -> Dict[str, str]:
        return {position.key(): letter for position, letter in self.bindings}

    def __len__(self) -> int:
        return len(self.bindings)


# A path constraint is the assignment induced by one specific path.
PathConstraint = WildcardAssignment


@dataclass(frozen=True)
class Path:
    """An ordered, adjacency-respecting, repetition-free walk spelling ``word``."""

    word: str
    tiles: Tuple[Tile, ...]
    constraint: WildcardAssignment = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        bindings = tuple(
            (tile.position, self.word[index])
            for index, tile in enumerate(self.tiles)
            if tile.is_wildcard
        )
        object.__setattr__(self, "constraint", WildcardAssignment(bindings))

    @property
    def positions(self) -> Tuple[Position, ...]:
        return tuple(tile.position for tile in self.tiles)

    @property
    def wildcard_count(self) -> int:
        return sum(1 for tile in self.tiles if tile.is_wildcard)

    @property
    def diagonal_count(self) -> int:
        positions = self.positions
        return sum(1 for a, b in zip(positions, positions[1:]) if a.is_diagonal_to(b))

    @property
    def last_diagonal_index(self) -> int:
        positions = self.positions
        last = 0
        for index in range(1, len(positions)):
            if positions[index - 1].is_diagonal_to(positions[index]):
                last = index
        return last

    def to_jsonable(self) -> List[Dict[str, int]]:
        return [{"row": position.row, "col": position.col} for position in self.positions]

    def __len__(self) -> int:
        return len(self.tiles)


@dataclass(frozen=True)
class AnswerAlternatives:
    """The disjunction of path constraints for one word, one per viable path."""

    word: str
    constraints: Tuple[WildcardAssignment, ...] = ()

    def distinct(self) -> Tuple[WildcardAssignment, ...]:
        seen = set()
        unique: List[WildcardAssignment] = []
        for constraint in self.constraints:
            if constraint in seen:
                continue
            seen.add(constraint)
            unique.append(constraint)
        return tuple(unique)

    def __len__(self) -> int:
        return len(self.constraints)


@dataclass(frozen=True)
class Answer:
    """Every way ``word`` can be traced on a board."""

    word: str
    paths: Tuple[Path, ...] = ()

    @property
    def alternatives(self) -> AnswerAlternatives:
        return AnswerAlternatives(self.word, tuple(path.constraint for path in self.paths))

    @property
    def is_feasible(self) -> bool:
        return bool(self.paths)


@dataclass(frozen=True)
class AnswerGroupConstraintSet:
    """Alternatives of a word group plus the merged assignments satisfying all of them."""

    alternatives: Tuple[AnswerAlternatives, ...] = ()
    path_constraint_sets: Tuple[WildcardAssignment, ...] = ()

    @property
    def words(self) -> Tuple[str, ...]:
        return tuple(item.word for item in self.alternatives)

    def __len__(self) -> int:
        return len(self.path_constraint_sets)


@dataclass
class GroupScore:
    """Optimal scores and the winning per-word constraints for a word group."""

    scores: Dict[str, int] = field(default_factory=dict)
    optimal_constraint_sets: List[WildcardAssignment] = field(default_factory=list)
    paths: Dict[str, Path] = field(default_factory=dict)
    assignment: WildcardAssignment = field(default_factory=WildcardAssignment)
    feasible: bool = True

    @property
    def total(self) -> int:
        return sum(self.scores.values())

    @classmethod
    def infeasible(cls, words: Iterable[str]) -> GroupScore:
        return cls(scores={word: 0 for word in words}, feasible=False)


@dataclass
class ValidationOutcome:
    """Per-slot validity, score, and path for one validation pass."""

    valid: List[bool]
    scores: List[int]
    paths: List[Optional[Path]]
    constraint_sets: List[WildcardAssignment] = field(default_factory=list)
    assignment: WildcardAssignment = field(default_factory=WildcardAssignment)

    @classmethod
    def empty(cls, slot_count: int) -> ValidationOutcome:
        return cls(
            valid=[False] * slot_count,
            scores=[0] * slot_count,
            paths=[None] * slot_count,
        )

    @property
    def total_score(self) -> int:
        return sum(score for score, ok in zip(self.scores, self.valid) if ok)

    def to_jsonable(self) -> dict:
        return {
            "valid": list(self.valid),
            "scores": list(self.scores),
            "paths": [path.to_jsonable() if path else None for path in self.paths],
            "constraint_sets": [constraint.to_jsonable() for constraint in self.constraint_sets],
            "assignment": self.assignment.to_jsonable(),
            "total_score": self.total_score,
        }
