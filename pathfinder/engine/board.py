"""Board representation and adjacency helpers."""

from __future__ import annotations

import math
from typing import Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from ..core.constants import ALPHABET, NEIGHBOR_STEPS, WILDCARD_SYMBOL, Bounds
from ..core.exceptions import BoardError
from ..core.models import Position, Tile
from .scoring import letter_points


class Board:
    """Fixed rectangular grid of tiles, read-only once built."""

    def __init__(self, rows: Sequence[Sequence[Tile]]) -> None:
        if not rows or not rows[0]:
            raise BoardError("Board must contain at least one tile")
        width = len(rows[0])
        for r, row in enumerate(rows):
            if len(row) != width:
                raise BoardError(f"Row {r} has {len(row)} tiles, expected {width}")
            for c, tile in enumerate(row):
                if tile.position != (r, c):
                    raise BoardError(
                        f"Tile at ({r},{c}) reports position {tuple(tile.position)}"
                    )
                if tile.points < 0:
                    raise BoardError(f"Tile at ({r},{c}) has negative points")
                if not tile.is_wildcard and (len(tile.letter) != 1 or tile.letter not in ALPHABET):
                    raise BoardError(f"Tile at ({r},{c}) has invalid letter '{tile.letter}'")
        self._rows: Tuple[Tuple[Tile, ...], ...] = tuple(tuple(row) for row in rows)
        self.bounds = Bounds(rows=len(self._rows), cols=width)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_letters(
        cls,
        letters: str,
        points: Optional[Mapping[Position, int]] = None,
        wildcard_points: int = 0,
    ) -> Board:
        """Build a square board from a row-major string where ``*`` is a wildcard.

        Tiles are worth their letter points unless ``points`` overrides a position.
        """

        text = "".join(letters.split()).lower()
        size = math.isqrt(len(text))
        if size == 0 or size * size != len(text):
            raise BoardError(f"Expected a square number of letters, got {len(text)}")
        overrides = points or {}
        rows: List[List[Tile]] = []
        for r in range(size):
            row: List[Tile] = []
            for c in range(size):
                char = text[r * size + c]
                position = Position(r, c)
                is_wildcard = char == WILDCARD_SYMBOL
                if is_wildcard:
                    default = wildcard_points
                elif char in ALPHABET:
                    default = letter_points(char)
                else:
                    raise BoardError(f"Unsupported board character '{char}' at ({r},{c})")
                row.append(
                    Tile(
                        letter=char,
                        points=overrides.get(position, default),
                        is_wildcard=is_wildcard,
                        position=position,
                    )
                )
            rows.append(row)
        return cls(rows)

    @classmethod
    def from_jsonable(cls, payload: Sequence[Sequence[Mapping[str, object]]]) -> Board:
        rows: List[List[Tile]] = []
        for r, raw_row in enumerate(payload):
            row: List[Tile] = []
            for c, raw in enumerate(raw_row):
                try:
                    is_wildcard = bool(raw.get("is_wildcard", False))
                    letter = str(raw.get("letter") or WILDCARD_SYMBOL).lower()
                    tile = Tile(
                        letter=WILDCARD_SYMBOL if is_wildcard else letter,
                        points=int(raw.get("points", 0)),
                        is_wildcard=is_wildcard,
                        position=Position(int(raw.get("row", r)), int(raw.get("col", c))),
                    )
                except (AttributeError, TypeError, ValueError) as exc:
                    raise BoardError(f"Malformed tile at ({r},{c}): {exc}") from exc
                row.append(tile)
            rows.append(row)
        return cls(rows)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self.bounds.rows

    @property
    def cols(self) -> int:
        return self.bounds.cols

    def tile(self, position: Position) -> Tile:
        row, col = position
        if not self.bounds.contains(row, col):
            raise IndexError(f"Position {tuple(position)} outside {self.rows}x{self.cols} board")
        return self._rows[row][col]

    def letter(self, position: Position) -> str:
        return self.tile(position).letter

    def is_wildcard(self, position: Position) -> bool:
        return self.tile(position).is_wildcard

    def neighbors(self, position: Position) -> Iterator[Position]:
        row, col = position
        for dr, dc in NEIGHBOR_STEPS:
            nr, nc = row + dr, col + dc
            if self.bounds.contains(nr, nc):
                yield Position(nr, nc)

    def positions(self) -> Iterator[Position]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield Position(r, c)

    def tiles(self) -> Iterable[Tile]:
        for row in self._rows:
            yield from row

    def wildcard_positions(self) -> List[Position]:
        return [tile.position for tile in self.tiles() if tile.is_wildcard]

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> List[List[dict]]:
        return [
            [
                {
                    "letter": tile.letter,
                    "points": tile.points,
                    "is_wildcard": tile.is_wildcard,
                    "row": tile.row,
                    "col": tile.col,
                }
                for tile in row
            ]
            for row in self._rows
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __str__(self) -> str:
        return "\n".join(
            " ".join(WILDCARD_SYMBOL if tile.is_wildcard else tile.letter.upper() for tile in row)
            for row in self._rows
        )
