"""Pretty-print helpers for boards and validation results."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional, Sequence

from ..core.constants import WILDCARD_SYMBOL

if TYPE_CHECKING:
    from ..core.models import Path, ValidationOutcome, WildcardAssignment
    from ..engine.board import Board


def tile_symbol(tile, assignment: Optional[WildcardAssignment] = None) -> str:
    if not tile.is_wildcard:
        return tile.letter.upper()
    if assignment is not None:
        bound = assignment.get(tile.position)
        if bound is not None:
            return bound.lower()
    return WILDCARD_SYMBOL


def format_board(board: Board, assignment: Optional[WildcardAssignment] = None) -> str:
    """Render the board; wildcards bound by ``assignment`` show their letter in lowercase."""

    width = board.cols
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r in range(board.rows):
        row_cells = [tile_symbol(board.tile((r, c)), assignment) for c in range(width)]
        row_render = " ".join(f"{symbol:>2}" for symbol in row_cells)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_path(path: Path) -> str:
    steps = " -> ".join(f"({position.row},{position.col})" for position in path.positions)
    return f"{path.word.upper()}: {steps}"


def format_assignment(assignment: WildcardAssignment) -> str:
    if not len(assignment):
        return "{}"
    pairs = ", ".join(f"{position.key()}={letter}" for position, letter in assignment.bindings)
    return "{" + pairs + "}"


def pretty_print_board(board: Board, *, label: str | None = None, stream=None) -> None:
    """Print the board in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_board(board), file=stream)


def print_validation(
    board: Board,
    words: Sequence[str],
    outcome: ValidationOutcome,
    *,
    stream=None,
) -> None:
    """Print the board with the winning wildcard letters plus one line per slot."""

    stream = stream or sys.stdout
    print(format_board(board, outcome.assignment), file=stream)
    print("", file=stream)

    for index, valid in enumerate(outcome.valid):
        word = words[index] if index < len(words) else ""
        if not word:
            continue
        status = "ok" if valid else "--"
        line = f"  [{status}] {word.upper():<16} {outcome.scores[index]:>3} pts"
        path = outcome.paths[index]
        if path is not None:
            line += "  " + format_path(path).split(": ", 1)[1]
        print(line, file=stream)

    print(f"\n  Wildcards: {format_assignment(outcome.assignment)}", file=stream)
    print(f"  Total:     {outcome.total_score} pts", file=stream)


__all__ = [
    "format_assignment",
    "format_board",
    "format_path",
    "pretty_print_board",
    "print_validation",
    "tile_symbol",
]
