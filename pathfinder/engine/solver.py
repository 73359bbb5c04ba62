"""CP-SAT answer group optimizer using OR-Tools."""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple

from ortools.sat.python import cp_model

from ..core.exceptions import SolverError
from ..core.models import Position
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from .optimizer import Candidate

LOGGER = get_logger(__name__)


def solve_answer_group(
    candidates: Sequence[Sequence[Candidate]],
    timeout: float = 10.0,
) -> Optional[List[int]]:
    """Pick one candidate per word via CP-SAT.

    Args:
        candidates: Per-word candidate lists, in word order.
        timeout: Solver time limit in seconds for each phase.

    Returns:
        The chosen candidate index per word, or None if no consistent choice
        exists. Among optimal choices the lexicographically smallest index
        tuple is returned, matching the branch-and-bound backend.
    """
    if not candidates:
        return []
    if len(candidates) == 1:
        return [0] if candidates[0] else None

    model = cp_model.CpModel()

    # ------------------------------------------------------------------
    # Step 1: One boolean per candidate, exactly one per word
    # ------------------------------------------------------------------
    choice_vars: List[List[cp_model.IntVar]] = []
    for i, options in enumerate(candidates):
        row = [model.new_bool_var(f"x_{i}_{j}") for j in range(len(options))]
        model.add_exactly_one(row)
        choice_vars.append(row)

    # ------------------------------------------------------------------
    # Step 2: Wildcard letters, at most one letter per wildcard tile
    # ------------------------------------------------------------------
    letter_vars: Dict[Tuple[Position, str], cp_model.IntVar] = {}
    for i, options in enumerate(candidates):
        for j, candidate in enumerate(options):
            for position, letter in candidate.constraint.bindings:
                key = (position, letter)
                if key not in letter_vars:
                    letter_vars[key] = model.new_bool_var(
                        f"w_{position.row}_{position.col}_{letter}"
                    )
                model.add_implication(choice_vars[i][j], letter_vars[key])

    by_position: Dict[Position, List[cp_model.IntVar]] = defaultdict(list)
    for (position, _), var in letter_vars.items():
        by_position[position].append(var)
    for variables in by_position.values():
        if len(variables) > 1:
            model.add_at_most_one(variables)

    # ------------------------------------------------------------------
    # Step 3: Maximise the total score
    # ------------------------------------------------------------------
    flat_vars = [var for row in choice_vars for var in row]
    total = cp_model.LinearExpr.weighted_sum(
        flat_vars,
        [candidate.score for options in candidates for candidate in options],
    )
    model.maximize(total)

    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.num_workers = 4

    LOGGER.debug(
        "CP-SAT: %d words, %d candidates, %d wildcard letters",
        len(candidates),
        sum(len(options) for options in candidates),
        len(letter_vars),
    )

    status = solver.solve(model)
    if status == cp_model.INFEASIBLE:
        return None
    _check_status(solver, status, "score")
    best_total = int(round(solver.objective_value))

    base = max(len(options) for options in candidates)
    if base == 1:
        return [0] * len(candidates)

    # ------------------------------------------------------------------
    # Step 4: Fix the total, then prefer the earliest candidates per word
    # ------------------------------------------------------------------
    model.add(total == best_total)
    count = len(candidates)
    tie_break = cp_model.LinearExpr.weighted_sum(
        flat_vars,
        [j * base ** (count - 1 - i) for i, options in enumerate(candidates) for j in range(len(options))],
    )
    model.minimize(tie_break)

    status = solver.solve(model)
    _check_status(solver, status, "tie-break")

    LOGGER.debug("CP-SAT: best total %d in %.3fs", best_total, solver.wall_time)
    return [
        next(j for j, var in enumerate(row) if solver.boolean_value(var))
        for row in choice_vars
    ]


def _check_status(solver: cp_model.CpSolver, status, phase: str) -> None:
    if status == cp_model.OPTIMAL:
        return
    if status == cp_model.FEASIBLE:
        LOGGER.warning("CP-SAT: %s phase hit the time limit before proving optimality", phase)
        return
    raise SolverError(f"CP-SAT {phase} phase ended with status {solver.status_name(status)}")
