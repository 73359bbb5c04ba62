import unittest
from unittest import mock

from pathfinder.core.constants import WildcardScoring
from pathfinder.core.exceptions import SolverError
from pathfinder.engine.board import Board
from pathfinder.engine.optimizer import build_candidates, score_answer_group, search_answer_group
from pathfinder.engine.paths import find_all_paths
from pathfinder.engine.scoring import ScoringConfig
from pathfinder.engine.solver import solve_answer_group
from pathfinder.engine.validator import ValidatorConfig, validate_all_answers


class CpSatBackendTests(unittest.TestCase):
    CASES = [
        ("iaroo*nhdo*terbe", ["diode", "radio", "redo"]),
        ("ebnlp*icai*sseer", ["biscuit", "pas", "seer", "nil", "bit"]),
        ("cateompl*se*rndg", ["test", "set", "cat"]),
        ("ab*ba*aba", ["ab", "ba", "bab"]),
    ]

    def test_agrees_with_branch_and_bound(self) -> None:
        for config in (ScoringConfig(), ScoringConfig(wildcard_scoring=WildcardScoring.LETTER_POINTS)):
            for letters, words in self.CASES:
                with self.subTest(letters=letters, policy=config.wildcard_scoring):
                    board = Board.from_letters(letters)
                    candidates = [build_candidates(find_all_paths(board, word), config) for word in words]
                    self.assertEqual(
                        solve_answer_group(candidates, timeout=5.0),
                        search_answer_group(candidates),
                    )

    def test_reports_infeasible_groups(self) -> None:
        board = Board.from_letters("qcjb*dktx")
        candidates = [
            build_candidates(find_all_paths(board, "bad")),
            build_candidates(find_all_paths(board, "cut")),
        ]
        self.assertIsNone(solve_answer_group(candidates))

    def test_trivial_inputs(self) -> None:
        board = Board.from_letters("cateompl*se*rndg")
        self.assertEqual(solve_answer_group([]), [])
        self.assertEqual(solve_answer_group([build_candidates(find_all_paths(board, "cat"))]), [0])

    def test_backend_switch_in_group_scoring(self) -> None:
        board = Board.from_letters("iaroo*nhdo*terbe")
        words = ["diode", "radio", "redo"]
        search = score_answer_group(words, board, ScoringConfig(backend="search"))
        cpsat = score_answer_group(words, board, ScoringConfig(backend="cpsat"))
        self.assertEqual(cpsat.scores, search.scores)
        self.assertEqual(cpsat.assignment, search.assignment)

    def test_solver_failure_falls_back_to_search(self) -> None:
        board = Board.from_letters("iaroo*nhdo*terbe")
        words = ["diode", "radio", "redo"]
        search = score_answer_group(words, board, ScoringConfig(backend="search"))
        failure = SolverError("CP-SAT score phase ended with status UNKNOWN")
        with mock.patch("pathfinder.engine.optimizer.solve_answer_group", side_effect=failure):
            with self.assertLogs("pathfinder.engine.optimizer", level="ERROR"):
                cpsat = score_answer_group(words, board, ScoringConfig(backend="cpsat"))
        self.assertTrue(cpsat.feasible)
        self.assertEqual(cpsat.scores, search.scores)
        self.assertEqual(cpsat.assignment, search.assignment)

    def test_solver_failure_does_not_abort_validation(self) -> None:
        board = Board.from_letters("iaroo*nhdo*terbe")
        words = ["diode", "radio", "redo"]
        expected = validate_all_answers(board, words, False, None)
        config = ValidatorConfig(scoring=ScoringConfig(backend="cpsat", solver_timeout=0.5))
        failure = SolverError("CP-SAT score phase ended with status UNKNOWN")
        with mock.patch("pathfinder.engine.optimizer.solve_answer_group", side_effect=failure):
            outcome = validate_all_answers(board, words, False, None, config=config)
        self.assertEqual(outcome.valid, expected.valid)
        self.assertEqual(outcome.scores, expected.scores)
        self.assertEqual(outcome.total_score, expected.total_score)


if __name__ == "__main__":
    unittest.main()
