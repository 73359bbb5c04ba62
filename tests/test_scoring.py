import unittest

from pathfinder.core.constants import LETTER_FREQUENCIES, WildcardScoring
from pathfinder.engine.board import Board
from pathfinder.engine.paths import find_all_paths
from pathfinder.engine.scoring import ScoringConfig, letter_point_table, letter_points, path_score


class LetterPointTests(unittest.TestCase):
    def test_common_letters_are_cheap(self) -> None:
        self.assertEqual(letter_points("e"), 1)
        self.assertEqual(letter_points("a"), 1)
        self.assertEqual(letter_points("t"), 1)

    def test_rare_letters_are_expensive(self) -> None:
        self.assertEqual(letter_points("c"), 2)
        self.assertEqual(letter_points("m"), 3)
        self.assertEqual(letter_points("z"), 5)
        self.assertEqual(letter_points("Q"), 6)

    def test_wildcard_is_free(self) -> None:
        self.assertEqual(letter_points("*"), 0)

    def test_unknown_letter(self) -> None:
        with self.assertRaises(ValueError):
            letter_points("1")

    def test_table_covers_alphabet(self) -> None:
        table = letter_point_table()
        self.assertEqual(set(table), set(LETTER_FREQUENCIES) | {"*"})
        self.assertTrue(all(value >= 1 for letter, value in table.items() if letter != "*"))


class PathScoreTests(unittest.TestCase):
    def setUp(self) -> None:
        self.board = Board.from_letters("cateompl*se*rndg")
        self.path = find_all_paths(self.board, "test").paths[0]

    def test_stored_points_policy(self) -> None:
        self.assertEqual(path_score(self.path), 2)

    def test_letter_points_policy(self) -> None:
        config = ScoringConfig(wildcard_scoring=WildcardScoring.LETTER_POINTS)
        self.assertEqual(path_score(self.path, config), 4)

    def test_config_accepts_plain_strings(self) -> None:
        config = ScoringConfig(wildcard_scoring="LETTER_POINTS")
        self.assertIs(config.wildcard_scoring, WildcardScoring.LETTER_POINTS)

    def test_unknown_backend(self) -> None:
        with self.assertRaises(ValueError):
            ScoringConfig(backend="magic")

    def test_solver_timeout_must_be_positive(self) -> None:
        for timeout in (0.0, -1.0):
            with self.subTest(timeout=timeout):
                with self.assertRaises(ValueError):
                    ScoringConfig(backend="cpsat", solver_timeout=timeout)


if __name__ == "__main__":
    unittest.main()
