import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr
from pathlib import Path

from main import build_parser, main
from pathfinder.core.models import Position, WildcardAssignment
from pathfinder.engine.board import Board
from pathfinder.utils.pretty import format_assignment, format_board


class CliTests(unittest.TestCase):
    def run_cli(self, *argv: str) -> dict:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "result.json"
            with redirect_stderr(io.StringIO()):
                code = main([*argv, "--output", str(output), "--log-level", "WARNING"])
            self.assertEqual(code, 0)
            return json.loads(output.read_text(encoding="utf-8"))

    def test_validates_words_on_a_letter_board(self) -> None:
        payload = self.run_cli("--board", "cateompl*se*rndg", "--words", "cat", "test")
        validation = payload["validation"]
        self.assertEqual(validation["valid"], [True, True, False, False, False])
        self.assertEqual(validation["assignment"], {"2-0": "t", "2-3": "t"})
        self.assertEqual(payload["words"], ["cat", "test"])

    def test_board_file_and_dictionary(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            board_file = Path(tmpdir) / "board.json"
            board_file.write_text(
                json.dumps({"board": Board.from_letters("cateompl*se*rndg").to_jsonable()}),
                encoding="utf-8",
            )
            dictionary = Path(tmpdir) / "words.txt"
            dictionary.write_text("cat\nmat\n", encoding="utf-8")
            payload = self.run_cli(
                "--board-file",
                str(board_file),
                "--dictionary",
                str(dictionary),
                "--words",
                "cat",
                "cam",
                "--find-all",
            )
        self.assertEqual(payload["validation"]["valid"][:2], [True, False])
        self.assertEqual([entry["word"] for entry in payload["all_words"]], ["cat", "mat"])

    def test_generated_board_is_reproducible(self) -> None:
        first = self.run_cli("--seed", "5")
        second = self.run_cli("--seed", "5")
        self.assertEqual(first["board"], second["board"])

    def test_too_many_words_is_a_usage_error(self) -> None:
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main(["--board", "abcd", "--words", "a", "b", "c", "d", "e", "f"])

    def test_unsupported_board_letter_exits_with_error(self) -> None:
        with redirect_stderr(io.StringIO()):
            self.assertEqual(main(["--board", "\u00e9aaa", "--words", "aa"]), 1)

    def test_parser_defaults(self) -> None:
        args = build_parser().parse_args([])
        self.assertEqual(args.backend, "search")
        self.assertEqual(args.wildcard_scoring, "stored")
        self.assertEqual(args.focused, -1)


class PrettyTests(unittest.TestCase):
    def test_format_board_shows_bound_wildcards(self) -> None:
        board = Board.from_letters("ab*d")
        plain = format_board(board)
        self.assertIn(" *", plain)
        bound = format_board(board, WildcardAssignment(((Position(1, 0), "q"),)))
        self.assertIn(" q", bound)
        self.assertEqual(format_assignment(WildcardAssignment()), "{}")


if __name__ == "__main__":
    unittest.main()
