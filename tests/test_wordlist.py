import tempfile
import unittest
from pathlib import Path

from pathfinder.core.exceptions import DictionaryLoadError
from pathfinder.data.normalization import clean_word
from pathfinder.data.wordlist import WordList, WordListConfig
from pathfinder.engine.board import Board
from pathfinder.engine.finder import find_all_valid_words


class NormalizationTests(unittest.TestCase):
    def test_clean_word_strips_accents_and_symbols(self) -> None:
        self.assertEqual(clean_word("Café"), "cafe")
        self.assertEqual(clean_word("don't"), "dont")
        self.assertEqual(clean_word("Œuvre"), "oeuvre")
        self.assertEqual(clean_word(""), "")


class WordListTests(unittest.TestCase):
    def test_loads_file_skipping_comments(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            sample = Path(tmpdir) / "words.txt"
            sample.write_text("# header\nCat\n\nmat\nx\n  test  \n", encoding="utf-8")

            words = WordList(WordListConfig(path=sample))
            self.assertTrue(words.is_loaded)
            self.assertEqual(len(words), 3)
            self.assertTrue(words.is_valid_word("cat"))
            self.assertTrue(words.is_valid_word("TEST"))
            self.assertFalse(words.is_valid_word("x"))
            self.assertIn("mat", words)
            self.assertEqual(list(words), ["cat", "mat", "test"])

    def test_missing_file(self) -> None:
        with self.assertRaises(DictionaryLoadError):
            WordList(WordListConfig(path="does/not/exist.txt"))

    def test_prefix_lookup(self) -> None:
        words = WordList.from_words(["biscuit", "bit"])
        self.assertTrue(words.has_prefix("bis"))
        self.assertTrue(words.has_prefix(""))
        self.assertFalse(words.has_prefix("bx"))

    def test_length_limits(self) -> None:
        words = WordList.from_words(["ab", "abcdef"], WordListConfig(min_length=3, max_length=5))
        self.assertEqual(len(words), 0)

    def test_unloaded_by_default(self) -> None:
        self.assertFalse(WordList().is_loaded)


class FindAllValidWordsTests(unittest.TestCase):
    def test_finds_every_listed_word(self) -> None:
        board = Board.from_letters("cateompl*se*rndg")
        words = WordList.from_words(["cat", "cam", "mat", "test", "set", "xyz", "ca"])
        answers = find_all_valid_words(board, words)
        self.assertEqual([answer.word for answer in answers], ["cam", "cat", "mat", "set", "test"])
        self.assertTrue(all(answer.is_feasible for answer in answers))

    def test_respects_max_length(self) -> None:
        board = Board.from_letters("ebnlp*icai*sseer")
        words = WordList.from_words(["biscuit", "bit"])
        found = [answer.word for answer in find_all_valid_words(board, words, max_length=5)]
        self.assertEqual(found, ["bit"])


if __name__ == "__main__":
    unittest.main()
