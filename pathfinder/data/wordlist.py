"""Newline-delimited word list with prefix lookups."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Set

from ..core.exceptions import DictionaryLoadError
from ..utils.logger import get_logger
from .normalization import clean_word


LOGGER = get_logger(__name__)


@dataclass
class WordListConfig:
    """Configuration for word list loading and filtering."""

    path: Optional[Path | str] = None
    min_length: int = 2
    max_length: int = 16


class WordList:
    """Answers membership and prefix queries over a plain word list.

    Satisfies the dictionary interface used by answer validation: an
    ``is_loaded`` flag and ``is_valid_word(word)``.
    """

    def __init__(self, config: Optional[WordListConfig] = None) -> None:
        self.config = config or WordListConfig()
        self._words: Set[str] = set()
        self._prefixes: Set[str] = set()
        self._loaded = False
        if self.config.path is not None:
            self._load(Path(self.config.path))

    @classmethod
    def from_words(cls, words: Iterable[str], config: Optional[WordListConfig] = None) -> WordList:
        limits = config or WordListConfig()
        word_list = cls(WordListConfig(min_length=limits.min_length, max_length=limits.max_length))
        word_list.add_words(words)
        return word_list

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def _load(self, source: Path) -> None:
        if not source.exists():
            raise DictionaryLoadError(f"Missing word list: {source}")
        try:
            text = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DictionaryLoadError(f"Cannot read word list {source}: {exc}") from exc

        entries = []
        for line in text.splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            entries.append(line)
        self.add_words(entries)
        LOGGER.info("Loaded %d words from %s", len(self._words), source)

    def add_words(self, words: Iterable[str]) -> None:
        for raw in words:
            word = clean_word(raw)
            if not self.config.min_length <= len(word) <= self.config.max_length:
                continue
            if word in self._words:
                continue
            self._words.add(word)
            for end in range(1, len(word) + 1):
                self._prefixes.add(word[:end])
        self._loaded = True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def is_valid_word(self, word: str) -> bool:
        return word.lower() in self._words

    def has_prefix(self, prefix: str) -> bool:
        """True when some word starts with ``prefix``; the empty prefix always matches."""

        return not prefix or prefix.lower() in self._prefixes

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_valid_word(word)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)


__all__ = ["WordList", "WordListConfig"]
