"""CLI entrypoint for the wildcard word-search engine."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from pathfinder.core.constants import SLOT_COUNT, WildcardScoring
from pathfinder.core.exceptions import PathfinderError
from pathfinder.data.wordlist import WordList, WordListConfig
from pathfinder.engine.board import Board
from pathfinder.engine.finder import find_all_valid_words
from pathfinder.engine.generator import BoardGenerator, GeneratorConfig
from pathfinder.engine.scoring import BACKENDS, ScoringConfig
from pathfinder.engine.validator import ValidatorConfig, validate_all_answers
from pathfinder.utils.logger import configure_logging
from pathfinder.utils.pretty import print_validation

WILDCARD_SCORING_CHOICES = {
    "stored": WildcardScoring.STORED_POINTS,
    "letter": WildcardScoring.LETTER_POINTS,
}


def load_board(args: argparse.Namespace) -> Board:
    if args.board:
        return Board.from_letters(args.board)
    if args.board_file:
        payload = json.loads(args.board_file.read_text(encoding="utf-8"))
        if isinstance(payload, dict):
            payload = payload["board"]
        return Board.from_jsonable(payload)
    return BoardGenerator(GeneratorConfig(seed=args.seed)).generate()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Trace words on a letter board with wildcard tiles and score them",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--board",
        type=str,
        metavar="LETTERS",
        help="Row-major board letters, '*' for a wildcard (e.g. 'cateompl*se*rndg')",
    )
    source.add_argument(
        "--board-file",
        type=Path,
        metavar="FILE",
        help="JSON board: rows of {letter, points, is_wildcard, row, col}",
    )
    source.add_argument("--seed", type=int, default=None, help="Generate a random board with this seed")
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        default=[],
        help=f"Up to {SLOT_COUNT} answers to validate together",
    )
    parser.add_argument(
        "--dictionary",
        type=Path,
        help="Newline-delimited word list (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--focused",
        type=int,
        default=-1,
        help="Index of the answer slot being edited (exempt from eligibility checks)",
    )
    parser.add_argument(
        "--wildcard-scoring",
        type=str,
        choices=sorted(WILDCARD_SCORING_CHOICES),
        default="stored",
        help="Score wildcards by their stored points or by the letter they stand for",
    )
    parser.add_argument(
        "--backend",
        type=str,
        choices=list(BACKENDS),
        default="search",
        help="Group optimizer backend",
    )
    parser.add_argument(
        "--find-all",
        action="store_true",
        help="List every dictionary word that can be traced on the board (requires --dictionary)",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if len(args.words) > SLOT_COUNT:
        parser.error(f"at most {SLOT_COUNT} words can be validated together")
    if args.find_all and not args.dictionary:
        parser.error("--find-all requires --dictionary")

    try:
        board = load_board(args)
        word_list = WordList(WordListConfig(path=args.dictionary)) if args.dictionary else None
        config = ValidatorConfig(
            scoring=ScoringConfig(
                wildcard_scoring=WILDCARD_SCORING_CHOICES[args.wildcard_scoring],
                backend=args.backend,
            )
        )
        outcome = validate_all_answers(
            board,
            args.words,
            dictionary_loaded=word_list is not None and word_list.is_loaded,
            dictionary_lookup=word_list.is_valid_word if word_list is not None else None,
            focused_index=args.focused,
            config=config,
        )
        found = find_all_valid_words(board, word_list) if args.find_all else None
    except PathfinderError as exc:
        logging.getLogger("pathfinder").error("%s", exc)
        return 1

    print_validation(board, args.words, outcome, stream=sys.stderr)

    payload: Dict[str, Any] = {
        "board": board.to_jsonable(),
        "words": [word.lower() for word in args.words],
        "validation": outcome.to_jsonable(),
    }
    if found is not None:
        payload["all_words"] = [
            {"word": answer.word, "path_count": len(answer.paths)} for answer in found
        ]

    output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
