"""Logging utilities for the word-search engine.

Every module logs through ``get_logger(__name__)`` under the ``pathfinder``
namespace. Path enumeration, candidate search and board generation report
at DEBUG. Word-list loading, word-finder totals and rejected answer groups
report at INFO. CP-SAT runs that stop at the time limit report at WARNING. A failed CP-SAT
run that falls back to search, and validation states that should not occur,
report at ERROR.
"""

from __future__ import annotations

import logging
from typing import Optional


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging with a sensible formatter."""

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "pathfinder")
