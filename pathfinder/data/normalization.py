"""Shared helpers for word normalization."""

from __future__ import annotations

import re
import unicodedata

LIGATURES = {
    "æ": "ae",
    "Æ": "ae",
    "œ": "oe",
    "Œ": "oe",
    "ß": "ss",
}

WORD_RE = re.compile(r"[^a-z]")


def clean_word(text: str) -> str:
    """Return a normalized lowercase ASCII representation of ``text``."""

    if not text:
        return ""
    transformed = []
    for char in text:
        if char in LIGATURES:
            transformed.append(LIGATURES[char])
        elif char.isalpha():
            transformed.append(char)
    decomposed = unicodedata.normalize("NFKD", "".join(transformed))
    return WORD_RE.sub("", decomposed.lower())


__all__ = ["clean_word", "LIGATURES"]
