"""Identifier word splitting shared by every name-based heuristic."""

from __future__ import annotations

import re

_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM = re.compile(r"([A-Z]+)([A-Z][a-z])")
_SEPARATORS = re.compile(r"[\s_-]+")

MIN_WORD_LENGTH = 3


def split_words(identifier: str) -> list[str]:
    """
    Split a camelCase / PascalCase / snake_case identifier into lowercase words.

        formatCurrency  -> ["format", "currency"]
        IUserService    -> ["user", "service"]
        handleHTTPError -> ["handle", "http", "error"]

    Words shorter than 3 characters are dropped.
    """
    spaced = _LOWER_UPPER.sub(r"\1 \2", identifier)
    spaced = _ACRONYM.sub(r"\1 \2", spaced)
    return [w.lower() for w in _SEPARATORS.split(spaced) if len(w) >= MIN_WORD_LENGTH]


__all__ = ["split_words", "MIN_WORD_LENGTH"]
