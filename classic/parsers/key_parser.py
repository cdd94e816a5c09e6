"""
Key Parser
===========

Splits a null cipher key into its ordered offset tokens.

The key is split on runs of space, comma, period, tab and newline;
empty tokens are dropped, so ``"3, 1.4"`` yields ``["3", "1", "4"]``.
"""

from __future__ import annotations

import re

from classic.core.errors import InvalidNumber
from classic.parsers.number_parser import parse_unsigned

KEY_DELIMITERS = " ,.\t\n"

_SPLIT_PATTERN = re.compile(f"[{re.escape(KEY_DELIMITERS)}]+")


def split_key(key: str) -> list[str]:
    """Split *key* into non-empty tokens in order of appearance."""
    return [token for token in _SPLIT_PATTERN.split(key) if token]


def parse_offsets(key: str) -> tuple[int, ...]:
    """Tokenize *key* and parse every token as a non-negative offset.

    Raises:
        InvalidNumber: If any token is not a non-negative integer.
    """
    offsets = []
    for position, token in enumerate(split_key(key), start=1):
        try:
            offsets.append(parse_unsigned(token, name=f"key token {position}"))
        except InvalidNumber as exc:
            raise InvalidNumber(
                f"key tokens must be non-negative integers: {exc}"
            ) from exc
    return tuple(offsets)
