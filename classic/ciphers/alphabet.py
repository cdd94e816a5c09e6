"""
Alphabet helpers shared by the letter-mapping ciphers.

Only ASCII ``a-z`` / ``A-Z`` count as letters; case is preserved by
mapping each letter relative to the base of its own case.
"""

from __future__ import annotations

import string
from typing import Optional

ALPHABET = string.ascii_lowercase

LOWER_BASE = ord("a")
UPPER_BASE = ord("A")
DIGIT_BASE = ord("0")


def letter_base(ch: str) -> Optional[int]:
    """Code point of ``'a'`` or ``'A'`` matching the case of *ch*, else ``None``."""
    if "a" <= ch <= "z":
        return LOWER_BASE
    if "A" <= ch <= "Z":
        return UPPER_BASE
    return None


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"
