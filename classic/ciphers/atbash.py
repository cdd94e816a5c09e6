"""
Atbash Cipher
==============

Monoalphabetic substitution driven by a 26-letter key: the i-th letter
of the alphabet is replaced by the i-th letter of the key. The classical
Atbash key is the reversed alphabet ``zyxwvutsrqponmlkjihgfedcba``, which
makes the cipher its own inverse; any other permutation generalises it
to an arbitrary substitution alphabet.

The key is case-insensitive. Replacements keep the case of the input
letter; non-letters pass through unchanged.
"""

from __future__ import annotations

from shared.math_utils import ALPHABET_SIZE

from classic.ciphers.alphabet import ALPHABET
from classic.core.errors import (
    InvalidKeyContent,
    InvalidKeyLength,
    InvalidKeyUniqueness,
)
from classic.core.models import AtbashKey

REVERSED_ALPHABET = ALPHABET[::-1]


class AtbashCipher:
    """Substitutes letters according to an :class:`AtbashKey`.

    Validation runs in this order: length, alphabetic content, and
    (only when *unique* is set) distinct letters.

    Usage::

        cipher = AtbashCipher(AtbashKey(key=REVERSED_ALPHABET))
        cipher.substitute("Hello")    # "Svool"
    """

    def __init__(self, key: AtbashKey, *, unique: bool = False) -> None:
        self.validate(key.key, unique=unique)
        self.key = key
        upper = key.key.upper()
        self._table = str.maketrans(
            ALPHABET + ALPHABET.upper(), key.key + upper
        )

    @staticmethod
    def validate(key: str, *, unique: bool = False) -> None:
        """Check a lower-cased key string.

        Raises:
            InvalidKeyLength:     Key is not 26 characters long.
            InvalidKeyContent:    Key holds a non-letter.
            InvalidKeyUniqueness: *unique* is set and a letter repeats.
        """
        if len(key) != ALPHABET_SIZE:
            raise InvalidKeyLength(f"key must be {ALPHABET_SIZE} characters long")
        if not all("a" <= ch <= "z" for ch in key):
            raise InvalidKeyContent("key must be alphabetic")
        if unique and len(set(key)) != len(key):
            raise InvalidKeyUniqueness(
                "key must be unique (called with '--unique')"
            )

    def substitute(self, text: str) -> str:
        return text.translate(self._table)

    def comparison(self) -> list[str]:
        """Alphabet and key on two lines, followed by a blank line."""
        return [ALPHABET, self.key.key, ""]
