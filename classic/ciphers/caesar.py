"""
Caesar Cipher
==============

Rotates every letter forward through the alphabet by N positions,
wrapping within its case. With digit rotation enabled, digits are also
rotated forward by N positions modulo 10.

Letters and digits wrap on their own moduli (26 and 10). The optional
shortcut reduces N once, up front, modulo 26 (or modulo 130, the least
common multiple of 26 and 10, when digits rotate) so both classes of
character see exactly the same result as with the raw count.

References:
    - Suetonius, De Vita Caesarum, Divus Iulius 56.
"""

from __future__ import annotations

from shared.math_utils import ALPHABET_SIZE, NUMERIC_SIZE

from classic.ciphers.alphabet import DIGIT_BASE, is_digit, letter_base
from classic.core.models import CaesarSettings


class CaesarCipher:
    """Rotates strings according to :class:`CaesarSettings`.

    Usage::

        CaesarCipher(CaesarSettings(rotations=1)).rotate("abc")   # "bcd"
        CaesarCipher(CaesarSettings(rotations=3, numbers=True)).rotate("z9")
        # "c2"
    """

    def __init__(self, settings: CaesarSettings) -> None:
        self.settings = settings
        self.rotations = settings.effective_rotations

    def rotate_char(self, ch: str) -> str:
        base = letter_base(ch)
        if base is not None:
            return chr(base + (ord(ch) - base + self.rotations) % ALPHABET_SIZE)
        if self.settings.numbers and is_digit(ch):
            return chr(
                DIGIT_BASE + (ord(ch) - DIGIT_BASE + self.rotations) % NUMERIC_SIZE
            )
        return ch

    def rotate(self, text: str) -> str:
        return "".join(self.rotate_char(ch) for ch in text)
