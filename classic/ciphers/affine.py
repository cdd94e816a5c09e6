"""
Affine Cipher
==============

Letter substitution through the linear map

    E(x) = (a*x + b) mod 26
    D(y) = a^-1 * (y - b) mod 26

where ``x`` is the letter's alphabet position and ``a^-1`` is the
modular inverse of ``a``. The map is a bijection only when
``gcd(a, 26) = 1``; any other ``a`` is rejected before a single
character is processed.

Non-letters pass through unchanged and case is preserved.

References:
    - Stinson, D. R. (2005). Cryptography: Theory and Practice, 3rd ed.
      Section 1.1.4.
"""

from __future__ import annotations

from shared.math_utils import ALPHABET_SIZE, is_coprime, mod_inverse

from classic.ciphers.alphabet import letter_base
from classic.core.errors import InvalidKey
from classic.core.models import AffineKey, CipherMode


class AffineCipher:
    """Encrypts and decrypts strings with an affine key.

    Usage::

        cipher = AffineCipher(AffineKey(a=5, b=7))
        cipher.encrypt("Hello")       # "Qbkkz"
        cipher.decrypt("Qbkkz")       # "Hello"

    Raises:
        InvalidKey: If ``a`` is not coprime to 26.
    """

    def __init__(self, key: AffineKey) -> None:
        if not is_coprime(key.a, ALPHABET_SIZE):
            raise InvalidKey(f"A must be coprime to {ALPHABET_SIZE}")

        self.key = key
        # Computed once per key rather than per character
        self.inverse = mod_inverse(key.a, ALPHABET_SIZE)

    def encrypt_char(self, ch: str) -> str:
        base = letter_base(ch)
        if base is None:
            return ch
        offset = ord(ch) - base
        return chr(base + (self.key.a * offset + self.key.b) % ALPHABET_SIZE)

    def decrypt_char(self, ch: str) -> str:
        base = letter_base(ch)
        if base is None:
            return ch
        offset = ord(ch) - base
        return chr(
            base
            + (self.inverse * (ALPHABET_SIZE + offset - self.key.b)) % ALPHABET_SIZE
        )

    def encrypt(self, text: str) -> str:
        return "".join(self.encrypt_char(ch) for ch in text)

    def decrypt(self, text: str) -> str:
        return "".join(self.decrypt_char(ch) for ch in text)

    def transform(self, text: str, mode: CipherMode) -> str:
        """Apply the cipher to *text* in the given direction."""
        if mode is CipherMode.DECRYPT:
            return self.decrypt(text)
        return self.encrypt(text)
