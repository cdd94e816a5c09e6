"""
Backwards Cipher
=================

Reverses the character order of a string. Every character is reversed,
letters or not, and there is no key.
"""

from __future__ import annotations


class BackwardsCipher:
    """Prints strings backwards."""

    @staticmethod
    def reverse(text: str) -> str:
        return text[::-1]
