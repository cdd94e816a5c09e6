"""
Classic Ciphers
================

One module per transformation. Each cipher is constructed once from its
immutable key or settings model and then applied to every input string.
"""

from classic.ciphers.affine import AffineCipher
from classic.ciphers.atbash import REVERSED_ALPHABET, AtbashCipher
from classic.ciphers.backwards import BackwardsCipher
from classic.ciphers.caesar import CaesarCipher
from classic.ciphers.null import NullCipher
from classic.ciphers.polybius import PolybiusSquare
from classic.ciphers.tokenizer import PaddedTokenizer

__all__ = [
    "AffineCipher",
    "AtbashCipher",
    "BackwardsCipher",
    "CaesarCipher",
    "NullCipher",
    "PaddedTokenizer",
    "PolybiusSquare",
    "REVERSED_ALPHABET",
]
