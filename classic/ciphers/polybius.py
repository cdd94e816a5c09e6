"""
Polybius Square
================

Maps letters to two-digit coordinates in a 5x5 grid (rows and columns
numbered 1-5). ``I`` and ``J`` share cell ``24``; which of the two that
cell decodes to is configurable.

    1  2  3  4  5
 1  A  B  C  D  E
 2  F  G  H  I  K
 3  L  M  N  O  P
 4  Q  R  S  T  U
 5  V  W  X  Y  Z

Encryption is case-insensitive and writes every coordinate followed by a
space. Characters outside ``a-z``/``A-Z`` are dropped with an advisory
(unlike the other ciphers, which pass them through). Decryption takes
one coordinate per input string and writes an upper-case letter.

References:
    - Polybius, Histories, Book X, 45-47.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from classic.ciphers.alphabet import letter_base
from classic.core.diagnostics import Diagnostics
from classic.core.models import CipherMode, PolybiusSettings

GRID_SIZE = 5

_BASE_GRID: tuple[str, ...] = (
    "ABCDE",
    "FGHIK",
    "LMNOP",
    "QRSTU",
    "VWXYZ",
)

# Letter -> coordinate; J shares I's cell
COORDINATES: Mapping[str, str] = MappingProxyType(
    {
        **{
            letter: f"{row}{col}"
            for row, letters in enumerate(_BASE_GRID, start=1)
            for col, letter in enumerate(letters, start=1)
        },
        "J": "24",
    }
)


def build_grid(letter_24: str = "I") -> tuple[str, ...]:
    """Grid rows with cell ``24`` showing *letter_24*."""
    rows = list(_BASE_GRID)
    rows[1] = rows[1][:3] + letter_24 + rows[1][4:]
    return tuple(rows)


class PolybiusSquare:
    """Encodes and decodes through the 5x5 grid.

    Usage::

        square = PolybiusSquare()
        square.encrypt("Hi")      # "23 24 "
        square.decrypt("24")      # "I"
    """

    def __init__(
        self,
        settings: Optional[PolybiusSettings] = None,
        *,
        diagnostics: Optional[Diagnostics] = None,
    ) -> None:
        self.settings = settings or PolybiusSettings()
        self.grid = build_grid(self.settings.letter_24)
        self.diagnostics = diagnostics or Diagnostics("polybius", quiet=True)

    def encrypt_char(self, ch: str) -> Optional[str]:
        """Coordinate of *ch*, or ``None`` when *ch* is not an ASCII letter."""
        if letter_base(ch) is None:
            return None
        return COORDINATES[ch.upper()]

    def decrypt_char(self, coordinate: str) -> str:
        """Letter at a validated two-digit *coordinate*."""
        row, col = int(coordinate[0]), int(coordinate[1])
        return self.grid[row - 1][col - 1]

    def encrypt(self, text: str) -> str:
        parts = []
        for ch in text:
            coordinate = self.encrypt_char(ch)
            if coordinate is None:
                self.diagnostics.warn(
                    f"character '{ch}' could not be mapped to coordinates, skipping",
                    subject=ch,
                )
                continue
            parts.append(f"{coordinate} ")
        return "".join(parts)

    def decrypt(self, text: str) -> str:
        """Decode one coordinate; invalid input yields ``""`` and an advisory."""
        if len(text) != 2:
            self.diagnostics.warn(
                "coordinates must be two digits long, skipping", subject=text
            )
            return ""
        if not self._in_range(text[0]):
            self.diagnostics.warn(
                "first coordinate digit must be between 1 and 5, skipping",
                subject=text,
            )
            return ""
        if not self._in_range(text[1]):
            self.diagnostics.warn(
                "second coordinate digit must be between 1 and 5, skipping",
                subject=text,
            )
            return ""
        return self.decrypt_char(text)

    def transform(self, text: str, mode: CipherMode) -> str:
        if mode is CipherMode.DECRYPT:
            return self.decrypt(text)
        return self.encrypt(text)

    @staticmethod
    def _in_range(digit: str) -> bool:
        return "1" <= digit <= str(GRID_SIZE)
