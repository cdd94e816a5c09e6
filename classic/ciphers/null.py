"""
Null Cipher
============

Extracts single characters at key-defined offsets from a list of cover
strings.

The key is tokenized into an ordered list of numeric offsets. The i-th
offset selects the character at ``origin + offset`` inside the i-th
positional string; pairs are consumed in order and processing stops as
soon as either list runs out. Note the direction: numbers come from the
key, the strings indexed into come from the positional arguments.

An offset past the end of its string is an advisory, not an error: the
pair produces an empty line and processing continues.
"""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from classic.core.diagnostics import Diagnostics
from classic.core.models import NullCipherKey


class NullCipher:
    """Locates characters in cover strings using :class:`NullCipherKey`.

    Usage::

        cipher = NullCipher(NullCipherKey(offsets=(1, 0)))
        cipher.extract(["Hello", "World"])    # ["e ", "W "]
    """

    def __init__(
        self,
        key: NullCipherKey,
        *,
        diagnostics: Optional[Diagnostics] = None,
    ) -> None:
        self.key = key
        self.diagnostics = diagnostics or Diagnostics("null", quiet=True)

    def locate(self, string: str, offset: int) -> Optional[str]:
        """Character at ``origin + offset`` in *string*, or ``None`` if out of range."""
        index = self.key.origin + offset
        if index >= len(string):
            self.diagnostics.warn("index in string not found", subject=string)
            return None
        return string[index]

    def iter_extract(self, positions: Sequence[str]) -> Iterator[str]:
        """Yield one output line per (offset, string) pair.

        A found character is written followed by a space; a missing one
        yields an empty line.
        """
        for offset, string in zip(self.key.offsets, positions):
            ch = self.locate(string, offset)
            yield "" if ch is None else f"{ch} "

    def extract(self, positions: Sequence[str]) -> list[str]:
        return list(self.iter_extract(positions))
