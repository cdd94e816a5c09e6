"""
Tokenize With Padding
======================

Concatenates every input string into one buffer, right-pads it with a
padding character until its length is a multiple of the chunk size, and
joins fixed-size chunks with a delimiter.

    size=2, delim="-", strings=["Hello"]  ->  "He-ll-o "

The buffer length is accumulated with saturating addition; a length that
reaches the top of the unsigned range is reported as an overflow instead
of wrapping around.
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from shared.math_utils import UINTMAX_MAX, round_up_to_multiple, saturating_add

from classic.core.diagnostics import Diagnostics
from classic.core.errors import AllocationFailure, InvalidPadding, InvalidSize, Overflow
from classic.core.models import TokenizerSettings


class PaddedTokenizer:
    """Splits concatenated input into delimiter-separated, padded chunks.

    Usage::

        tok = PaddedTokenizer(TokenizerSettings(size=3, delim="|"))
        tok.tokenize(["Hello", "World"])    # "Hel|loW|orl|d  "

    Raises:
        InvalidSize:    Chunk size is zero.
        InvalidPadding: Padding string is empty.
    """

    def __init__(
        self,
        settings: TokenizerSettings,
        *,
        diagnostics: Optional[Diagnostics] = None,
    ) -> None:
        if settings.size == 0:
            raise InvalidSize("token size must be greater than zero")
        if not settings.padding:
            raise InvalidPadding("padding must be at least one character")

        self.settings = settings
        self.diagnostics = diagnostics or Diagnostics("tokenizer", quiet=True)

        if len(settings.padding) > 1:
            self.diagnostics.warn(
                "padding only uses the first character specified",
                subject=settings.padding,
            )
        self.pad_char = settings.padding[0]

    def padded_length(self, strings: Sequence[str]) -> int:
        """Length of the concatenated buffer after padding.

        Raises:
            Overflow: If the length saturates the unsigned integer range.
        """
        total = 0
        for string in strings:
            total = saturating_add(total, len(string))

        if total >= UINTMAX_MAX:
            raise Overflow("combined string length overflows")

        padded = round_up_to_multiple(total, self.settings.size)
        if padded >= UINTMAX_MAX:
            raise Overflow("padded string length overflows")
        return padded

    def pad(self, strings: Sequence[str]) -> str:
        """Concatenate *strings* and right-pad to a multiple of the size.

        Raises:
            AllocationFailure: If the padded buffer cannot be allocated.
        """
        length = self.padded_length(strings)
        if length > sys.maxsize:
            raise AllocationFailure("error allocating memory for string")
        try:
            buffer = "".join(strings)
            return buffer + self.pad_char * (length - len(buffer))
        except (MemoryError, OverflowError) as exc:
            raise AllocationFailure("error allocating memory for string") from exc

    def chunks(self, buffer: str) -> list[str]:
        size = self.settings.size
        return [buffer[i:i + size] for i in range(0, len(buffer), size)]

    def tokenize(self, strings: Sequence[str]) -> str:
        return self.settings.delim.join(self.chunks(self.pad(strings)))
