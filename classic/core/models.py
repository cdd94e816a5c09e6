"""
Classic Core Data Models
=========================

Pydantic models for the classical cipher engine: cipher keys and tool
settings (immutable, constructed once per run and shared read-only by
every input string) and the :class:`TransformResult` each engine
operation returns.

References:
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
    - Kahn, D. (1996). The Codebreakers. Scribner.
"""

from __future__ import annotations

import enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shared.math_utils import ALPHABET_SIZE, LCM_ALPHA_NUM


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class CipherMode(str, enum.Enum):
    """Direction of a reversible transformation."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


# ===================================================================== #
#  Keys and Settings
# ===================================================================== #


class AffineKey(BaseModel):
    """Affine cipher key ``(a, b)`` for ``E(x) = (a*x + b) mod 26``.

    Attributes:
        a: Multiplier; must be coprime to 26 for the map to be bijective.
        b: Shift.
    """

    model_config = ConfigDict(frozen=True)

    a: int = Field(..., ge=0)
    b: int = Field(..., ge=0)


class AtbashKey(BaseModel):
    """A 26-letter substitution alphabet, stored lower-case.

    ``key[i]`` is the replacement for the i-th letter of the alphabet.
    """

    model_config = ConfigDict(frozen=True)

    key: str

    @field_validator("key", mode="before")
    @classmethod
    def _normalise(cls, v: str) -> str:
        return v.lower()


class CaesarSettings(BaseModel):
    """Rotation count and flags for the Caesar cipher.

    Attributes:
        rotations: Forward shift applied to every letter (and digit).
        numbers:   Rotate digits modulo 10 alongside letters.
        shortcut:  Reduce *rotations* up front (mod 26, or mod 130 with
                   *numbers*) instead of carrying the raw count.
    """

    model_config = ConfigDict(frozen=True)

    rotations: int = Field(default=1, ge=0)
    numbers: bool = False
    shortcut: bool = True

    @property
    def effective_rotations(self) -> int:
        """Rotation count actually fed to the per-character transform."""
        if not self.shortcut:
            return self.rotations
        modulus = LCM_ALPHA_NUM if self.numbers else ALPHABET_SIZE
        return self.rotations % modulus


class NullCipherKey(BaseModel):
    """Offsets parsed from the null cipher key plus the index origin."""

    model_config = ConfigDict(frozen=True)

    offsets: tuple[int, ...] = ()
    origin: int = Field(default=0, ge=0)


class PolybiusSettings(BaseModel):
    """Which letter coordinate ``24`` decodes to (``I`` or ``J``)."""

    model_config = ConfigDict(frozen=True)

    letter_24: Literal["I", "J"] = "I"

    @field_validator("letter_24", mode="before")
    @classmethod
    def _upper(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class TokenizerSettings(BaseModel):
    """Chunk size, delimiter and padding for tokenize-with-padding."""

    model_config = ConfigDict(frozen=True)

    size: int = Field(..., ge=0)
    delim: str = " "
    padding: str = " "


# ===================================================================== #
#  Results
# ===================================================================== #


class Advisory(BaseModel):
    """A non-fatal condition met while transforming input.

    Attributes:
        tool:    Tool that raised the advisory.
        message: Human-readable warning text.
        subject: Input string or character the warning refers to.
    """

    tool: str
    message: str
    subject: Optional[str] = None


class TransformResult(BaseModel):
    """Output of one engine operation over all input strings.

    Attributes:
        tool:       Tool name (``"affine"``, ``"caesar"``, ...).
        mode:       Cipher direction, for tools that have one.
        inputs:     Input strings in argument order.
        preamble:   Lines written before the results (atbash ``--print``).
        outputs:    Result lines, in input order.
        advisories: Warnings raised while processing, quiet or not.
    """

    tool: str
    mode: Optional[CipherMode] = None
    inputs: list[str] = Field(default_factory=list)
    preamble: list[str] = Field(default_factory=list)
    outputs: list[str] = Field(default_factory=list)
    advisories: list[Advisory] = Field(default_factory=list)

    @property
    def lines(self) -> list[str]:
        """Every line the tool writes to standard output."""
        return [*self.preamble, *self.outputs]

    @property
    def advisory_count(self) -> int:
        return len(self.advisories)
