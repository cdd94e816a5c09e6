"""
Classic Core Module
====================

Data models, error hierarchy and advisory diagnostics for the cipher
toolkit. The orchestrating engine lives in :mod:`classic.core.engine`.
"""

from classic.core.errors import (
    AllocationFailure,
    ClassicError,
    InvalidKey,
    InvalidKeyContent,
    InvalidKeyLength,
    InvalidKeyUniqueness,
    InvalidNumber,
    InvalidPadding,
    InvalidSize,
    Overflow,
)
from classic.core.models import (
    Advisory,
    AffineKey,
    AtbashKey,
    CaesarSettings,
    CipherMode,
    NullCipherKey,
    PolybiusSettings,
    TokenizerSettings,
    TransformResult,
)

__all__ = [
    "Advisory",
    "AffineKey",
    "AllocationFailure",
    "AtbashKey",
    "CaesarSettings",
    "CipherMode",
    "ClassicError",
    "InvalidKey",
    "InvalidKeyContent",
    "InvalidKeyLength",
    "InvalidKeyUniqueness",
    "InvalidNumber",
    "InvalidPadding",
    "InvalidSize",
    "NullCipherKey",
    "Overflow",
    "PolybiusSettings",
    "TokenizerSettings",
    "TransformResult",
]
