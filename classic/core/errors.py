"""
Classic Error Hierarchy
========================

Fatal conditions raised by the cipher tools. All of them derive from
:class:`ClassicError`; the CLI reports the message on standard error and
exits with status 1 before any result line is written.

Advisory conditions (unmapped characters, out-of-range indices, a
defaulted cipher mode) are not exceptions; see
:mod:`classic.core.diagnostics`.
"""

from __future__ import annotations


class ClassicError(Exception):
    """Base class for every fatal cipher tool error."""


class InvalidKey(ClassicError):
    """A cipher key cannot produce a bijective mapping."""


class InvalidKeyLength(InvalidKey):
    """A substitution key is not exactly 26 characters long."""


class InvalidKeyContent(InvalidKey):
    """A substitution key contains non-alphabetic characters."""


class InvalidKeyUniqueness(InvalidKey):
    """A substitution key repeats a letter while uniqueness was requested."""


class InvalidNumber(ClassicError):
    """A numeric argument is malformed, negative or out of range."""


class InvalidSize(ClassicError):
    """A token size is zero."""


class InvalidPadding(ClassicError):
    """The padding argument is empty."""


class Overflow(ClassicError):
    """A computed length saturated the integer range."""


class AllocationFailure(ClassicError):
    """The padded output buffer could not be allocated."""
