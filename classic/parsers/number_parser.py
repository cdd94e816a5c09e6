"""
Number Parser
==============

Strict decimal parsing for the numeric command-line arguments of the
cipher tools (affine keys, rotation counts, index origins, token sizes
and null cipher offsets).

Accepted format: optional surrounding whitespace, an optional sign, and
one or more ASCII decimal digits. Values are range-checked against the
fixed-width integer limits the tools emulate.
"""

from __future__ import annotations

import re

from shared.math_utils import UINTMAX_MAX

from classic.core.errors import InvalidNumber

_DECIMAL_PATTERN = re.compile(r"^\s*([+-]?)([0-9]+)\s*$")


def parse_integer(
    text: str,
    *,
    name: str = "value",
    minimum: int | None = None,
    maximum: int | None = None,
) -> int:
    """Parse a signed decimal integer and check it against a range.

    Args:
        text:    Raw argument text.
        name:    Argument name used in error messages.
        minimum: Smallest accepted value, ``None`` for no bound.
        maximum: Largest accepted value, ``None`` for no bound.

    Returns:
        The parsed integer.

    Raises:
        InvalidNumber: On malformed text, or a value outside the range.
    """
    match = _DECIMAL_PATTERN.match(text)
    if match is None:
        raise InvalidNumber(f"{name} must be an integer, got {text!r}")

    sign, digits = match.groups()
    value = int(digits)
    if sign == "-":
        value = -value

    if maximum is not None and value > maximum:
        raise InvalidNumber(f"could not convert {name} to integer (overflow)")
    if minimum is not None and value < minimum:
        raise InvalidNumber(f"{name} must be at least {minimum}, got {value}")
    return value


def parse_unsigned(
    text: str,
    *,
    name: str = "value",
    maximum: int = UINTMAX_MAX,
) -> int:
    """Parse a non-negative decimal integer no larger than *maximum*.

    Raises:
        InvalidNumber: On malformed text, a negative value, or overflow.
    """
    value = parse_integer(text, name=name, maximum=maximum)
    if value < 0:
        raise InvalidNumber(f"{name} must be a non-negative integer, got {value}")
    return value
