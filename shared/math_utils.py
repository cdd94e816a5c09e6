"""
Classic Toolkit Mathematical Utilities
=======================================

Small, pure integer routines shared by the classical cipher tools:
greatest common divisor, modular multiplicative inverse via the iterative
extended Euclidean algorithm, least common multiple, and a saturating
addition that clamps at a fixed unsigned limit instead of growing without
bound.

None of these functions perform I/O or hold state, so they can be tested
and reused in isolation.

References:
    [1] Knuth, D. E. (1997). The Art of Computer Programming, Vol. 2:
        Seminumerical Algorithms, 3rd ed. Section 4.5.2.
    [2] Cormen, T. H. et al. (2009). Introduction to Algorithms, 3rd ed.
        Section 31.2 (Greatest common divisor) and 31.4 (Modular
        linear equations).
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
#  Alphabet and integer-range constants
# ---------------------------------------------------------------------------
ALPHABET_SIZE: int = 26
NUMERIC_SIZE: int = 10

# Least common multiple of ALPHABET_SIZE and NUMERIC_SIZE
LCM_ALPHA_NUM: int = 130

# Ranges of the fixed-width integers the command-line tools accept
INTMAX_MAX: int = 2**63 - 1
UINTMAX_MAX: int = 2**64 - 1


# ========================== Divisibility ===================================


def gcd(a: int, b: int) -> int:
    """Compute the greatest common divisor of two non-negative integers.

    Uses the iterative form of Euclid's algorithm:

    .. math::

        \\gcd(a, b) = \\gcd(b, a \\bmod b), \\quad \\gcd(a, 0) = a

    Reference:
        Knuth, D. E. (1997). TAOCP Vol. 2, Algorithm 4.5.2A.

    Args:
        a: First operand.
        b: Second operand.

    Returns:
        The greatest common divisor. ``gcd(0, 0)`` is ``0``.
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple of two non-negative integers (``0`` if either is)."""
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)


def is_coprime(a: int, m: int) -> bool:
    """Return ``True`` when *a* and *m* share no factor other than 1."""
    return gcd(a, m) == 1


def mod_inverse(a: int, m: int) -> int:
    """Compute the modular multiplicative inverse of *a* modulo *m*.

    Finds ``x`` in ``[0, m)`` such that:

    .. math::

        a \\cdot x \\equiv 1 \\pmod{m}

    The inverse exists only when ``gcd(a, m) = 1``. The iterative
    extended Euclidean algorithm tracks the Bezout coefficient of *a*
    while reducing the remainder pair ``(a mod m, m)``.

    Reference:
        Cormen, T. H. et al. (2009). Introduction to Algorithms,
        Section 31.4, procedure EXTENDED-EUCLID.

    Args:
        a: Value to invert. May be larger than *m*.
        m: Modulus, must be positive.

    Returns:
        The inverse of *a* modulo *m*, normalised into ``[0, m)``.

    Raises:
        ValueError: If *m* is not positive or *a* is not coprime to *m*.
    """
    if m <= 0:
        raise ValueError(f"Modulus must be positive, got {m}")
    if not is_coprime(a, m):
        raise ValueError(f"{a} has no inverse modulo {m}")

    old_r, r = a % m, m
    old_s, s = 1, 0
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s

    return old_s % m


# ========================== Bounded arithmetic =============================


def saturating_add(x: int, y: int, limit: int = UINTMAX_MAX) -> int:
    """Add two non-negative integers, clamping the sum at *limit*.

    Mirrors unsigned saturating addition: any result that would exceed
    the representable range becomes *limit* rather than wrapping.

    Args:
        x: First addend.
        y: Second addend.
        limit: Largest representable value.

    Returns:
        ``min(x + y, limit)``.
    """
    total = x + y
    return limit if total > limit else total


def round_up_to_multiple(value: int, step: int) -> int:
    """Smallest multiple of *step* that is greater than or equal to *value*."""
    if step <= 0:
        raise ValueError(f"Step must be positive, got {step}")
    remainder = value % step
    return value if remainder == 0 else value + (step - remainder)
