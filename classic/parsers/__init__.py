"""
Classic Parsers
================

Argument parsing utilities: strict decimal numbers and null cipher key
tokenization.
"""

from classic.parsers.key_parser import parse_offsets, split_key
from classic.parsers.number_parser import parse_integer, parse_unsigned

__all__ = [
    "parse_integer",
    "parse_offsets",
    "parse_unsigned",
    "split_key",
]
