"""Tests for the null cipher."""

from __future__ import annotations

import pytest

from classic.ciphers.null import NullCipher
from classic.core.errors import InvalidNumber
from classic.core.models import NullCipherKey


def test_key_offsets_index_into_position_strings():
    cipher = NullCipher(NullCipherKey(offsets=(1, 0)))
    assert cipher.extract(["Hello", "World"]) == ["e ", "W "]


def test_origin_shifts_every_offset():
    cipher = NullCipher(NullCipherKey(offsets=(0, 3), origin=1))
    assert cipher.extract(["Hello", "World"]) == ["e ", "d "]


def test_stops_at_shorter_list():
    cipher = NullCipher(NullCipherKey(offsets=(0, 0, 0)))
    assert cipher.extract(["ab"]) == ["a "]

    cipher = NullCipher(NullCipherKey(offsets=(0,)))
    assert cipher.extract(["ab", "cd"]) == ["a "]


def test_out_of_range_offset_is_advisory(diagnostics):
    cipher = NullCipher(NullCipherKey(offsets=(5, 1)), diagnostics=diagnostics)
    assert cipher.extract(["Hello", "Hi"]) == ["", "i "]

    [advisory] = diagnostics.advisories
    assert advisory.message == "index in string not found"
    assert advisory.subject == "Hello"


def test_origin_past_end_is_advisory(diagnostics):
    cipher = NullCipher(NullCipherKey(offsets=(0,), origin=2), diagnostics=diagnostics)
    assert cipher.locate("ab", 0) is None
    assert len(diagnostics.advisories) == 1


def test_engine_parses_key_tokens(engine):
    result = engine.null("1, 2.0", ["abc", "xyz", "hello"])
    assert result.outputs == ["b ", "z ", "h "]


def test_engine_rejects_non_numeric_key(engine):
    with pytest.raises(InvalidNumber):
        engine.null("ab cd", ["Hello", "World"])
