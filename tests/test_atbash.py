"""Tests for the Atbash substitution cipher."""

from __future__ import annotations

import string

import pytest
from hypothesis import given, strategies as st

from classic.ciphers.atbash import REVERSED_ALPHABET, AtbashCipher
from classic.core.errors import (
    InvalidKey,
    InvalidKeyContent,
    InvalidKeyLength,
    InvalidKeyUniqueness,
)
from classic.core.models import AtbashKey


@pytest.fixture
def atbash() -> AtbashCipher:
    return AtbashCipher(AtbashKey(key=REVERSED_ALPHABET))


def test_classical_atbash(atbash):
    assert atbash.substitute("Hello") == "Svool"
    assert atbash.substitute("Hello, World!") == "Svool, Dliow!"


def test_shifted_key_with_mixed_case():
    cipher = AtbashCipher(AtbashKey(key="bcdefghijklMnopqrstuvwxyza"), unique=True)
    assert cipher.key.key == "bcdefghijklmnopqrstuvwxyza"
    assert cipher.substitute("Hello") == "Ifmmp"


def test_key_is_normalised_to_lowercase():
    assert AtbashKey(key=REVERSED_ALPHABET.upper()).key == REVERSED_ALPHABET


@pytest.mark.parametrize("key", ["abc", "", REVERSED_ALPHABET + "a"])
def test_key_length(key):
    with pytest.raises(InvalidKeyLength):
        AtbashCipher(AtbashKey(key=key))


def test_key_content():
    with pytest.raises(InvalidKeyContent, match="alphabetic"):
        AtbashCipher(AtbashKey(key="abcdefghijklmnopqrstuvwxy1"))


def test_repeated_key_only_rejected_when_unique_requested():
    key = AtbashKey(key="a" * 26)
    assert AtbashCipher(key).substitute("xyz") == "aaa"
    with pytest.raises(InvalidKeyUniqueness):
        AtbashCipher(key, unique=True)


def test_key_errors_share_a_base():
    assert issubclass(InvalidKeyLength, InvalidKey)
    assert issubclass(InvalidKeyContent, InvalidKey)
    assert issubclass(InvalidKeyUniqueness, InvalidKey)


def test_comparison_lines(atbash):
    assert atbash.comparison() == [string.ascii_lowercase, REVERSED_ALPHABET, ""]


@given(st.text())
def test_reversed_alphabet_is_an_involution(text):
    cipher = AtbashCipher(AtbashKey(key=REVERSED_ALPHABET))
    assert cipher.substitute(cipher.substitute(text)) == text
