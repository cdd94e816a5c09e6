"""Tests for the affine cipher."""

from __future__ import annotations

import string

import pytest
from hypothesis import given, strategies as st

from classic.ciphers.affine import AffineCipher
from classic.core.errors import InvalidKey
from classic.core.models import AffineKey, CipherMode

COPRIME_A = [1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25]


def test_encrypt_hello():
    cipher = AffineCipher(AffineKey(a=5, b=7))
    assert cipher.encrypt("Hello") == "Qbkkz"
    assert cipher.encrypt("Hello World!") == "Qbkkz Nzokw!"


def test_decrypt_hello():
    cipher = AffineCipher(AffineKey(a=5, b=7))
    assert cipher.decrypt("Qbkkz Nzokw!") == "Hello World!"


def test_inverse_computed_once_per_key():
    cipher = AffineCipher(AffineKey(a=5, b=7))
    assert cipher.inverse == 21


def test_identity_key():
    cipher = AffineCipher(AffineKey(a=1, b=0))
    assert cipher.encrypt("Any Text 123") == "Any Text 123"


def test_shift_larger_than_alphabet():
    cipher = AffineCipher(AffineKey(a=1, b=27))
    assert cipher.encrypt("abz") == "bca"
    assert cipher.decrypt("bca") == "abz"


def test_non_letters_pass_through():
    cipher = AffineCipher(AffineKey(a=3, b=4))
    assert cipher.encrypt("1 2, 3!") == "1 2, 3!"


@pytest.mark.parametrize("a", [0, 2, 13, 26, 52])
def test_non_coprime_multiplier_rejected(a):
    with pytest.raises(InvalidKey, match="coprime to 26"):
        AffineCipher(AffineKey(a=a, b=1))


def test_transform_dispatches_on_mode():
    cipher = AffineCipher(AffineKey(a=5, b=7))
    assert cipher.transform("Hello", CipherMode.ENCRYPT) == "Qbkkz"
    assert cipher.transform("Qbkkz", CipherMode.DECRYPT) == "Hello"


@given(
    a=st.sampled_from(COPRIME_A),
    b=st.integers(min_value=0, max_value=10**6),
    text=st.text(alphabet=string.ascii_letters + string.digits + " .,!"),
)
def test_decrypt_inverts_encrypt(a, b, text):
    cipher = AffineCipher(AffineKey(a=a, b=b))
    assert cipher.decrypt(cipher.encrypt(text)) == text
