"""Tests for the Caesar rotation cipher."""

from __future__ import annotations

import string

from hypothesis import given, strategies as st

from classic.ciphers.caesar import CaesarCipher
from classic.core.models import CaesarSettings
from shared.math_utils import UINTMAX_MAX


def rotate(text: str, rotations: int, **kwargs) -> str:
    return CaesarCipher(CaesarSettings(rotations=rotations, **kwargs)).rotate(text)


def test_rotate_once_by_default():
    assert CaesarCipher(CaesarSettings()).rotate("abc") == "bcd"


def test_wraps_within_case():
    assert rotate("xyz XYZ", 3) == "abc ABC"


def test_full_rotation_is_identity():
    assert rotate("Hello, World!", 26) == "Hello, World!"


def test_digits_untouched_without_numbers():
    assert rotate("a1", 1) == "b1"


def test_digits_rotate_mod_ten():
    assert rotate("z9", 3, numbers=True) == "c2"
    assert rotate("Hello 123 World!", 25, numbers=True) == "Gdkkn 678 Vnqkc!"


def test_letters_and_digits_use_independent_moduli():
    assert rotate("a1", 10, numbers=True) == "k1"
    assert rotate("a1", 26, numbers=True) == "a7"
    assert rotate("a1", 130, numbers=True) == "a1"


def test_shortcut_reduction():
    assert CaesarSettings(rotations=27).effective_rotations == 1
    assert CaesarSettings(rotations=131, numbers=True).effective_rotations == 1
    assert CaesarSettings(rotations=27, shortcut=False).effective_rotations == 27


def test_shortcut_does_not_change_output():
    text = "Hello 123 World!"
    for numbers in (False, True):
        with_shortcut = rotate(text, UINTMAX_MAX, numbers=numbers)
        without = rotate(text, UINTMAX_MAX, numbers=numbers, shortcut=False)
        assert with_shortcut == without


@given(
    n=st.integers(min_value=0, max_value=10**9),
    text=st.text(alphabet=string.ascii_letters + " .!"),
)
def test_complementary_rotation_restores_letters(n, text):
    back = (26 - n % 26) % 26
    assert rotate(rotate(text, n), back) == text
