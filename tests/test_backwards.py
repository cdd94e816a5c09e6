"""Tests for the backwards cipher."""

from __future__ import annotations

from hypothesis import given, strategies as st

from classic.ciphers.backwards import BackwardsCipher


def test_reverse():
    assert BackwardsCipher.reverse("Hello") == "olleH"
    assert BackwardsCipher.reverse("a b!1") == "1!b a"
    assert BackwardsCipher.reverse("") == ""


@given(st.text())
def test_reverse_twice_is_identity(text):
    assert BackwardsCipher.reverse(BackwardsCipher.reverse(text)) == text
