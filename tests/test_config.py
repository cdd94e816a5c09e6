"""Tests for shared.config."""

from __future__ import annotations

import pytest

from shared.config import ClassicConfig, ConfigError


def test_defaults_without_path():
    config = ClassicConfig.load()
    assert config.caesar.rotations == 1
    assert config.caesar.shortcut is True
    assert config.polybius.letter_24 == "I"
    assert config.tokenizer.delim == " "
    assert config.global_settings.log_level == "WARNING"


def test_load_toml(tmp_path):
    path = tmp_path / "classic.toml"
    path.write_text(
        "[global]\nquiet = true\nunknown = 1\n"
        "[caesar]\nrotations = 13\n"
        "[tokenizer]\ndelim = \"-\"\n"
    )
    config = ClassicConfig.load(path)
    assert config.global_settings.quiet is True
    assert config.caesar.rotations == 13
    assert config.caesar.numbers is False
    assert config.tokenizer.delim == "-"
    assert config.to_dict()["null"] == {"index": 0}


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        ClassicConfig.load(tmp_path / "missing.toml")


def test_malformed_file(tmp_path):
    path = tmp_path / "broken.toml"
    path.write_text("[caesar\nrotations = ")
    with pytest.raises(ConfigError, match="Invalid configuration"):
        ClassicConfig.load(path)


@pytest.mark.parametrize(
    "body, key",
    [
        ("[caesar]\nrotations = -3\n", "caesar.rotations"),
        ("[caesar]\nrotations = \"ten\"\n", "caesar.rotations"),
        ("[caesar]\nnumbers = 1\n", "caesar.numbers"),
        ("[null]\nindex = -1\n", "null.index"),
        ("[polybius]\nletter_24 = \"X\"\n", "polybius.letter_24"),
        ("[global]\nlog_level = \"verbose\"\n", "global.log_level"),
        ("[tokenizer]\ndelim = 5\n", "tokenizer.delim"),
        ("caesar = 3\n", "[caesar]"),
    ],
)
def test_invalid_values_rejected(tmp_path, body, key):
    path = tmp_path / "bad.toml"
    path.write_text(body)
    with pytest.raises(ConfigError) as excinfo:
        ClassicConfig.load(path)
    assert key in str(excinfo.value)


def test_choices_normalised_to_upper_case(tmp_path):
    path = tmp_path / "lower.toml"
    path.write_text("[global]\nlog_level = \"debug\"\n[polybius]\nletter_24 = \"j\"\n")
    config = ClassicConfig.load(path)
    assert config.global_settings.log_level == "DEBUG"
    assert config.polybius.letter_24 == "J"
