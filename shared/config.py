"""
Classic Toolkit Configuration Management
=========================================

Centralized configuration for the classical cipher tools using Python
dataclasses and TOML-based persistence.

Every command accepts ``--config PATH``. Without it the tools run on
pure dataclass defaults and no file is read. Command-line flags always
take precedence over values loaded here.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

from shared.math_utils import UINTMAX_MAX

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


class ConfigError(Exception):
    """Raised when a configuration file is missing or cannot be parsed."""


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class CaesarConfig:
    """Defaults for the Caesar rotation cipher."""

    rotations: int = 1
    numbers: bool = False
    shortcut: bool = True


@dataclass(frozen=False, slots=True)
class NullConfig:
    """Defaults for the null cipher."""

    index: int = 0


@dataclass(frozen=False, slots=True)
class PolybiusConfig:
    """Defaults for the Polybius square.

    ``letter_24`` selects which of ``I`` / ``J`` coordinate 24 decodes to.
    """

    letter_24: str = "I"


@dataclass(frozen=False, slots=True)
class TokenizerConfig:
    """Defaults for tokenize-with-padding."""

    delim: str = " "
    padding: str = " "


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Settings shared by every tool: logging and warning verbosity."""

    log_level: str = "WARNING"
    log_file: str | None = None
    log_json: bool = False
    quiet: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class ClassicConfig:
    """Master configuration aggregating global and per-tool settings.

    Usage:
        >>> config = ClassicConfig.load("classic.toml")
        >>> config.caesar.rotations
        13
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    caesar: CaesarConfig = field(default_factory=CaesarConfig)
    null: NullConfig = field(default_factory=NullConfig)
    polybius: PolybiusConfig = field(default_factory=PolybiusConfig)
    tokenizer: TokenizerConfig = field(default_factory=TokenizerConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> ClassicConfig:
        """Load configuration from a TOML file.

        Missing keys fall back to dataclass defaults; unknown keys are
        ignored.

        Args:
            path: Filesystem path to a TOML configuration file. ``None``
                  returns pure defaults without touching the filesystem.

        Returns:
            A fully-populated :class:`ClassicConfig` instance.

        Raises:
            ConfigError: If the file does not exist, is not valid TOML, or
                         holds a value of the wrong type or range.
        """
        if path is None:
            return cls()

        config_path = Path(path)
        if not config_path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "rb") as fh:
                raw: dict[str, Any] = tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(
                f"Invalid configuration file {config_path}: {exc}"
            ) from exc

        config = cls(
            global_settings=cls._build_section(GlobalConfig, raw, "global"),
            caesar=cls._build_section(CaesarConfig, raw, "caesar"),
            null=cls._build_section(NullConfig, raw, "null"),
            polybius=cls._build_section(PolybiusConfig, raw, "polybius"),
            tokenizer=cls._build_section(TokenizerConfig, raw, "tokenizer"),
        )
        config.validate()
        return config

    def validate(self) -> None:
        """Check every loaded value for type and range.

        ``letter_24`` and ``log_level`` are normalised to upper case.

        Raises:
            ConfigError: On the first invalid value.
        """
        g = self.global_settings
        g.log_level = _upper_choice("global.log_level", g.log_level, LOG_LEVELS)
        if g.log_file is not None and not isinstance(g.log_file, str):
            raise ConfigError("global.log_file must be a string")
        _check_bool("global.log_json", g.log_json)
        _check_bool("global.quiet", g.quiet)

        _check_unsigned("caesar.rotations", self.caesar.rotations)
        _check_bool("caesar.numbers", self.caesar.numbers)
        _check_bool("caesar.shortcut", self.caesar.shortcut)

        _check_unsigned("null.index", self.null.index)

        self.polybius.letter_24 = _upper_choice(
            "polybius.letter_24", self.polybius.letter_24, ("I", "J")
        )

        for name in ("delim", "padding"):
            if not isinstance(getattr(self.tokenizer, name), str):
                raise ConfigError(f"tokenizer.{name} must be a string")

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _build_section(cls: type, raw: dict[str, Any], name: str) -> Any:
        """Instantiate a dataclass *cls* from table *name* using only the keys it declares."""
        data = raw.get(name, {})
        if not isinstance(data, dict):
            raise ConfigError(f"[{name}] must be a table")
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# =========================== Value Checks ==================================

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _check_bool(key: str, value: Any) -> None:
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false, got {value!r}")


def _check_unsigned(key: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"{key} must be a non-negative integer, got {value!r}")
    if value > UINTMAX_MAX:
        raise ConfigError(f"{key} is too large (overflow)")


def _upper_choice(key: str, value: Any, choices: tuple[str, ...]) -> str:
    if isinstance(value, str) and value.upper() in choices:
        return value.upper()
    raise ConfigError(f"{key} must be one of {', '.join(choices)}, got {value!r}")
