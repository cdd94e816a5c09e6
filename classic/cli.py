"""
Classic CLI
============

Click-based command-line interface for the classical cipher toolkit.
Every tool is a standalone command (installed as its own console script)
and is also available as a subcommand of the ``classic`` group.

Usage::

    affine-cipher 5 7 -e "Hello World!"
    atbash-cipher zyxwvutsrqponmlkjihgfedcba -u -p Hello
    backwards-cipher Hello World
    caesar-cipher -n -r 25 "Hello 123 World!"
    null-cipher "1 0" Hello World
    polybius-square -e Hello World
    tokenize-with-padding 2 Hello World

    python -m classic caesar -r 13 "Hello"

Each tool writes one line per input string to standard output. Fatal
errors are reported on standard error with exit status 1; usage errors
exit with status 2.

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import sys
from typing import Callable, Optional

import click
from click.core import ParameterSource
from pydantic import ValidationError

from shared.config import ClassicConfig, ConfigError
from shared.console import ClassicConsole
from shared.logger import ClassicLogger
from shared.math_utils import INTMAX_MAX

from classic import __version__
from classic.core.engine import ClassicEngine
from classic.core.errors import ClassicError, InvalidNumber, InvalidSize
from classic.core.models import CipherMode, TransformResult
from classic.output.console import ClassicConsoleOutput
from classic.parsers.number_parser import parse_integer, parse_unsigned


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a configuration file (TOML).",
)

_quiet_option = click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Disable warnings.",
)


# ===================================================================== #
#  Helpers
# ===================================================================== #

def _bootstrap(
    program: str,
    config_path: Optional[str],
    quiet: bool = False,
) -> tuple[ClassicConfig, ClassicEngine, ClassicConsoleOutput]:
    """Load configuration and build the engine and output for one tool.

    Exits with status 1 if the configuration file cannot be loaded.
    """
    display = ClassicConsoleOutput(ClassicConsole(program))

    try:
        config = ClassicConfig.load(config_path)
    except ConfigError as exc:
        display.fatal(str(exc))
        sys.exit(1)

    settings = config.global_settings
    logger = ClassicLogger(
        program,
        log_level=settings.log_level,
        log_file=settings.log_file,
        json_logs=settings.log_json,
    )
    if config_path is not None:
        logger.info("Loaded configuration from %s", config_path)

    engine = ClassicEngine(
        config,
        quiet=quiet or settings.quiet,
        sink=display.warning,
        echo=display.line,
        logger=logger,
    )
    return config, engine, display


def _run(
    display: ClassicConsoleOutput,
    operation: Callable[[], TransformResult],
) -> None:
    """Run *operation*; on a fatal error report it and exit 1.

    Result lines reach standard output through the engine as they are made.
    """
    try:
        operation()
    except ClassicError as exc:
        display.fatal(str(exc))
        sys.exit(1)
    except ValidationError as exc:
        problem = exc.errors()[0]
        field_name = ".".join(str(part) for part in problem["loc"])
        display.fatal(f"invalid {field_name}: {problem['msg']}")
        sys.exit(1)


def _selected_mode(ctx: click.Context, decrypt: bool) -> Optional[CipherMode]:
    """Mode chosen with ``-d``/``-e`` (last one wins), or ``None`` if neither."""
    if ctx.get_parameter_source("decrypt") is ParameterSource.DEFAULT:
        return None
    return CipherMode.DECRYPT if decrypt else CipherMode.ENCRYPT


# ===================================================================== #
#  Tools
# ===================================================================== #

@click.command("affine-cipher", context_settings=CONTEXT_SETTINGS)
@click.argument("a")
@click.argument("b")
@click.argument("strings", nargs=-1)
@click.option(
    "--decrypt/--encrypt", "-d/-e", "decrypt",
    default=False,
    help="Decrypt or encrypt input strings (default: encrypt, with a warning).",
)
@_quiet_option
@_config_option
@click.pass_context
def affine_cipher(
    ctx: click.Context,
    a: str,
    b: str,
    strings: tuple[str, ...],
    decrypt: bool,
    quiet: bool,
    config_path: Optional[str],
) -> None:
    """Encrypt and decrypt strings with a simple formula.

    A must be coprime to 26.

    \b
    Example: affine-cipher 5 7 -e "Hello World!"
    """
    _, engine, display = _bootstrap("affine-cipher", config_path, quiet)
    mode = _selected_mode(ctx, decrypt)

    def operation() -> TransformResult:
        key_a = parse_integer(a, name="A", maximum=INTMAX_MAX)
        key_b = parse_integer(b, name="B", maximum=INTMAX_MAX)
        if key_a < 0 or key_b < 0:
            raise InvalidNumber("A and B must be positive")
        return engine.affine(list(strings), key_a, key_b, mode)

    _run(display, operation)


@click.command("atbash-cipher", context_settings=CONTEXT_SETTINGS)
@click.argument("key")
@click.argument("strings", nargs=-1)
@click.option(
    "--print", "-p", "print_comparison",
    is_flag=True,
    default=False,
    help="Print the key and normal alphabet for comparison.",
)
@click.option(
    "--unique", "-u",
    is_flag=True,
    default=False,
    help="Check key for alphabetic uniqueness.",
)
@_config_option
def atbash_cipher(
    key: str,
    strings: tuple[str, ...],
    print_comparison: bool,
    unique: bool,
    config_path: Optional[str],
) -> None:
    """Monoalphabetic substitution cipher.

    \b
    Example: atbash-cipher bcdefghijklMnopqrstuvwxyza -u -p Hello
    """
    _, engine, display = _bootstrap("atbash-cipher", config_path)
    _run(
        display,
        lambda: engine.atbash(
            list(strings), key, unique=unique, print_comparison=print_comparison
        ),
    )


@click.command("backwards-cipher", context_settings=CONTEXT_SETTINGS)
@click.argument("strings", nargs=-1)
@_config_option
def backwards_cipher(strings: tuple[str, ...], config_path: Optional[str]) -> None:
    """Print strings backwards.

    \b
    Example: backwards-cipher Hello World
    """
    _, engine, display = _bootstrap("backwards-cipher", config_path)
    _run(display, lambda: engine.backwards(list(strings)))


@click.command("caesar-cipher", context_settings=CONTEXT_SETTINGS)
@click.argument("strings", nargs=-1)
@click.option(
    "--no-shortcut", "-s",
    is_flag=True,
    default=False,
    help="Do not use a shortcut to reduce redundant rotations.",
)
@click.option(
    "--numbers", "-n",
    is_flag=True,
    default=False,
    help="Rotate numbers alongside letters.",
)
@click.option(
    "--rotations", "-r",
    metavar="NUM",
    default=None,
    help="Rotate the input string NUM times; defaults to one rotation.",
)
@_config_option
def caesar_cipher(
    strings: tuple[str, ...],
    no_shortcut: bool,
    numbers: bool,
    rotations: Optional[str],
    config_path: Optional[str],
) -> None:
    """Rotate strings through the alphabet.

    \b
    Example: caesar-cipher -n -r 25 "Hello 123 World!"
    """
    config, engine, display = _bootstrap("caesar-cipher", config_path)
    defaults = config.caesar

    def operation() -> TransformResult:
        count = (
            defaults.rotations
            if rotations is None
            else parse_unsigned(rotations, name="rotations")
        )
        return engine.caesar(
            list(strings),
            count,
            numbers=numbers or defaults.numbers,
            shortcut=defaults.shortcut and not no_shortcut,
        )

    _run(display, operation)


@click.command("null-cipher", context_settings=CONTEXT_SETTINGS)
@click.argument("key")
@click.argument("positions", nargs=-1)
@click.option(
    "--index", "-i",
    metavar="NUM",
    default=None,
    help="Begin indexing at NUM (default: 0).",
)
@_quiet_option
@_config_option
def null_cipher(
    key: str,
    positions: tuple[str, ...],
    index: Optional[str],
    quiet: bool,
    config_path: Optional[str],
) -> None:
    """Create a ciphertext from positions of letters in strings.

    Each number in KEY is an offset into the matching POSITION string.

    \b
    Example: null-cipher "1 0" Hello World
    """
    config, engine, display = _bootstrap("null-cipher", config_path, quiet)

    def operation() -> TransformResult:
        origin = (
            config.null.index
            if index is None
            else parse_unsigned(index, name="index")
        )
        return engine.null(key, list(positions), origin)

    _run(display, operation)


@click.command("polybius-square", context_settings=CONTEXT_SETTINGS)
@click.argument("strings", nargs=-1)
@click.option(
    "--decrypt/--encrypt", "-d/-e", "decrypt",
    default=False,
    help="Decrypt coordinates or encrypt strings (default: encrypt, with a warning).",
)
@click.option(
    "--j/--i", "-j/-i", "use_j",
    default=False,
    help="Coordinate 24 represents 'J' or 'I' (default: 'I').",
)
@_quiet_option
@_config_option
@click.pass_context
def polybius_square(
    ctx: click.Context,
    strings: tuple[str, ...],
    decrypt: bool,
    use_j: bool,
    quiet: bool,
    config_path: Optional[str],
) -> None:
    """Map alphabet characters to digits.

    \b
    Example: polybius-square -e Hello World
    """
    config, engine, display = _bootstrap("polybius-square", config_path, quiet)
    mode = _selected_mode(ctx, decrypt)

    if ctx.get_parameter_source("use_j") is ParameterSource.DEFAULT:
        letter_24 = config.polybius.letter_24
    else:
        letter_24 = "J" if use_j else "I"

    _run(
        display,
        lambda: engine.polybius(list(strings), mode, letter_24=letter_24),
    )


@click.command("tokenize-with-padding", context_settings=CONTEXT_SETTINGS)
@click.argument("size")
@click.argument("strings", nargs=-1)
@click.option(
    "--delim", "-d",
    metavar="STR",
    default=None,
    help="Delimiting string (default: a single space).",
)
@click.option(
    "--padding", "-p",
    metavar="CHAR",
    default=None,
    help="Padding character (default: a single space).",
)
@_quiet_option
@_config_option
def tokenize_with_padding(
    size: str,
    strings: tuple[str, ...],
    delim: Optional[str],
    padding: Optional[str],
    quiet: bool,
    config_path: Optional[str],
) -> None:
    """Tokenize strings into fixed-size, padded chunks.

    \b
    Example: tokenize-with-padding 2 Hello World
    """
    config, engine, display = _bootstrap("tokenize-with-padding", config_path, quiet)
    defaults = config.tokenizer

    def operation() -> TransformResult:
        try:
            token_size = parse_unsigned(size, name="token size")
        except InvalidNumber as exc:
            raise InvalidSize(str(exc)) from exc
        return engine.tokenize(
            list(strings),
            token_size,
            delim=defaults.delim if delim is None else delim,
            padding=defaults.padding if padding is None else padding,
        )

    _run(display, operation)


# ===================================================================== #
#  Umbrella group
# ===================================================================== #

@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, "--version", "-V")
def cli() -> None:
    """Classical cipher toolkit.

    Each subcommand is also installed as a standalone program
    (affine-cipher, caesar-cipher, ...).
    """


cli.add_command(affine_cipher, "affine")
cli.add_command(atbash_cipher, "atbash")
cli.add_command(backwards_cipher, "backwards")
cli.add_command(caesar_cipher, "caesar")
cli.add_command(null_cipher, "null")
cli.add_command(polybius_square, "polybius")
cli.add_command(tokenize_with_padding, "tokenize")


def main() -> None:
    """Main entry point for the ``classic`` command."""
    cli()


if __name__ == "__main__":
    main()
