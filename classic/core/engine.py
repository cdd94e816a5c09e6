"""
Classic Cipher Engine
======================

Central orchestrator for the classical cipher toolkit. Each public method
validates its key or settings once (raising a :class:`ClassicError`
before any string is processed), applies one cipher to every input
string in argument order, and returns a :class:`TransformResult`.
When an *echo* callback is given, every result line is handed to it as
soon as it is produced, so output interleaves with advisories in order.

Architecture follows the Facade pattern (Gamma et al., 1994): the CLI
talks only to this class, never to the individual ciphers.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence

from shared.config import ClassicConfig
from shared.logger import ClassicLogger

from classic.ciphers.affine import AffineCipher
from classic.ciphers.atbash import AtbashCipher
from classic.ciphers.backwards import BackwardsCipher
from classic.ciphers.caesar import CaesarCipher
from classic.ciphers.null import NullCipher
from classic.ciphers.polybius import PolybiusSquare
from classic.ciphers.tokenizer import PaddedTokenizer
from classic.core.diagnostics import Diagnostics
from classic.core.models import (
    AffineKey,
    AtbashKey,
    CaesarSettings,
    CipherMode,
    NullCipherKey,
    PolybiusSettings,
    TokenizerSettings,
    TransformResult,
)
from classic.parsers.key_parser import parse_offsets

MODE_UNSPECIFIED = (
    "cipher mode unspecified ('--encrypt' or '--decrypt'), "
    "defaulting to '--encrypt'"
)


class ClassicEngine:
    """Runs every classical transformation behind one interface.

    Usage::

        engine = ClassicEngine(quiet=True)
        engine.caesar(["abc"], rotations=1).outputs        # ["bcd"]
        engine.affine(["Hello"], a=5, b=7, mode=CipherMode.ENCRYPT)

    Attributes:
        config: Toolkit configuration.
        logger: Logger bound to the engine.
        quiet:  Suppress forwarding of advisories to the sink.
        echo:   Called with each result line as it is produced.
    """

    def __init__(
        self,
        config: Optional[ClassicConfig] = None,
        *,
        quiet: bool = False,
        sink: Optional[Callable[[str], None]] = None,
        echo: Optional[Callable[[str], None]] = None,
        logger: Optional[ClassicLogger] = None,
    ) -> None:
        self.config = config or ClassicConfig()
        self.quiet = quiet
        self._sink = sink
        self._echo = echo

        settings = self.config.global_settings
        self.logger = logger or ClassicLogger(
            "engine",
            log_level=settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
        )

    def _diagnostics(self, tool: str) -> Diagnostics:
        return Diagnostics(
            tool, quiet=self.quiet, sink=self._sink, logger=self.logger
        )

    def _produce(self, lines: Iterable[str]) -> list[str]:
        """Collect *lines*, handing each one to the echo callback as it is made."""
        produced = []
        for line in lines:
            produced.append(line)
            if self._echo is not None:
                self._echo(line)
        return produced

    def _finish(
        self,
        diagnostics: Diagnostics,
        inputs: Sequence[str],
        outputs: list[str],
        *,
        mode: Optional[CipherMode] = None,
        preamble: Optional[list[str]] = None,
    ) -> TransformResult:
        return TransformResult(
            tool=diagnostics.tool,
            mode=mode,
            inputs=list(inputs),
            preamble=preamble or [],
            outputs=outputs,
            advisories=diagnostics.drain(),
        )

    # ------------------------------------------------------------------ #
    #  Affine
    # ------------------------------------------------------------------ #

    def affine(
        self,
        strings: Sequence[str],
        a: int,
        b: int,
        mode: Optional[CipherMode] = None,
    ) -> TransformResult:
        """Encrypt or decrypt every string with the affine key ``(a, b)``.

        An unspecified *mode* defaults to encryption with an advisory.

        Raises:
            InvalidKey: If *a* is not coprime to 26.
        """
        diagnostics = self._diagnostics("affine")
        cipher = AffineCipher(AffineKey(a=a, b=b))

        if mode is None:
            diagnostics.warn(MODE_UNSPECIFIED)
            mode = CipherMode.ENCRYPT

        with self.logger.operation("affine"), self.logger.timed("affine"):
            self.logger.debug(
                "Affine %s over %d strings", mode.value, len(strings),
                a=a, b=b,
            )
            outputs = self._produce(cipher.transform(s, mode) for s in strings)

        return self._finish(diagnostics, strings, outputs, mode=mode)

    # ------------------------------------------------------------------ #
    #  Atbash
    # ------------------------------------------------------------------ #

    def atbash(
        self,
        strings: Sequence[str],
        key: str,
        *,
        unique: bool = False,
        print_comparison: bool = False,
    ) -> TransformResult:
        """Substitute letters of every string through a 26-letter key.

        Raises:
            InvalidKeyLength, InvalidKeyContent, InvalidKeyUniqueness
        """
        diagnostics = self._diagnostics("atbash")
        cipher = AtbashCipher(AtbashKey(key=key), unique=unique)

        preamble = self._produce(cipher.comparison()) if print_comparison else None

        with self.logger.operation("atbash"):
            self.logger.debug("Atbash over %d strings", len(strings))
            outputs = self._produce(cipher.substitute(s) for s in strings)

        return self._finish(diagnostics, strings, outputs, preamble=preamble)

    # ------------------------------------------------------------------ #
    #  Backwards
    # ------------------------------------------------------------------ #

    def backwards(self, strings: Sequence[str]) -> TransformResult:
        diagnostics = self._diagnostics("backwards")
        with self.logger.operation("backwards"):
            outputs = self._produce(BackwardsCipher.reverse(s) for s in strings)
        return self._finish(diagnostics, strings, outputs)

    # ------------------------------------------------------------------ #
    #  Caesar
    # ------------------------------------------------------------------ #

    def caesar(
        self,
        strings: Sequence[str],
        rotations: int = 1,
        *,
        numbers: bool = False,
        shortcut: bool = True,
    ) -> TransformResult:
        """Rotate every string by *rotations* positions."""
        diagnostics = self._diagnostics("caesar")
        cipher = CaesarCipher(
            CaesarSettings(rotations=rotations, numbers=numbers, shortcut=shortcut)
        )

        with self.logger.operation("caesar"), self.logger.timed("caesar"):
            self.logger.debug(
                "Rotating %d strings by %d", len(strings), cipher.rotations,
                numbers=numbers, shortcut=shortcut,
            )
            outputs = self._produce(cipher.rotate(s) for s in strings)

        return self._finish(diagnostics, strings, outputs)

    # ------------------------------------------------------------------ #
    #  Null cipher
    # ------------------------------------------------------------------ #

    def null(
        self,
        key: str,
        positions: Sequence[str],
        index: int = 0,
    ) -> TransformResult:
        """Extract characters from *positions* at offsets read from *key*.

        Raises:
            InvalidNumber: If any key token is not a non-negative integer.
        """
        diagnostics = self._diagnostics("null")
        cipher = NullCipher(
            NullCipherKey(offsets=parse_offsets(key), origin=index),
            diagnostics=diagnostics,
        )

        with self.logger.operation("null"):
            self.logger.debug(
                "Null cipher: %d offsets, %d strings, origin %d",
                len(cipher.key.offsets), len(positions), index,
            )
            outputs = self._produce(cipher.iter_extract(positions))

        return self._finish(diagnostics, positions, outputs)

    # ------------------------------------------------------------------ #
    #  Polybius square
    # ------------------------------------------------------------------ #

    def polybius(
        self,
        strings: Sequence[str],
        mode: Optional[CipherMode] = None,
        *,
        letter_24: str = "I",
    ) -> TransformResult:
        """Encode letters to coordinates, or coordinates back to letters."""
        diagnostics = self._diagnostics("polybius")
        square = PolybiusSquare(
            PolybiusSettings(letter_24=letter_24), diagnostics=diagnostics
        )

        if mode is None:
            diagnostics.warn(MODE_UNSPECIFIED)
            mode = CipherMode.ENCRYPT

        with self.logger.operation("polybius"):
            self.logger.debug("Polybius %s over %d strings", mode.value, len(strings))
            outputs = self._produce(square.transform(s, mode) for s in strings)

        return self._finish(diagnostics, strings, outputs, mode=mode)

    # ------------------------------------------------------------------ #
    #  Tokenize with padding
    # ------------------------------------------------------------------ #

    def tokenize(
        self,
        strings: Sequence[str],
        size: int,
        *,
        delim: str = " ",
        padding: str = " ",
    ) -> TransformResult:
        """Concatenate, pad and chunk *strings* into a single output line.

        Raises:
            InvalidSize, InvalidPadding, Overflow, AllocationFailure
        """
        diagnostics = self._diagnostics("tokenizer")
        tokenizer = PaddedTokenizer(
            TokenizerSettings(size=size, delim=delim, padding=padding),
            diagnostics=diagnostics,
        )

        with self.logger.operation("tokenize"), self.logger.timed("tokenize"):
            line = tokenizer.tokenize(strings)
            self.logger.debug(
                "Tokenized %d strings into %d characters", len(strings), len(line)
            )

        return self._finish(diagnostics, strings, self._produce([line]))
