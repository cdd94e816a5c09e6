"""
Classic Console Output
=======================

Writes transformation result lines and diagnostics for the cipher tools.

Result lines are emitted verbatim with :func:`click.echo` on standard
output, one per line, so they can be piped or compared byte for byte.
Advisories and fatal errors go through the shared Rich console on
standard error.
"""

from __future__ import annotations

from typing import Optional

import click

from shared.console import ClassicConsole


class ClassicConsoleOutput:
    """Line-by-line emitter for engine results.

    Usage::

        output = ClassicConsoleOutput(ClassicConsole("caesar-cipher"))
        engine = ClassicEngine(echo=output.line, sink=output.warning)
        engine.caesar(["abc"])
    """

    def __init__(self, console: Optional[ClassicConsole] = None) -> None:
        self.console = console or ClassicConsole()

    def line(self, text: str) -> None:
        """Write one result line to standard output and flush it."""
        click.echo(text)

    def warning(self, message: str) -> None:
        self.console.warning(message)

    def fatal(self, message: str) -> None:
        self.console.error(message)
