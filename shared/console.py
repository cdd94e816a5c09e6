"""
Classic Toolkit Console Interface
==================================

Rich-powered console abstraction for the diagnostic side of every
classical cipher tool.

Result lines are plain text written to standard output by the output
layer; everything this console prints (warnings and fatal
errors) goes to standard error so that piping a tool's output never
captures diagnostics.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all toolkit diagnostics
# ---------------------------------------------------------------------------
_CLASSIC_THEME = Theme(
    {
        "classic.warning": "bold yellow",
        "classic.error": "bold red",
    }
)


class ClassicConsole:
    """Unified diagnostic console for the classical cipher tools.

    Usage::

        con = ClassicConsole(program="caesar-cipher")
        con.warning("index in string not found")
        con.error("key must be alphabetic")
    """

    def __init__(
        self,
        program: str | None = None,
        *,
        quiet: bool = False,
        stderr: bool = True,
    ) -> None:
        """Initialise the console.

        Args:
            program: Tool name prefixed to every message, if given.
            quiet:   Suppress all output (library / test mode).
            stderr:  Write to standard error instead of standard output.
        """
        self._program = program
        self._console = Console(
            theme=_CLASSIC_THEME,
            quiet=quiet,
            stderr=stderr,
            highlight=False,
            soft_wrap=True,
        )

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def _prefix(self) -> str:
        return f"{escape(self._program)}: " if self._program else ""

    def warning(self, message: str) -> None:
        """Print an advisory warning.

        Message text is escaped, so user input containing Rich markup
        (``[bold]``) is printed literally.
        """
        self._console.print(
            f"{self._prefix()}[classic.warning]WARNING:[/classic.warning] "
            f"{escape(message)}"
        )

    def error(self, message: str) -> None:
        """Print a fatal error message."""
        self._console.print(
            f"{self._prefix()}[classic.error]ERROR:[/classic.error] "
            f"{escape(message)}"
        )

