"""
Advisory Diagnostics
=====================

Collects the non-fatal warnings a transformation raises. The quiet
switch is explicit per-instance configuration, so the ciphers themselves
never consult process-wide state.

Every advisory is recorded whether or not the instance is quiet; only
forwarding to the *sink* (normally the stderr console) is suppressed.
"""

from __future__ import annotations

from typing import Callable, Optional

from shared.logger import ClassicLogger

from classic.core.models import Advisory


class Diagnostics:
    """Advisory collector handed to each cipher.

    Usage::

        diag = Diagnostics("polybius", quiet=False, sink=console.warning)
        PolybiusSquare(diagnostics=diag).encrypt("A1")
        diag.advisories[0].message
        # "character '1' could not be mapped to coordinates, skipping"
    """

    def __init__(
        self,
        tool: str,
        *,
        quiet: bool = False,
        sink: Optional[Callable[[str], None]] = None,
        logger: Optional[ClassicLogger] = None,
    ) -> None:
        self.tool = tool
        self.quiet = quiet
        self._sink = sink
        self._logger = logger
        self._advisories: list[Advisory] = []

    def warn(self, message: str, subject: Optional[str] = None) -> Advisory:
        """Record an advisory and forward it unless quiet."""
        advisory = Advisory(tool=self.tool, message=message, subject=subject)
        self._advisories.append(advisory)

        if self._logger is not None:
            self._logger.debug("Advisory: %s", message, subject=subject)

        if not self.quiet and self._sink is not None:
            self._sink(message)
        return advisory

    @property
    def advisories(self) -> list[Advisory]:
        return list(self._advisories)

    def drain(self) -> list[Advisory]:
        """Return the collected advisories and start a fresh batch."""
        drained, self._advisories = self._advisories, []
        return drained
