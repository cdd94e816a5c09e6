"""
Classic Output Module
======================

Standard-output emission of results and standard-error diagnostics.
"""

from classic.output.console import ClassicConsoleOutput

__all__ = [
    "ClassicConsoleOutput",
]
