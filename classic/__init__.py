"""
Classic -- Classical Cipher Toolkit
====================================

Command-line text transformations implementing classical substitution
and transposition ciphers plus a padded tokenizer: affine, Atbash,
backwards, Caesar, null cipher, Polybius square and tokenize-with-padding.

Modules:
    - classic.core.engine: Central transformation orchestrator
    - classic.core.models: Pydantic key, settings and result models
    - classic.core.errors: Fatal error hierarchy
    - classic.core.diagnostics: Advisory warning collection
    - classic.ciphers: One module per transformation
    - classic.parsers: Numeric argument and key parsing
    - classic.output: Result and diagnostic output
    - classic.cli: Click-based command-line interface

None of these ciphers offer confidentiality; they reproduce the
textbook transformations exactly.
"""

__version__ = "1.0.0"
__tool_name__ = "classic"
