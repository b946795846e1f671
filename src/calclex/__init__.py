"""
calclex - lexical analyzer for a small calculator expression language.

Segments expression text into typed tokens for a downstream parser.
"""

from __future__ import annotations

from ._version import __version__
from .core.errors import (
    CalcLexError,
    ConfigError,
    InvalidEscapeCharError,
    InvalidHexEscapeError,
    ManifestError,
    TokenizationError,
    UnrecognizedTokenError,
    UnterminatedEscapeError,
    UnterminatedStringError,
)
from .core.expression_lang import Token, TokenizerConfig, TokenKind, tokenize
from .core.manifest import load_manifest

__all__ = [
    "__version__",
    "Token",
    "TokenKind",
    "TokenizerConfig",
    "tokenize",
    "load_manifest",
    "CalcLexError",
    "ConfigError",
    "ManifestError",
    "TokenizationError",
    "UnrecognizedTokenError",
    "UnterminatedStringError",
    "UnterminatedEscapeError",
    "InvalidEscapeCharError",
    "InvalidHexEscapeError",
]
