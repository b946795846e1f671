"""
Error types for calclex configuration and tokenization.
"""

from __future__ import annotations

from pathlib import Path


class CalcLexError(Exception):
    """Base exception for all calclex errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return self.message


class ConfigError(CalcLexError):
    """
    Raised when a tokenizer configuration is invalid.

    Examples:
    - Empty operator lexeme
    - New operator registered after the config was frozen
    """

    pass


class ManifestError(ConfigError):
    """Raised when a vocabulary manifest cannot be read or is malformed."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)

    def _format_message(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class TokenizationError(CalcLexError):
    """
    Raised when input text cannot be segmented into tokens.

    Attributes:
        remaining: Unconsumed input at the failure point
        position: 0-based index of that point in the whole input
    """

    def __init__(self, message: str, remaining: str, position: int) -> None:
        self.remaining = remaining
        self.position = position
        super().__init__(message)

    def _format_message(self) -> str:
        return f"{self.message} at position {self.position}: '{self.remaining}'"


class UnrecognizedTokenError(TokenizationError):
    """No lexical rule matches at the current position."""

    pass


class UnterminatedStringError(TokenizationError):
    """String literal never reaches its terminator."""

    pass


class UnterminatedEscapeError(TokenizationError):
    """Backslash at end of input inside a string literal."""

    pass


class InvalidEscapeCharError(TokenizationError):
    """Backslash followed by a character with no escape meaning."""

    def __init__(self, message: str, remaining: str, position: int, char: str) -> None:
        self.char = char
        super().__init__(message, remaining, position)


class InvalidHexEscapeError(TokenizationError):
    """Malformed, short or out-of-range digits after \\x, \\u or \\U."""

    def __init__(self, message: str, remaining: str, position: int, digits: str) -> None:
        self.digits = digits
        super().__init__(message, remaining, position)


def make_unrecognized_token_error(source: str, position: int) -> UnrecognizedTokenError:
    """
    Helper to create an UnrecognizedTokenError for a position in ``source``.

    Args:
        source: Whole input being tokenized
        position: Index where no rule matched

    Returns:
        UnrecognizedTokenError carrying the unconsumed remainder
    """
    return UnrecognizedTokenError("Unrecognized token", source[position:], position)
