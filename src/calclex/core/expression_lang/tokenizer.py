"""
Tokenizer for the calclex expression language.

Converts an expression string into a lazy sequence of typed tokens.
Symbols and registered operators are disambiguated by maximal munch,
numeric literals are tried in a fixed priority order, and string
literals are escape-decoded as they are scanned.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from typing import TYPE_CHECKING

from calclex.core.errors import (
    InvalidEscapeCharError,
    InvalidHexEscapeError,
    TokenizationError,
    UnterminatedEscapeError,
    UnterminatedStringError,
    make_unrecognized_token_error,
)
from calclex.core.expression_lang.tokens import Token, TokenKind

if TYPE_CHECKING:
    from calclex.core.expression_lang.config import TokenizerConfig

# Identifier: letter, underscore or dollar followed by those or digits
_SYMBOL_RE = re.compile(r"[_A-Za-z$][_0-9A-Za-z$]*")
# Argument suffix on a symbol: @, @2, @,3, @1,3
_SYMBOL_ARGS_RE = re.compile(r"@[0-9]*,?[0-9]*")

# Tried in order, first match wins. Group 1 is the token text.
_NUMBER_PATTERNS: tuple[tuple[re.Pattern[str], TokenKind], ...] = (
    (re.compile(r"([0-9]+#[0-9A-Za-z'\"]+(?:\.[0-9A-Za-z'\"]+)?)"), TokenKind.RADIX_NUMBER),
    (re.compile(r"0x([0-9A-Fa-f]+(?:\.[0-9A-Fa-f]+)?)"), TokenKind.HEX_NUMBER),
    (re.compile(r"0([0-7]+(?:\.[0-7]+)?)"), TokenKind.OCTAL_NUMBER),
    (re.compile(r"0b([01]+(?:\.[01]+)?)"), TokenKind.BINARY_NUMBER),
    (re.compile(r"([0-9]+(?:\.[0-9]+)?)"), TokenKind.DECIMAL_NUMBER),
)

_HEX_ESCAPE_WIDTHS: dict[str, int] = {"x": 2, "u": 4, "U": 8}
_HEX_DIGITS_RE = re.compile(r"[0-9A-Fa-f]+")


class Lexer:
    """
    One-shot iterator over the tokens of a single input string.

    The only mutable state is the cursor into ``source``; everything left of
    it has been consumed. End of input stops the iteration, and any
    ``TokenizationError`` ends it as well.
    """

    __slots__ = ("_config", "_source", "_pos", "_done")

    def __init__(self, config: TokenizerConfig, source: str) -> None:
        self._config = config
        self._source = source
        self._pos = 0
        self._done = False

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> str:
        """Unconsumed suffix of the input."""
        return self._source[self._pos :]

    def __iter__(self) -> Lexer:
        return self

    def __next__(self) -> Token:
        if self._done:
            raise StopIteration
        try:
            token = self._next_token()
        except TokenizationError:
            self._done = True
            raise
        if token is None:
            self._done = True
            raise StopIteration
        return token

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _next_token(self) -> Token | None:
        source = self._source
        n = len(source)

        while self._pos < n and source[self._pos].isspace():
            self._pos += 1
        if self._pos >= n:
            return None

        config = self._config
        pos = self._pos
        c = source[pos]

        if c in config.string_delimiters:
            return self._read_string()
        if config.is_opening_bracket(c):
            return self._emit(TokenKind.LEFT_BRACKET, c, 1)
        if config.is_closing_bracket(c):
            return self._emit(TokenKind.RIGHT_BRACKET, c, 1)
        if c == ",":
            return self._emit(TokenKind.SEPARATOR, c, 1)

        symbol_m = _SYMBOL_RE.match(source, pos)
        if symbol_m:
            symbol = symbol_m.group(0)
            operator = config.match_operator(source, pos)
            # A registered operator at least as long as the identifier shadows it
            if operator is not None and len(operator) >= len(symbol):
                return self._emit(TokenKind.OPERATOR, operator, len(operator))

            self._pos = symbol_m.end()
            args_m = _SYMBOL_ARGS_RE.match(source, self._pos)
            if args_m:
                self._pos = args_m.end()
                return Token(kind=TokenKind.SYMBOL_WITH_ARGS, text=symbol + args_m.group(0))
            return Token(kind=TokenKind.SYMBOL, text=symbol)

        operator = config.match_operator(source, pos)
        if operator is not None:
            return self._emit(TokenKind.OPERATOR, operator, len(operator))

        for pattern, kind in _NUMBER_PATTERNS:
            m = pattern.match(source, pos)
            if m:
                self._pos = m.end()
                return Token(kind=kind, text=m.group(1))

        raise make_unrecognized_token_error(source, pos)

    def _emit(self, kind: TokenKind, text: str, length: int) -> Token:
        self._pos += length
        return Token(kind=kind, text=text)

    # ------------------------------------------------------------------
    # String literals
    # ------------------------------------------------------------------

    def _read_string(self) -> Token:
        """Read a quoted string literal, decoding escapes."""
        source = self._source
        start = self._pos
        terminator = source[start]
        escapes = self._config.escapes
        i = start + 1
        n = len(source)
        chars: list[str] = []

        while i < n:
            c = source[i]
            if c == terminator:
                self._pos = i + 1
                return Token(kind=TokenKind.STRING_LITERAL, text="".join(chars))
            if c != "\\":
                chars.append(c)
                i += 1
                continue

            if i + 1 >= n:
                raise UnterminatedEscapeError(
                    "Unterminated escape sequence", source[start:], start
                )
            escaped = source[i + 1]
            i += 2

            width = _HEX_ESCAPE_WIDTHS.get(escaped)
            if width is not None:
                digits = source[i : i + width]
                chars.append(self._decode_hex_escape(escaped, digits, width, start))
                i += width
            elif escaped in escapes:
                chars.append(escapes[escaped])
            else:
                raise InvalidEscapeCharError(
                    f"Invalid escape sequence '\\{escaped}'",
                    source[start:],
                    start,
                    char=escaped,
                )

        raise UnterminatedStringError("Unterminated string", source[start:], start)

    def _decode_hex_escape(self, prefix: str, digits: str, width: int, start: int) -> str:
        if len(digits) != width or not _HEX_DIGITS_RE.fullmatch(digits):
            raise InvalidHexEscapeError(
                f"Expected {width} hex digits after '\\{prefix}', got {digits!r}",
                self._source[start:],
                start,
                digits=digits,
            )
        code = int(digits, 16)
        if code > sys.maxunicode:
            raise InvalidHexEscapeError(
                f"Code point '\\{prefix}{digits}' is outside the Unicode range",
                self._source[start:],
                start,
                digits=digits,
            )
        return chr(code)


def tokenize(source: str, operators: Iterable[str] = ()) -> list[Token]:
    """Tokenize an expression string into a list of tokens."""
    from calclex.core.expression_lang.config import TokenizerConfig

    return list(TokenizerConfig(operators).tokenize(source))
