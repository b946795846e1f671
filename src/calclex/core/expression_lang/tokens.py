"""
Token types produced by the calclex expression tokenizer.
"""

from __future__ import annotations

from enum import StrEnum, auto

from pydantic import BaseModel, ConfigDict, Field


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Punctuation
    LEFT_BRACKET = auto()
    RIGHT_BRACKET = auto()
    SEPARATOR = auto()

    # Names and operators
    SYMBOL = auto()
    SYMBOL_WITH_ARGS = auto()
    OPERATOR = auto()

    # Literals
    STRING_LITERAL = auto()
    DECIMAL_NUMBER = auto()
    HEX_NUMBER = auto()
    OCTAL_NUMBER = auto()
    BINARY_NUMBER = auto()
    RADIX_NUMBER = auto()

    @property
    def is_number(self) -> bool:
        return self in NUMBER_KINDS


NUMBER_KINDS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.DECIMAL_NUMBER,
        TokenKind.HEX_NUMBER,
        TokenKind.OCTAL_NUMBER,
        TokenKind.BINARY_NUMBER,
        TokenKind.RADIX_NUMBER,
    }
)


class Token(BaseModel):
    """
    A single token from the expression tokenizer.

    ``text`` is the raw lexeme, except for string literals where it is the
    decoded content. Numeric text is never converted here.
    """

    kind: TokenKind = Field(description="Token type")
    text: str = Field(description="Lexeme, or decoded content for string literals")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.kind}({self.text!r})"
