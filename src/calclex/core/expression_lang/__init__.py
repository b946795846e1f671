"""
calclex expression tokenizer.

Usage:
    from calclex.core.expression_lang import TokenizerConfig

    config = TokenizerConfig(["+", "-", "**", "mod"])
    for token in config.tokenize("2 ** x mod 0x1F"):
        print(token.kind, token.text)
"""

from calclex.core.expression_lang.config import TokenizerConfig, TokenStream
from calclex.core.expression_lang.tokenizer import Lexer, tokenize
from calclex.core.expression_lang.tokens import NUMBER_KINDS, Token, TokenKind

__all__ = [
    "NUMBER_KINDS",
    "Lexer",
    "Token",
    "TokenKind",
    "TokenStream",
    "TokenizerConfig",
    "tokenize",
]
