"""
Tokenizer configuration for the calclex expression language.

A ``TokenizerConfig`` holds the registered operator vocabulary next to the
fixed bracket, string-delimiter and escape tables. It is built once and
shared; every ``tokenize()`` call returns an independent ``TokenStream``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from calclex.core.errors import ConfigError
from calclex.core.expression_lang.tokenizer import Lexer
from calclex.core.expression_lang.tokens import Token

logger = logging.getLogger(__name__)

BRACKETS: Mapping[str, str] = MappingProxyType({"(": ")", "{": "}", "[": "]"})

STRING_DELIMITERS: frozenset[str] = frozenset({"'", '"'})

SEPARATOR = ","

ESCAPES: Mapping[str, str] = MappingProxyType(
    {
        "\\": "\\",
        "'": "'",
        '"': '"',
        "0": "\0",
        "b": "\b",
        "t": "\t",
        "n": "\n",
        "f": "\f",
        "r": "\r",
    }
)


class TokenizerConfig:
    """Operator vocabulary plus the fixed lexical tables of the expression language."""

    def __init__(self, operators: Iterable[str] = ()) -> None:
        self._operators: set[str] = set()
        # Operators bucketed by length, longest bucket first in _lengths
        self._by_length: dict[int, set[str]] = {}
        self._lengths: list[int] = []
        self._closers: Mapping[str, str] = MappingProxyType(
            {close: open_ for open_, close in BRACKETS.items()}
        )
        self._frozen = False
        self.add_operators(operators)

    def __repr__(self) -> str:
        return f"TokenizerConfig(operators={sorted(self._operators)!r})"

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_operator(self, op: str) -> None:
        """
        Register ``op`` as an operator lexeme.

        Duplicates are ignored. Once the config has been used by
        ``tokenize()`` only already-registered operators are accepted.

        Raises:
            ConfigError: If ``op`` is not a non-empty string, or is new and
                the config is frozen.
        """
        if not isinstance(op, str) or not op:
            raise ConfigError(f"Operator must be a non-empty string, got {op!r}")
        if op in self._operators:
            return
        if self._frozen:
            raise ConfigError(f"Cannot register operator {op!r}: config is already in use")

        self._operators.add(op)
        size = len(op)
        if size not in self._by_length:
            self._by_length[size] = set()
            self._lengths = sorted(self._by_length, reverse=True)
        self._by_length[size].add(op)
        logger.debug("Registered operator %r", op)

    def add_operators(self, ops: Iterable[str]) -> None:
        for op in ops:
            self.add_operator(op)

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def operators(self) -> frozenset[str]:
        return frozenset(self._operators)

    @property
    def brackets(self) -> Mapping[str, str]:
        """Opening bracket -> closing bracket."""
        return BRACKETS

    @property
    def string_delimiters(self) -> frozenset[str]:
        return STRING_DELIMITERS

    @property
    def escapes(self) -> Mapping[str, str]:
        return ESCAPES

    @property
    def frozen(self) -> bool:
        return self._frozen

    def is_opening_bracket(self, ch: str) -> bool:
        return ch in BRACKETS

    def is_closing_bracket(self, ch: str) -> bool:
        return ch in self._closers

    def closing_bracket(self, opening: str) -> str:
        """Return the closing counterpart of ``opening``; KeyError if it is not a bracket."""
        return BRACKETS[opening]

    def opening_bracket(self, closing: str) -> str:
        """Return the opening counterpart of ``closing``; KeyError if it is not a bracket."""
        return self._closers[closing]

    def is_matching_pair(self, opening: str, closing: str) -> bool:
        return BRACKETS.get(opening) == closing

    def match_operator(self, source: str, pos: int = 0) -> str | None:
        """
        Find the longest registered operator that starts at ``pos`` in ``source``.

        Two equal-length operators that both match are the same string, so
        checking lengths longest-first gives the lexicographic tie-break
        for free.
        """
        for size in self._lengths:
            candidate = source[pos : pos + size]
            if len(candidate) == size and candidate in self._by_length[size]:
                return candidate
        return None

    # ------------------------------------------------------------------
    # Tokenization
    # ------------------------------------------------------------------

    def tokenize(self, source: str) -> TokenStream:
        """
        Return a lazy, restartable token sequence for ``source``.

        The first call freezes the config.
        """
        if not self._frozen:
            self._frozen = True
            logger.debug("Tokenizer config frozen with %d operator(s)", len(self._operators))
        return TokenStream(self, source)


class TokenStream:
    """
    Iterable over the tokens of one input string.

    Each ``iter()`` starts a fresh ``Lexer``, so the stream can be walked
    any number of times.
    """

    __slots__ = ("_config", "_source")

    def __init__(self, config: TokenizerConfig, source: str) -> None:
        self._config = config
        self._source = source

    @property
    def source(self) -> str:
        return self._source

    def __iter__(self) -> Iterator[Token]:
        return Lexer(self._config, self._source)

    def __repr__(self) -> str:
        return f"TokenStream({self._source!r})"
