"""Shared pytest fixtures for calclex tests."""

from __future__ import annotations

import pytest

from calclex.core.expression_lang import TokenizerConfig

CALCULATOR_OPERATORS = ["+", "-", "*", "/", "**", "^", "=", "==", "<", "<=", "<=>", "mod", "!"]


@pytest.fixture
def config() -> TokenizerConfig:
    """Return a config with a typical calculator operator vocabulary."""
    return TokenizerConfig(CALCULATOR_OPERATORS)


@pytest.fixture
def bare_config() -> TokenizerConfig:
    """Return a config with no operators registered."""
    return TokenizerConfig()
