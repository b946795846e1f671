"""
Operator vocabulary manifests.

A manifest is a TOML file (``calclex.toml`` by default)::

    [tokenizer]
    operators = ["+", "-", "*", "/", "**", "mod"]
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from calclex.core.errors import ManifestError
from calclex.core.expression_lang.config import TokenizerConfig

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST_NAME = "calclex.toml"


@dataclass
class TokenizerManifest:
    """Tokenizer section of a calclex manifest."""

    operators: list[str] = field(default_factory=list)
    path: Path | None = None

    def build_config(self) -> TokenizerConfig:
        return TokenizerConfig(self.operators)


def load_manifest(path: Path) -> TokenizerManifest:
    """
    Load a tokenizer manifest from a TOML file.

    Args:
        path: Manifest file

    Returns:
        TokenizerManifest with the declared operators

    Raises:
        ManifestError: If the file is missing or unreadable, is not valid TOML, or
            declares operators that are not a list of strings.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ManifestError("Manifest not found", path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(f"Cannot read manifest: {e}", path) from e
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML: {e}", path) from e

    tokenizer_data = data.get("tokenizer", {})
    if not isinstance(tokenizer_data, dict):
        raise ManifestError("[tokenizer] must be a table", path)

    operators = tokenizer_data.get("operators", [])
    if not isinstance(operators, list) or not all(isinstance(op, str) for op in operators):
        raise ManifestError("tokenizer.operators must be a list of strings", path)

    logger.debug("Loaded %d operator(s) from %s", len(operators), path)
    return TokenizerManifest(operators=operators, path=path)


def find_manifest(directory: Path) -> Path | None:
    """Return ``directory/calclex.toml`` if it exists."""
    candidate = directory / DEFAULT_MANIFEST_NAME
    return candidate if candidate.is_file() else None
