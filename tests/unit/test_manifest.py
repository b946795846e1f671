"""Tests for loading operator vocabularies from calclex.toml."""

from __future__ import annotations

from pathlib import Path

import pytest

from calclex.core.errors import ConfigError, ManifestError
from calclex.core.expression_lang import TokenKind
from calclex.core.manifest import find_manifest, load_manifest


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "calclex.toml"
    path.write_text(content, encoding="utf-8")
    return path


class TestLoadManifest:
    def test_loads_operators(self, tmp_path: Path) -> None:
        path = _write(tmp_path, '[tokenizer]\noperators = ["+", "**", "mod"]\n')
        manifest = load_manifest(path)
        assert manifest.operators == ["+", "**", "mod"]
        assert manifest.path == path

    def test_build_config(self, tmp_path: Path) -> None:
        path = _write(tmp_path, '[tokenizer]\noperators = ["mod"]\n')
        config = load_manifest(path).build_config()
        tokens = list(config.tokenize("a mod b"))
        assert tokens[1].kind == TokenKind.OPERATOR

    def test_missing_section_means_no_operators(self, tmp_path: Path) -> None:
        path = _write(tmp_path, '[other]\nkey = "value"\n')
        assert load_manifest(path).operators == []

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestError, match="not found"):
            load_manifest(tmp_path / "nope.toml")

    def test_directory_path(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestError, match="Cannot read manifest") as exc_info:
            load_manifest(tmp_path)
        assert exc_info.value.path == tmp_path

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "calclex.toml"
        path.write_bytes(b'[tokenizer]\noperators = ["\xff"]\n')
        with pytest.raises(ManifestError, match="Cannot read manifest"):
            load_manifest(path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "[tokenizer\n")
        with pytest.raises(ManifestError, match="Invalid TOML") as exc_info:
            load_manifest(path)
        assert exc_info.value.path == path

    def test_operators_must_be_strings(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "[tokenizer]\noperators = [1, 2]\n")
        with pytest.raises(ManifestError):
            load_manifest(path)

    def test_tokenizer_must_be_table(self, tmp_path: Path) -> None:
        path = _write(tmp_path, 'tokenizer = "+"\n')
        with pytest.raises(ManifestError):
            load_manifest(path)

    def test_empty_operator_rejected_on_build(self, tmp_path: Path) -> None:
        path = _write(tmp_path, '[tokenizer]\noperators = [""]\n')
        manifest = load_manifest(path)
        with pytest.raises(ConfigError):
            manifest.build_config()


class TestFindManifest:
    def test_found(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "")
        assert find_manifest(tmp_path) == path

    def test_absent(self, tmp_path: Path) -> None:
        assert find_manifest(tmp_path) is None
