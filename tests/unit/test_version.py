"""Tests for package version resolution."""

from __future__ import annotations

from pathlib import Path

from calclex import __version__
from calclex._version import _version_from_pyproject


class TestVersionFromPyproject:
    def test_reads_project_version(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "calclex"\nversion = "1.2.3"\n')
        assert _version_from_pyproject(path) == "1.2.3"

    def test_ignores_other_projects(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "something-else"\nversion = "9.9.9"\n')
        assert _version_from_pyproject(path) is None

    def test_missing_or_broken_file(self, tmp_path: Path) -> None:
        assert _version_from_pyproject(tmp_path / "pyproject.toml") is None
        broken = tmp_path / "broken.toml"
        broken.write_text("[project\n")
        assert _version_from_pyproject(broken) is None

    def test_package_version_is_set(self) -> None:
        assert __version__ and __version__ != "0.0.0"
