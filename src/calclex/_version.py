"""Package version: the checkout's pyproject.toml wins over installed metadata."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_DISTRIBUTION = "calclex"
_UNKNOWN = "0.0.0"

# src/calclex/_version.py -> repository root
_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _version_from_pyproject(pyproject: Path) -> str | None:
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return None
    project = data.get("project", {})
    if project.get("name") != _DISTRIBUTION:
        return None
    found = project.get("version")
    return found if isinstance(found, str) else None


def get_version() -> str:
    """Return the source-tree version for editable checkouts, else the installed one."""
    if (found := _version_from_pyproject(_PYPROJECT)) is not None:
        return found
    try:
        return version(_DISTRIBUTION)
    except PackageNotFoundError:
        return _UNKNOWN


__version__ = get_version()
