"""Tests for packaging metadata."""

from __future__ import annotations

import importlib
import tomllib
from pathlib import Path
from typing import Any, cast


def _load_pyproject() -> dict[str, Any]:
    path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with path.open("rb") as fh:
        return tomllib.load(fh)


def _flatten_mypy_overrides(pyproject: dict[str, Any]) -> set[str]:
    overrides = pyproject.get("tool", {}).get("mypy", {}).get("overrides", [])
    modules: set[str] = set()
    for entry in overrides:
        modules.update(entry.get("module", []))
    return modules


def test_dev_extra_has_pytest() -> None:
    extras = cast(
        dict[str, list[str]], _load_pyproject()["project"].get("optional-dependencies", {})
    )
    assert any(req.startswith("pytest") for req in extras["dev"])


def test_console_script_entrypoint() -> None:
    scripts = _load_pyproject().get("project", {}).get("scripts", {})
    assert scripts.get("threadpress") == "threadpress.cli:app"


def test_defaults_shipped_as_package_data() -> None:
    data = _load_pyproject()["tool"]["setuptools"]["package-data"]
    assert "defaults.yml" in data["threadpress.config"]


def test_import_smoke() -> None:
    importlib.import_module("threadpress")
    importlib.import_module("threadpress.cli")


def test_mypy_overrides() -> None:
    mods = _flatten_mypy_overrides(_load_pyproject())
    for mod in {"reportlab", "reportlab.*", "bs4", "bs4.*"}:
        assert mod in mods
