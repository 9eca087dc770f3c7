"""Locate and read the samplelib settings file.

Settings live either in a dedicated ``samplelib.toml`` or in the
``[tool.samplelib]`` table of a project's ``pyproject.toml``. The nearest
directory (walking up from the start directory) that has either one wins;
within one directory ``samplelib.toml`` takes precedence. ``SAMPLELIB_CONFIG``
names a file directly and disables the search.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "samplelib.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "SAMPLELIB_CONFIG"


def _parse(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


def _tool_table(data: dict[str, Any]) -> dict[str, Any] | None:
    tool = data.get("tool")
    table = tool.get("samplelib") if isinstance(tool, dict) else None
    return table if isinstance(table, dict) else None


def _has_tool_table(pyproject: Path) -> bool:
    # Unreadable or invalid pyproject files are skipped.
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return False
    return _tool_table(data) is not None


def find_config(start: Path | None = None) -> Path | None:
    """Return the settings file that applies to *start* (default: cwd), or None."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        dedicated = directory / CONFIG_FILENAME
        if dedicated.is_file():
            return dedicated
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _has_tool_table(pyproject):
            return pyproject
    return None


def read_settings_table(path: Path) -> dict[str, Any]:
    """Settings data held in *path*.

    For a ``pyproject.toml`` that is the ``[tool.samplelib]`` table (empty when
    absent); for any other file the whole document.

    Raises:
        click.ClickException: *path* is not valid TOML.
    """
    data = _parse(path)
    if path.name == PYPROJECT_FILENAME:
        return _tool_table(data) or {}
    return data
