"""Config file discovery and loading.

Settings live either in a dedicated ``isoval.toml`` or in the
``[tool.isoval]`` table of a project's ``pyproject.toml``. The finder walks
up from the working directory and stops at the first directory holding
either file; ``isoval.toml`` wins when both are present.

``ISOVAL_CONFIG`` (or ``--config``) names a file explicitly.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from isoval.config.models import IsovalConfig

CONFIG_FILENAME = "isoval.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "ISOVAL_CONFIG"


def _has_tool_table(pyproject: Path) -> bool:
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        return False
    return "isoval" in data.get("tool", {})


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest config file above *start* (default: cwd), or None."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _has_tool_table(pyproject):
            return pyproject
    return None


def read_config_data(path: Path) -> dict[str, Any]:
    """Return the settings table stored in *path*.

    Raises ``tomllib.TOMLDecodeError`` on invalid TOML.
    """
    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        return data.get("tool", {}).get("isoval", {})
    return data


def load_config(path: Path | None = None, cwd: Path | None = None) -> IsovalConfig:
    """Load and validate config, falling back to defaults when none is found."""
    if path is None:
        path = find_config(cwd)
    if path is None:
        return IsovalConfig()
    return IsovalConfig.model_validate(read_config_data(path))
