"""Locate and read ``loadtok.toml``.

The file holds the ``[decode]`` delimiter and the ``[plugins]`` switches.
Lookup order: ``--config``, then ``LOADTOK_CONFIG``, then a walk up from the
working directory, so a project-level file applies in any subdirectory.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from loadtok.config.models import LoadtokConfig

CONFIG_FILENAME = "loadtok.toml"
CONFIG_ENV_VAR = "LOADTOK_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the loadtok.toml that applies to *start* (default: cwd).

    None means every section keeps its code default.
    Checks LOADTOK_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> LoadtokConfig:
    """Load and validate config from a TOML file.

    If *path* is None, uses find_config(*cwd*) to discover the file.
    Returns default LoadtokConfig if no file is found.
    """
    if path is None:
        path = find_config(cwd)

    if path is None:
        return LoadtokConfig()

    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    return LoadtokConfig.model_validate(data)
