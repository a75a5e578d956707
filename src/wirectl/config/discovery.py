"""Locating and reading ``wirectl.toml``.

Lookup order: the ``--config`` path, then ``WIRECTL_CONFIG``, then the
nearest ``wirectl.toml`` in the start directory or any parent. A file
named explicitly must exist; a walk-up that finds nothing just means
the workspace runs on defaults.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "wirectl.toml"
CONFIG_ENV_VAR = "WIRECTL_CONFIG"


class ConfigError(Exception):
    """A configuration file was named but is missing or unreadable."""


def locate_config(explicit: str | Path | None = None, *, start: Path | None = None) -> Path | None:
    """Return the config file for this invocation, or None to use defaults.

    Raises:
        ConfigError: if *explicit* (or ``WIRECTL_CONFIG``) names a file
            that does not exist.
    """
    named = explicit or os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named).expanduser()
        if not path.is_file():
            msg = f"Config file not found: {path}"
            raise ConfigError(msg)
        return path

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path | None) -> dict[str, Any]:
    """Parse *path* into a plain dict; None reads as an empty config."""
    if path is None:
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        msg = f"Invalid config {path}: {exc}"
        raise ConfigError(msg) from exc
