"""Config loader."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .schema import LocatorConfig


def _read_settings(path: str | Path) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"config file {path} must contain a mapping")
    # $VAR / ${VAR} in string settings, e.g. boundary: "${HOME}/src"
    return {
        key: os.path.expandvars(value) if isinstance(value, str) else value
        for key, value in data.items()
    }


def load_config(
    paths: str | Path | list[str | Path],
    environ: Mapping[str, str] | None = None,
) -> LocatorConfig:
    """Load YAML config files into a LocatorConfig.

    Settings in later files replace the same settings in earlier ones.
    When no file sets ``boundary``, it is taken from the ``boundary_env``
    variable.
    """
    if isinstance(paths, (str, Path)):
        paths = [paths]

    settings: dict[str, Any] = {}
    for path in paths:
        settings.update(_read_settings(path))
    return LocatorConfig(**settings).with_env_boundary(environ)
