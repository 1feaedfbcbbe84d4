#!/usr/bin/env python3
"""
Settings
========
Packaged defaults from ``markovpass/configs/app.yaml``, with an optional
per-user file merged on top:

    $XDG_CONFIG_HOME/markovpass/app.yaml   (Linux; platformdirs elsewhere)

Only the keys present in the user file are replaced; nested sections are
merged key by key.
"""

from __future__ import annotations

import copy
import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from platformdirs import user_config_path

logger = logging.getLogger(__name__)

APP_NAME = "markovpass"
CONFIG_FILENAME = "app.yaml"


def user_config_file() -> Path:
    return user_config_path(APP_NAME) / CONFIG_FILENAME


def _load_packaged_defaults() -> dict:
    text = resources.files("markovpass").joinpath("configs").joinpath(CONFIG_FILENAME).read_text()
    return yaml.safe_load(text) or {}


def _load_user_overrides(path: Path) -> dict:
    if not path.is_file():
        return {}
    data = yaml.safe_load(path.read_text())
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: settings file must contain a mapping")
    logger.debug(f"Loaded user settings from {path}")
    return data


def merge_settings(base: dict, overrides: dict) -> dict:
    """Return ``base`` with ``overrides`` merged in, recursing into dicts."""
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_settings(merged[key], value)
        else:
            merged[key] = value
    return merged


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    return merge_settings(_load_packaged_defaults(),
                          _load_user_overrides(user_config_file()))


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path."""
    current: Any = load_app_config()
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


__all__ = [
    "load_app_config",
    "get_setting",
    "merge_settings",
    "user_config_file",
]
