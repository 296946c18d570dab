from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from .models import Settings


DEFAULT_SETTINGS_PATH = "config/settings.yaml"
SETTINGS_PATH_ENV = "JSONRPC_KIT_SETTINGS_PATH"


def _resolve_path(root: Path, p: Path) -> Path:
    return p if p.is_absolute() else (root / p).resolve()


def _load_yaml_mapping(p: Path) -> dict[str, Any]:
    with p.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise TypeError("settings root must be a mapping")
    return raw


def settings_path_from_env() -> Path:
    return Path(os.environ.get(SETTINGS_PATH_ENV, DEFAULT_SETTINGS_PATH))


def load_settings(path: str | Path | None = None) -> Settings:
    """
    Load `config/settings.yaml`.

    Relative paths inside the file are resolved against the directory that
    holds `config/`. A missing file yields the defaults.
    """
    p = Path(path if path is not None else settings_path_from_env()).expanduser().resolve()
    root = p.parent.parent  # .../config/settings.yaml -> repo root

    raw = _load_yaml_mapping(p) if p.exists() else {}
    s = Settings.from_dict(raw)
    s.paths.logs_dir = _resolve_path(root, s.paths.logs_dir)
    return s
