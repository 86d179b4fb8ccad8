"""Configuration and logging bootstrap."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

DEFAULT_CONFIG: dict[str, Any] = {
    "paths": {"db_path": "workspace/ledger.db"},
    "ledger": {"description_max_bytes": 100, "priority_min": 1, "priority_max": 3},
    "logging": {"level": "INFO"},
    "runtime": {"default_caller": "local-user"},
}


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def ensure_runtime_dirs(root: Path, config: dict[str, Any]) -> dict[str, Path]:
    """Resolve the database path against ``root`` and create its directory."""
    paths_cfg = config.get("paths", {})
    db_path = (root / paths_cfg.get("db_path", "workspace/ledger.db")).resolve()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return {"db_path": db_path}


def load_effective_config(root: Path) -> dict[str, Any]:
    """Built-in defaults, then config/default.yaml, then config/local.yaml."""
    config_dir = root / "config"
    merged = merge_dicts(DEFAULT_CONFIG, load_yaml(config_dir / "default.yaml"))
    return merge_dicts(merged, load_yaml(config_dir / "local.yaml"))


def configure_logging(level: str | int = "INFO") -> None:
    """Install the process-wide log handler."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("ml").setLevel(level)
