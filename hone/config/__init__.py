"""
Load configuration from YAML.
Default: hone/config/default.yaml. Override: --config <file> or HONE_CONFIG.
"""
import os
from pathlib import Path
from typing import Any

import yaml

from hone.core.config import DEFAULT_WORKERS, ENV_CONFIG

_CACHE: dict[str, Any] | None = None
_CONFIG_DIR = Path(__file__).resolve().parent


def _deep_merge(base: dict, override: dict) -> dict:
    """Merge override into base (recursive). base is not mutated."""
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _load_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def _defaults() -> dict:
    """Built-in defaults (no file)."""
    return {
        "data_dir": None,
        "workers": DEFAULT_WORKERS,
        "logging": {"level": "INFO", "dir": None},
    }


def load_config(override_path: str | Path | None = None) -> dict:
    """
    Load config: default.yaml + env HONE_CONFIG + optional override file.
    Returns merged dict. Cached after first call unless override_path is given.
    """
    global _CACHE
    if override_path is not None:
        _CACHE = None

    if _CACHE is not None:
        return _CACHE

    base = _defaults()
    default_file = _CONFIG_DIR / "default.yaml"
    if default_file.exists():
        base = _deep_merge(base, _load_yaml(default_file))

    env_path = os.environ.get(ENV_CONFIG)
    if env_path and Path(env_path).exists():
        base = _deep_merge(base, _load_yaml(Path(env_path)))

    if override_path is not None:
        p = Path(override_path)
        if p.exists():
            base = _deep_merge(base, _load_yaml(p))

    raw_workers = base.get("workers")
    try:
        workers = DEFAULT_WORKERS if raw_workers is None else int(raw_workers)
    except (TypeError, ValueError):
        workers = DEFAULT_WORKERS
    base["workers"] = max(1, workers)

    _CACHE = base
    return base


def get_config(override_path: str | Path | None = None) -> dict:
    """Alias for load_config; use for read-only access."""
    return load_config(override_path)


def reset_config() -> None:
    """Clear cache (e.g. for tests)."""
    global _CACHE
    _CACHE = None
