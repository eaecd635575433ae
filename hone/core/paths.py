"""
App-data directory resolvers handed to RecordStore.
A resolver is a zero-argument callable returning the directory; the store creates it.
"""
import os
from pathlib import Path

from .config import DEFAULT_DATA_DIRNAME, ENV_DATA_DIR


def default_data_dir() -> Path:
    """HONE_DATA_DIR, else config data_dir, else ~/.hone."""
    env_dir = os.environ.get(ENV_DATA_DIR, "").strip()
    if env_dir:
        return Path(env_dir).expanduser()
    from hone.config import load_config

    configured = load_config().get("data_dir")
    if configured:
        return Path(str(configured)).expanduser()
    return Path.home() / DEFAULT_DATA_DIRNAME


def fixed_dir(path):
    """Resolver that always returns path (tests, CLI --data-dir)."""
    directory = Path(path).expanduser()

    def _resolve() -> Path:
        return directory

    return _resolve
