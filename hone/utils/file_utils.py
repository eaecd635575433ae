"""File and path helpers."""

from pathlib import Path


def ensure_dir(path: Path) -> Path:
    """Create directory and parents if needed. Return path."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def file_name(path) -> str:
    """Final path segment, or the full path when there is none (e.g. "/" or "..")."""
    name = Path(path).name
    if not name or name in (".", ".."):
        return str(path)
    return name
