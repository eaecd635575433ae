"""
Whole-file text access for the editor: read, overwrite, parent directory.
Content is UTF-8 text; newlines are passed through untranslated so a write
followed by a read returns exactly the same string.
"""
import os
from pathlib import Path

from .exceptions import IoError, PathError
from .logger import get_logger

logger = get_logger("file_access")


def _text_path(path, action: str) -> str:
    # Integers would be taken by open() as file descriptors
    if not isinstance(path, (str, os.PathLike)):
        raise IoError(f"Failed to {action} file: expected a path, got {type(path).__name__}")
    return os.fspath(path)


def read_file(path) -> str:
    """Return the full contents of path as text. Raises IoError on any failure."""
    path = _text_path(path, "read")
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("read_file failed for %s: %s", path, e)
        raise IoError("Failed to read file", e) from e


def write_file(path, content: str) -> None:
    """Overwrite (or create) path with exactly content. No atomic rename."""
    path = _text_path(path, "write")
    if not isinstance(content, str):
        raise IoError(f"Failed to write file: expected text content, got {type(content).__name__}")
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except (OSError, UnicodeEncodeError) as e:
        logger.debug("write_file failed for %s: %s", path, e)
        raise IoError("Failed to write file", e) from e


def get_file_dir(path) -> str:
    """
    Parent directory of path as a string ("/a/b/c.txt" -> "/a/b", "c.txt" -> "").
    "." -> "". Raises PathError for an empty path or a root ("/").
    """
    if not isinstance(path, (str, os.PathLike)):
        raise PathError("Failed to get directory")
    raw = os.fspath(path)
    if not raw:
        raise PathError("Failed to get directory")
    p = Path(raw)
    if p.anchor and p == Path(p.anchor):
        raise PathError("Failed to get directory")
    return os.path.dirname(str(p))


def path_exists(path) -> bool:
    """True if path exists (file or directory). Never raises."""
    try:
        if not os.fspath(path):
            return False
        return Path(path).exists()
    except (OSError, TypeError, ValueError):
        return False
