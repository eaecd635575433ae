"""
Persisted documents: RecentFiles (MRU list) and SessionData (open files + active).
Each document knows its default value and how to convert to/from the JSON shape
stored on disk. Shape errors raise ParseError so a bad file reads like bad JSON.
"""
from dataclasses import dataclass, field
from typing import Any, Optional

from .exceptions import ParseError


def _require(data: dict, key: str, types, doc: str):
    if key not in data:
        raise ParseError(f"Failed to parse {doc}: missing field '{key}'")
    value = data[key]
    if not isinstance(value, types) or isinstance(value, bool):
        raise ParseError(f"Failed to parse {doc}: invalid type for '{key}'")
    return value


def _require_object(data: Any, doc: str) -> dict:
    if not isinstance(data, dict):
        raise ParseError(f"Failed to parse {doc}: expected an object")
    return data


@dataclass
class RecentFile:
    path: str
    name: str
    accessed_at: int = 0

    def to_dict(self) -> dict:
        return {"path": self.path, "name": self.name, "accessed_at": self.accessed_at}

    @classmethod
    def from_dict(cls, data: Any) -> "RecentFile":
        data = _require_object(data, "recent file entry")
        accessed_at = _require(data, "accessed_at", int, "recent file entry")
        if accessed_at < 0:
            raise ParseError("Failed to parse recent file entry: 'accessed_at' must be non-negative")
        return cls(
            path=_require(data, "path", str, "recent file entry"),
            name=_require(data, "name", str, "recent file entry"),
            accessed_at=accessed_at,
        )


@dataclass
class RecentFiles:
    """Most-recent-first list of RecentFile, unique by path."""

    files: list[RecentFile] = field(default_factory=list)

    @classmethod
    def default(cls) -> "RecentFiles":
        return cls()

    def to_dict(self) -> dict:
        return {"files": [f.to_dict() for f in self.files]}

    @classmethod
    def from_dict(cls, data: Any) -> "RecentFiles":
        data = _require_object(data, "recent files")
        files = _require(data, "files", list, "recent files")
        return cls(files=[RecentFile.from_dict(f) for f in files])


@dataclass
class SessionData:
    """Files open in the editor and the focused one. active_file is not checked against open_files."""

    open_files: list[str] = field(default_factory=list)
    active_file: Optional[str] = None

    @classmethod
    def default(cls) -> "SessionData":
        return cls()

    def to_dict(self) -> dict:
        return {"open_files": list(self.open_files), "active_file": self.active_file}

    @classmethod
    def from_dict(cls, data: Any) -> "SessionData":
        data = _require_object(data, "session")
        open_files = _require(data, "open_files", list, "session")
        if not all(isinstance(p, str) for p in open_files):
            raise ParseError("Failed to parse session: 'open_files' must contain strings")
        active_file = data.get("active_file")
        if active_file is not None and not isinstance(active_file, str):
            raise ParseError("Failed to parse session: invalid type for 'active_file'")
        return cls(open_files=list(open_files), active_file=active_file)
