"""
Small JSON document persistence bound to one fixed file in the app-data directory.
Instantiated per document type (RecentFiles -> recent_files.json, SessionData -> session.json).
load() never creates the file; only save() does. Every save rewrites the whole document.
"""
import json
from pathlib import Path
from typing import Callable, Generic, Protocol, TypeVar

from hone.utils.file_utils import ensure_dir

from .exceptions import DirectoryError, IoError, ParseError, SerializeError
from .logger import get_logger

logger = get_logger("record_store")


class Document(Protocol):
    @classmethod
    def default(cls): ...

    def to_dict(self) -> dict: ...

    @classmethod
    def from_dict(cls, data): ...


D = TypeVar("D", bound=Document)

DirResolver = Callable[[], Path | str | None]


class RecordStore(Generic[D]):
    """
    Generic load-default-or-parse / save store.

    resolver: returns the app-data directory (created on demand).
    filename: fixed file name inside that directory.
    doc_type: class with default(), to_dict(), from_dict().
    """

    def __init__(self, resolver: DirResolver, filename: str, doc_type: type[D]):
        self._resolver = resolver
        self.filename = filename
        self.doc_type = doc_type

    def resolve_path(self) -> Path:
        """App-data directory (created with ancestors if missing) / filename."""
        try:
            base = self._resolver()
        except Exception as e:
            raise DirectoryError("Failed to get app data directory", e) from e
        if base is None or str(base) == "":
            raise DirectoryError("Failed to get app data directory")
        try:
            directory = ensure_dir(Path(base))
        except OSError as e:
            raise DirectoryError("Failed to create app data directory", e) from e
        return directory / self.filename

    def load(self) -> D:
        """Default document if the file is absent; otherwise the parsed file."""
        path = self.resolve_path()
        if not path.exists():
            return self.doc_type.default()
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise IoError(f"Failed to read {self.filename}", e) from e
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ParseError(f"Failed to parse {self.filename}", e) from e
        return self.doc_type.from_dict(data)

    def save(self, document: D) -> None:
        """Serialize to pretty-printed JSON and overwrite the file."""
        path = self.resolve_path()
        try:
            payload = json.dumps(document.to_dict(), indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise SerializeError(f"Failed to serialize {self.filename}", e) from e
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(payload)
        except OSError as e:
            raise IoError(f"Failed to write {self.filename}", e) from e
        logger.debug("Saved %s", path)
