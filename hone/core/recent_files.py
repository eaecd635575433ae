"""
Recently opened files (MRU), persisted in recent_files.json.
Most recent first, unique by resolved path, at most MAX_RECENT_FILES entries.
Reads prune entries whose file is gone and persist the pruned list; a failure of
that save propagates to the caller.
"""
import time
from pathlib import Path
from typing import Callable

from hone.utils.file_utils import file_name

from .config import MAX_RECENT_FILES, RECENT_FILES_NAME
from .exceptions import NotFoundError
from .file_access import path_exists
from .logger import get_logger
from .models import RecentFile, RecentFiles
from .record_store import DirResolver, RecordStore

logger = get_logger("recent_files")


def epoch_seconds(clock: Callable[[], float] = time.time) -> int:
    """Current time as whole epoch seconds; 0 if the clock fails or reads before the epoch."""
    try:
        now = int(clock())
    except (OSError, OverflowError, ValueError) as e:
        logger.warning("Clock read failed, using 0: %s", e)
        return 0
    return max(now, 0)


def recent_files_store(resolver: DirResolver) -> RecordStore[RecentFiles]:
    return RecordStore(resolver, RECENT_FILES_NAME, RecentFiles)


class RecentFilesService:
    def __init__(self, store: RecordStore[RecentFiles], clock: Callable[[], float] = time.time):
        self.store = store
        self._clock = clock

    def get_recent_files(self) -> list[RecentFile]:
        """Entries whose path still exists, most recent first. Saves if anything was pruned."""
        doc = self.store.load()
        kept = [f for f in doc.files if path_exists(f.path)]
        if len(kept) != len(doc.files):
            logger.info("Pruned %d missing recent file(s)", len(doc.files) - len(kept))
            doc.files = kept
            self.store.save(doc)
        return kept

    def add_recent_file(self, path) -> None:
        """Move path to the front of the list (refreshing its timestamp), capped at MAX_RECENT_FILES."""
        if not path_exists(path):
            raise NotFoundError(f"File not found: {path}")
        resolved = str(Path(path).resolve())
        doc = self.store.load()
        files = [f for f in doc.files if f.path != resolved]
        entry = RecentFile(
            path=resolved,
            name=file_name(resolved),
            accessed_at=epoch_seconds(self._clock),
        )
        files.insert(0, entry)
        dropped = len(files) - MAX_RECENT_FILES
        if dropped > 0:
            logger.debug("Dropping %d oldest recent file(s)", dropped)
        doc.files = files[:MAX_RECENT_FILES]
        self.store.save(doc)
