"""
Editing session (open files + active file), persisted in session.json and restored on launch.
Reads drop files that no longer exist. Unlike recent files, persisting that
correction is best-effort: a failed save is logged and the corrected value is still returned.
"""
from typing import Optional, Sequence

from .config import SESSION_FILE_NAME
from .exceptions import HoneError
from .file_access import path_exists
from .logger import get_logger
from .models import SessionData
from .record_store import DirResolver, RecordStore

logger = get_logger("session")


def session_store(resolver: DirResolver) -> RecordStore[SessionData]:
    return RecordStore(resolver, SESSION_FILE_NAME, SessionData)


class SessionService:
    def __init__(self, store: RecordStore[SessionData]):
        self.store = store

    def get_session(self) -> SessionData:
        session = self.store.load()
        open_files = [p for p in session.open_files if path_exists(p)]
        changed = len(open_files) != len(session.open_files)
        session.open_files = open_files
        if session.active_file is not None and not path_exists(session.active_file):
            session.active_file = None
        # Only a change to open_files triggers a save
        if changed:
            try:
                self.store.save(session)
            except HoneError as e:
                logger.warning("Could not persist corrected session: %s", e)
        return session

    def save_session(self, open_files: Sequence[str], active_file: Optional[str] = None) -> None:
        """Replace the whole session document."""
        self.store.save(SessionData(open_files=list(open_files), active_file=active_file))
