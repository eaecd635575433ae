from .context import AppContext
from .event_bus import EventBus
from .config import MAX_RECENT_FILES, RECENT_FILES_NAME, SESSION_FILE_NAME, MENU_EVENTS
from .exceptions import (
    HoneError, IoError, ParseError, SerializeError, PathError,
    NotFoundError, DirectoryError, CommandError,
)
from .file_access import read_file, write_file, get_file_dir
from .menu import MenuNotifier, FILE_MENU_ITEMS
from .models import RecentFile, RecentFiles, SessionData
from .record_store import RecordStore
from .recent_files import RecentFilesService
from .session import SessionService
from .logger import get_logger, get_command_logger, setup_logging

__all__ = [
    "AppContext", "EventBus",
    "MAX_RECENT_FILES", "RECENT_FILES_NAME", "SESSION_FILE_NAME", "MENU_EVENTS",
    "HoneError", "IoError", "ParseError", "SerializeError", "PathError",
    "NotFoundError", "DirectoryError", "CommandError",
    "read_file", "write_file", "get_file_dir",
    "MenuNotifier", "FILE_MENU_ITEMS",
    "RecentFile", "RecentFiles", "SessionData",
    "RecordStore", "RecentFilesService", "SessionService",
    "get_logger", "get_command_logger", "setup_logging",
]
