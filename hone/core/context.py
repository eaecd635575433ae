from pathlib import Path

from .event_bus import EventBus
from .menu import MenuNotifier
from .paths import default_data_dir, fixed_dir
from .recent_files import RecentFilesService, recent_files_store
from .session import SessionService, session_store


class AppContext:
    """Single source of truth for a backend instance: data-dir resolver, stores, services, event_bus."""

    def __init__(self, resolver=None, clock=None):
        self.resolver = resolver if resolver is not None else default_data_dir

        self.recent_store = recent_files_store(self.resolver)
        self.session_store = session_store(self.resolver)

        if clock is None:
            self.recent_files = RecentFilesService(self.recent_store)
        else:
            self.recent_files = RecentFilesService(self.recent_store, clock=clock)
        self.session = SessionService(self.session_store)

        self.event_bus = EventBus()
        self.menu = MenuNotifier(self.event_bus)

    @classmethod
    def for_directory(cls, data_dir, clock=None) -> "AppContext":
        """Context whose stores live in data_dir."""
        return cls(resolver=fixed_dir(Path(data_dir)), clock=clock)
