"""Qt host adapters: per-application data directory and menu notifications as Qt signals."""

from pathlib import Path

from PySide6.QtCore import QObject, QStandardPaths, Signal

from hone.core.config import MENU_OPEN, MENU_SAVE, MENU_SAVE_AS
from hone.core.event_bus import EventBus


def qt_data_dir() -> Path | None:
    """AppDataLocation for the running QCoreApplication (org/app names set by the host)."""
    location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)
    return Path(location) if location else None


class QtNotifier(QObject):
    """
    Re-emits menu notifications from the event bus as Qt signals.
    Adapter only: widgets connect to menuOpen / menuSave / menuSaveAs.
    """

    menuOpen = Signal()
    menuSave = Signal()
    menuSaveAs = Signal()

    def __init__(self, bus: EventBus, parent=None):
        super().__init__(parent)
        self._bus = bus
        self._handlers = [
            (MENU_OPEN, self._on_open),
            (MENU_SAVE, self._on_save),
            (MENU_SAVE_AS, self._on_save_as),
        ]
        for event_name, cb in self._handlers:
            bus.subscribe(event_name, cb)

    def detach(self) -> None:
        """Unsubscribe from the bus."""
        for event_name, cb in self._handlers:
            self._bus.unsubscribe(event_name, cb)
        self._handlers = []

    def _on_open(self, _, data):
        self.menuOpen.emit()

    def _on_save(self, _, data):
        self.menuSave.emit()

    def _on_save_as(self, _, data):
        self.menuSaveAs.emit()
