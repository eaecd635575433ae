"""
Native menu wiring as an injected capability.
The host calls MenuNotifier.activate(item_id) when a menu item fires; the notifier
emits the matching notification on the event bus. This backend does not handle
the notifications itself, the UI layer subscribes to them.
"""
from dataclasses import dataclass
from typing import Optional

from .config import MENU_EVENTS
from .event_bus import EventBus
from .logger import get_logger

logger = get_logger("menu")


@dataclass(frozen=True)
class MenuItem:
    id: str
    label: str
    shortcut: str


# File menu as built by the host (Qt: see hone.gui.menu)
FILE_MENU_ITEMS = (
    MenuItem("open", "Open", "Ctrl+O"),
    MenuItem("save", "Save", "Ctrl+S"),
    MenuItem("save_as", "Save As...", "Ctrl+Shift+S"),
)


class MenuNotifier:
    def __init__(self, bus: EventBus):
        self.bus = bus

    def activate(self, item_id: str) -> Optional[str]:
        """Emit the notification for item_id. Returns the event name, or None for unknown ids."""
        event_name = MENU_EVENTS.get(item_id)
        if event_name is None:
            logger.debug("Ignoring unknown menu item %r", item_id)
            return None
        self.bus.emit(event_name, None)
        return event_name
