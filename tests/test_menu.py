"""Menu notifications through the event bus."""
from hone.core.config import MENU_EVENTS
from hone.core.event_bus import EventBus
from hone.core.menu import FILE_MENU_ITEMS, MenuNotifier


def test_menu_ids_map_to_notifications():
    assert MENU_EVENTS == {"open": "menu-open", "save": "menu-save", "save_as": "menu-save-as"}
    assert [item.id for item in FILE_MENU_ITEMS] == ["open", "save", "save_as"]


def test_activate_emits_on_bus():
    bus = EventBus()
    seen = []
    for event_name in MENU_EVENTS.values():
        bus.subscribe(event_name, lambda ev, data: seen.append(ev))
    notifier = MenuNotifier(bus)

    assert notifier.activate("save_as") == "menu-save-as"
    assert notifier.activate("open") == "menu-open"
    assert seen == ["menu-save-as", "menu-open"]


def test_unknown_menu_id_emits_nothing():
    bus = EventBus()
    seen = []
    bus.subscribe("menu-open", lambda ev, data: seen.append(ev))
    assert MenuNotifier(bus).activate("quit") is None
    assert seen == []


def test_bus_handler_error_does_not_stop_others():
    bus = EventBus()
    seen = []

    def broken(ev, data):
        raise RuntimeError("handler bug")

    bus.subscribe("menu-save", broken)
    bus.subscribe("menu-save", lambda ev, data: seen.append(data))
    bus.emit("menu-save", "payload")
    assert seen == ["payload"]


def test_unsubscribe():
    bus = EventBus()
    seen = []
    cb = lambda ev, data: seen.append(ev)  # noqa: E731
    bus.subscribe("menu-open", cb)
    bus.unsubscribe("menu-open", cb)
    bus.unsubscribe("menu-open", cb)
    bus.emit("menu-open")
    assert seen == []
