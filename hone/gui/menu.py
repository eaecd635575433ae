"""File menu for a Qt host window; each action forwards its item id to MenuNotifier."""

from PySide6.QtGui import QAction, QKeySequence

from hone.core.menu import FILE_MENU_ITEMS, MenuNotifier


def build_file_menu(menu_bar, notifier: MenuNotifier):
    """
    Add "File" with Open / Save / Save As... to menu_bar (QMenuBar).
    Returns the QMenu; actions carry the item id as objectName.
    """
    menu = menu_bar.addMenu("File")
    for item in FILE_MENU_ITEMS:
        action = QAction(item.label, menu)
        action.setObjectName(item.id)
        action.setShortcut(QKeySequence(item.shortcut))
        action.triggered.connect(lambda checked=False, item_id=item.id: notifier.activate(item_id))
        menu.addAction(action)
    menu.addSeparator()
    close_action = QAction("Close Window", menu)
    close_action.setObjectName("close_window")
    close_action.setShortcut(QKeySequence(QKeySequence.StandardKey.Close))
    close_action.triggered.connect(lambda checked=False: _close_window(menu_bar))
    menu.addAction(close_action)
    return menu


def _close_window(menu_bar) -> None:
    window = menu_bar.window()
    if window is not None:
        window.close()
