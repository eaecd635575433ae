# Qt host integration (PySide6): data directory, menu bridge
