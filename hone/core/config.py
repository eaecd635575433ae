"""
Backend constants. No YAML logic (see hone/config).
Store filenames, MRU cap, menu ids/events, env names.
"""
# ---------------------------------------------------------------------------
# Record store files (fixed names inside the app-data directory)
# ---------------------------------------------------------------------------
RECENT_FILES_NAME = "recent_files.json"
SESSION_FILE_NAME = "session.json"

# Oldest entries beyond this are dropped on every add
MAX_RECENT_FILES = 10

# ---------------------------------------------------------------------------
# Menu wiring: native item id -> notification name
# ---------------------------------------------------------------------------
MENU_OPEN = "menu-open"
MENU_SAVE = "menu-save"
MENU_SAVE_AS = "menu-save-as"

MENU_EVENTS = {
    "open": MENU_OPEN,
    "save": MENU_SAVE,
    "save_as": MENU_SAVE_AS,
}

# ---------------------------------------------------------------------------
# Env var names
# ---------------------------------------------------------------------------
ENV_CONFIG = "HONE_CONFIG"
ENV_DATA_DIR = "HONE_DATA_DIR"
ENV_LOG_LEVEL = "HONE_LOG_LEVEL"
ENV_LOG_DIR = "HONE_LOG_DIR"

DEFAULT_DATA_DIRNAME = ".hone"
DEFAULT_WORKERS = 4
