"""
Logging: level, file log, timestamp, per-command context.
Configure once with setup_logging(); use get_logger() / get_command_logger() everywhere.
"""
import logging
import os
from pathlib import Path
from typing import Optional

from hone.utils.file_utils import ensure_dir

from .config import ENV_LOG_LEVEL, ENV_LOG_DIR

ROOT_NAME = "hone"
LOG_FILE_NAME = "hone.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s%(command)s %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_setup_done = False


class HoneFormatter(logging.Formatter):
    """Timestamped lines; records logged outside a command get an empty command field."""

    def __init__(self):
        super().__init__(fmt=LOG_FORMAT, datefmt=_DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "command"):
            record.command = ""
        return super().format(record)


class CommandAdapter(logging.LoggerAdapter):
    """Logger that adds command context so formatter shows e.g. [add_recent_file]."""

    def process(self, msg, kwargs):
        extra = kwargs.get("extra") or {}
        command = self.extra.get("command", "")
        extra["command"] = f" [{command}]" if command else ""
        kwargs["extra"] = extra
        return msg, kwargs


def _get_level_from_env() -> int:
    raw = os.environ.get(ENV_LOG_LEVEL, "").strip().upper()
    return getattr(logging, raw, logging.INFO)


def _resolve_log_dir(log_dir) -> Optional[Path]:
    """log_dir argument, else HONE_LOG_DIR; created if set."""
    raw = log_dir or os.environ.get(ENV_LOG_DIR)
    if not raw:
        return None
    return ensure_dir(Path(raw))


def _attach(root: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(HoneFormatter())
    root.addHandler(handler)


def setup_logging(
    level: Optional[int] = None,
    log_dir: Optional[os.PathLike | str] = None,
    use_console: bool = True,
) -> None:
    """
    Configure the hone root logger once: console handler and, when a log dir is
    given (argument or HONE_LOG_DIR), log_dir/hone.log. Later calls are no-ops.
    """
    global _setup_done
    if _setup_done:
        return

    root = logging.getLogger(ROOT_NAME)
    if level is None:
        level = _get_level_from_env()
    root.setLevel(level)

    if use_console:
        _attach(root, logging.StreamHandler(), level)

    log_dir = _resolve_log_dir(log_dir)
    if log_dir is not None:
        _attach(root, logging.FileHandler(log_dir / LOG_FILE_NAME, encoding="utf-8"), level)

    _setup_done = True


def reset_logging() -> None:
    """Remove handlers added by setup_logging (e.g. for tests)."""
    global _setup_done
    root = logging.getLogger(ROOT_NAME)
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    _setup_done = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger under hone.* (e.g. hone.record_store)."""
    if not name.startswith(ROOT_NAME + "."):
        name = f"{ROOT_NAME}.{name}"
    return logging.getLogger(name)


def get_command_logger(logger: logging.Logger, command_name: str):
    """
    Return an adapter that adds command context to every log line.
    get_command_logger(get_logger('commands'), 'read_file') shows [read_file].
    """
    if isinstance(logger, CommandAdapter):
        logger = logger.logger
    return CommandAdapter(logger, {"command": command_name})
