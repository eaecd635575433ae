"""
Structured logging setup for HONE.

Use configure_logging() at application startup (CLI or GUI host).
Then use get_logger(name) or get_command_logger(logger, command_name) everywhere.
"""

import logging
from pathlib import Path
from typing import Optional

from hone.core.logger import (
    get_logger,
    get_command_logger,
    setup_logging as _setup_logging,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_command_logger",
]


def configure_logging(
    level: Optional[str] = None,
    log_dir: Optional[Path] = None,
    use_console: bool = True,
) -> None:
    """
    Configure application-wide logging. Call once at startup.

    Args:
        level: One of DEBUG, INFO, WARNING, ERROR. Default from HONE_LOG_LEVEL or INFO.
        log_dir: Directory for hone.log. Default from HONE_LOG_DIR or console only.
        use_console: Whether to attach a console handler.
    """
    level_int = None
    if level is not None:
        level_int = getattr(logging, level.upper(), logging.INFO)
    _setup_logging(
        level=level_int,
        log_dir=str(log_dir) if log_dir else None,
        use_console=use_console,
    )
