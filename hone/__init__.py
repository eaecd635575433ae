"""HONE: native backend for the HONE document editor."""

__version__ = "0.1.0"

from hone.api.commands import Commands, CommandResult
from hone.application.controller import HoneController
from hone.core.context import AppContext
from hone.core.event_bus import EventBus
from hone.core.exceptions import HoneError

__all__ = [
    "__version__",
    "Commands",
    "CommandResult",
    "HoneController",
    "AppContext",
    "EventBus",
    "HoneError",
]
