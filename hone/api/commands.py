"""
Command surface exposed to the UI layer by stable name.
invoke() never raises HoneError: failures come back as CommandResult(ok=False, error=<message>).
Values are JSON-ready (documents converted to dicts).
"""
import inspect
from dataclasses import dataclass
from typing import Any, Callable, Optional

from hone.core import file_access
from hone.core.context import AppContext
from hone.core.exceptions import CommandError, HoneError
from hone.core.logger import get_command_logger, get_logger

logger = get_logger("commands")

COMMAND_NAMES = (
    "read_file",
    "write_file",
    "get_file_dir",
    "get_recent_files",
    "add_recent_file",
    "get_session",
    "save_session",
)


@dataclass
class CommandResult:
    ok: bool
    value: Any = None
    error: Optional[str] = None
    kind: Optional[str] = None

    def to_dict(self) -> dict:
        if self.ok:
            return {"ok": True, "value": self.value}
        return {"ok": False, "error": self.error, "kind": self.kind}


class Commands:
    """
    The seven backend operations bound to one AppContext.
    Call them directly (exceptions propagate) or through invoke(name, **args).
    """

    def __init__(self, context: AppContext):
        self.context = context
        self._registry: dict[str, Callable[..., Any]] = {name: getattr(self, name) for name in COMMAND_NAMES}

    # --- file access ---

    def read_file(self, path: str) -> str:
        return file_access.read_file(path)

    def write_file(self, path: str, content: str) -> None:
        file_access.write_file(path, content)

    def get_file_dir(self, path: str) -> str:
        return file_access.get_file_dir(path)

    # --- recent files ---

    def get_recent_files(self) -> list[dict]:
        return [f.to_dict() for f in self.context.recent_files.get_recent_files()]

    def add_recent_file(self, path: str) -> None:
        self.context.recent_files.add_recent_file(path)

    # --- session ---

    def get_session(self) -> dict:
        return self.context.session.get_session().to_dict()

    def save_session(self, open_files: list[str], active_file: Optional[str] = None) -> None:
        self.context.session.save_session(open_files, active_file)

    # --- dispatch ---

    def names(self) -> tuple:
        return COMMAND_NAMES

    def invoke(self, name: str, **args) -> CommandResult:
        """Dispatch by command name. Every failure is returned, not raised."""
        log = get_command_logger(logger, name)
        try:
            handler = self._resolve(name, args)
            value = handler(**args)
        except HoneError as e:
            log.warning("%s: %s", e.kind, e)
            return CommandResult(ok=False, error=str(e), kind=e.kind)
        except Exception as e:
            log.exception("Unexpected failure: %s", e)
            return CommandResult(ok=False, error=f"Unexpected error: {e}", kind=HoneError.kind)
        log.debug("ok")
        return CommandResult(ok=True, value=value)

    def _resolve(self, name: str, args: dict) -> Callable[..., Any]:
        handler = self._registry.get(name)
        if handler is None:
            raise CommandError(f"Unknown command: {name}")
        try:
            inspect.signature(handler).bind(**args)
        except TypeError as e:
            raise CommandError(f"Invalid arguments for {name}", e) from e
        for arg, value in args.items():
            check = _ARG_CHECKS.get(arg)
            if check is not None and not check(value):
                raise CommandError(f"Invalid arguments for {name}: '{arg}' must be {_ARG_EXPECTED[arg]}")
        return handler


def _is_str_list(value) -> bool:
    return isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value)


# Argument name -> accepted value (paths are plain strings, never file descriptors)
_ARG_CHECKS: dict[str, Callable[[Any], bool]] = {
    "path": lambda v: isinstance(v, str),
    "content": lambda v: isinstance(v, str),
    "open_files": _is_str_list,
    "active_file": lambda v: v is None or isinstance(v, str),
}

_ARG_EXPECTED = {
    "path": "a string",
    "content": "a string",
    "open_files": "a list of strings",
    "active_file": "a string or null",
}
