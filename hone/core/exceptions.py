"""HONE backend exceptions. Every failure carries a kind and the underlying cause text."""


class HoneError(Exception):
    """Base exception for HONE."""

    kind = "HoneError"

    def __init__(self, message: str, cause: BaseException | None = None):
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.message = message
        self.cause = cause


class IoError(HoneError):
    """Read, write or create-directory failure."""

    kind = "IoError"


class ParseError(HoneError):
    """Persisted JSON is malformed or has the wrong shape."""

    kind = "ParseError"


class SerializeError(HoneError):
    """Document cannot be encoded as JSON."""

    kind = "SerializeError"


class PathError(HoneError):
    """Path has no derivable parent or name."""

    kind = "PathError"


class NotFoundError(HoneError):
    """Referenced file does not exist when existence is required."""

    kind = "NotFoundError"


class DirectoryError(HoneError):
    """App-data directory cannot be determined or created."""

    kind = "DirectoryError"


class CommandError(HoneError):
    """Unknown command name or bad arguments at the command surface."""

    kind = "CommandError"
