import logging
import threading
from collections import deque
from concurrent.futures import Future, ThreadPoolExecutor

from hone.api.commands import CommandResult, Commands
from hone.config import load_config
from hone.core.context import AppContext

logger = logging.getLogger(__name__)

ERROR_BUFFER_MAX = 50


class HoneController:
    """
    Runs backend commands for a host UI, synchronously or on a worker pool.
    Publishes command_started / command_finished / command_failed on context.event_bus.
    No locking around the stores: concurrent writers to one document are last-writer-wins.
    """

    def __init__(self, context: AppContext | None = None, workers: int | None = None):
        self.context = context if context is not None else AppContext()
        self.commands = Commands(self.context)
        if workers is None:
            workers = load_config().get("workers", 1)
        self.workers = max(1, int(workers))
        self.errors = deque(maxlen=ERROR_BUFFER_MAX)
        self._lock = threading.Lock()
        self._executor: ThreadPoolExecutor | None = None

    @property
    def event_bus(self):
        return self.context.event_bus

    def invoke(self, name: str, **args) -> CommandResult:
        """Run one command on the calling thread and publish its outcome."""
        bus = self.context.event_bus
        bus.emit("command_started", {"command": name})
        result = self.commands.invoke(name, **args)
        if result.ok:
            bus.emit("command_finished", {"command": name, "value": result.value})
        else:
            with self._lock:
                self.errors.append({"command": name, "kind": result.kind, "message": result.error})
            bus.emit("command_failed", {"command": name, "kind": result.kind, "error": result.error})
        return result

    def invoke_async(self, name: str, callback=None, **args) -> Future:
        """Queue a command on the worker pool. callback(result) runs on the worker thread."""

        def _run():
            result = self.invoke(name, **args)
            if callback is not None:
                try:
                    callback(result)
                except Exception as e:
                    logger.exception("Command callback failed [%s]: %s", name, e)
            return result

        return self._get_executor().submit(_run)

    def get_errors(self):
        """Copy of the last failed commands (each {'command', 'kind', 'message'})."""
        with self._lock:
            return list(self.errors)

    def shutdown(self, wait: bool = True) -> None:
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=wait)

    def _get_executor(self) -> ThreadPoolExecutor:
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="hone-cmd")
            return self._executor
