"""Stop/acknowledge handshake between an orchestrator and drawing tasks.

The orchestrator broadcasts a single stop notification. Each task checks
for it once per frame, finishes the frame it is in, acknowledges exactly
once and exits. The orchestrator blocks until every task has
acknowledged before it touches the terminal again. There is no
preemption: a task that never checks the flag blocks shutdown.
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from typing import Any, Callable

logger = logging.getLogger(__name__)


class TaskHandle:
    """One task's view of the shutdown protocol."""

    def __init__(self, name: str, acks: "queue.Queue[str]") -> None:
        self.name = name
        self._acks = acks
        self._stop = threading.Event()
        self._acked = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def stop_requested(self) -> bool:
        return self._stop.is_set()

    @property
    def acknowledged(self) -> bool:
        return self._acked.is_set()

    def acknowledge(self) -> None:
        """Report completion. Only the first call counts."""
        if self._acked.is_set():
            return
        self._acked.set()
        self._acks.put(self.name)

    def __repr__(self) -> str:
        return f"TaskHandle({self.name!r}, stop={self.stop_requested}, acked={self.acknowledged})"


class ShutdownCoordinator:
    """
    Owns a set of drawing tasks and shuts them down cooperatively.

    Tasks are either spawned here (a thread calling ``frame`` until a
    stop is requested) or driven by the caller through a handle from
    :meth:`register`.
    """

    def __init__(self) -> None:
        self._tasks: list[TaskHandle] = []
        self._acks: "queue.Queue[str]" = queue.Queue()
        self._collected = 0
        self._stopped = False
        self._lock = threading.Lock()

    @property
    def tasks(self) -> list[TaskHandle]:
        return list(self._tasks)

    @property
    def stopped(self) -> bool:
        return self._stopped

    def register(self, name: str | None = None) -> TaskHandle:
        """Create a handle for a task the caller runs itself."""
        with self._lock:
            if self._stopped:
                raise RuntimeError("cannot add tasks after stop()")
            handle = TaskHandle(name or f"task-{len(self._tasks)}", self._acks)
            self._tasks.append(handle)
        return handle

    def spawn(
        self,
        frame: Callable[..., Any],
        *args: Any,
        name: str | None = None,
    ) -> TaskHandle:
        """
        Start a thread that renders ``frame(*args)`` until stopped.

        The stop flag is checked between frames, never during one.
        """
        handle = self.register(name)
        thread = threading.Thread(
            target=self._run,
            args=(handle, frame, args),
            name=handle.name,
            daemon=True,
        )
        handle._thread = thread
        thread.start()
        logger.debug("started drawing task %s", handle.name)
        return handle

    @staticmethod
    def _run(handle: TaskHandle, frame: Callable[..., Any], args: tuple[Any, ...]) -> None:
        try:
            while not handle.stop_requested:
                frame(*args)
        except Exception:
            logger.exception("drawing task %s failed", handle.name)
        finally:
            handle.acknowledge()

    def stop(self) -> None:
        """Broadcast one stop notification to every task."""
        with self._lock:
            if self._stopped:
                return
            self._stopped = True
            tasks = list(self._tasks)
        for handle in tasks:
            handle._stop.set()
        logger.debug("stop sent to %d tasks", len(tasks))

    def wait(self, timeout: float | None = None) -> bool:
        """
        Block until every task has acknowledged.

        Returns:
            True when all acknowledgments arrived, False on timeout.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        while self._collected < len(self._tasks):
            remaining = None if deadline is None else deadline - time.monotonic()
            if remaining is not None and remaining <= 0:
                return False
            try:
                name = self._acks.get(timeout=remaining)
            except queue.Empty:
                return False
            self._collected += 1
            logger.debug("task %s acknowledged stop", name)
        for handle in self._tasks:
            if handle._thread is not None:
                handle._thread.join()
        return True

    def run_until_interrupted(self, duration: float | None = None, poll: float = 0.25) -> None:
        """
        Block until Ctrl+C (or ``duration`` seconds), then stop and wait.
        """
        deadline = None if duration is None else time.monotonic() + duration
        try:
            while deadline is None or time.monotonic() < deadline:
                time.sleep(poll)
        except KeyboardInterrupt:
            logger.debug("interrupted")
        finally:
            self.stop()
            self.wait()
