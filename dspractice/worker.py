"""A thread wrapper whose subclasses override ``run``."""

from __future__ import annotations

import threading
from enum import Enum
from typing import Optional


class ThreadStatus(Enum):
    """Lifecycle of a :class:`Worker`."""

    READY = 0
    RUNNING = 1
    EXITING = 2
    EXIT = 3


class Worker:
    """Runs ``run`` on its own thread once, tracking its status."""

    def __init__(self):
        self.status = ThreadStatus.READY
        self._thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()

    @property
    def tid(self) -> Optional[int]:
        """Identifier of the running thread, or None before it starts."""
        return self._thread.ident if self._thread is not None else None

    def _process(self) -> None:
        self.status = ThreadStatus.RUNNING
        try:
            self.run()
        finally:
            self.status = ThreadStatus.EXIT

    def start(self) -> None:
        """Start the thread; a worker can only be started once."""
        with self._lock:
            if self.status is not ThreadStatus.READY or self._thread is not None:
                raise RuntimeError("worker is not ready to start")
            self._thread = threading.Thread(target=self._process, daemon=True)
            self._thread.start()

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the thread; return whether it has finished."""
        if self._thread is None:
            raise RuntimeError("worker was never started")
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def run(self) -> None:
        """Work done on the thread; does nothing unless overridden."""

    def stop(self) -> None:
        """Ask the work to stop; does nothing unless overridden."""