"""A countdown timer running on a background thread."""

from __future__ import annotations

import threading
from typing import Optional


class Timer:
    """Counts down a whole number of seconds in a worker thread.

    The fractional part of ``time`` is dropped when the countdown starts.
    """

    def __init__(self, time: float) -> None:
        self.time = time
        self._running = False
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        """True from :meth:`start` until the countdown elapses."""
        return self._running

    def start(self) -> None:
        """Start the countdown, first waiting for any previous one to finish."""
        self._running = True
        self._stop_event.clear()
        if self._thread is not None:
            self._thread.join()
        self._thread = threading.Thread(target=self._count_down, daemon=True)
        self._thread.start()

    def _count_down(self) -> None:
        if self._stop_event.wait(int(self.time)):
            return
        self._running = False

    def stop(self) -> None:
        """Abandon the countdown and wait for the worker thread to exit.

        A stopped countdown does not clear the running flag.
        """
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def __enter__(self) -> "Timer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()