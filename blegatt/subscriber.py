"""Thread-safe registry of notification callbacks keyed by attribute handle."""

from __future__ import annotations

import threading
from typing import Callable, Optional

Callback = Callable[[bytes, Optional[BaseException]], None]


class Subscriber:
    """Maps attribute handles to the callbacks that receive their notifications."""

    def __init__(self) -> None:
        self._callbacks: dict[int, Callback] = {}
        self._lock = threading.Lock()

    def subscribe(self, handle: int, callback: Callback) -> None:
        """Register ``callback`` for ``handle``, replacing any previous one."""
        with self._lock:
            self._callbacks[handle] = callback

    def unsubscribe(self, handle: int) -> None:
        """Remove the callback for ``handle``, if any."""
        with self._lock:
            self._callbacks.pop(handle, None)

    def get(self, handle: int) -> Callback | None:
        """Return the callback for ``handle``, or ``None``."""
        with self._lock:
            return self._callbacks.get(handle)