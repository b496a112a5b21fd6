"""A bounded pool of reusable byte buffers."""

from __future__ import annotations

import logging
import threading
from collections import deque

log = logging.getLogger(__name__)


class BytePool:
    """Hands out buffers of ``width`` bytes and keeps up to ``depth`` returned ones.

    After :meth:`close`, buffers still held are handed out, then ``get`` returns
    ``None`` and returned buffers are dropped.
    """

    def __init__(self, width: int, depth: int) -> None:
        if width < 0 or depth < 0:
            raise ValueError("width and depth must not be negative")
        self._width = width
        self._depth = depth
        self._free: deque[bytearray] = deque()
        self._closed = False
        self._lock = threading.Lock()

    def get(self) -> bytearray | None:
        """Return a pooled buffer, a fresh one, or ``None`` once closed and drained."""
        with self._lock:
            if self._free:
                return self._free.popleft()
            if self._closed:
                return None
        return bytearray(self._width)

    def put(self, buffer: bytearray) -> None:
        """Return ``buffer`` to the pool; it is dropped if the pool is full or closed."""
        with self._lock:
            if self._closed:
                log.debug("bytepool: put on closed pool")
                return
            if len(self._free) < self._depth:
                self._free.append(buffer)

    def close(self) -> None:
        """Close the pool."""
        with self._lock:
            self._closed = True