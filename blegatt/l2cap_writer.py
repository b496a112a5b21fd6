"""Bounded writer for building L2CAP/ATT responses that must fit an MTU."""

from __future__ import annotations

from .uuid import UUID


class WriterStateError(RuntimeError):
    """Raised when chunk operations are used out of order."""


class L2capWriter:
    """Accumulates bytes up to ``mtu``, with optional all-or-nothing chunks."""

    def __init__(self, mtu: int) -> None:
        self._mtu = int(mtu)
        self._buf = bytearray()
        self._chunk = bytearray()
        self._chunked = False

    def chunk(self) -> None:
        """Start a chunk; it is not kept until committed."""
        if self._chunked:
            raise WriterStateError("chunk called twice without committing")
        self._chunked = True

    def _end_chunk(self) -> None:
        self._chunk.clear()
        self._chunked = False

    def commit(self) -> bool:
        """Write the current chunk if it fits entirely; report success."""
        if not self._chunked:
            raise WriterStateError("commit without starting a chunk")
        success = len(self._buf) + len(self._chunk) <= self._mtu
        if success:
            self._buf += self._chunk
        self._end_chunk()
        return success

    def commit_fit(self) -> None:
        """Write as much of the current chunk as fits, truncating the rest."""
        if not self._chunked:
            raise WriterStateError("commit_fit without starting a chunk")
        room = self._mtu - len(self._buf)
        self._buf += self._chunk[:room]
        self._end_chunk()

    def write_byte_fit(self, value: int) -> bool:
        return self.write_fit(bytes([value]))

    def write_uint16_fit(self, value: int) -> bool:
        """Write ``value`` little-endian."""
        return self.write_fit(value.to_bytes(2, "little"))

    def write_uuid_fit(self, uuid: UUID) -> bool:
        """Write ``uuid`` in its wire (reversed) byte order."""
        return self.write_fit(uuid.to_bytes())

    def writeable(self, pad: int, data: bytes) -> int:
        """Number of bytes of ``data`` that would fit after ``pad`` bytes."""
        if self._chunked:
            return len(data)
        avail = self._mtu - len(self._buf) - pad
        return max(0, min(avail, len(data)))

    def write_fit(self, data: bytes) -> bool:
        """Write as much of ``data`` as fits; report whether nothing was cut."""
        if self._chunked:
            self._chunk += data
            return True
        avail = self._mtu - len(self._buf)
        if avail >= len(data):
            self._buf += data
            return True
        self._buf += data[:avail]
        return False

    def chunk_seek(self, offset: int) -> bool:
        """Drop the first ``offset`` bytes of the chunk; report if there were enough."""
        if not self._chunked:
            raise WriterStateError("chunk_seek without chunked write in progress")
        if len(self._chunk) < offset:
            self._chunk.clear()
            return False
        del self._chunk[:offset]
        return True

    def getvalue(self) -> bytes:
        """Return the bytes written so far."""
        if self._chunked:
            raise WriterStateError("getvalue requested while chunked write in progress")
        return bytes(self._buf)