"""Growable byte accumulator used for keys and values."""

from __future__ import annotations

from enum import Enum

from streamenv.errors import AllocFailure, BufferReleased
from streamenv.logger import get_logger

logger = get_logger(__name__)


class BufferStatus(str, Enum):
    OK = "ok"
    FREED = "freed"
    ALLOC_ERROR = "alloc-error"


class GrowableBuffer:
    """Zero-filled byte region with explicit capacity.

    Content is everything before the first NUL byte, so ``clear`` only has to
    zero the region. Use as a context manager so ``release`` runs on every
    exit path.
    """

    def __init__(self, size: int, *, limit: int | None = None) -> None:
        self._data = bytearray()
        self._limit = limit
        self.status = BufferStatus.FREED
        self.allocate(size)

    def __enter__(self) -> "GrowableBuffer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.status is not BufferStatus.FREED:
            self.release()

    @property
    def capacity(self) -> int:
        return len(self._data)

    def allocate(self, size: int) -> None:
        if size <= 0:
            raise ValueError("buffer size must be positive")
        if self._limit is not None and size > self._limit:
            self.status = BufferStatus.ALLOC_ERROR
            raise AllocFailure(size)
        try:
            self._data = bytearray(size)
        except MemoryError as exc:
            self.status = BufferStatus.ALLOC_ERROR
            raise AllocFailure(size) from exc
        self.status = BufferStatus.OK

    def expand(self, by: int) -> None:
        """Grow by ``by`` zeroed bytes; on failure the prior content stays usable."""
        self._check()
        requested = self.capacity + by
        if self._limit is not None and requested > self._limit:
            raise AllocFailure(requested, f"buffer limit of {self._limit} bytes exceeded")
        try:
            self._data.extend(bytes(by))
        except MemoryError as exc:
            raise AllocFailure(requested) from exc
        logger.debug("buffer_expanded", capacity=self.capacity)

    def clear(self) -> None:
        self._check()
        self._data[:] = bytes(self.capacity)

    def release(self) -> None:
        self._check()
        self._data = bytearray()
        self.status = BufferStatus.FREED

    def write(self, index: int, byte: int) -> None:
        self._check()
        self._data[index] = byte

    def contents(self) -> bytes:
        self._check()
        end = self._data.find(0)
        if end == -1:
            return bytes(self._data)
        return bytes(self._data[:end])

    def replace(self, content: bytes) -> None:
        """Overwrite from the front, zeroing whatever followed."""
        self._check()
        if len(content) > self.capacity:
            raise ValueError("content exceeds buffer capacity")
        self._data[:] = content + bytes(self.capacity - len(content))

    def _check(self) -> None:
        if self.status is BufferStatus.FREED:
            raise BufferReleased()
