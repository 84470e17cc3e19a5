"""Pools of reusable byte buffers for building and receiving packets."""

from __future__ import annotations

import threading

SMALL_PACKET_SIZE = 128
MEDIUM_PACKET_SIZE = 1500
LARGE_PACKET_SIZE = 9000

_DEFAULT_MAX_IDLE = 64


class BufferPool:
    """Hands out empty growable buffers and takes them back for reuse."""

    def __init__(self, max_idle: int = _DEFAULT_MAX_IDLE) -> None:
        self._idle: list[bytearray] = []
        self._max_idle = max_idle
        self._lock = threading.Lock()

    def get(self) -> bytearray:
        """An empty buffer, reused where one is idle."""
        with self._lock:
            buf = self._idle.pop() if self._idle else bytearray()
        buf.clear()
        return buf

    def put(self, buf: bytearray) -> None:
        with self._lock:
            if len(self._idle) < self._max_idle:
                self._idle.append(buf)


class BytesPool:
    """Hands out zeroed buffers of one fixed size."""

    def __init__(self, size: int, max_idle: int = _DEFAULT_MAX_IDLE) -> None:
        if size < 0:
            raise ValueError(f"pool size must not be negative, got {size}")
        self.size = size
        self._idle: list[bytearray] = []
        self._max_idle = max_idle
        self._lock = threading.Lock()

    def get(self) -> bytearray:
        """A buffer of ``size`` zero bytes."""
        with self._lock:
            buf = self._idle.pop() if self._idle else None
        if buf is None:
            return bytearray(self.size)
        buf[:] = bytes(self.size)
        return buf

    def put(self, buf: bytearray) -> None:
        """Take a buffer back; buffers smaller than the pool size are dropped."""
        if len(buf) < self.size:
            return
        del buf[self.size:]
        with self._lock:
            if len(self._idle) < self._max_idle:
                self._idle.append(buf)


_buffer_pool = BufferPool()
_small_pool = BytesPool(SMALL_PACKET_SIZE)
_medium_pool = BytesPool(MEDIUM_PACKET_SIZE)
_large_pool = BytesPool(LARGE_PACKET_SIZE)


def get_buffer() -> bytearray:
    return _buffer_pool.get()


def put_buffer(buf: bytearray) -> None:
    _buffer_pool.put(buf)


def get_small_bytes() -> bytearray:
    return _small_pool.get()


def put_small_bytes(buf: bytearray) -> None:
    _small_pool.put(buf)


def get_medium_bytes() -> bytearray:
    return _medium_pool.get()


def put_medium_bytes(buf: bytearray) -> None:
    _medium_pool.put(buf)


def get_large_bytes() -> bytearray:
    return _large_pool.get()


def put_large_bytes(buf: bytearray) -> None:
    _large_pool.put(buf)


def get_bytes(size: int) -> bytearray:
    """A zeroed buffer from the smallest pool whose size covers ``size``."""
    if size <= SMALL_PACKET_SIZE:
        return get_small_bytes()
    if size <= MEDIUM_PACKET_SIZE:
        return get_medium_bytes()
    return get_large_bytes()


def put_bytes(buf: bytearray) -> None:
    """Return a buffer to the pool matching its length; oversized ones are dropped."""
    length = len(buf)
    if length <= SMALL_PACKET_SIZE:
        put_small_bytes(buf)
    elif length <= MEDIUM_PACKET_SIZE:
        put_medium_bytes(buf)
    elif length <= LARGE_PACKET_SIZE:
        put_large_bytes(buf)