import pytest

from packemon.buffer_pool import (
    LARGE_PACKET_SIZE,
    MEDIUM_PACKET_SIZE,
    SMALL_PACKET_SIZE,
    BufferPool,
    BytesPool,
    get_buffer,
    get_bytes,
    get_large_bytes,
    get_medium_bytes,
    get_small_bytes,
    put_buffer,
    put_bytes,
    put_large_bytes,
    put_medium_bytes,
    put_small_bytes,
)


def test_buffer_pool():
    pool = BufferPool()
    buf = pool.get()
    assert len(buf) == 0

    buf += b"Hello, world!"
    assert bytes(buf) == b"Hello, world!"

    pool.put(buf)
    buf2 = pool.get()
    assert len(buf2) == 0


def test_buffer_pool_reuses_buffer():
    pool = BufferPool()
    buf = pool.get()
    buf += b"data"
    pool.put(buf)
    assert pool.get() is buf


def test_global_buffer_pool():
    buf = get_buffer()
    assert len(buf) == 0
    buf += b"Hello, global pool!"
    assert bytes(buf) == b"Hello, global pool!"
    put_buffer(buf)
    assert len(get_buffer()) == 0


def test_bytes_pool():
    pool = BytesPool(10)
    buf = pool.get()
    assert len(buf) == 10
    assert buf == bytearray(10)

    for i in range(len(buf)):
        buf[i] = i + 1
    pool.put(buf)

    buf2 = pool.get()
    assert buf2 is buf
    assert buf2 == bytearray(10)


def test_bytes_pool_drops_small_buffers():
    pool = BytesPool(10)
    small = bytearray(b"\x01" * 5)
    pool.put(small)
    got = pool.get()
    assert got is not small
    assert got == bytearray(10)


def test_bytes_pool_trims_larger_buffers():
    pool = BytesPool(10)
    bigger = bytearray(b"\x07" * 20)
    pool.put(bigger)
    got = pool.get()
    assert got is bigger
    assert got == bytearray(10)


def test_bytes_pool_negative_size_rejected():
    with pytest.raises(ValueError):
        BytesPool(-1)


def test_global_bytes_pools():
    small = get_small_bytes()
    assert len(small) == SMALL_PACKET_SIZE
    put_small_bytes(small)

    medium = get_medium_bytes()
    assert len(medium) == MEDIUM_PACKET_SIZE
    put_medium_bytes(medium)

    large = get_large_bytes()
    assert len(large) == LARGE_PACKET_SIZE
    put_large_bytes(large)


def test_get_bytes():
    assert len(get_bytes(100)) >= 100
    assert len(get_bytes(1000)) >= 1000
    assert len(get_bytes(5000)) >= 5000


@pytest.mark.parametrize(
    ("requested", "expected"),
    [
        (SMALL_PACKET_SIZE, SMALL_PACKET_SIZE),
        (SMALL_PACKET_SIZE + 1, MEDIUM_PACKET_SIZE),
        (MEDIUM_PACKET_SIZE, MEDIUM_PACKET_SIZE),
        (MEDIUM_PACKET_SIZE + 1, LARGE_PACKET_SIZE),
        (20000, LARGE_PACKET_SIZE),
    ],
)
def test_get_bytes_picks_pool(requested, expected):
    assert len(get_bytes(requested)) == expected


def test_put_bytes():
    put_bytes(bytearray(100))
    put_bytes(bytearray(1000))
    put_bytes(bytearray(5000))
    put_bytes(bytearray(10000))

    assert len(get_small_bytes()) == SMALL_PACKET_SIZE
    assert len(get_medium_bytes()) == MEDIUM_PACKET_SIZE
    assert len(get_large_bytes()) == LARGE_PACKET_SIZE


def test_put_bytes_returns_full_buffer_for_reuse():
    buf = bytearray(b"\x09" * SMALL_PACKET_SIZE)
    put_bytes(buf)
    got = get_small_bytes()
    assert len(got) == SMALL_PACKET_SIZE
    assert got == bytearray(SMALL_PACKET_SIZE)


def test_repeated_use_stays_clean():
    pool = BytesPool(1500)
    for _ in range(1000):
        buf = pool.get()
        buf[0] = 1
        pool.put(buf)
    assert pool.get() == bytearray(1500)

    buffers = BufferPool()
    for _ in range(1000):
        buf = buffers.get()
        buf += b"Test data"
        buffers.put(buf)
    assert len(buffers.get()) == 0