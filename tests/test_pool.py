from blegatt.pool import BytePool


def test_get_returns_buffer_of_width():
    pool = BytePool(4096, 16)
    buf = pool.get()
    assert isinstance(buf, bytearray)
    assert len(buf) == 4096


def test_put_then_get_reuses_buffer():
    pool = BytePool(8, 2)
    buf = pool.get()
    pool.put(buf)
    assert pool.get() is buf


def test_depth_limits_kept_buffers():
    pool = BytePool(8, 2)
    a, b, c = bytearray(8), bytearray(8), bytearray(8)
    for buf in (a, b, c):
        pool.put(buf)
    assert pool.get() is a
    assert pool.get() is b
    third = pool.get()
    assert third is not c
    assert len(third) == 8


def test_closed_empty_pool_returns_none():
    pool = BytePool(8, 2)
    pool.close()
    assert pool.get() is None


def test_closed_pool_drains_then_returns_none():
    pool = BytePool(8, 2)
    buf = bytearray(8)
    pool.put(buf)
    pool.close()
    assert pool.get() is buf
    assert pool.get() is None


def test_put_after_close_is_dropped():
    pool = BytePool(8, 2)
    pool.close()
    pool.put(bytearray(8))
    assert pool.get() is None