import numpy as np
import pytest

from postfix_eval import ScratchBufferPool


def test_small_sizes_reuse_the_same_buffer():
    pool = ScratchBufferPool()
    for size in range(4):
        first = pool.acquire(size)
        second = pool.acquire(size)
        assert first is second
        assert first.shape == (size,)
        assert first.dtype == np.float64


def test_large_sizes_get_fresh_buffers():
    pool = ScratchBufferPool(pool_size=4)
    first = pool.acquire(5)
    second = pool.acquire(5)
    assert first is not second
    assert first.shape == (5,)


def test_stats_track_hits_and_fallbacks():
    pool = ScratchBufferPool(pool_size=2)
    pool.acquire(0)
    pool.acquire(1)
    pool.acquire(2)
    stats = pool.get_stats()
    assert stats == {'pool_size': 2, 'pooled_hits': 2, 'fallback_allocations': 1}
    pool.clear_stats()
    assert pool.get_stats()['pooled_hits'] == 0


def test_empty_pool_always_allocates():
    pool = ScratchBufferPool(pool_size=0)
    assert pool.acquire(0).shape == (0,)
    assert pool.get_stats()['fallback_allocations'] == 1


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        ScratchBufferPool().acquire(-1)
    with pytest.raises(ValueError):
        ScratchBufferPool(pool_size=-1)
