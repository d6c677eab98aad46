from typing import List
import numpy as np

from ...logging_system import is_debug_enabled, log_debug


class ScratchBufferPool:
  """Per-size argument buffers reused across evaluations.

  acquire(n) hands out the same backing array for every call with the same
  small n. The caller must read the buffer before acquiring that size again.
  Sizes outside the pool get a fresh array.
  """

  __slots__ = ('_buffers', 'pooled_hits', 'fallback_allocations')

  def __init__(self, pool_size: int = 4):
    if pool_size < 0:
      raise ValueError("pool_size must be a non-negative integer")
    self._buffers: List[np.ndarray] = [np.zeros(i, dtype=np.float64) for i in range(pool_size)]
    self.pooled_hits = 0
    self.fallback_allocations = 0

  @property
  def pool_size(self) -> int:
    return len(self._buffers)

  def acquire(self, size: int) -> np.ndarray:
    if size < 0:
      raise ValueError(f"Cannot acquire a buffer of negative size {size}")
    if size < len(self._buffers):
      self.pooled_hits += 1
      return self._buffers[size]
    self.fallback_allocations += 1
    if is_debug_enabled():
      log_debug(f"Scratch pool miss: allocating buffer of size {size}")
    return np.empty(size, dtype=np.float64)

  def get_stats(self) -> dict:
    """Get pool statistics"""
    return {
      'pool_size': len(self._buffers),
      'pooled_hits': self.pooled_hits,
      'fallback_allocations': self.fallback_allocations
    }

  def clear_stats(self):
    self.pooled_hits = 0
    self.fallback_allocations = 0
