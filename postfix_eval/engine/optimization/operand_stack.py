import numpy as np


class OperandStack:
  """Resizable float64 stack. reset() only rewinds the count."""

  __slots__ = ('_data', '_count')

  def __init__(self, initial_capacity: int = 5):
    if initial_capacity <= 0:
      raise ValueError("Stack's capacity must be positive")
    self._data = np.empty(initial_capacity, dtype=np.float64)
    self._count = 0

  def push(self, value: float):
    if self._count == self._data.shape[0]:
      grown = np.empty(self._data.shape[0] * 2, dtype=np.float64)
      grown[:self._count] = self._data
      self._data = grown
    self._data[self._count] = value
    self._count += 1

  def peek(self) -> float:
    if self._count <= 0:
      raise IndexError("peek from empty operand stack")
    return self._data[self._count - 1]

  def pop(self) -> float:
    if self._count <= 0:
      raise IndexError("pop from empty operand stack")
    self._count -= 1
    return self._data[self._count]

  def is_empty(self) -> bool:
    return self._count == 0

  def size(self) -> int:
    return self._count

  def reset(self):
    self._count = 0

  @property
  def capacity(self) -> int:
    return self._data.shape[0]

  def __len__(self) -> int:
    return self._count
