"""Allocation-avoidance utilities for the evaluation loop."""

from .memory_pool import ScratchBufferPool
from .operand_stack import OperandStack

__all__ = ['ScratchBufferPool', 'OperandStack']
