"""Engine configuration shared by every Expression instance."""
from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Tunable sizes for the evaluation engine"""
    scratch_pool_size: int = 4          # buffers of length 0..N-1 are pooled
    initial_stack_capacity: int = 5
    check_variables_on_validate: bool = True

    def __post_init__(self):
        """Validate fields after initialization"""
        if not isinstance(self.scratch_pool_size, int) or isinstance(self.scratch_pool_size, bool):
            raise TypeError("scratch_pool_size must be an integer")
        if self.scratch_pool_size < 0:
            raise ValueError("scratch_pool_size must be a non-negative integer")
        if not isinstance(self.initial_stack_capacity, int) or isinstance(self.initial_stack_capacity, bool):
            raise TypeError("initial_stack_capacity must be an integer")
        if self.initial_stack_capacity <= 0:
            raise ValueError("initial_stack_capacity must be a positive integer")
        if not isinstance(self.check_variables_on_validate, bool):
            raise TypeError("check_variables_on_validate must be a boolean")


DEFAULT_CONFIG = EngineConfig()
