import numpy as np
from typing import Dict

GOLDEN_RATIO = (1.0 + np.sqrt(5.0)) / 2.0

_BUILTIN_CONSTANTS: Dict[str, float] = {
  'pi': float(np.pi),
  'π': float(np.pi),
  'e': float(np.e),
  'φ': float(GOLDEN_RATIO),
}


def get_builtin_constants() -> Dict[str, float]:
  """Fresh copy of the constants pre-bound into every new Expression"""
  return dict(_BUILTIN_CONSTANTS)
