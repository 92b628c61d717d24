"""
Engine constants.

Integers are signed 64-bit; the bounds come from numpy so the width is
declared in one place.
"""
import numpy as np

INT_DTYPE = np.int64
INT_MIN: int = int(np.iinfo(INT_DTYPE).min)
INT_MAX: int = int(np.iinfo(INT_DTYPE).max)

INITIAL_DISPLAY = "0"
ERROR_TEXT = "Error"

LOGGER_NAMESPACE = "calculator"
