# grid.py

import numpy as np
import logger as log

def create_grid(width, height, dtype=np.float64):
    """
    Allocates a zero-filled (height, width) buffer for a noise map.

    Returns None instead of raising when the dimensions are not positive or the
    allocation fails, so callers can report the failure and stop cleanly.
    """
    if width <= 0 or height <= 0:
        log.log(f"Grid request rejected: invalid size {width}x{height}.")
        return None
    try:
        return np.zeros((height, width), dtype=dtype)
    except (MemoryError, ValueError) as e:
        # numpy raises ValueError when the byte size does not fit in an index.
        log.log(f"ERROR: Could not allocate a {width}x{height} grid of {np.dtype(dtype).name}. Reason: {e}")
        return None
