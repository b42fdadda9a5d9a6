#perlin.py

import math
import numpy as np
import constants as C

def fade(t):
    """
    Quintic smoothstep 6t^5 - 15t^4 + 10t^3. Works on a float or a numpy array,
    so perlin_noise and perlin_noise_2d share it.
    """
    return t * t * t * (t * (t * 6 - 15) + 10)

def lerp(a, b, t):
    """Linear interpolation. t should already have gone through fade."""
    return a + t * (b - a)

def grad(hash, x, y):
    """
    Picks one of 4 gradients from the low 2 bits of hash and applies it to (x, y).

    Bit 1 clear uses x as the primary axis, set uses y. Bit 0 flips the primary
    term, bit 1 also flips the secondary term, which is weighted by 2.
    """
    h = hash & 3
    u = x if h < 2 else y
    v = y if h < 2 else x
    return (-u if h & 1 else u) + (-2.0 * v if h & 2 else 2.0 * v)

def gradient(h, x, y):
    """Array version of grad, element-wise over numpy arrays of hashes and offsets."""
    h = h & 3
    primary_is_x = h < 2
    u = np.where(primary_is_x, x, y)
    v = np.where(primary_is_x, y, x)
    return np.where(h & 1, -u, u) + np.where(h & 2, -2.0 * v, 2.0 * v)

def perlin_noise(x, y, p):
    """
    Sample 2D Perlin noise at a single point.

    Args:
        x, y: Real coordinates. Non-finite values give nan.
        p: The 512-entry permutation table.

    Returns:
        A float that is usually inside [0, 1]. The 4-direction gradient set can
        push it slightly outside, see C.PERLIN_LOOSE_MIN / C.PERLIN_LOOSE_MAX.
    """
    if not (math.isfinite(x) and math.isfinite(y)):
        return math.nan

    x_floor = math.floor(x)
    y_floor = math.floor(y)
    X = x_floor & C.LATTICE_MASK
    Y = y_floor & C.LATTICE_MASK

    x -= x_floor
    y -= y_floor

    u = fade(x)
    v = fade(y)

    aa = p[X] + Y
    ab = p[X] + Y + 1
    ba = p[X + 1] + Y
    bb = p[X + 1] + Y + 1

    g1 = grad(p[aa], x, y)
    g2 = grad(p[ba], x - 1, y)
    g3 = grad(p[ab], x, y - 1)
    g4 = grad(p[bb], x - 1, y - 1)

    result = lerp(lerp(g1, g2, u), lerp(g3, g4, u), v)
    return (result + 1) / 2.0

def perlin_noise_2d(p, x, y):
    """
    Vectorized perlin_noise over coordinate arrays.

    Args:
        p: The 512-entry permutation table.
        x, y: numpy arrays of the same shape. Each element gives exactly the
              value perlin_noise would return for it.
    """
    p = np.asarray(p)
    if p.shape != (C.PERMUTATION_TABLE_SIZE,):
        raise ValueError(f"Permutation table must have {C.PERMUTATION_TABLE_SIZE} entries, got shape {p.shape}")
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    if x.shape != y.shape:
        raise ValueError(f"Coordinate arrays differ in shape: {x.shape} vs {y.shape}")

    # Non-finite points are sampled at 0 and overwritten with nan at the end.
    finite = np.isfinite(x) & np.isfinite(y)
    x = np.where(finite, x, 0.0)
    y = np.where(finite, y, 0.0)

    # Lattice coordinates, wrapped to the table. mod on the float floor is exact
    # and stays correct for magnitudes too large for int64.
    x_floor = np.floor(x)
    y_floor = np.floor(y)
    xi = np.mod(x_floor, C.PERMUTATION_SIZE).astype(np.int64)
    yi = np.mod(y_floor, C.PERMUTATION_SIZE).astype(np.int64)

    # Internal coordinates
    xf = x - x_floor
    yf = y - y_floor

    # Fade function
    u = fade(xf)
    v = fade(yf)

    aa = p[xi] + yi
    ab = p[xi] + yi + 1
    ba = p[xi + 1] + yi
    bb = p[xi + 1] + yi + 1

    # Gradients
    g1 = gradient(p[aa], xf, yf)
    g2 = gradient(p[ba], xf - 1, yf)
    g3 = gradient(p[ab], xf, yf - 1)
    g4 = gradient(p[bb], xf - 1, yf - 1)

    # Interpolation
    result = lerp(lerp(g1, g2, u), lerp(g3, g4, u), v)
    return np.where(finite, (result + 1) / 2.0, np.nan)
