# noise_maps.py

import numpy as np
import constants as C
import logger as log
from grid import create_grid
from permutation import build_permutation_table, make_rng
from perlin import perlin_noise_2d
from ui import print_static_map, print_perlin_map

def create_static_noise(width, height, rng=None, print_map=False):
    """
    Creates a (height, width) map of independent draws from [0, 255].

    There is no pattern or gradient to the values at all. Returns None if the
    map could not be allocated.
    """
    noise_map = create_grid(width, height, dtype=np.int64)
    if noise_map is None:
        log.log(C.ALLOCATION_ERROR_MESSAGE)
        return None

    if rng is None:
        rng = make_rng()
    try:
        noise_map[:] = rng.integers(0, C.STATIC_NOISE_LEVELS, size=noise_map.shape)
    except MemoryError as e:
        log.log(f"{C.ALLOCATION_ERROR_MESSAGE}: could not draw the {width}x{height} map. Reason: {e}")
        return None
    log.log(f"Static noise map filled ({width}x{height}).")

    if print_map:
        print_static_map(noise_map)
    return noise_map

def fill_perlin_noise(noise_map, p, frequency=C.PERLIN_SIZE):
    """
    Fills a caller-owned float buffer in place: cell (row, col) gets
    perlin_noise(col / frequency, row / frequency, p).

    Rows are sampled in bands of C.PERLIN_FILL_BAND_ROWS so the coordinate
    temporaries stay small for wide maps.
    """
    if frequency <= 0:
        raise ValueError(f"frequency must be positive, got {frequency}")
    if not np.issubdtype(noise_map.dtype, np.floating):
        raise ValueError(f"noise_map must hold floats, got dtype {noise_map.dtype}")
    height, width = noise_map.shape
    col_coords = np.arange(width)
    for start in range(0, height, C.PERLIN_FILL_BAND_ROWS):
        stop = min(start + C.PERLIN_FILL_BAND_ROWS, height)
        cols, rows = np.meshgrid(col_coords, np.arange(start, stop))
        noise_map[start:stop] = perlin_noise_2d(p, cols / frequency, rows / frequency)
    return noise_map

def create_perlin_noise(width, height, rng=None, print_map=False, frequency=C.PERLIN_SIZE):
    """
    Creates a (height, width) map of coherent Perlin noise.

    A fresh permutation table is shuffled from rng for every map, so two calls
    only match when they draw the same sequence. The map is allocated before
    the shuffle, so a failed allocation leaves rng untouched. Returns None if
    the map could not be allocated or filled.
    """
    if frequency <= 0:
        raise ValueError(f"frequency must be positive, got {frequency}")

    noise_map = create_grid(width, height, dtype=np.float64)
    if noise_map is None:
        log.log(C.ALLOCATION_ERROR_MESSAGE)
        return None

    p = build_permutation_table(rng)

    try:
        fill_perlin_noise(noise_map, p, frequency)
    except MemoryError as e:
        log.log(f"{C.ALLOCATION_ERROR_MESSAGE}: could not sample the {width}x{height} map. Reason: {e}")
        return None
    log.log(f"Perlin noise map filled ({width}x{height}, frequency {frequency}).")

    if print_map:
        print_perlin_map(noise_map)
    return noise_map
