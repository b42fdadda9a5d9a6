#permutation.py

import numpy as np
import constants as C
import logger as log

def make_rng(seed=None):
    """
    Creates the generator handle that table construction and static noise draw from.

    Args:
        seed: Any value accepted by numpy.random.default_rng. None pulls fresh
              entropy from the OS, so every run produces different maps.
    """
    if seed is not None:
        log.log(f"Random generator seeded with {seed}.")
    return np.random.default_rng(seed)

def build_permutation_table(rng=None):
    """
    Build the 512-entry lookup table used to hash lattice corners.

    The first half is a Fisher-Yates shuffle of 0..255 and the second half is
    an exact copy of it, so table[X + 1] + Y + 1 never needs a modulo.

    Args:
        rng: Object with an integers(low, high) method (high exclusive), such as
             a numpy Generator. Exactly 255 draws are taken from it.

    Returns:
        A read-only numpy array of 512 ints.
    """
    if rng is None:
        rng = make_rng()

    p = np.arange(C.PERMUTATION_SIZE, dtype=np.int64)
    for i in range(C.PERMUTATION_SIZE - 1, 0, -1):
        # j must include i itself or the shuffle is biased.
        j = int(rng.integers(0, i + 1))
        p[i], p[j] = p[j], p[i]

    table = np.concatenate([p, p])
    table.flags.writeable = False
    return table

def is_valid_permutation_table(table):
    """Checks the duplicate halves and that the base half is a bijection on 0..255."""
    table = np.asarray(table)
    if table.shape != (C.PERMUTATION_TABLE_SIZE,):
        return False
    base = table[:C.PERMUTATION_SIZE]
    if not np.array_equal(base, table[C.PERMUTATION_SIZE:]):
        return False
    return np.array_equal(np.sort(base), np.arange(C.PERMUTATION_SIZE))
