# warmbench/inputs.py
#
# Generators for benchmark input arrays in the four classic orders. Each
# returns a new int64 NumPy array; callers that mutate it per iteration
# should hand out copies.

from collections import namedtuple

import numpy as np


def ordered(n, rng=None):
    return np.arange(n, dtype=np.int64)


def reversed_order(n, rng=None):
    return np.arange(n - 1, -1, -1, dtype=np.int64)


def partially_ordered(n, rng=None):
    """First half random values below n // 2, second half equal to the index."""
    rng = rng if rng is not None else np.random.default_rng()
    half = n // 2
    arr = np.arange(n, dtype=np.int64)
    if half > 0:
        arr[:half] = rng.integers(0, half, size=half)
    return arr


def random_order(n, rng=None):
    rng = rng if rng is not None else np.random.default_rng()
    if n == 0:
        return np.empty(0, dtype=np.int64)
    return rng.integers(0, n, size=n, dtype=np.int64)


InputGenerator = namedtuple("InputGenerator", ["label", "make"])

GENERATORS = {
    "ordered": InputGenerator("Ordered", ordered),
    "reversed": InputGenerator("Reversed", reversed_order),
    "partial": InputGenerator("Partially Ordered", partially_ordered),
    "random": InputGenerator("Random Ordered", random_order),
}
