# warmbench/sorts.py
#
# The reference workload used by the sorting benchmarks. Insertion sort is
# linear on ordered input and quadratic on reversed input, which makes the
# effect of input order easy to see in the reported means.

import numpy as np


def insertion_sort(a, lo=0, hi=None):
    """
    Sorts a[lo:hi] in place. Stable. Returns None.

    Args:
        a: A mutable sequence (list or 1-d NumPy array).
        lo (int): First index of the range to sort.
        hi (int): One past the last index; defaults to len(a).
    """
    if hi is None:
        hi = len(a)
    for i in range(lo + 1, hi):
        j = i
        while j > lo and a[j] < a[j - 1]:
            a[j], a[j - 1] = a[j - 1], a[j]
            j -= 1


def is_sorted(a) -> bool:
    """Returns True when no element is smaller than its predecessor."""
    arr = np.asarray(a)
    return bool(np.all(arr[:-1] <= arr[1:]))
