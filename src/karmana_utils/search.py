"""Nearest-neighbour lookup in sorted 1-D arrays."""
import numpy as np


def searchsortednearest(a, x) -> int:
    """Return the index of the element of sorted `a` nearest to `x`.

    `a` must be sorted ascending and its elements must support subtraction
    with `x`. Values outside the range of `a` map to the first or last index;
    when `x` lies exactly halfway between two elements the lower index wins.
    """
    a_arr = np.asarray(a)
    n = a_arr.shape[0] if a_arr.ndim else 0
    if n == 0:
        raise ValueError("searchsortednearest requires a non-empty array")

    idx = int(np.searchsorted(a_arr, x, side='left'))
    if idx == 0:
        return 0
    if idx == n:
        return n - 1
    if a_arr[idx] == x:
        return idx

    if abs(a_arr[idx] - x) < abs(a_arr[idx - 1] - x):
        return idx
    return idx - 1
