"""
layout.py

Grid sizing for multi-panel figures. The heuristic follows Plots.jl's
`compute_gridsize`: close to square unless one dimension is fixed.
"""
from typing import Tuple, Union
import math


def compute_gridsize(numplts: Union[int, Tuple[int, int]], landscape: bool = False,
                     nr: int = -1, nc: int = -1) -> Tuple[int, int]:
    """Return ``(rows, cols)`` large enough to hold `numplts` panels.

    Parameters:
    - numplts: number of panels, or an explicit ``(rows, cols)`` tuple which
      is returned unchanged.
    - landscape: if True the smaller dimension is the row count.
    - nr, nc: fix the number of rows or columns (values < 1 mean "free").
      When both are given, `nr` wins and `nc` is recomputed.
    """
    if isinstance(numplts, tuple):
        return numplts

    if nr < 1:
        if nc < 1:
            if numplts < 1:
                raise ValueError(f"numplts must be positive, got {numplts}")
            nr = round(math.sqrt(numplts))
            nc = math.ceil(numplts / nr)
        else:
            nr = math.ceil(numplts / nc)
    else:
        nc = math.ceil(numplts / nr)

    if landscape:
        return min(nr, nc), max(nr, nc)
    return max(nr, nc), min(nr, nc)
