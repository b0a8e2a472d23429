"""
colormaps.py

Save and recover colormaps as CSV so a hand-tuned palette can be reused
across sessions and shared with other plotting tools.

File layout (one row per colour stop, components in [0, 1]):

    Value,Red,Green,Blue,Alpha
    0.0,0.267004,0.004874,0.329415,1.0
    ...
"""
from typing import Optional, Sequence
import logging

import numpy as np
import pandas as pd
from matplotlib.colors import Colormap, LinearSegmentedColormap

from karmana_utils.config import COLORMAP_CSV_HEADER
from karmana_utils.errors import ColormapFormatError

logger = logging.getLogger(__name__)


def cmap_to_csv(csvfile, cmap: Colormap, values: Optional[Sequence[float]] = None) -> None:
    """Write the colour stops of `cmap` to `csvfile`.

    Parameters:
    - csvfile: path or writable buffer.
    - cmap: any matplotlib Colormap.
    - values: stop positions in [0, 1]. Defaults to ``cmap.N`` evenly spaced
      positions, which reproduces a ListedColormap exactly.
    """
    if values is None:
        values = np.linspace(0.0, 1.0, cmap.N)
    values = np.asarray(values, dtype=float)
    rgba = np.asarray(cmap(values), dtype=float).reshape(-1, 4)

    frame = pd.DataFrame(np.column_stack([values, rgba]), columns=list(COLORMAP_CSV_HEADER))
    frame.to_csv(csvfile, index=False)
    logger.debug('wrote %d colour stops of %s', len(frame), cmap.name)


def csv_to_cmap(csvfile, name: str = 'from_csv') -> LinearSegmentedColormap:
    """Read a CSV written by `cmap_to_csv` back into a colormap.

    Stop positions outside [0, 1] are rescaled linearly onto [0, 1].
    Raises `ColormapFormatError` if any of the expected columns is missing.
    """
    frame = pd.read_csv(csvfile)
    missing = [c for c in COLORMAP_CSV_HEADER if c not in frame.columns]
    if missing:
        raise ColormapFormatError(f"colormap CSV missing columns: {', '.join(missing)}")

    frame = frame.sort_values('Value', kind='stable')
    values = frame['Value'].to_numpy(dtype=float)
    colors = frame[['Red', 'Green', 'Blue', 'Alpha']].to_numpy(dtype=float)

    if len(frame) == 0:
        raise ColormapFormatError("colormap CSV holds no colour stops")
    if len(frame) == 1:
        return LinearSegmentedColormap.from_list(name, [colors[0], colors[0]])

    span = values[-1] - values[0]
    if span <= 0:
        logger.debug('%s: all colour stops share one position, spacing them evenly', name)
        return LinearSegmentedColormap.from_list(name, colors, N=max(256, len(colors)))
    if values[0] != 0.0 or values[-1] != 1.0:
        values = (values - values[0]) / span

    stops = list(zip(values, colors))
    return LinearSegmentedColormap.from_list(name, stops, N=max(256, len(stops)))
