"""
rasters.py

Raster convenience helpers built on rasterio.

Public API:
- `Raster` : in-memory single-band grid (data, transform, crs, nodata)
- `resample_file(path, to_raster, crop_geom)` -> Raster

`resample_file` brings an arbitrary raster file onto the grid of a reference
raster: the file is cropped to a geometry first so only the needed window is
read and warped, then averaged onto the reference cells, and finally the
result is trimmed back to the file's own footprint.
"""
from dataclasses import dataclass
from typing import Any, Optional, Tuple
import logging

import numpy as np
import rasterio
from affine import Affine
from rasterio.errors import WindowError
from rasterio.mask import mask
from rasterio.transform import array_bounds
from rasterio.warp import reproject, transform_bounds
from rasterio.windows import Window, from_bounds
from rasterio.windows import transform as window_transform
from shapely.geometry import shape
from shapely.geometry.base import BaseGeometry

from karmana_utils.config import RASTER_DEFAULTS
from karmana_utils.errors import PreconditionError

logger = logging.getLogger(__name__)


@dataclass
class Raster:
    """Single-band raster held in memory."""

    data: np.ndarray
    transform: Affine
    crs: Any = None
    nodata: Optional[float] = None

    @property
    def shape(self) -> Tuple[int, int]:
        return self.data.shape

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """(left, bottom, right, top) in the raster's CRS."""
        height, width = self.shape
        west, south, east, north = array_bounds(height, width, self.transform)
        return west, south, east, north

    @classmethod
    def read(cls, path, band: int = 1) -> "Raster":
        """Read one band of `path` into memory."""
        with rasterio.open(path) as src:
            return cls(src.read(band), src.transform, src.crs, src.nodata)


def _grid_of(to_raster) -> Tuple[Affine, Any, Tuple[int, int]]:
    """Return (transform, crs, (height, width)) of a Raster or open dataset."""
    if isinstance(to_raster, Raster):
        return to_raster.transform, to_raster.crs, to_raster.shape
    return to_raster.transform, to_raster.crs, (to_raster.height, to_raster.width)


def _overlap_window(src_bounds, src_crs, dst_transform, dst_crs, dst_shape) -> Window:
    """Window of the reference grid covered by the source bounds."""
    if dst_crs is not None and src_crs is not None and dst_crs != src_crs:
        src_bounds = transform_bounds(src_crs, dst_crs, *src_bounds)

    dst_h, dst_w = dst_shape
    # snap to whole cells; from_bounds leaves float noise on aligned grids
    w = from_bounds(*src_bounds, transform=dst_transform)
    window = Window(round(w.col_off), round(w.row_off), round(w.width), round(w.height))
    try:
        return window.intersection(Window(0, 0, dst_w, dst_h))
    except WindowError as e:
        dst_bounds = array_bounds(dst_h, dst_w, dst_transform)
        raise PreconditionError(
            f"reference grid bounds {tuple(dst_bounds)} do not overlap raster bounds {tuple(src_bounds)}"
        ) from e


def resample_file(path, to_raster, crop_geom) -> Raster:
    """Crop `path` to `crop_geom`, average it onto `to_raster`'s grid and trim.

    Parameters:
    - path: raster file readable by rasterio.
    - to_raster: `Raster` or open rasterio dataset whose grid (transform,
      CRS, shape) defines the output cells.
    - crop_geom: shapely geometry or GeoJSON-like mapping in the file's CRS.

    Returns: float64 `Raster` with NaN nodata, covering the part of the
    reference grid that falls inside the file's original bounds.

    Raises `PreconditionError` if the reference grid does not overlap the file.
    """
    dst_transform, dst_crs, (dst_h, dst_w) = _grid_of(to_raster)
    nodata = RASTER_DEFAULTS['nodata']

    geom = crop_geom if isinstance(crop_geom, BaseGeometry) else shape(crop_geom)

    with rasterio.open(path) as src:
        src_crs = src.crs
        src_bounds = src.bounds
        window = _overlap_window(src_bounds, src_crs, dst_transform, dst_crs, (dst_h, dst_w))
        cropped, cropped_transform = mask(src, [geom], crop=True, filled=False, indexes=1)

    source = np.ma.filled(cropped.astype(RASTER_DEFAULTS['dtype']), nodata)
    logger.debug('cropped %s to %s cells', path, source.shape)

    destination = np.full((dst_h, dst_w), nodata, dtype=RASTER_DEFAULTS['dtype'])
    reproject(
        source=source,
        destination=destination,
        src_transform=cropped_transform,
        src_crs=src_crs,
        src_nodata=nodata,
        dst_transform=dst_transform,
        dst_crs=dst_crs if dst_crs is not None else src_crs,
        dst_nodata=nodata,
        resampling=RASTER_DEFAULTS['resampling'],
    )

    data = destination[window.toslices()]
    return Raster(data, window_transform(window, dst_transform), dst_crs, nodata)
