"""Utility helpers for Karmana maps: CapEx point parsing, colormap files,
print postprocessing, grid layout and raster resampling."""

from karmana_utils.errors import (
    KarmanaError,
    PreconditionError,
    ParseError,
    ColormapFormatError,
    GhostscriptNotFoundError,
)
from karmana_utils.geoweights import Point, WeightedPointSet, latlong_string_to_points, points_weights
from karmana_utils.search import searchsortednearest
from karmana_utils.layout import compute_gridsize
from karmana_utils.cphs import get_hr_number, hr_numbers

__version__ = "0.1.0"

__all__ = [
    "KarmanaError",
    "PreconditionError",
    "ParseError",
    "ColormapFormatError",
    "GhostscriptNotFoundError",
    "Point",
    "WeightedPointSet",
    "latlong_string_to_points",
    "points_weights",
    "searchsortednearest",
    "compute_gridsize",
    "get_hr_number",
    "hr_numbers",
]
