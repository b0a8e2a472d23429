# -*- coding: utf-8 -*-

"""
config.py

Central constants for karmana_utils. Keeping the delimiters, file headers and
external-tool arguments in one place keeps the parsers, writers and the
Ghostscript wrapper consistent with each other.

Contents:
---------
1. CAPEX_FORMAT:
   - Delimiters of the CMIE CapEx location strings `lat1,long1 : lat2,long2`.

2. COLORMAP_CSV_HEADER:
   - Column names of a saved colormap, in file order.

3. GHOSTSCRIPT:
   - Executable names tried in order on PATH (Unix first, then Windows).
   - Arguments for an RGB -> CMYK pdfwrite pass.

4. RASTER_DEFAULTS:
   - Resampling method and nodata value used by `rasters.resample_file`.

Usage:
------
    from karmana_utils.config import CAPEX_FORMAT

    CAPEX_FORMAT['entry_sep']   # ':'
"""
import numpy as np
from rasterio.enums import Resampling

# ───────────────────────────────────────────────────────────────────────────────
# 1) CMIE CAPEX LOCATION STRINGS
# ───────────────────────────────────────────────────────────────────────────────
CAPEX_FORMAT = {
    'entry_sep': ':',       # separates `lat,long` entries
    'coord_sep': ',',       # separates latitude from longitude within an entry
}

# ───────────────────────────────────────────────────────────────────────────────
# 2) COLORMAP FILES
# ───────────────────────────────────────────────────────────────────────────────
COLORMAP_CSV_HEADER = ('Value', 'Red', 'Green', 'Blue', 'Alpha')

# ───────────────────────────────────────────────────────────────────────────────
# 3) GHOSTSCRIPT
# ───────────────────────────────────────────────────────────────────────────────
GHOSTSCRIPT = {
    'executables': ('gs', 'gswin64c', 'gswin32c'),
    'cmyk_args': (
        '-q',
        '-dSAFER',
        '-dBATCH',
        '-dNOPAUSE',
        '-sDEVICE=pdfwrite',
        '-sColorConversionStrategy=CMYK',
    ),
}

# ───────────────────────────────────────────────────────────────────────────────
# 4) RASTERS
# ───────────────────────────────────────────────────────────────────────────────
RASTER_DEFAULTS = {
    'resampling': Resampling.average,
    'nodata': np.nan,
    'dtype': 'float64',
}
