"""
pdf.py

Print postprocessing for exported figures.

Many printer drivers convert RGB to CMYK poorly; black areas in particular
pick up a green tint. Running the PDF through Ghostscript's pdfwrite device
with a CMYK colour conversion strategy before printing avoids most of that.

Converting RGB to CMYK is lossy, since CMYK covers a subset of RGB.
"""
from pathlib import Path
from typing import Optional
import logging
import shutil
import subprocess

from karmana_utils.config import GHOSTSCRIPT
from karmana_utils.errors import GhostscriptNotFoundError

logger = logging.getLogger(__name__)


def find_ghostscript() -> Optional[str]:
    """Return the path of the first Ghostscript executable on PATH, or None."""
    for name in GHOSTSCRIPT['executables']:
        path = shutil.which(name)
        if path is not None:
            return path
    return None


def rgb_to_cmyk_pdf(source_file, dest_file) -> Path:
    """Convert the colours of `source_file` from RGB to CMYK into `dest_file`.

    Ghostscript's own output is discarded. Returns `dest_file` as a Path.

    Raises:
        FileNotFoundError: `source_file` does not exist.
        GhostscriptNotFoundError: no Ghostscript executable on PATH.
        subprocess.CalledProcessError: Ghostscript exited with an error.
    """
    source = Path(source_file)
    dest = Path(dest_file)
    if not source.is_file():
        raise FileNotFoundError(f"PDF not found: {source}")

    gs = find_ghostscript()
    if gs is None:
        raise GhostscriptNotFoundError(
            f"Ghostscript not found on PATH (tried {', '.join(GHOSTSCRIPT['executables'])})"
        )

    args = [gs, *GHOSTSCRIPT['cmyk_args'], f'-sOutputFile={dest}', str(source)]
    logger.debug('running %s', ' '.join(args))
    try:
        subprocess.run(args, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL, check=True)
    except subprocess.CalledProcessError as e:
        logger.error('Ghostscript CMYK conversion of %s exited with status %d: %s',
                     source, e.returncode, ' '.join(args))
        raise
    return dest
