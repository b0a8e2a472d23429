"""Exception types raised by karmana_utils.

Every error derives from `KarmanaError` and also from the builtin the caller
would otherwise expect (`ValueError`, `FileNotFoundError`), so existing
``except ValueError`` handlers keep working.
"""


class KarmanaError(Exception):
    """Base class for errors raised by this package."""


class PreconditionError(KarmanaError, ValueError):
    """Arguments violate a function's calling contract (e.g. length mismatch)."""


class ParseError(KarmanaError, ValueError):
    """A literal in the source data could not be parsed."""


class ColormapFormatError(KarmanaError, ValueError):
    """A colormap CSV is missing required columns."""


class GhostscriptNotFoundError(KarmanaError, FileNotFoundError):
    """No Ghostscript executable was found on PATH."""
