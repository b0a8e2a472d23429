"""
geoweights.py

Parsers for the location strings found in CMIE CapEx project data.

A record carries one or more coordinates in the form
``lat1,long1 : lat2,long2 : ...`` together with a single cost. The helpers
here turn such records into (longitude, latitude) points and spread each
record's cost evenly over the points it produced.

Public functions:
- `latlong_string_to_points(text)` -> list[Point]
- `points_weights(latlong_strings, costs)` -> WeightedPointSet

Truncated entries (wrong token count, empty tokens) are common in the source
data and are skipped. A numeric token that does not parse is treated as
corrupt data and raises `ParseError`.
"""
from typing import List, NamedTuple, Sequence, Tuple
import logging
import re

import numpy as np

from karmana_utils.config import CAPEX_FORMAT
from karmana_utils.errors import ParseError, PreconditionError

logger = logging.getLogger(__name__)

# ASCII decimal or exponent literal; nan and inf(inity) are accepted like any float reader
_NUMBER = re.compile(r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|nan|inf(?:inity)?)", re.IGNORECASE)


class Point(NamedTuple):
    """A geographic point stored as (x=longitude, y=latitude)."""

    x: float
    y: float


class WeightedPointSet(NamedTuple):
    """Parallel lists of points and their weights."""

    points: List[Point]
    weights: List[float]

    def as_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """Return ``(xy, weights)`` as numpy arrays of shape (N, 2) and (N,)."""
        xy = np.asarray(self.points, dtype=float).reshape(-1, 2)
        return xy, np.asarray(self.weights, dtype=float)


def _parse_coordinate(token: str, entry: str) -> float:
    # float() alone would also take "1_0" and non-ASCII digits
    if _NUMBER.fullmatch(token) is None:
        raise ParseError(f"invalid coordinate {token!r} in entry {entry!r}")
    return float(token)


def latlong_string_to_points(text: str) -> List[Point]:
    """Parse ``lat1,long1 : lat2,long2 : ...`` into a list of points.

    Points are returned as ``Point(x=longitude, y=latitude)``, i.e. the two
    tokens of each entry are swapped. Entries that do not hold exactly two
    non-empty tokens are skipped.

    Raises `ParseError` if a well-formed entry holds a non-numeric token.
    """
    points: List[Point] = []

    for entry in text.split(CAPEX_FORMAT['entry_sep']):
        tokens = [t.strip() for t in entry.split(CAPEX_FORMAT['coord_sep'])]
        if len(tokens) != 2 or not all(tokens):
            logger.debug('skipping malformed lat/long entry %r', entry)
            continue
        lat = _parse_coordinate(tokens[0], entry)
        lon = _parse_coordinate(tokens[1], entry)
        points.append(Point(lon, lat))

    return points


def points_weights(latlong_strings: Sequence[str], costs: Sequence[float]) -> WeightedPointSet:
    """Parse location strings and distribute each record's cost over its points.

    Args:
        latlong_strings: location strings, one per record.
        costs: one cost per record, same length as `latlong_strings`.

    Returns:
        `WeightedPointSet` whose weights are ``cost`` for single-point records
        and ``cost / n`` for each point of an n-point record. Records with no
        valid points contribute nothing. Costs are not sign-checked.

    Raises:
        PreconditionError: if the two inputs differ in length.
        ParseError: propagated from `latlong_string_to_points`.
    """
    if len(latlong_strings) != len(costs):
        raise PreconditionError(
            f"latlong_strings and costs differ in length ({len(latlong_strings)} != {len(costs)})"
        )

    points: List[Point] = []
    weights: List[float] = []

    for latlong_string, cost in zip(latlong_strings, costs):
        parsed = latlong_string_to_points(latlong_string)
        n = len(parsed)
        if n == 1:
            points.append(parsed[0])
            weights.append(float(cost))
        elif n > 1:
            points.extend(parsed)
            weights.extend([cost / n] * n)

    return WeightedPointSet(points, weights)
