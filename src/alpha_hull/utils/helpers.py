# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Package constants and small helper functions.

This module holds the defaults shared by the rest of the package, so that
every component reads them from one place.
"""

import os
from typing import Tuple


# Classical Tukey-fence multiplier
DEFAULT_ALPHA = 1.5

# Mean Earth radius used by the great-circle metric
EARTH_RADIUS_KM = 6371.0

# Decimal digits kept when points are used as mapping keys
CANONICAL_DIGITS = 9


def round_coordinate(value: float, digits: int = CANONICAL_DIGITS) -> float:
    """
    Round a coordinate for use in a canonical key.

    Adds ``0.0`` so that ``-0.0`` and ``0.0`` share the same key.

    :param value: Coordinate value.
    :type value: float
    :param digits: Number of decimal digits kept.
    :type digits: int
    :return: Rounded coordinate.
    :rtype: float
    """
    return round(float(value), digits) + 0.0


def ensure_dir_exists(path: str) -> None:
    """
    Ensure directory exists, create if necessary.

    :param path: Directory path.
    :type path: str
    """
    if path:
        os.makedirs(path, exist_ok=True)


def ensure_parent_dir(filepath: str) -> str:
    """
    Create the parent directory of a file path and return the path unchanged.

    :param filepath: Path of a file about to be written.
    :type filepath: str
    :return: The same file path.
    :rtype: str
    """
    ensure_dir_exists(os.path.dirname(filepath))
    return filepath


def bounding_box(xy) -> Tuple[float, float, float, float]:
    """
    Axis-aligned bounding box of a set of coordinates.

    :param xy: Iterable of (x, y) pairs.
    :return: Tuple of (min_x, min_y, max_x, max_y).
    :rtype: Tuple[float, float, float, float]
    :raises ValueError: If no coordinates are given.
    """
    xs = []
    ys = []
    for x, y in xy:
        xs.append(float(x))
        ys.append(float(y))
    if not xs:
        raise ValueError("Cannot compute the bounding box of an empty point set")
    return min(xs), min(ys), max(xs), max(ys)
