# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Distance metrics and polygon area.

The distance functions are interchangeable strategies: every stage of the
alpha-shape pipeline receives one explicitly and measures triangle sides and
graph edge weights with it. All functions accept Points or plain (x, y) pairs.
"""

import math
from typing import Sequence

import numpy as np

from ..utils.helpers import EARTH_RADIUS_KM


def euclidean_distance(coord1, coord2) -> float:
    """
    Euclidean distance between two points.

    :param coord1: Source point (x, y).
    :param coord2: Target point (x, y).
    :return: Straight-line distance.
    :rtype: float
    """
    x1, y1 = coord1
    x2, y2 = coord2
    return math.hypot(x1 - x2, y1 - y2)


def haversine_distance(coord1, coord2) -> float:
    """
    Great-circle (Haversine) distance between two points in kilometers.

    The first coordinate of each point is the longitude and the second the
    latitude, both in decimal degrees.

    :param coord1: Source point (longitude, latitude).
    :param coord2: Target point (longitude, latitude).
    :return: Distance in kilometers.
    :rtype: float
    """
    longitude1, latitude1 = coord1
    longitude2, latitude2 = coord2

    phi_1 = math.radians(latitude1)
    phi_2 = math.radians(latitude2)
    delta_phi = phi_2 - phi_1
    delta_lambda = math.radians(longitude2 - longitude1)

    a = (math.sin(delta_phi / 2.0) ** 2
         + math.cos(phi_1) * math.cos(phi_2) * math.sin(delta_lambda / 2.0) ** 2)
    # rounding can push a marginally outside [0, 1] for antipodal points
    a = min(max(a, 0.0), 1.0)
    c = 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))

    return EARTH_RADIUS_KM * c


def signed_polygon_area(vertices: Sequence) -> float:
    """
    Signed area of a polygon using the Shoelace formula.

    The vertex list is treated cyclically, so the edge from the last vertex
    back to the first is always included. A repeated closing vertex adds a
    zero term. Counter-clockwise polygons have positive area, so the
    clockwise unit square ``[(0, 0), (0, 1), (1, 1), (1, 0)]`` gives -1.0.
    Use :func:`polygon_area` for the area reported and ranked by the
    alpha-shape pipeline.

    :param vertices: Sequence of (x, y) vertices.
    :type vertices: Sequence
    :return: Signed area, 0.0 for fewer than three vertices.
    :rtype: float
    """
    if len(vertices) < 3:
        return 0.0

    xy = np.asarray(vertices, dtype=float)
    x, y = xy[:, 0], xy[:, 1]
    return float(0.5 * (np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))


def polygon_area(vertices: Sequence) -> float:
    """
    Area of a polygon, the absolute value of :func:`signed_polygon_area`.

    :param vertices: Sequence of (x, y) vertices.
    :type vertices: Sequence
    :return: Non-negative area.
    :rtype: float
    """
    return abs(signed_polygon_area(vertices))
