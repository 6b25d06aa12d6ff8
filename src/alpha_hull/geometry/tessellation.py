# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Delaunay triangulation adapter.

This module wraps scipy's Delaunay triangulation and returns geometric
triangles over the input points, all oriented counter-clockwise.
"""

import logging
from typing import Iterable, List

import numpy as np
from scipy.spatial import Delaunay, QhullError

from .primitives import Point, Triangle


logger = logging.getLogger(__name__)


def compute_delaunay(x: np.ndarray, y: np.ndarray) -> Delaunay:
    """
    Compute Delaunay triangulation from x and y coordinates.

    :param x: X coordinates of points.
    :type x: np.ndarray
    :param y: Y coordinates of points.
    :type y: np.ndarray
    :return: Delaunay triangulation object.
    :rtype: Delaunay
    :raises QhullError: If the points are degenerate (e.g. collinear).
    """
    points = np.column_stack([x, y])
    return Delaunay(points)


def unique_points(points: Iterable) -> List[Point]:
    """
    Deduplicate points on their canonical key, keeping first occurrences.

    :param points: Iterable of (x, y) pairs.
    :type points: Iterable
    :return: List of distinct Points in input order.
    :rtype: List[Point]
    """
    seen = {}
    for p in points:
        point = Point.from_pair(p)
        seen.setdefault(point.key, point)
    return list(seen.values())


def triangulate(points: Iterable) -> List[Triangle]:
    """
    Delaunay triangles over a point set.

    Each triangle is returned with counter-clockwise vertex order, so an
    edge shared by two triangles is traversed once in each direction.
    Degenerate (zero-area) simplices are dropped.

    :param points: Iterable of (x, y) pairs.
    :type points: Iterable
    :return: List of triangles; empty for fewer than three distinct points
             or collinear input.
    :rtype: List[Triangle]
    """
    vertices = unique_points(points)
    if len(vertices) < 3:
        logger.debug("Triangulation skipped: %d distinct point(s)", len(vertices))
        return []

    xy = np.array(vertices, dtype=float)
    try:
        tri = compute_delaunay(xy[:, 0], xy[:, 1])
    except (QhullError, ValueError) as exc:
        logger.debug("Triangulation failed on degenerate input: %s", exc)
        return []

    T = xy[tri.simplices]  # (M, 3, 2)

    # z component of (B - A) x (C - A); positive for counter-clockwise
    cross = ((T[:, 1, 0] - T[:, 0, 0]) * (T[:, 2, 1] - T[:, 0, 1])
             - (T[:, 1, 1] - T[:, 0, 1]) * (T[:, 2, 0] - T[:, 0, 0]))

    triangles = []
    for (a, b, c), z in zip(tri.simplices, cross):
        if z > 0:
            triangles.append((vertices[a], vertices[b], vertices[c]))
        elif z < 0:
            triangles.append((vertices[a], vertices[c], vertices[b]))

    return triangles
