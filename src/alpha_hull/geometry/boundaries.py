# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Convex hull and Shapely conversion utilities.

Alpha-shape polygons are plain lists of points; these helpers turn them
into Shapely geometries for rendering, serialization or spatial queries,
and provide the convex hull the alpha shape tends to as alpha grows.
"""

from typing import List, Sequence, Tuple

import numpy as np
from scipy.spatial import ConvexHull
from shapely.geometry import MultiPolygon, Polygon

from .primitives import Point


def compute_convex_hull(points) -> Tuple[ConvexHull, Polygon]:
    """
    Compute convex hull from point coordinates.

    :param points: (N, 2) array or sequence of (x, y) pairs.
    :return: Tuple of (ConvexHull object, Shapely Polygon).
    :rtype: Tuple[ConvexHull, Polygon]
    """
    points = np.asarray(points, dtype=float)
    hull = ConvexHull(points)
    hull_polygon = Polygon(points[hull.vertices])
    return hull, hull_polygon


def polygon_to_shapely(polygon: Sequence) -> Polygon:
    """
    Convert an alpha-shape polygon to a Shapely Polygon.

    :param polygon: Closed or open sequence of (x, y) vertices.
    :type polygon: Sequence
    :return: Shapely Polygon (possibly invalid for self-touching rings).
    :rtype: Polygon
    """
    return Polygon([(float(x), float(y)) for x, y in polygon])


def polygons_to_shapely(polygons: Sequence[Sequence]) -> MultiPolygon:
    """
    Convert a list of alpha-shape polygons to a Shapely MultiPolygon.

    Polygons with fewer than three distinct vertices are skipped.

    :param polygons: List of vertex sequences.
    :type polygons: Sequence[Sequence]
    :return: MultiPolygon with one member per usable polygon, in input order.
    :rtype: MultiPolygon
    """
    members = [polygon_to_shapely(p) for p in polygons if len(set(map(tuple, p))) >= 3]
    return MultiPolygon(members)


def get_boundary_points(polygon: Polygon) -> List[Point]:
    """
    Extract exterior boundary points from a Shapely polygon.

    :param polygon: Shapely Polygon object.
    :type polygon: Polygon
    :return: Closed list of boundary Points.
    :rtype: List[Point]
    """
    return [Point(float(x), float(y)) for x, y in polygon.exterior.coords]
