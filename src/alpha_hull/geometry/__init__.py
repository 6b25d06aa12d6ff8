# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Geometry module for points, metrics, triangulation and boundaries."""

from .primitives import (
    Point,
    Edge,
    Triangle,
    canonical_key,
    triangle_edges
)

from .metrics import (
    euclidean_distance,
    haversine_distance,
    signed_polygon_area,
    polygon_area
)

from .tessellation import (
    compute_delaunay,
    unique_points,
    triangulate
)

from .boundaries import (
    compute_convex_hull,
    polygon_to_shapely,
    polygons_to_shapely,
    get_boundary_points
)

__all__ = [
    # Primitives
    'Point',
    'Edge',
    'Triangle',
    'canonical_key',
    'triangle_edges',
    # Metrics
    'euclidean_distance',
    'haversine_distance',
    'signed_polygon_area',
    'polygon_area',
    # Tessellation
    'compute_delaunay',
    'unique_points',
    'triangulate',
    # Boundaries
    'compute_convex_hull',
    'polygon_to_shapely',
    'polygons_to_shapely',
    'get_boundary_points',
]
