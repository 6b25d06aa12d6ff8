# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Alpha Hull Package

Concave hulls (alpha shapes) of planar point sets. Given scattered
coordinates, returns one or more closed polygons, largest first, outlining
the outer and inner boundaries of the point cloud more tightly than the
convex hull.

Modules:
--------
- geometry: Points, edges, distance metrics, triangulation and boundaries
- statistics: Quantiles and Tukey fences
- graph: Weighted undirected graph with shortest paths
- shape: The alpha-shape pipeline
- io: Point file reading and GeoJSON export
- visualization: Plotting of alpha-shape outlines
- utils: Constants and helper functions

Example Usage:
--------------
    import alpha_hull as ah

    points = ah.io.load_points('stations.csv', x_column='lon', y_column='lat')
    polygons = ah.compute_alpha_shape_polygons(points, alpha=1.5,
                                               distance=ah.haversine_distance)
    if polygons is not None:
        ah.io.write_geojson(polygons, 'outline.geojson')
"""

__version__ = '0.1.0'
__author__ = 'Alpha Hull Team'

from . import utils
from . import geometry
from . import statistics
from . import graph
from . import shape
from . import io
from . import visualization

from .exceptions import AlphaHullError, FencingUndefinedError
from .geometry import Point, Edge, euclidean_distance, haversine_distance, polygon_area
from .shape import compute_alpha_shape_polygons, get_alpha_shape_polygons

__all__ = [
    'geometry',
    'statistics',
    'graph',
    'shape',
    'io',
    'visualization',
    'utils',
    'AlphaHullError',
    'FencingUndefinedError',
    'Point',
    'Edge',
    'euclidean_distance',
    'haversine_distance',
    'polygon_area',
    'compute_alpha_shape_polygons',
    'get_alpha_shape_polygons',
]
