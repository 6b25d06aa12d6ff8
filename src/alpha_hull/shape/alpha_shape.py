# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Alpha-shape (concave hull) polygons of a planar point set.

The concave hull is obtained from a special triangulation of the points:
Delaunay triangles whose three side lengths all lie inside the Tukey fence
of every side length are kept (alpha triangles). The boundary edges of the
kept region induce a graph, and each closed boundary loop of that graph is
recovered by removing one of its edges and walking the shortest path
between the edge's endpoints through what remains.

References
----------
.. [1] D. Kalinina et al., "Computing concave hull with closed curve
   smoothing: performance, concaveness measure and applications",
   https://doi.org/10.1016/j.procs.2018.08.258
.. [2] Tukey's fences, https://en.wikipedia.org/wiki/Outlier#Tukey's_fences
"""

import logging
import math
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np

from ..exceptions import FencingUndefinedError
from ..geometry.metrics import euclidean_distance, polygon_area
from ..geometry.primitives import Edge, Point, Triangle, triangle_edges
from ..geometry.tessellation import triangulate
from ..graph.undirected import EdgeStatus, Graph
from ..statistics.fences import tukey_fence
from ..utils.helpers import DEFAULT_ALPHA


logger = logging.getLogger(__name__)

DistanceFunction = Callable[[Point, Point], float]
Polygon = List[Point]


def as_points(coordinates) -> List[Point]:
    """
    Validate input coordinates and convert them to Points.

    Rows with non-finite coordinates are dropped with a warning.

    :param coordinates: Sequence of (x, y) pairs or an (N, 2) array.
    :return: List of Points in input order.
    :rtype: List[Point]
    :raises ValueError: If the input is not a collection of pairs.
    """
    xy = np.asarray(coordinates, dtype=float)
    if xy.size == 0:
        return []
    if xy.ndim != 2 or xy.shape[1] != 2:
        raise ValueError(f"Expected a sequence of (x, y) pairs, got shape {xy.shape}")

    finite = np.all(np.isfinite(xy), axis=1)
    if not np.all(finite):
        logger.warning("Dropping %d point(s) with non-finite coordinates",
                       int(np.count_nonzero(~finite)))
        xy = xy[finite]

    return [Point(float(x), float(y)) for x, y in xy]


def _check_alpha(alpha: float) -> None:
    if not math.isfinite(alpha) or alpha < 0:
        raise ValueError(f"alpha must be finite and non-negative, got {alpha}")


def alpha_triangulation(coordinates,
                        alpha: float = DEFAULT_ALPHA,
                        distance: DistanceFunction = euclidean_distance) -> List[Triangle]:
    """
    Delaunay triangles whose side lengths all lie inside the alpha fence.

    The Tukey fence ``(q25 - alpha * IQR, q75 + alpha * IQR)`` is computed
    over the side lengths of every Delaunay triangle, each measured with
    ``distance``. A triangle is kept when all three sides are strictly
    inside the fence.

    :param coordinates: Sequence of (x, y) pairs.
    :param alpha: Width of the fence in IQR units (default 1.5).
    :type alpha: float
    :param distance: Distance function of two points.
    :type distance: Callable[[Point, Point], float]
    :return: List of alpha triangles, counter-clockwise.
    :rtype: List[Triangle]
    :raises FencingUndefinedError: If the triangulation provides fewer than
                                   two side lengths.
    """
    _check_alpha(alpha)
    triangles = triangulate(as_points(coordinates))

    sides = []
    for p1, p2, p3 in triangles:
        sides.append((distance(p1, p2), distance(p2, p3), distance(p3, p1)))

    lengths = [length for triple in sides for length in triple]
    if len(lengths) < 2:
        raise FencingUndefinedError(
            f"Cannot compute the alpha fence from {len(triangles)} triangle(s)"
        )
    fence = tukey_fence(lengths, alpha)
    logger.debug("Alpha fence for alpha=%s: (%.6g, %.6g) over %d sides",
                 alpha, fence.lower, fence.upper, len(lengths))

    return [t for t, s in zip(triangles, sides) if fence.admits(s)]


def boundary_edges(triangles: Sequence[Triangle]) -> List[Edge]:
    """
    Boundary edges of a set of consistently oriented triangles.

    An edge shared by two triangles with the same orientation is walked
    once in each direction, so whenever the reverse of an edge has already
    been saved both are discarded. The edges left are the ones that belong
    to a single triangle.

    :param triangles: Triangles, all with the same orientation.
    :type triangles: Sequence[Triangle]
    :return: Boundary edges, in the orientation of their triangle.
    :rtype: List[Edge]
    """
    # dict as an insertion-ordered set
    saved: Dict[Edge, None] = {}

    for triangle in triangles:
        for edge in triangle_edges(triangle):
            reverse = edge.reversed()
            if reverse in saved:
                del saved[reverse]
            elif edge in saved:
                logger.warning("Edge %r walked twice in the same direction; "
                               "triangles are not consistently oriented", edge)
            else:
                saved[edge] = None

    return list(saved)


def alpha_shape_edges(coordinates,
                      alpha: float = DEFAULT_ALPHA,
                      distance: DistanceFunction = euclidean_distance) -> List[Edge]:
    """
    Boundary edges of the alpha triangulation of the given coordinates.

    :param coordinates: Sequence of (x, y) pairs.
    :param alpha: Width of the fence in IQR units (default 1.5).
    :type alpha: float
    :param distance: Distance function of two points.
    :type distance: Callable[[Point, Point], float]
    :return: List of boundary edges.
    :rtype: List[Edge]
    :raises FencingUndefinedError: If the fence cannot be computed.
    """
    return boundary_edges(alpha_triangulation(coordinates, alpha, distance))


def stitch_polygons(edges: Sequence[Edge],
                    distance: DistanceFunction = euclidean_distance) -> List[Polygon]:
    """
    Assemble closed polygons from boundary edges.

    While unexplored nodes remain: take one, remove an edge to one of its
    neighbors, and find the shortest path back between the two endpoints.
    Closing that path with its first node gives a polygon, and every node
    on it is marked as explored. A pivot whose path cannot be found yields
    no polygon.

    :param edges: Boundary edges.
    :type edges: Sequence[Edge]
    :param distance: Distance function used to weigh the edges.
    :type distance: Callable[[Point, Point], float]
    :return: Closed polygons (last vertex equals the first), unordered.
    :rtype: List[Polygon]
    """
    graph = Graph(edges, weight_function=distance)

    # dict as an insertion-ordered set, so reruns pick the same pivots
    to_explore = dict.fromkeys(graph.nodes)
    polygons = []

    while to_explore:
        source = next(iter(to_explore))
        del to_explore[source]

        neighbors = graph[source]
        if not neighbors:
            continue
        target = min(neighbors)

        if graph.remove_edge(source, target) is not EdgeStatus.SUCCESS:
            continue

        result = graph.shortest_path(source, target)
        if not result.found:
            logger.debug("Pivot %s yields no polygon: %s", source, result.status.description)
            continue

        polygon = result.path + [source]
        for vertex in result.path:
            to_explore.pop(vertex, None)
        polygons.append(polygon)

    return polygons


def rank_polygons(polygons: Sequence[Polygon]) -> List[Polygon]:
    """
    Sort polygons by area, largest first.

    :param polygons: Polygons to sort.
    :type polygons: Sequence[Polygon]
    :return: New list in descending order of area.
    :rtype: List[Polygon]
    """
    return sorted(polygons, key=polygon_area, reverse=True)


def compute_alpha_shape_polygons(coordinates,
                                 alpha: float = DEFAULT_ALPHA,
                                 distance: DistanceFunction = euclidean_distance) -> Optional[List[Polygon]]:
    """
    Compute alpha-shape polygons (concave hull) from point coordinates.

    Larger alpha admits longer triangle sides and tends to the convex hull;
    smaller alpha gives tighter, more concave outlines and possibly several
    disjoint shapes and holes.

    :param coordinates: Sequence of (x, y) pairs or an (N, 2) array. For the
                        Haversine metric, x is longitude and y latitude.
    :param alpha: Width of the Tukey fence in IQR units (default 1.5).
    :type alpha: float
    :param distance: Distance function of two points (default Euclidean).
    :type distance: Callable[[Point, Point], float]
    :return: Closed polygons in descending order of area, each a list of
             Points (``(x, y)`` tuples); an empty list when no shape is found;
             None when the fence could not be computed.
    :rtype: Optional[List[List[Point]]]
    :raises ValueError: If the coordinates are malformed or alpha is invalid.
    """
    try:
        edges = alpha_shape_edges(coordinates, alpha, distance)
    except FencingUndefinedError as exc:
        logger.warning("Alpha shape not computed: %s", exc)
        return None

    polygons = rank_polygons(stitch_polygons(edges, distance))
    logger.info("Found %d alpha shape polygon(s) from %d boundary edges",
                len(polygons), len(edges))
    return polygons


get_alpha_shape_polygons = compute_alpha_shape_polygons
