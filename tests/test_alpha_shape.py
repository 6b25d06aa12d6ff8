# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

import logging
import math

import numpy as np
import pytest

from alpha_hull import compute_alpha_shape_polygons, get_alpha_shape_polygons
from alpha_hull.exceptions import FencingUndefinedError
from alpha_hull.geometry import (
    Edge,
    Point,
    compute_convex_hull,
    euclidean_distance,
    haversine_distance,
    polygon_area,
)
from alpha_hull.shape import (
    alpha_triangulation,
    as_points,
    boundary_edges,
    rank_polygons,
    stitch_polygons,
)

"""Tests for the alpha-shape pipeline.

The end-to-end tests use a fixed-seed cloud of 5000 points uniformly
distributed in a square of side 4, and the circular crown obtained by
keeping the points at a distance between 1 and sqrt(2) from (2, 2).
"""


def square_set(seed=2024, n=5000, side=4.0):
    return side * np.random.default_rng(seed).random((n, 2))


def circular_crown_set(seed=2024):
    points = square_set(seed)
    r = np.hypot(points[:, 0] - 2.0, points[:, 1] - 2.0)
    return points[(r > 1.0) & (r < math.sqrt(2.0))]


def square_loop(x0=0.0, y0=0.0, side=1.0):
    a, b = Point(x0, y0), Point(x0 + side, y0)
    c, d = Point(x0 + side, y0 + side), Point(x0, y0 + side)
    return [Edge(a, b), Edge(b, c), Edge(c, d), Edge(d, a)]


# ---------------------------------------------------------------------------
# Boundary extraction
# ---------------------------------------------------------------------------


def test_boundary_edges_cancel_shared_edge():
    a, b, c, d = Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)
    edges = boundary_edges([(a, b, c), (a, c, d)])
    assert set(edges) == {Edge(a, b), Edge(b, c), Edge(c, d), Edge(d, a)}


def test_boundary_edges_of_single_triangle():
    a, b, c = Point(0, 0), Point(1, 0), Point(0, 1)
    assert boundary_edges([(a, b, c)]) == [Edge(a, b), Edge(b, c), Edge(c, a)]


def test_boundary_edges_same_direction_is_logged_and_skipped(caplog):
    a, b, c = Point(0, 0), Point(1, 0), Point(0, 1)
    with caplog.at_level(logging.WARNING, logger='alpha_hull.shape.alpha_shape'):
        edges = boundary_edges([(a, b, c), (a, b, c)])
    assert len(edges) == 3
    assert "same direction" in caplog.text


# ---------------------------------------------------------------------------
# Polygon stitching
# ---------------------------------------------------------------------------


def test_stitch_single_loop_closes_polygon():
    polygons = stitch_polygons(square_loop())
    assert len(polygons) == 1
    polygon = polygons[0]
    assert len(polygon) == 5
    assert polygon[0] == polygon[-1]
    assert set(polygon) == {Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)}
    assert polygon_area(polygon) == 1.0


def test_stitch_disjoint_loops():
    polygons = stitch_polygons(square_loop() + square_loop(5.0, 5.0, 2.0))
    assert len(polygons) == 2
    assert sorted(polygon_area(p) for p in polygons) == [1.0, 4.0]


def test_stitch_open_chain_yields_no_polygon():
    a, b, c = Point(0, 0), Point(1, 0), Point(2, 0)
    assert stitch_polygons([Edge(a, b), Edge(b, c)]) == []


def test_stitch_no_edges():
    assert stitch_polygons([]) == []


def test_rank_polygons_descending_area():
    small = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 0)]
    large = [Point(0, 0), Point(3, 0), Point(3, 3), Point(0, 3), Point(0, 0)]
    assert rank_polygons([small, large]) == [large, small]


# ---------------------------------------------------------------------------
# Triangulation and fence
# ---------------------------------------------------------------------------


def test_alpha_triangulation_raises_without_triangles():
    with pytest.raises(FencingUndefinedError):
        alpha_triangulation([(0, 0), (1, 1)])


def test_alpha_triangulation_keeps_regular_triangles():
    triangles = alpha_triangulation([(0, 0), (1, 0), (1, 1), (0, 1)])
    assert len(triangles) == 2


def test_alpha_triangulation_rejects_long_edges():
    # a far point only forms triangles with long sides
    points = square_set(seed=5, n=400, side=1.0).tolist() + [(10.0, 10.0)]
    triangles = alpha_triangulation(points)
    assert triangles
    assert all(Point(10.0, 10.0) not in t for t in triangles)


# ---------------------------------------------------------------------------
# End-to-end
# ---------------------------------------------------------------------------


def test_square_set_largest_polygon_close_to_square():
    points = square_set()
    polygons = compute_alpha_shape_polygons(points, alpha=1.5, distance=euclidean_distance)
    assert polygons is not None
    assert len(polygons) >= 1
    largest = polygon_area(polygons[0])
    # the outer ring loses a thin margin to boundary triangles outside the fence
    assert abs(largest - 15.5) < 0.5

    _, hull = compute_convex_hull(points)
    assert largest <= hull.area + 1e-9


def test_circular_crown_outer_and_inner_boundaries():
    polygons = compute_alpha_shape_polygons(circular_crown_set(), alpha=1.5,
                                            distance=euclidean_distance)
    assert polygons is not None
    assert len(polygons) >= 2

    largest = polygon_area(polygons[0])
    second = polygon_area(polygons[1])
    assert math.pi < largest < 2 * math.pi
    assert math.pi < second < largest


def test_polygons_are_closed_points_sorted_by_area():
    polygons = compute_alpha_shape_polygons(square_set(seed=11, n=800))
    areas = [polygon_area(p) for p in polygons]
    assert areas == sorted(areas, reverse=True)
    for polygon in polygons:
        assert polygon[0] == polygon[-1]
        assert all(isinstance(v, Point) for v in polygon)


def test_rerun_gives_identical_areas():
    points = square_set(seed=9, n=1500)
    first = [polygon_area(p) for p in compute_alpha_shape_polygons(points)]
    second = [polygon_area(p) for p in compute_alpha_shape_polygons(points)]
    assert first == second


def test_haversine_metric_on_small_region():
    lon_lat = square_set(seed=4, n=2000, side=1.0)
    polygons = compute_alpha_shape_polygons(lon_lat, distance=haversine_distance)
    assert polygons
    assert abs(polygon_area(polygons[0]) - 1.0) < 0.2


def test_single_triangle_is_its_own_alpha_shape():
    polygons = compute_alpha_shape_polygons([(0, 0), (4, 0), (0, 3)])
    assert len(polygons) == 1
    assert len(polygons[0]) == 4
    assert np.isclose(polygon_area(polygons[0]), 6.0)


def test_failure_is_distinct_from_no_shape():
    # not enough points: fence undefined
    assert compute_alpha_shape_polygons([(0, 0), (1, 1)]) is None
    assert compute_alpha_shape_polygons([]) is None
    assert compute_alpha_shape_polygons([(0, 0), (1, 1), (2, 2)]) is None
    # zero-width fence rejects every triangle of the square: no shape found
    square = [(0, 0), (1, 0), (1, 1), (0, 1)]
    assert compute_alpha_shape_polygons(square, alpha=0.0) == []


def test_invalid_arguments_raise():
    with pytest.raises(ValueError):
        compute_alpha_shape_polygons([(0, 0), (1, 0), (0, 1)], alpha=-1.0)
    with pytest.raises(ValueError):
        compute_alpha_shape_polygons([(0, 0, 0), (1, 0, 0), (0, 1, 0)])


def test_non_finite_points_are_dropped(caplog):
    points = [(0.0, 0.0), (4.0, 0.0), (0.0, 3.0), (math.nan, 1.0)]
    with caplog.at_level(logging.WARNING, logger='alpha_hull.shape.alpha_shape'):
        assert as_points(points) == [Point(0, 0), Point(4, 0), Point(0, 3)]
    assert "non-finite" in caplog.text
    polygons = compute_alpha_shape_polygons(points)
    assert np.isclose(polygon_area(polygons[0]), 6.0)


def test_get_alpha_shape_polygons_is_an_alias():
    assert get_alpha_shape_polygons is compute_alpha_shape_polygons
