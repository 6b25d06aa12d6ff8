# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Shape module for the alpha-shape (concave hull) pipeline."""

from .alpha_shape import (
    as_points,
    alpha_triangulation,
    boundary_edges,
    alpha_shape_edges,
    stitch_polygons,
    rank_polygons,
    compute_alpha_shape_polygons,
    get_alpha_shape_polygons
)

__all__ = [
    'as_points',
    'alpha_triangulation',
    'boundary_edges',
    'alpha_shape_edges',
    'stitch_polygons',
    'rank_polygons',
    'compute_alpha_shape_polygons',
    'get_alpha_shape_polygons',
]
