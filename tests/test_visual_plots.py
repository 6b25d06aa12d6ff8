# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from alpha_hull import compute_alpha_shape_polygons
from alpha_hull.visualization import plot_alpha_shape

"""Non-interactive plotting tests (Agg backend): figures are drawn and
saved, and the drawn lines are checked rather than inspected by eye.
"""


def ring_points():
    rng = np.random.default_rng(12)
    points = 4 * rng.random((3000, 2))
    r = np.hypot(points[:, 0] - 2.0, points[:, 1] - 2.0)
    return points[(r > 1.0) & (r < np.sqrt(2.0))]


def test_plot_alpha_shape_draws_every_polygon():
    points = ring_points()
    polygons = compute_alpha_shape_polygons(points)

    fig, ax = plt.subplots()
    returned = plot_alpha_shape(points, polygons, ax=ax)
    assert returned is ax
    assert len(ax.lines) == len(polygons)
    # largest polygon drawn thicker than the rest
    assert ax.lines[0].get_linewidth() == 3.0
    assert all(line.get_linewidth() == 1.5 for line in ax.lines[1:])
    plt.close(fig)


def test_plot_alpha_shape_saves_figure(tmp_path):
    points = ring_points()
    polygons = compute_alpha_shape_polygons(points)
    output_path = tmp_path / "plots" / "ring.png"
    plot_alpha_shape(points, polygons, output_path=str(output_path), dpi=50)
    assert output_path.exists()
    assert output_path.stat().st_size > 0


def test_plot_alpha_shape_without_polygons():
    fig, ax = plt.subplots()
    plot_alpha_shape([(0, 0), (1, 1)], [], ax=ax)
    assert len(ax.lines) == 0
    plt.close(fig)
