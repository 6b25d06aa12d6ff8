# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Plotting of alpha-shape outlines.

The largest polygon is drawn as the main outline (thick, blue) and the
remaining ones as secondary outlines (thinner, red) over the point cloud.
"""

from typing import Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt

from ..utils.helpers import bounding_box, ensure_parent_dir


def plot_alpha_shape(
    points,
    polygons: Sequence[Sequence],
    output_path: Optional[str] = None,
    ax: Optional[plt.Axes] = None,
    title: str = 'Alpha shape',
    main_color: str = 'blue',
    secondary_color: str = 'red',
    main_linewidth: float = 3.0,
    secondary_linewidth: float = 1.5,
    point_size: float = 4.0,
    margin: float = 0.05,
    page_w: float = 6.3,
    page_h: float = 6.3,
    dpi: int = 300
) -> plt.Axes:
    """
    Plot points and their alpha-shape polygons.

    :param points: (N, 2) array or sequence of (x, y) pairs.
    :param polygons: Closed polygons, largest first.
    :type polygons: Sequence[Sequence]
    :param output_path: If given, the figure is saved there and closed.
    :type output_path: Optional[str]
    :param ax: Existing axes to draw on; a new figure is created otherwise.
    :type ax: Optional[plt.Axes]
    :param title: Plot title.
    :type title: str
    :param main_color: Color of the largest polygon.
    :type main_color: str
    :param secondary_color: Color of the other polygons.
    :type secondary_color: str
    :param main_linewidth: Line width of the largest polygon.
    :type main_linewidth: float
    :param secondary_linewidth: Line width of the other polygons.
    :type secondary_linewidth: float
    :param point_size: Scatter marker size.
    :type point_size: float
    :param margin: Fraction of the data extent added around the plot.
    :type margin: float
    :param page_w: Figure width in inches.
    :type page_w: float
    :param page_h: Figure height in inches.
    :type page_h: float
    :param dpi: Figure DPI.
    :type dpi: int
    :return: The axes drawn on.
    :rtype: plt.Axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(page_w, page_h))
    else:
        fig = ax.figure

    xy = np.asarray(points, dtype=float).reshape(-1, 2)
    if len(xy):
        ax.scatter(xy[:, 0], xy[:, 1], s=point_size, c='gray', zorder=1)

        min_x, min_y, max_x, max_y = bounding_box(xy)
        pad_x = (max_x - min_x) * margin or 1.0
        pad_y = (max_y - min_y) * margin or 1.0
        ax.set_xlim(min_x - pad_x, max_x + pad_x)
        ax.set_ylim(min_y - pad_y, max_y + pad_y)

    for i, polygon in enumerate(polygons):
        vertices = np.asarray(polygon, dtype=float).reshape(-1, 2)
        if i == 0:
            ax.plot(vertices[:, 0], vertices[:, 1], color=main_color,
                    linewidth=main_linewidth, zorder=3, label='Polygon 1')
        else:
            ax.plot(vertices[:, 0], vertices[:, 1], color=secondary_color,
                    linewidth=secondary_linewidth, zorder=2)

    ax.set_title(title)
    ax.set_xlabel('X Coordinate')
    ax.set_ylabel('Y Coordinate')
    ax.set_aspect('equal', adjustable='box')

    if output_path is not None:
        fig.tight_layout()
        fig.savefig(ensure_parent_dir(output_path), dpi=dpi)
        plt.close(fig)

    return ax
