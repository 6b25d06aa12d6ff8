# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""I/O module for point files and polygon export."""

from .points_reader import (
    read_header,
    load_points
)

from .geojson_writer import (
    polygons_to_geojson,
    write_geojson
)

__all__ = [
    'read_header',
    'load_points',
    'polygons_to_geojson',
    'write_geojson',
]
