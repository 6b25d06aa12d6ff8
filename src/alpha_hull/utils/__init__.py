# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Utils module for constants and helper functions."""

from .helpers import (
    DEFAULT_ALPHA,
    EARTH_RADIUS_KM,
    CANONICAL_DIGITS,
    round_coordinate,
    ensure_dir_exists,
    ensure_parent_dir,
    bounding_box
)

__all__ = [
    'DEFAULT_ALPHA',
    'EARTH_RADIUS_KM',
    'CANONICAL_DIGITS',
    'round_coordinate',
    'ensure_dir_exists',
    'ensure_parent_dir',
    'bounding_box',
]
