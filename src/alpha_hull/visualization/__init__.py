# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Visualization module for plotting alpha-shape outlines."""

from .outlines import (
    plot_alpha_shape
)

__all__ = [
    'plot_alpha_shape',
]
