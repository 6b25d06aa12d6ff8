# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Graph module for weighted undirected graphs and shortest paths."""

from .undirected import (
    Graph,
    EdgeStatus,
    PathStatus,
    PathResult
)

__all__ = [
    'Graph',
    'EdgeStatus',
    'PathStatus',
    'PathResult',
]
