# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Exceptions raised by the alpha_hull package."""


class AlphaHullError(Exception):
    """Base class for alpha_hull errors."""


class FencingUndefinedError(AlphaHullError):
    """
    Raised when the Tukey fence cannot be computed.

    Happens when the triangulation yields fewer than two side lengths, e.g.
    fewer than three distinct input points or collinear input.
    """
