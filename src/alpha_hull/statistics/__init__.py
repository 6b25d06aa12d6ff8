# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Statistics module for quantiles and outlier fences."""

from .fences import (
    quantile,
    TukeyFence,
    tukey_fence
)

__all__ = [
    'quantile',
    'TukeyFence',
    'tukey_fence',
]
