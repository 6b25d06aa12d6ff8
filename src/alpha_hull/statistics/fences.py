# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Quantiles and Tukey fences.

The fence is used to admit or reject triangulation edges by length: edges
far outside the interquartile range of all side lengths are treated as
outliers.

References
----------
.. [1] Tukey's fences, https://en.wikipedia.org/wiki/Outlier#Tukey's_fences
.. [2] Hyndman & Fan (1996), "Sample quantiles in statistical packages",
   definition 7.
"""

from typing import Iterable, NamedTuple

import numpy as np

from ..exceptions import FencingUndefinedError
from ..utils.helpers import DEFAULT_ALPHA


def quantile(values, probability: float) -> float:
    """
    Sample quantile using linear interpolation between order statistics.

    For sorted values ``x`` and ``h = (n - 1) * p`` the result is
    ``x[floor(h)] + (h - floor(h)) * (x[ceil(h)] - x[floor(h)])``.

    :param values: 1D collection of numbers.
    :param probability: Probability in [0, 1].
    :type probability: float
    :return: Quantile value.
    :rtype: float
    :raises ValueError: If probability is outside [0, 1].
    :raises FencingUndefinedError: If fewer than two values are given.
    """
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"Probability must be in [0, 1], got {probability}")

    arr = np.asarray(values, dtype=float).ravel()
    if arr.size < 2:
        raise FencingUndefinedError(
            f"At least 2 values are needed for a quantile, got {arr.size}"
        )
    return float(np.quantile(arr, probability, method='linear'))


class TukeyFence(NamedTuple):
    """Open interval (lower, upper) of acceptable values."""

    lower: float
    upper: float

    def contains(self, value: float) -> bool:
        return self.lower < value < self.upper

    def admits(self, values: Iterable[float]) -> bool:
        return all(self.contains(v) for v in values)


def tukey_fence(values, alpha: float = DEFAULT_ALPHA) -> TukeyFence:
    """
    Compute the Tukey fence of a sample.

    :param values: 1D collection of numbers (at least two).
    :param alpha: IQR multiplier (default 1.5). Larger values widen the fence.
    :type alpha: float
    :return: Fence ``(q25 - alpha * IQR, q75 + alpha * IQR)``.
    :rtype: TukeyFence
    :raises FencingUndefinedError: If fewer than two values are given.
    """
    q25 = quantile(values, 0.25)
    q75 = quantile(values, 0.75)
    iqr = q75 - q25
    return TukeyFence(q25 - alpha * iqr, q75 + alpha * iqr)
