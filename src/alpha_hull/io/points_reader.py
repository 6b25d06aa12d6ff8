# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Delimited-text readers for point coordinates.

Files hold one point per row and are parsed with ``numpy.genfromtxt``.
Blank lines and ``#`` comments are ignored. Coordinate columns are selected
by index or, when the file has a header row, by name. A first row holding
any non-numeric field is treated as the header.
"""

import os
from typing import List, Optional, Union

import numpy as np


Column = Union[int, str]
COMMENTS = '#'


def _first_row(path: str, delimiter: str) -> list:
    # dtype=None infers a type per field, so header names come back as str
    row = np.genfromtxt(path, delimiter=delimiter, comments=COMMENTS, dtype=None,
                        max_rows=1, autostrip=True, encoding='utf-8')
    if row.size == 0:
        return []
    if row.dtype.names:
        return list(row.item())
    return np.atleast_1d(row).tolist()


def read_header(path: str, delimiter: str = ',') -> Optional[List[str]]:
    """
    Column names of a delimited file.

    :param path: Path to the file.
    :type path: str
    :param delimiter: Field delimiter (default ',').
    :type delimiter: str
    :return: Names from the first non-comment row, or None when that row is
             numeric (no header).
    :rtype: Optional[List[str]]
    :raises FileNotFoundError: If the file does not exist.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Points file not found: {path}")

    values = _first_row(path, delimiter)
    if any(isinstance(v, str) for v in values):
        return [str(v) for v in values]
    return None


def _resolve_column(column: Column, header: Optional[List[str]], width: int) -> int:
    if isinstance(column, str):
        if header is None:
            raise ValueError(f"Column '{column}' given by name but the file has no header")
        if column not in header:
            raise ValueError(f"Column '{column}' not found. Available: {header}")
        return header.index(column)

    if not -width <= column < width:
        raise ValueError(f"Column index {column} out of range for {width} column(s)")
    return column


def load_points(path: str,
                delimiter: str = ',',
                x_column: Column = 0,
                y_column: Column = 1) -> np.ndarray:
    """
    Load point coordinates from a delimited text file.

    :param path: Path to the file.
    :type path: str
    :param delimiter: Field delimiter (default ',').
    :type delimiter: str
    :param x_column: Index or header name of the x (longitude) column.
    :type x_column: Union[int, str]
    :param y_column: Index or header name of the y (latitude) column.
    :type y_column: Union[int, str]
    :return: (N, 2) array of coordinates.
    :rtype: np.ndarray
    :raises FileNotFoundError: If the file does not exist.
    :raises ValueError: If a column is missing or a value is not numeric.
    """
    header = read_header(path, delimiter)
    width = len(_first_row(path, delimiter))
    if width == 0:
        return np.empty((0, 2), dtype=float)

    ix = _resolve_column(x_column, header, width)
    iy = _resolve_column(y_column, header, width)

    xy = np.genfromtxt(path, delimiter=delimiter, comments=COMMENTS, dtype=float,
                       usecols=(ix, iy), autostrip=True, encoding='utf-8')
    xy = xy.reshape(-1, 2)
    if header is not None:
        # the header row parses as NaN
        xy = xy[1:]

    bad = np.flatnonzero(np.isnan(xy).any(axis=1))
    if bad.size:
        raise ValueError(f"Invalid coordinates on data row(s) {(bad + 1).tolist()}")

    return xy
