# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Point, edge and triangle value types.

Points compare on their raw coordinates. Wherever a point is used as a
mapping key or set member (graph nodes, edge identity) the canonical key
from :func:`canonical_key` is used instead, so that floating-point jitter
in the last digits does not create duplicate nodes.
"""

from typing import Callable, List, NamedTuple, Tuple

from ..utils.helpers import CANONICAL_DIGITS, round_coordinate


PointKey = Tuple[float, float]


def canonical_key(point, digits: int = CANONICAL_DIGITS) -> PointKey:
    """
    Canonical mapping key of a point.

    :param point: Point or any (x, y) pair.
    :param digits: Number of decimal digits kept (default 9).
    :type digits: int
    :return: Tuple of rounded coordinates.
    :rtype: Tuple[float, float]
    """
    x, y = point
    return round_coordinate(x, digits), round_coordinate(y, digits)


class Point(NamedTuple):
    """Immutable 2D point. Being a tuple, it unpacks as ``x, y``."""

    x: float
    y: float

    @property
    def key(self) -> PointKey:
        return canonical_key(self)

    @classmethod
    def from_pair(cls, pair) -> 'Point':
        x, y = pair
        return cls(float(x), float(y))


class Edge:
    """
    Directed representation of an undirected segment.

    Equality and hashing use the canonical keys of ``source`` then
    ``target``; an edge and its reverse are therefore different values.
    """

    __slots__ = ('source', 'target')

    def __init__(self, source: Point, target: Point):
        object.__setattr__(self, 'source', source)
        object.__setattr__(self, 'target', target)

    def __setattr__(self, name, value):
        raise AttributeError("Edge is immutable")

    def _identity(self) -> Tuple[PointKey, PointKey]:
        return self.source.key, self.target.key

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self):
        return hash(self._identity())

    def __iter__(self):
        yield self.source
        yield self.target

    def __repr__(self):
        return f"Edge({self.source!r}, {self.target!r})"

    def reversed(self) -> 'Edge':
        return Edge(self.target, self.source)

    def length(self, distance: Callable[[Point, Point], float]) -> float:
        """
        Length of the edge under the given metric.

        :param distance: Distance function of two points.
        :type distance: Callable[[Point, Point], float]
        :return: Edge length.
        :rtype: float
        """
        return distance(self.source, self.target)


Triangle = Tuple[Point, Point, Point]


def triangle_edges(triangle: Triangle) -> List[Edge]:
    """
    Directed edges of a triangle in vertex order: v0->v1, v1->v2, v2->v0.

    :param triangle: Three vertices.
    :type triangle: Triangle
    :return: List of three edges.
    :rtype: List[Edge]
    """
    p1, p2, p3 = triangle
    return [Edge(p1, p2), Edge(p2, p3), Edge(p3, p1)]
