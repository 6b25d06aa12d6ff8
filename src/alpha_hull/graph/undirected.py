# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Weighted undirected graph with shortest-path queries.

Nodes are points. Internally every structure is keyed by the canonical key
of a point; the first Point seen for a key is kept as the node returned to
callers. Mutations report an :class:`EdgeStatus` instead of raising, and
path queries report a :class:`PathStatus`, so the caller decides whether a
failure matters.
"""

import heapq
import itertools
import logging
import math
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, List, NamedTuple, Optional, Set, Tuple

from ..geometry.primitives import Edge, Point, PointKey, canonical_key


logger = logging.getLogger(__name__)


class EdgeStatus(Enum):
    """Outcome of :meth:`Graph.add_edge` and :meth:`Graph.remove_edge`."""

    SUCCESS = "success"
    SOURCE_EXISTS = "source already exists"
    TARGET_EXISTS = "target already exists"
    NO_SOURCE_EXISTS = "source doesn't exist"
    NO_TARGET_EXISTS = "target doesn't exist"

    @property
    def description(self) -> str:
        return self.value


class PathStatus(Enum):
    """Outcome of :meth:`Graph.shortest_path`."""

    SUCCESS = "success"
    IMPOSSIBLE = "impossible to find path between nodes that do not belong to the graph"
    NO_PATH = "there is no path connecting these nodes"

    @property
    def description(self) -> str:
        return self.value


class PathResult(NamedTuple):
    """Shortest path from source to target, both inclusive."""

    path: List[Point]
    status: PathStatus
    distance: float

    @property
    def found(self) -> bool:
        return self.status is PathStatus.SUCCESS


class Graph:
    """
    Undirected graph induced by a list of edges, stored as adjacency sets.

    :param edges: Edges to add on construction.
    :type edges: Iterable[Edge]
    :param weight_function: Distance function used to weigh the initial edges.
                            Required when ``edges`` is not empty.
    :type weight_function: Optional[Callable[[Point, Point], float]]
    """

    def __init__(self,
                 edges: Iterable[Edge] = (),
                 weight_function: Optional[Callable[[Point, Point], float]] = None):
        self._points: Dict[PointKey, Point] = {}
        self._adjacency: Dict[PointKey, Set[PointKey]] = {}
        self._weight: Dict[PointKey, Dict[PointKey, float]] = {}

        for edge in edges:
            if weight_function is None:
                raise ValueError("A weight function is required to build a graph from edges")
            self.add_edge(edge.source, edge.target,
                          weight_function(edge.source, edge.target))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def nodes(self) -> List[Point]:
        return list(self._points.values())

    def __len__(self) -> int:
        return len(self._points)

    def __contains__(self, node) -> bool:
        return canonical_key(node) in self._points

    def __getitem__(self, node) -> Set[Point]:
        return self.neighbors(node)

    def node(self, point) -> Optional[Point]:
        """Representative node stored for ``point``, or None."""
        return self._points.get(canonical_key(point))

    def neighbors(self, node) -> Set[Point]:
        """
        Neighbors of a node; empty for unknown nodes.

        :param node: Point or (x, y) pair.
        :return: Set of neighboring nodes.
        :rtype: Set[Point]
        """
        keys = self._adjacency.get(canonical_key(node), ())
        return {self._points[k] for k in keys}

    def degree(self, node) -> int:
        return len(self._adjacency.get(canonical_key(node), ()))

    def has_edge(self, source, target) -> bool:
        return canonical_key(target) in self._adjacency.get(canonical_key(source), ())

    def weight(self, source, target) -> float:
        """
        Weight of an edge.

        :raises KeyError: If the edge does not exist.
        """
        return self._weight[canonical_key(source)][canonical_key(target)]

    @property
    def edge_count(self) -> int:
        return sum(len(s) for s in self._adjacency.values()) // 2

    def edges(self) -> Iterator[Edge]:
        """Yield every undirected edge once."""
        emitted = set()
        for key, neighbors in self._adjacency.items():
            for other in neighbors:
                if (other, key) in emitted:
                    continue
                emitted.add((key, other))
                yield Edge(self._points[key], self._points[other])

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def _register(self, point) -> PointKey:
        key = canonical_key(point)
        if key not in self._points:
            self._points[key] = Point.from_pair(point)
            self._adjacency[key] = set()
            self._weight[key] = {}
        return key

    def add_edge(self, source, target, weight: float) -> EdgeStatus:
        """
        Add an edge (and its nodes) to the graph.

        :param source: Source point.
        :param target: Target point.
        :param weight: Non-negative edge weight.
        :type weight: float
        :return: ``SUCCESS``, or ``SOURCE_EXISTS`` / ``TARGET_EXISTS`` when the
                 edge is already present from either direction. Nothing is
                 modified on failure.
        :rtype: EdgeStatus
        :raises ValueError: If the weight is negative or not finite.
        """
        if not math.isfinite(weight) or weight < 0:
            raise ValueError(f"Edge weight must be finite and non-negative, got {weight}")

        source_key = canonical_key(source)
        target_key = canonical_key(target)

        if source_key == target_key:
            logger.debug("Self loop on %s rejected", source)
            return EdgeStatus.SOURCE_EXISTS
        if target_key in self._adjacency.get(source_key, ()):
            logger.debug("Edge (%s, %s) already exists", source, target)
            return EdgeStatus.SOURCE_EXISTS
        if source_key in self._adjacency.get(target_key, ()):
            logger.debug("Edge (%s, %s) already exists", target, source)
            return EdgeStatus.TARGET_EXISTS

        self._register(source)
        self._register(target)

        self._adjacency[source_key].add(target_key)
        self._adjacency[target_key].add(source_key)

        self._weight[source_key][target_key] = weight
        self._weight[target_key][source_key] = weight

        return EdgeStatus.SUCCESS

    def remove_edge(self, source, target) -> EdgeStatus:
        """
        Remove an edge and its weight. The nodes stay in the graph.

        :param source: Source point.
        :param target: Target point.
        :return: ``SUCCESS``, ``NO_SOURCE_EXISTS`` or ``NO_TARGET_EXISTS``.
        :rtype: EdgeStatus
        """
        source_key = canonical_key(source)
        target_key = canonical_key(target)

        if source_key not in self._adjacency:
            logger.debug("No node %s", source)
            return EdgeStatus.NO_SOURCE_EXISTS
        if target_key not in self._adjacency[source_key]:
            logger.debug("No edge (%s, %s) to remove", source, target)
            return EdgeStatus.NO_TARGET_EXISTS
        if target_key not in self._adjacency:
            logger.debug("No node %s", target)
            return EdgeStatus.NO_TARGET_EXISTS
        if source_key not in self._adjacency[target_key]:
            logger.debug("No edge (%s, %s) to remove", target, source)
            return EdgeStatus.NO_SOURCE_EXISTS

        self._adjacency[source_key].discard(target_key)
        self._adjacency[target_key].discard(source_key)

        self._weight[source_key].pop(target_key, None)
        self._weight[target_key].pop(source_key, None)

        return EdgeStatus.SUCCESS

    # ------------------------------------------------------------------
    # Shortest paths
    # ------------------------------------------------------------------

    def dijkstra(self, source, target=None) -> Tuple[Dict[Point, float], Dict[Point, Point]]:
        """
        Dijkstra's single-source shortest paths over non-negative weights.

        Stops as soon as ``target`` is settled when one is given; otherwise
        explores every node reachable from ``source``.

        :param source: Start node (must belong to the graph).
        :param target: Optional node at which to stop early.
        :return: Tuple ``(distance, predecessors)``. ``distance`` maps every
                 node to its best known distance (``inf`` when unreached);
                 ``predecessors`` maps a reached node to the node before it.
        :rtype: Tuple[Dict[Point, float], Dict[Point, Point]]
        :raises KeyError: If ``source`` is not a node of the graph.
        """
        source_key = canonical_key(source)
        if source_key not in self._points:
            raise KeyError(source)
        target_key = canonical_key(target) if target is not None else None

        distance = {key: math.inf for key in self._points}
        distance[source_key] = 0.0
        predecessors: Dict[PointKey, PointKey] = {}
        settled = set()

        # the counter breaks distance ties in discovery order
        counter = itertools.count()
        heap = [(0.0, next(counter), source_key)]

        while heap:
            dist_node, _, node = heapq.heappop(heap)
            if node in settled:
                continue
            settled.add(node)

            if node == target_key:
                break

            for neighbor in self._adjacency[node]:
                if neighbor in settled:
                    continue
                candidate = dist_node + self._weight[node][neighbor]
                if candidate < distance[neighbor]:
                    distance[neighbor] = candidate
                    predecessors[neighbor] = node
                    heapq.heappush(heap, (candidate, next(counter), neighbor))

        points = self._points
        return ({points[k]: d for k, d in distance.items()},
                {points[k]: points[p] for k, p in predecessors.items()})

    def shortest_path(self, source, target) -> PathResult:
        """
        Shortest path between two nodes.

        :param source: Start node.
        :param target: End node.
        :return: ``PathResult(path, status, distance)``. ``IMPOSSIBLE`` when an
                 endpoint is not a node, ``NO_PATH`` (distance ``inf``) when the
                 nodes are disconnected; otherwise ``path`` runs from source to
                 target inclusive.
        :rtype: PathResult
        """
        if source not in self or target not in self:
            logger.debug("Impossible to find path between %s and %s: "
                         "nodes do not belong to the graph", source, target)
            return PathResult([], PathStatus.IMPOSSIBLE, math.inf)

        start = self.node(source)
        end = self.node(target)
        distance, predecessors = self.dijkstra(start, end)

        if math.isinf(distance[end]):
            logger.debug("There is no path connecting node %s to node %s", start, end)
            return PathResult([], PathStatus.NO_PATH, math.inf)

        path = [end]
        current = end
        while current != start:
            current = predecessors[current]
            path.append(current)
        path.reverse()

        return PathResult(path, PathStatus.SUCCESS, distance[end])
