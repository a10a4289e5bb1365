from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Iterator, Optional, Tuple

import numpy as np

if TYPE_CHECKING:  # pragma: no cover
    from .matrix import CoxeterMatrix


class NodeKind(IntEnum):
    UNRINGED = 0
    RINGED = 1
    SNUB = 2


@dataclass(frozen=True, order=True)
class Node:
    """A mirror of the diagram.

    ``value`` is twice the distance from the generating point to the mirror;
    it is always ``0.0`` for unringed nodes.
    """

    kind: NodeKind
    value: float = 0.0

    @classmethod
    def unringed(cls) -> "Node":
        return cls(NodeKind.UNRINGED, 0.0)

    @classmethod
    def ringed(cls, value: float) -> "Node":
        return cls(NodeKind.RINGED, float(value))

    @classmethod
    def snub(cls, value: float) -> "Node":
        return cls(NodeKind.SNUB, float(value))


@dataclass(frozen=True)
class Edge:
    """Branch mark ``num/den``: the mirrors meet at an angle of ``pi * den / num``."""

    num: int
    den: int = 1

    @property
    def value(self) -> float:
        if self.den == 0:
            return math.copysign(math.inf, self.num)
        return self.num / self.den


@dataclass(frozen=True)
class DiagramEdge:
    a: int
    b: int
    edge: Edge

    def joins(self, i: int, j: int) -> bool:
        return (self.a, self.b) == (i, j) or (self.a, self.b) == (j, i)


@dataclass(frozen=True)
class Diagram:
    """Undirected graph of mirrors; node identity is the order of appearance."""

    nodes: Tuple[Node, ...] = ()
    edges: Tuple[DiagramEdge, ...] = ()

    @property
    def dim(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def node_iter(self) -> Iterator[Node]:
        return iter(self.nodes)

    def node_vector(self) -> np.ndarray:
        return np.array([node.value for node in self.node_iter()], dtype=float)

    def find_edge(self, i: int, j: int) -> Optional[Edge]:
        for diagram_edge in self.edges:
            if diagram_edge.joins(i, j):
                return diagram_edge.edge
        return None

    def cox(self) -> "CoxeterMatrix":
        from .matrix import derive_coxeter_matrix

        return derive_coxeter_matrix(self)

    def circumradius(self, eps: Optional[float] = None) -> Optional[float]:
        from .geometry import circumradius

        return circumradius(self.cox(), self.node_vector(), eps=eps)

    def generator(self, eps: Optional[float] = None) -> Optional[np.ndarray]:
        from .geometry import generator

        return generator(self.cox(), self.node_vector(), eps=eps)
