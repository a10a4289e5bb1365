"""Coxeter matrices: the symmetric table of branch marks of a diagram."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Sequence

import numpy as np

if TYPE_CHECKING:  # pragma: no cover
    from .ast import Diagram

logger = logging.getLogger(__name__)

DEFAULT_BRANCH = 2.0


class CoxeterMatrix:
    """Square symmetric matrix with ones on the diagonal.

    Entry ``(i, j)`` is the branch mark ``p`` such that mirrors ``i`` and ``j``
    meet at an angle of ``pi / p``.  The matrix can only be changed through
    :meth:`set_entry`, which keeps it symmetric and never changes its size.
    """

    def __init__(self, matrix: Iterable[Iterable[float]]):
        arr = np.array(matrix, dtype=float)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise ValueError(f"Coxeter matrix must be square, got shape {arr.shape}")
        self._matrix = arr

    @classmethod
    def parse(cls, text: str) -> "CoxeterMatrix":
        from .parser import parse_diagram

        return derive_coxeter_matrix(parse_diagram(text))

    @classmethod
    def from_linear_diagram(cls, branches: Sequence[float]) -> "CoxeterMatrix":
        """Matrix of a linear diagram whose consecutive branch marks are ``branches``."""

        dim = len(branches) + 1
        mat = np.full((dim, dim), DEFAULT_BRANCH)
        np.fill_diagonal(mat, 1.0)
        for i, value in enumerate(branches):
            mat[i, i + 1] = mat[i + 1, i] = float(value)
        return cls(mat)

    @classmethod
    def trivial(cls) -> "CoxeterMatrix":
        return cls([[1.0]])

    @classmethod
    def i2(cls, x: float) -> "CoxeterMatrix":
        return cls.from_linear_diagram([x])

    @classmethod
    def a(cls, n: int) -> "CoxeterMatrix":
        return cls.from_linear_diagram([3.0] * (n - 1))

    @classmethod
    def b(cls, n: int) -> "CoxeterMatrix":
        cox = cls.a(n)
        if n > 1:
            cox.set_entry(0, 1, 4.0)
        return cox

    @property
    def dim(self) -> int:
        return int(self._matrix.shape[0])

    def as_array(self) -> np.ndarray:
        view = self._matrix.view()
        view.flags.writeable = False
        return view

    def set_entry(self, i: int, j: int, value: float) -> None:
        if i == j:
            raise ValueError("diagonal entries of a Coxeter matrix are always 1")
        if not (0 <= i < self.dim and 0 <= j < self.dim):
            raise IndexError(f"entry ({i}, {j}) outside a {self.dim}x{self.dim} matrix")
        self._matrix[i, j] = self._matrix[j, i] = float(value)

    def __getitem__(self, index):
        return self._matrix[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CoxeterMatrix):
            return NotImplemented
        return self._matrix.shape == other._matrix.shape and bool(
            np.array_equal(self._matrix, other._matrix)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CoxeterMatrix({self._matrix.tolist()!r})"


def derive_coxeter_matrix(diagram: "Diagram") -> CoxeterMatrix:
    dim = diagram.dim
    mat = np.full((dim, dim), DEFAULT_BRANCH)
    np.fill_diagonal(mat, 1.0)
    for diagram_edge in diagram.edges:
        value = diagram_edge.edge.value
        mat[diagram_edge.a, diagram_edge.b] = value
        mat[diagram_edge.b, diagram_edge.a] = value
    logger.debug("Derived %dx%d Coxeter matrix from %d edge(s)", dim, dim, diagram.edge_count)
    return CoxeterMatrix(mat)

