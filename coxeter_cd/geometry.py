"""Mirror normals, circumradius and generating point of a Coxeter matrix.

Each routine returns ``None`` when the requested object does not exist,
which happens for hyperbolic, Euclidean (affine) or otherwise degenerate
arrangements.  That is an expected outcome and is never raised as an error.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

import numpy as np
from scipy.linalg import LinAlgError, solve_triangular

from .config import resolve_eps
from .logging_utils import apply_debug_logging
from .matrix import CoxeterMatrix

logger = logging.getLogger(__name__)


def normals(cox: CoxeterMatrix, eps: Optional[float] = None) -> Optional[np.ndarray]:
    """Return an upper triangular matrix whose columns are unit mirror normals.

    Column ``i`` is built so that its dot product with every earlier column
    ``j`` is ``cos(pi / M[i, j])``.  Only entry ``j`` of column ``i`` is unknown
    at that point, so each step is a single division by ``col_j[j]``.
    """

    eps = resolve_eps(eps)
    dim = cox.dim
    mat = np.zeros((dim, dim))

    for i in range(dim):
        for j in range(i):
            dot = float(mat[:j, i] @ mat[:j, j])
            mat[j, i] = (math.cos(math.pi / cox[i, j]) - dot) / mat[j, j]

        norm_sq = float(mat[:i, i] @ mat[:i, i])
        if norm_sq >= 1.0 - eps:
            logger.debug("Mirror %d does not fit in spherical space (norm_sq=%.6g)", i, norm_sq)
            return None
        mat[i, i] = math.sqrt(1.0 - norm_sq)

    return mat


def schlafli_matrix(cox: CoxeterMatrix) -> np.ndarray:
    return np.cos(np.pi / cox.as_array())


def circumradius(
    cox: CoxeterMatrix, node_vector: Sequence[float], eps: Optional[float] = None
) -> Optional[float]:
    """Distance from the center of the arrangement to the generating point."""

    eps = resolve_eps(eps)
    try:
        inverse = np.linalg.inv(schlafli_matrix(cox))
    except np.linalg.LinAlgError:
        logger.debug("Schläfli matrix is singular")
        return None
    if not np.all(np.isfinite(inverse)):
        return None

    vec = np.asarray(node_vector, dtype=float)
    sq_radius = float(vec @ inverse @ vec) / -4.0
    if not math.isfinite(sq_radius):
        return None
    if sq_radius < -eps:
        return None
    if sq_radius > eps:
        return math.sqrt(sq_radius)
    return 0.0


def generator(
    cox: CoxeterMatrix, node_vector: Sequence[float], eps: Optional[float] = None
) -> Optional[np.ndarray]:
    """Solve ``normals(cox) @ x = node_vector`` by back-substitution."""

    mirrors = normals(cox, eps=eps)
    if mirrors is None:
        return None
    vec = np.asarray(node_vector, dtype=float)
    if not np.all(np.isfinite(vec)):
        return None
    try:
        return solve_triangular(mirrors, vec, lower=False)
    except LinAlgError:
        logger.debug("Normals matrix has a zero pivot")
        return None


apply_debug_logging(globals(), logger=logger)
