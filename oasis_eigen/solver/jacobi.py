################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Cyclic Jacobi eigen solver for small symmetric matrices."""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import ArrayLike
from numpy.typing import NDArray

from oasis_eigen.config.eigen_params import SOLVER_JACOBI_MAX_SWEEPS
from oasis_eigen.eigen_types.eigen_errors import ConvergenceExceededError
from oasis_eigen.math_utils.constants import NumericConstants
from oasis_eigen.math_utils.validation import as_square_matrix
from oasis_eigen.solver.diagonalizer import sort_eigenpairs


_LOG: logging.Logger = logging.getLogger(__name__)


def jacobi_eigen(
    matrix: ArrayLike,
    max_sweeps: int = SOLVER_JACOBI_MAX_SWEEPS,
    tol: float | None = None,
) -> tuple[NDArray[np.float64], NDArray[np.float64], int]:
    """Diagonalize a symmetric matrix with cyclic Jacobi rotations.

    Returns (d, V, sweeps) with d ascending and column i of V the
    eigenvector for d[i]. The default tolerance on the off-diagonal
    Frobenius norm is machine epsilon times the norm of the matrix. Only
    the lower triangle is read.
    """
    if max_sweeps <= 0:
        raise ValueError("max_sweeps must be positive")

    if tol is not None and tol < 0.0:
        raise ValueError("tol must be non-negative")

    lower: NDArray[np.float64] = as_square_matrix(matrix, "matrix")
    a: NDArray[np.float64] = np.tril(lower) + np.tril(lower, -1).T
    dim: int = int(a.shape[0])
    v: NDArray[np.float64] = np.eye(dim, dtype=np.float64)

    # Work on a copy scaled to unit max-norm so norms cannot overflow
    scale: float = float(np.max(np.abs(a)))
    if scale == 0.0:
        scale = 1.0
    a /= scale

    if tol is None:
        tol = NumericConstants.MACHINE_EPS * float(np.linalg.norm(a))
    else:
        tol /= scale

    sweeps: int = 0
    while True:
        off_norm: float = _off_diag_norm(a)
        if off_norm <= tol:
            break
        if sweeps >= max_sweeps:
            raise ConvergenceExceededError(-1, sweeps)
        sweeps += 1

        for p in range(dim - 1):
            for q in range(p + 1, dim):
                if a[p, q] != 0.0:
                    _rotate(a, v, p, q)

    _LOG.debug("Jacobi converged after %d sweeps", sweeps)

    d, V = sort_eigenpairs(np.diag(a) * scale, v)
    return d, V, sweeps


def _rotate(
    a: NDArray[np.float64],
    v: NDArray[np.float64],
    p: int,
    q: int,
) -> None:
    """Apply the rotation that zeroes a[p, q] to a and accumulate it in v."""
    apq: float = float(a[p, q])
    app: float = float(a[p, p])
    aqq: float = float(a[q, q])

    tau: float = (aqq - app) / (2.0 * apq)
    t_sign: float = 1.0 if tau >= 0.0 else -1.0
    t: float = t_sign / (abs(tau) + math.hypot(1.0, tau))
    c: float = 1.0 / math.hypot(1.0, t)
    s: float = t * c

    akp: NDArray[np.float64] = a[:, p].copy()
    akq: NDArray[np.float64] = a[:, q].copy()
    a[:, p] = c * akp - s * akq
    a[:, q] = s * akp + c * akq
    a[p, :] = a[:, p]
    a[q, :] = a[:, q]

    a[p, p] = c * c * app - 2.0 * s * c * apq + s * s * aqq
    a[q, q] = s * s * app + 2.0 * s * c * apq + c * c * aqq
    a[p, q] = 0.0
    a[q, p] = 0.0

    vkp: NDArray[np.float64] = v[:, p].copy()
    vkq: NDArray[np.float64] = v[:, q].copy()
    v[:, p] = c * vkp - s * vkq
    v[:, q] = s * vkp + c * vkq


def _off_diag_norm(a: NDArray[np.float64]) -> float:
    off: NDArray[np.float64] = a - np.diag(np.diag(a))
    return float(np.linalg.norm(off))
