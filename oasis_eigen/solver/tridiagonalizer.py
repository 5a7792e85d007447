################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Householder reduction of a symmetric matrix to tridiagonal form.

Derived from the Algol procedure tred2 by Bowdler, Martin, Reinsch and
Wilkinson (Handbook for Automatic Computation, Vol. II, Linear Algebra)
and the corresponding EISPACK routine.

Rows are reduced from N - 1 down to 1. The Householder vectors are kept in
the lower triangle of the working matrix while reducing, and the explicit
orthogonal transform is formed afterwards in a single accumulation pass.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike
from numpy.typing import NDArray

from oasis_eigen.eigen_types.tridiagonal_form import TridiagonalForm
from oasis_eigen.math_utils.validation import as_square_matrix


def tridiagonalize(matrix: ArrayLike) -> TridiagonalForm:
    """Reduce a symmetric matrix A to tridiagonal T with V^T A V = T.

    Only the lower triangle of A is referenced. The caller's matrix is
    copied and never modified.
    """
    V: NDArray[np.float64] = as_square_matrix(matrix, "matrix")
    dim: int = int(V.shape[0])
    d: NDArray[np.float64] = np.zeros(dim, dtype=np.float64)
    e: NDArray[np.float64] = np.zeros(dim, dtype=np.float64)

    _householder_reduce(V, d, e)
    _accumulate_transforms(V, d, e)

    return TridiagonalForm(transform=V, diagonal=d, off_diagonal=e)


def _householder_reduce(
    V: NDArray[np.float64],
    d: NDArray[np.float64],
    e: NDArray[np.float64],
) -> None:
    dim: int = int(V.shape[0])
    d[:] = V[dim - 1, :]

    for i in range(dim - 1, 0, -1):
        # Scale to avoid under/overflow
        scale: float = float(np.sum(np.abs(d[:i])))
        h: float = 0.0

        if scale == 0.0:
            # Row already reduced, no reflector
            e[i] = d[i - 1]
            d[:i] = V[i - 1, :i]
            V[i, :i] = 0.0
            V[:i, i] = 0.0
        else:
            # Generate Householder vector
            d[:i] /= scale
            h = float(np.dot(d[:i], d[:i]))
            f: float = float(d[i - 1])
            g: float = math.sqrt(h)
            if f > 0.0:
                g = -g
            e[i] = scale * g
            h -= f * g
            d[i - 1] = f - g
            e[:i] = 0.0

            # Apply similarity transformation to remaining columns
            for j in range(i):
                f = float(d[j])
                V[j, i] = f
                g = float(e[j]) + float(V[j, j]) * f
                g += float(np.dot(V[j + 1 : i, j], d[j + 1 : i]))
                e[j + 1 : i] += V[j + 1 : i, j] * f
                e[j] = g

            e[:i] /= h
            f = float(np.dot(e[:i], d[:i]))
            hh: float = f / (h + h)
            e[:i] -= hh * d[:i]

            for j in range(i):
                f = float(d[j])
                g = float(e[j])
                V[j:i, j] -= f * e[j:i] + g * d[j:i]
                d[j] = V[i - 1, j]
                V[i, j] = 0.0

        d[i] = h


def _accumulate_transforms(
    V: NDArray[np.float64],
    d: NDArray[np.float64],
    e: NDArray[np.float64],
) -> None:
    dim: int = int(V.shape[0])

    for i in range(dim - 1):
        V[dim - 1, i] = V[i, i]
        V[i, i] = 1.0
        h: float = float(d[i + 1])
        if h != 0.0:
            d[: i + 1] = V[: i + 1, i + 1] / h
            for j in range(i + 1):
                g: float = float(np.dot(V[: i + 1, i + 1], V[: i + 1, j]))
                V[: i + 1, j] -= g * d[: i + 1]
        V[: i + 1, i + 1] = 0.0

    d[:] = V[dim - 1, :]
    V[dim - 1, :] = 0.0
    V[dim - 1, dim - 1] = 1.0
    e[0] = 0.0
