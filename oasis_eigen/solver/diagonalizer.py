################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Implicit-shift QL iteration for symmetric tridiagonal matrices.

Derived from the Algol procedure tql2 by Bowdler, Martin, Reinsch and
Wilkinson (Handbook for Automatic Computation, Vol. II, Linear Algebra)
and the corresponding EISPACK routine, with a bounded iteration count per
deflation index.
"""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import NDArray

from oasis_eigen.config.eigen_params import SOLVER_MAX_ITERS
from oasis_eigen.eigen_types.eigen_errors import ConvergenceExceededError
from oasis_eigen.eigen_types.tridiagonal_form import TridiagonalForm
from oasis_eigen.math_utils.constants import NumericConstants


_LOG: logging.Logger = logging.getLogger(__name__)


def diagonalize(
    form: TridiagonalForm,
    max_iters: int = SOLVER_MAX_ITERS,
) -> tuple[NDArray[np.float64], NDArray[np.float64], tuple[int, ...]]:
    """Diagonalize a tridiagonal form and sort the eigenpairs.

    Returns (d, V, iterations): eigenvalues in non-decreasing order, the
    matrix whose column i is the eigenvector for d[i], and the number of
    QL iterations spent on each deflation index.

    Raises ConvergenceExceededError when one index needs more than
    max_iters iterations.
    """
    if max_iters <= 0:
        raise ValueError("max_iters must be positive")

    V: NDArray[np.float64] = form.transform.copy()
    d: NDArray[np.float64] = form.diagonal.copy()
    e: NDArray[np.float64] = form.off_diagonal.copy()

    iterations: list[int] = _tql2(V, d, e, max_iters)

    d_sorted, V_sorted = sort_eigenpairs(d, V)
    return d_sorted, V_sorted, tuple(iterations)


def sort_eigenpairs(
    d: NDArray[np.float64],
    V: NDArray[np.float64],
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Selection-sort eigenvalues ascending, permuting columns of V alike.

    Each pass swaps the first strictly smallest remaining value into place,
    so equal eigenvalues are ordered by that scan and the sort is not
    stable. The inputs are not modified.
    """
    values: NDArray[np.float64] = np.array(d, dtype=np.float64, copy=True)
    vectors: NDArray[np.float64] = np.array(V, dtype=np.float64, copy=True)
    dim: int = int(values.size)
    if vectors.shape != (dim, dim):
        raise ValueError(f"V must have shape ({dim}, {dim})")

    for i in range(dim - 1):
        k: int = i
        p: float = float(values[i])
        for j in range(i + 1, dim):
            if values[j] < p:
                k = j
                p = float(values[j])
        if k != i:
            values[k] = values[i]
            values[i] = p
            vectors[:, [i, k]] = vectors[:, [k, i]]

    return values, vectors


def _tql2(
    V: NDArray[np.float64],
    d: NDArray[np.float64],
    e: NDArray[np.float64],
    max_iters: int,
) -> list[int]:
    dim: int = int(d.size)
    eps: float = NumericConstants.MACHINE_EPS
    iterations: list[int] = [0] * dim

    # Renumber so e[i] couples rows i and i + 1
    e[:-1] = e[1:]
    e[-1] = 0.0

    f: float = 0.0
    tst1: float = 0.0

    for low in range(dim):
        # Find small subdiagonal element
        tst1 = max(tst1, abs(float(d[low])) + abs(float(e[low])))
        high: int = low
        while high < dim - 1:
            if abs(float(e[high])) <= eps * tst1:
                break
            high += 1

        # d[low] is an eigenvalue when high == low, otherwise iterate
        if high > low:
            count: int = 0
            while True:
                if count >= max_iters:
                    raise ConvergenceExceededError(low, count)
                count += 1

                # Compute implicit shift
                g: float = float(d[low])
                p: float = (float(d[low + 1]) - g) / (2.0 * float(e[low]))
                r: float = math.hypot(p, 1.0)
                if p < 0.0:
                    r = -r
                d[low] = float(e[low]) / (p + r)
                d[low + 1] = float(e[low]) * (p + r)
                dl1: float = float(d[low + 1])
                h: float = g - float(d[low])
                d[low + 2 :] -= h
                f += h

                # Implicit QL transformation
                p = float(d[high])
                c: float = 1.0
                c2: float = c
                c3: float = c
                el1: float = float(e[low + 1])
                s: float = 0.0
                s2: float = 0.0
                for i in range(high - 1, low - 1, -1):
                    c3 = c2
                    c2 = c
                    s2 = s
                    ei: float = float(e[i])
                    g = c * ei
                    h = c * p
                    r = math.hypot(p, ei)
                    e[i + 1] = s * r
                    s = ei / r
                    c = p / r
                    di: float = float(d[i])
                    p = c * di - s * g
                    d[i + 1] = h + s * (c * g + s * di)

                    # Accumulate transformation
                    col_i: NDArray[np.float64] = V[:, i].copy()
                    col_next: NDArray[np.float64] = V[:, i + 1].copy()
                    V[:, i + 1] = s * col_i + c * col_next
                    V[:, i] = c * col_i - s * col_next

                p = -s * s2 * c3 * el1 * (float(e[low]) / dl1)
                e[low] = s * p
                d[low] = c * p

                # Check for convergence
                if abs(float(e[low])) <= eps * tst1:
                    break

            iterations[low] = count

        d[low] = float(d[low]) + f
        e[low] = 0.0
        _LOG.debug("QL index %d converged after %d iterations", low, iterations[low])

    return iterations
