################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Validation and marshalling helpers for eigen solver inputs.

Matrices are row-major throughout: element (i, j) is row i, column j, and
flat buffers are read and written in C order.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike
from numpy.typing import NDArray

from oasis_eigen.eigen_types.eigen_errors import InvalidDimensionError
from oasis_eigen.eigen_types.eigen_errors import NonSymmetricInputError
from oasis_eigen.math_utils.constants import assert_finite


def as_square_matrix(
    values: ArrayLike,
    name: str,
    expected_dim: int | None = None,
) -> NDArray[np.float64]:
    """Return a finite, square float64 copy of the input matrix."""
    try:
        matrix: NDArray[np.float64] = np.array(values, dtype=np.float64, copy=True)
    except (TypeError, ValueError) as exc:
        raise InvalidDimensionError(f"{name} must be a numeric matrix") from exc

    if matrix.ndim != 2:
        raise InvalidDimensionError(f"{name} must be 2D, got {matrix.ndim}D")
    if matrix.shape[0] != matrix.shape[1]:
        raise InvalidDimensionError(f"{name} must be square, got {matrix.shape}")
    if matrix.shape[0] == 0:
        raise InvalidDimensionError(f"{name} must be non-empty")
    if expected_dim is not None and matrix.shape[0] != expected_dim:
        raise InvalidDimensionError(
            f"{name} must have shape ({expected_dim}, {expected_dim}), "
            f"got {matrix.shape}"
        )

    assert_finite(matrix, name)
    return matrix


def matrix_from_buffer(
    values: Sequence[float],
    dim: int,
    name: str,
) -> NDArray[np.float64]:
    """Return a finite (dim, dim) matrix from a flat row-major buffer."""
    if dim <= 0:
        raise InvalidDimensionError("dim must be positive")

    array: NDArray[np.float64] = np.asarray(values, dtype=np.float64)
    if array.ndim != 1 or array.size != dim * dim:
        raise InvalidDimensionError(f"{name} must have {dim * dim} elements")

    # Copy the whole buffer starting from element 0
    matrix: NDArray[np.float64] = array.reshape((dim, dim), order="C").copy()
    assert_finite(matrix, name)
    return matrix


def matrix_to_buffer(matrix: NDArray[np.float64]) -> NDArray[np.float64]:
    """Return a flat row-major copy of a matrix."""
    mat: NDArray[np.float64] = np.asarray(matrix, dtype=np.float64)
    if mat.ndim != 2:
        raise InvalidDimensionError("matrix must be 2D")
    return mat.flatten(order="C")


def require_symmetric(
    matrix: NDArray[np.float64],
    name: str,
    atol: float = 0.0,
    rtol: float = 0.0,
) -> None:
    """Raise NonSymmetricInputError unless matrix equals its transpose.

    With both tolerances at zero the comparison is exact.
    """
    if not np.allclose(matrix, matrix.T, atol=atol, rtol=rtol):
        asymmetry: float = float(np.max(np.abs(matrix - matrix.T)))
        raise NonSymmetricInputError(
            f"{name} must be symmetric (max |A - A^T| = {asymmetry:.3e})"
        )
