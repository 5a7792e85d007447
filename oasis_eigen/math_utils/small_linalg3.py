################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Small 3x3 symmetric matrix helpers."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from oasis_eigen.config.eigen_params import EigenParams
from oasis_eigen.config.eigen_params import InputParams
from oasis_eigen.eigen_types.eigen_errors import InvalidDimensionError
from oasis_eigen.eigen_types.eigen_result import EigenResult
from oasis_eigen.math_utils.constants import assert_finite
from oasis_eigen.math_utils.validation import as_square_matrix
from oasis_eigen.solver.eigen_decomposition import eigen_decomposition


_EIG3_PARAMS: EigenParams = EigenParams.defaults().replace(
    input=InputParams(expected_dim=3)
)


class Mat3:
    """Matrix utilities for 3x3 symmetric matrices."""

    @staticmethod
    def eig(A: NDArray[np.float64]) -> EigenResult:
        """Return the ascending eigen decomposition of a symmetric 3x3 matrix."""
        return eigen_decomposition(A, _EIG3_PARAMS)

    @staticmethod
    def sym(A: NDArray[np.float64]) -> NDArray[np.float64]:
        """Return the symmetric part of a 3x3 matrix."""
        mat: NDArray[np.float64] = as_square_matrix(A, "A", expected_dim=3)
        return 0.5 * (mat + mat.T)

    @staticmethod
    def is_spd(A: NDArray[np.float64], tol: float = 1e-12) -> bool:
        """Check whether a matrix is symmetric positive definite."""
        mat: NDArray[np.float64] = np.asarray(A, dtype=float)
        if mat.shape != (3, 3):
            return False
        if not np.all(np.isfinite(mat)):
            return False
        if not np.allclose(mat, mat.T, atol=tol):
            return False
        eigvals: NDArray[np.float64] = Mat3.eig(Mat3.sym(mat)).eigenvalues
        return bool(np.all(eigvals > tol))

    @staticmethod
    def clamp_spd(
        A: NDArray[np.float64],
        eig_min: float,
        eig_max: float,
    ) -> NDArray[np.float64]:
        """Clamp eigenvalues of a symmetric matrix and return SPD matrix."""
        if eig_min > eig_max:
            raise ValueError("eig_min must be <= eig_max")

        sym_mat: NDArray[np.float64] = Mat3.sym(A)
        result: EigenResult = Mat3.eig(sym_mat)
        clamped: NDArray[np.float64] = np.clip(result.eigenvalues, eig_min, eig_max)
        V: NDArray[np.float64] = result.eigenvectors
        return Mat3.sym((V * clamped) @ V.T)

    @staticmethod
    def principal_axes(
        points: NDArray[np.float64],
    ) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Return (variances, axes) of a 3D point cloud.

        Variances are sorted largest first and column i of axes is the unit
        direction of variances[i].
        """
        pts: NDArray[np.float64] = np.asarray(points, dtype=float)
        if pts.ndim != 2 or pts.shape[1] != 3:
            raise InvalidDimensionError("points must have shape (M, 3)")
        if pts.shape[0] < 2:
            raise InvalidDimensionError("points must contain at least 2 rows")
        assert_finite(pts, "points")

        centered: NDArray[np.float64] = pts - np.mean(pts, axis=0)
        cov: NDArray[np.float64] = (centered.T @ centered) / float(pts.shape[0] - 1)
        result: EigenResult = Mat3.eig(Mat3.sym(cov))
        return result.eigenvalues[::-1].copy(), result.eigenvectors[:, ::-1].copy()
