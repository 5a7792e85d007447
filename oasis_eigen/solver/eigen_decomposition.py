################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Eigen decomposition entry points for real symmetric matrices
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike
from numpy.typing import NDArray

from oasis_eigen.config.eigen_config import EigenConfig
from oasis_eigen.config.eigen_params import EigenParams
from oasis_eigen.eigen_types.eigen_result import EigenResult
from oasis_eigen.eigen_types.tridiagonal_form import TridiagonalForm
from oasis_eigen.math_utils.validation import as_square_matrix
from oasis_eigen.math_utils.validation import require_symmetric
from oasis_eigen.solver.diagonalizer import diagonalize
from oasis_eigen.solver.jacobi import jacobi_eigen
from oasis_eigen.solver.tridiagonalizer import tridiagonalize


_LOG: logging.Logger = logging.getLogger(__name__)


class EigenSolver:
    """Stateless symmetric eigen solver bound to a validated configuration.

    The solver holds no per-call state, so one instance may be shared
    between threads decomposing independent matrices.
    """

    def __init__(self, config: EigenConfig | None = None) -> None:
        self._config: EigenConfig = (
            config if config is not None else EigenConfig.defaults()
        )

    @property
    def config(self) -> EigenConfig:
        return self._config

    def solve(self, matrix: ArrayLike) -> EigenResult:
        """Return the ascending eigenvalues and eigenvectors of matrix.

        Raises InvalidDimensionError, NonFiniteError, NonSymmetricInputError
        or ConvergenceExceededError.
        """
        params: EigenParams = self._config.params
        A: NDArray[np.float64] = as_square_matrix(
            matrix, "matrix", expected_dim=params.input.expected_dim
        )
        if params.input.check_symmetry:
            require_symmetric(
                A,
                "matrix",
                atol=params.input.symmetry_atol,
                rtol=params.input.symmetry_rtol,
            )

        result: EigenResult
        if self._config.method() == "jacobi":
            d, V, sweeps = jacobi_eigen(
                A, max_sweeps=params.solver.jacobi_max_sweeps
            )
            result = EigenResult(
                eigenvalues=d,
                eigenvectors=V,
                iterations=(sweeps,),
                method="jacobi",
            )
        else:
            form: TridiagonalForm = tridiagonalize(A)
            d, V, iterations = diagonalize(form, max_iters=self._config.max_iters())
            result = EigenResult(
                eigenvalues=d,
                eigenvectors=V,
                iterations=iterations,
                method="ql",
            )

        _LOG.debug(
            "Decomposed %dx%d matrix with %s in %d iterations",
            result.dim,
            result.dim,
            result.method,
            sum(result.iterations),
        )
        return result


def eigen_decomposition(
    matrix: ArrayLike,
    params: EigenParams | None = None,
) -> EigenResult:
    """Decompose a real symmetric matrix A into V diag(d) V^T.

    Matrices are row-major: matrix[i][j] is row i, column j, and column i
    of the returned eigenvector matrix pairs with eigenvalue i.
    """
    config: EigenConfig = EigenConfig(
        params if params is not None else EigenParams.defaults()
    )
    return EigenSolver(config).solve(matrix)
