################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Eigenvalues and eigenvectors of small real symmetric matrices."""

from __future__ import annotations

from oasis_eigen.config.eigen_config import EigenConfig
from oasis_eigen.config.eigen_params import EigenParams
from oasis_eigen.eigen_types.eigen_errors import ConvergenceExceededError
from oasis_eigen.eigen_types.eigen_errors import EigenDecompositionError
from oasis_eigen.eigen_types.eigen_errors import InvalidDimensionError
from oasis_eigen.eigen_types.eigen_errors import NonFiniteError
from oasis_eigen.eigen_types.eigen_errors import NonSymmetricInputError
from oasis_eigen.eigen_types.eigen_result import EigenPair
from oasis_eigen.eigen_types.eigen_result import EigenResult
from oasis_eigen.solver.eigen_decomposition import EigenSolver
from oasis_eigen.solver.eigen_decomposition import eigen_decomposition


__all__ = [
    "ConvergenceExceededError",
    "EigenConfig",
    "EigenDecompositionError",
    "EigenPair",
    "EigenParams",
    "EigenResult",
    "EigenSolver",
    "InvalidDimensionError",
    "NonFiniteError",
    "NonSymmetricInputError",
    "eigen_decomposition",
]
