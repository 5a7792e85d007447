################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Type definitions for symmetric eigen decomposition."""

from __future__ import annotations

from oasis_eigen.eigen_types.eigen_errors import ConvergenceExceededError
from oasis_eigen.eigen_types.eigen_errors import EigenDecompositionError
from oasis_eigen.eigen_types.eigen_errors import InvalidDimensionError
from oasis_eigen.eigen_types.eigen_errors import NonFiniteError
from oasis_eigen.eigen_types.eigen_errors import NonSymmetricInputError
from oasis_eigen.eigen_types.eigen_result import EigenPair
from oasis_eigen.eigen_types.eigen_result import EigenResult
from oasis_eigen.eigen_types.tridiagonal_form import TridiagonalForm


__all__ = [
    "ConvergenceExceededError",
    "EigenDecompositionError",
    "EigenPair",
    "EigenResult",
    "InvalidDimensionError",
    "NonFiniteError",
    "NonSymmetricInputError",
    "TridiagonalForm",
]
