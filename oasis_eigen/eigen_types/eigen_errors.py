################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Failure kinds reported by the symmetric eigen solver."""

from __future__ import annotations


class EigenDecompositionError(Exception):
    """Raised when a symmetric eigen decomposition cannot be produced."""


class InvalidDimensionError(EigenDecompositionError):
    """Raised when the input is not square or has an unexpected size."""


class NonFiniteError(EigenDecompositionError):
    """Raised when the input contains NaN or infinite entries."""


class NonSymmetricInputError(EigenDecompositionError):
    """Raised when the input matrix fails the symmetry check."""


class ConvergenceExceededError(EigenDecompositionError):
    """Raised when an iteration cap is hit before convergence.

    Attributes:
        index: Deflation index (or -1 for whole-matrix sweeps) that failed
        iterations: Number of iterations spent before giving up
    """

    def __init__(self, index: int, iterations: int) -> None:
        """Record the failing index and the iteration count."""
        if index < 0:
            message: str = f"no convergence after {iterations} sweeps"
        else:
            message = f"no convergence at index {index} after {iterations} iterations"
        super().__init__(message)
        self.index: int = index
        self.iterations: int = iterations
