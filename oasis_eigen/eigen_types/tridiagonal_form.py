################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Symmetric tridiagonal form produced by Householder reduction."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class TridiagonalForm:
    """Orthogonal similarity of a symmetric matrix to tridiagonal form.

    The source matrix A satisfies V^T A V = T, where T has diagonal d and
    off-diagonal e.

    Attributes:
        transform: Orthogonal matrix V, shape (N, N)
        diagonal: Diagonal d of T, shape (N,)
        off_diagonal: Off-diagonal of T, shape (N,). Entry i couples rows
            i - 1 and i, so entry 0 is always zero
    """

    transform: NDArray[np.float64]
    diagonal: NDArray[np.float64]
    off_diagonal: NDArray[np.float64]

    def __post_init__(self) -> None:
        """Coerce arrays to float64 copies and validate shapes."""
        transform: NDArray[np.float64] = np.array(
            self.transform, dtype=np.float64, copy=True
        )
        diagonal: NDArray[np.float64] = np.array(
            self.diagonal, dtype=np.float64, copy=True
        )
        off_diagonal: NDArray[np.float64] = np.array(
            self.off_diagonal, dtype=np.float64, copy=True
        )

        if diagonal.ndim != 1 or diagonal.size == 0:
            raise ValueError("diagonal must be a non-empty 1D array")
        dim: int = int(diagonal.size)
        if off_diagonal.shape != (dim,):
            raise ValueError(f"off_diagonal must have shape ({dim},)")
        if transform.shape != (dim, dim):
            raise ValueError(f"transform must have shape ({dim}, {dim})")
        if off_diagonal[0] != 0.0:
            raise ValueError("off_diagonal[0] must be zero")

        object.__setattr__(self, "transform", transform)
        object.__setattr__(self, "diagonal", diagonal)
        object.__setattr__(self, "off_diagonal", off_diagonal)

    @property
    def dim(self) -> int:
        """Return the matrix order N."""
        return int(self.diagonal.size)

    def to_matrix(self) -> NDArray[np.float64]:
        """Return the dense tridiagonal matrix T."""
        T: NDArray[np.float64] = np.diag(self.diagonal)
        if self.dim > 1:
            rows: NDArray[np.intp] = np.arange(1, self.dim)
            T[rows, rows - 1] = self.off_diagonal[1:]
            T[rows - 1, rows] = self.off_diagonal[1:]
        return T
