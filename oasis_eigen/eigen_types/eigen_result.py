################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Result types for symmetric eigen decomposition."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class EigenPair:
    """One eigenvalue with its unit eigenvector.

    Attributes:
        eigenvalue: Real eigenvalue
        eigenvector: Unit-norm eigenvector, shape (N,)
    """

    eigenvalue: float
    eigenvector: NDArray[np.float64]

    def __post_init__(self) -> None:
        """Validate the eigenpair fields."""
        eigenvector: NDArray[np.float64] = np.array(
            self.eigenvector, dtype=np.float64, copy=True
        )
        if eigenvector.ndim != 1 or eigenvector.size == 0:
            raise ValueError("eigenvector must be a non-empty 1D array")
        if not np.all(np.isfinite(eigenvector)):
            raise ValueError("eigenvector must be finite")
        if not np.isfinite(self.eigenvalue):
            raise ValueError("eigenvalue must be finite")
        object.__setattr__(self, "eigenvalue", float(self.eigenvalue))
        object.__setattr__(self, "eigenvector", eigenvector)


@dataclass(frozen=True)
class EigenResult:
    """Eigenvalues and eigenvectors of a real symmetric matrix.

    Attributes:
        eigenvalues: Eigenvalues in non-decreasing order, shape (N,)
        eigenvectors: Orthogonal matrix whose column i is the unit
            eigenvector for eigenvalues[i], shape (N, N)
        iterations: QL iterations spent per deflation index, or a single
            sweep count for the Jacobi method
        method: Name of the solver that produced the result
    """

    eigenvalues: NDArray[np.float64]
    eigenvectors: NDArray[np.float64]
    iterations: tuple[int, ...] = ()
    method: str = "ql"

    def __post_init__(self) -> None:
        """Coerce arrays to float64 copies and validate shapes and order."""
        eigenvalues: NDArray[np.float64] = np.array(
            self.eigenvalues, dtype=np.float64, copy=True
        )
        eigenvectors: NDArray[np.float64] = np.array(
            self.eigenvectors, dtype=np.float64, copy=True
        )

        if eigenvalues.ndim != 1 or eigenvalues.size == 0:
            raise ValueError("eigenvalues must be a non-empty 1D array")
        dim: int = int(eigenvalues.size)
        if eigenvectors.shape != (dim, dim):
            raise ValueError(f"eigenvectors must have shape ({dim}, {dim})")
        if not np.all(np.isfinite(eigenvalues)):
            raise ValueError("eigenvalues must be finite")
        if not np.all(np.isfinite(eigenvectors)):
            raise ValueError("eigenvectors must be finite")
        if np.any(np.diff(eigenvalues) < 0.0):
            raise ValueError("eigenvalues must be in non-decreasing order")
        for count in self.iterations:
            if not isinstance(count, int) or isinstance(count, bool):
                raise ValueError("iterations must contain ints")
            if count < 0:
                raise ValueError("iterations must be non-negative")

        object.__setattr__(self, "eigenvalues", eigenvalues)
        object.__setattr__(self, "eigenvectors", eigenvectors)
        object.__setattr__(self, "iterations", tuple(self.iterations))

    @property
    def dim(self) -> int:
        """Return the matrix order N."""
        return int(self.eigenvalues.size)

    def pairs(self) -> tuple[EigenPair, ...]:
        """Return the eigenpairs in ascending eigenvalue order."""
        return tuple(
            EigenPair(
                eigenvalue=float(self.eigenvalues[i]),
                eigenvector=self.eigenvectors[:, i],
            )
            for i in range(self.dim)
        )

    def reconstruct(self) -> NDArray[np.float64]:
        """Return V diag(d) V^T."""
        V: NDArray[np.float64] = self.eigenvectors
        return (V * self.eigenvalues) @ V.T

    def orthogonality_error(self) -> float:
        """Return max |V^T V - I|."""
        V: NDArray[np.float64] = self.eigenvectors
        gram: NDArray[np.float64] = V.T @ V
        return float(np.max(np.abs(gram - np.eye(self.dim, dtype=np.float64))))

    def residual(self, matrix: NDArray[np.float64]) -> float:
        """Return max |A V - V diag(d)| for the given source matrix."""
        A: NDArray[np.float64] = np.asarray(matrix, dtype=np.float64)
        if A.shape != (self.dim, self.dim):
            raise ValueError(f"matrix must have shape ({self.dim}, {self.dim})")
        V: NDArray[np.float64] = self.eigenvectors
        return float(np.max(np.abs(A @ V - V * self.eigenvalues)))

    def eigenvectors_buffer(self) -> NDArray[np.float64]:
        """Return the eigenvector matrix as a flat row-major buffer."""
        return self.eigenvectors.flatten(order="C")
