################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for small 3x3 symmetric matrix helpers."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.typing import NDArray

from oasis_eigen.eigen_types.eigen_errors import InvalidDimensionError
from oasis_eigen.eigen_types.eigen_errors import NonFiniteError
from oasis_eigen.eigen_types.eigen_result import EigenResult
from oasis_eigen.math_utils.small_linalg3 import Mat3


def test_eig_3x3() -> None:
    """Checks the 3x3 decomposition against the eigen-relation."""
    A: NDArray[np.float64] = np.array(
        [[2.0, 0.0, 0.0], [0.0, 3.0, 4.0], [0.0, 4.0, 9.0]], dtype=float
    )
    result: EigenResult = Mat3.eig(A)
    assert np.allclose(result.eigenvalues, [1.0, 2.0, 11.0])
    assert np.allclose(A @ result.eigenvectors, result.eigenvectors * result.eigenvalues)


def test_eig_rejects_other_sizes() -> None:
    """Checks only 3x3 matrices are accepted."""
    with pytest.raises(InvalidDimensionError):
        Mat3.eig(np.eye(4, dtype=float))


def test_sym() -> None:
    """Checks the symmetric part is exactly symmetric."""
    mat: NDArray[np.float64] = np.array(
        [[1.0, 2.0, 0.0], [0.0, 1.0, 3.0], [1.0, 0.0, 1.0]], dtype=float
    )
    sym: NDArray[np.float64] = Mat3.sym(mat)
    assert np.array_equal(sym, sym.T)
    assert sym[0, 1] == 1.0


def test_is_spd() -> None:
    """Checks SPD detection for valid and invalid matrices."""
    spd: NDArray[np.float64] = np.array(
        [[2.0, 0.0, 0.0], [0.0, 3.0, 0.0], [0.0, 0.0, 4.0]], dtype=float
    )
    non_spd: NDArray[np.float64] = np.array(
        [[0.0, 1.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, -1.0]], dtype=float
    )
    assert Mat3.is_spd(spd)
    assert not Mat3.is_spd(non_spd)
    assert not Mat3.is_spd(np.eye(2, dtype=float))


def test_clamp_spd() -> None:
    """Checks eigenvalue clamping and symmetry."""
    mat: NDArray[np.float64] = np.array(
        [[3.0, 1.0, 0.0], [1.0, 0.5, 0.0], [0.0, 0.0, 0.1]], dtype=float
    )
    clamped: NDArray[np.float64] = Mat3.clamp_spd(mat, eig_min=0.2, eig_max=2.0)
    eigvals: NDArray[np.float64] = Mat3.eig(clamped).eigenvalues
    assert np.all(eigvals >= 0.2 - 1e-12)
    assert np.all(eigvals <= 2.0 + 1e-12)
    assert np.array_equal(clamped, clamped.T)
    with pytest.raises(ValueError):
        Mat3.clamp_spd(mat, eig_min=2.0, eig_max=1.0)


def test_principal_axes() -> None:
    """Checks the dominant axis of an elongated point cloud."""
    rng: np.random.Generator = np.random.default_rng(0)
    direction: NDArray[np.float64] = np.array([1.0, 2.0, 2.0], dtype=float) / 3.0
    t: NDArray[np.float64] = rng.normal(scale=10.0, size=500)
    noise: NDArray[np.float64] = rng.normal(scale=0.01, size=(500, 3))
    points: NDArray[np.float64] = np.outer(t, direction) + noise + 5.0

    variances, axes = Mat3.principal_axes(points)
    assert np.all(np.diff(variances) <= 0.0)
    assert abs(float(np.dot(axes[:, 0], direction))) > 0.999
    assert np.allclose(axes.T @ axes, np.eye(3), atol=1e-9)


def test_principal_axes_rejects() -> None:
    """Checks malformed point clouds are rejected."""
    with pytest.raises(InvalidDimensionError):
        Mat3.principal_axes(np.zeros((5, 2), dtype=float))
    with pytest.raises(InvalidDimensionError):
        Mat3.principal_axes(np.zeros((1, 3), dtype=float))
    with pytest.raises(NonFiniteError):
        Mat3.principal_axes(np.array([[0.0, 0.0, 0.0], [np.nan, 0.0, 0.0]]))
