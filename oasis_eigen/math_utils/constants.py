################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Numeric constants and finiteness checks."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from oasis_eigen.eigen_types.eigen_errors import NonFiniteError


class NumericConstants:
    """Floating-point constants used by the eigen solvers."""

    # Unit roundoff of IEEE 754 double precision
    MACHINE_EPS: float = 2.0**-52


def assert_finite(x: NDArray[np.float64], name: str) -> None:
    """Raise NonFiniteError when the array contains non-finite values."""
    if not np.all(np.isfinite(x)):
        raise NonFiniteError(f"{name} must be finite")
