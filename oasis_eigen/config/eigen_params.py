################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for symmetric eigen decomposition."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any


# Required matrix order (None accepts any order)
INPUT_EXPECTED_DIM: int | None = None
# Re-check symmetry before decomposing
INPUT_CHECK_SYMMETRY: bool = True
# Absolute tolerance for the symmetry check (0 means exact)
INPUT_SYMMETRY_ATOL: float = 0.0
# Relative tolerance for the symmetry check (0 means exact)
INPUT_SYMMETRY_RTOL: float = 0.0

# Solver identifier, "ql" or "jacobi"
SOLVER_METHOD: str = "ql"
# Maximum QL iterations per deflation index
SOLVER_MAX_ITERS: int = 30
# Maximum cyclic Jacobi sweeps
SOLVER_JACOBI_MAX_SWEEPS: int = 50


class EigenParamsError(Exception):
    """Raised when eigen parameter validation fails."""


def _require_non_negative(value: float, name: str) -> None:
    """Require a non-negative value."""
    if value < 0.0:
        raise EigenParamsError(f"{name} must be non-negative")


def _require_positive_int(value: int, name: str) -> None:
    """Require a positive integer value."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise EigenParamsError(f"{name} must be an int")
    if value <= 0:
        raise EigenParamsError(f"{name} must be positive")


def _validate_optional_positive_int(value: int | None, name: str) -> None:
    """Validate an optional positive integer value."""
    if value is None:
        return
    _require_positive_int(value, name)


@dataclass(frozen=True)
class InputParams:
    """Checks applied to the input matrix before decomposition."""

    # Required matrix order (None accepts any order)
    expected_dim: int | None = INPUT_EXPECTED_DIM
    # Re-check symmetry before decomposing
    check_symmetry: bool = INPUT_CHECK_SYMMETRY
    # Absolute tolerance for the symmetry check
    symmetry_atol: float = INPUT_SYMMETRY_ATOL
    # Relative tolerance for the symmetry check
    symmetry_rtol: float = INPUT_SYMMETRY_RTOL


@dataclass(frozen=True)
class SolverParams:
    """Eigen solver selection and iteration limits."""

    # Solver identifier
    method: str = SOLVER_METHOD
    # Maximum QL iterations per deflation index
    max_iters: int = SOLVER_MAX_ITERS
    # Maximum cyclic Jacobi sweeps
    jacobi_max_sweeps: int = SOLVER_JACOBI_MAX_SWEEPS


@dataclass(frozen=True)
class EigenParams:
    """Complete configuration tree for symmetric eigen decomposition."""

    input: InputParams
    solver: SolverParams

    @classmethod
    def defaults(cls) -> EigenParams:
        """Return the default eigen parameter tree."""
        return cls(
            input=InputParams(),
            solver=SolverParams(),
        )

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        _validate_optional_positive_int(self.input.expected_dim, "input.expected_dim")
        if not isinstance(self.input.check_symmetry, bool):
            raise EigenParamsError("input.check_symmetry must be a bool")
        _require_non_negative(self.input.symmetry_atol, "input.symmetry_atol")
        _require_non_negative(self.input.symmetry_rtol, "input.symmetry_rtol")

        if not self.solver.method:
            raise EigenParamsError("solver.method must be set")
        _require_positive_int(self.solver.max_iters, "solver.max_iters")
        _require_positive_int(
            self.solver.jacobi_max_sweeps, "solver.jacobi_max_sweeps"
        )

    def replace(self, **namespace_overrides: Any) -> EigenParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    return value
