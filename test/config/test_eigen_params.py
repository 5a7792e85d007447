################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for eigen parameter schema."""

from __future__ import annotations

import dataclasses
from typing import Any

import pytest

from oasis_eigen.config.eigen_params import EigenParams
from oasis_eigen.config.eigen_params import EigenParamsError
from oasis_eigen.config.eigen_params import InputParams
from oasis_eigen.config.eigen_params import SolverParams


def test_defaults_validate() -> None:
    """Defaults should validate successfully."""
    params: EigenParams = EigenParams.defaults()
    params.validate()
    assert params.solver.method == "ql"
    assert params.solver.max_iters == 30
    assert params.input.check_symmetry


@pytest.mark.parametrize(
    "overrides",
    [
        {"input": InputParams(expected_dim=0)},
        {"input": InputParams(symmetry_atol=-1.0)},
        {"input": InputParams(symmetry_rtol=-1.0)},
        {"solver": SolverParams(method="")},
        {"solver": SolverParams(max_iters=0)},
        {"solver": SolverParams(jacobi_max_sweeps=-3)},
    ],
)
def test_invalid_values(overrides: dict[str, Any]) -> None:
    """Invalid values should raise EigenParamsError."""
    params: EigenParams = EigenParams.defaults().replace(**overrides)
    with pytest.raises(EigenParamsError):
        params.validate()


def test_non_int_iteration_cap() -> None:
    """Non-integer iteration caps should be rejected."""
    params: EigenParams = EigenParams.defaults().replace(
        solver=dataclasses.replace(EigenParams.defaults().solver, max_iters=2.5)
    )
    with pytest.raises(EigenParamsError):
        params.validate()


def test_as_nested_dict() -> None:
    """Nested dict should mirror the namespaces."""
    nested: dict[str, Any] = EigenParams.defaults().as_nested_dict()
    assert nested["solver"]["method"] == "ql"
    assert nested["input"]["expected_dim"] is None
