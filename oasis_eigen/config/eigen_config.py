################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""High-level configuration wrapper for symmetric eigen decomposition."""

from __future__ import annotations

from dataclasses import dataclass

from .eigen_params import EigenParams
from .eigen_params import EigenParamsError


# Solver identifiers accepted by the decomposition entry point
SUPPORTED_METHODS: frozenset[str] = frozenset({"ql", "jacobi"})


class EigenConfigError(Exception):
    """Raised when eigen configuration validation fails."""


@dataclass(frozen=True)
class EigenConfig:
    """Convenience wrapper around eigen parameters."""

    params: EigenParams

    def __init__(self, params: EigenParams) -> None:
        """Initialize the configuration wrapper and validate."""
        object.__setattr__(self, "params", params)
        self.validate()

    @classmethod
    def defaults(cls) -> EigenConfig:
        """Return a configuration built from default parameters."""
        return cls(EigenParams.defaults())

    def validate(self) -> None:
        """Validate parameter invariants and cross-namespace policies."""
        try:
            self.params.validate()
        except EigenParamsError as exc:
            raise EigenConfigError(str(exc)) from exc

        if self.params.solver.method not in SUPPORTED_METHODS:
            raise EigenConfigError("solver.method must be 'ql' or 'jacobi'")

    def method(self) -> str:
        """Return the configured solver identifier."""
        return self.params.solver.method

    def max_iters(self) -> int:
        """Return the QL iteration cap per deflation index."""
        return self.params.solver.max_iters

    def expected_dim(self) -> int | None:
        """Return the required matrix order, if any."""
        return self.params.input.expected_dim
