"""Boundary statement imposing values by penalised L2 projection."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Sequence

import numpy as np

from femkit.intpoint import IntPointData

ExactSolution = Callable[[np.ndarray], tuple[Sequence[float], np.ndarray]]


class PostProcVar(IntEnum):
    """Post-processing variables of the projection."""

    NONE = 0
    SOL = 1
    DSOL = 2


_NAMES = {"Solution": PostProcVar.SOL, "Derivative": PostProcVar.DSOL}


class L2Projection:
    """Boundary condition statement.

    Type 0 imposes the value with a large penalty (Dirichlet); type 1 adds the
    value to the load vector (Neumann). The value is ``val2[0, 0]`` unless an
    exact solution is set, which then supplies it at each point.
    """

    def __init__(
        self,
        bc_type: int,
        material_id: int,
        projection: Sequence[Sequence[float]],
        val1: Sequence[Sequence[float]],
        val2: Sequence[Sequence[float]],
        big_number: float = 1.0e12,
    ) -> None:
        self.bc_type = bc_type
        self.material_id = material_id
        self.projection = np.atleast_2d(np.asarray(projection, dtype=float))
        self.val1 = np.atleast_2d(np.asarray(val1, dtype=float))
        self.val2 = np.atleast_2d(np.asarray(val2, dtype=float))
        self.big_number = big_number
        self.exact: ExactSolution | None = None

    def set_exact_solution(self, exact: ExactSolution | None) -> None:
        """Set a function mapping a point to ``(values, derivatives)``."""
        self.exact = exact

    def n_state(self) -> int:
        return int(self.projection.shape[0])

    def contribute(
        self, data: IntPointData, weight: float, ek: np.ndarray, ef: np.ndarray
    ) -> None:
        """Add the contribution of one integration point to ``ek`` and ``ef`` in place."""
        nstate = self.n_state()
        if nstate != 1:
            raise ValueError(f"L2Projection supports one state variable, not {nstate}")
        phi = np.asarray(data.phi, dtype=float).reshape(-1)
        result = np.array([self.val2[0, 0]])
        if self.exact is not None:
            values, _ = self.exact(np.asarray(data.x, dtype=float))
            result = np.asarray(values, dtype=float).reshape(-1)[:nstate]

        if self.bc_type == 0:
            ef += (self.big_number * result[0] * weight * phi).reshape(ef.shape)
            ek += self.big_number * weight * np.outer(phi, phi)
        elif self.bc_type == 1:
            ef += (weight * np.outer(phi, result)).reshape(ef.shape)
        else:
            raise ValueError(f"boundary condition type {self.bc_type} is not supported")

    def n_eval_errors(self) -> int:
        return 3

    def contribute_error(
        self,
        data: IntPointData,
        u_exact: np.ndarray,
        du_exact: np.ndarray,
        errors: np.ndarray,
    ) -> None:
        """Boundary statements add nothing to the error norms."""

    def variable_index(self, name: str | PostProcVar) -> PostProcVar:
        if isinstance(name, PostProcVar):
            if name in (PostProcVar.SOL, PostProcVar.DSOL):
                return name
            raise ValueError(f"variable {name!r} is not available")
        try:
            return _NAMES[name]
        except KeyError:
            raise ValueError(f"unknown post-processing variable {name!r}") from None

    def n_solution_variables(self, var: PostProcVar | int) -> int:
        if int(var) in (PostProcVar.SOL, PostProcVar.DSOL):
            return self.n_state()
        raise ValueError(f"variable {var!r} is not available")

    def post_process_solution(self, data: IntPointData, var: PostProcVar | int) -> np.ndarray:
        """Return the requested variable at the integration point."""
        index = int(var)
        if index == PostProcVar.SOL:
            return np.asarray(data.solution, dtype=float).reshape(-1)[: self.n_state()].copy()
        if index == PostProcVar.DSOL:
            return np.asarray(data.dsoldx, dtype=float).reshape(-1).copy()
        if 3 <= index <= 6:
            return np.zeros(0)
        raise ValueError(f"variable index {index} is not available")