"""Data gathered at one integration point of a computational element."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


def _empty(*shape: int) -> np.ndarray:
    return np.zeros(shape)


@dataclass
class IntPointData:
    """Geometry, shape functions and solution values at an integration point."""

    weight: float = 0.0
    detjac: float = 0.0
    ksi: np.ndarray = field(default_factory=lambda: _empty(0))
    x: np.ndarray = field(default_factory=lambda: _empty(3))
    gradx: np.ndarray = field(default_factory=lambda: _empty(3, 0))
    axes: np.ndarray = field(default_factory=lambda: _empty(0, 3))
    phi: np.ndarray = field(default_factory=lambda: _empty(0))
    dphidksi: np.ndarray = field(default_factory=lambda: _empty(0, 0))
    dphidx: np.ndarray = field(default_factory=lambda: _empty(0, 0))
    coefs: np.ndarray = field(default_factory=lambda: _empty(0))
    solution: np.ndarray = field(default_factory=lambda: _empty(1))
    dsoldksi: np.ndarray = field(default_factory=lambda: _empty(0, 1))
    dsoldx: np.ndarray = field(default_factory=lambda: _empty(0, 1))

    def compute_solution(self) -> None:
        """Combine the coefficients with the shape functions.

        The coefficients are ordered shape function by shape function, with
        the state variables of one shape function next to each other.
        """
        phi = np.asarray(self.phi, dtype=float).reshape(-1)
        coefs = np.asarray(self.coefs, dtype=float).reshape(-1)
        nshape = phi.size
        if nshape == 0:
            raise ValueError("no shape functions at this integration point")
        if coefs.size == 0 or coefs.size % nshape != 0:
            raise ValueError(
                f"{coefs.size} coefficients do not fit {nshape} shape functions"
            )
        nstate = coefs.size // nshape
        matrix = coefs.reshape(nshape, nstate)
        self.solution = phi @ matrix
        self.dsoldksi = np.asarray(self.dphidksi, dtype=float).reshape(-1, nshape) @ matrix
        self.dsoldx = np.asarray(self.dphidx, dtype=float).reshape(-1, nshape) @ matrix