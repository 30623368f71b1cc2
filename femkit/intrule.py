"""Numerical integration rules on the reference elements."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import ClassVar, Iterator

import numpy as np

_PI = 3.141592654
_EPS = 1.0e-14


class IntRule(ABC):
    """Quadrature rule: a set of points on a reference element and their weights."""

    dimension: ClassVar[int] = 0
    max_order: ClassVar[int] = 0

    def __init__(self, order: int = 0) -> None:
        self._order = 0
        self._points = np.zeros((0, self.dimension))
        self._weights = np.zeros(0)
        self.set_order(order)

    @property
    def order(self) -> int:
        """Polynomial order the rule integrates exactly."""
        return self._order

    @property
    def weights(self) -> np.ndarray:
        return self._weights.copy()

    def _check_order(self, order: int) -> None:
        if order < 0 or order > self.max_order:
            raise ValueError(
                f"{type(self).__name__}: order {order} outside 0..{self.max_order}"
            )

    @abstractmethod
    def set_order(self, order: int) -> None:
        """Select the points and weights for the given order."""

    def n_points(self) -> int:
        return len(self._weights)

    def point(self, index: int) -> tuple[np.ndarray, float]:
        """Return the coordinates and weight of one integration point."""
        if index < 0 or index >= self.n_points():
            raise IndexError(f"integration point {index} out of range")
        return self._points[index].copy(), float(self._weights[index])

    def points(self) -> Iterator[tuple[np.ndarray, float]]:
        """Iterate over (coordinates, weight) pairs."""
        for index in range(self.n_points()):
            yield self.point(index)

    def describe(self) -> str:
        lines = []
        for index, (co, weight) in enumerate(self.points()):
            lines.append(f"point: {index}")
            lines.extend(f"coord: {c:.10g}" for c in co)
            lines.append(f"weight: {weight:.10g}")
            lines.append("")
        return "\n".join(lines) + ("\n" if lines else "")


class IntRule0d(IntRule):
    """Rule on a point: a single point with weight one."""

    dimension = 0
    max_order = 0

    def __init__(self, order: int = 0) -> None:
        if order != 0:
            raise ValueError("IntRule0d only accepts order 0")
        super().__init__(order)

    def set_order(self, order: int) -> None:
        self._order = 0
        self._points = np.zeros((1, 0))
        self._weights = np.array([1.0])


class IntRule1d(IntRule):
    """Gauss rule on the interval [-1, 1]."""

    dimension = 1
    max_order = 5

    def set_order(self, order: int) -> None:
        self._check_order(order)
        if order <= 1:
            pts, wts = [0.0], [2.0]
        elif order <= 3:
            a = 1.0 / math.sqrt(3.0)
            pts, wts = [-a, a], [1.0, 1.0]
        else:
            a = math.sqrt(3.0 / 5.0)
            pts, wts = [-a, 0.0, a], [5.0 / 9.0, 8.0 / 9.0, 5.0 / 9.0]
        self._order = order
        self._points = np.array(pts, dtype=float).reshape(-1, 1)
        self._weights = np.array(wts, dtype=float)


class IntRuleQuad(IntRule):
    """Tensor Gauss rule on the square [-1, 1] x [-1, 1]."""

    dimension = 2
    max_order = 5

    def set_order(self, order: int) -> None:
        self._check_order(order)
        if order <= 1:
            pts, wts = [(0.0, 0.0)], [4.0]
        elif order <= 3:
            a = 1.0 / math.sqrt(3.0)
            pts = [(-a, -a), (a, -a), (-a, a), (a, a)]
            wts = [1.0] * 4
        else:
            a = math.sqrt(3.0 / 5.0)
            coords = [-a, 0.0, a]
            w1d = [5.0 / 9.0, 8.0 / 9.0, 5.0 / 9.0]
            pts = [(x, y) for y in coords for x in coords]
            wts = [wx * wy for wy in w1d for wx in w1d]
        self._order = order
        self._points = np.array(pts, dtype=float)
        self._weights = np.array(wts, dtype=float)


class IntRuleTriangle(IntRule):
    """Symmetric rule on the triangle with corners (0,0), (1,0), (0,1)."""

    dimension = 2
    max_order = 5

    def set_order(self, order: int) -> None:
        self._check_order(order)
        if order <= 1:
            pts, wts = [(1.0 / 3.0, 1.0 / 3.0)], [0.5]
        elif order == 2:
            pts = [(0.5, 0.5), (0.0, 0.5), (0.5, 0.0)]
            wts = [1.0 / 6.0] * 3
        elif order == 3:
            pts = [(1.0 / 3.0, 1.0 / 3.0), (0.2, 0.2), (0.6, 0.2), (0.2, 0.6)]
            wts = [-27.0 / 96.0, 25.0 / 96.0, 25.0 / 96.0, 25.0 / 96.0]
        elif order == 4:
            root = math.sqrt(38.0 - 44.0 * math.sqrt(2.0 / 5.0))
            a = (8.0 - math.sqrt(10.0) + root) / 18.0
            b = (8.0 - math.sqrt(10.0) - root) / 18.0
            wroot = math.sqrt(213125.0 - 53320.0 * math.sqrt(10.0))
            wa = ((620.0 + wroot) / 3720.0) / 2.0
            wb = ((620.0 - wroot) / 3720.0) / 2.0
            pts = [
                (a, a), (a, 1.0 - 2.0 * a), (1.0 - 2.0 * a, a),
                (b, b), (b, 1.0 - 2.0 * b), (1.0 - 2.0 * b, b),
            ]
            wts = [wa] * 3 + [wb] * 3
        else:
            s15 = math.sqrt(15.0)
            a = (6.0 - s15) / 21.0
            b = (6.0 + s15) / 21.0
            wa = ((155.0 - s15) / 1200.0) / 2.0
            wb = ((155.0 + s15) / 1200.0) / 2.0
            pts = [
                (a, a), (1.0 - 2.0 * a, a), (a, 1.0 - 2.0 * a),
                (b, b), (1.0 - 2.0 * b, b), (b, 1.0 - 2.0 * b),
                (1.0 / 3.0, 1.0 / 3.0),
            ]
            wts = [wa] * 3 + [wb] * 3 + [(9.0 / 40.0) / 2.0]
        self._order = order
        self._points = np.array(pts, dtype=float)
        self._weights = np.array(wts, dtype=float)


def gauss_legendre(x1: float, x2: float, n: int) -> tuple[np.ndarray, np.ndarray]:
    """Compute the n-point Gauss-Legendre rule on [x1, x2].

    Returns the abscissas in increasing order and their weights.
    """
    if n < 1:
        raise ValueError("number of points must be positive")
    co = np.zeros(n)
    w = np.zeros(n)
    m = (n + 1) // 2
    xm = 0.5 * (x2 + x1)
    xl = 0.5 * (x2 - x1)
    for i in range(m):
        z = math.cos(_PI * (i + 0.75) / (n + 0.5))
        while True:
            p1, p2 = 1.0, 0.0
            for j in range(n):
                p3 = p2
                p2 = p1
                p1 = ((2.0 * j + 1.0) * z * p2 - j * p3) / (j + 1)
            pp = n * (z * p1 - p2) / (z * z - 1.0)
            z1 = z
            z = z1 - p1 / pp
            if abs(z - z1) <= _EPS:
                break
        co[i] = xm - xl * z
        co[n - 1 - i] = xm + xl * z
        w[i] = 2.0 * xl / ((1.0 - z * z) * pp * pp)
        w[n - 1 - i] = w[i]
    return co, w


def gauss_legendre_quad(x1: float, x2: float, n: int) -> tuple[np.ndarray, np.ndarray]:
    """Tensor-product Gauss-Legendre rule on [x1, x2]^2.

    Returns an (n*n, 2) array of points, ordered with x varying fastest,
    and the matching weights.
    """
    cox, wx = gauss_legendre(x1, x2, n)
    coy, wy = gauss_legendre(x1, x2, n)
    points = np.array([(cox[j], coy[i]) for i in range(n) for j in range(n)])
    weights = np.array([wx[i] * wy[j] for i in range(n) for j in range(n)])
    return points, weights