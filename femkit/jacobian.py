"""Jacobian, local axes and inverse Jacobian of a geometric map."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass
class JacobianData:
    """Jacobian in local axes, the axes themselves, |det| and the inverse Jacobian."""

    jac: np.ndarray
    axes: np.ndarray
    detjac: float
    jacinv: np.ndarray


def _column(gradx: np.ndarray, col: int) -> np.ndarray:
    vec = np.zeros(3)
    rows = min(gradx.shape[0], 3)
    vec[:rows] = gradx[:rows, col]
    return vec


def jacobian(gradx: np.ndarray, dim: int) -> JacobianData:
    """Compute the Jacobian data of an element of dimension ``dim``.

    ``gradx`` holds the derivatives of the map, one column per reference
    direction. For lower-dimensional elements the Jacobian is expressed in an
    orthonormal set of axes tangent to the element.
    """
    grad = np.asarray(gradx, dtype=float)
    if dim == 0:
        return JacobianData(np.zeros((0, 0)), np.zeros((0, 3)), 1.0, np.zeros((0, 0)))
    if grad.ndim != 2 or grad.shape[1] < dim:
        raise ValueError(f"gradient of shape {grad.shape} does not fit dimension {dim}")

    if dim == 1:
        v1 = _column(grad, 0)
        norm = math.sqrt(float(v1 @ v1))
        if norm == 0.0:
            raise ValueError("degenerate element: zero Jacobian")
        jac = np.array([[norm]])
        jacinv = np.array([[1.0 / norm]])
        axes = (v1 / norm).reshape(1, 3)
        return JacobianData(jac, axes, abs(norm), jacinv)

    if dim == 2:
        v1 = _column(grad, 0)
        v2 = _column(grad, 1)
        norm1 = math.sqrt(float(v1 @ v1))
        if norm1 == 0.0:
            raise ValueError("degenerate element: zero Jacobian")
        dot12 = float(v1 @ v2)
        v1_til = v1 / norm1
        v2_til = v2 - dot12 * v1_til / norm1
        norm2 = math.sqrt(float(v2_til @ v2_til))
        if norm2 == 0.0:
            raise ValueError("degenerate element: zero Jacobian")
        jac = np.array([[norm1, dot12 / norm1], [0.0, norm2]])
        det = jac[0, 0] * jac[1, 1] - jac[1, 0] * jac[0, 1]
        jacinv = np.array([
            [jac[1, 1] / det, -jac[0, 1] / det],
            [-jac[1, 0] / det, jac[0, 0] / det],
        ])
        axes = np.vstack([v1_til, v2_til / norm2])
        return JacobianData(jac, axes, abs(det), jacinv)

    if dim == 3:
        jac = np.zeros((3, 3))
        rows = min(grad.shape[0], 3)
        jac[:rows, :] = grad[:rows, :3]
        a = jac
        det = (
            -a[0, 2] * a[1, 1] * a[2, 0]
            + a[0, 1] * a[1, 2] * a[2, 0]
            + a[0, 2] * a[1, 0] * a[2, 1]
            - a[0, 0] * a[1, 2] * a[2, 1]
            - a[0, 1] * a[1, 0] * a[2, 2]
            + a[0, 0] * a[1, 1] * a[2, 2]
        )
        if det == 0.0:
            raise ValueError("degenerate element: zero Jacobian")
        jacinv = np.array([
            [-a[1, 2] * a[2, 1] + a[1, 1] * a[2, 2],
             a[0, 2] * a[2, 1] - a[0, 1] * a[2, 2],
             -a[0, 2] * a[1, 1] + a[0, 1] * a[1, 2]],
            [a[1, 2] * a[2, 0] - a[1, 0] * a[2, 2],
             -a[0, 2] * a[2, 0] + a[0, 0] * a[2, 2],
             a[0, 2] * a[1, 0] - a[0, 0] * a[1, 2]],
            [-a[1, 1] * a[2, 0] + a[1, 0] * a[2, 1],
             a[0, 1] * a[2, 0] - a[0, 0] * a[2, 1],
             -a[0, 1] * a[1, 0] + a[0, 0] * a[1, 1]],
        ]) / det
        return JacobianData(jac, np.eye(3), abs(det), jacinv)

    raise ValueError(f"unsupported element dimension {dim}")