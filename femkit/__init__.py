"""Finite element building blocks: quadrature rules, Jacobians, integration point data and L2 projection."""

__version__ = "0.1.0"

__all__ = [
    "intrule",
    "intrule_tetrahedron",
    "jacobian",
    "intpoint",
    "l2projection",
]