# femkit

Building blocks for finite element codes, written around numpy:

- `femkit.intrule` – quadrature rules on reference elements:
  `IntRule0d` (a point), `IntRule1d` (Gauss on [-1, 1], orders 0–5),
  `IntRuleQuad` (tensor Gauss on [-1, 1]², orders 0–5) and
  `IntRuleTriangle` (symmetric rules on the triangle (0,0), (1,0), (0,1),
  orders 0–5), plus the helpers `gauss_legendre` and `gauss_legendre_quad`.
- `femkit.intrule_tetrahedron` – `IntRuleTetrahedron`, symmetric cubature
  on the unit tetrahedron for orders 0–14, and `symmetric_cubature_rule`.
- `femkit.jacobian` – `jacobian(gradx, dim)`, returning a `JacobianData`
  with the Jacobian in local axes, the axes, |det J| and the inverse.
- `femkit.intpoint` – `IntPointData`, the values gathered at one
  integration point, with `compute_solution` to combine coefficients with
  shape functions.
- `femkit.l2projection` – `L2Projection`, a boundary statement that
  imposes a value by penalty (type 0) or adds it to the load vector
  (type 1), and the `PostProcVar` enumeration.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Integration rules

```python
from femkit.intrule import IntRule1d, IntRuleTriangle
from femkit.intrule_tetrahedron import IntRuleTetrahedron

rule = IntRule1d(4)
total = sum(w * x[0] ** 4 for x, w in rule.points())   # 2/5 up to rounding

tri = IntRuleTriangle(2)
print(tri.n_points())          # 3
print(tri.describe())          # one block of coordinates and weight per point

tet = IntRuleTetrahedron(3)
volume = sum(w for _, w in tet.points())   # 1/6
```

Every rule has `order`, `weights`, `n_points()`, `point(index)` (returning
the coordinates and the weight), `points()` and `set_order(order)`. An order
outside the range a rule supports raises `ValueError`, both from the
constructor and from `set_order`; `point` with a bad index raises
`IndexError`.

`gauss_legendre(x1, x2, n)` computes the n-point Gauss–Legendre abscissas
and weights on [x1, x2]; `gauss_legendre_quad(x1, x2, n)` gives the tensor
product rule on the square, with x varying fastest.

## Jacobians

```python
import numpy as np
from femkit.jacobian import jacobian

gradx = np.array([[1.0, 0.0],
                  [1.0, 1.0],
                  [0.0, 0.0]])
data = jacobian(gradx, 2)
print(data.detjac, data.axes, data.jacinv)
```

For lines and surfaces the Jacobian is expressed in orthonormal axes
tangent to the element; for dimension 3 the axes are the identity. A
degenerate map raises `ValueError`.

## Boundary contributions

```python
import numpy as np
from femkit.intpoint import IntPointData
from femkit.l2projection import L2Projection

bc = L2Projection(0, 2, [[0.0]], [[0.0]], [[3.0]])
data = IntPointData(phi=np.array([0.5, 0.5]), x=np.zeros(3))
ek = np.zeros((2, 2))
ef = np.zeros((2, 1))
bc.contribute(data, 1.0, ek, ef)   # adds the penalised terms in place
```

`set_exact_solution` takes a callable mapping a point to
`(values, derivatives)`; when set, its value replaces `val2[0, 0]`.
`post_process_solution(data, var)` returns the solution or its derivative
for `PostProcVar.SOL` and `PostProcVar.DSOL`.

## What the package does not do

femkit has no element geometry classes, no geometric or computational
meshes, no degree-of-freedom bookkeeping, no global assembly and no linear
solver or error-norm driver. It offers no command line and writes no output
files. It supplies the quadrature, Jacobian, integration-point and boundary
pieces that such parts are built from.