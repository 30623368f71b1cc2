import math

import numpy as np
import pytest

from femkit.intrule_tetrahedron import IntRuleTetrahedron, symmetric_cubature_rule

POINT_COUNTS = [1, 1, 4, 8, 14, 14, 24, 35, 46, 61, 81, 109, 140, 171, 236]


def _nfunc_triangle(order):
    return (order + 1) * (order + 2) // 2


def _indexy(index, order):
    orderx = 0
    counter = 0
    incr = order
    while index > counter + incr and incr > 0:
        counter += incr + 1
        orderx += 1
        incr -= 1
    return orderx, index - counter


def _indexyz(index, order):
    counter = 0
    corder = order
    incr = _nfunc_triangle(corder)
    orderz = 0
    while index >= counter + incr and incr > 0:
        counter += incr
        orderz += 1
        corder -= 1
        incr = _nfunc_triangle(corder)
    ox, oy = _indexy(index - counter, corder)
    return ox, oy, orderz


def _nfunc(order):
    return sum(_nfunc_triangle(i) for i in range(order + 1))


@pytest.mark.parametrize("order", range(15))
def test_number_of_points(order):
    rule = IntRuleTetrahedron(order)
    assert rule.n_points() == POINT_COUNTS[order]


@pytest.mark.parametrize("order", range(15))
def test_weights_sum_to_volume(order):
    rule = IntRuleTetrahedron(order)
    assert sum(w for _, w in rule.points()) == pytest.approx(1.0 / 6.0, abs=1e-9)


@pytest.mark.parametrize("order", range(15))
def test_points_inside_tetrahedron(order):
    rule = IntRuleTetrahedron(order)
    for co, _ in rule.points():
        assert co.shape == (3,)
        assert np.all(co >= -1e-12)
        assert co.sum() <= 1.0 + 1e-12


@pytest.mark.parametrize("order", range(6))
def test_monomials_integrated_exactly(order):
    rule = IntRuleTetrahedron(order)
    for index in range(_nfunc(order)):
        ox, oy, oz = _indexyz(index, order)
        computed = sum(
            w * co[0] ** ox * co[1] ** oy * co[2] ** oz for co, w in rule.points()
        )
        correct = (
            math.gamma(ox + 1.0) * math.gamma(oy + 1.0) * math.gamma(oz + 1.0)
            / math.gamma(4.0 + ox + oy + oz)
        )
        assert computed == pytest.approx(correct, abs=1e-8)


def test_one_point_rule_is_centroid():
    rule = IntRuleTetrahedron(1)
    co, w = rule.point(0)
    np.testing.assert_allclose(co, [0.25, 0.25, 0.25])
    assert w == pytest.approx(1.0 / 6.0)


def test_order_zero_and_one_share_rule():
    p0, w0 = symmetric_cubature_rule(0)
    p1, w1 = symmetric_cubature_rule(1)
    np.testing.assert_array_equal(p0, p1)
    np.testing.assert_array_equal(w0, w1)


def test_high_orders_capped_at_fourteen():
    p20, w20 = symmetric_cubature_rule(20)
    p14, w14 = symmetric_cubature_rule(14)
    assert p20.shape == (236, 3)
    np.testing.assert_array_equal(p20, p14)
    np.testing.assert_array_equal(w20, w14)


def test_cubature_rule_negative_order():
    with pytest.raises(ValueError):
        symmetric_cubature_rule(-1)


def test_constructor_rejects_out_of_range():
    with pytest.raises(ValueError):
        IntRuleTetrahedron(-1)
    with pytest.raises(ValueError):
        IntRuleTetrahedron(IntRuleTetrahedron.max_order + 1)


def test_set_order_rejects_out_of_range():
    rule = IntRuleTetrahedron()
    with pytest.raises(ValueError):
        rule.set_order(-1)
    with pytest.raises(ValueError):
        rule.set_order(IntRuleTetrahedron.max_order + 1)
    assert rule.order == 0
    assert rule.n_points() == 1


def test_set_order_changes_rule():
    rule = IntRuleTetrahedron(2)
    rule.set_order(3)
    assert rule.order == 3
    assert rule.n_points() == 8


def test_point_index_out_of_range():
    rule = IntRuleTetrahedron(2)
    with pytest.raises(IndexError):
        rule.point(4)


def test_symmetric_orbit_order_two():
    points, weights = symmetric_cubature_rule(2)
    np.testing.assert_allclose(weights, np.full(4, 0.25 / 6.0))
    sorted_rows = sorted(tuple(round(v, 12) for v in row) for row in points)
    assert len(set(sorted_rows)) == 4
    for row in points:
        bary = sorted([1.0 - row.sum(), *row])
        np.testing.assert_allclose(bary[:3], [bary[0]] * 3)