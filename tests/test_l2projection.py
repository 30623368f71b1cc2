import numpy as np
import pytest

from femkit.intpoint import IntPointData
from femkit.l2projection import L2Projection, PostProcVar


def _bc(bc_type=0, value=3.0, big=1.0):
    return L2Projection(bc_type, 2, [[0.0]], [[0.0]], [[value]], big_number=big)


def _data():
    data = IntPointData()
    data.phi = np.array([1.0, 0.0, 0.0])
    data.x = np.array([0.5, 0.0, 0.0])
    return data


def test_dirichlet_contribution_is_penalised():
    bc = _bc(0, value=3.0, big=10.0)
    ek = np.zeros((3, 3))
    ef = np.zeros((3, 1))
    bc.contribute(_data(), 0.5, ek, ef)
    assert ek[0, 0] == pytest.approx(10.0 * 0.5)
    assert ef[0, 0] == pytest.approx(10.0 * 3.0 * 0.5)
    assert np.count_nonzero(ek) == 1
    assert np.count_nonzero(ef) == 1


def test_contributions_accumulate():
    bc = _bc(0, value=3.0, big=10.0)
    ek = np.zeros((3, 3))
    ef = np.zeros(3)
    bc.contribute(_data(), 0.5, ek, ef)
    first_ek, first_ef = ek.copy(), ef.copy()
    bc.contribute(_data(), 0.5, ek, ef)
    assert np.allclose(ek, 2 * first_ek)
    assert np.allclose(ef, 2 * first_ef)


def test_neumann_only_loads():
    bc = _bc(1, value=3.0)
    ek = np.zeros((3, 3))
    ef = np.zeros((3, 1))
    bc.contribute(_data(), 0.5, ek, ef)
    assert np.all(ek == 0.0)
    assert ef[:, 0] == pytest.approx([3.0 * 0.5, 0.0, 0.0])


def test_exact_solution_overrides_value():
    bc = _bc(1, value=3.0)
    bc.set_exact_solution(lambda x: (np.array([x[0]]), np.zeros((3, 1))))
    ef = np.zeros((3, 1))
    bc.contribute(_data(), 1.0, np.zeros((3, 3)), ef)
    assert ef[0, 0] == pytest.approx(0.5)


def test_unknown_bc_type_raises():
    bc = _bc(7)
    with pytest.raises(ValueError):
        bc.contribute(_data(), 1.0, np.zeros((3, 3)), np.zeros((3, 1)))


def test_more_than_one_state_raises():
    bc = L2Projection(0, 2, np.zeros((2, 2)), [[0.0]], [[0.0]])
    assert bc.n_state() == 2
    with pytest.raises(ValueError):
        bc.contribute(_data(), 1.0, np.zeros((3, 3)), np.zeros((3, 1)))


def test_error_norms():
    bc = _bc()
    errors = np.zeros(bc.n_eval_errors())
    bc.contribute_error(_data(), np.zeros(1), np.zeros((1, 1)), errors)
    assert bc.n_eval_errors() == 3
    assert np.all(errors == 0.0)


def test_variable_names():
    bc = _bc()
    assert bc.variable_index("Solution") is PostProcVar.SOL
    assert bc.variable_index("Derivative") is PostProcVar.DSOL
    assert bc.variable_index(PostProcVar.SOL) is PostProcVar.SOL
    with pytest.raises(ValueError):
        bc.variable_index("Flux")
    with pytest.raises(ValueError):
        bc.variable_index(PostProcVar.NONE)


def test_n_solution_variables():
    bc = _bc()
    assert bc.n_solution_variables(PostProcVar.SOL) == bc.n_state()
    assert bc.n_solution_variables(PostProcVar.DSOL) == bc.n_state()
    with pytest.raises(ValueError):
        bc.n_solution_variables(PostProcVar.NONE)


def test_post_process_solution():
    bc = _bc()
    data = IntPointData()
    data.solution = np.array([5.0])
    data.dsoldx = np.array([[-5.0], [2.0]])
    assert bc.post_process_solution(data, PostProcVar.SOL) == pytest.approx([5.0])
    assert bc.post_process_solution(data, PostProcVar.DSOL) == pytest.approx([-5.0, 2.0])
    assert bc.post_process_solution(data, 4).size == 0
    with pytest.raises(ValueError):
        bc.post_process_solution(data, PostProcVar.NONE)
    with pytest.raises(ValueError):
        bc.post_process_solution(data, 9)