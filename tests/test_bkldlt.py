import numpy as np
import pytest

from noripath.bkldlt import BKLDLT, CompInfo, Uplo


def _symmetric(n, seed):
    rng = np.random.default_rng(seed)
    m = rng.standard_normal((n, n))
    return m + m.T, rng.standard_normal(n)


@pytest.mark.parametrize("n", [2, 3, 5, 8, 13])
@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_solves_indefinite_systems(n, seed):
    a, b = _symmetric(n, seed)
    solver = BKLDLT(a)
    assert solver.info is CompInfo.SUCCESSFUL
    x = solver.solve(b)
    np.testing.assert_allclose(a @ x, b, atol=1e-8)


@pytest.mark.parametrize("seed", [4, 5])
def test_upper_triangle_gives_same_result(seed):
    a, b = _symmetric(6, seed)
    lower = BKLDLT(np.tril(a), Uplo.LOWER).solve(b)
    upper = BKLDLT(np.triu(a), Uplo.UPPER).solve(b)
    np.testing.assert_allclose(lower, upper, atol=1e-10)
    np.testing.assert_allclose(a @ upper, b, atol=1e-8)


def test_only_selected_triangle_is_read():
    a, b = _symmetric(5, 7)
    garbage = np.tril(a) + np.triu(np.full((5, 5), 99.0), 1)
    np.testing.assert_allclose(a @ BKLDLT(garbage).solve(b), b, atol=1e-8)


def test_shift_is_subtracted_from_diagonal():
    a, b = _symmetric(6, 9)
    shift = 0.75
    x = BKLDLT(a, Uplo.LOWER, shift).solve(b)
    np.testing.assert_allclose((a - shift * np.eye(6)) @ x, b, atol=1e-8)


def test_positive_definite_matches_numpy():
    rng = np.random.default_rng(11)
    m = rng.standard_normal((7, 7))
    a = m @ m.T + 7 * np.eye(7)
    b = rng.standard_normal(7)
    np.testing.assert_allclose(BKLDLT(a).solve(b), np.linalg.solve(a, b), atol=1e-10)


def test_two_by_two_pivot_swaps_entries():
    solver = BKLDLT([[0.0, 1.0], [1.0, 0.0]])
    assert solver.info is CompInfo.SUCCESSFUL
    np.testing.assert_allclose(solver.solve([3.0, 5.0]), [5.0, 3.0])


def test_zero_diagonal_needs_pivoting():
    a = np.array([[0.0, 2.0, 1.0], [2.0, 0.0, 3.0], [1.0, 3.0, 0.0]])
    b = np.array([1.0, -2.0, 4.0])
    np.testing.assert_allclose(a @ BKLDLT(a).solve(b), b, atol=1e-10)


def test_solve_leaves_input_untouched():
    a, b = _symmetric(4, 12)
    original = b.copy()
    BKLDLT(a).solve(b)
    np.testing.assert_array_equal(b, original)


def test_recompute_reuses_solver():
    solver = BKLDLT()
    for seed in (20, 21):
        a, b = _symmetric(5, seed)
        solver.compute(a)
        np.testing.assert_allclose(a @ solver.solve(b), b, atol=1e-8)


def test_singular_matrix_reports_numerical_issue():
    solver = BKLDLT(np.zeros((3, 3)))
    assert solver.info is CompInfo.NUMERICAL_ISSUE


def test_non_square_matrix_is_rejected():
    with pytest.raises(ValueError):
        BKLDLT(np.zeros((2, 3)))


def test_solve_before_compute_raises():
    solver = BKLDLT()
    assert solver.info is CompInfo.NOT_COMPUTED
    with pytest.raises(RuntimeError):
        solver.solve([1.0, 2.0])


def test_wrong_rhs_length_is_rejected():
    a, _ = _symmetric(3, 30)
    with pytest.raises(ValueError):
        BKLDLT(a).solve([1.0, 2.0])