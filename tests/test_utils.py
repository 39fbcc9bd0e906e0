import numpy as np
import pytest
from hypothesis import given, strategies as st

from errors import ConfigError
from utils import add, clamp_weights, deg2rad, dot, point_totals, require_finite

weights = st.lists(st.floats(min_value=-50, max_value=50, allow_nan=False), min_size=1, max_size=6)
bounds = st.floats(min_value=0, max_value=10, allow_nan=False)


def test_dot_and_add():
    assert dot([1, 2, 3], [4, 5, 6]) == 32.0
    np.testing.assert_allclose(add([7, 5], [3, 2], -1), [4, 3])
    np.testing.assert_allclose(add([1, 1], [2, 3]), [3, 4])


def test_deg2rad():
    assert deg2rad(180) == pytest.approx(np.pi)
    assert deg2rad(-90) == pytest.approx(-np.pi / 2)


def test_clamp_weights_clips_both_sides():
    np.testing.assert_allclose(clamp_weights([5.0, -7.5, 0.3, -0.2], 4), [4.0, -4.0, 0.3, -0.2])


def test_clamp_weights_zero_bound():
    np.testing.assert_allclose(clamp_weights([0.6, -0.2], 0), [0.0, 0.0])


def test_clamp_weights_rounding_mode():
    np.testing.assert_allclose(clamp_weights([0.6, -1.4, 3.7], 3, rounding=True), [1.0, -1.0, 3.0])


@pytest.mark.parametrize("w_max", [-1, float("nan")])
def test_clamp_weights_rejects_bad_bound(w_max):
    with pytest.raises(ConfigError):
        clamp_weights([0.1], w_max)


def test_require_finite():
    assert require_finite("beta", 0.8) == 0.8
    for bad in (float("nan"), [0.5, float("inf")], ["a", "b"]):
        with pytest.raises(ConfigError):
            require_finite("w", bad)


@given(weights, bounds, st.booleans())
def test_clamp_weights_idempotent_and_in_range(w, w_max, rounding):
    once = clamp_weights(w, w_max, rounding)
    twice = clamp_weights(once, w_max, rounding)
    np.testing.assert_array_equal(once, twice)
    assert np.all(np.abs(once) <= w_max)


def test_point_totals():
    # self: 3*2 + 2*1 + 2*0 + 1*(-1); opponent: 4*2 + 3*0 + 3*(-1) + 4*1
    assert point_totals([3, 2, 2, 1], [7, 5, 5, 5], [2, 1, 0, -1], [2, 0, -1, 1]) == (7.0, 9.0)
