"""
Unit tests for elementwise array clamping.
"""

import logging

import numpy as np
import pytest

from eboh_portfolio.errors import InvalidArgument
from eboh_portfolio.utils import clamp, clamp_array


def test_clamp_array_matches_scalar_clamp():
    values = [-5.0, 0.0, 50.0, 100.0, 150.0]
    result = clamp_array(values, 0.0, 100.0)
    np.testing.assert_array_equal(result, [clamp(v, 0.0, 100.0) for v in values])


def test_clamp_array_does_not_modify_input():
    values = np.array([-1.0, 2.0, 3.0])
    result = clamp_array(values, 0.0, 2.5)
    np.testing.assert_array_equal(values, [-1.0, 2.0, 3.0])
    np.testing.assert_array_equal(result, [0.0, 2.0, 2.5])
    assert result is not values


def test_clamp_array_keeps_shape():
    values = np.arange(12, dtype=float).reshape(3, 4)
    result = clamp_array(values, 2.0, 9.0)
    assert result.shape == (3, 4)
    assert result.min() == 2.0
    assert result.max() == 9.0


def test_clamp_array_returns_float_array_for_ints():
    result = clamp_array([1, 5, 9], 2, 8)
    assert result.dtype == np.float64
    np.testing.assert_array_equal(result, [2.0, 5.0, 8.0])


def test_clamp_array_rejects_nan_values():
    with pytest.raises(InvalidArgument) as exc_info:
        clamp_array([1.0, np.nan], 0.0, 1.0)
    assert exc_info.value.argument == "values"


def test_clamp_array_rejects_non_numeric_values():
    with pytest.raises(InvalidArgument):
        clamp_array(["a", "b"], 0.0, 1.0)


def test_clamp_array_rejects_inverted_bounds():
    with pytest.raises(InvalidArgument):
        clamp_array([0.5], 1.0, 0.0)


def test_clamp_array_accepts_bounds_beyond_float_range():
    result = clamp_array([5.0, -1.0], 0, 10**400)
    np.testing.assert_array_equal(result, [5.0, 0.0])

    result = clamp_array([5.0, 1e308], -(10**400), 10)
    np.testing.assert_array_equal(result, [5.0, 10.0])


@pytest.mark.parametrize("values", [[1 + 5j], np.array([1.0, 2 + 0j])])
def test_clamp_array_rejects_complex_values(values):
    with pytest.raises(InvalidArgument) as exc_info:
        clamp_array(values, 0.0, 10.0)
    assert exc_info.value.argument == "values"


def test_clamp_array_logs_clamped_count(caplog):
    with caplog.at_level(logging.DEBUG, logger="eboh_portfolio.utils"):
        clamp_array([-1.0, 0.5, 2.0], 0.0, 1.0)
    assert "Clamped 2 of 3 values" in caplog.text
