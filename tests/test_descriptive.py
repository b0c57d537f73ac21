"""
Tests for the mean, variance and standard deviation helpers and the
zero-variance policy constants.

Run with: pytest tests/test_descriptive.py
"""

import sys
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from moments_python import config
from moments_python.descriptive import (
    as_sample_array,
    deviations_from_mean,
    mean,
    variance_sample,
    variance_population,
    standard_deviation_sample,
    standard_deviation_population,
)


class TestSampleArray:
    """Test input conversion"""

    def test_converts_to_float64(self):
        arr = as_sample_array([1, 2, 3])
        assert arr.dtype == np.float64
        assert arr.shape == (3,)

    def test_accepts_series(self):
        arr = as_sample_array(pd.Series([1.5, 2.5]))
        np.testing.assert_array_equal(arr, [1.5, 2.5])

    def test_empty(self):
        assert as_sample_array([]).size == 0

    def test_rejects_matrix(self):
        with pytest.raises(ValueError):
            as_sample_array(np.zeros((3, 2)))

    def test_rejects_scalar(self):
        with pytest.raises(ValueError):
            as_sample_array(5.0)

    def test_constant_deviations_are_zero(self):
        np.testing.assert_array_equal(deviations_from_mean(np.full(9, 0.1)), np.zeros(9))

    def test_constant_infinite_deviations_are_nan(self):
        with np.errstate(invalid='ignore'):
            deviations = deviations_from_mean(np.full(3, np.inf))
        assert np.all(np.isnan(deviations))


class TestLocationAndSpread:
    """Test the collaborator contracts"""

    def test_mean(self):
        assert mean([1, 2, 3, 4]) == pytest.approx(2.5)
        assert mean([]) is None

    def test_variance_sample(self):
        assert variance_sample([1, 2, 3, 4]) == pytest.approx(5.0 / 3.0)
        assert variance_sample([1.0]) is None
        assert variance_sample([]) is None

    def test_variance_population(self):
        assert variance_population([1, 2, 3, 4]) == pytest.approx(1.25)
        assert variance_population([7.0]) == 0.0
        assert variance_population([]) is None

    def test_standard_deviation_population(self):
        assert standard_deviation_population([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(2.0)
        assert standard_deviation_population([]) is None

    def test_standard_deviation_sample(self):
        values = [2, 4, 4, 4, 5, 5, 7, 9]
        assert standard_deviation_sample(values) == pytest.approx(np.std(values, ddof=1))
        assert standard_deviation_sample([3.0]) is None

    def test_constant_values_have_exactly_zero_spread(self):
        values = [0.1] * 3
        assert standard_deviation_sample(values) == 0.0
        assert standard_deviation_population(values) == 0.0

    def test_results_are_python_floats(self):
        assert type(mean(np.array([1.0, 2.0]))) is float
        assert type(standard_deviation_sample(np.array([1.0, 2.0]))) is float


class TestZeroVariancePolicy:
    """Test the zero-variance policy constants"""

    def test_default_is_absent(self):
        assert config.DEFAULT_ZERO_VARIANCE_POLICY == 'absent'

    def test_available_policies(self):
        assert set(config.AVAILABLE_POLICIES) == {'absent', 'propagate'}

    @pytest.mark.parametrize("policy", ['absent', 'propagate'])
    def test_check_accepts_known(self, policy):
        assert config.check_zero_variance_policy(policy) == policy

    def test_check_rejects_unknown(self):
        with pytest.raises(ValueError):
            config.check_zero_variance_policy('raise')

    def test_no_mutable_policy_state(self):
        assert not hasattr(config, 'set_zero_variance_policy')
        assert not hasattr(config, 'ZERO_VARIANCE_POLICY')


if __name__ == "__main__":
    # Run tests with verbose output
    pytest.main([__file__, "-v", "-s"])
