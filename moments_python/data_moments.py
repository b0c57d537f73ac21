"""
Moment-based shape statistics for a materialized sample set.

All statistics here are built on one primitive, the central moment of
order k:

    m_k = (1/n) * sum((x_i - mean(x)) ** k)

combined with a standard deviation from moments_python.descriptive.
Undefined statistics are returned as None rather than raised:

- fewer than 3 samples, or zero standard deviation, for skewness
- an empty sample set for kurtosis and the central moment itself

Kurtosis of a constant sample set (zero second moment) follows the
`zero_variance` policy passed by the caller, see moments_python.config.
"""

import logging
import numpy as np
from typing import Optional

from moments_python import config
from moments_python.descriptive import (
    as_sample_array,
    deviations_from_mean,
    mean as sample_mean,
    variance_sample,
    standard_deviation_sample,
    standard_deviation_population,
)

logger = logging.getLogger(__name__)

# Kurtosis of the normal distribution
NORMAL_KURTOSIS = 3.0


def _check_order(order):
    if isinstance(order, bool) or not isinstance(order, (int, np.integer)) or order < 1:
        raise ValueError(f"Moment order must be a positive integer, got {order!r}")


def _central_moment_array(arr: np.ndarray, order: int) -> float:
    return float(np.mean(deviations_from_mean(arr) ** order))


def central_moment(values, order: int) -> Optional[float]:
    """Central moment of the given order.

    Args:
        values: Sequence of real numbers
        order: Positive integer moment order

    Returns:
        (1/n) * sum((x_i - mean) ** order), or None for an empty sample set

    Raises:
        ValueError: If order is not a positive integer
    """
    _check_order(order)
    arr = as_sample_array(values)
    if arr.size == 0:
        return None
    return _central_moment_array(arr, order)


# The helpers below take the central moment primitive as `moment` so that
# accelerated backends share the same formulas and guards.

def _skewness_sample(arr: np.ndarray, moment) -> Optional[float]:
    count = float(arr.size)
    if count < 3:
        return None
    moment3 = moment(arr, 3)
    if moment3 is None:
        return None
    std_dev = standard_deviation_sample(arr)
    if std_dev is None or std_dev == 0:
        logger.debug("skewness_sample undefined: zero standard deviation over %d values", arr.size)
        return None

    return count ** 2 / ((count - 1) * (count - 2)) * moment3 / std_dev ** 3


def _skewness_population(arr: np.ndarray, moment) -> Optional[float]:
    if arr.size < 3:
        return None
    std_dev = standard_deviation_population(arr)
    if std_dev is None or std_dev == 0:
        logger.debug("skewness_population undefined: zero standard deviation over %d values", arr.size)
        return None
    moment3 = moment(arr, 3)
    if moment3 is None:
        return None

    return moment3 / std_dev ** 3


def _kurtosis_population(arr: np.ndarray, moment, zero_variance: str) -> Optional[float]:
    config.check_zero_variance_policy(zero_variance)
    if arr.size > 1:
        moment4 = moment(arr, 4)
        moment2 = moment(arr, 2)
        if moment2 == 0:
            logger.debug("kurtosis_population: zero second moment over %d values, policy=%s",
                         arr.size, zero_variance)
            if zero_variance == 'absent':
                return None
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.float64(moment4) / np.float64(moment2) ** 2)
    elif arr.size == 1:
        return 0.0
    else:
        return None


def _excess_kurtosis_population(arr: np.ndarray, moment, zero_variance: str) -> Optional[float]:
    config.check_zero_variance_policy(zero_variance)
    if arr.size == 1:
        return 0.0
    kurtosis = _kurtosis_population(arr, moment, zero_variance)
    if kurtosis is None:
        return None
    return kurtosis - NORMAL_KURTOSIS


def skewness_sample(values) -> Optional[float]:
    """Bias-corrected sample skewness, same as SKEW in Excel and Google Sheets.

    Formula:
        n^2 / ((n - 1)(n - 2)) * m3 / s^3

    where s is the sample standard deviation (divisor n - 1).

    Example:
        skewness_sample([4, 2.1, 8, 21, 1])  # 1.6994131524

    Returns:
        Skewness, or None if there are fewer than 3 values or all values
        are the same
    """
    return _skewness_sample(as_sample_array(values), _central_moment_array)


def skewness_population(values) -> Optional[float]:
    """Population skewness, same as SKEW.P in Excel, Wolfram Alpha and the
    `skewness` function of the R "moments" package.

    Formula:
        m3 / sigma^3

    where sigma is the population standard deviation (divisor n).

    Example:
        skewness_population([4, 2.1, 8, 21, 1])  # 1.1400009992

    Returns:
        Skewness, or None if there are fewer than 3 values or all values
        are the same
    """
    return _skewness_population(as_sample_array(values), _central_moment_array)


def kurtosis_population(values,
                        zero_variance: str = config.DEFAULT_ZERO_VARIANCE_POLICY) -> Optional[float]:
    """Population kurtosis, the standardized fourth central moment m4 / m2^2.

    This is not excess kurtosis: it reproduces the published example below,
    which has no "- 3". Use excess_kurtosis_population for m4 / m2^2 - 3.

    Example:
        kurtosis_population([1, 12, 19.5, -5, 3, 8])  # 2.0460654088343166

    Args:
        values: Sequence of real numbers
        zero_variance: 'absent' or 'propagate', the result for a constant
            sample set of more than one value (None or NaN)

    Returns:
        - None for an empty sample set
        - 0.0 for a single value
        - m4 / m2^2 otherwise, subject to zero_variance

    Raises:
        ValueError: If zero_variance is not a known policy
    """
    return _kurtosis_population(as_sample_array(values), _central_moment_array, zero_variance)


def excess_kurtosis_population(values,
                               zero_variance: str = config.DEFAULT_ZERO_VARIANCE_POLICY) -> Optional[float]:
    """Excess kurtosis relative to the normal distribution, m4 / m2^2 - 3.

    A single value is defined to have zero excess kurtosis. Other
    degenerate inputs behave as in kurtosis_population.
    """
    return _excess_kurtosis_population(as_sample_array(values), _central_moment_array, zero_variance)


class DataMoments:
    """
    A data structure summarizing the central moments of a distribution including:
    - the count
    - the mean
    - the variance
    - the skewness
    - the kurtosis
    The whole sample set is passed in at once via from_values(...); every
    statistic is computed eagerly and is None where undefined.
    """
    FIELDS = ('count', 'mean', 'variance', 'standard_deviation',
              'skewness', 'skewness_population', 'kurtosis', 'excess_kurtosis')

    def __init__(self, count=0, mean=None, variance=None, standard_deviation=None,
                 skewness=None, skewness_population=None, kurtosis=None,
                 excess_kurtosis=None):
        self.moments = {
            'count': int(count),
            'mean': mean,
            'variance': variance,
            'standard_deviation': standard_deviation,
            'skewness': skewness,
            'skewness_population': skewness_population,
            'kurtosis': kurtosis,
            'excess_kurtosis': excess_kurtosis,
        }

    @classmethod
    def from_values(cls, values, skip_nonfinite=False,
                    zero_variance=config.DEFAULT_ZERO_VARIANCE_POLICY):
        """Summarize a sample set.

        Args:
            values: Sequence of real numbers
            skip_nonfinite: Drop NaN and infinite values before computing
            zero_variance: Kurtosis policy for a constant sample set

        Returns:
            DataMoments instance
        """
        arr = as_sample_array(values)
        if skip_nonfinite:
            arr = arr[np.isfinite(arr)]
        return cls(
            count=arr.size,
            mean=sample_mean(arr),
            variance=variance_sample(arr),
            standard_deviation=standard_deviation_sample(arr),
            skewness=skewness_sample(arr),
            skewness_population=skewness_population(arr),
            kurtosis=kurtosis_population(arr, zero_variance),
            excess_kurtosis=excess_kurtosis_population(arr, zero_variance),
        )

    def count(self):
        return self.moments['count']

    def mean(self):
        return self.moments['mean']

    def variance(self):
        return self.moments['variance']

    def standard_deviation(self):
        return self.moments['standard_deviation']

    def skewness(self):
        return self.moments['skewness']

    def skewness_population(self):
        return self.moments['skewness_population']

    def kurtosis(self):
        return self.moments['kurtosis']

    def excess_kurtosis(self):
        return self.moments['excess_kurtosis']

    def get(self, field: str):
        if field not in self.FIELDS:
            raise ValueError(f"Unknown moment field: {field!r}. Expected one of {self.FIELDS}")
        return self.moments[field]

    def to_dict(self):
        return dict(self.moments)

    def __repr__(self):
        parts = ", ".join(f"{k}={v!r}" for k, v in self.moments.items())
        return f"DataMoments({parts})"
