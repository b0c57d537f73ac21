"""
Pure Python/NumPy implementation of moment-based shape statistics.

Public API:
    central_moment(values, order)   - k-th central moment
    skewness_sample(values)         - bias-corrected skewness (Excel SKEW)
    skewness_population(values)     - population skewness (Excel SKEW.P)
    kurtosis_population(values)     - standardized fourth moment m4 / m2^2
    excess_kurtosis_population(values)
    DataMoments                     - all of the above for one sample set
"""

from moments_python.data_moments import (
    central_moment,
    skewness_sample,
    skewness_population,
    kurtosis_population,
    excess_kurtosis_population,
    DataMoments,
)
from moments_python.descriptive import (
    mean,
    variance_sample,
    variance_population,
    standard_deviation_sample,
    standard_deviation_population,
)
from moments_python.config import (
    AVAILABLE_POLICIES,
    DEFAULT_ZERO_VARIANCE_POLICY,
)

__all__ = [
    'central_moment',
    'skewness_sample',
    'skewness_population',
    'kurtosis_population',
    'excess_kurtosis_population',
    'DataMoments',
    'mean',
    'variance_sample',
    'variance_population',
    'standard_deviation_sample',
    'standard_deviation_population',
    'AVAILABLE_POLICIES',
    'DEFAULT_ZERO_VARIANCE_POLICY',
]
