"""
Cython-accelerated central moments for moment statistics.

This package provides a high-performance Cython implementation of the
central moment primitive with automatic fallback to pure Python if the
extension module is not available.

The shape statistics exported here reuse the formulas and degenerate-input
guards of moments_python.data_moments; only the primitive is swapped.
"""

import logging
import warnings

import numpy as np

from moments_python.config import DEFAULT_ZERO_VARIANCE_POLICY
from moments_python.descriptive import as_sample_array
from moments_python.data_moments import (
    _check_order,
    _skewness_sample,
    _skewness_population,
    _kurtosis_population,
    _excess_kurtosis_population,
)

logger = logging.getLogger(__name__)

# Flag to track if Cython is available
CYTHON_AVAILABLE = False

try:
    from moments_cython.central_moment_cy import central_moment as _central_moment_cy

    CYTHON_AVAILABLE = True

    def _moment(arr, order):
        return _central_moment_cy(np.ascontiguousarray(arr, dtype=np.float64), order)

    logger.debug("Cython-accelerated central moment loaded")

except ImportError as e:
    CYTHON_AVAILABLE = False

    warnings.warn(
        f"Cython modules not available, falling back to pure Python implementation. "
        f"For better performance, build Cython extensions with: python setup.py build_ext --inplace\n"
        f"Import error: {e}",
        ImportWarning
    )

    from moments_python.data_moments import _central_moment_array as _moment


def central_moment(values, order):
    """Central moment of the given order, or None for an empty sample set."""
    _check_order(order)
    arr = as_sample_array(values)
    if arr.size == 0:
        return None
    return _moment(arr, int(order))


def skewness_sample(values):
    """Bias-corrected sample skewness (Excel SKEW)."""
    return _skewness_sample(as_sample_array(values), _moment)


def skewness_population(values):
    """Population skewness (Excel SKEW.P)."""
    return _skewness_population(as_sample_array(values), _moment)


def kurtosis_population(values, zero_variance=DEFAULT_ZERO_VARIANCE_POLICY):
    """Standardized fourth central moment m4 / m2^2."""
    return _kurtosis_population(as_sample_array(values), _moment, zero_variance)


def excess_kurtosis_population(values, zero_variance=DEFAULT_ZERO_VARIANCE_POLICY):
    """Excess kurtosis m4 / m2^2 - 3."""
    return _excess_kurtosis_population(as_sample_array(values), _moment, zero_variance)


# Export all functions
__all__ = [
    'CYTHON_AVAILABLE',
    'central_moment',
    'skewness_sample',
    'skewness_population',
    'kurtosis_population',
    'excess_kurtosis_population',
]
