"""
Location and spread helpers for moment statistics.

Every function accepts any 1-D sequence of reals (list, tuple, numpy
array, pandas Series) and returns a Python float, or None when the
statistic is undefined for the given sample size.
"""

import numpy as np
from typing import Optional


def as_sample_array(values) -> np.ndarray:
    """Convert a sequence of reals to a 1-D float64 array.

    Args:
        values: Sequence of real numbers

    Returns:
        1-D float64 numpy array (a copy is made only when needed)

    Raises:
        ValueError: If the input is not one-dimensional
    """
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"Expected a 1-D sequence of samples, got shape {arr.shape}")
    return arr


def mean(values) -> Optional[float]:
    """Arithmetic mean, or None for an empty sample set."""
    arr = as_sample_array(values)
    if arr.size == 0:
        return None
    return float(np.mean(arr))


def deviations_from_mean(arr: np.ndarray) -> np.ndarray:
    """Deviations of each sample from the mean.

    A constant finite sample set is centered on its common value so that
    every deviation is exactly zero, independent of rounding in the mean.
    Constant infinite input goes through the arithmetic and yields NaN.
    """
    if arr.size > 0 and np.isfinite(arr[0]) and np.all(arr == arr[0]):
        return np.zeros_like(arr)
    return arr - np.mean(arr)


def _sum_of_squares(arr: np.ndarray) -> float:
    deviations = deviations_from_mean(arr)
    return float(np.dot(deviations, deviations))


def variance_sample(values) -> Optional[float]:
    """Bessel-corrected variance (divisor n - 1), None if n < 2."""
    arr = as_sample_array(values)
    if arr.size < 2:
        return None
    return _sum_of_squares(arr) / (arr.size - 1)


def variance_population(values) -> Optional[float]:
    """Population variance (divisor n), None if the set is empty."""
    arr = as_sample_array(values)
    if arr.size < 1:
        return None
    return _sum_of_squares(arr) / arr.size


def standard_deviation_sample(values) -> Optional[float]:
    """Sample standard deviation (divisor n - 1), None if n < 2."""
    variance = variance_sample(values)
    if variance is None:
        return None
    return float(np.sqrt(variance))


def standard_deviation_population(values) -> Optional[float]:
    """Population standard deviation (divisor n), None if the set is empty."""
    variance = variance_population(values)
    if variance is None:
        return None
    return float(np.sqrt(variance))
