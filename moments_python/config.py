"""
Policy constants for moment statistics.

Names the behaviour applied when kurtosis meets a zero second central
moment (a constant sample set with more than one value):

- 'absent': return None, the same answer the skewness functions give
  for a zero standard deviation
- 'propagate': divide anyway and return the resulting NaN

The policy is passed per call as the `zero_variance` argument; nothing
here is mutable.
"""

AVAILABLE_POLICIES = ('absent', 'propagate')

# Policy used when the caller does not pass one
DEFAULT_ZERO_VARIANCE_POLICY = 'absent'


def check_zero_variance_policy(value: str) -> str:
    """Validate a zero-variance policy name.

    Args:
        value: One of AVAILABLE_POLICIES

    Returns:
        The validated policy name

    Raises:
        ValueError: If the policy name is unknown
    """
    if value not in AVAILABLE_POLICIES:
        raise ValueError(f"Unknown zero-variance policy: {value!r}. "
                         f"Expected one of {AVAILABLE_POLICIES}")
    return value
