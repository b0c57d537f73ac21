"""
Export utilities for moment statistics.

This module provides functions to export shape summaries to various
formats, including:
- DataMoments / dict / DataFrame summaries to JSON
- Formatting utilities for human-readable summary lines

Undefined statistics (None or NaN) are written as JSON null.
"""

import json
import logging
import math
import os
import numpy as np
import pandas as pd
from typing import Dict, List, Any, Union

from moments_python.data_moments import DataMoments

logger = logging.getLogger(__name__)

SummaryLike = Union[DataMoments, Dict[str, Any], pd.DataFrame]

# Display labels for each DataMoments field
FIELD_LABELS = {
    'count': 'Count',
    'mean': 'Mean',
    'variance': 'Variance (n-1)',
    'standard_deviation': 'Std. deviation (n-1)',
    'skewness': 'Skewness (sample)',
    'skewness_population': 'Skewness (population)',
    'kurtosis': 'Kurtosis',
    'excess_kurtosis': 'Excess kurtosis',
}


def _json_value(value):
    """Convert numpy scalars to Python values and NaN/inf to None."""
    if value is None:
        return None
    if isinstance(value, (np.integer, int)) and not isinstance(value, bool):
        return int(value)
    if isinstance(value, (np.floating, float)):
        value = float(value)
        return value if math.isfinite(value) else None
    return value


def summary_to_dict(summary: SummaryLike) -> Dict[str, Any]:
    """Normalize a summary into a JSON-ready dict.

    Args:
        summary: DataMoments, plain dict of statistics, or a DataFrame as
            returned by describe_shape (one entry per column)

    Returns:
        Dict with NaN and None mapped to None
    """
    if isinstance(summary, DataMoments):
        return {k: _json_value(v) for k, v in summary.to_dict().items()}
    if isinstance(summary, pd.DataFrame):
        return {
            str(column): {k: _json_value(v) for k, v in row.items()}
            for column, row in summary.to_dict(orient='index').items()
        }
    if isinstance(summary, dict):
        return {k: _json_value(v) for k, v in summary.items()}
    raise TypeError(f"Unsupported summary type: {type(summary).__name__}")


def format_moment_summary(summary: Union[DataMoments, Dict[str, Any]],
                          precision: int = 6) -> List[str]:
    """Format a summary for display.

    Args:
        summary: DataMoments or dict keyed by DataMoments.FIELDS
        precision: Number of decimal places for real values

    Returns:
        List of lines like "Skewness (sample): 1.699413" or
        "Kurtosis: undefined"
    """
    values = summary_to_dict(summary)
    lines = []
    for field, value in values.items():
        label = FIELD_LABELS.get(field, field)
        if value is None:
            lines.append(f"{label}: undefined")
        elif isinstance(value, int):
            lines.append(f"{label}: {value}")
        else:
            lines.append(f"{label}: {value:.{precision}f}")
    return lines


def export_moments_to_json(summary: SummaryLike, save_path: str):
    """Export a shape summary to JSON.

    Args:
        summary: DataMoments, dict or describe_shape DataFrame
        save_path: Output JSON file path

    Side Effects:
        Creates directories as needed and writes JSON file to save_path
    """
    json_data = summary_to_dict(summary)

    directory = os.path.dirname(save_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(save_path, 'w') as f:
        json.dump(json_data, f, indent=2)

    logger.info("Moment summary exported to: %s", save_path)
