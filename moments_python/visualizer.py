"""
Histogram plots annotated with moment statistics.
"""

import os
import logging
import numpy as np
import matplotlib.pyplot as plt
from typing import Optional

from moments_python.data_moments import DataMoments

logger = logging.getLogger(__name__)


def _format_stat(value):
    return "undefined" if value is None else f"{value:.4f}"


def plot_distribution_shape(values, save_path: str, bins: int = 30,
                            title: Optional[str] = None) -> DataMoments:
    """Plot a histogram of the samples with mean and shape statistics in the title.

    Non-finite values are dropped before plotting and before the statistics
    are computed.

    Args:
        values: Sequence of real numbers
        save_path: Output image path (format inferred from extension)
        bins: Number of histogram bins
        title: Optional first title line

    Returns:
        DataMoments summary used for the annotation
    """
    moments = DataMoments.from_values(values, skip_nonfinite=True)
    arr = np.asarray(values, dtype=np.float64)
    arr = arr[np.isfinite(arr)]

    plt.figure(figsize=(10, 6))
    if arr.size > 0:
        plt.hist(arr, bins=bins, color='steelblue', alpha=0.7, edgecolor='white', label='samples')
        plt.axvline(moments.mean(), color='darkred', linestyle='--', linewidth=1.5,
                    label=f"mean = {moments.mean():.4f}")
        plt.legend(loc='upper right')

    title_parts = []
    if title:
        title_parts.append(title)
    title_parts.append(f"n = {moments.count()}")
    title_parts.append(
        f"Skewness: sample={_format_stat(moments.skewness())}, "
        f"population={_format_stat(moments.skewness_population())}"
    )
    title_parts.append(
        f"Kurtosis: {_format_stat(moments.kurtosis())} "
        f"(excess {_format_stat(moments.excess_kurtosis())})"
    )

    plt.title("\n".join(title_parts), fontsize=12)
    plt.xlabel("Value", fontsize=12)
    plt.ylabel("Count", fontsize=12)
    plt.grid(True, alpha=0.3)
    plt.tight_layout()

    directory = os.path.dirname(save_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    plt.savefig(save_path, dpi=150, bbox_inches='tight')
    plt.close()

    logger.info("Distribution plot saved to: %s", save_path)
    return moments
