"""
Column-wise shape statistics for pandas data.

describe_shape() is the tabular counterpart of DataMoments: one row per
numeric column with count, mean, standard deviation, both skewness
variants and kurtosis. Missing values are dropped per column before the
statistics are computed, as pandas.DataFrame.describe does.
"""

import numpy as np
import pandas as pd
from typing import List, Optional

from moments_python.data_moments import DataMoments

SHAPE_COLUMNS = ['count', 'mean', 'std', 'skewness_sample', 'skewness_population', 'kurtosis']


def _column_row(series: pd.Series) -> List[float]:
    moments = DataMoments.from_values(series.dropna().to_numpy(dtype=np.float64),
                                      skip_nonfinite=True)
    row = [
        moments.count(),
        moments.mean(),
        moments.standard_deviation(),
        moments.skewness(),
        moments.skewness_population(),
        moments.kurtosis(),
    ]
    # Undefined statistics become NaN in the frame
    return [np.nan if value is None else value for value in row]


def describe_shape(data, columns: Optional[List[str]] = None) -> pd.DataFrame:
    """Compute shape statistics for every numeric column.

    Args:
        data: pandas DataFrame or Series
        columns: Optional subset of columns; defaults to all numeric columns

    Returns:
        DataFrame indexed by column name with SHAPE_COLUMNS as columns

    Raises:
        ValueError: If a requested column is missing or not numeric
    """
    if isinstance(data, pd.Series):
        name = data.name if data.name is not None else 'values'
        data = data.to_frame(name=name)

    if columns is None:
        columns = list(data.select_dtypes(include=[np.number]).columns)
    else:
        missing = [c for c in columns if c not in data.columns]
        if missing:
            raise ValueError(f"Columns not found: {missing}")
        non_numeric = [c for c in columns if not pd.api.types.is_numeric_dtype(data[c])]
        if non_numeric:
            raise ValueError(f"Columns are not numeric: {non_numeric}")

    rows = [_column_row(data[c]) for c in columns]
    result = pd.DataFrame(rows, index=pd.Index(columns, name='column'),
                          columns=SHAPE_COLUMNS, dtype=np.float64)
    result['count'] = result['count'].astype(int)
    return result
