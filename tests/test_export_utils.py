"""
Tests for JSON export and summary formatting.

Run with: pytest tests/test_export_utils.py
"""

import json
import sys
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from moments_python.data_moments import DataMoments
from moments_python.export_utils import (
    export_moments_to_json,
    format_moment_summary,
    summary_to_dict,
)
from moments_python.frame_moments import describe_shape


class TestSummaryToDict:
    """Test summary normalization"""

    def test_data_moments(self):
        data = summary_to_dict(DataMoments.from_values([1.0]))
        assert data['count'] == 1
        assert data['kurtosis'] == 0.0
        assert data['skewness'] is None

    def test_nan_becomes_none(self):
        data = summary_to_dict({'mean': np.float64('nan'), 'count': np.int64(3)})
        assert data == {'mean': None, 'count': 3}
        assert type(data['count']) is int

    def test_dataframe(self):
        frame = pd.DataFrame({'x': [4, 2.1, 8, 21, 1], 'y': [1.0, 1.0, 1.0, 1.0, 1.0]})
        data = summary_to_dict(describe_shape(frame))
        assert set(data.keys()) == {'x', 'y'}
        assert data['y']['skewness_sample'] is None
        assert data['x']['skewness_sample'] == pytest.approx(1.6994131524, abs=1e-9)

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            summary_to_dict([1, 2, 3])


class TestFormatting:
    """Test display formatting"""

    def test_lines(self):
        lines = format_moment_summary(DataMoments.from_values([4, 2.1, 8, 21, 1]))
        assert lines[0] == "Count: 5"
        assert "Skewness (sample): 1.699413" in lines
        assert "Skewness (population): 1.140001" in lines

    def test_undefined(self):
        lines = format_moment_summary(DataMoments.from_values([]))
        assert "Kurtosis: undefined" in lines

    def test_precision(self):
        lines = format_moment_summary({'mean': 1.0 / 3.0}, precision=2)
        assert lines == ["Mean: 0.33"]


class TestExport:
    """Test JSON export"""

    def test_export_data_moments(self, tmp_path):
        save_path = tmp_path / "nested" / "moments.json"
        export_moments_to_json(DataMoments.from_values([1, 12, 19.5, -5, 3, 8]), str(save_path))
        with open(save_path) as f:
            data = json.load(f)
        assert data['count'] == 6
        assert data['kurtosis'] == pytest.approx(2.0460654088343166, rel=1e-12)

    def test_undefined_written_as_null(self, tmp_path):
        save_path = tmp_path / "moments.json"
        export_moments_to_json(DataMoments.from_values([2.0, 2.0, 2.0]), str(save_path))
        text = save_path.read_text()
        assert '"skewness": null' in text
        assert 'NaN' not in text

    def test_export_to_current_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        export_moments_to_json({'count': 0}, "summary.json")
        assert (tmp_path / "summary.json").exists()


if __name__ == "__main__":
    # Run tests with verbose output
    pytest.main([__file__, "-v", "-s"])
