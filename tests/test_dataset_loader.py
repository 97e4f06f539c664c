"""
Tests for dataset_loader.py
"""

import pandas as pd
import pytest

from holdout_gauge.dataset_loader import (
    class_counts,
    coerce_outcome,
    load_dataset,
    records_from_frame,
    records_to_frame,
)


def _write_csv(path, rows):
    pd.DataFrame(rows).to_csv(path, index=False)
    return str(path)


class TestCoerceOutcome:
    """coerce_outcome tests"""

    @pytest.mark.parametrize("value", [True, 1, 1.0, 2, "true", "TRUE", " yes ", "y", "1", "t", "2", "1.0", " -3 "])
    def test_positive_values(self, value):
        assert coerce_outcome(value) is True

    @pytest.mark.parametrize("value", [False, 0, 0.0, "false", "No", "n", "0", "f", "0.0", "-0"])
    def test_negative_values(self, value):
        assert coerce_outcome(value) is False

    @pytest.mark.parametrize("value", ["maybe", "", None, "nan", float("nan")])
    def test_uninterpretable_raises(self, value):
        with pytest.raises(ValueError, match="Cannot interpret outcome value"):
            coerce_outcome(value)


class TestLoadDataset:
    """load_dataset tests"""

    def test_loads_all_columns(self, tmp_path):
        path = _write_csv(tmp_path / "incidents.csv", [
            {"hour": 1, "district": "A", "arrest": "true"},
            {"hour": 2, "district": "B", "arrest": "false"},
        ])
        records = load_dataset(path, outcome_field="arrest")
        assert len(records) == 2
        assert records[0] == {"hour": 1, "district": "A", "arrest": True}
        assert records[1]["arrest"] is False

    def test_selects_features(self, tmp_path):
        path = _write_csv(tmp_path / "incidents.csv", [
            {"hour": 1, "district": "A", "arrest": 1},
        ])
        records = load_dataset(path, outcome_field="arrest", feature_fields=["hour"])
        assert records == [{"hour": 1, "arrest": True}]

    def test_drops_rows_with_missing_values(self, tmp_path):
        path = tmp_path / "incidents.csv"
        path.write_text("hour,arrest\n1,true\n,false\n3,\n4,no\n")
        records = load_dataset(str(path), outcome_field="arrest")
        assert [r["hour"] for r in records] == [1.0, 4.0]

    def test_missing_outcome_column_raises(self, tmp_path):
        path = _write_csv(tmp_path / "incidents.csv", [{"hour": 1}])
        with pytest.raises(KeyError, match="Outcome column 'arrest' is missing"):
            load_dataset(path, outcome_field="arrest")

    def test_missing_feature_column_raises(self, tmp_path):
        path = _write_csv(tmp_path / "incidents.csv", [{"hour": 1, "arrest": True}])
        with pytest.raises(KeyError, match="Feature columns"):
            load_dataset(path, outcome_field="arrest", feature_fields=["ward"])

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_dataset(str(tmp_path / "missing.csv"))

    def test_bad_outcome_raises(self, tmp_path):
        path = _write_csv(tmp_path / "incidents.csv", [{"hour": 1, "outcome": "unknown"}])
        with pytest.raises(ValueError, match="Cannot interpret"):
            load_dataset(path)

    def test_mixed_outcome_column(self, tmp_path):
        rows = [{"hour": 1, "outcome": "yes"}, {"hour": 2, "outcome": "2"}, {"hour": 3, "outcome": "0"}]
        records = load_dataset(_write_csv(tmp_path / "incidents.csv", rows))
        assert [r["outcome"] for r in records] == [True, True, False]


class TestFrameConversion:
    """records_from_frame / records_to_frame tests"""

    def test_roundtrip(self):
        df = pd.DataFrame({"x": [1, 2], "outcome": [True, False]})
        records = records_from_frame(df)
        assert records == [{"x": 1, "outcome": True}, {"x": 2, "outcome": False}]
        pd.testing.assert_frame_equal(records_to_frame(records), df)


class TestClassCounts:
    """class_counts tests"""

    def test_counts(self):
        records = [{"outcome": True}, {"outcome": False}, {"outcome": False}]
        assert class_counts(records) == {"positive": 1, "negative": 2}

    def test_custom_field(self):
        records = [{"arrest": True}, {"arrest": True}]
        assert class_counts(records, "arrest") == {"positive": 2, "negative": 0}
