"""Tests for spreadsheet reading/writing and record conversion."""

import pandas as pd
import pytest

from conftest import TRAINING_ROWS, write_sheet
from sentiment_pipeline.classification.labels import Sentiment, UNKNOWN_LABEL
from sentiment_pipeline.classification.predictor import Prediction
from sentiment_pipeline.data_processing.records import (
    labeled_records_from_frame,
    unlabeled_records_from_frame,
)
from sentiment_pipeline.data_processing.tabular import (
    OUTPUT_COLUMNS,
    SpreadsheetSink,
    SpreadsheetSource,
    predictions_to_frame,
)
from sentiment_pipeline.errors import (
    EmptySource,
    InvalidLabel,
    MalformedSource,
    MissingSource,
    SinkWriteFailure,
)
from sentiment_pipeline.utils.file_io import read_table, write_table


PREDICTIONS = [
    Prediction("loved it", Sentiment.POSITIVE, (0.1, 0.2, 0.7)),
    Prediction("hated it", Sentiment.NEGATIVE, (0.8, 0.1, 0.1)),
    Prediction("meh", Sentiment.NEUTRAL, (0.2, 0.6, 0.2)),
]


class TestReadTable:

    def test_missing_file(self, tmp_path):
        with pytest.raises(MissingSource) as excinfo:
            read_table(tmp_path / "nope.xlsx", "training")
        assert "nope.xlsx" in str(excinfo.value)
        assert isinstance(excinfo.value, FileNotFoundError)

    def test_header_only_csv_is_empty(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("text,label\n", encoding="utf-8")
        with pytest.raises(EmptySource, match="no rows"):
            read_table(path)

    def test_blank_csv_is_empty(self, tmp_path):
        path = tmp_path / "blank.csv"
        path.write_text("", encoding="utf-8")
        with pytest.raises(EmptySource):
            read_table(path)

    def test_empty_source_is_a_missing_source(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("text\n", encoding="utf-8")
        with pytest.raises(MissingSource):
            read_table(path)

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "data.txt"
        path.write_text("text\nhello\n", encoding="utf-8")
        with pytest.raises(MalformedSource):
            read_table(path)

    def test_corrupt_workbook_is_malformed(self, tmp_path):
        path = tmp_path / "training.xlsx"
        path.write_bytes(b"not a zip archive")
        with pytest.raises(MalformedSource, match="training.xlsx") as excinfo:
            read_table(path, "training")
        assert excinfo.value.__cause__ is not None

    @pytest.mark.parametrize("name", ["train.xlsx", "train.csv"])
    def test_header_is_skipped_and_order_kept(self, tmp_path, name):
        path = write_sheet(tmp_path / name, TRAINING_ROWS)
        df = read_table(path)
        assert len(df) == len(TRAINING_ROWS)
        assert list(df.iloc[:, 0]) == [text for text, _ in TRAINING_ROWS]


class TestRecords:

    def test_labeled_records(self):
        df = pd.DataFrame({"text": ["good", "bad"], "label": ["Positive", "negative"]})
        records = labeled_records_from_frame(df)
        assert [r.category for r in records] == [Sentiment.POSITIVE, Sentiment.NEGATIVE]
        assert [r.text for r in records] == ["good", "bad"]

    def test_invalid_label_names_the_row(self):
        df = pd.DataFrame({"text": ["good", "odd"], "label": ["positive", "sarcastic"]})
        with pytest.raises(InvalidLabel) as excinfo:
            labeled_records_from_frame(df)
        assert excinfo.value.row == 3
        assert "sarcastic" in str(excinfo.value)

    def test_missing_label_column(self):
        df = pd.DataFrame({"text": ["good"]})
        with pytest.raises(MalformedSource):
            labeled_records_from_frame(df)

    def test_unlabeled_records_ignore_label_column(self):
        df = pd.DataFrame({"text": ["a", "b", 3], "label": ["positive", "nonsense", None]})
        records = unlabeled_records_from_frame(df)
        assert [r.text for r in records] == ["a", "b", "3"]
        assert all(r.label == UNKNOWN_LABEL for r in records)

    def test_missing_text_becomes_empty(self):
        df = pd.DataFrame({"text": [None, float("nan")]})
        assert [r.text for r in unlabeled_records_from_frame(df)] == ["", ""]

    def test_spreadsheet_source(self, tmp_path):
        path = write_sheet(tmp_path / "train.xlsx", TRAINING_ROWS)
        records = SpreadsheetSource(path, "training").read_labeled()
        assert len(records) == len(TRAINING_ROWS)
        assert records[2].category is Sentiment.POSITIVE


class TestSink:

    def test_predictions_to_frame(self):
        df = predictions_to_frame(PREDICTIONS)
        assert tuple(df.columns) == OUTPUT_COLUMNS
        assert list(df["Text"]) == ["loved it", "hated it", "meh"]
        assert list(df["Predicted Sentiment"]) == ["Positive", "Negative", "Neutral"]
        assert df["Scores"][0] == "0.100000, 0.200000, 0.700000"

    def test_xlsx_output(self, tmp_path):
        path = tmp_path / "out" / "predictions.xlsx"
        SpreadsheetSink(path).write(PREDICTIONS)
        df = pd.read_excel(path, sheet_name="Predictions")
        assert tuple(df.columns) == OUTPUT_COLUMNS
        assert list(df["Text"]) == ["loved it", "hated it", "meh"]

    def test_csv_and_json_output(self, tmp_path):
        SpreadsheetSink(tmp_path / "p.csv").write(PREDICTIONS)
        SpreadsheetSink(tmp_path / "p.json").write(PREDICTIONS)
        assert list(pd.read_csv(tmp_path / "p.csv")["Predicted Sentiment"]) == [
            "Positive", "Negative", "Neutral",
        ]
        assert pd.read_json(tmp_path / "p.json").shape == (3, 3)

    def test_existing_output_is_overwritten(self, tmp_path):
        path = tmp_path / "p.csv"
        path.write_text("stale\n", encoding="utf-8")
        SpreadsheetSink(path).write(PREDICTIONS)
        assert len(pd.read_csv(path)) == 3

    def test_unsupported_output_format(self, tmp_path):
        with pytest.raises(SinkWriteFailure):
            write_table(predictions_to_frame(PREDICTIONS), tmp_path / "p.txt")

    def test_unwritable_output_leaves_nothing_behind(self, tmp_path):
        target = tmp_path / "taken.csv"
        target.mkdir()
        with pytest.raises(SinkWriteFailure):
            SpreadsheetSink(target).write(PREDICTIONS)
        assert sorted(p.name for p in tmp_path.iterdir()) == ["taken.csv"]

    def test_unsupported_output_format_rejected_at_construction(self, tmp_path):
        with pytest.raises(SinkWriteFailure, match="p.txt"):
            SpreadsheetSink(tmp_path / "p.txt")
        assert list(tmp_path.iterdir()) == []
