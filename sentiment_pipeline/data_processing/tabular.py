"""
Tabular data sources and sinks.

The batch driver reads records from a `TabularSource` and hands its
predictions to a `TabularSink`.  The spreadsheet implementations below
are the ones used by the shipped pipeline; tests and callers can supply
their own.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Sequence

import pandas as pd

from ..classification.labels import decode
from ..classification.predictor import Prediction
from ..utils.file_io import check_output_format, read_table, write_table
from .records import (
    LabeledRecord,
    UnlabeledRecord,
    labeled_records_from_frame,
    unlabeled_records_from_frame,
)

OUTPUT_COLUMNS = ("Text", "Predicted Sentiment", "Scores")
OUTPUT_SHEET = "Predictions"


class TabularSource(ABC):
    """Ordered rows of text, optionally labeled."""

    name: str = "source"

    @abstractmethod
    def read_labeled(self) -> List[LabeledRecord]:
        ...

    @abstractmethod
    def read_unlabeled(self) -> List[UnlabeledRecord]:
        ...


class TabularSink(ABC):
    """Destination for a complete, ordered list of predictions."""

    @abstractmethod
    def write(self, predictions: Sequence[Prediction]) -> None:
        ...


class SpreadsheetSource(TabularSource):
    """Rows from the first sheet of an Excel workbook or from a CSV file."""

    def __init__(self, path, role: str = "source") -> None:
        self.path = Path(path)
        self.role = role

    @property
    def name(self) -> str:
        return str(self.path)

    def read_labeled(self) -> List[LabeledRecord]:
        return labeled_records_from_frame(read_table(self.path, self.role))

    def read_unlabeled(self) -> List[UnlabeledRecord]:
        return unlabeled_records_from_frame(read_table(self.path, self.role))


def predictions_to_frame(predictions: Sequence[Prediction]) -> pd.DataFrame:
    """Lay predictions out as output rows, one per prediction, in order."""
    rows = [
        (p.text, decode(p.predicted_category.code), p.scores_text())
        for p in predictions
    ]
    return pd.DataFrame(rows, columns=list(OUTPUT_COLUMNS))


class SpreadsheetSink(TabularSink):
    """Write predictions to ``.xlsx``, ``.csv`` or ``.json`` by file suffix.

    An unsupported suffix raises `SinkWriteFailure` here, before any rows
    are produced.
    """

    def __init__(self, path, sheet_name: str = OUTPUT_SHEET) -> None:
        self.path = check_output_format(path)
        self.sheet_name = sheet_name

    def write(self, predictions: Sequence[Prediction]) -> None:
        write_table(predictions_to_frame(predictions), self.path, sheet_name=self.sheet_name)
