"""
Record types read from tabular sources.

A training table carries the text in its first column and the label in
its second; an inference table only needs the text column and any other
column is ignored.  Columns are addressed by position because the
header row is skipped rather than interpreted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

import pandas as pd

from ..classification.labels import Sentiment, UNLABELED_CODE, decode
from ..errors import InvalidLabel, MalformedSource
from .utils import cell_text

TEXT_COLUMN = 0
LABEL_COLUMN = 1

# Spreadsheet row of the first data row (1-based, after the header).
FIRST_DATA_ROW = 2


@dataclass(frozen=True)
class LabeledRecord:
    text: str
    category: Sentiment


@dataclass(frozen=True)
class UnlabeledRecord:
    """An inference row.  `code` is the unlabeled sentinel, never a real label."""

    text: str
    code: int = UNLABELED_CODE

    @property
    def label(self) -> str:
        return decode(self.code)


def labeled_records_from_frame(df: pd.DataFrame) -> List[LabeledRecord]:
    """Convert a training table into labeled records.

    Raises
    ------
    MalformedSource
        If the table has fewer than two columns.
    InvalidLabel
        On the first row whose label is not a recognised category.
    """
    if df.shape[1] <= LABEL_COLUMN:
        raise MalformedSource(
            f"Training data needs a text and a label column, found {df.shape[1]} column(s)"
        )
    records: List[LabeledRecord] = []
    for offset, (text, label) in enumerate(
        zip(df.iloc[:, TEXT_COLUMN], df.iloc[:, LABEL_COLUMN])
    ):
        try:
            category = Sentiment.from_label(cell_text(label))
        except InvalidLabel as exc:
            raise InvalidLabel(label, row=offset + FIRST_DATA_ROW) from exc
        records.append(LabeledRecord(text=cell_text(text), category=category))
    return records


def unlabeled_records_from_frame(df: pd.DataFrame) -> List[UnlabeledRecord]:
    """Convert an inference table into unlabeled records, in row order."""
    if df.shape[1] <= TEXT_COLUMN:
        raise MalformedSource("Inference data needs a text column")
    return [UnlabeledRecord(text=cell_text(text)) for text in df.iloc[:, TEXT_COLUMN]]
