"""
Shared pytest configuration and fixtures.

Puts the project root on sys.path so all test modules can import
`sentiment_pipeline` without a package install.  Also defines small
corpora, spreadsheet writers and in-memory sources/sinks.
"""

import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Ensure project root is importable from every test file
# ---------------------------------------------------------------------------
_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(_ROOT))

import pandas as pd
import pytest

from sentiment_pipeline.classification.labels import Sentiment
from sentiment_pipeline.classification.trainer import train_model
from sentiment_pipeline.data_processing.records import LabeledRecord, UnlabeledRecord
from sentiment_pipeline.data_processing.tabular import TabularSink, TabularSource


MINIMAL_TRAINING_ROWS = [
    ("great service", "positive"),
    ("awful wait", "negative"),
    ("it was fine", "neutral"),
]

TRAINING_ROWS = [
    ("Great service and friendly staff", "Positive"),
    ("I love working here, the team is amazing", "positive"),
    ("Excellent benefits and a supportive manager", "POSITIVE"),
    ("Wonderful culture, highly recommended", "positive"),
    ("Awful management and a long wait for anything", "negative"),
    ("Terrible pay, I hate the overtime", "Negative"),
    ("Worst job I have ever had", "negative"),
    ("Rude colleagues and poor communication", "negative"),
    ("It was fine, nothing special", "neutral"),
    ("The office is an office", "Neutral"),
    ("Average pay, average hours", "neutral"),
    ("Work is okay I guess", "neutral"),
]

INFERENCE_TEXTS = [
    "The staff were great and friendly",
    "Terrible management, awful pay",
    "It is an average office",
    "Something never seen before: zebra quartz",
]


class ListSource(TabularSource):
    """In-memory source built from (text, label) tuples or plain texts."""

    name = "<memory>"

    def __init__(self, rows):
        self.rows = list(rows)

    def read_labeled(self):
        return [LabeledRecord(text, Sentiment.from_label(label)) for text, label in self.rows]

    def read_unlabeled(self):
        return [UnlabeledRecord(row if isinstance(row, str) else row[0]) for row in self.rows]


class ListSink(TabularSink):
    def __init__(self):
        self.writes = []

    def write(self, predictions):
        self.writes.append(list(predictions))


def write_sheet(path, rows, columns=("text", "label")):
    """Write rows to an .xlsx or .csv file with a header row."""
    df = pd.DataFrame(list(rows), columns=list(columns))
    if Path(path).suffix == ".csv":
        df.to_csv(path, index=False)
    else:
        df.to_excel(path, index=False)
    return Path(path)


@pytest.fixture
def labeled_records():
    return ListSource(TRAINING_ROWS).read_labeled()


@pytest.fixture(scope="module")
def trained_model():
    return train_model(ListSource(TRAINING_ROWS).read_labeled())


@pytest.fixture(scope="module")
def minimal_model():
    return train_model(ListSource(MINIMAL_TRAINING_ROWS).read_labeled())


@pytest.fixture
def training_file(tmp_path):
    return write_sheet(tmp_path / "training_data.xlsx", TRAINING_ROWS)


@pytest.fixture
def input_file(tmp_path):
    return write_sheet(tmp_path / "employee_reviews.xlsx", [(t,) for t in INFERENCE_TEXTS], columns=("text",))
