"""
End‑to‑end sentiment classification run.

This module loads a labeled training table, fits the feature pipeline
and classifier, classifies every row of an unlabeled table in source
order, and writes the predictions to an output table.  The run is
strictly sequential: any failure aborts it before the output is
written, so either every prediction is saved or none is.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from sklearn.metrics import classification_report
from tqdm import tqdm

from ..data_processing.records import LabeledRecord, UnlabeledRecord
from ..data_processing.tabular import (
    SpreadsheetSink,
    SpreadsheetSource,
    TabularSink,
    TabularSource,
)
from ..errors import EmptySource, MissingSource
from .classifiers import (
    LOCAL_BACKEND,
    SentimentClassifier,
    build_classifier,
    classifier_type,
)
from .labels import CATEGORY_ORDER
from .model import TrainedModel
from .predictor import Prediction, predict
from .trainer import TrainerConfig, train_model


@dataclass
class BatchRun:
    """Outcome of a completed run."""

    predictions: List[Prediction]
    model: Optional[TrainedModel] = None
    report: Optional[str] = None
    classifier: str = LOCAL_BACKEND


def load_labeled_data(source: TabularSource) -> List[LabeledRecord]:
    """Read every training record; an empty source aborts the run."""
    records = source.read_labeled()
    if not records:
        raise EmptySource(source.name, "training")
    return records


def load_unlabeled_data(source: TabularSource) -> List[UnlabeledRecord]:
    """Read every inference record; an empty source aborts the run."""
    records = source.read_unlabeled()
    if not records:
        raise EmptySource(source.name, "input")
    return records


def evaluate_model(model: TrainedModel, records: Sequence[LabeledRecord]) -> str:
    """Classification report of `model` over `records` (typically its training set)."""
    y_true = [r.category.display for r in records]
    y_pred = [predict(model, r.text).predicted_category.display for r in records]
    return classification_report(
        y_true,
        y_pred,
        labels=[c.display for c in CATEGORY_ORDER],
        zero_division=0,
    )


def label_unlabeled(
    classifier: SentimentClassifier,
    records: Sequence[UnlabeledRecord],
    show_progress: bool = False,
) -> List[Prediction]:
    """Classify each record in order; row i of the input is row i of the result."""
    return [
        classifier.classify(record.text)
        for record in tqdm(records, desc="Classifying", unit="row", disable=not show_progress)
    ]


def save_predictions(predictions: Sequence[Prediction], sink: TabularSink) -> None:
    sink.write(predictions)


def run_batch(
    inference_source: TabularSource,
    sink: TabularSink,
    training_source: TabularSource | None = None,
    backend: str = LOCAL_BACKEND,
    trainer_config: TrainerConfig | None = None,
    report_path: Path | None = None,
    remote_options: Dict[str, Any] | None = None,
    show_progress: bool = False,
) -> BatchRun:
    """Train (when the backend needs a model), classify the inference rows, write the sink."""
    model: TrainedModel | None = None
    report: str | None = None
    if classifier_type(backend).requires_training:
        if training_source is None:
            raise ValueError(f"The {backend} classifier needs a training source")
        logging.info("Loading labeled dataset…")
        training_records = load_labeled_data(training_source)
        logging.info("Training model on %d rows…", len(training_records))
        model = train_model(training_records, trainer_config)
        if report_path is not None:
            report = evaluate_model(model, training_records)
            report_path = Path(report_path)
            report_path.parent.mkdir(parents=True, exist_ok=True)
            with report_path.open("w", encoding="utf-8") as f:
                f.write(report)
            logging.info("Wrote training report to %s", report_path)

    classifier = build_classifier(backend, model=model, **(remote_options or {}))

    logging.info("Loading unlabeled dataset…")
    records = load_unlabeled_data(inference_source)

    logging.info("Predicting sentiment for %d rows with the %s classifier…", len(records), classifier.name)
    predictions = label_unlabeled(classifier, records, show_progress=show_progress)

    logging.info("Saving %d predictions…", len(predictions))
    save_predictions(predictions, sink)
    return BatchRun(predictions=predictions, model=model, report=report, classifier=classifier.name)


def run_pipeline(
    training_path: Path | None,
    input_path: Path,
    output_path: Path,
    backend: str = LOCAL_BACKEND,
    **options: Any,
) -> BatchRun:
    """Execute the full classification run over spreadsheet files.

    Every required file and the output format are checked before any
    work starts, so a bad path aborts the run without touching the output.
    """
    needs_training = classifier_type(backend).requires_training
    required = [("input", input_path)]
    if needs_training:
        required.insert(0, ("training", training_path))
    for role, path in required:
        if path is None or not Path(path).is_file():
            logging.error("%s file not found: %s", role.capitalize(), path)
            raise MissingSource(path if path is not None else "", role)
    sink = SpreadsheetSink(output_path)

    training_source = SpreadsheetSource(training_path, "training") if needs_training else None
    return run_batch(
        inference_source=SpreadsheetSource(input_path, "input"),
        sink=sink,
        training_source=training_source,
        backend=backend,
        **options,
    )
