"""
High‑level pipeline orchestration functions.

These functions wire the classification run to the paths and classifier
backend configured in `config`.  Use them from the command line or
import them into your own scripts/notebooks.
"""

from __future__ import annotations

import logging
from pathlib import Path

from . import config
from .classification import text_classifier
from .classification.classifiers import LLM_BACKEND


def run_classification(
    training_path: Path | None = None,
    input_path: Path | None = None,
    output_path: Path | None = None,
    backend: str | None = None,
    report_path: Path | None = None,
    show_progress: bool = True,
) -> text_classifier.BatchRun:
    """Train on the labeled spreadsheet and classify the unlabeled one.

    Arguments left as `None` fall back to the configured defaults.  The
    predictions are written to `output_path`, or `config.OUTPUT_FILE`.
    """
    backend = backend or config.CLASSIFIER_BACKEND
    output_path = output_path or config.OUTPUT_FILE
    remote_options = config.remote_options() if backend == LLM_BACKEND else None

    logging.info("Running sentiment classification pipeline…")
    run = text_classifier.run_pipeline(
        training_path=training_path or config.TRAINING_DATA_FILE,
        input_path=input_path or config.INPUT_DATA_FILE,
        output_path=output_path,
        backend=backend,
        report_path=report_path,
        remote_options=remote_options,
        show_progress=show_progress,
    )
    logging.info("Wrote %d predictions to %s", len(run.predictions), output_path)
    return run
