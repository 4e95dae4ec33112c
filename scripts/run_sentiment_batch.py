#!/usr/bin/env python
"""CLI entry point for training the sentiment model and classifying a batch.

This script is a thin wrapper around
`sentiment_pipeline.pipelines.run_classification`.  Paths not given on
the command line come from `sentiment_pipeline.config` (environment
variables or `.env`).

Examples (run from project root)
    # Train on the default training spreadsheet and classify the default input
    python scripts/run_sentiment_batch.py

    # Explicit files, with a training report
    python scripts/run_sentiment_batch.py --training-file data/training_data.xlsx \
        --input-file data/employee_reviews.xlsx --output-file results/predictions.xlsx \
        --report results/classification_report.txt

    # Use the hosted language model instead of training (needs OPENAI_API_KEY)
    python scripts/run_sentiment_batch.py --classifier llm

Exit status is 0 on success and 1 when the run aborts; the reason is logged.
"""
from __future__ import annotations

import sys
from pathlib import Path

# Ensure project root (folder containing sentiment_pipeline) is importable
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import logging

from sentiment_pipeline.classification.classifiers import BACKENDS
from sentiment_pipeline.errors import SentimentPipelineError
from sentiment_pipeline.pipelines import run_classification

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Train a sentiment classifier and label a batch of texts")
    p.add_argument("--training-file", type=Path, default=None, help="Labeled spreadsheet (text, label)")
    p.add_argument("--input-file", type=Path, default=None, help="Spreadsheet of texts to classify")
    p.add_argument("--output-file", type=Path, default=None, help="Where to write predictions (.xlsx, .csv or .json)")
    p.add_argument("--classifier", choices=BACKENDS, default=None, help="Classifier backend (default from config)")
    p.add_argument("--report", type=Path, default=None, help="Write a classification report over the training data")
    p.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    p.add_argument("--log-level", default="INFO", help="Logging level (default INFO)")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(levelname)s: %(message)s")
    try:
        run = run_classification(
            training_path=args.training_file,
            input_path=args.input_file,
            output_path=args.output_file,
            backend=args.classifier,
            report_path=args.report,
            show_progress=not args.no_progress,
        )
    except SentimentPipelineError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Classified %d rows with the %s classifier", len(run.predictions), run.classifier)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
