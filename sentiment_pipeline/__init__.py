"""
Sentiment Pipeline Package

Trains a three-class (Negative, Neutral, Positive) text sentiment
classifier from a labeled spreadsheet and applies it to a batch of
unlabeled rows, exporting predicted labels and per-class scores.
Modules are organised by stage and can be used independently or
orchestrated together through the high‑level pipeline functions.
"""

from . import config  # noqa: F401
from . import pipelines  # noqa: F401

__all__ = [
    "config",
    "pipelines",
]
