"""
Fit a multinomial (softmax) logistic regression over TF‑IDF features.

Training is a single blocking call with no warm start.  Any training
set size is accepted as long as it holds at least two distinct
categories.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np
from sklearn.linear_model import LogisticRegression

from ..errors import InsufficientClassDiversity
from .features import FeatureConfig, fit_label_index, fit_text_featurizer
from .model import TrainedModel

MIN_CLASSES = 2


@dataclass(frozen=True)
class TrainerConfig:
    C: float = 10.0
    max_iter: int = 1000
    tol: float = 1e-4
    solver: str = "lbfgs"
    random_state: int = 42
    features: FeatureConfig = field(default_factory=FeatureConfig)


def check_class_diversity(distinct: int) -> None:
    """Raise `InsufficientClassDiversity` unless `distinct` reaches `MIN_CLASSES`."""
    if distinct < MIN_CLASSES:
        raise InsufficientClassDiversity(
            f"Training data must contain at least {MIN_CLASSES} distinct "
            f"categories, found {distinct}"
        )


def _fit_classifier(X, y: np.ndarray, config: TrainerConfig) -> LogisticRegression:
    clf = LogisticRegression(
        C=config.C,
        max_iter=config.max_iter,
        tol=config.tol,
        solver=config.solver,
        random_state=config.random_state,
    )
    clf.fit(X, y)
    return clf


def fit(X, y: np.ndarray, config: TrainerConfig | None = None) -> LogisticRegression:
    """Fit the classifier on features `X` and contiguous label indices `y`.

    Raises
    ------
    InsufficientClassDiversity
        If `y` holds fewer than two distinct classes.
    """
    check_class_diversity(np.unique(y).size)
    return _fit_classifier(X, y, config or TrainerConfig())


def train_model(records: Sequence, config: TrainerConfig | None = None) -> TrainedModel:
    """Fit the feature pipeline and classifier over labeled records.

    Class diversity is checked before the feature fit.
    """
    config = config or TrainerConfig()
    categories = [r.category for r in records]
    check_class_diversity(len(set(categories)))
    label_encoder, y = fit_label_index(categories)
    logging.info(
        "Fitting features on %d training rows (%s)",
        len(records),
        ", ".join(label_encoder.classes_),
    )
    featurizer, X = fit_text_featurizer([r.text for r in records], config.features)
    logging.info("Training classifier on %d features…", X.shape[1])
    classifier = _fit_classifier(X, y, config)
    return TrainedModel(
        featurizer=featurizer,
        classifier=classifier,
        label_encoder=label_encoder,
    )
