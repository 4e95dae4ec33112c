"""
Prediction engine: apply a trained model to a single text.

`predict` is a pure function of the model and the text.  Scores are
class probabilities laid out positionally as Negative, Neutral,
Positive regardless of the classifier's internal class order; a
category absent from the training data scores 0.0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .labels import CATEGORY_ORDER, Sentiment
from .model import TrainedModel

SCORE_SEPARATOR = ", "


@dataclass(frozen=True)
class Prediction:
    text: str
    predicted_category: Sentiment
    scores: Tuple[float, ...]

    @property
    def label(self) -> str:
        return self.predicted_category.display

    def score_for(self, category: Sentiment) -> float:
        return self.scores[CATEGORY_ORDER.index(category)]

    def scores_text(self, separator: str = SCORE_SEPARATOR) -> str:
        """Render the scores as a delimited list, e.g. ``"0.100000, 0.200000, 0.700000"``."""
        return separator.join(f"{score:.6f}" for score in self.scores)


def predict(model: TrainedModel, text: str) -> Prediction:
    features = model.featurizer.transform([text])
    probabilities = model.classifier.predict_proba(features)[0]
    scores = [0.0] * len(CATEGORY_ORDER)
    for category, probability in zip(model.categories, probabilities):
        scores[CATEGORY_ORDER.index(category)] = float(probability)
    best = model.categories[int(np.argmax(probabilities))]
    return Prediction(text=text, predicted_category=best, scores=tuple(scores))


def one_hot_prediction(text: str, category: Sentiment) -> Prediction:
    """Prediction with all weight on `category`, for classifiers without scores."""
    scores = tuple(1.0 if c is category else 0.0 for c in CATEGORY_ORDER)
    return Prediction(text=text, predicted_category=category, scores=scores)
