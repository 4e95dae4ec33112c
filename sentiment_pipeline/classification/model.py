"""
The trained model artifact.

A `TrainedModel` bundles the fitted text featurizer, the fitted
classifier and the label index.  It is built once per run by the
trainer and only read afterwards.  `to_bytes`/`from_bytes` define a
versioned serialization boundary so training and inference can later
run in separate processes.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Tuple

import joblib
from sklearn.linear_model import LogisticRegression
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import LabelEncoder

from ..errors import ModelFormatError
from .features import categories_for_index
from .labels import Sentiment

MODEL_FORMAT_VERSION = 1


@dataclass(frozen=True)
class TrainedModel:
    featurizer: Pipeline
    classifier: LogisticRegression
    label_encoder: LabelEncoder
    format_version: int = MODEL_FORMAT_VERSION

    @property
    def categories(self) -> Tuple[Sentiment, ...]:
        """Categories the classifier was fitted on, in its internal column order."""
        return tuple(categories_for_index(self.label_encoder, self.classifier.classes_))

    def to_bytes(self) -> bytes:
        buffer = io.BytesIO()
        joblib.dump(
            {
                "format_version": self.format_version,
                "featurizer": self.featurizer,
                "classifier": self.classifier,
                "label_encoder": self.label_encoder,
            },
            buffer,
        )
        return buffer.getvalue()

    @classmethod
    def from_bytes(cls, payload: bytes) -> "TrainedModel":
        """Rebuild a model from `to_bytes` output.

        Only load payloads from trusted sources; they are unpickled.
        """
        try:
            state = joblib.load(io.BytesIO(payload))
        except Exception as exc:
            raise ModelFormatError(f"Unreadable model payload: {exc}") from exc
        if not isinstance(state, dict):
            raise ModelFormatError("Model payload is not a model state mapping")
        version = state.get("format_version")
        if version != MODEL_FORMAT_VERSION:
            raise ModelFormatError(f"Unsupported model format version: {version!r}")
        try:
            return cls(
                featurizer=state["featurizer"],
                classifier=state["classifier"],
                label_encoder=state["label_encoder"],
                format_version=version,
            )
        except KeyError as exc:
            raise ModelFormatError(f"Model payload missing {exc.args[0]!r}") from exc
