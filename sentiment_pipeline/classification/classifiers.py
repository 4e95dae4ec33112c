"""
Interchangeable single-row sentiment classifiers.

`LocalModelClassifier` wraps a `TrainedModel` and the prediction engine.
`RemoteLLMClassifier` asks a hosted text-completion endpoint for one of
the three category names.  The batch driver only depends on the
`SentimentClassifier` interface; `build_classifier` picks the variant
named by configuration.
"""

from __future__ import annotations

import logging
import random
import time
from abc import ABC, abstractmethod
from typing import Any

import requests

from ..errors import ClassifierRequestError
from .labels import Sentiment
from .model import TrainedModel
from .predictor import Prediction, one_hot_prediction, predict

LOCAL_BACKEND = "local"
LLM_BACKEND = "llm"
BACKENDS = (LOCAL_BACKEND, LLM_BACKEND)

PROMPT_TEMPLATE = (
    'Analyze the sentiment of the following text: "{text}". '
    "Respond with 'Positive', 'Neutral', or 'Negative'."
)


class SentimentClassifier(ABC):
    """Classify one text at a time."""

    name: str = ""

    # Whether the batch driver must fit a model before this classifier is usable.
    requires_training: bool = False

    @abstractmethod
    def classify(self, text: str) -> Prediction:
        ...


class LocalModelClassifier(SentimentClassifier):
    name = LOCAL_BACKEND
    requires_training = True

    def __init__(self, model: TrainedModel) -> None:
        self.model = model

    def classify(self, text: str) -> Prediction:
        return predict(self.model, text)


class RemoteLLMClassifier(SentimentClassifier):
    """Sentiment from a hosted completion endpoint, one request per text.

    Each call has a timeout.  HTTP 429/5xx responses and connection
    errors are retried with exponential backoff and jitter up to
    `max_retries` times; after that, or on any other HTTP error, the
    call raises `ClassifierRequestError`.  The completion must name one
    of the three categories; anything else raises `InvalidLabel`.
    """

    name = LLM_BACKEND

    def __init__(
        self,
        api_key: str | None,
        endpoint: str = "https://api.openai.com/v1/completions",
        model_name: str = "gpt-3.5-turbo-instruct",
        timeout: float = 30.0,
        max_retries: int = 5,
        backoff: float = 0.5,
        session: requests.Session | None = None,
    ) -> None:
        if not api_key:
            raise ClassifierRequestError("An API key is required for the remote classifier")
        self.endpoint = endpoint
        self.model_name = model_name
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff = backoff
        self.session = session or requests.Session()
        self.session.headers.update({"Authorization": f"Bearer {api_key}"})

    def _post(self, body: dict[str, Any]) -> dict[str, Any]:
        attempt = 0
        backoff = self.backoff
        while True:
            attempt += 1
            try:
                resp = self.session.post(self.endpoint, json=body, timeout=self.timeout)
            except (requests.ConnectionError, requests.Timeout) as exc:
                if attempt <= self.max_retries:
                    sleep_for = backoff + random.uniform(0, 0.5)
                    logging.warning(
                        "Request to %s failed (%s); retrying in %.2fs (attempt %s)",
                        self.endpoint, exc, sleep_for, attempt,
                    )
                    time.sleep(sleep_for)
                    backoff *= 2
                    continue
                raise ClassifierRequestError(
                    f"Request to {self.endpoint} failed after {attempt} attempts: {exc}"
                ) from exc
            status = resp.status_code
            if (status == 429 or 500 <= status < 600) and attempt <= self.max_retries:
                sleep_for = backoff + random.uniform(0, 0.5)
                logging.warning(
                    "HTTP %s from %s; backing off %.2fs (attempt %s)",
                    status, self.endpoint, sleep_for, attempt,
                )
                time.sleep(sleep_for)
                backoff *= 2
                continue
            if status >= 400:
                logging.warning("HTTP %s from %s: %s", status, self.endpoint, resp.text[:300])
                raise ClassifierRequestError(f"HTTP {status} from {self.endpoint}")
            try:
                return resp.json()
            except ValueError as exc:
                raise ClassifierRequestError(f"Non-JSON response from {self.endpoint}") from exc

    @staticmethod
    def parse_completion(data: dict[str, Any]) -> Sentiment:
        try:
            completion = data["choices"][0]["text"]
        except (KeyError, IndexError, TypeError) as exc:
            raise ClassifierRequestError(f"Unexpected completion payload: {data!r:.300}") from exc
        return Sentiment.from_label(completion.strip().strip(".'\"").strip())

    def classify(self, text: str) -> Prediction:
        body = {
            "model": self.model_name,
            "prompt": PROMPT_TEMPLATE.format(text=text),
            "max_tokens": 10,
            "temperature": 0,
        }
        category = self.parse_completion(self._post(body))
        return one_hot_prediction(text, category)


def classifier_type(backend: str) -> type[SentimentClassifier]:
    """Return the classifier class named by `backend` (``local`` or ``llm``)."""
    for cls in (LocalModelClassifier, RemoteLLMClassifier):
        if cls.name == backend:
            return cls
    raise ValueError(f"Unknown classifier backend {backend!r}; expected one of {BACKENDS}")


def build_classifier(
    backend: str, model: TrainedModel | None = None, **remote_options: Any
) -> SentimentClassifier:
    """Instantiate the classifier variant named by `backend`."""
    cls = classifier_type(backend)
    if cls.requires_training:
        if model is None:
            raise ValueError(f"The {backend} classifier needs a trained model")
        return cls(model)
    return cls(**remote_options)


__all__ = [
    "BACKENDS",
    "LocalModelClassifier",
    "RemoteLLMClassifier",
    "SentimentClassifier",
    "build_classifier",
    "classifier_type",
]
