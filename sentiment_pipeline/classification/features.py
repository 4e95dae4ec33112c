"""
Feature pipeline: raw text to TF‑IDF vectors, categories to model indices.

The text featurizer combines word unigrams/bigrams with character
trigrams, each TF‑IDF weighted and L2 normalised, and concatenates them
into one sparse feature matrix.  It is fitted once on the training
corpus; the same fitted object is reused for every inference call so
that unseen tokens simply contribute nothing to the vector.

Categories are indexed with a `LabelEncoder` over their lower-case
names.  That internal index is used by the classifier only and is
unrelated to the external codes in `labels`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

import numpy as np
from scipy import sparse
from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.pipeline import FeatureUnion, Pipeline
from sklearn.preprocessing import FunctionTransformer, LabelEncoder

from ..data_processing.utils import normalise_texts
from ..errors import EmptyVocabulary
from .labels import Sentiment


# Keeps one-character words, which the default pattern drops.
SINGLE_CHAR_TOKENS = r"(?u)\b\w+\b"


@dataclass(frozen=True)
class FeatureConfig:
    word_ngram_range: Tuple[int, int] = (1, 2)
    char_ngram_range: Tuple[int, int] = (3, 3)
    sublinear_tf: bool = True


def build_text_featurizer(config: FeatureConfig | None = None) -> Pipeline:
    """Return an unfitted text featurizer."""
    config = config or FeatureConfig()
    return Pipeline([
        ("normalise", FunctionTransformer(normalise_texts)),
        ("features", FeatureUnion([
            ("words", TfidfVectorizer(
                analyzer="word",
                token_pattern=SINGLE_CHAR_TOKENS,
                ngram_range=config.word_ngram_range,
                sublinear_tf=config.sublinear_tf,
            )),
            ("chars", TfidfVectorizer(
                analyzer="char_wb",
                ngram_range=config.char_ngram_range,
                sublinear_tf=config.sublinear_tf,
            )),
        ])),
    ])


def fit_text_featurizer(
    texts: Sequence[str], config: FeatureConfig | None = None
) -> Tuple[Pipeline, sparse.csr_matrix]:
    """Fit a featurizer on the training texts and return it with their features."""
    featurizer = build_text_featurizer(config)
    try:
        X = featurizer.fit_transform(list(texts))
    except ValueError as exc:
        if "empty vocabulary" not in str(exc):
            raise
        raise EmptyVocabulary(
            f"Training texts produced no features ({len(texts)} rows); they may all be blank"
        ) from exc
    return featurizer, sparse.csr_matrix(X)


def fit_label_index(categories: Iterable[Sentiment]) -> Tuple[LabelEncoder, np.ndarray]:
    """Index categories contiguously and return the encoder with the index array."""
    keys = [c.key for c in categories]
    encoder = LabelEncoder()
    y = encoder.fit_transform(keys)
    return encoder, y


def categories_for_index(encoder: LabelEncoder, indices) -> list[Sentiment]:
    """Map internal model indices back to `Sentiment` members."""
    return [Sentiment.from_label(key) for key in encoder.inverse_transform(np.asarray(indices))]
