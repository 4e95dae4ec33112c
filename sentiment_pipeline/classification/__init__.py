"""
Subpackage for supervised sentiment classification.

`labels` defines the sentiment categories, `features` and `trainer`
fit the model, `predictor` applies it to one text, `classifiers`
offers the local and remote classifier variants, and
`text_classifier` runs the whole batch.
"""

__all__ = [
    "labels",
    "features",
    "model",
    "trainer",
    "predictor",
    "classifiers",
    "text_classifier",
]
