"""
Sentiment categories and the label codec.

`Sentiment` is the one place the three-category scheme is defined; the
codec, the prediction scores and the output columns all derive from it.
`encode` is strict and rejects anything outside the three categories,
while `decode` is lenient and maps unknown codes to ``"Unknown"`` so that
sentinel values (such as the code carried by unlabeled rows) can still be
displayed.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from ..errors import InvalidLabel

UNKNOWN_LABEL = "Unknown"

# Code carried by inference rows that have no label.
UNLABELED_CODE = -1


class Sentiment(Enum):
    """The three sentiment categories, valued by their external integer code."""

    NEGATIVE = 0
    NEUTRAL = 1
    POSITIVE = 2

    @property
    def code(self) -> int:
        return self.value

    @property
    def display(self) -> str:
        """Display string used in output files, e.g. ``"Positive"``."""
        return self.name.capitalize()

    @property
    def key(self) -> str:
        """Lower-case name accepted by `encode`."""
        return self.name.lower()

    @classmethod
    def from_label(cls, label: str) -> "Sentiment":
        return cls(encode(label))


# Positional order of per-class scores in every prediction.
CATEGORY_ORDER: Tuple[Sentiment, ...] = tuple(sorted(Sentiment, key=lambda s: s.code))

_CODES_BY_KEY = {s.key: s.code for s in Sentiment}
_DISPLAY_BY_CODE = {s.code: s.display for s in Sentiment}


def encode(label: str) -> int:
    """Map a category name (case-insensitive) to its integer code.

    Raises
    ------
    InvalidLabel
        If `label` is not ``negative``, ``neutral`` or ``positive``.
    """
    if not isinstance(label, str):
        raise InvalidLabel(label)
    try:
        return _CODES_BY_KEY[label.lower()]
    except KeyError:
        raise InvalidLabel(label) from None


def decode(code: int) -> str:
    """Map an integer code to its display string, or ``"Unknown"``."""
    return _DISPLAY_BY_CODE.get(code, UNKNOWN_LABEL)
