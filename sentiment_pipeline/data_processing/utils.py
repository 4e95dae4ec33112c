"""
Text helpers shared by the feature pipeline and record loading.
"""

from __future__ import annotations

import math
import re
from typing import Iterable, List


def normalise_text(text: str) -> str:
    """Lowercase and remove non‑alphanumeric characters from a string."""
    if not isinstance(text, str):
        return ""
    lower = text.lower()
    # Replace non‑alphanumeric characters with spaces
    cleaned = re.sub(r"[^\w]+", " ", lower)
    # Collapse multiple spaces and strip
    return re.sub(r"\s+", " ", cleaned).strip()


def normalise_texts(texts: Iterable[str]) -> List[str]:
    """Apply `normalise_text` to every document in `texts`."""
    return [normalise_text(t) for t in texts]


def cell_text(value) -> str:
    """Render a spreadsheet cell as text; empty cells become ``""``."""
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value)
