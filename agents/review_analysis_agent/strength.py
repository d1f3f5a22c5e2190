"""
Live "review strength" feedback for the input box.
"""

from enum import Enum

from pydantic import BaseModel


class StrengthLabel(str, Enum):
    EMPTY = "Empty"
    WEAK = "Weak"
    FAIR = "Fair"
    GOOD = "Good"
    EXCELLENT = "Excellent"


class ReviewStrength(BaseModel):
    label: StrengthLabel
    width: float  # fraction of the meter to fill, 0.0 - 1.0
    word_count: int


# (exclusive upper word bound, label, width); anything above the last bound is Excellent
_THRESHOLDS = [
    (1, StrengthLabel.EMPTY, 0.0),
    (10, StrengthLabel.WEAK, 0.25),
    (30, StrengthLabel.FAIR, 0.5),
    (60, StrengthLabel.GOOD, 0.75),
]


def count_words(text: str) -> int:
    return len((text or "").split())


def score_review_strength(text: str) -> ReviewStrength:
    """Map review text to a coarse quality label by whitespace word count."""
    words = count_words(text)
    for upper_bound, label, width in _THRESHOLDS:
        if words < upper_bound:
            return ReviewStrength(label=label, width=width, word_count=words)
    return ReviewStrength(label=StrengthLabel.EXCELLENT, width=1.0, word_count=words)
