"""
Review record shared by every pipeline stage.

A review is a free-text body plus a numeric rating in (0, 5] and a
sentiment label. Stages never mutate a review; they build a new one
from the old one's fields.
"""

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class Sentiment(Enum):
    """Sentiment label domain"""
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    UNKNOWN = "Unknown"      # Ingestion placeholder, kept for schema stability

    @classmethod
    def parse(cls, value: Optional[Any]) -> "Sentiment":
        """Map a raw tabular value to a label, defaulting to UNKNOWN."""
        if isinstance(value, Sentiment):
            return value
        if value is None or (isinstance(value, float) and math.isnan(value)):
            return cls.UNKNOWN
        text = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        return cls.UNKNOWN


# Column names used for tabular snapshots
TEXT_COLUMN = "ReviewText"
RATING_COLUMN = "Rating"
SENTIMENT_COLUMN = "Sentiment"


@dataclass(frozen=True)
class Review:
    """A single customer review flowing through the pipeline"""
    text: str
    rating: float
    sentiment: Sentiment = Sentiment.UNKNOWN

    def is_valid(self) -> bool:
        """Non-blank text and a strictly positive rating (NaN is invalid)."""
        return bool(self.text and self.text.strip()) and self.rating > 0

    def key(self) -> Tuple[str, float]:
        """Duplicate identity"""
        return (self.text, self.rating)

    def with_text(self, text: str) -> "Review":
        return replace(self, text=text)

    def with_sentiment(self, sentiment: Sentiment) -> "Review":
        return replace(self, sentiment=sentiment)

    def to_dict(self) -> Dict[str, Any]:
        return {
            TEXT_COLUMN: self.text,
            RATING_COLUMN: self.rating,
            SENTIMENT_COLUMN: self.sentiment.value,
        }
