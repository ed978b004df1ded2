"""
Sentiment label assignment from the numeric rating.
"""

from collections import Counter
from typing import List, Sequence

from sentiprep.core.logger import get_logger
from sentiprep.core.review import Review, Sentiment

logger = get_logger(__name__)

DEFAULT_THRESHOLD = 2.5


def label_for_rating(rating: float, threshold: float = DEFAULT_THRESHOLD) -> Sentiment:
    """Negative below ``threshold``, Positive at or above it."""
    if rating < threshold:
        return Sentiment.NEGATIVE
    elif rating >= threshold:
        return Sentiment.POSITIVE
    # Only reachable for NaN ratings
    return Sentiment.UNKNOWN


def assign_label(records: Sequence[Review], threshold: float = DEFAULT_THRESHOLD) -> List[Review]:
    """
    Overwrite every record's sentiment from its rating.

    Args:
        records: Records to label
        threshold: Lowest rating labeled Positive

    Returns:
        New records with final sentiment labels
    """
    labeled = [review.with_sentiment(label_for_rating(review.rating, threshold)) for review in records]

    distribution = Counter(review.sentiment.value for review in labeled)
    logger.info(f"Assigned labels to {len(labeled)} records: {dict(distribution)}")

    return labeled
