"""
CSV reading and writing of review records.

Reads raw review tables into ``Review`` records and writes per-stage
snapshots back out. Uses pandas for all tabular I/O.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Union

import pandas as pd

from sentiprep.core.logger import get_logger
from sentiprep.core.review import (
    Review,
    Sentiment,
    TEXT_COLUMN,
    RATING_COLUMN,
    SENTIMENT_COLUMN,
)

logger = get_logger(__name__)

@dataclass
class ReviewColumns:
    """Mapping of review fields to CSV column names"""
    text: str = TEXT_COLUMN
    rating: str = RATING_COLUMN
    sentiment: str = SENTIMENT_COLUMN


def read_reviews(path: Union[str, Path], columns: ReviewColumns = None) -> List[Review]:
    """
    Read reviews from a CSV file.

    Unparsable or missing ratings become NaN and missing texts become
    empty strings; both are rejected later by the validator. An empty or
    missing sentiment defaults to Unknown.

    Args:
        path: CSV file with a header row
        columns: Column names to read

    Returns:
        Records in file order
    """
    columns = columns or ReviewColumns()
    frame = pd.read_csv(path, dtype=str, keep_default_na=False, on_bad_lines="skip")

    if columns.text not in frame.columns:
        frame[columns.text] = ""
    if columns.rating not in frame.columns:
        frame[columns.rating] = float("nan")
    if columns.sentiment not in frame.columns:
        frame[columns.sentiment] = ""

    texts = frame[columns.text].fillna("").astype(str)
    ratings = pd.to_numeric(frame[columns.rating], errors="coerce")

    records = [
        Review(text=text, rating=float(rating), sentiment=Sentiment.parse(sentiment))
        for text, rating, sentiment in zip(texts, ratings, frame[columns.sentiment])
    ]

    logger.info(f"Read {len(records)} reviews from {path}")
    return records


def write_reviews(records: Sequence[Review], path: Union[str, Path], columns: ReviewColumns = None) -> Path:
    """
    Write reviews to a CSV file, creating parent directories.

    Returns:
        Path written
    """
    columns = columns or ReviewColumns()
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    frame = pd.DataFrame(
        {
            columns.text: [review.text for review in records],
            columns.rating: [review.rating for review in records],
            columns.sentiment: [review.sentiment.value for review in records],
        },
        columns=[columns.text, columns.rating, columns.sentiment],
    )
    frame.to_csv(path, index=False)

    logger.info(f"Data saved to: {path} ({len(records)} records)")
    return path


class CsvSnapshotWriter:
    """Checkpoints each pipeline stage's output as ``NN_<stage>.csv``"""

    def __init__(self, directory: Union[str, Path], columns: ReviewColumns = None):
        self.directory = Path(directory)
        self.columns = columns or ReviewColumns()
        self._written = 0

    def write(self, stage_name: str, records: Sequence[Review]) -> Path:
        self._written += 1
        path = self.directory / f"{self._written:02d}_{stage_name}.csv"
        return write_reviews(records, path, self.columns)
