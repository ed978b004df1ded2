#!/usr/bin/env python3
"""
Tabular reading and writing of review records
"""

import math

import pytest

from sentiprep.core.logger import get_logger
from sentiprep.core.review import Review, Sentiment
from sentiprep.ingestion.tabular import (
    CsvSnapshotWriter,
    ReviewColumns,
    read_reviews,
    write_reviews,
)

logger = get_logger(__name__)


class TestTabular:
    """CSV reader and writer"""

    def test_read_defaults_missing_sentiment(self, tmp_path):
        path = tmp_path / "reviews.csv"
        path.write_text(
            "ReviewText,Rating,Sentiment\n"
            "\"Great, really great\",5,Positive\n"
            "Meh,2.5,\n"
            ",3,\n"
            "Broken,abc,\n"
            "No rating,,\n",
            encoding="utf-8",
        )

        records = read_reviews(path)

        assert len(records) == 5
        assert records[0] == Review("Great, really great", 5.0, Sentiment.POSITIVE)
        assert records[1] == Review("Meh", 2.5, Sentiment.UNKNOWN)
        assert records[2].text == ""
        assert math.isnan(records[3].rating)
        assert math.isnan(records[4].rating)

    def test_read_without_sentiment_column(self, tmp_path):
        path = tmp_path / "reviews.csv"
        path.write_text("ReviewText,Rating\nGood,4\n", encoding="utf-8")

        assert read_reviews(path) == [Review("Good", 4.0, Sentiment.UNKNOWN)]

    def test_custom_columns(self, tmp_path):
        path = tmp_path / "reviews.csv"
        path.write_text("Review,Stars\nNice place,4.5\n", encoding="utf-8")

        records = read_reviews(path, ReviewColumns(text="Review", rating="Stars"))

        assert records == [Review("Nice place", 4.5)]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_reviews(tmp_path / "missing.csv")

    def test_write_then_read(self, tmp_path):
        records = [Review("It's good, really", 4.0, Sentiment.POSITIVE), Review("bad", 1.5, Sentiment.NEGATIVE)]
        path = tmp_path / "out" / "labeled.csv"

        write_reviews(records, path)

        assert path.read_text(encoding="utf-8").splitlines()[0] == "ReviewText,Rating,Sentiment"
        assert read_reviews(path) == records

    def test_snapshot_writer_numbers_stages(self, tmp_path):
        writer = CsvSnapshotWriter(tmp_path / "snapshots")

        first = writer.write("cleaned", [Review("a", 1.0)])
        second = writer.write("balanced", [])

        assert first.name == "01_cleaned.csv"
        assert second.name == "02_balanced.csv"
        assert read_reviews(second) == []
