#!/usr/bin/env python3
"""
Stage 6 validation: label assignment from rating
"""

import math

from sentiprep.core.review import Review, Sentiment
from sentiprep.preprocessing.labeler import assign_label, label_for_rating


class TestStage6Labeling:
    """Stage 6: Label Assigner"""

    def test_1_boundaries(self):
        assert label_for_rating(2.499999) is Sentiment.NEGATIVE
        assert label_for_rating(2.5) is Sentiment.POSITIVE
        assert label_for_rating(5.0) is Sentiment.POSITIVE
        assert label_for_rating(0.5) is Sentiment.NEGATIVE

    def test_2_unknown_kept_in_domain(self):
        assert label_for_rating(math.nan) is Sentiment.UNKNOWN

    def test_3_custom_threshold(self):
        assert label_for_rating(3.0, threshold=3.5) is Sentiment.NEGATIVE
        assert label_for_rating(3.5, threshold=3.5) is Sentiment.POSITIVE

    def test_4_overwrites_existing_labels(self):
        records = [Review("bad", 1.0, Sentiment.POSITIVE), Review("fine", 4.0, Sentiment.UNKNOWN)]

        labeled = assign_label(records)

        assert labeled == [Review("bad", 1.0, Sentiment.NEGATIVE), Review("fine", 4.0, Sentiment.POSITIVE)]
        assert records[0].sentiment is Sentiment.POSITIVE
