#!/usr/bin/env python3
"""
Stage 5 validation: text normalization
"""

from sentiprep.core.logger import get_logger
from sentiprep.core.review import Review, Sentiment
from sentiprep.preprocessing.normalizer import TextNormalizer, normalize

logger = get_logger(__name__)


class TestStage5Normalization:
    """Stage 5: Text Normalizer"""

    @classmethod
    def setup_class(cls):
        cls.normalizer = TextNormalizer()
        logger.info("Testing Stage 5: normalization")

    def test_1_text_normalization(self):
        test_cases = [
            ("I can not believe it is so good!!", "i can not believe it is so good"),
            ("Café naïve résumé", "cafe naive resume"),
            ("Terrible, wouldn't come back.", "terrible wouldnt come back"),
            ("Paid $12.50 for 2 items", "paid $1250 for 2 items"),
            ("well-done", "welldone"),
        ]

        for original, expected in test_cases:
            normalized, _ = self.normalizer.normalize_text(original)
            assert normalized == expected, f"{original!r} -> {normalized!r}"

    def test_2_whitespace_structure_kept(self):
        normalized, _ = self.normalizer.normalize_text("A,  B\tC\nD")

        assert normalized == "a  b\tc\nd"

    def test_3_idempotent(self):
        for text in ["ÀÉÎÕÜ déjà-vu!", "already clean 123", "ℌello Ｗorld"]:
            once, _ = self.normalizer.normalize_text(text)
            twice, _ = self.normalizer.normalize_text(once)
            assert once == twice

    def test_3b_only_accents_are_reduced(self):
        text = "\u00bd x\u00b2 \u2122 a\u00a0b \ufb01 \ud55c\uad6d"

        normalized, stats = self.normalizer.normalize_text(text)

        assert normalized == text
        assert stats.diacritics_removed == 0

    def test_4_stats(self):
        normalized, stats = self.normalizer.normalize_text("Né, ok!")

        assert normalized == "ne ok"
        assert stats.original_length == 7
        assert stats.normalized_length == 5
        assert stats.diacritics_removed == 1
        assert stats.punctuation_removed == 2

    def test_5_empty(self):
        normalized, stats = self.normalizer.normalize_text("")

        assert normalized == ""
        assert stats.original_length == 0

    def test_6_records(self):
        records = [Review("Déjà VU!", 3.0, Sentiment.UNKNOWN)]

        assert normalize(records) == [Review("deja vu", 3.0, Sentiment.UNKNOWN)]
