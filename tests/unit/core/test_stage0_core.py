#!/usr/bin/env python3
"""
Stage 0 validation: configuration, logging and the review record
"""

import json
import logging
import math

from sentiprep.core.config import Config, get_config
from sentiprep.core.logger import JSONFormatter, build_formatter, get_logger
from sentiprep.core.review import Review, Sentiment

logger = get_logger("test_stage0")


class TestStage0Config:
    """Environment-backed configuration"""

    def test_defaults(self, monkeypatch, tmp_path):
        for name in ("SENTIPREP_PART_COUNT", "SENTIPREP_RANDOM_SEED", "SENTIPREP_POSITIVE_THRESHOLD",
                     "SENTIPREP_CHECKPOINT_DIR", "SENTIPREP_ENABLE_SPELLING"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("SENTIPREP_LOG_FILE", str(tmp_path / "logs" / "test.log"))

        config = Config()

        assert config.PART_COUNT == 2
        assert config.RANDOM_SEED is None
        assert config.POSITIVE_THRESHOLD == 2.5
        assert config.CHECKPOINT_DIR is None
        assert config.ENABLE_SPELLING is True
        assert (tmp_path / "logs").is_dir()
        logger.info(f"✓ Defaults: {config}")

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SENTIPREP_LOG_FILE", str(tmp_path / "test.log"))
        monkeypatch.setenv("SENTIPREP_PART_COUNT", "5")
        monkeypatch.setenv("SENTIPREP_RANDOM_SEED", "42")
        monkeypatch.setenv("SENTIPREP_ENABLE_SPELLING", "false")
        monkeypatch.setenv("SENTIPREP_CHECKPOINT_DIR", str(tmp_path / "snapshots"))

        config = Config()

        assert config.PART_COUNT == 5
        assert config.RANDOM_SEED == 42
        assert config.ENABLE_SPELLING is False
        assert config.CHECKPOINT_DIR == str(tmp_path / "snapshots")

    def test_validate(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SENTIPREP_LOG_FILE", str(tmp_path / "test.log"))
        monkeypatch.setenv("SENTIPREP_PART_COUNT", "0")
        monkeypatch.setenv("SENTIPREP_POSITIVE_THRESHOLD", "7")
        monkeypatch.setenv("SENTIPREP_ENABLE_SPELLING", "true")
        monkeypatch.setenv("SENTIPREP_DICTIONARY_PATH", str(tmp_path / "missing"))

        errors = Config().validate()

        assert any("PART_COUNT" in e for e in errors)
        assert any("THRESHOLD" in e for e in errors)
        assert any("missing.aff" in e for e in errors)
        assert any("missing.dic" in e for e in errors)

    def test_global_config(self):
        assert get_config() is get_config()


class TestStage0Logging:
    """Structured logging"""

    def test_json_formatter(self):
        record = logging.LogRecord("sentiprep.test", logging.INFO, __file__, 10, "hello %s", ("world",), None)
        record.extra_fields = {"stage": "cleaned"}

        payload = json.loads(JSONFormatter().format(record))

        assert payload["message"] == "hello world"
        assert payload["level"] == "INFO"
        assert payload["stage"] == "cleaned"

    def test_record_without_extra_fields(self):
        record = logging.LogRecord("sentiprep.test", logging.WARNING, __file__, 10, "plain", (), None)

        payload = json.loads(JSONFormatter().format(record))

        assert payload["message"] == "plain"
        assert "stage" not in payload

    def test_text_format(self):
        formatter = build_formatter("text")
        record = logging.LogRecord("sentiprep.test", logging.INFO, __file__, 10, "hello", (), None)

        assert not isinstance(formatter, JSONFormatter)
        assert formatter.format(record).endswith("sentiprep.test - INFO - hello")

    def test_logger_configured_once(self):
        first = get_logger("sentiprep.test_once")
        second = get_logger("sentiprep.test_once")

        assert first is second
        assert len(first.handlers) == 2
        assert all(not handler.filters for handler in first.handlers)
        assert first.propagate is False


class TestStage0Review:
    """Review record"""

    def test_validity(self):
        assert Review("good", 1.0).is_valid()
        assert not Review("   ", 4.0).is_valid()
        assert not Review("", 4.0).is_valid()
        assert not Review("good", 0.0).is_valid()
        assert not Review("good", -1.0).is_valid()
        assert not Review("good", math.nan).is_valid()

    def test_default_sentiment(self):
        assert Review("good", 3.0).sentiment is Sentiment.UNKNOWN

    def test_copies_keep_other_fields(self):
        review = Review("good", 3.0, Sentiment.POSITIVE)

        rewritten = review.with_text("fine")
        relabeled = review.with_sentiment(Sentiment.NEGATIVE)

        assert rewritten == Review("fine", 3.0, Sentiment.POSITIVE)
        assert relabeled == Review("good", 3.0, Sentiment.NEGATIVE)
        assert review.text == "good"

    def test_sentiment_parse(self):
        assert Sentiment.parse("Positive") is Sentiment.POSITIVE
        assert Sentiment.parse(" negative ") is Sentiment.NEGATIVE
        assert Sentiment.parse("") is Sentiment.UNKNOWN
        assert Sentiment.parse(None) is Sentiment.UNKNOWN
        assert Sentiment.parse(math.nan) is Sentiment.UNKNOWN
        assert Sentiment.parse("Neutral") is Sentiment.UNKNOWN

    def test_to_dict(self):
        assert Review("good", 4.5, Sentiment.POSITIVE).to_dict() == {
            "ReviewText": "good",
            "Rating": 4.5,
            "Sentiment": "Positive",
        }
