"""Configuration management for SENTIPREP"""

import os
from pathlib import Path
from typing import List, Optional
from dotenv import load_dotenv

# Load .env file if exists
load_dotenv()


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    return int(value)


class Config:
    """Central configuration for the SENTIPREP pipeline"""

    def __init__(self):
        # Balancing configuration
        self.PART_COUNT = int(os.getenv("SENTIPREP_PART_COUNT", "2"))
        self.RANDOM_SEED = _optional_int(os.getenv("SENTIPREP_RANDOM_SEED"))

        # Labeling configuration
        self.POSITIVE_THRESHOLD = float(os.getenv("SENTIPREP_POSITIVE_THRESHOLD", "2.5"))

        # Hunspell dictionary (path without .aff/.dic extension)
        self.DICTIONARY_PATH = os.getenv("SENTIPREP_DICTIONARY_PATH", "./dictionaries/en_US")
        self.MAX_SUGGESTIONS = int(os.getenv("SENTIPREP_MAX_SUGGESTIONS", "5"))
        self.PROGRESS_EVERY = int(os.getenv("SENTIPREP_PROGRESS_EVERY", "100"))

        # Per-stage CSV snapshots
        self.CHECKPOINT_DIR = os.getenv("SENTIPREP_CHECKPOINT_DIR") or None

        # Logging configuration
        self.LOG_LEVEL = os.getenv("SENTIPREP_LOG_LEVEL", "INFO")
        self.LOG_FORMAT = os.getenv("SENTIPREP_LOG_FORMAT", "json")
        self.LOG_FILE = os.getenv("SENTIPREP_LOG_FILE", "./logs/sentiprep.log")

        # Feature flags
        self.ENABLE_SPELLING = os.getenv("SENTIPREP_ENABLE_SPELLING", "true").lower() == "true"

        # Create necessary directories
        self._create_directories()

    def _create_directories(self):
        """Create necessary directories if they don't exist"""
        Path(self.LOG_FILE).parent.mkdir(parents=True, exist_ok=True)

    def validate(self) -> List[str]:
        """
        Validate configuration

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.PART_COUNT < 1:
            errors.append(f"SENTIPREP_PART_COUNT must be at least 1, got {self.PART_COUNT}")

        if not 0 < self.POSITIVE_THRESHOLD <= 5:
            errors.append(f"SENTIPREP_POSITIVE_THRESHOLD must be in (0, 5], got {self.POSITIVE_THRESHOLD}")

        if self.MAX_SUGGESTIONS < 1:
            errors.append(f"SENTIPREP_MAX_SUGGESTIONS must be at least 1, got {self.MAX_SUGGESTIONS}")

        if self.ENABLE_SPELLING:
            for suffix in (".aff", ".dic"):
                dictionary_file = Path(self.DICTIONARY_PATH + suffix)
                if not dictionary_file.exists():
                    errors.append(f"Dictionary file not found: {dictionary_file}")

        return errors

    def __repr__(self):
        return (f"<SENTIPREP Config: parts={self.PART_COUNT}, "
                f"threshold={self.POSITIVE_THRESHOLD}, dictionary={self.DICTIONARY_PATH}>")


# Global config instance
config = Config()

def get_config() -> Config:
    """Get global config instance"""
    return config
