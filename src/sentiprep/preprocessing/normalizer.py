"""
Text normalization for review bodies.

Lowercases, strips diacritics and removes punctuation while keeping
letters, digits and the original whitespace layout.
"""

import unicodedata
from typing import List, Sequence, Tuple
from dataclasses import dataclass

from sentiprep.core.logger import get_logger
from sentiprep.core.review import Review

logger = get_logger(__name__)

@dataclass
class NormalizationStats:
    """Statistics from text normalization"""
    original_length: int = 0
    normalized_length: int = 0
    diacritics_removed: int = 0
    punctuation_removed: int = 0

class TextNormalizer:
    """
    Review text normalizer.

    Features:
    - Lowercasing
    - Diacritic stripping (canonical decomposition, combining marks dropped)
    - Punctuation removal (Unicode category P*)
    - Digits and whitespace preserved

    Normalizing already-normalized text returns it unchanged.
    """

    def strip_diacritics(self, text: str) -> Tuple[str, int]:
        """Drop combining marks; other characters keep their composed form"""
        decomposed = unicodedata.normalize("NFD", text)
        kept = [ch for ch in decomposed if not unicodedata.combining(ch)]
        return unicodedata.normalize("NFC", "".join(kept)), len(decomposed) - len(kept)

    def remove_punctuation(self, text: str) -> Tuple[str, int]:
        kept = [ch for ch in text if not unicodedata.category(ch).startswith("P")]
        return "".join(kept), len(text) - len(kept)

    def normalize_text(self, text: str) -> Tuple[str, NormalizationStats]:
        """
        Apply full normalization to a text.

        Args:
            text: Input text to normalize

        Returns:
            Tuple of (normalized_text, stats)
        """
        if not text or not isinstance(text, str):
            return "", NormalizationStats()

        stats = NormalizationStats(original_length=len(text))

        # 1. Case folding to lowercase
        text = text.lower()

        # 2. Diacritics
        text, stats.diacritics_removed = self.strip_diacritics(text)

        # 3. Punctuation
        text, stats.punctuation_removed = self.remove_punctuation(text)

        stats.normalized_length = len(text)

        return text, stats

    def normalize(self, records: Sequence[Review]) -> List[Review]:
        logger.info(f"Normalizing {len(records)} records")

        normalized = []
        diacritics = punctuation = 0
        for review in records:
            text, stats = self.normalize_text(review.text)
            diacritics += stats.diacritics_removed
            punctuation += stats.punctuation_removed
            normalized.append(review.with_text(text))

        logger.info(f"Normalization complete: {diacritics} diacritics and "
                    f"{punctuation} punctuation characters removed")

        return normalized


def normalize(records: Sequence[Review]) -> List[Review]:
    """Lowercase, strip diacritics and punctuation from every record's text."""
    return TextNormalizer().normalize(records)
