"""
Contraction and informal acronym expansion.

Rewrites contractions such as "it's" or "don't" into their long forms
and strips characters outside the allowed review alphabet.
"""

import re
from typing import Dict, List, Sequence

from sentiprep.core.logger import get_logger
from sentiprep.core.review import Review

logger = get_logger(__name__)

# Rewrite table, keyed by the lowercased match
CONTRACTIONS: Dict[str, str] = {
    "'m": " am",
    "'re": " are",
    "'s": " is",
    "'d": " would",
    "'ll": " will",
    "'ve": " have",
    "wouldn't": "would not",
    "shouldn't": "should not",
    "can't": "can not",
    "won't": "will not",
    "isn't": "is not",
    "wasn't": "was not",
    "aren't": "are not",
    "don't": "do not",
    "doesn't": "does not",
    "haven't": "have not",
    "hadn't": "had not",
    "didn't": "did not",
    "couldn't": "could not",
}

# Alternatives scanned for, in priority order. "wouldn't" and "shouldn't"
# have table entries but are not scanned for.
SCANNED_CONTRACTIONS = [
    "'m", "'re", "'s", "'d", "'ll", "'ve",
    "can't", "won't", "isn't", "wasn't", "aren't", "don't", "doesn't",
    "haven't", "hadn't", "didn't", "couldn't",
]

class ContractionExpander:
    """
    Expands contractions and removes disallowed characters.

    Matches are case-insensitive, word-boundary anchored, and replaced
    left to right without overlap; the first matching alternative wins.
    """

    def __init__(self):
        self._compile_patterns()

    def _compile_patterns(self):
        """Compile frequently used regex patterns"""
        alternation = "|".join(re.escape(c) for c in SCANNED_CONTRACTIONS)
        self.contraction_pattern = re.compile(r"\b(" + alternation + r")\b", re.IGNORECASE)

        # Everything except letters, digits, whitespace and . , ! ? ' -
        self.disallowed_pattern = re.compile(r"[^a-zA-Z0-9\s.,!?'-]")

    def _replace(self, match: re.Match) -> str:
        return CONTRACTIONS.get(match.group(0).lower(), match.group(0))

    def expand_text(self, text: str) -> str:
        """
        Expand contractions in a single text.

        Args:
            text: Raw review text

        Returns:
            Expanded text restricted to the allowed alphabet, trimmed
        """
        if not text:
            return ""

        text = text.replace("\u2019", "'")
        text = self.contraction_pattern.sub(self._replace, text)
        text = self.disallowed_pattern.sub("", text)

        return text.strip()

    def expand(self, records: Sequence[Review]) -> List[Review]:
        logger.info(f"Expanding contractions in {len(records)} records")

        expanded = [review.with_text(self.expand_text(review.text)) for review in records]

        changed = sum(1 for old, new in zip(records, expanded) if old.text != new.text)
        logger.info(f"Contraction expansion complete: {changed} records rewritten")

        return expanded


def expand(records: Sequence[Review]) -> List[Review]:
    """Expand contractions in every record's text."""
    return ContractionExpander().expand(records)
