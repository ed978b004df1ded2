"""
Validity filtering and exact deduplication of raw reviews.

A review survives only if its text is non-blank and its rating is
positive. Reviews sharing the same (text, rating) collapse to the first
occurrence in input order.
"""

from typing import Dict, List, Sequence, Tuple
from dataclasses import dataclass, field
from collections import defaultdict

from sentiprep.core.logger import get_logger
from sentiprep.core.review import Review

logger = get_logger(__name__)

@dataclass
class DuplicateGroup:
    """Group of records sharing the same (text, rating)"""
    text: str
    rating: float
    positions: List[int]  # Input positions, first one is kept

    @property
    def count(self) -> int:
        return len(self.positions)

@dataclass
class CleaningResult:
    """Result of validity filtering and deduplication"""
    original_count: int
    invalid_count: int
    duplicate_count: int
    records: List[Review]

    @property
    def unique_count(self) -> int:
        return len(self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records

@dataclass
class DataIssueReport:
    """Read-only diagnostic of data quality problems"""
    total_records: int
    empty_text_positions: List[int] = field(default_factory=list)
    invalid_ratings: List[Tuple[int, float]] = field(default_factory=list)
    duplicate_groups: List[DuplicateGroup] = field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        return bool(self.empty_text_positions or self.invalid_ratings or self.duplicate_groups)

    def summary(self) -> Dict:
        return {
            "total_records": self.total_records,
            "empty_text_records": len(self.empty_text_positions),
            "invalid_rating_records": len(self.invalid_ratings),
            "duplicate_groups": len(self.duplicate_groups),
            "duplicate_records": sum(g.count - 1 for g in self.duplicate_groups),
        }

class ReviewValidator:
    """
    Drops structurally invalid reviews and exact duplicates.

    Pure: input records are never modified, the output preserves the
    relative order of first occurrences.
    """

    def find_duplicate_groups(self, records: Sequence[Review]) -> List[DuplicateGroup]:
        """
        Find groups of records with identical (text, rating).

        Args:
            records: Records to check

        Returns:
            Groups with more than one member, ordered by first occurrence
        """
        key_to_positions = defaultdict(list)

        for i, review in enumerate(records):
            key_to_positions[review.key()].append(i)

        return [
            DuplicateGroup(text=key[0], rating=key[1], positions=positions)
            for key, positions in key_to_positions.items()
            if len(positions) > 1
        ]

    def clean_with_report(self, records: Sequence[Review]) -> CleaningResult:
        """
        Filter invalid records and collapse duplicates.

        Args:
            records: Raw records in input order

        Returns:
            CleaningResult with surviving records and counts
        """
        original_count = len(records)
        logger.info(f"Starting cleaning of {original_count} records")

        valid = [review for review in records if review.is_valid()]
        invalid_count = original_count - len(valid)

        unique = []
        seen = set()
        for review in valid:
            key = review.key()
            if key not in seen:
                seen.add(key)
                unique.append(review)

        result = CleaningResult(
            original_count=original_count,
            invalid_count=invalid_count,
            duplicate_count=len(valid) - len(unique),
            records=unique
        )

        logger.info(f"Cleaning complete: {result.unique_count} unique, "
                    f"{result.invalid_count} invalid, {result.duplicate_count} duplicates")

        if result.is_empty:
            logger.warning("Cleaning produced no records, every input record was invalid")

        return result

    def clean(self, records: Sequence[Review]) -> List[Review]:
        return self.clean_with_report(records).records

    def report_data_issues(self, records: Sequence[Review]) -> DataIssueReport:
        """
        Report empty texts, non-positive ratings and duplicate groups.

        Args:
            records: Raw records in input order

        Returns:
            DataIssueReport with input positions of every problem
        """
        report = DataIssueReport(total_records=len(records))

        for i, review in enumerate(records):
            if not review.text or not review.text.strip():
                report.empty_text_positions.append(i)
            if not review.rating > 0:
                report.invalid_ratings.append((i, review.rating))

        report.duplicate_groups = self.find_duplicate_groups(records)

        logger.info(f"Data issues: {report.summary()}")

        return report


def clean(records: Sequence[Review]) -> List[Review]:
    """Drop invalid records and exact duplicates, keeping first occurrences."""
    return ReviewValidator().clean(records)


def report_data_issues(records: Sequence[Review]) -> DataIssueReport:
    return ReviewValidator().report_data_issues(records)
