"""
Stratified undersampling of reviews across equal-width rating bands.

The rating domain (0, 5] is split into ``part_count`` half-open bands
(i*step, (i+1)*step]. Every band is sampled down to the size of the
smallest band, so an empty band empties the whole output.
"""

import random
from typing import List, Optional, Sequence
from dataclasses import dataclass

from sentiprep.core.logger import get_logger
from sentiprep.core.review import Review

logger = get_logger(__name__)

MAX_RATING = 5.0

@dataclass
class RatingBand:
    """One half-open rating band and the records that fell into it"""
    index: int
    lower: float  # exclusive
    upper: float  # inclusive
    records: List[Review]

    def contains(self, rating: float) -> bool:
        return self.lower < rating <= self.upper

@dataclass
class BalanceResult:
    """Result of balancing"""
    part_count: int
    band_counts: List[int]      # sizes before sampling
    min_count: int
    out_of_range_count: int
    records: List[Review]

    @property
    def empty_bands(self) -> List[int]:
        return [i for i, count in enumerate(self.band_counts) if count == 0]

    @property
    def is_degenerate(self) -> bool:
        return not self.records

class RatingBalancer:
    """
    Undersamples every rating band to the smallest band's size.

    Sampling is uniform without replacement and driven by an injected
    ``random.Random``; passing a seeded generator makes output
    reproducible.
    """

    def __init__(self, part_count: int, rng: Optional[random.Random] = None):
        if part_count < 1:
            raise ValueError(f"part_count must be at least 1, got {part_count}")

        self.part_count = part_count
        self.step = MAX_RATING / part_count
        self.rng = rng if rng is not None else random.Random()

    def make_bands(self, records: Sequence[Review]) -> List[RatingBand]:
        """Partition records into bands, dropping ratings outside (0, 5]."""
        bands = [
            RatingBand(index=i, lower=i * self.step, upper=(i + 1) * self.step, records=[])
            for i in range(self.part_count)
        ]
        # Floating point steps must not push 5.0 out of the last band
        bands[-1].upper = MAX_RATING

        for review in records:
            for band in bands:
                if band.contains(review.rating):
                    band.records.append(review)
                    break

        return bands

    def balance_with_report(self, records: Sequence[Review]) -> BalanceResult:
        """
        Balance records across rating bands.

        Args:
            records: Cleaned records

        Returns:
            BalanceResult; ``is_degenerate`` is set when any band was empty
        """
        bands = self.make_bands(records)
        band_counts = [len(band.records) for band in bands]
        out_of_range = len(records) - sum(band_counts)

        if out_of_range:
            logger.warning(f"{out_of_range} records have ratings outside (0, {MAX_RATING}] and were dropped")

        min_count = min(band_counts)
        logger.info(f"Balancing {len(records)} records over {self.part_count} bands: "
                    f"counts={band_counts}, min_count={min_count}")

        balanced = []
        for band in bands:
            if len(band.records) > min_count:
                balanced.extend(self.rng.sample(band.records, min_count))
            else:
                balanced.extend(band.records)

        result = BalanceResult(
            part_count=self.part_count,
            band_counts=band_counts,
            min_count=min_count,
            out_of_range_count=out_of_range,
            records=balanced
        )

        if result.empty_bands:
            logger.warning(f"Rating bands {result.empty_bands} are empty, balanced dataset is empty")
        else:
            logger.info(f"Balancing complete: {len(balanced)} records")

        return result

    def balance(self, records: Sequence[Review]) -> List[Review]:
        return self.balance_with_report(records).records


def balance(records: Sequence[Review],
            part_count: int,
            rng: Optional[random.Random] = None) -> List[Review]:
    """Undersample ``records`` to equal counts per rating band."""
    return RatingBalancer(part_count, rng).balance(records)
