"""
Preprocessing pipeline for review sentiment datasets.

Orchestrates the complete preprocessing workflow:
1. Validity filtering and deduplication
2. Rating band balancing
3. Contraction expansion
4. Spelling correction
5. Text normalization
6. Label assignment

Each stage consumes the whole output of the previous one. Optionally
every stage's output is checkpointed as a CSV snapshot.
"""

import random
import time
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Protocol, Sequence

from sentiprep.core.config import Config
from sentiprep.core.logger import get_logger
from sentiprep.core.review import Review
from .validator import ReviewValidator, CleaningResult
from .balancer import RatingBalancer, BalanceResult
from .contractions import ContractionExpander
from .spelling import SpellChecker, SpellingCorrector, open_spell_checker
from .normalizer import TextNormalizer
from .labeler import assign_label

logger = get_logger(__name__)

SpellCheckerFactory = Callable[[], AbstractContextManager]


class SnapshotWriter(Protocol):
    def write(self, stage_name: str, records: Sequence[Review]) -> Path:
        ...


@dataclass
class PipelineConfig:
    """Explicit parameters of one pipeline run"""
    # Balancing
    part_count: int = 2
    random_seed: Optional[int] = None

    # Labeling
    positive_threshold: float = 2.5

    # Spelling correction
    enable_spelling_correction: bool = True
    dictionary_path: str = "./dictionaries/en_US"
    max_suggestions: int = 5
    progress_every: int = 100

    # Snapshots
    checkpoint_dir: Optional[str] = None

    @classmethod
    def from_config(cls, config: Config) -> "PipelineConfig":
        return cls(
            part_count=config.PART_COUNT,
            random_seed=config.RANDOM_SEED,
            positive_threshold=config.POSITIVE_THRESHOLD,
            enable_spelling_correction=config.ENABLE_SPELLING,
            dictionary_path=config.DICTIONARY_PATH,
            max_suggestions=config.MAX_SUGGESTIONS,
            progress_every=config.PROGRESS_EVERY,
            checkpoint_dir=config.CHECKPOINT_DIR,
        )

@dataclass
class StageResult:
    """Outcome of a single stage"""
    name: str
    input_count: int
    output_count: int
    duration_seconds: float
    snapshot_path: Optional[Path] = None

@dataclass
class PipelineResult:
    """Result of a full pipeline run"""
    records: List[Review]
    stages: List[StageResult] = field(default_factory=list)
    cleaning: Optional[CleaningResult] = None
    balancing: Optional[BalanceResult] = None
    degenerate: bool = False
    duration_seconds: float = 0.0

    def stage(self, name: str) -> Optional[StageResult]:
        for stage in self.stages:
            if stage.name == name:
                return stage
        return None

class PreprocessingPipeline:
    """
    Six-stage preparation of reviews for supervised sentiment labeling.

    Features:
    - Explicit configuration value, no state kept across runs
    - Injectable random source for reproducible balancing
    - Dictionary loaded once per run and released when correction ends
    - Early stop on an empty intermediate dataset
    - Per-stage CSV checkpoints
    """

    def __init__(self,
                 config: Optional[PipelineConfig] = None,
                 spell_checker_factory: Optional[SpellCheckerFactory] = None,
                 snapshot_writer: Optional[SnapshotWriter] = None,
                 rng: Optional[random.Random] = None):
        self.config = config or PipelineConfig()
        self.spell_checker_factory = spell_checker_factory or self._default_spell_checker
        self.snapshot_writer = snapshot_writer or self._default_snapshot_writer()
        self.rng = rng

        self.validator = ReviewValidator()
        self.expander = ContractionExpander()
        self.normalizer = TextNormalizer()

    def _default_spell_checker(self) -> AbstractContextManager:
        return open_spell_checker(self.config.dictionary_path, self.config.max_suggestions)

    def _default_snapshot_writer(self) -> Optional[SnapshotWriter]:
        if not self.config.checkpoint_dir:
            return None
        from sentiprep.ingestion.tabular import CsvSnapshotWriter
        return CsvSnapshotWriter(self.config.checkpoint_dir)

    def _finish_stage(self,
                      result: PipelineResult,
                      name: str,
                      input_count: int,
                      records: List[Review],
                      started: float) -> List[Review]:
        stage = StageResult(
            name=name,
            input_count=input_count,
            output_count=len(records),
            duration_seconds=time.monotonic() - started
        )
        if self.snapshot_writer is not None:
            stage.snapshot_path = self.snapshot_writer.write(name, records)

        result.stages.append(stage)
        logger.info(f"Stage {name}: {stage.input_count} -> {stage.output_count} records "
                    f"in {stage.duration_seconds:.2f}s",
                    extra={"extra_fields": {
                        "stage": name,
                        "input_count": stage.input_count,
                        "output_count": stage.output_count,
                        "duration_seconds": round(stage.duration_seconds, 4),
                        "snapshot_path": str(stage.snapshot_path) if stage.snapshot_path else None,
                    }})
        return records

    def _correct_spelling(self, records: List[Review]) -> List[Review]:
        if not self.config.enable_spelling_correction:
            logger.info("Spelling correction disabled, passing records through")
            return list(records)

        with self.spell_checker_factory() as dictionary:
            corrector = SpellingCorrector(dictionary, self.config.progress_every)
            return corrector.correct(records)

    def run(self, records: Sequence[Review]) -> PipelineResult:
        """
        Run every stage over ``records``.

        Args:
            records: Ingested records, sentiment defaulted to Unknown

        Returns:
            PipelineResult; ``degenerate`` is set when a stage emptied the dataset

        Raises:
            DictionaryLoadError: if the spelling dictionary cannot be loaded
        """
        run_started = time.monotonic()
        result = PipelineResult(records=[])
        rng = self.rng if self.rng is not None else random.Random(self.config.random_seed)

        logger.info(f"Starting preprocessing of {len(records)} records: {self.config}")

        # Stage 1: Validity filtering and deduplication
        started = time.monotonic()
        result.cleaning = self.validator.clean_with_report(records)
        current = self._finish_stage(result, "cleaned", len(records), result.cleaning.records, started)

        if result.cleaning.is_empty:
            return self._stop_degenerate(result, run_started, "no valid records after cleaning")

        # Stage 2: Balancing
        started = time.monotonic()
        balancer = RatingBalancer(self.config.part_count, rng)
        result.balancing = balancer.balance_with_report(current)
        current = self._finish_stage(result, "balanced", len(current), result.balancing.records, started)

        if result.balancing.is_degenerate:
            return self._stop_degenerate(
                result, run_started, f"empty rating bands {result.balancing.empty_bands}")

        # Stage 3: Contraction expansion
        started = time.monotonic()
        current = self._finish_stage(result, "expanded", len(current),
                                     self.expander.expand(current), started)

        # Stage 4: Spelling correction
        started = time.monotonic()
        current = self._finish_stage(result, "corrected", len(current),
                                     self._correct_spelling(current), started)

        # Stage 5: Normalization
        started = time.monotonic()
        current = self._finish_stage(result, "normalized", len(current),
                                     self.normalizer.normalize(current), started)

        # Stage 6: Labeling
        started = time.monotonic()
        current = self._finish_stage(result, "labeled", len(current),
                                     assign_label(current, self.config.positive_threshold), started)

        result.records = current
        result.duration_seconds = time.monotonic() - run_started

        logger.info(f"Preprocessing complete: {len(current)} labeled records "
                    f"in {result.duration_seconds:.1f}s")

        return result

    def _stop_degenerate(self, result: PipelineResult, run_started: float, reason: str) -> PipelineResult:
        result.records = []
        result.degenerate = True
        result.duration_seconds = time.monotonic() - run_started
        logger.warning(f"Preprocessing stopped early: {reason}")
        return result
