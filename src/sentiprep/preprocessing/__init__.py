"""
SENTIPREP Preprocess Module

Cleaning, balancing, text transforms and labeling of reviews
"""

from .validator import ReviewValidator, CleaningResult, DataIssueReport, clean, report_data_issues
from .balancer import RatingBalancer, BalanceResult, balance
from .contractions import ContractionExpander, expand
from .spelling import (
    SpellChecker,
    HunspellSpellChecker,
    SpellingCorrector,
    DictionaryLoadError,
    open_spell_checker,
    correct,
)
from .normalizer import TextNormalizer, normalize
from .labeler import assign_label
from .pipeline import PreprocessingPipeline, PipelineConfig, PipelineResult

__all__ = [
    "ReviewValidator",
    "CleaningResult",
    "DataIssueReport",
    "clean",
    "report_data_issues",
    "RatingBalancer",
    "BalanceResult",
    "balance",
    "ContractionExpander",
    "expand",
    "SpellChecker",
    "HunspellSpellChecker",
    "SpellingCorrector",
    "DictionaryLoadError",
    "open_spell_checker",
    "correct",
    "TextNormalizer",
    "normalize",
    "assign_label",
    "PreprocessingPipeline",
    "PipelineConfig",
    "PipelineResult",
]
