"""
SENTIPREP - Sentiment dataset preparation

Cleans, balances and normalizes customer reviews and labels them by
rating for supervised sentiment training.
"""

__version__ = "0.1.0"

# Import main components
from .core.config import get_config
from .core.logger import get_logger
from .core.review import Review, Sentiment

__all__ = [
    "get_config",
    "get_logger",
    "Review",
    "Sentiment",
]
