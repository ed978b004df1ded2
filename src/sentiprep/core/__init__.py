"""
SENTIPREP core: configuration, logging and the shared review record.
"""

__version__ = "0.1.0"

from .config import Config
from .logger import get_logger
from .review import Review, Sentiment

# Export main components
__all__ = [
    "Config",
    "get_logger",
    "Review",
    "Sentiment",
]
