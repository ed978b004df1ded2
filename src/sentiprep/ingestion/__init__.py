"""
SENTIPREP Ingestion Module

Tabular reading and writing of review records.
"""

from .tabular import ReviewColumns, read_reviews, write_reviews, CsvSnapshotWriter

__all__ = [
    "ReviewColumns",
    "read_reviews",
    "write_reviews",
    "CsvSnapshotWriter",
]
