"""
Pipeline orchestration module
"""

from .batch_driver import BatchDriver, BatchSummary, CombinationResult, classify_failure
from .shorts_pipeline import RunOutcome, ShortsPipeline

__all__ = [
    "BatchDriver", "BatchSummary", "CombinationResult", "classify_failure",
    "RunOutcome", "ShortsPipeline",
]
