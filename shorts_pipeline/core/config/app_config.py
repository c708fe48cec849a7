"""
Application Configuration Model
Represents a validated configuration state
"""

from pathlib import Path
from typing import Tuple


class AppConfig:
    """
    Immutable configuration object for the Shorts search pipeline.

    Represents a VALID configuration state only.
    All validation must be performed before instantiation.
    """

    def __init__(
        self,
        api_key: str,
        keywords: Tuple[str, ...],
        periods_in_days: Tuple[int, ...],
        default_lookback_days: int = 365,
        max_results: int = 50,
        results_dir: str = "./results",
        duration_mode: str = "seconds_only"
    ):
        """
        Initialize AppConfig with validated values.

        Args:
            api_key: YouTube API key (non-empty)
            keywords: Keywords processed by the batch driver (non-empty)
            periods_in_days: Lookback periods processed by the batch driver (> 0 each)
            default_lookback_days: Lookback used when a single search gives none (> 0)
            max_results: Search page size (1 - 50)
            results_dir: Directory receiving the CSV files
            duration_mode: "seconds_only" or "total_seconds"
        """
        self._api_key = api_key
        self._keywords = tuple(keywords)
        self._periods_in_days = tuple(periods_in_days)
        self._default_lookback_days = default_lookback_days
        self._max_results = max_results
        self._results_dir = results_dir
        self._duration_mode = duration_mode

    @property
    def api_key(self) -> str:
        """YouTube API key."""
        return self._api_key

    @property
    def keywords(self) -> Tuple[str, ...]:
        """Keywords processed in batch mode."""
        return self._keywords

    @property
    def periods_in_days(self) -> Tuple[int, ...]:
        """Lookback periods processed in batch mode."""
        return self._periods_in_days

    @property
    def default_lookback_days(self) -> int:
        return self._default_lookback_days

    @property
    def max_results(self) -> int:
        """Search page size."""
        return self._max_results

    @property
    def results_dir(self) -> Path:
        return Path(self._results_dir)

    @property
    def duration_mode(self) -> str:
        """Duration filter mode."""
        return self._duration_mode

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"AppConfig(keywords={len(self.keywords)}, "
            f"periods_in_days={list(self.periods_in_days)}, "
            f"max_results={self.max_results}, "
            f"results_dir={self._results_dir!r}, "
            f"duration_mode={self.duration_mode!r})"
        )
