"""
Search Criteria Domain Model
Builds the immutable query for one search.list call
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

DEFAULT_LOOKBACK_DAYS = 365
PLATFORM_MAX_RESULTS = 50


@dataclass(frozen=True)
class SearchCriteria:
    """
    Query parameters for a single search page.
    Ordering and duration class are fixed for Shorts research.
    """
    keyword: Optional[str]
    lookback_days: int
    max_results: int
    published_after: str
    order: str = "viewCount"
    video_duration: str = "short"


def _to_rfc3339(moment: datetime) -> str:
    """Format a datetime as the UTC timestamp accepted by publishedAfter."""
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def build_search_criteria(
    keyword: Optional[str] = None,
    lookback_days: Optional[int] = None,
    max_results: Optional[int] = None,
    now: Optional[datetime] = None
) -> SearchCriteria:
    """
    Build SearchCriteria, defaulting every input instead of rejecting it.

    Args:
        keyword: Search text; empty or blank means "no keyword"
        lookback_days: Window in days; absent or non-positive -> 365
        max_results: Page size; absent or non-positive -> 50, capped at 50
        now: Reference time (defaults to current UTC time)
    """
    if keyword is not None:
        keyword = keyword.strip() or None

    if not lookback_days or lookback_days <= 0:
        lookback_days = DEFAULT_LOOKBACK_DAYS

    if not max_results or max_results <= 0:
        max_results = PLATFORM_MAX_RESULTS
    max_results = min(max_results, PLATFORM_MAX_RESULTS)

    now = now or datetime.now(timezone.utc)
    published_after = _to_rfc3339(now - timedelta(days=lookback_days))

    return SearchCriteria(
        keyword=keyword,
        lookback_days=lookback_days,
        max_results=max_results,
        published_after=published_after
    )
