"""
Shorts Pipeline
One unit of work: search -> detail lookup -> duration filter -> CSV -> file.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..analysis.duration_filter import DurationFilter
from ..export.csv_serializer import serialize_records
from ..youtube.search_criteria import build_search_criteria
from ..youtube.youtube_client import YouTubeClient
from ...shared.storage.storage_manager import StorageManager

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOutcome:
    output_path: Path
    candidates: int
    row_count: int


class ShortsPipeline:
    """
    Service running one keyword/lookback search end to end.

    The client, filter and storage are built once and reused for every run.
    Any API or filesystem error propagates; nothing is written unless the
    whole CSV document was built.
    """

    def __init__(
        self,
        youtube_client: YouTubeClient,
        duration_filter: DurationFilter,
        storage: StorageManager,
        max_results: int = 50
    ):
        self._client = youtube_client
        self._filter = duration_filter
        self._storage = storage
        self._max_results = max_results

    def run(
        self,
        keyword: Optional[str],
        lookback_days: Optional[int],
        tag_period: bool = True
    ) -> RunOutcome:
        """
        Args:
            keyword: Search text, None to search without one
            lookback_days: Publish window; defaulted when absent
            tag_period: Whether the period appears in the file name
        """
        criteria = build_search_criteria(keyword, lookback_days, self._max_results)

        video_ids = self._client.search_video_ids(criteria)
        records = self._client.fetch_video_records(video_ids)
        shorts = self._filter.apply(records)
        document = serialize_records(shorts)

        period_tag = criteria.lookback_days if tag_period else None
        path = self._storage.save_csv(document, criteria.keyword, period_tag)

        return RunOutcome(output_path=path, candidates=len(video_ids), row_count=len(document))
