"""
YouTube API Client
Search and batch video lookups against the YouTube Data API v3.
"""

import logging
from typing import List
from googleapiclient.discovery import build

from .search_criteria import SearchCriteria
from .video_record import VideoRecord

logger = logging.getLogger(__name__)


class YouTubeClient:
    """
    Thin YouTube Data API client.

    One instance is built per process and shared by every search so the
    service object is not rebuilt per call. HttpError from the API is not
    caught here; callers decide how a failed call is reported.
    """

    def __init__(self, api_key: str):
        """Initialize the YouTube API service."""
        # static_discovery=False prevents the 'file_cache' warning in logs
        self._service = build('youtube', 'v3', developerKey=api_key, static_discovery=False)

    def search_video_ids(self, criteria: SearchCriteria) -> List[str]:
        """
        Single search.list page, most viewed first.
        Returns video ids in response order (possibly empty).
        """
        params = {
            "part": "id",
            "type": "video",
            "order": criteria.order,
            "videoDuration": criteria.video_duration,
            "maxResults": criteria.max_results,
            "publishedAfter": criteria.published_after,
        }
        if criteria.keyword:
            params["q"] = criteria.keyword

        response = self._service.search().list(**params).execute()

        video_ids = []
        for item in response.get("items", []):
            v_id = (item.get("id") or {}).get("videoId")
            if v_id:
                video_ids.append(v_id)

        logger.info(
            f"Search returned {len(video_ids)} videos "
            f"(keyword={criteria.keyword!r}, publishedAfter={criteria.published_after})"
        )
        return video_ids

    def fetch_video_records(self, video_ids: List[str]) -> List[VideoRecord]:
        """Batch videos.list lookup; ids unknown upstream are simply absent."""
        if not video_ids:
            return []

        response = self._service.videos().list(
            part="snippet,statistics,contentDetails",
            id=",".join(video_ids)
        ).execute()

        records = [VideoRecord.from_api_item(item) for item in response.get("items", [])]
        if len(records) != len(video_ids):
            logger.info(f"Detail lookup returned {len(records)} of {len(video_ids)} requested videos")
        return records
