"""
Video Record Domain Model
Full metadata of one video as returned by videos.list
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class VideoRecord:
    """
    Domain model representing a single YouTube video's metadata.
    Statistics are kept as the raw strings the API returns; None when hidden.
    """
    video_id: str
    title: str = ""
    channel_title: str = ""
    description: str = ""
    tags: Tuple[str, ...] = ()
    view_count: Optional[str] = None
    like_count: Optional[str] = None
    comment_count: Optional[str] = None
    published_at: Optional[str] = None
    duration_code: str = ""

    @classmethod
    def from_api_item(cls, item: Dict[str, Any]) -> "VideoRecord":
        """Map one videos.list item (snippet, statistics, contentDetails)."""
        snippet = item.get("snippet") or {}
        stats = item.get("statistics") or {}
        content_details = item.get("contentDetails") or {}

        return cls(
            video_id=item.get("id", ""),
            title=snippet.get("title") or "",
            channel_title=snippet.get("channelTitle") or "",
            description=snippet.get("description") or "",
            tags=tuple(snippet.get("tags") or ()),
            view_count=stats.get("viewCount"),
            like_count=stats.get("likeCount"),
            comment_count=stats.get("commentCount"),
            published_at=snippet.get("publishedAt"),
            duration_code=content_details.get("duration") or ""
        )
