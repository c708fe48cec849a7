"""
YouTube API integration module
"""

from .search_criteria import SearchCriteria, build_search_criteria
from .video_record import VideoRecord
from .youtube_client import YouTubeClient

__all__ = ["SearchCriteria", "build_search_criteria", "VideoRecord", "YouTubeClient"]
