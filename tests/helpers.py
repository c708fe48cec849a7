import json

import httplib2
from googleapiclient.errors import HttpError


def make_video_item(video_id, duration="PT30S", **snippet_overrides):
    snippet = {
        "title": f"Video {video_id}",
        "channelTitle": "Channel",
        "description": "desc",
        "tags": ["a", "b"],
        "publishedAt": "2024-05-01T12:30:00Z",
    }
    snippet.update(snippet_overrides)
    return {
        "id": video_id,
        "snippet": snippet,
        "statistics": {"viewCount": "100", "likeCount": "10", "commentCount": "1"},
        "contentDetails": {"duration": duration},
    }


def make_http_error(status=403, payload=None, raw=None):
    resp = httplib2.Response({"status": status, "reason": "Forbidden"})
    if raw is not None:
        content = raw
    else:
        content = json.dumps({"error": payload or {"code": status, "message": "quotaExceeded"}}).encode()
    return HttpError(resp, content)


def set_search_ids(service, ids):
    service.search.return_value.list.return_value.execute.return_value = {
        "items": [{"id": {"kind": "youtube#video", "videoId": v}} for v in ids]
    }


def set_video_items(service, items):
    service.videos.return_value.list.return_value.execute.return_value = {"items": items}
