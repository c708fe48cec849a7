"""
Duration Filter Service
Keeps only Shorts-length videos based on their ISO-8601 duration code.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..youtube.video_record import VideoRecord

logger = logging.getLogger(__name__)

SECONDS_ONLY = "seconds_only"
TOTAL_SECONDS = "total_seconds"
DURATION_MODES = (SECONDS_ONLY, TOTAL_SECONDS)

MAX_SHORT_SECONDS = 60

# P[nD][T[nH][nM][nS]], the subset of ISO-8601 used by contentDetails.duration
_DURATION_RE = re.compile(
    r"^P(?:(?P<days>\d+)D)?"
    r"(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:(?P<seconds>\d+)S)?)?$"
)


@dataclass(frozen=True)
class ParsedDuration:
    """Components of a duration code; None means the component was absent."""
    days: Optional[int]
    hours: Optional[int]
    minutes: Optional[int]
    seconds: Optional[int]

    @property
    def total_seconds(self) -> int:
        return (
            (self.days or 0) * 86400
            + (self.hours or 0) * 3600
            + (self.minutes or 0) * 60
            + (self.seconds or 0)
        )

    @property
    def has_higher_order_component(self) -> bool:
        """True when a day, hour or minute component is written, even as zero."""
        return any(v is not None for v in (self.days, self.hours, self.minutes))


def parse_duration(code: str) -> Optional[ParsedDuration]:
    """
    Parse a duration code such as 'PT45S' or 'PT1M30S'.
    Returns None for empty or malformed codes ('P', 'PT' included).
    """
    code = (code or "").strip()
    # the pattern alone accepts designator-only codes like 'P' and 'P1DT'
    if code in ("P", "") or code.endswith("T"):
        return None

    match = _DURATION_RE.match(code)
    if not match:
        return None

    parts = {k: int(v) if v is not None else None for k, v in match.groupdict().items()}
    return ParsedDuration(**parts)


def is_seconds_only_short(code: str) -> bool:
    """
    Historical Shorts rule: the code must be 'PT<n>S' with n <= 60.

    Any minute, hour or day component rejects the video, so 'PT1M' and
    'PT0M30S' are dropped even though they decode to 60 and 30 seconds.
    """
    parsed = parse_duration(code)
    if parsed is None or parsed.has_higher_order_component:
        return False
    return parsed.seconds is not None and parsed.seconds <= MAX_SHORT_SECONDS


def is_short_by_total_seconds(code: str) -> bool:
    """Decoded-length rule: any parsable code totalling 60 seconds or less."""
    parsed = parse_duration(code)
    return parsed is not None and parsed.total_seconds <= MAX_SHORT_SECONDS


class DurationFilter:
    """Filters VideoRecords by duration code using the configured rule."""

    def __init__(self, mode: str = SECONDS_ONLY):
        if mode not in DURATION_MODES:
            raise ValueError(f"Unknown duration filter mode: {mode!r}")
        self._mode = mode
        self._rule = is_seconds_only_short if mode == SECONDS_ONLY else is_short_by_total_seconds

    def accepts(self, record: VideoRecord) -> bool:
        return self._rule(record.duration_code)

    def apply(self, records: Iterable[VideoRecord]) -> List[VideoRecord]:
        records = list(records)
        kept = [r for r in records if self.accepts(r)]
        logger.info(f"Duration filter ({self._mode}): kept {len(kept)} of {len(records)} videos")
        return kept
