"""
CSV Serializer
Projects VideoRecords onto the fixed Shorts research column schema.
"""

import csv
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple, Union

import pandas as pd

from ..youtube.video_record import VideoRecord

HEADER: Tuple[str, ...] = (
    "Title", "Link", "Views", "Likes", "Comments",
    "Channel Title", "Description", "Tags", "Published",
)
SHORTS_URL_TEMPLATE = "https://youtube.com/shorts/{video_id}"
PUBLISHED_FORMAT = "%Y-%m-%d %H:%M"

_NEWLINES = re.compile(r"\r\n|\r|\n")

Field = Union[str, int]


@dataclass
class CsvDocument:
    """Header plus data rows, all rows the same width as the header."""
    header: Tuple[str, ...] = HEADER
    rows: List[Tuple[Field, ...]] = field(default_factory=list)

    def append(self, row: Tuple[Field, ...]):
        if len(row) != len(self.header):
            raise ValueError(f"Row has {len(row)} fields, header has {len(self.header)}")
        self.rows.append(row)

    def __len__(self) -> int:
        return len(self.rows)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.rows, columns=list(self.header))

    def render(self) -> str:
        """
        CSV text: text fields double-quoted with inner quotes doubled,
        counts unquoted, '\\n' row separator, header always present.
        """
        return self.to_frame().to_csv(
            index=False,
            quoting=csv.QUOTE_NONNUMERIC,
            lineterminator="\n"
        )


def collapse_newlines(text: Optional[str]) -> str:
    return _NEWLINES.sub(" ", text or "")


def format_published(iso: Optional[str]) -> str:
    """ISO-8601 UTC timestamp -> local 'YYYY-MM-DD HH:MM'; '' when absent."""
    if not iso:
        return ""
    moment = pd.Timestamp(iso).to_pydatetime()
    return moment.astimezone().strftime(PUBLISHED_FORMAT)


def _count(value: Optional[str]) -> int:
    # hidden statistics are omitted by the API
    return int(value) if value else 0


def to_row(record: VideoRecord) -> Tuple[Field, ...]:
    return (
        collapse_newlines(record.title),
        SHORTS_URL_TEMPLATE.format(video_id=record.video_id),
        _count(record.view_count),
        _count(record.like_count),
        _count(record.comment_count),
        collapse_newlines(record.channel_title),
        collapse_newlines(record.description),
        collapse_newlines(", ".join(record.tags)),
        format_published(record.published_at),
    )


def serialize_records(records: Iterable[VideoRecord]) -> CsvDocument:
    document = CsvDocument()
    for record in records:
        document.append(to_row(record))
    return document
