import csv
import io
from datetime import datetime, timezone

from shorts_pipeline.core.export.csv_serializer import (
    HEADER,
    CsvDocument,
    format_published,
    serialize_records,
)
from shorts_pipeline.core.youtube.video_record import VideoRecord


def parse(text):
    return list(csv.reader(io.StringIO(text)))


def test_empty_input_renders_header_only():
    document = serialize_records([])
    rows = parse(document.render())
    assert rows == [list(HEADER)]


def test_rows_match_header_width():
    records = [
        VideoRecord(video_id="a", title="One", tags=("x",), view_count="5"),
        VideoRecord(video_id="b"),
    ]
    rows = parse(serialize_records(records).render())
    assert len(rows) == 3
    assert all(len(row) == len(HEADER) for row in rows)


def test_quotes_doubled_and_round_trip():
    record = VideoRecord(video_id="q", title='He said "wow"', description='a "b" c')
    text = serialize_records([record]).render()

    assert '"He said ""wow"""' in text
    row = parse(text)[1]
    assert row[0] == 'He said "wow"'
    assert row[6] == 'a "b" c'


def test_newlines_collapsed_to_spaces():
    record = VideoRecord(video_id="n", title="line1\nline2", description="a\r\nb\rc\nd")
    text = serialize_records([record]).render()

    assert text.count("\n") == 2
    row = parse(text)[1]
    assert row[0] == "line1 line2"
    assert row[6] == "a b c d"


def test_row_projection_and_defaults():
    record = VideoRecord(
        video_id="abc123",
        title="Clip",
        channel_title="Chan",
        tags=("fps", "shorts"),
        view_count="1200",
        like_count=None,
        comment_count="",
        published_at=None,
    )
    row = parse(serialize_records([record]).render())[1]

    assert row == [
        "Clip", "https://youtube.com/shorts/abc123", "1200", "0", "0",
        "Chan", "", "fps, shorts", "",
    ]


def test_counts_are_unquoted_text_quoted():
    record = VideoRecord(video_id="z", title="T", view_count="7", like_count="2", comment_count="1")
    data_line = serialize_records([record]).render().splitlines()[1]
    assert data_line.startswith('"T","https://youtube.com/shorts/z",7,2,1,')


def test_format_published_local_display():
    expected = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc).astimezone().strftime("%Y-%m-%d %H:%M")
    assert format_published("2024-05-01T12:30:00Z") == expected
    assert format_published(None) == ""
    assert format_published("") == ""


def test_document_rejects_wrong_width():
    document = CsvDocument()
    try:
        document.append(("only", "two"))
    except ValueError:
        pass
    else:
        raise AssertionError("short row accepted")
    assert len(document) == 0
