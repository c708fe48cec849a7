import csv
import logging

import pytest

from helpers import make_http_error, make_video_item, set_search_ids, set_video_items
from shorts_pipeline.core.analysis.duration_filter import DurationFilter
from shorts_pipeline.core.pipeline import BatchDriver, ShortsPipeline, classify_failure
from shorts_pipeline.core.youtube import YouTubeClient
from shorts_pipeline.shared.storage import StorageManager


@pytest.fixture
def pipeline(youtube_service, tmp_path):
    return ShortsPipeline(
        youtube_client=YouTubeClient("key"),
        duration_filter=DurationFilter(),
        storage=StorageManager(str(tmp_path / "results")),
    )


def read_rows(path):
    with open(path, encoding="utf-8", newline="") as f:
        return list(csv.reader(f))


def test_fortnite_scenario(pipeline, youtube_service):
    set_search_ids(youtube_service, ["a", "b", "c", "d"])
    set_video_items(youtube_service, [
        make_video_item("a", "PT15S"),
        make_video_item("b", "PT1M"),
        make_video_item("c", "PT59S"),
        make_video_item("d", "PT2M10S"),
    ])

    outcome = pipeline.run("Fortnite", 90)

    assert outcome.candidates == 4
    assert outcome.row_count == 2
    assert outcome.output_path.name.startswith("Fortnite_90days_")
    assert outcome.output_path.suffix == ".csv"
    rows = read_rows(outcome.output_path)
    assert [r[1] for r in rows[1:]] == [
        "https://youtube.com/shorts/a",
        "https://youtube.com/shorts/c",
    ]


def test_zero_results_writes_header_only(pipeline, youtube_service):
    outcome = pipeline.run("nothing", 30)

    youtube_service.videos.return_value.list.assert_not_called()
    assert outcome.row_count == 0
    assert len(read_rows(outcome.output_path)) == 1


def test_untagged_run_omits_period(pipeline):
    outcome = pipeline.run(None, None, tag_period=False)
    assert outcome.output_path.name.startswith("all_2")


def test_failed_detail_call_writes_nothing(pipeline, youtube_service, tmp_path):
    set_search_ids(youtube_service, ["a"])
    youtube_service.videos.return_value.list.return_value.execute.side_effect = RuntimeError("boom")

    with pytest.raises(RuntimeError):
        pipeline.run("x", 1)
    assert list((tmp_path / "results").iterdir()) == []


def test_classify_failure_kinds():
    status, message, payload = classify_failure(make_http_error(payload={"code": 403, "message": "quota"}))
    assert status == "api_error"
    assert message == "quota"
    assert payload == {"code": 403, "message": "quota"}

    status, message, payload = classify_failure(make_http_error(raw=b"<html>bad gateway</html>"))
    assert status == "error"
    assert payload is None

    assert classify_failure(ValueError("bad"))[:2] == ("error", "bad")
    assert classify_failure("weird")[0] == "unknown"


def test_batch_continues_after_api_error(pipeline, youtube_service, caplog):
    calls = []

    def search_execute():
        calls.append(len(calls))
        if len(calls) == 1:
            raise make_http_error(payload={"code": 403, "message": "quotaExceeded"})
        return {"items": []}

    youtube_service.search.return_value.list.return_value.execute.side_effect = search_execute

    with caplog.at_level(logging.INFO):
        summary = BatchDriver(pipeline).run(["Fortnite", "PUBG"], [365, 90])

    assert len(calls) == 4
    assert [(r.keyword, r.period_days) for r in summary.results] == [
        ("Fortnite", 365), ("Fortnite", 90), ("PUBG", 365), ("PUBG", 90),
    ]
    assert [r.status for r in summary.results] == ["api_error", "success", "success", "success"]
    assert summary.failed[0].api_error["message"] == "quotaExceeded"
    assert len(summary.succeeded) == 3
    assert "quotaExceeded" in caplog.text
    assert "Continuing to next task..." in caplog.text
    assert "Batch processing finished." in caplog.text


def test_batch_records_generic_errors(pipeline, youtube_service):
    youtube_service.search.return_value.list.return_value.execute.side_effect = OSError("disk")

    summary = BatchDriver(pipeline).run(["a"], [1, 2])

    assert [r.status for r in summary.results] == ["error", "error"]
    assert summary.results[0].message == "disk"
