from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture
def youtube_service():
    """Patched googleapiclient service; set search/videos responses per test."""
    with patch("shorts_pipeline.core.youtube.youtube_client.build") as build:
        service = MagicMock()
        service.search.return_value.list.return_value.execute.return_value = {"items": []}
        service.videos.return_value.list.return_value.execute.return_value = {"items": []}
        build.return_value = service
        yield service


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "keywords: [Fortnite, 'PUBG: BATTLEGROUNDS']\n"
        "periods_in_days: [365, 90]\n"
        f"results_dir: '{(tmp_path / 'results').as_posix()}'\n",
        encoding="utf-8",
    )
    return path
