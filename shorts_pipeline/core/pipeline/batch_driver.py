"""
Batch Driver
Runs the Shorts pipeline over every keyword x period combination.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from googleapiclient.errors import HttpError

from .shorts_pipeline import ShortsPipeline

logger = logging.getLogger(__name__)

SUCCESS = "success"
API_ERROR = "api_error"
ERROR = "error"
UNKNOWN = "unknown"


@dataclass(frozen=True)
class CombinationResult:
    """Outcome of one (keyword, period) combination."""
    keyword: str
    period_days: int
    status: str
    output_path: Optional[Path] = None
    row_count: int = 0
    message: str = ""
    api_error: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.status == SUCCESS


@dataclass
class BatchSummary:
    results: List[CombinationResult] = field(default_factory=list)

    @property
    def succeeded(self) -> List[CombinationResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> List[CombinationResult]:
        return [r for r in self.results if not r.ok]


def _api_error_payload(exc: HttpError) -> Optional[Dict[str, Any]]:
    """The JSON 'error' object of an API response body, if there is one."""
    content = exc.content
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")
    try:
        body = json.loads(content)
    except (TypeError, ValueError):
        return None
    error = body.get("error") if isinstance(body, dict) else None
    return error if isinstance(error, dict) else None


def classify_failure(failure: Any) -> Tuple[str, str, Optional[Dict[str, Any]]]:
    """
    Returns (status, message, api_error_payload).

    api_error: HttpError carrying a JSON error payload
    error: any other exception
    unknown: anything that is not an exception
    """
    if isinstance(failure, HttpError):
        payload = _api_error_payload(failure)
        if payload is not None:
            return API_ERROR, str(payload.get("message", failure)), payload
    if isinstance(failure, BaseException):
        return ERROR, str(failure) or type(failure).__name__, None
    return UNKNOWN, repr(failure), None


class BatchDriver:
    """
    Sequentially processes keyword x period combinations.

    Combinations never run concurrently, which keeps the request rate
    against the API quota low. A failed combination is recorded in the
    summary and the batch moves on.
    """

    def __init__(self, pipeline: ShortsPipeline):
        self._pipeline = pipeline

    def run(self, keywords: Sequence[str], periods: Sequence[int]) -> BatchSummary:
        logger.info(
            f"Starting batch processing for {len(keywords)} keywords and {len(periods)} periods."
        )
        summary = BatchSummary()

        for keyword in keywords:
            for period in periods:
                summary.results.append(self._run_combination(keyword, period))

        logger.info(
            f"Batch processing finished. {len(summary.succeeded)} succeeded, "
            f"{len(summary.failed)} failed."
        )
        return summary

    def _run_combination(self, keyword: str, period: int) -> CombinationResult:
        logger.info(f'Processing: Keyword="{keyword}", Period={period} days')
        try:
            outcome = self._pipeline.run(keyword, period)
        except Exception as e:
            return self._record_failure(keyword, period, e)

        logger.info(f'Finished: Keyword="{keyword}", Period={period} days')
        return CombinationResult(
            keyword=keyword,
            period_days=period,
            status=SUCCESS,
            output_path=outcome.output_path,
            row_count=outcome.row_count
        )

    def _record_failure(self, keyword: str, period: int, failure: Any) -> CombinationResult:
        status, message, payload = classify_failure(failure)

        logger.error(f'❌ Error processing keyword "{keyword}" for period {period} days:')
        if status == API_ERROR:
            logger.error(f"API Error: {json.dumps(payload, indent=2, ensure_ascii=False)}")
        elif status == ERROR:
            logger.error(f"Error message: {message}")
        else:
            logger.error(f"Unknown error: {message}")
        logger.info("Continuing to next task...")

        return CombinationResult(
            keyword=keyword,
            period_days=period,
            status=status,
            message=message,
            api_error=payload
        )
