"""
Storage Manager for the Shorts search pipeline
Writes CSV result documents under deterministic file names.
"""

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Optional

from ...core.export.csv_serializer import CsvDocument

logger = logging.getLogger(__name__)

ALL_KEYWORDS_LABEL = "all"
STAMP_FORMAT = "%Y%m%d_%H%M%S"
MAX_FILENAME_BYTES = 255

# Windows-reserved characters, whitespace, control characters and DEL
_ILLEGAL_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|\s\x00-\x1f\x7f]+')


def sanitize_label(keyword: Optional[str], max_bytes: int = MAX_FILENAME_BYTES) -> str:
    """
    Keyword -> safe filename label; runs of illegal characters become one '_'.
    The label is cut to max_bytes of UTF-8 without splitting a character.
    """
    if not keyword or not keyword.strip():
        return ALL_KEYWORDS_LABEL
    label = _ILLEGAL_FILENAME_CHARS.sub("_", keyword)
    return label.encode("utf-8")[:max_bytes].decode("utf-8", errors="ignore")


def build_filename(keyword: Optional[str], period_days: Optional[int] = None, now: Optional[datetime] = None) -> str:
    """<label>[_<period>days]_<YYYYMMDD_HHMMSS>.csv"""
    stamp = (now or datetime.now()).strftime(STAMP_FORMAT)
    suffix = f"_{period_days}days_{stamp}.csv" if period_days is not None else f"_{stamp}.csv"
    # most filesystems cap a single name at 255 bytes
    label = sanitize_label(keyword, MAX_FILENAME_BYTES - len(suffix.encode("utf-8")))
    return label + suffix


class StorageManager:
    """
    Service responsible for the results directory.

    Responsibilities:
    - Create the results directory on startup.
    - Name result files from keyword, period and a second-resolution timestamp.
    - Write each CSV document in a single call.
    """

    def __init__(self, results_root: str = "./results"):
        """
        Initialize the StorageManager.

        Args:
            results_root (str): Directory receiving the CSV files.
        """
        self._root = Path(results_root).resolve()
        self._ensure_directories()

    def _ensure_directories(self):
        self._root.mkdir(parents=True, exist_ok=True)
        logger.info(f"✓ Results directory verified: {self._root}")

    def save_csv(
        self,
        document: CsvDocument,
        keyword: Optional[str],
        period_days: Optional[int] = None,
        now: Optional[datetime] = None
    ) -> Path:
        """
        Writes the document as UTF-8 and returns its path.
        Write errors propagate to the caller.
        """
        destination = self._root / build_filename(keyword, period_days, now)

        if destination.exists():
            # second-resolution names collide when the same search repeats within a second
            logger.warning(f"Destination already exists, overwriting: {destination.name}")

        text = document.render()
        with open(destination, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        logger.info(f"✅  Saved → {destination.name} ({len(document)} rows)")
        return destination

    def __repr__(self):
        return f"StorageManager(root={self._root})"
