"""
YouTube Shorts Search Pipeline
Single keyword search or keyword x period batch, exported to CSV.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from googleapiclient.errors import HttpError

from .core.analysis.duration_filter import DurationFilter
from .core.config import AppConfig, ConfigLoader, ConfigValidationError
from .core.pipeline import BatchDriver, ShortsPipeline, classify_failure
from .core.youtube import YouTubeClient
from .shared.storage import StorageManager

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


def setup_logging(logs_dir: Path) -> logging.Logger:
    """Configure logging with file and console handlers."""
    logs_dir.mkdir(parents=True, exist_ok=True)

    log_file = logs_dir / "app.log"

    log_format = "%(asctime)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=logging.INFO,
        format=log_format,
        datefmt=date_format,
        handlers=[
            logging.FileHandler(log_file, mode='a', encoding='utf-8'),
            logging.StreamHandler()
        ]
    )

    return logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="YouTube Shorts Search Pipeline")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH,
                        help="Path to the YAML configuration file.")
    parser.add_argument("--log-dir", type=Path, default=Path("logs"),
                        help="Directory receiving app.log.")

    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search Shorts for a single keyword.")
    search.add_argument("keyword", nargs="?", help="Search keyword.")
    search.add_argument("--days", type=int, default=None,
                        help="Lookback window in days (adds a period tag to the file name).")
    search.add_argument("--all", action="store_true",
                        help="Search without a keyword.")

    subparsers.add_parser("batch", help="Run every configured keyword x period combination.")

    return parser


def load_configuration(logger: logging.Logger, config_path: Path) -> AppConfig:
    """Load and validate application configuration."""
    logger.info(f"Loading configuration from: {config_path}")

    try:
        config = ConfigLoader(config_path).load()

        logger.info("Configuration validated successfully")
        logger.info(f"  Keywords: {len(config.keywords)}")
        logger.info(f"  Periods: {', '.join(str(p) for p in config.periods_in_days)} days")
        logger.info(f"  Max Results: {config.max_results}")
        logger.info(f"  Duration Filter: {config.duration_mode}")

        return config

    except FileNotFoundError as e:
        logger.error(f"Configuration file not found: {e}")
        sys.exit(1)
    except ConfigValidationError as e:
        logger.error(f"Configuration validation failed: {e}")
        sys.exit(1)


def build_pipeline(config: AppConfig) -> ShortsPipeline:
    """Builds the client once; every run shares it."""
    return ShortsPipeline(
        youtube_client=YouTubeClient(config.api_key),
        duration_filter=DurationFilter(config.duration_mode),
        storage=StorageManager(str(config.results_dir)),
        max_results=config.max_results
    )


def run_search(logger: logging.Logger, config: AppConfig, keyword: Optional[str], days: Optional[int]):
    pipeline = build_pipeline(config)
    lookback = days if days is not None else config.default_lookback_days

    try:
        outcome = pipeline.run(keyword, lookback, tag_period=days is not None)
    except HttpError as e:
        _, message, payload = classify_failure(e)
        if payload is not None:
            logger.error(f"API Error: {json.dumps(payload, indent=2, ensure_ascii=False)}")
        else:
            logger.error(f"API request failed: {message}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Search failed: {e}")
        sys.exit(1)

    logger.info(
        f"Search complete: {outcome.row_count} of {outcome.candidates} videos kept "
        f"→ {outcome.output_path}"
    )


def run_batch(logger: logging.Logger, config: AppConfig):
    driver = BatchDriver(build_pipeline(config))
    summary = driver.run(config.keywords, config.periods_in_days)

    for result in summary.failed:
        logger.warning(f"  Failed: {result.keyword!r} / {result.period_days} days ({result.status})")


def main(argv: Optional[List[str]] = None):
    """Main execution entry for the Shorts pipeline."""
    args = build_parser().parse_args(argv)
    logger = setup_logging(args.log_dir)

    if args.command == "search" and not (args.keyword or "").strip() and not args.all:
        print("Error: a search keyword is required (or pass --all).", file=sys.stderr)
        sys.exit(1)

    logger.info("=" * 60)
    logger.info("YouTube Shorts - SEARCH PIPELINE")
    logger.info("=" * 60)

    config = load_configuration(logger, args.config)

    if args.command == "search":
        run_search(logger, config, None if args.all else args.keyword, args.days)
    else:
        run_batch(logger, config)


if __name__ == "__main__":
    main()
