"""
Configuration Loader
Loads and validates YAML configuration files
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional
import yaml
from dotenv import load_dotenv

from .app_config import AppConfig
from ..analysis.duration_filter import DURATION_MODES
from ..youtube.search_criteria import PLATFORM_MAX_RESULTS

API_KEY_ENV_VAR = "YT_API_KEY"


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


class ConfigLoader:
    """
    Loads and validates configuration from YAML files.

    Responsibilities:
    - Read YAML configuration file
    - Read the API credential from the environment (.env supported)
    - Validate types and value ranges
    - Return validated AppConfig instance
    """

    def __init__(self, config_path: Path, environ: Optional[Mapping[str, str]] = None):
        """
        Initialize ConfigLoader with path to config file.

        Args:
            config_path: Path to YAML configuration file
            environ: Environment mapping (defaults to os.environ after loading .env)
        """
        self._config_path = config_path
        self._environ = environ

    def load(self) -> AppConfig:
        """
        Load and validate configuration from YAML file.

        Returns:
            AppConfig: Validated configuration object

        Raises:
            ConfigValidationError: If configuration is invalid
            FileNotFoundError: If config file doesn't exist
        """
        config_data = self._load_yaml()

        api_key = self._validate_api_key()
        keywords = self._validate_keywords(config_data)
        periods = self._validate_periods(config_data)
        default_lookback = self._validate_positive_int(config_data, "default_lookback_days", 365)
        max_results = self._validate_max_results(config_data)
        results_dir = self._validate_path(config_data, "results_dir", "./results")
        duration_mode = self._validate_duration_filter(config_data)

        return AppConfig(
            api_key=api_key,
            keywords=keywords,
            periods_in_days=periods,
            default_lookback_days=default_lookback,
            max_results=max_results,
            results_dir=results_dir,
            duration_mode=duration_mode
        )

    def _load_yaml(self) -> Dict[str, Any]:
        """Load YAML file and return parsed data."""
        if not self._config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self._config_path}"
            )

        try:
            with open(self._config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)

            if data is None:
                raise ConfigValidationError("Configuration file is empty")

            if not isinstance(data, dict):
                raise ConfigValidationError(
                    "Configuration must be a YAML mapping/dictionary"
                )

            return data

        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML syntax: {e}")

    def _validate_api_key(self) -> str:
        """Read the API key from the environment."""
        environ = self._environ
        if environ is None:
            load_dotenv()
            environ = os.environ

        api_key = environ.get(API_KEY_ENV_VAR, "")
        if not api_key.strip():
            raise ConfigValidationError(
                f"Missing API key: set the {API_KEY_ENV_VAR} environment variable"
            )

        return api_key.strip()

    def _validate_keywords(self, config: Dict[str, Any]) -> List[str]:
        """Validate keywords field."""
        if "keywords" not in config:
            raise ConfigValidationError("Missing required field: 'keywords'")

        keywords = config["keywords"]

        if not isinstance(keywords, list) or not keywords:
            raise ConfigValidationError("Field 'keywords' must be a non-empty list")

        cleaned = []
        for keyword in keywords:
            # YAML turns bare numbers into ints; keywords are always text
            if isinstance(keyword, (int, float)) and not isinstance(keyword, bool):
                keyword = str(keyword)
            if not isinstance(keyword, str) or not keyword.strip():
                raise ConfigValidationError(
                    f"Field 'keywords' contains an invalid entry: {keyword!r}"
                )
            cleaned.append(keyword.strip())

        return cleaned

    def _validate_periods(self, config: Dict[str, Any]) -> List[int]:
        """Validate periods_in_days field (optional)."""
        periods = config.get("periods_in_days", [1095, 365, 90])

        if not isinstance(periods, list) or not periods:
            raise ConfigValidationError("Field 'periods_in_days' must be a non-empty list")

        for period in periods:
            if isinstance(period, bool) or not isinstance(period, int) or period <= 0:
                raise ConfigValidationError(
                    f"Field 'periods_in_days' entries must be positive integers, got {period!r}"
                )

        return periods

    def _validate_positive_int(self, config: Dict[str, Any], field: str, default: int) -> int:
        value = config.get(field, default)

        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigValidationError(
                f"Field '{field}' must be an integer, got {type(value).__name__}"
            )

        if value <= 0:
            raise ConfigValidationError(
                f"Field '{field}' must be greater than 0, got {value}"
            )

        return value

    def _validate_max_results(self, config: Dict[str, Any]) -> int:
        """Validate max_results field (optional, capped by the platform)."""
        max_results = self._validate_positive_int(config, "max_results", PLATFORM_MAX_RESULTS)

        if max_results > PLATFORM_MAX_RESULTS:
            raise ConfigValidationError(
                f"Field 'max_results' must be at most {PLATFORM_MAX_RESULTS}, got {max_results}"
            )

        return max_results

    def _validate_path(self, config: Dict[str, Any], field: str, default: str) -> str:
        value = config.get(field, default)

        if not isinstance(value, str) or not value.strip():
            raise ConfigValidationError(f"Field '{field}' must be a non-empty string")

        return value.strip()

    def _validate_duration_filter(self, config: Dict[str, Any]) -> str:
        """Validate duration_filter section."""
        section = config.get("duration_filter")
        if section is None:
            return DURATION_MODES[0]

        if not isinstance(section, dict):
            raise ConfigValidationError("Section 'duration_filter' must be a mapping")

        mode = section.get("mode", DURATION_MODES[0])
        if mode not in DURATION_MODES:
            raise ConfigValidationError(
                f"duration_filter.mode must be one of {', '.join(DURATION_MODES)}, got {mode!r}"
            )

        return mode
