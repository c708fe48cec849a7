"""
Duration analysis module
"""

from .duration_filter import DurationFilter, parse_duration, is_seconds_only_short

__all__ = ["DurationFilter", "parse_duration", "is_seconds_only_short"]
