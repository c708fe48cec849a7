"""
YouTube Shorts search pipeline.
Collects short-form videos by keyword and lookback window into CSV files.
"""

__version__ = "1.0.0"
