"""
CSV export module
"""

from .csv_serializer import CsvDocument, HEADER, serialize_records

__all__ = ["CsvDocument", "HEADER", "serialize_records"]
