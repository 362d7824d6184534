"""Date extraction — regex scan, strict parse, confidence scoring."""

from .date_extractor import DateExtractor, DateAnalysis

__all__ = [
    'DateExtractor',
    'DateAnalysis',
]
