"""Date utilities — regex extraction, parsing, scoring, consistency."""

from .date_utils import (
    DateInformation,
    DateConsistency,
    DatePatternTable,
    DEFAULT_PATTERN_TABLE,
    build_pattern_table,
    extract_date,
    calculate_date_confidence,
    check_date_consistency,
    try_parse_date,
)

__all__ = [
    'DateInformation',
    'DateConsistency',
    'DatePatternTable',
    'DEFAULT_PATTERN_TABLE',
    'build_pattern_table',
    'extract_date',
    'calculate_date_confidence',
    'check_date_consistency',
    'try_parse_date',
]
