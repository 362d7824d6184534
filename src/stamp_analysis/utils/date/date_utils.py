"""
Date regex patterns, parsing, confidence scoring and consistency checks.

Pure functions — no API dependencies, no I/O.
"""
import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class DateInformation:

    date:                date | None
    format:              str | None
    confidence:          float       = 0.0
    extracted_from_text: str | None  = None

    def to_dict(self ) -> dict:

        return {
            'date':                self.date.isoformat() if self.date else None,
            'format':              self.format,
            'confidence':          round(self.confidence, 3),
            'extracted_from_text': self.extracted_from_text,
        }


class DateConsistency(str, Enum):
    """Agreement between dates found in different document regions"""
    CONSISTENT   = "Consistent"
    INCONSISTENT = "Inconsistent"
    UNKNOWN      = "Unknown"


@dataclass(frozen=True)
class DatePatternTable:

    """
    Immutable pattern configuration handed to the extractor.

    loose_patterns:  (regex, family) pairs scanned in priority order
    strict_formats:  (format tag, regex, field order) tried per candidate
    month_map:       lower-case month name → month number
    """

    loose_patterns: tuple[tuple[re.Pattern, str], ...]
    strict_formats: tuple[tuple[str, re.Pattern, str], ...]
    month_map:      Mapping[str, int]


# ── Month lookup ──────────────────────────────────────────────────

MONTH_MAP: Mapping[str, int] = MappingProxyType({
    'january': 1, 'jan': 1, 'february': 2, 'feb': 2,
    'march': 3, 'mar': 3, 'april': 4, 'apr': 4,
    'may': 5, 'june': 6, 'jun': 6, 'july': 7, 'jul': 7,
    'august': 8, 'aug': 8, 'september': 9, 'sept': 9, 'sep': 9,
    'october': 10, 'oct': 10, 'november': 11, 'nov': 11,
    'december': 12, 'dec': 12,
})

# Full names before abbreviations so "March" is not cut to "Mar"
_FULL_MONTHS = (r'January|February|March|April|May|June|July|August'
                r'|September|October|November|December')
_ABBR_MONTHS = r'Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sept|Sep|Oct|Nov|Dec'
_ANY_MONTH   = rf'(?:{_FULL_MONTHS}|{_ABBR_MONTHS})'

_MONTH_NAME_PATTERN = re.compile(rf'(?:{_ABBR_MONTHS})', re.IGNORECASE)
_FOUR_DIGIT_PATTERN = re.compile(r'\d{4}')


# ── Regex patterns ────────────────────────────────────────────────
# Order matters — earlier patterns win confidence ties.

LOOSE_DATE_PATTERNS: list[tuple[str, str]] = [
    # DD/MM/YYYY, DD-MM-YYYY, DD.MM.YYYY
    (r'(?<!\d)(\d{1,2})[/\-.](\d{1,2})[/\-.](\d{4})(?!\d)', "numeric_long"),

    # YYYY-MM-DD, YYYY/MM/DD, YYYY.MM.DD
    (r'(?<!\d)(\d{4})[/\-.](\d{1,2})[/\-.](\d{1,2})(?!\d)', "iso"),

    # DD Month YYYY  (e.g. 20 March 2024 or 20 Mar 2024)
    (rf'(?<!\d)(\d{{1,2}})\s+({_ANY_MONTH})\b\.?\s+(\d{{4}})(?!\d)', "written_dmy"),

    # Month DD, YYYY  (e.g. Mar 18, 2024)
    (rf'\b({_ANY_MONTH})\b\.?\s+(\d{{1,2}}),?\s+(\d{{4}})(?!\d)', "written_mdy"),

    # DD/MM/YY, DD-MM-YY, DD.MM.YY
    (r'(?<!\d)(\d{1,2})[/\-.](\d{1,2})[/\-.](\d{2})(?!\d)', "numeric_short"),

    # Ordinal days: 14th March 2024
    (rf'(?<!\d)(\d{{1,2}})(?:st|nd|rd|th)\s+({_ANY_MONTH})\b\.?,?\s+(\d{{4}})(?!\d)', "ordinal"),
]

# Field order: d/m/y positions of the three capture groups
STRICT_DATE_FORMATS: list[tuple[str, str, str]] = [
    ('DD/MM/YYYY',    r'(\d{1,2})/(\d{1,2})/(\d{4})',   "dmy"),
    ('DD-MM-YYYY',    r'(\d{1,2})-(\d{1,2})-(\d{4})',   "dmy"),
    ('DD.MM.YYYY',    r'(\d{1,2})\.(\d{1,2})\.(\d{4})', "dmy"),
    ('MM/DD/YYYY',    r'(\d{1,2})/(\d{1,2})/(\d{4})',   "mdy"),
    ('MM-DD-YYYY',    r'(\d{1,2})-(\d{1,2})-(\d{4})',   "mdy"),
    ('MM.DD.YYYY',    r'(\d{1,2})\.(\d{1,2})\.(\d{4})', "mdy"),
    ('YYYY-MM-DD',    r'(\d{4})-(\d{1,2})-(\d{1,2})',   "ymd"),
    ('YYYY/MM/DD',    r'(\d{4})/(\d{1,2})/(\d{1,2})',   "ymd"),
    ('YYYY.MM.DD',    r'(\d{4})\.(\d{1,2})\.(\d{1,2})', "ymd"),
    ('DD/MM/YY',      r'(\d{1,2})/(\d{1,2})/(\d{2})',   "dmy"),
    ('DD-MM-YY',      r'(\d{1,2})-(\d{1,2})-(\d{2})',   "dmy"),
    ('DD.MM.YY',      r'(\d{1,2})\.(\d{1,2})\.(\d{2})', "dmy"),
    ('DD MMM YYYY',   rf'(\d{{1,2}})\s+({_ABBR_MONTHS})\.?\s+(\d{{4}})',  "dmy"),
    ('DD MMMM YYYY',  rf'(\d{{1,2}})\s+({_FULL_MONTHS})\.?\s+(\d{{4}})',     "dmy"),
    ('MMM DD, YYYY',  rf'({_ABBR_MONTHS})\.?\s+(\d{{1,2}}),?\s+(\d{{4}})', "mdy"),
    ('MMMM DD, YYYY', rf'({_FULL_MONTHS})\.?\s+(\d{{1,2}}),?\s+(\d{{4}})',    "mdy"),
    ('Do MMM YYYY',   rf'(\d{{1,2}})(?:st|nd|rd|th)\s+({_ABBR_MONTHS})\.?,?\s+(\d{{4}})', "dmy"),
    ('Do MMMM YYYY',  rf'(\d{{1,2}})(?:st|nd|rd|th)\s+({_FULL_MONTHS})\.?,?\s+(\d{{4}})',    "dmy"),
]

# Separator-agnostic formats for candidates no strict format accepts
FALLBACK_FORMATS = ["%d/%m/%Y", "%m/%d/%Y", "%Y/%m/%d"]

AUTO_DETECTED        = "Auto-detected"
FALLBACK_CONFIDENCE  = 0.6
BASE_CONFIDENCE      = 0.8
CONSISTENCY_WINDOW   = 30


def build_pattern_table(
        loose_patterns: list[tuple[str, str]]        = None,
        strict_formats: list[tuple[str, str, str]]   = None,
        month_map: Mapping[str, int]                 = None ) -> DatePatternTable:

    """Compile pattern definitions into an immutable DatePatternTable."""

    loose  = LOOSE_DATE_PATTERNS if loose_patterns is None else loose_patterns
    strict = STRICT_DATE_FORMATS if strict_formats is None else strict_formats
    months = MONTH_MAP if month_map is None else month_map

    return DatePatternTable(
        loose_patterns=tuple(
            (re.compile(pattern, re.IGNORECASE), family) for pattern, family in loose
        ),
        strict_formats=tuple(
            (fmt, re.compile(pattern, re.IGNORECASE), order) for fmt, pattern, order in strict
        ),
        month_map=MappingProxyType({k.lower(): v for k, v in months.items()}),
    )


DEFAULT_PATTERN_TABLE = build_pattern_table()


def extract_date(
        text: str,
        table: DatePatternTable = DEFAULT_PATTERN_TABLE,
        reference_date: date    = None ) -> DateInformation | None:

    """
    Find the highest-confidence date in free-form text.

    Args:
        text:           Any text (OCR output, stamp text, ...)
        table:          Pattern configuration to scan with
        reference_date: "Today" for the age penalty; defaults to date.today()

    Returns:
        DateInformation for the winning candidate, or None if nothing parsed
    """

    if not text or not text.strip():
        return None

    best: DateInformation | None = None

    for pattern, _family in table.loose_patterns:
        for match in pattern.finditer(text):
            candidate = parse_candidate(match.group(0), table, reference_date)

            if candidate and (best is None or candidate.confidence > best.confidence):
                best = candidate

    return best


def parse_candidate(
        candidate: str,
        table: DatePatternTable = DEFAULT_PATTERN_TABLE,
        reference_date: date    = None ) -> DateInformation | None:

    """Run the strict formats, then the fallback parser, on one candidate."""

    for fmt, pattern, order in table.strict_formats:
        match = pattern.fullmatch(candidate)
        if not match:
            continue

        parsed = _build_date(match.groups(), order, table.month_map)
        if parsed:
            return DateInformation(
                date=parsed,
                format=fmt,
                confidence=calculate_date_confidence(candidate, parsed, reference_date),
                extracted_from_text=candidate,
            )

    parsed = try_parse_date(candidate)
    if parsed:
        return DateInformation(
            date=parsed,
            format=AUTO_DETECTED,
            confidence=FALLBACK_CONFIDENCE,
            extracted_from_text=candidate,
        )

    return None


def calculate_date_confidence(
        matched_text: str,
        parsed: date,
        reference_date: date = None ) -> float:

    """
    Heuristic confidence for an extracted date, clamped to [0, 1].

    Dates far from the reference year are penalised; explicit separators,
    4-digit years and month names each add a small bonus.
    """

    today      = reference_date or date.today()
    confidence = BASE_CONFIDENCE
    year_diff  = abs(today.year - parsed.year)

    if year_diff > 50:
        confidence -= 0.3
    if year_diff > 100:
        confidence -= 0.4

    if '/' in matched_text or '-' in matched_text:
        confidence += 0.1
    if _FOUR_DIGIT_PATTERN.search(matched_text):
        confidence += 0.1
    if _MONTH_NAME_PATTERN.search(matched_text):
        confidence += 0.1

    return min(max(confidence, 0.0), 1.0)


def check_date_consistency(
        stamp_date: DateInformation | None     = None,
        signature_date: DateInformation | None = None,
        document_date: DateInformation | None  = None,
        window_days: int                       = CONSISTENCY_WINDOW ) -> DateConsistency:

    """Dates within window_days of each other are consistent; <2 dates is unknown."""

    dates = [
        info.date for info in (stamp_date, signature_date, document_date)
        if info is not None and info.date is not None
    ]

    if len(dates) < 2:
        return DateConsistency.UNKNOWN

    span = (max(dates) - min(dates)).days

    return DateConsistency.CONSISTENT if span <= window_days else DateConsistency.INCONSISTENT


def try_parse_date(
        date_str: str ) -> date | None:

    """Generic parse: normalise separators, then try the fallback formats."""

    if not date_str:
        return None

    normalised = re.sub(r'\s*[/\-.]\s*', '/', date_str.strip())

    # strptime's %y pivots at 69, ours at 50
    short = re.fullmatch(r'(\d{1,2})/(\d{1,2})/(\d{2})', normalised)
    if short:
        d, m, y    = short.groups()
        normalised = f'{d}/{m}/{expand_two_digit_year(int(y))}'

    for fmt in FALLBACK_FORMATS:
        try:
            return datetime.strptime(normalised, fmt).date()
        except ValueError:
            continue

    return None


def expand_two_digit_year(
        year: int ) -> int:

    """00-49 → 2000s, 50-99 → 1900s; 4-digit years pass through."""

    if year >= 100:
        return year

    return year + (2000 if year < 50 else 1900)


# ── Private helpers ───────────────────────────────────────────────

def _build_date(
        groups: tuple[str, ...],
        order: str,
        month_map: Mapping[str, int] ) -> date | None:

    """Assemble a date from regex groups laid out as `order` (e.g. "dmy")."""

    fields = dict(zip(order, groups))

    month_raw = fields['m']
    if month_raw.isdigit():
        month = int(month_raw)
    else:
        month = month_map.get(month_raw.lower().rstrip('.'))
        if month is None:
            return None

    day  = int(fields['d'])
    year = int(fields['y'])

    if len(fields['y']) == 2:
        year = expand_two_digit_year(year)

    try:
        return date(year, month, day)
    except ValueError:
        return None
