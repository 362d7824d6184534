"""
Date extraction for stamp, signature and document text.

Each region's text is scanned independently; the per-region winners are
then cross-checked for consistency.
"""
from dataclasses import dataclass
from datetime import date

from ..utils.date.date_utils import (
    DateInformation,
    DateConsistency,
    DatePatternTable,
    DEFAULT_PATTERN_TABLE,
    CONSISTENCY_WINDOW,
    extract_date,
    check_date_consistency,
)


@dataclass
class DateAnalysis:

    stamp_date:       DateInformation | None = None
    signature_date:   DateInformation | None = None
    document_date:    DateInformation | None = None
    date_consistency: DateConsistency        = DateConsistency.UNKNOWN

    def to_dict(self ) -> dict:

        return {
            'stamp_date':       self.stamp_date.to_dict() if self.stamp_date else None,
            'signature_date':   self.signature_date.to_dict() if self.signature_date else None,
            'document_date':    self.document_date.to_dict() if self.document_date else None,
            'date_consistency': self.date_consistency.value,
        }


class DateExtractor:

    """
    Regex date extraction over a fixed pattern table.

    Stateless apart from its configuration, so one instance can be
    shared between callers.
    """

    def __init__(self,
            table: DatePatternTable = DEFAULT_PATTERN_TABLE,
            reference_date: date    = None,
            window_days: int        = CONSISTENCY_WINDOW ) -> None:

        self.table          = table
        self.reference_date = reference_date
        self.window_days    = window_days


    def extract(self,
            text: str ) -> DateInformation | None:

        """Best date in `text`, or None."""

        return extract_date(text, table=self.table, reference_date=self.reference_date)


    def check_consistency(self,
            stamp_date: DateInformation | None     = None,
            signature_date: DateInformation | None = None,
            document_date: DateInformation | None  = None ) -> DateConsistency:

        return check_date_consistency(
            stamp_date, signature_date, document_date, window_days=self.window_days,
        )


    def analyze_regions(self,
            stamp_text: str     = "",
            signature_text: str = "",
            document_text: str  = "",
            logger=None ) -> DateAnalysis:

        """
        Extract a date from each region's text and compare them.

        Args:
            stamp_text:     Text read from the stamp impression
            signature_text: Text read around the signature
            document_text:  Text of the whole page
            logger:         Optional logger with .info() / .debug()

        Returns:
            DateAnalysis with one DateInformation (or None) per region
        """

        def log(msg: str) -> None:
            if logger:
                logger.info(msg)

        found: dict[str, DateInformation | None] = {}

        for region, text in (
                ("stamp", stamp_text),
                ("signature", signature_text),
                ("document", document_text)):

            info          = self.extract(text)
            found[region] = info

            if info:
                log(
                    f'[Date:{region}] {info.date.isoformat()} '
                    f'({info.format}, {info.confidence:.2f}) from "{info.extracted_from_text}"'
                )
            else:
                log(f'[Date:{region}] No date found')

        consistency = self.check_consistency(found["stamp"], found["signature"], found["document"])
        log(f'[Date] Consistency: {consistency.value}')

        return DateAnalysis(
            stamp_date=found["stamp"],
            signature_date=found["signature"],
            document_date=found["document"],
            date_consistency=consistency,
        )
