"""Stamp and signature detection results"""
from dataclasses import dataclass

from ...utils.date.date_utils import DateInformation


PRESENT = "Present"
ABSENT  = "Absent"


@dataclass
class StampDetectionResult:
    """Where (and whether) a stamp was found"""

    status:      str
    coordinates: tuple[int, int, int, int] | None = None
    stamp_type:  str | None                       = None
    confidence:  float                            = 0.0
    date_info:   DateInformation | None           = None

    @property
    def present(self ) -> bool:

        return self.status == PRESENT and self.coordinates is not None

    def to_dict(self ) -> dict:

        return {
            'status':      self.status,
            'coordinates': list(self.coordinates) if self.coordinates else None,
            'type':        self.stamp_type,
            'confidence':  self.confidence,
            'date_info':   self.date_info.to_dict() if self.date_info else None,
        }


@dataclass
class SignatureDetectionResult:
    """Where (and whether) a signature was found"""

    status:      str
    coordinates: tuple[int, int, int, int] | None = None
    confidence:  float                            = 0.0
    date_info:   DateInformation | None           = None

    @property
    def present(self ) -> bool:

        return self.status == PRESENT and self.coordinates is not None

    def to_dict(self ) -> dict:

        return {
            'status':      self.status,
            'coordinates': list(self.coordinates) if self.coordinates else None,
            'confidence':  self.confidence,
            'date_info':   self.date_info.to_dict() if self.date_info else None,
        }
