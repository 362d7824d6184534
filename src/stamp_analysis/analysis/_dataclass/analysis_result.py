"""Result of analysing one document for stamps and signatures"""
from dataclasses import dataclass

from ...date_extraction.date_extractor import DateAnalysis
from ...detection._dataclass.detection_result import StampDetectionResult, SignatureDetectionResult


@dataclass
class StampSignatureAnalysisResult:
    """Stamp, signature and date findings for one document"""

    stamp:              StampDetectionResult
    signature:          SignatureDetectionResult
    stamp_validation:   str                  # Y / N
    matched_stamp_type: str | None   = None
    processing_time_ms: float        = 0.0
    date_analysis:      DateAnalysis | None = None

    def to_dict(self ) -> dict:

        return {
            'stamp':              self.stamp.to_dict(),
            'signature':          self.signature.to_dict(),
            'stamp_validation':   self.stamp_validation,
            'matched_stamp_type': self.matched_stamp_type,
            'processing_time_ms': round(self.processing_time_ms, 1),
            'date_analysis':      self.date_analysis.to_dict() if self.date_analysis else None,
        }
