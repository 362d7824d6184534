"""
Stamp/Signature Analyzer — per-document orchestration

Detect regions → read region text → extract dates → match stamp → audit
"""
import time

from PIL import Image

from ..constants import match_stamp, get_master_stamp_list
from ..date_extraction.date_extractor import DateExtractor
from ..detection.detector import StampSignatureDetector, SimulatedDetector, SimulatedTextReader
from ..detection._dataclass.detection_result import (
    StampDetectionResult,
    SignatureDetectionResult,
    ABSENT,
)
from ..pipeline_config import AnalysisConfig
from ..utils.image.image_utils import load_document_image, crop_region, encode_image_for_api, is_pdf
from ._dataclass.analysis_result import StampSignatureAnalysisResult


class StampSignatureAnalyzer:

    """
    Runs stamp/signature analysis for one document at a time

    Collaborators:
        detector:    locates stamp and signature boxes
        text_reader: anything with extract_text(image_bytes, media_type, region)
        extractor:   DateExtractor over the region texts
    """

    def __init__(self,
            config: AnalysisConfig                  = None,
            detector: StampSignatureDetector        = None,
            text_reader=None,
            extractor: DateExtractor                = None ) -> None:

        self.config      = config or AnalysisConfig()
        self.detector    = detector or SimulatedDetector()
        self.text_reader = text_reader or SimulatedTextReader(seed=self.config.simulation_seed)
        self.extractor   = extractor or DateExtractor(window_days=self.config.consistency_window_days)


    def analyze(self,
            document: bytes,
            filename: str,
            user_id: str,
            logger=None ) -> StampSignatureAnalysisResult:

        """
        Analyse one document for stamp, signature and dates.

        Never raises: any failure is logged and answered with the
        fallback result (nothing present, validation "N").

        Args:
            document: Raw image or PDF bytes
            filename: Original filename (audit trail, PDF detection)
            user_id:  Requesting user (audit trail)
            logger:   Optional logger with .info() / .error()

        Returns:
            StampSignatureAnalysisResult
        """

        start = time.perf_counter()

        self._audit(logger, user_id, 'stamp_signature_analysis_start', filename, {
            'file_size': len(document or b''),
            'file_type': 'application/pdf' if document and is_pdf(document, filename) else 'image',
        })

        try:
            result = self._run(document, filename, logger)

        except Exception as e:
            elapsed = (time.perf_counter() - start) * 1000
            self._audit(logger, user_id, 'stamp_signature_analysis_error', filename, {'error': str(e)})
            if logger:
                logger.error(f'[Analyzer] Stamp/Signature analysis failed for {filename}: {e}', exc_info=e)

            return StampSignatureAnalysisResult(
                stamp=StampDetectionResult(status=ABSENT),
                signature=SignatureDetectionResult(status=ABSENT),
                stamp_validation='N',
                processing_time_ms=elapsed,
            )

        result.processing_time_ms = (time.perf_counter() - start) * 1000

        self._audit(logger, user_id, 'stamp_signature_analysis_complete', filename, {
            'stamp_status':       result.stamp.status,
            'signature_status':   result.signature.status,
            'stamp_validation':   result.stamp_validation,
            'processing_time_ms': round(result.processing_time_ms, 1),
        })

        return result


    def get_master_stamp_list(self ) -> list[dict]:

        return get_master_stamp_list()


    def check_service_health(self,
            logger=None ) -> bool:

        """True if the text reader answers a blank test image without raising"""

        blank = encode_image_for_api(Image.new('RGB', (32, 32), 'white'))

        try:
            self.text_reader.extract_text(blank, media_type="image/jpeg", region="document")
            return True

        except Exception as e:
            if logger:
                logger.error(f'[Analyzer] Service health check failed: {e}', exc_info=e)
            return False


    # ── Pipeline steps ────────────────────────────────────────────

    def _run(self,
            document: bytes,
            filename: str,
            logger ) -> StampSignatureAnalysisResult:

        def log(msg: str) -> None:
            if logger:
                logger.info(msg)

        image = load_document_image(document, filename, zoom=self.config.pdf_zoom)
        log(f'[Analyzer] Loaded {filename}: {image.width}x{image.height}')

        stamp, signature = self.detector.detect(image)
        log(f'[Analyzer] Detector: stamp={stamp.status}, signature={signature.status}')

        stamp_text     = self._read_region(image, stamp, "stamp", log)
        signature_text = self._read_region(image, signature, "signature", log)
        document_text  = self._read_text(image, "document")

        dates = self.extractor.analyze_regions(
            stamp_text, signature_text, document_text, logger=logger,
        )
        stamp.date_info     = dates.stamp_date
        signature.date_info = dates.signature_date

        matched = match_stamp(stamp_text, self.config.stamp_keyword_threshold) if stamp.present else None
        if matched:
            log(f'[Analyzer] Stamp matched master entry {matched.id}: {matched.name}')
        elif stamp.present:
            log('[Analyzer] Stamp text matched no master entry')

        return StampSignatureAnalysisResult(
            stamp=stamp,
            signature=signature,
            stamp_validation='Y' if matched else 'N',
            matched_stamp_type=matched.name if matched else None,
            date_analysis=dates,
        )


    def _read_region(self,
            image: Image.Image,
            detection: StampDetectionResult | SignatureDetectionResult,
            region: str,
            log ) -> str:

        """Crop a detected box and read its text; empty when absent"""

        if not detection.present:
            return ""

        crop = crop_region(image, detection.coordinates)
        if crop is None:
            log(f'[Analyzer] {region} box {detection.coordinates} lies outside the page')
            return ""

        text = self._read_text(crop, region)
        log(f'[Analyzer] {region} text: {text!r}')

        return text


    def _read_text(self,
            image: Image.Image,
            region: str ) -> str:

        img_bytes = encode_image_for_api(
            image,
            max_dimension=self.config.max_image_dimension,
            quality=self.config.jpeg_quality,
        )

        return self.text_reader.extract_text(img_bytes, media_type="image/jpeg", region=region)


    @staticmethod
    def _audit(
            logger,
            user_id: str,
            action: str,
            filename: str,
            details: dict ) -> None:

        """Audit-trail entry: who did what to which document"""

        if logger:
            logger.info(f'[Audit] {action} user={user_id} document={filename} details={details}')
