"""
Stamp/signature detector interface and the simulated stand-ins.

No real image analysis happens here. SimulatedDetector and
SimulatedTextReader are placeholders that implement the same interface a
real detector or OCR service does, so the analyzer can run end to end.
"""
import random

from PIL import Image

from ._dataclass.detection_result import (
    StampDetectionResult,
    SignatureDetectionResult,
    PRESENT,
)


SAMPLE_TEXTS = {
    "stamp": (
        'OFFICER COMMANDING 14th BN A.P.S.P. ANANTHAPURAMU 15/03/2024',
        'STATE OFFICER TO ADGP APSP HEAD OFFICE MANGALAGIRI 20 March 2024',
        'Inspector General of Police APSP Bns, Amaravathi 22-03-2024',
        'Dy. Inspector General of Police-IV APSP Battalions, Mangalagiri Mar 18, 2024',
        'OFFICIAL STAMP 14th March 2024 APPROVED',
        'VERIFIED ON 16/03/2024 STAMP AUTHORITY',
    ),
    "signature": (
        'Signed on 15/03/2024',
        'Date: 20 March 2024',
        'Signature 22-03-2024',
        'Authorized on Mar 18, 2024',
        'Signature Date: 14th March 2024',
        'Signed: 16/03/2024',
    ),
    "document": (
        'Document dated 15/03/2024',
        'Issued on 20 March 2024',
        'Date of issue: 22-03-2024',
        'Document Date: Mar 18, 2024',
        'Created on 14th March 2024',
        'Date: 16/03/2024',
    ),
}


class StampSignatureDetector:
    """Base class for stamp/signature locators"""

    def detect(self, image: Image.Image) -> tuple[StampDetectionResult, SignatureDetectionResult]:
        raise NotImplementedError


class SimulatedDetector(StampSignatureDetector):

    """
    Mock detector: always reports a stamp and a signature at fixed boxes.

    Stands in for a real detection model until one exists.
    """

    STAMP_BOX     = (100, 100, 200, 100)
    SIGNATURE_BOX = (300, 400, 150, 50)

    def detect(self, image: Image.Image) -> tuple[StampDetectionResult, SignatureDetectionResult]:

        stamp = StampDetectionResult(
            status=PRESENT,
            coordinates=self.STAMP_BOX,
            stamp_type="official_stamp",
            confidence=0.85,
        )
        signature = SignatureDetectionResult(
            status=PRESENT,
            coordinates=self.SIGNATURE_BOX,
            confidence=0.78,
        )

        return stamp, signature


class SimulatedTextReader:

    """
    Mock OCR: returns a canned sample text for the requested region.

    Same extract_text() signature as OCRService. Pass a seed for
    reproducible picks.
    """

    def __init__(self, seed: int = None ):

        self._rng = random.Random(seed)

    def extract_text(self, image_bytes: bytes, media_type: str = "image/jpeg", region: str = "document" ) -> str:

        samples = SAMPLE_TEXTS.get(region, SAMPLE_TEXTS["document"])

        return self._rng.choice(samples)
