"""Stamp/signature detection collaborators"""

from .detector import StampSignatureDetector, SimulatedDetector, SimulatedTextReader
from ._dataclass.detection_result import StampDetectionResult, SignatureDetectionResult

__all__ = [
    'StampSignatureDetector',
    'SimulatedDetector',
    'SimulatedTextReader',
    'StampDetectionResult',
    'SignatureDetectionResult',
]
