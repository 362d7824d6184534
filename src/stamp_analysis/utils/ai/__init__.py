from .ocr_service import OCRService
from ._errors.ocr_error import OCRError


__all__ = [
    "OCRService",
    "OCRError",
]
