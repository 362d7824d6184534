from .ai.ocr_service import OCRService
from .date.date_utils import extract_date, check_date_consistency


__all__ = [
    "OCRService",

    "extract_date",
    "check_date_consistency",
]
