class OCRError(Exception):
    """Raised when the vision OCR call fails after all retries"""
    pass
