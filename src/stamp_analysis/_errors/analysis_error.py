class AnalysisError(Exception):
    """Raised when a document cannot be analysed"""
    pass


class DocumentLoadError(AnalysisError):
    """Raised when document bytes cannot be turned into an image"""
    pass
