"""Per-document stamp/signature analysis"""

from .stamp_signature_analyzer import StampSignatureAnalyzer
from ._dataclass.analysis_result import StampSignatureAnalysisResult

__all__ = [
    'StampSignatureAnalyzer',
    'StampSignatureAnalysisResult',
]
