"""Stamp, signature and date analysis for scanned documents"""

# Configuration
from .pipeline_config import AnalysisConfig

# Errors
from ._errors.analysis_error import AnalysisError, DocumentLoadError

# Constants
from .constants import OFFICIAL_STAMP_MASTER_LIST, OfficialStamp, match_stamp, get_master_stamp_list

# Date extraction
from .date_extraction.date_extractor import DateExtractor, DateAnalysis
from .utils.date.date_utils import (
    DateInformation,
    DateConsistency,
    DatePatternTable,
    DEFAULT_PATTERN_TABLE,
    build_pattern_table,
    extract_date,
    calculate_date_confidence,
    check_date_consistency,
)

# Detection
from .detection.detector import StampSignatureDetector, SimulatedDetector, SimulatedTextReader
from .detection._dataclass.detection_result import StampDetectionResult, SignatureDetectionResult

# Analysis
from .analysis.stamp_signature_analyzer import StampSignatureAnalyzer
from .analysis._dataclass.analysis_result import StampSignatureAnalysisResult

# AI utilities
from .utils.ai.ocr_service import OCRService
from .utils.ai._errors.ocr_error import OCRError

# Image utilities
from .utils.image.image_utils import load_document_image, crop_region, encode_image_for_api

__all__ = [
    # Configuration
    'AnalysisConfig',

    # Errors
    'AnalysisError',
    'DocumentLoadError',
    'OCRError',

    # Constants
    'OFFICIAL_STAMP_MASTER_LIST',
    'OfficialStamp',
    'match_stamp',
    'get_master_stamp_list',

    # Date extraction
    'DateExtractor',
    'DateAnalysis',
    'DateInformation',
    'DateConsistency',
    'DatePatternTable',
    'DEFAULT_PATTERN_TABLE',
    'build_pattern_table',
    'extract_date',
    'calculate_date_confidence',
    'check_date_consistency',

    # Detection
    'StampSignatureDetector',
    'SimulatedDetector',
    'SimulatedTextReader',
    'StampDetectionResult',
    'SignatureDetectionResult',

    # Analysis
    'StampSignatureAnalyzer',
    'StampSignatureAnalysisResult',

    # AI utilities
    'OCRService',

    # Image utilities
    'load_document_image',
    'crop_region',
    'encode_image_for_api',
]
