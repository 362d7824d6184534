"""Shared configuration for the stamp/signature analysis pipeline"""
from dataclasses import dataclass


@dataclass
class AnalysisConfig:
    """All tunable parameters for document loading, OCR and date analysis"""

    # API
    anthropic_api_key: str = ""
    openai_api_key:    str = ""

    # Models
    ocr_model: str = "claude-sonnet-4-5-20250929"

    # OCR retries
    max_retries: int = 3

    # Image rendering
    pdf_zoom:            float = 3.0
    max_image_dimension: int   = 2048
    jpeg_quality:        int   = 85

    # Analysis
    consistency_window_days: int   = 30
    stamp_keyword_threshold: float = 0.6

    # Simulated collaborators (None = unseeded)
    simulation_seed: int | None = None
