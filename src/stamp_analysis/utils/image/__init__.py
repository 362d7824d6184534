"""Image utilities — document loading, cropping, API encoding."""

from .image_utils import (
    is_pdf,
    load_document_image,
    crop_region,
    encode_image_for_api,
)

__all__ = [
    'is_pdf',
    'load_document_image',
    'crop_region',
    'encode_image_for_api',
]
