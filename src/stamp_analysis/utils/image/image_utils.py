"""
Document image loading, region cropping and API encoding
"""
import fitz  # PyMuPDF
fitz.TOOLS.mupdf_display_errors(False)    # Suppress error messages on stderr
fitz.TOOLS.mupdf_display_warnings(False)  # Suppress warning messages on stderr
from io import BytesIO
from PIL import Image, UnidentifiedImageError

from ..._errors.analysis_error import DocumentLoadError


def is_pdf(data: bytes, filename: str = "") -> bool:
    """True when the bytes or the filename say PDF"""
    return data[:5] == b'%PDF-' or filename.lower().endswith('.pdf')


def load_document_image(
    data: bytes,
    filename: str = "",
    zoom: float = 3.0
) -> Image.Image:
    """
    Load a document as an RGB image

    PDFs are rendered from their first page; anything else is handed to Pillow.

    Args:
        data: Raw file bytes
        filename: Original filename (used to spot PDFs)
        zoom: Zoom factor for PDF rendering

    Returns:
        PIL Image in RGB mode

    Raises:
        DocumentLoadError: empty, unreadable or page-less input
    """
    if not data:
        raise DocumentLoadError(f"Empty document: {filename or '<bytes>'}")

    if is_pdf(data, filename):
        return _render_pdf_first_page(data, filename, zoom)

    try:
        img = Image.open(BytesIO(data))
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        raise DocumentLoadError(f"Unreadable image {filename or '<bytes>'}: {e}") from e

    if img.mode != 'RGB':
        img = img.convert('RGB')

    return img


def crop_region(
    img: Image.Image,
    coordinates: tuple[int, int, int, int]
) -> Image.Image | None:
    """
    Crop an (x, y, width, height) box, clamped to the image bounds

    Returns:
        Cropped image, or None when the clamped box has no area
    """
    w, h = img.size
    x, y, bw, bh = coordinates

    x0, x1 = sorted((max(0, min(int(x), w)), max(0, min(int(x + bw), w))))
    y0, y1 = sorted((max(0, min(int(y), h)), max(0, min(int(y + bh), h))))

    if x1 - x0 == 0 or y1 - y0 == 0:
        return None

    return img.crop((x0, y0, x1, y1))


def encode_image_for_api(
    img: Image.Image,
    max_dimension: int = 2048,
    quality: int = 85
) -> bytes:
    """
    Encode an image as JPEG, downscaled for API transmission

    Args:
        img: Source image
        max_dimension: Maximum width or height
        quality: JPEG quality (1-100)

    Returns:
        JPEG bytes
    """
    if max(img.size) > max_dimension:
        ratio = max_dimension / max(img.size)
        new_size = (max(1, int(img.width * ratio)), max(1, int(img.height * ratio)))
        img = img.resize(new_size, Image.Resampling.LANCZOS)

    output = BytesIO()
    if img.mode != 'RGB':
        img = img.convert('RGB')
    img.save(output, format='JPEG', quality=quality, optimize=True)

    return output.getvalue()


def _render_pdf_first_page(data: bytes, filename: str, zoom: float) -> Image.Image:
    """Render page 1 of an in-memory PDF"""
    # PyMuPDF's exception types vary between releases
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except Exception as e:
        raise DocumentLoadError(f"Unreadable PDF {filename or '<bytes>'}: {e}") from e

    try:
        if doc.page_count == 0:
            raise DocumentLoadError(f"PDF has no pages: {filename or '<bytes>'}")

        page = doc.load_page(0)
        mat = fitz.Matrix(zoom, zoom)
        pix = page.get_pixmap(matrix=mat, alpha=False)
        img = Image.open(BytesIO(pix.tobytes('png')))
        img.load()
    except DocumentLoadError:
        raise
    except Exception as e:
        raise DocumentLoadError(f"Cannot render PDF {filename or '<bytes>'}: {e}") from e
    finally:
        doc.close()

    return img.convert('RGB')
