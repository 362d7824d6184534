from __future__ import annotations

import io
import unittest

import fitz
from PIL import Image

from stamp_analysis import DocumentLoadError
from stamp_analysis.utils.image import crop_region, encode_image_for_api, is_pdf, load_document_image


def _image_bytes(size: tuple[int, int], mode: str = "RGB", fmt: str = "PNG") -> bytes:
    buf = io.BytesIO()
    Image.new(mode, size).save(buf, format=fmt)
    return buf.getvalue()


class TestLoadDocumentImage(unittest.TestCase):
    def test_png_loads_as_rgb(self) -> None:
        img = load_document_image(_image_bytes((40, 30), mode="RGBA"), "scan.png")

        self.assertEqual(img.mode, "RGB")
        self.assertEqual(img.size, (40, 30))

    def test_pdf_first_page_is_rendered(self) -> None:
        doc = fitz.open()
        doc.new_page(width=300, height=400)
        doc.new_page(width=100, height=100)
        data = doc.tobytes()
        doc.close()

        self.assertTrue(is_pdf(data))
        img = load_document_image(data, "letter.pdf", zoom=2.0)

        self.assertEqual(img.size, (600, 800))

    def test_garbage_raises(self) -> None:
        with self.assertRaises(DocumentLoadError):
            load_document_image(b"garbage", "scan.png")

        with self.assertRaises(DocumentLoadError):
            load_document_image(b"%PDF-1.7 garbage", "scan.pdf")

        with self.assertRaises(DocumentLoadError):
            load_document_image(b"", "scan.png")


class TestCropRegion(unittest.TestCase):
    def test_crop_is_clamped(self) -> None:
        img = Image.new("RGB", (100, 100))

        self.assertEqual(crop_region(img, (10, 20, 30, 40)).size, (30, 40))
        self.assertEqual(crop_region(img, (90, 90, 50, 50)).size, (10, 10))
        self.assertEqual(crop_region(img, (-10, -10, 30, 30)).size, (20, 20))

    def test_box_outside_image(self) -> None:
        img = Image.new("RGB", (100, 100))

        self.assertIsNone(crop_region(img, (150, 150, 20, 20)))
        self.assertIsNone(crop_region(img, (10, 10, 0, 20)))


class TestEncodeImageForApi(unittest.TestCase):
    def test_large_image_is_downscaled(self) -> None:
        data = encode_image_for_api(Image.new("RGB", (4000, 1000)), max_dimension=2048)
        out = Image.open(io.BytesIO(data))

        self.assertEqual(out.format, "JPEG")
        self.assertEqual(out.size, (2048, 512))

    def test_small_image_keeps_size(self) -> None:
        data = encode_image_for_api(Image.new("L", (20, 10)))
        out = Image.open(io.BytesIO(data))

        self.assertEqual(out.size, (20, 10))
        self.assertEqual(out.mode, "RGB")


if __name__ == "__main__":
    unittest.main()
