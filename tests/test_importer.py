"""
Unit tests: file import and source-format detection
"""
import io
import os
import sys
import unittest

import docx
from PIL import Image

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from philotrans.errors import UnsupportedInputError
from philotrans.exporter import ExportFormat
from philotrans.importer import detect_source_format, import_file


def make_png():
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), color=(120, 53, 15)).save(buffer, format="PNG")
    return buffer.getvalue()


def make_docx(lines):
    document = docx.Document()
    for line in lines:
        document.add_paragraph(line)
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


class TestDetectSourceFormat(unittest.TestCase):

    def test_pdf_media_type(self):
        self.assertEqual(detect_source_format("application/pdf", "book.pdf"), ExportFormat.PDF)

    def test_docx_extension(self):
        self.assertEqual(detect_source_format(None, "Essay.DOCX"), ExportFormat.DOCX)

    def test_everything_else_is_text(self):
        for mime, name in [("text/plain", "a.txt"), ("text/markdown", "a.md"),
                           ("application/json", "a.json"), (None, None), ("image/png", "a.png")]:
            with self.subTest(name=name):
                self.assertEqual(detect_source_format(mime, name), ExportFormat.TEXT)

    def test_renamed_pdf_follows_media_type(self):
        self.assertEqual(detect_source_format("application/pdf", "notes.txt"), ExportFormat.PDF)


class TestImportFile(unittest.TestCase):

    def test_unknown_extension_is_rejected(self):
        with self.assertRaises(UnsupportedInputError):
            import_file("data.xyz", b"whatever", "application/octet-stream")

    def test_unknown_extension_with_image_media_type_is_rejected(self):
        with self.assertRaises(UnsupportedInputError):
            import_file("data.xyz", make_png(), "image/png")

    def test_unknown_extension_with_pdf_media_type_is_rejected(self):
        with self.assertRaises(UnsupportedInputError):
            import_file("data.xyz", b"%PDF-1.4", "application/pdf")

    def test_missing_extension_is_rejected(self):
        with self.assertRaises(UnsupportedInputError):
            import_file("owl", make_png(), "image/png")

    def test_text_file_becomes_source_text(self):
        imported = import_file("quote.txt", "Übermensch önce".encode("utf-8"), "text/plain")
        self.assertEqual(imported.text, "Übermensch önce")
        self.assertIsNone(imported.attachment)
        self.assertEqual(imported.source_format, ExportFormat.TEXT)

    def test_markdown_and_json_are_text(self):
        self.assertEqual(import_file("a.md", b"# Title", "text/markdown").text, "# Title")
        self.assertEqual(import_file("a.json", b'{"k": 1}', "application/json").text, '{"k": 1}')

    def test_non_utf8_text_is_rejected(self):
        with self.assertRaises(UnsupportedInputError):
            import_file("latin.txt", "café".encode("latin-1"), "text/plain")

    def test_docx_text_is_extracted(self):
        imported = import_file("essay.docx", make_docx(["First", "Second"]))
        self.assertEqual(imported.text, "First\nSecond")
        self.assertIsNone(imported.attachment)
        self.assertEqual(imported.source_format, ExportFormat.DOCX)

    def test_broken_docx_is_rejected(self):
        with self.assertRaises(UnsupportedInputError):
            import_file("broken.docx", b"not a zip")

    def test_pdf_becomes_attachment(self):
        imported = import_file("book.pdf", b"%PDF-1.4", "application/pdf")
        self.assertIsNone(imported.text)
        self.assertEqual(imported.attachment.mime_type, "application/pdf")
        self.assertEqual(imported.source_format, ExportFormat.PDF)

    def test_pdf_by_extension_without_media_type(self):
        imported = import_file("book.pdf", b"%PDF-1.4")
        self.assertEqual(imported.attachment.mime_type, "application/pdf")
        self.assertEqual(imported.source_format, ExportFormat.PDF)

    def test_pdf_renamed_to_txt(self):
        imported = import_file("book.txt", b"%PDF-1.4", "application/pdf")
        self.assertIsNotNone(imported.attachment)
        self.assertIsNone(imported.text)
        self.assertEqual(imported.source_format, ExportFormat.PDF)

    def test_image_becomes_attachment(self):
        data = make_png()
        imported = import_file("owl.png", data, "image/png")
        self.assertEqual(imported.attachment.data, data)
        self.assertTrue(imported.attachment.is_image)
        self.assertEqual(imported.source_format, ExportFormat.TEXT)

    def test_image_mime_from_extension(self):
        imported = import_file("owl.png", make_png())
        self.assertEqual(imported.attachment.mime_type, "image/png")

    def test_corrupt_image_is_rejected(self):
        with self.assertRaises(UnsupportedInputError):
            import_file("owl.png", b"definitely not a png", "image/png")


if __name__ == '__main__':
    unittest.main()
