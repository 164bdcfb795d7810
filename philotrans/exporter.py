"""
Export Formatter Module
Converts final text into a downloadable .txt, .docx or .pdf file
"""
import html
import io
import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

import docx
from docx.shared import Pt
from rich.console import Console

import sys
sys.path.append(str(Path(__file__).parent.parent))
from config import (
    DOCX_PARAGRAPH_SPACING_PT,
    PDF_HEADER_TEXT,
    PDF_HEADER_FONT_SIZE_PT,
    PDF_BODY_FONT_SIZE_PT,
    PDF_BODY_LINE_HEIGHT,
)

console = Console()


class ExportFormat(str, Enum):
    TEXT = "text"
    DOCX = "docx"
    PDF = "pdf"

    @property
    def extension(self) -> str:
        return {"text": ".txt", "docx": ".docx", "pdf": ".pdf"}[self.value]

    @property
    def media_type(self) -> str:
        return {
            "text": "text/plain; charset=utf-8",
            "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            "pdf": "application/pdf",
        }[self.value]


class ExportKind(str, Enum):
    """Filename prefix for exported results"""
    TRANSLATION = "translation"
    ANALYSIS = "analysis"


@dataclass(frozen=True)
class ExportedFile:
    content: bytes
    filename: str
    media_type: str


def weasyprint_renderer(html_document: str) -> bytes:
    """Render an HTML document to PDF bytes"""
    from weasyprint import HTML

    pdf_buffer = io.BytesIO()
    HTML(string=html_document).write_pdf(pdf_buffer)
    return pdf_buffer.getvalue()


def build_pdf_html(text: str) -> str:
    """Single styled body block under a fixed header"""
    return f'''<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <style>
        @page {{
            size: A4;
            margin: 2.5cm 2cm;
        }}
        h1 {{
            font-family: Georgia, serif;
            font-size: {PDF_HEADER_FONT_SIZE_PT}pt;
            font-weight: bold;
            margin: 0 0 16pt 0;
        }}
        .body {{
            font-family: Georgia, serif;
            font-size: {PDF_BODY_FONT_SIZE_PT}pt;
            line-height: {PDF_BODY_LINE_HEIGHT};
            white-space: pre-wrap;
        }}
    </style>
</head>
<body>
    <h1>{html.escape(PDF_HEADER_TEXT)}</h1>
    <div class="body">{html.escape(text)}</div>
</body>
</html>
'''


class ExportFormatter:
    """Builds export files; PDF rendering and DOCX creation are injectable"""

    def __init__(
        self,
        pdf_renderer: Optional[Callable[[str], bytes]] = None,
        docx_factory: Optional[Callable[[], "docx.document.Document"]] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.pdf_renderer = pdf_renderer or weasyprint_renderer
        self.docx_factory = docx_factory or docx.Document
        self.clock = clock or time.time

    def filename(self, export_format: ExportFormat, kind: ExportKind = ExportKind.TRANSLATION) -> str:
        timestamp = int(self.clock() * 1000)
        return f"{ExportKind(kind).value}-{timestamp}{export_format.extension}"

    def to_text(self, text: str) -> bytes:
        return text.encode("utf-8")

    def to_docx(self, text: str) -> bytes:
        document = self.docx_factory()
        for line in text.splitlines():
            paragraph = document.add_paragraph(line)
            paragraph.paragraph_format.space_after = Pt(DOCX_PARAGRAPH_SPACING_PT)
        buffer = io.BytesIO()
        document.save(buffer)
        return buffer.getvalue()

    def to_pdf(self, text: str) -> bytes:
        return self.pdf_renderer(build_pdf_html(text))

    def format(
        self,
        text: str,
        source_format: ExportFormat = ExportFormat.TEXT,
        kind: ExportKind = ExportKind.TRANSLATION,
    ) -> ExportedFile:
        """
        Produce downloadable content for the detected source format

        Args:
            text: Final result text
            source_format: Format detected from the original input
            kind: Filename prefix, one of ExportKind

        Returns:
            ExportedFile with bytes, filename and media type
        """
        export_format = ExportFormat(source_format)
        kind = ExportKind(kind)
        builders = {
            ExportFormat.TEXT: self.to_text,
            ExportFormat.DOCX: self.to_docx,
            ExportFormat.PDF: self.to_pdf,
        }
        content = builders[export_format](text)
        filename = self.filename(export_format, kind)
        console.print(f"[green]📥 Exported {filename} ({len(content)} bytes)[/green]")
        return ExportedFile(content=content, filename=filename, media_type=export_format.media_type)
