"""
File Import Module
Classifies uploaded files into source text or a request attachment
"""
import io
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import docx
from PIL import Image
from rich.console import Console

import sys
sys.path.append(str(Path(__file__).parent.parent))
from config import TEXT_FORMATS, DOCX_FORMATS, PDF_FORMATS, IMAGE_FORMATS
from .errors import UnsupportedInputError
from .exporter import ExportFormat
from .request_builder import Attachment

console = Console()

PDF_MIME_TYPE = "application/pdf"

SUPPORTED_SUFFIXES = TEXT_FORMATS | DOCX_FORMATS | PDF_FORMATS | IMAGE_FORMATS

IMAGE_MIME_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
}


@dataclass(frozen=True)
class ImportedFile:
    """Result of importing one user-selected file"""
    filename: str
    source_format: ExportFormat
    text: Optional[str] = None
    attachment: Optional[Attachment] = None


def detect_source_format(mime_type: Optional[str], filename: Optional[str]) -> ExportFormat:
    """
    Best-effort classification of the original document type

    The media type wins over the extension, so a PDF renamed to ``.txt`` is
    still exported as a paginated document.
    """
    if (mime_type or "").lower() == PDF_MIME_TYPE:
        return ExportFormat.PDF
    if Path(filename or "").suffix.lower() in DOCX_FORMATS:
        return ExportFormat.DOCX
    return ExportFormat.TEXT


def validate_image(data: bytes, filename: str) -> bool:
    """Validate that bytes hold a readable image"""
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.verify()
        return True
    except Exception as e:
        console.print(f"[yellow]⚠️ Invalid image: {filename} - {e}[/yellow]")
        return False


def extract_docx_text(data: bytes) -> str:
    """Plain text of a Word document, one line per paragraph"""
    document = docx.Document(io.BytesIO(data))
    return "\n".join(paragraph.text for paragraph in document.paragraphs)


def import_file(filename: str, data: bytes, mime_type: Optional[str] = None) -> ImportedFile:
    """
    Import one uploaded file

    Raises:
        UnsupportedInputError: unknown type, or content that cannot be read
    """
    suffix = Path(filename or "").suffix.lower()
    mime_type = (mime_type or "").lower()
    source_format = detect_source_format(mime_type, filename)

    # The suffix must be known; the media type only refines a known suffix
    if suffix not in SUPPORTED_SUFFIXES:
        console.print(f"[red]❌ Unsupported file type: {filename}[/red]")
        raise UnsupportedInputError(f"Unsupported file type: {suffix or filename}")

    if mime_type == PDF_MIME_TYPE or suffix in PDF_FORMATS:
        console.print(f"[cyan]📄 PDF attachment: {filename}[/cyan]")
        return ImportedFile(
            filename=filename,
            source_format=ExportFormat.PDF,
            attachment=Attachment(data=data, mime_type=PDF_MIME_TYPE),
        )

    if suffix in IMAGE_FORMATS or mime_type.startswith("image/"):
        if not validate_image(data, filename):
            raise UnsupportedInputError(f"Not a valid image: {filename}")
        image_mime = mime_type if mime_type.startswith("image/") else IMAGE_MIME_TYPES.get(suffix, "image/jpeg")
        return ImportedFile(
            filename=filename,
            source_format=source_format,
            attachment=Attachment(data=data, mime_type=image_mime),
        )

    if suffix in DOCX_FORMATS:
        try:
            text = extract_docx_text(data)
        except Exception as e:
            console.print(f"[yellow]⚠️ Unreadable document: {filename} - {e}[/yellow]")
            raise UnsupportedInputError(f"Could not read document: {filename}") from e
        return ImportedFile(filename=filename, source_format=source_format, text=text)

    if suffix in TEXT_FORMATS:
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise UnsupportedInputError(f"Text file is not UTF-8: {filename}") from e
        return ImportedFile(filename=filename, source_format=source_format, text=text)

    console.print(f"[red]❌ Unsupported file type: {filename}[/red]")
    raise UnsupportedInputError(f"Unsupported file type: {suffix or filename}")
