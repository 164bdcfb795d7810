"""
PhiloTrans - Source Package
"""
from .registry import Mode, TranslationSpeed, ImageSize, profile_for
from .request_builder import Attachment, ModelRequest, build_request
from .response_interpreter import GeneratedImage, TermDefinition
from .exporter import ExportFormat, ExportFormatter, ExportedFile
from .importer import ImportedFile, detect_source_format, import_file
from .gemini_client import GeminiClient

__all__ = [
    "Mode",
    "TranslationSpeed",
    "ImageSize",
    "profile_for",
    "Attachment",
    "ModelRequest",
    "build_request",
    "GeneratedImage",
    "TermDefinition",
    "ExportFormat",
    "ExportFormatter",
    "ExportedFile",
    "ImportedFile",
    "detect_source_format",
    "import_file",
    "GeminiClient",
]
