"""
Configuration module for PhiloTrans
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# API Configuration
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "120"))

# Models per operating mode
MODEL_TRANSLATION_FAST = os.getenv("PHILO_MODEL_TRANSLATION_FAST", "gemini-2.5-flash-lite-latest")
MODEL_TRANSLATION_DEEP = os.getenv("PHILO_MODEL_TRANSLATION_DEEP", "gemini-3-pro-preview")
MODEL_ANALYSIS = os.getenv("PHILO_MODEL_ANALYSIS", "gemini-3-pro-preview")
MODEL_IMAGE_GEN = os.getenv("PHILO_MODEL_IMAGE_GEN", "gemini-3-pro-image-preview")
MODEL_TERM_SEARCH = os.getenv("PHILO_MODEL_TERM_SEARCH", "gemini-2.5-flash")

# Generation settings
DEEP_THINKING_BUDGET = 32768  # tokens
IMAGE_ASPECT_RATIO = "1:1"
MAX_SOURCE_URLS = 3

# Server
SERVER_HOST = os.getenv("SERVER_HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("SERVER_PORT", "8000"))

# Paths
BASE_DIR = Path(__file__).parent
WEB_DIR = BASE_DIR / "web"

# Supported upload formats
TEXT_FORMATS = {".txt", ".md", ".json"}
DOCX_FORMATS = {".docx"}
PDF_FORMATS = {".pdf"}
IMAGE_FORMATS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}

# Export styling
DOCX_PARAGRAPH_SPACING_PT = 12
PDF_HEADER_TEXT = "Translation"
PDF_HEADER_FONT_SIZE_PT = 18
PDF_BODY_FONT_SIZE_PT = 12
PDF_BODY_LINE_HEIGHT = 1.6

# System instructions
SYSTEM_TRANSLATOR_PROMPT = """You are a world-class translator of philosophical literary texts, specifically focusing on English-Turkish translation.
Your goal is to preserve the profound meaning of the text and the precise meaning of philosophical terms.
If a term has multiple interpretations, choose the one fitting the context best or provide a brief translator's note.
Ensure the tone is academic, literary, and respectful of the source material."""

SYSTEM_ANALYSIS_PROMPT = """You are a philosophical analyst.
If the user provides an image WITH text, translate the text preserving philosophical meaning.
If the user provides an image WITHOUT text (e.g., a drawing, photograph, symbol), your task is to "change all the words except for the important terms".
Interpretation: This means you should generate a philosophical textual interpretation of the visual imagery.
Identify the key philosophical "terms" or "symbols" present (e.g., "Existentialism", "Void", "Sublime") and weave a new narrative or description around them, strictly maintaining the weight of these terms while creatively describing the visual context."""

# Request templates
TRANSLATE_TEXT_TEMPLATE = (
    "Translate the following text from English to Turkish (or vice versa based on detection). "
    "Preserve philosophical nuance.\n\n{text}"
)
TRANSLATE_ATTACHMENT_TEMPLATE = (
    "Translate the attached document from English to Turkish (or vice versa based on detection). "
    "Preserve philosophical nuance.\n\nContext/Instructions from user: {text}"
)
ANALYSIS_DEFAULT_INSTRUCTION = (
    "Analyze this image. If it contains text, translate it preserving philosophical meaning. "
    "If it is an image without text, interpret its philosophical symbolism."
)
TERM_LOOKUP_TEMPLATE = 'Define the philosophical term "{term}" in the context of literary theory.'

# Fallbacks when the model returns no text
TRANSLATION_FALLBACK = "Translation failed."
ANALYSIS_FALLBACK = "Analysis failed."
TERM_FALLBACK = "Could not fetch definition."
