"""
Response Interpreter Module
Extracts text, grounded definitions and generated images from Gemini replies
"""
import base64
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Optional

import sys
sys.path.append(str(Path(__file__).parent.parent))
from config import MAX_SOURCE_URLS
from .errors import NoImageProducedError


@dataclass(frozen=True)
class TermDefinition:
    definition: str
    urls: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class GeneratedImage:
    data: bytes
    mime_type: str = "image/png"

    @property
    def data_url(self) -> str:
        """In-memory displayable handle for the image"""
        encoded = base64.b64encode(self.data).decode("utf-8")
        return f"data:{self.mime_type};base64,{encoded}"

    def download_filename(self) -> str:
        return f"philosophical-viz-{int(time.time() * 1000)}.png"


def _first_candidate(response: Any) -> Optional[Any]:
    candidates = getattr(response, "candidates", None) or []
    return candidates[0] if candidates else None


def extract_text(response: Any, fallback: str) -> str:
    """Primary text of the reply, or the fallback string when it is empty"""
    text = getattr(response, "text", None)
    return text if text else fallback


def _grounding_uris(response: Any) -> Iterable[Optional[str]]:
    candidate = _first_candidate(response)
    metadata = getattr(candidate, "grounding_metadata", None)
    for chunk in getattr(metadata, "grounding_chunks", None) or []:
        web = getattr(chunk, "web", None)
        yield getattr(web, "uri", None)


def extract_source_urls(response: Any, limit: int = MAX_SOURCE_URLS) -> List[str]:
    """
    Web source URLs from grounding metadata

    Entries without a URI are dropped, duplicates are removed by literal match
    keeping encounter order, and the result is capped at ``limit``.
    """
    urls: List[str] = []
    for uri in _grounding_uris(response):
        if not uri or uri in urls:
            continue
        urls.append(uri)
        if len(urls) >= limit:
            break
    return urls


def interpret_term(response: Any) -> TermDefinition:
    return TermDefinition(
        definition=getattr(response, "text", None) or "",
        urls=extract_source_urls(response),
    )


def interpret_image(response: Any) -> GeneratedImage:
    """
    First inline image in the reply's content parts

    Raises:
        NoImageProducedError: when no part carries inline data
    """
    candidate = _first_candidate(response)
    content = getattr(candidate, "content", None)
    for part in getattr(content, "parts", None) or []:
        inline = getattr(part, "inline_data", None)
        if inline is not None and getattr(inline, "data", None):
            return GeneratedImage(
                data=inline.data,
                mime_type=getattr(inline, "mime_type", None) or "image/png",
            )
    raise NoImageProducedError("No image generated.")
