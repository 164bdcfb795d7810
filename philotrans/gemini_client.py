"""
Gemini Client Module
Handles communication with Gemini API for translation, analysis and imagery
"""
import asyncio
import time
from pathlib import Path
from typing import Any, Optional

from google import genai
from rich.console import Console

import sys
sys.path.append(str(Path(__file__).parent.parent))
from config import (
    GEMINI_API_KEY,
    REQUEST_TIMEOUT,
    TRANSLATION_FALLBACK,
    ANALYSIS_FALLBACK,
    TERM_FALLBACK,
)
from .errors import UpstreamError
from .registry import ImageSize, Mode, TranslationSpeed
from .request_builder import Attachment, ModelRequest, build_request
from .response_interpreter import (
    GeneratedImage,
    TermDefinition,
    extract_text,
    interpret_image,
    interpret_term,
)

console = Console()


class GeminiClient:
    """Client for Gemini API: one request, one reply, no retries"""

    def __init__(self, api_key: Optional[str] = None, client: Optional[Any] = None):
        self.api_key = api_key or GEMINI_API_KEY
        if client is None and not self.api_key:
            raise ValueError(
                "Gemini API key not found! "
                "Set GEMINI_API_KEY in .env file or pass it directly."
            )

        self.client = client or genai.Client(api_key=self.api_key)
        self.timeout = REQUEST_TIMEOUT
        self._request_count = 0
        self._total_time = 0.0

    async def invoke(self, request: ModelRequest) -> Any:
        """
        Send a built request to the model

        Raises:
            UpstreamError: on timeout or any SDK failure
        """
        start_time = time.time()
        try:
            response = await asyncio.wait_for(
                asyncio.to_thread(
                    self.client.models.generate_content,
                    model=request.model,
                    contents=request.contents,
                    config=request.config,
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            console.print(f"[yellow]⏱️ Timeout after {self.timeout}s ({request.mode.value})[/yellow]")
            raise UpstreamError(f"Request timed out after {self.timeout}s", e) from e
        except Exception as e:
            console.print(f"[red]❌ {request.mode.value} error: {e}[/red]")
            raise UpstreamError(str(e), e) from e

        time_taken = time.time() - start_time
        self._request_count += 1
        self._total_time += time_taken
        console.print(f"[dim]{request.mode.value} via {request.model} ({time_taken:.1f}s)[/dim]")
        return response

    async def translate(
        self,
        text: str,
        attachment: Optional[Attachment] = None,
        speed: TranslationSpeed = TranslationSpeed.DEEP,
    ) -> str:
        request = build_request(TranslationSpeed(speed).mode, text, attachment)
        response = await self.invoke(request)
        return extract_text(response, TRANSLATION_FALLBACK)

    async def define_term(self, term: str) -> TermDefinition:
        """Grounded definition; upstream failures degrade to a fallback"""
        request = build_request(Mode.TERM_LOOKUP, term)
        try:
            response = await self.invoke(request)
        except UpstreamError:
            return TermDefinition(definition=TERM_FALLBACK, urls=[])
        return interpret_term(response)

    async def analyze_image(self, attachment: Attachment, prompt: Optional[str] = None) -> str:
        request = build_request(Mode.ANALYZE, prompt or "", attachment)
        response = await self.invoke(request)
        return extract_text(response, ANALYSIS_FALLBACK)

    async def generate_image(self, prompt: str, size: ImageSize = ImageSize.SIZE_1K) -> GeneratedImage:
        request = build_request(Mode.GENERATE_IMAGE, prompt, image_size=ImageSize(size))
        response = await self.invoke(request)
        return interpret_image(response)

    def get_stats(self) -> dict:
        """Get client statistics"""
        return {
            "total_requests": self._request_count,
            "total_time": self._total_time,
            "avg_time": self._total_time / max(1, self._request_count),
        }


if __name__ == "__main__":
    async def test():
        client = GeminiClient()
        print(client.get_stats())
        print(await client.translate("Dasein is always already in the world.", speed=TranslationSpeed.FAST))

    asyncio.run(test())
