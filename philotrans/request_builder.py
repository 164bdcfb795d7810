"""
Request Builder Module
Shapes user input into a Gemini request for each operating mode
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from google.genai import types

import sys
sys.path.append(str(Path(__file__).parent.parent))
from config import (
    DEEP_THINKING_BUDGET,
    IMAGE_ASPECT_RATIO,
    TRANSLATE_TEXT_TEMPLATE,
    TRANSLATE_ATTACHMENT_TEMPLATE,
    ANALYSIS_DEFAULT_INSTRUCTION,
    TERM_LOOKUP_TEMPLATE,
)
from .errors import InputRejectedError
from .registry import ImageSize, Mode, profile_for


@dataclass(frozen=True)
class Attachment:
    """Single binary payload (image or PDF) carried by a request"""
    data: bytes
    mime_type: str

    @property
    def is_image(self) -> bool:
        return self.mime_type.startswith("image/")

    def to_part(self) -> types.Part:
        return types.Part.from_bytes(data=self.data, mime_type=self.mime_type)


@dataclass(frozen=True)
class ModelRequest:
    """Fully specified outbound request"""
    mode: Mode
    model: str
    contents: List[Union[str, types.Part]]
    config: types.GenerateContentConfig = field(default_factory=types.GenerateContentConfig)


def _require_input(text: str, attachment: Optional[Attachment]) -> None:
    if not (text or "").strip() and attachment is None:
        raise InputRejectedError("Nothing to send: provide text or an attachment")


def _build_translation(
    mode: Mode,
    text: str,
    attachment: Optional[Attachment],
    image_size: ImageSize,
) -> ModelRequest:
    profile = profile_for(mode)
    thinking_config = None
    if mode is Mode.DEEP_TRANSLATE:
        # Extended reasoning for philosophical nuance
        thinking_config = types.ThinkingConfig(thinking_budget=DEEP_THINKING_BUDGET)
    config = types.GenerateContentConfig(
        system_instruction=profile.system_instruction,
        thinking_config=thinking_config,
    )

    if attachment is not None:
        contents = [attachment.to_part(), TRANSLATE_ATTACHMENT_TEMPLATE.format(text=text or "")]
    else:
        contents = [TRANSLATE_TEXT_TEMPLATE.format(text=text)]

    return ModelRequest(mode=mode, model=profile.model, contents=contents, config=config)


def _build_analysis(
    mode: Mode,
    text: str,
    attachment: Optional[Attachment],
    image_size: ImageSize,
) -> ModelRequest:
    if attachment is None or not attachment.is_image:
        raise InputRejectedError("Analysis requires exactly one image attachment")

    profile = profile_for(mode)
    instruction = (text or "").strip() or ANALYSIS_DEFAULT_INSTRUCTION
    return ModelRequest(
        mode=mode,
        model=profile.model,
        contents=[attachment.to_part(), instruction],
        config=types.GenerateContentConfig(system_instruction=profile.system_instruction),
    )


def _build_image_generation(
    mode: Mode,
    text: str,
    attachment: Optional[Attachment],
    image_size: ImageSize,
) -> ModelRequest:
    prompt = (text or "").strip()
    if not prompt:
        raise InputRejectedError("Image generation requires a prompt")

    config = types.GenerateContentConfig(
        image_config=types.ImageConfig(
            image_size=ImageSize(image_size).value,
            aspect_ratio=IMAGE_ASPECT_RATIO,
        )
    )
    return ModelRequest(mode=mode, model=profile_for(mode).model, contents=[prompt], config=config)


def _build_term_lookup(
    mode: Mode,
    text: str,
    attachment: Optional[Attachment],
    image_size: ImageSize,
) -> ModelRequest:
    term = (text or "").strip()
    if not term:
        raise InputRejectedError("Term lookup requires a term")

    config = types.GenerateContentConfig(
        tools=[types.Tool(google_search=types.GoogleSearch())],
    )
    return ModelRequest(
        mode=mode,
        model=profile_for(mode).model,
        contents=[TERM_LOOKUP_TEMPLATE.format(term=term)],
        config=config,
    )


_BUILDERS: Dict[Mode, Callable[..., ModelRequest]] = {
    Mode.FAST_TRANSLATE: _build_translation,
    Mode.DEEP_TRANSLATE: _build_translation,
    Mode.ANALYZE: _build_analysis,
    Mode.GENERATE_IMAGE: _build_image_generation,
    Mode.TERM_LOOKUP: _build_term_lookup,
}

_missing = set(Mode) - set(_BUILDERS)
if _missing:
    raise RuntimeError(f"No request builder for modes: {sorted(m.value for m in _missing)}")


def build_request(
    mode: Mode,
    text: str = "",
    attachment: Optional[Attachment] = None,
    image_size: ImageSize = ImageSize.SIZE_1K,
) -> ModelRequest:
    """
    Build the outbound request for a mode

    Raises:
        InputRejectedError: when there is no text and no attachment, or the
            mode's own input requirement is not met
    """
    mode = Mode(mode)
    _require_input(text, attachment)
    return _BUILDERS[mode](mode, text, attachment, image_size)
