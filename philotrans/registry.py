"""
Prompt/Model Registry
Static lookup of model identifier and system instruction per operating mode
"""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Optional

import sys
sys.path.append(str(Path(__file__).parent.parent))
import config


class Mode(str, Enum):
    FAST_TRANSLATE = "fast-translate"
    DEEP_TRANSLATE = "deep-translate"
    ANALYZE = "analyze"
    GENERATE_IMAGE = "generate-image"
    TERM_LOOKUP = "term-lookup"


class TranslationSpeed(str, Enum):
    FAST = "fast"  # Flash Lite
    DEEP = "deep"  # Pro with thinking

    @property
    def mode(self) -> Mode:
        return Mode.DEEP_TRANSLATE if self is TranslationSpeed.DEEP else Mode.FAST_TRANSLATE


class ImageSize(str, Enum):
    SIZE_1K = "1K"
    SIZE_2K = "2K"
    SIZE_4K = "4K"


@dataclass(frozen=True)
class ModelProfile:
    """Model identifier and optional system instruction for one mode"""
    model: str
    system_instruction: Optional[str] = None


def _load_profiles() -> Dict[Mode, ModelProfile]:
    return {
        Mode.FAST_TRANSLATE: ModelProfile(config.MODEL_TRANSLATION_FAST, config.SYSTEM_TRANSLATOR_PROMPT),
        Mode.DEEP_TRANSLATE: ModelProfile(config.MODEL_TRANSLATION_DEEP, config.SYSTEM_TRANSLATOR_PROMPT),
        Mode.ANALYZE: ModelProfile(config.MODEL_ANALYSIS, config.SYSTEM_ANALYSIS_PROMPT),
        Mode.GENERATE_IMAGE: ModelProfile(config.MODEL_IMAGE_GEN),
        Mode.TERM_LOOKUP: ModelProfile(config.MODEL_TERM_SEARCH),
    }


PROFILES = _load_profiles()


def profile_for(mode: Mode) -> ModelProfile:
    """Resolve the profile for a mode"""
    return PROFILES[Mode(mode)]


def model_table() -> Dict[str, str]:
    """Mode -> model identifier, for status reporting"""
    return {mode.value: profile.model for mode, profile in PROFILES.items()}
