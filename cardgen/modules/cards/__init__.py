"""Card generation models and helpers."""

from .models import (
    AIServiceResponse,
    CardType,
    GeneratedCard,
    GenerationConfig,
    GenerationProgress,
    ProgressStatus,
)
from .parser import ResponseParseError, ensure_string, generate_card_id, parse_response
from .prompts import PromptPair, build_prompts

__all__ = [
    "AIServiceResponse",
    "CardType",
    "GeneratedCard",
    "GenerationConfig",
    "GenerationProgress",
    "ProgressStatus",
    "PromptPair",
    "ResponseParseError",
    "build_prompts",
    "ensure_string",
    "generate_card_id",
    "parse_response",
]
