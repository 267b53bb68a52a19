from .cards import (
    AIServiceResponse,
    CardMetadata,
    CardType,
    GeneratedCard,
    GenerationConfig,
    GenerationProgress,
    ProgressStatus,
    TokenUsage,
)

__all__ = [
    "AIServiceResponse",
    "CardMetadata",
    "CardType",
    "GeneratedCard",
    "GenerationConfig",
    "GenerationProgress",
    "ProgressStatus",
    "TokenUsage",
]
