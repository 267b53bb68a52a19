"""Pydantic models for AI card generation.

Cards and their metadata are frozen once built; the generation config is
frozen for the duration of one call. Draft objects coming out of the model
reply stay plain dicts until they are mapped into ``GeneratedCard``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class CardType(str, Enum):
    QA = "qa"
    CHOICE = "choice"
    CLOZE = "cloze"


class ProgressStatus(str, Enum):
    PREPARING = "preparing"
    GENERATING = "generating"
    PARSING = "parsing"
    COMPLETED = "completed"
    FAILED = "failed"


class GenerationConfig(BaseModel):
    """Caller settings for one generation call."""

    model_config = ConfigDict(frozen=True)

    card_count: int = Field(default=5, ge=1)
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    max_tokens: int = Field(default=2000, ge=1)
    # Preset name or custom text with a "{content}" placeholder
    prompt_template: Optional[str] = None
    card_types: list[CardType] = Field(default_factory=lambda: [CardType.QA])


class GenerationProgress(BaseModel):
    status: ProgressStatus
    progress: float = Field(ge=0.0, le=100.0)
    message: str


class CardMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    generated_at: str  # ISO-8601 timestamp
    provider: str
    model: str
    temperature: float


class GeneratedCard(BaseModel):
    """A normalized flashcard produced from one model draft."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: str = CardType.QA.value
    front: str
    back: str
    # Passed through from the draft as-is (usually a list of options)
    choices: Any = None
    correct_answer: Any = None
    cloze_text: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    explanation: Optional[str] = None
    metadata: CardMetadata


class TokenUsage(BaseModel):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int
    estimated_cost: float


class AIServiceResponse(BaseModel):
    """Tagged result of one generation call."""

    success: bool
    cards: list[GeneratedCard] = Field(default_factory=list)
    error: Optional[str] = None
    usage: Optional[TokenUsage] = None
