from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from cardgen.modules.cards.models import GenerationConfig


class GenerateCardsRequest(BaseModel):
    content: str = Field(..., min_length=1, description="Source text to turn into cards")
    config: GenerationConfig = Field(default_factory=GenerationConfig)
    provider: Optional[str] = Field(
        default=None, description="Provider name; defaults to MODEL_PROVIDER"
    )


class ConnectionStatus(BaseModel):
    provider: str
    ok: bool


class EstimateCostRequest(BaseModel):
    prompt_tokens: int
    completion_tokens: int


class EstimateCostResponse(BaseModel):
    provider: str
    estimated_cost: float
    currency: str
