from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

TransactionType = Literal["income", "expense"]


class CategoryExplanation(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    confidence: float = Field(ge=0, le=100)
    reasoning: str


class CategorizationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: float | None = None
    category: str
    type: TransactionType
    description: str
    confidence: float = Field(ge=0, le=100) # heuristic score, not a probability
    reasoning: str
