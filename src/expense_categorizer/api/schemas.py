from pydantic import BaseModel

from expense_categorizer.models import CategorizationResult, CategoryExplanation, TransactionType


class TextRequest(BaseModel):
    text: str


class CategorizeResponse(BaseModel):
    result: CategorizationResult
    confident: bool
    suggestions: list[str]


class ExplainResponse(BaseModel):
    explanation: CategoryExplanation
    confident: bool


class SuggestionsResponse(BaseModel):
    suggestions: list[str]


class CategoryEntry(BaseModel):
    name: str
    type: TransactionType
    icon: str
    color: str
    chart_color: str
