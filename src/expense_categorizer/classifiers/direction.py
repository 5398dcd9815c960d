from dataclasses import dataclass

from expense_categorizer.models import TransactionType
from expense_categorizer.rules.keywords import (
    DEFAULT_DIRECTION_CONFIDENCE,
    EXPENSE_INDICATORS,
    INCOME_INDICATORS,
)


@dataclass(frozen=True)
class DirectionMatch:
    direction: TransactionType
    confidence: float
    income_hits: int = 0
    expense_hits: int = 0


def _count_hits(text: str, vocabulary: tuple[str, ...]) -> int:
    return sum(1 for phrase in vocabulary if phrase in text)


def classify_direction(
    text: str,
    income_indicators: tuple[str, ...] = INCOME_INDICATORS,
    expense_indicators: tuple[str, ...] = EXPENSE_INDICATORS,
) -> DirectionMatch:
    """
    Decide whether ``text`` describes income or an expense.

    Each indicator phrase counts once however often it occurs. Equal counts
    resolve to expense, and text with no indicators at all defaults to
    expense with a fixed confidence.
    """
    lowered = text.lower()
    income_hits = _count_hits(lowered, income_indicators)
    expense_hits = _count_hits(lowered, expense_indicators)
    total = income_hits + expense_hits

    if income_hits > expense_hits:
        return DirectionMatch("income", income_hits / total * 100, income_hits, expense_hits)

    if expense_hits > 0:
        confidence = expense_hits / total * 100
    else:
        confidence = DEFAULT_DIRECTION_CONFIDENCE
    return DirectionMatch("expense", confidence, income_hits, expense_hits)
