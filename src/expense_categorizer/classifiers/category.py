from collections.abc import Mapping
from dataclasses import dataclass, field

from expense_categorizer.rules.keywords import (
    CATEGORY_MATCH_THRESHOLD,
    FALLBACK_CATEGORY_KEYWORDS,
    FALLBACK_CONFIDENCE,
    PRIMARY_CATEGORY_KEYWORDS,
)

KeywordTable = Mapping[str, tuple[str, ...]]


@dataclass(frozen=True)
class CategoryMatch:
    category: str
    confidence: float
    matched_keywords: tuple[str, ...] = field(default_factory=tuple)


def _matched(text: str, keywords: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(keyword for keyword in keywords if keyword.lower() in text)


def classify_category(
    text: str,
    table: KeywordTable = PRIMARY_CATEGORY_KEYWORDS,
    threshold: float = CATEGORY_MATCH_THRESHOLD,
) -> CategoryMatch | None:
    """
    Score ``text`` against every category as the percentage of its keywords
    present. The highest score wins; ties keep the earlier category. Scores
    that do not exceed ``threshold`` are treated as no match.
    """
    lowered = text.lower()
    best: CategoryMatch | None = None

    for category, keywords in table.items():
        if not keywords:
            continue
        hits = _matched(lowered, keywords)
        ratio = len(hits) / len(keywords) * 100
        if best is None or ratio > best.confidence:
            best = CategoryMatch(category, ratio, hits)

    if best is None or best.confidence <= threshold:
        return None
    return best


def classify_fallback_category(
    text: str,
    table: KeywordTable = FALLBACK_CATEGORY_KEYWORDS,
    confidence: float = FALLBACK_CONFIDENCE,
) -> CategoryMatch | None:
    """Return the first category with any keyword present in ``text``."""
    lowered = text.lower()
    for category, keywords in table.items():
        hits = _matched(lowered, keywords)
        if hits:
            return CategoryMatch(category, confidence, hits)
    return None
