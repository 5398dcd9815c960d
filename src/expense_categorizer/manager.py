from expense_categorizer.classifiers.amount import extract_amount, format_amount, strip_amounts
from expense_categorizer.classifiers.category import (
    CategoryMatch,
    KeywordTable,
    classify_category,
    classify_fallback_category,
)
from expense_categorizer.classifiers.direction import DirectionMatch, classify_direction
from expense_categorizer.errors import InvalidInputError
from expense_categorizer.logger import get_logger
from expense_categorizer.models import CategorizationResult, CategoryExplanation
from expense_categorizer.rules.keywords import (
    CONFIDENCE_CEILING,
    DEFAULT_CATEGORY,
    DEFAULT_CONFIDENCE,
    FALLBACK_CATEGORY_KEYWORDS,
    PRIMARY_CATEGORY_KEYWORDS,
)

logger = get_logger(__name__)


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


class CategorizerService:
    def __init__(self,
                 primary_table: KeywordTable = PRIMARY_CATEGORY_KEYWORDS,
                 fallback_table: KeywordTable = FALLBACK_CATEGORY_KEYWORDS):
        self.primary_table = primary_table
        self.fallback_table = fallback_table

    def categorize(self, raw_input: str | None) -> CategorizationResult:
        """
        Infer amount, direction, category and a cleaned description from
        free text such as "Bought groceries at Walmart $45.67".
        """
        text = self._require_text(raw_input)

        amount = extract_amount(text)
        cleaned = strip_amounts(text) or text
        direction = classify_direction(cleaned)
        explanation = self._explain_cleaned(cleaned, direction)

        if cleaned:
            description = cleaned
        elif amount is not None:
            description = f"{direction.direction} of ${format_amount(amount)}"
        else:
            description = text
        description = _capitalize_first(description)

        logger.debug(
            "[CATEGORIZE] '%s' -> %s/%s (confidence: %.1f, amount: %s)",
            text[:50],
            explanation.category,
            direction.direction,
            explanation.confidence,
            amount,
        )

        return CategorizationResult(
            amount=amount,
            category=explanation.category,
            type=direction.direction,
            description=description,
            confidence=explanation.confidence,
            reasoning=explanation.reasoning,
        )

    def explain(self, raw_input: str | None) -> CategoryExplanation:
        """Category, confidence and reasoning only, without amount or description."""
        text = self._require_text(raw_input)
        cleaned = strip_amounts(text) or text
        return self._explain_cleaned(cleaned, classify_direction(cleaned))

    def _explain_cleaned(self, cleaned: str, direction: DirectionMatch) -> CategoryExplanation:
        match = classify_category(cleaned, table=self.primary_table)
        if match:
            logger.debug(
                "[CATEGORIZE] Primary match '%s' on %s",
                match.category,
                ", ".join(match.matched_keywords),
            )
            return CategoryExplanation(
                category=match.category,
                confidence=min(match.confidence + direction.confidence / 2, CONFIDENCE_CEILING),
                reasoning=(
                    f"Matched keywords for {match.category} "
                    f"with {match.confidence:.1f}% keyword confidence"
                ),
            )

        fallback = classify_fallback_category(cleaned, table=self.fallback_table)
        if fallback:
            return self._fallback_explanation(fallback)

        return CategoryExplanation(
            category=DEFAULT_CATEGORY,
            confidence=DEFAULT_CONFIDENCE,
            reasoning="Defaulted to miscellaneous category",
        )

    @staticmethod
    def _fallback_explanation(match: CategoryMatch) -> CategoryExplanation:
        logger.debug("[CATEGORIZE] Fallback match '%s'", match.category)
        return CategoryExplanation(
            category=match.category,
            confidence=match.confidence,
            reasoning=f"Matched fallback patterns for {match.category}",
        )

    @staticmethod
    def _require_text(raw_input: str | None) -> str:
        if raw_input is None or not raw_input.strip():
            raise InvalidInputError()
        return raw_input


# The service holds only read-only tables, so one instance is shared.
_default_service = CategorizerService()


def categorize(raw_input: str | None) -> CategorizationResult:
    return _default_service.categorize(raw_input)


def explain_category(raw_input: str | None) -> CategoryExplanation:
    return _default_service.explain(raw_input)
