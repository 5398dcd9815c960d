from expense_categorizer.logger import get_logger
from expense_categorizer.rules.keywords import MAX_SUGGESTIONS

logger = get_logger(__name__)

# (triggers, examples) checked in order; every matching topic contributes.
SUGGESTION_TOPICS: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("grocery", "food"), (
        "Bought groceries $50",
        "Lunch at restaurant $25",
        "Food delivery $18",
    )),
    (("gas", "fuel"), (
        "Gas for car $45",
        "Fuel expense $38",
    )),
    (("coffee", "starbucks"), (
        "Coffee at Starbucks $6",
        "Morning coffee $4.50",
    )),
    (("salary", "paycheck"), (
        "Monthly salary $5000",
        "Bi-weekly paycheck $2500",
    )),
    (("freelance",), (
        "Freelance project payment $1200",
        "Consulting fee $800",
    )),
)


def generate_suggestions(text: str | None, limit: int = MAX_SUGGESTIONS) -> list[str]:
    """Example entries for the topics mentioned in ``text``, at most ``limit``."""
    if not text:
        return []

    lowered = text.lower()
    suggestions: list[str] = []
    for triggers, examples in SUGGESTION_TOPICS:
        if any(trigger in lowered for trigger in triggers):
            suggestions.extend(examples)

    logger.debug("[SUGGEST] %d suggestion(s) for '%s'", len(suggestions), text[:50])
    return suggestions[:limit]
