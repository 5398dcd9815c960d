import asyncio
from time import perf_counter

from expense_categorizer.core import settings
from expense_categorizer.logger import get_logger
from expense_categorizer.manager import CategorizerService
from expense_categorizer.models import CategorizationResult, CategoryExplanation
from expense_categorizer.suggestions import generate_suggestions

logger = get_logger(__name__)


class CategorizationPipeline:
    def __init__(
        self,
        service: CategorizerService,
        confident_threshold: float | None = None,
    ) -> None:
        self.service = service
        self.confident_threshold = confident_threshold

    def threshold(self) -> float:
        if self.confident_threshold is not None:
            return self.confident_threshold
        return settings.get_confident_threshold()

    def is_confident(self, result: CategorizationResult | CategoryExplanation) -> bool:
        return result.confidence > self.threshold()

    async def predict(self, text: str) -> CategorizationResult:
        started = perf_counter()
        result = await asyncio.to_thread(self.service.categorize, text)
        logger.info(
            "[CATEGORIZE] '%s' -> '%s' (%s, confidence: %.1f) in %.1f ms",
            text[:50],
            result.category,
            result.type,
            result.confidence,
            (perf_counter() - started) * 1000,
        )
        if not self.is_confident(result):
            logger.info("[CATEGORIZE] Low confidence: %s", result.reasoning)
        return result

    async def explain(self, text: str) -> CategoryExplanation:
        return await asyncio.to_thread(self.service.explain, text)

    def suggest(self, text: str | None) -> list[str]:
        return generate_suggestions(text)
