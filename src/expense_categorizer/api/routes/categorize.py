from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from expense_categorizer.api.dependencies import get_pipeline
from expense_categorizer.api.schemas import (
    CategorizeResponse,
    ExplainResponse,
    SuggestionsResponse,
    TextRequest,
)
from expense_categorizer.errors import InvalidInputError
from expense_categorizer.services.categorization import CategorizationPipeline

router = APIRouter(prefix="/api")


@router.post("/categorize", response_model=CategorizeResponse)
async def categorize_text(
    req: TextRequest,
    pipeline: Annotated[CategorizationPipeline, Depends(get_pipeline)],
) -> CategorizeResponse:
    try:
        result = await pipeline.predict(req.text)
    except InvalidInputError as exc:
        raise HTTPException(status_code=422, detail=exc.message) from exc

    return CategorizeResponse(
        result=result,
        confident=pipeline.is_confident(result),
        suggestions=pipeline.suggest(req.text),
    )


@router.post("/categorize/explain", response_model=ExplainResponse)
async def explain_text(
    req: TextRequest,
    pipeline: Annotated[CategorizationPipeline, Depends(get_pipeline)],
) -> ExplainResponse:
    try:
        explanation = await pipeline.explain(req.text)
    except InvalidInputError as exc:
        raise HTTPException(status_code=422, detail=exc.message) from exc

    return ExplainResponse(explanation=explanation, confident=pipeline.is_confident(explanation))


@router.post("/suggestions", response_model=SuggestionsResponse)
async def suggest(
    req: TextRequest,
    pipeline: Annotated[CategorizationPipeline, Depends(get_pipeline)],
) -> SuggestionsResponse:
    return SuggestionsResponse(suggestions=pipeline.suggest(req.text))
