from fastapi import APIRouter, Query

from expense_categorizer.api.schemas import CategoryEntry
from expense_categorizer.domain.catalog import categories_for, chart_color
from expense_categorizer.models import TransactionType

router = APIRouter(prefix="/api")


@router.get("/categories", response_model=list[CategoryEntry])
async def list_categories(
    type: TransactionType | None = Query(default=None),
) -> list[CategoryEntry]:
    return [
        CategoryEntry(
            name=category.name,
            type=category.type,
            icon=category.icon,
            color=category.color,
            chart_color=chart_color(category.name),
        )
        for category in categories_for(type)
    ]
