import zlib
from dataclasses import dataclass

from expense_categorizer.models import TransactionType

CHART_COLORS: tuple[str, ...] = (
    "#3b82f6", "#ef4444", "#10b981", "#f59e0b", "#8b5cf6",
    "#ec4899", "#06b6d4", "#84cc16", "#f97316", "#6366f1",
)


@dataclass(frozen=True)
class CategoryDefinition:
    name: str
    type: TransactionType
    icon: str
    color: str


DEFAULT_CATEGORIES: tuple[CategoryDefinition, ...] = (
    # Expense categories
    CategoryDefinition("Food & Dining", "expense", "UtensilsCrossed", "#ef4444"),
    CategoryDefinition("Groceries", "expense", "ShoppingCart", "#f97316"),
    CategoryDefinition("Transportation", "expense", "Car", "#eab308"),
    CategoryDefinition("Entertainment", "expense", "Gamepad2", "#22c55e"),
    CategoryDefinition("Shopping", "expense", "ShoppingBag", "#3b82f6"),
    CategoryDefinition("Health & Medical", "expense", "Heart", "#8b5cf6"),
    CategoryDefinition("Bills & Utilities", "expense", "Receipt", "#ec4899"),
    CategoryDefinition("Education", "expense", "GraduationCap", "#06b6d4"),
    CategoryDefinition("Travel", "expense", "Plane", "#84cc16"),
    CategoryDefinition("Home & Garden", "expense", "Home", "#f59e0b"),
    CategoryDefinition("Personal Care", "expense", "Scissors", "#e11d48"),
    CategoryDefinition("Insurance", "expense", "Shield", "#7c3aed"),
    CategoryDefinition("Investments", "expense", "TrendingUp", "#059669"),
    CategoryDefinition("Miscellaneous", "expense", "MoreHorizontal", "#6b7280"),
    # Income categories
    CategoryDefinition("Salary", "income", "Briefcase", "#10b981"),
    CategoryDefinition("Freelance", "income", "Laptop", "#3b82f6"),
    CategoryDefinition("Business", "income", "Building2", "#8b5cf6"),
    CategoryDefinition("Investments", "income", "TrendingUp", "#f59e0b"),
    CategoryDefinition("Rental", "income", "Home", "#ef4444"),
    CategoryDefinition("Side Hustle", "income", "Zap", "#06b6d4"),
    CategoryDefinition("Gifts", "income", "Gift", "#ec4899"),
    CategoryDefinition("Refunds", "income", "RotateCcw", "#84cc16"),
    CategoryDefinition("Other Income", "income", "Plus", "#6b7280"),
)


def categories_for(direction: TransactionType | None = None) -> list[CategoryDefinition]:
    if direction is None:
        return list(DEFAULT_CATEGORIES)
    return [category for category in DEFAULT_CATEGORIES if category.type == direction]


def chart_color(name: str, palette: tuple[str, ...] = CHART_COLORS) -> str:
    """
    Pick a palette colour for a category name. The same name always maps to
    the same colour, across processes as well.
    """
    if not palette:
        raise ValueError("palette must not be empty")
    return palette[zlib.crc32(name.encode("utf-8")) % len(palette)]
