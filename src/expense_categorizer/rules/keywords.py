"""
Static keyword tables used by the categorization engine.

All tables are read-only and keep their declaration order: category
scoring breaks ties by the first category declared, and the fallback
table is checked top to bottom.
"""
from types import MappingProxyType

CATEGORY_MATCH_THRESHOLD = 10.0
FALLBACK_CONFIDENCE = 60.0
DEFAULT_CATEGORY = "Miscellaneous"
DEFAULT_CONFIDENCE = 30.0
DEFAULT_DIRECTION_CONFIDENCE = 70.0
CONFIDENCE_CEILING = 95.0
MAX_SUGGESTIONS = 5

PRIMARY_CATEGORY_KEYWORDS = MappingProxyType({
    # Expense categories
    "Food & Dining": (
        "restaurant", "cafe", "dinner", "lunch", "breakfast", "pizza", "burger",
        "food delivery", "takeout", "dine",
    ),
    "Groceries": (
        "grocery", "groceries", "supermarket", "walmart", "target", "costco", "market",
        "vegetables", "fruits", "milk", "bread",
    ),
    "Transportation": (
        "gas", "fuel", "uber", "lyft", "taxi", "bus", "train", "metro", "parking", "car wash",
    ),
    "Entertainment": (
        "movie", "cinema", "concert", "theater", "game", "streaming", "netflix", "spotify",
        "entertainment",
    ),
    "Shopping": (
        "amazon", "shopping", "clothes", "shoes", "online", "mall", "store", "purchase", "buy",
    ),
    "Health & Medical": (
        "doctor", "hospital", "pharmacy", "medicine", "medical", "health", "dentist", "clinic",
    ),
    "Bills & Utilities": (
        "electric", "electricity", "water", "gas bill", "internet", "phone bill", "utility", "rent",
    ),
    "Education": (
        "school", "university", "course", "book", "tuition", "education", "training", "seminar",
    ),
    "Travel": (
        "hotel", "flight", "travel", "vacation", "trip", "airbnb", "booking", "airline",
    ),
    "Home & Garden": (
        "furniture", "home depot", "garden", "tools", "repair", "maintenance", "hardware",
    ),
    "Personal Care": (
        "salon", "barber", "spa", "cosmetics", "personal care", "beauty", "haircut",
    ),
    "Insurance": ("insurance", "policy", "premium", "coverage"),
    "Investments": ("investment", "stocks", "bonds", "mutual fund", "etf", "crypto", "trading"),
    # Income categories
    "Salary": ("salary", "paycheck", "wages", "income", "pay"),
    "Freelance": ("freelance", "consulting", "contract", "gig", "project"),
    "Business": ("business", "revenue", "sales", "profit", "commission"),
    "Rental": ("rent", "rental income", "property", "tenant"),
    "Side Hustle": ("side hustle", "part time", "extra income", "odd job"),
    "Gifts": ("gift", "bonus", "present", "reward"),
    "Refunds": ("refund", "return", "reimbursement", "cashback"),
})

FALLBACK_CATEGORY_KEYWORDS = MappingProxyType({
    "Food & Dining": ("ate", "food", "meal", "hungry", "restaurant"),
    "Transportation": ("drive", "car", "transport", "travel", "gas"),
    "Shopping": ("buy", "purchase", "store", "shop"),
    "Entertainment": ("fun", "movie", "game", "entertainment"),
    "Bills & Utilities": ("bill", "utility", "electric", "water", "internet"),
})

# Income is counted first; a phrase present in both sets would score for both.
INCOME_INDICATORS = (
    "received", "earned", "salary", "paycheck", "bonus", "refund", "cashback", "dividend",
    "interest", "profit", "income", "payment received", "freelance payment",
)

EXPENSE_INDICATORS = (
    "bought", "purchased", "paid", "spent", "cost", "bill", "fee", "charge", "subscription",
    "order", "shopping",
)
