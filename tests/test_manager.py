import pytest

from expense_categorizer.errors import InvalidInputError
from expense_categorizer.manager import CategorizerService, categorize, explain_category
from expense_categorizer.rules.keywords import FALLBACK_CATEGORY_KEYWORDS, PRIMARY_CATEGORY_KEYWORDS


def test_categorize_grocery_purchase():
    result = categorize("Bought groceries at Walmart $45.67")
    assert result.amount == 45.67
    assert result.type == "expense"
    assert result.category == "Groceries"
    assert result.confidence > 10
    assert result.confidence == pytest.approx(2 / 11 * 100 + 50)
    assert result.description == "Bought groceries at Walmart"
    assert result.description[0].isupper()
    assert result.reasoning == "Matched keywords for Groceries with 18.2% keyword confidence"


def test_categorize_salary():
    result = categorize("Monthly salary $5000")
    assert result.amount == 5000
    assert result.type == "income"
    assert result.category == "Salary"
    assert result.confidence == 70


def test_categorize_unknown_text():
    result = categorize("asdkjf")
    assert result.amount is None
    assert result.category == "Miscellaneous"
    assert result.confidence == 30
    assert result.type == "expense"
    assert result.reasoning == "Defaulted to miscellaneous category"
    assert result.description == "Asdkjf"


def test_categorize_fallback_table():
    result = categorize("ate out tonight $20")
    assert result.category == "Food & Dining"
    assert result.confidence == 60
    assert result.reasoning == "Matched fallback patterns for Food & Dining"
    assert result.description == "Ate out tonight"


def test_confidence_ceiling():
    result = categorize("paid insurance policy premium coverage $300")
    assert result.category == "Insurance"
    assert result.confidence == 95


def test_amount_only_input_keeps_original_text():
    result = categorize("$50")
    assert result.amount == 50
    assert result.description == "$50"
    assert result.category == "Miscellaneous"


@pytest.mark.parametrize("text", ["", "   ", "\n\t", None])
def test_empty_input_rejected(text):
    with pytest.raises(InvalidInputError):
        categorize(text)


@pytest.mark.parametrize(
    "text",
    [
        "x",
        "$0",
        "Received salary bonus refund cashback dividend income $1",
        "uber uber uber",
        "paid insurance policy premium coverage",
        "!!! ??? 123.456.789",
    ],
)
def test_confidence_is_bounded(text):
    result = categorize(text)
    assert 0 <= result.confidence <= 100


def test_categorize_has_no_side_effects():
    primary = {name: tuple(words) for name, words in PRIMARY_CATEGORY_KEYWORDS.items()}
    fallback = {name: tuple(words) for name, words in FALLBACK_CATEGORY_KEYWORDS.items()}

    first = categorize("Dinner at restaurant $40")
    second = categorize("Dinner at restaurant $40")

    assert first == second
    assert dict(PRIMARY_CATEGORY_KEYWORDS) == primary
    assert dict(FALLBACK_CATEGORY_KEYWORDS) == fallback


def test_explain_category():
    explanation = explain_category("Bought groceries at Walmart $45.67")
    assert explanation.category == "Groceries"
    assert explanation.confidence == categorize("Bought groceries at Walmart $45.67").confidence


def test_service_with_custom_tables():
    service = CategorizerService(
        primary_table={"Pets": ("vet", "dog food")},
        fallback_table={"Animals": ("cat",)},
    )
    assert service.categorize("vet visit $80").category == "Pets"
    assert service.categorize("cat toys").category == "Animals"
    assert service.categorize("groceries").category == "Miscellaneous"


@pytest.mark.parametrize("text", ["gas 30 bill", "gas  bill"])
def test_removed_amount_does_not_join_phrase_keywords(text):
    # "gas bill" is a Bills & Utilities phrase; the words here are not adjacent
    result = categorize(text)
    assert result.category == "Transportation"
    assert result.confidence == 60
    assert result.reasoning == "Matched fallback patterns for Transportation"
