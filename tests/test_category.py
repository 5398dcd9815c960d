import pytest

from expense_categorizer.classifiers.category import classify_category, classify_fallback_category
from expense_categorizer.rules.keywords import PRIMARY_CATEGORY_KEYWORDS


def test_groceries_match():
    match = classify_category("Bought groceries at Walmart")
    assert match is not None
    assert match.category == "Groceries"
    assert match.confidence == pytest.approx(2 / 11 * 100)
    assert match.matched_keywords == ("groceries", "walmart")


def test_weak_signal_returns_none():
    # one hit out of ten keywords is exactly the threshold, not above it
    assert classify_category("pizza night") is None


def test_no_keywords_returns_none():
    assert classify_category("asdkjf") is None


def test_ties_keep_first_declared_category():
    table = {
        "First": ("alpha", "beta"),
        "Second": ("alpha", "gamma"),
    }
    match = classify_category("alpha", table=table)
    assert match is not None
    assert match.category == "First"
    assert match.confidence == 50


def test_deterministic():
    text = "uber taxi to the airport"
    assert classify_category(text) == classify_category(text)


def test_primary_table_is_read_only():
    with pytest.raises(TypeError):
        PRIMARY_CATEGORY_KEYWORDS["New"] = ("x",)  # type: ignore[index]


def test_fallback_first_category_wins():
    # "food" is a Food & Dining fallback word, "car" a Transportation one
    match = classify_fallback_category("food in the car")
    assert match is not None
    assert match.category == "Food & Dining"
    assert match.confidence == 60


def test_fallback_no_match():
    assert classify_fallback_category("asdkjf") is None
