import pytest

from expense_categorizer.classifiers.amount import extract_amount, format_amount, strip_amounts


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Bought groceries $50", 50.0),
        ("Bought groceries at Walmart $45.67", 45.67),
        ("Lunch 12 with friends, $30 total", 30.0),
        ("Paid 120 dollars for the electric bill", 120.0),
        ("Internet 60 USD", 60.0),
        ("spent on lunch about 15", 15.0),
        ("3 coffees 12", 3.0),
        ("2 items, paid 30", 30.0),
        ("3 items 20 dollars", 20.0),
        ("3 items 20 DOLLARS", 20.0),
        ("1 coffee cost 4.50 USD", 4.5),
    ],
)
def test_extract_amount(text, expected):
    assert extract_amount(text) == expected


def test_extract_amount_no_numbers():
    assert extract_amount("no numbers here") is None
    assert extract_amount("bought groceries") is None


def test_dollar_rule_wins_over_earlier_bare_number():
    # The bare 2 comes first in the text but the currency rule has priority.
    assert extract_amount("2 pizzas for $18.50") == 18.5


def test_zero_match_falls_through_to_next_rule():
    assert extract_amount("$0 fee, paid 25 dollars") == 25.0


def test_zero_everywhere_returns_none():
    assert extract_amount("$0 and 0 dollars") is None


def test_strip_amounts():
    assert strip_amounts("Spent $20 on lunch") == "Spent  on lunch"
    assert strip_amounts("  Bought groceries at Walmart $45.67 ") == "Bought groceries at Walmart"
    assert strip_amounts("$50") == ""


def test_format_amount():
    assert format_amount(5000.0) == "5000"
    assert format_amount(45.67) == "45.67"
    assert format_amount(4.5) == "4.5"


def test_strip_amounts_keeps_inner_spacing():
    assert strip_amounts("gas 30 bill") == "gas  bill"
    assert strip_amounts("gas  bill") == "gas  bill"
