from expense_categorizer.suggestions import generate_suggestions


def test_fuel_suggestions():
    suggestions = generate_suggestions("need gas")
    assert len(suggestions) <= 5
    assert "Gas for car $45" in suggestions
    assert "Fuel expense $38" in suggestions


def test_no_topic_returns_empty_list():
    assert generate_suggestions("asdkjf") == []
    assert generate_suggestions("") == []


def test_topics_keep_check_order_and_are_truncated():
    suggestions = generate_suggestions("food, fuel and coffee")
    assert suggestions == [
        "Bought groceries $50",
        "Lunch at restaurant $25",
        "Food delivery $18",
        "Gas for car $45",
        "Fuel expense $38",
    ]


def test_income_topics():
    assert generate_suggestions("Freelance gig") == [
        "Freelance project payment $1200",
        "Consulting fee $800",
    ]
    assert generate_suggestions("PAYCHECK")[0] == "Monthly salary $5000"


def test_suggestions_are_fresh_lists():
    first = generate_suggestions("coffee")
    first.append("mutated")
    assert generate_suggestions("coffee") == ["Coffee at Starbucks $6", "Morning coffee $4.50"]
