import math
import re

_NUMBER = r"(\d+(?:\.\d{2})?)"

# Evaluated in order; the first rule that yields a positive value wins.
AMOUNT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\$" + _NUMBER),
    # Currency words match in any case ("20 USD", "20 usd").
    re.compile(_NUMBER + r"\s*(?:dollars?|usd)\b", re.IGNORECASE),
    re.compile(r"(?:spent|paid|cost|bought).*?" + _NUMBER, re.IGNORECASE),
    re.compile(_NUMBER),
)

# Anything that looks like a money token, with or without the dollar sign.
_AMOUNT_TOKEN = re.compile(r"\$?\d+(?:\.\d{2})?")


def _first_positive(pattern: re.Pattern[str], text: str) -> float | None:
    match = pattern.search(text)
    if match is None:
        return None
    value = float(match.group(1))
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def extract_amount(text: str) -> float | None:
    """
    Return the first plausible monetary amount in ``text``.

    Only the first match of each rule is considered. A zero (or overflowing)
    match falls through to the next rule instead of the next match.
    """
    for pattern in AMOUNT_PATTERNS:
        amount = _first_positive(pattern, text)
        if amount is not None:
            return amount
    return None


def strip_amounts(text: str) -> str:
    """Remove amount tokens and trim the ends; inner spacing is left as typed."""
    return _AMOUNT_TOKEN.sub("", text).strip()


def format_amount(amount: float) -> str:
    return f"{amount:.2f}".rstrip("0").rstrip(".")
