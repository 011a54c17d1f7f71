"""
Best-effort parser for free-text salary strings ("$50,000 - $80,000", "75k",
"$25/hour"). Figures are normalised to an annual amount in integer cents.
"""
import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

HOURS_PER_WEEK = 40
WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12

_MULTIPLIERS = {"k": 1_000, "m": 1_000_000}

# A number with optional thousands separators, decimals and a k/m suffix.
# The suffix must not be followed by a letter so "80,000 a month" keeps no suffix.
_NUM = r"(\d+(?:,\d{3})*(?:\.\d+)?)\s*([kKmM](?![a-zA-Z]))?"
_SINGLE_RE = re.compile(_NUM)
_RANGE_RE = re.compile(_NUM + r"\s*(?:[-–—]|to)\s*[$€£]?\s*" + _NUM, re.IGNORECASE)

# A unit may directly follow a digit ("$40hr") but not a letter ("three", "remote").
_HOURLY_RE = re.compile(r"(?<![a-z])(?:hours?|hourly|hrs?)\b|/\s*h\b", re.IGNORECASE)
_MONTHLY_RE = re.compile(r"(?<![a-z])(?:months?|monthly|mo)\b", re.IGNORECASE)

_CURRENCY_SYMBOLS = {"$": "USD", "€": "EUR", "£": "GBP"}
_CURRENCY_CODE_RE = re.compile(r"\b(USD|EUR|GBP|CAD|AUD|INR)\b", re.IGNORECASE)


@dataclass(frozen=True)
class ParsedSalary:
    min: int
    max: int
    currency: str = "USD"
    type: str = "ANNUAL"

    def as_dict(self) -> dict:
        return {"min": self.min, "max": self.max, "currency": self.currency, "type": self.type}


def _to_number(raw: str, suffix: str | None) -> float:
    value = float(raw.replace(",", ""))
    if suffix:
        value *= _MULTIPLIERS[suffix.lower()]
    return value


def _detect_currency(text: str) -> str:
    code = _CURRENCY_CODE_RE.search(text)
    if code:
        return code.group(1).upper()
    for symbol, currency in _CURRENCY_SYMBOLS.items():
        if symbol in text:
            return currency
    return "USD"


def _annual_factor(text: str) -> int:
    if _HOURLY_RE.search(text):
        return HOURS_PER_WEEK * WEEKS_PER_YEAR
    if _MONTHLY_RE.search(text):
        return MONTHS_PER_YEAR
    return 1


def _cents(value: float) -> int:
    return int(round(value * 100))


def parse_salary_string(text: str | None) -> ParsedSalary | None:
    """
    Parse a salary string into annual cents.

    Tried in order: a range ("50-80k", "$50,000 to $80,000"), then a single
    value ("75k"). Hourly ("/hour", "per hr") figures are annualised at
    40h x 52 weeks and monthly figures at 12 months. A k/m suffix on one end
    of a range applies to both ends. Returns None when nothing matches.
    """
    if not text or not text.strip():
        return None
    clean = text.strip()
    currency = _detect_currency(clean)
    factor = _annual_factor(clean)

    range_match = _RANGE_RE.search(clean)
    if range_match:
        low_raw, low_suffix, high_raw, high_suffix = range_match.groups()
        # "50-80k": a lone suffix covers both ends
        low_suffix = low_suffix or high_suffix
        high_suffix = high_suffix or low_suffix
        low = _to_number(low_raw, low_suffix) * factor
        high = _to_number(high_raw, high_suffix) * factor
        if low > high:
            low, high = high, low
        if high <= 0:
            return None
        return ParsedSalary(min=_cents(low), max=_cents(high), currency=currency)

    single_match = _SINGLE_RE.search(clean)
    if single_match:
        value = _to_number(single_match.group(1), single_match.group(2)) * factor
        if value <= 0:
            return None
        return ParsedSalary(min=_cents(value), max=_cents(value), currency=currency)

    logger.debug("Unparseable salary string: %r", clean)
    return None
