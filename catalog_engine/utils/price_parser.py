"""
Price Sample Parser
===================

Parses the free-form price strings scraped alongside the catalog
("$1,299.00", "$849", "$2,100.00/ea") into numeric amounts.

Example inputs:
- "$1,200.00" → Decimal("1200.00")
- "$800" → Decimal("800")
- "$1,499.00 - $1,899.00" → Decimal("1499.00") (leading number wins)
- "Call for price" → None

Only "$" and "," are stripped; everything after the leading numeric
token is ignored, and a string with no leading number is unparseable.
"""

import re
from decimal import Decimal, InvalidOperation, Overflow
from typing import Final

STRIP_CHARACTERS: Final[str] = "$,"

_STRIP_PATTERN: Final[re.Pattern[str]] = re.compile(f"[{re.escape(STRIP_CHARACTERS)}]")

# Leading signed decimal with optional exponent, after leading whitespace
_LEADING_NUMBER: Final[re.Pattern[str]] = re.compile(
    r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


def clean_price_string(value: str) -> str:
    """Remove currency symbols and thousands separators."""
    return _STRIP_PATTERN.sub("", value)


def parse_price(value: str | None) -> Decimal | None:
    """
    Parse a price sample into a Decimal amount.

    Args:
        value: Raw price string

    Returns:
        Parsed amount, or None when no leading number is present

    Examples:
        >>> parse_price("$1,200.00")
        Decimal('1200.00')

        >>> parse_price("abc") is None
        True
    """
    if not value:
        return None

    match = _LEADING_NUMBER.match(clean_price_string(value))
    if match is None:
        return None

    try:
        amount = Decimal(match.group(1))
    except (InvalidOperation, Overflow):
        return None

    return amount if amount.is_finite() else None


def parse_prices(values: list[str]) -> list[Decimal]:
    """Parse a batch of samples, dropping the ones that fail to parse."""
    parsed: list[Decimal] = []
    for value in values:
        amount = parse_price(value)
        if amount is not None:
            parsed.append(amount)
    return parsed
