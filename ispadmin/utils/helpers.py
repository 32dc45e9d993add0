"""
Helper functions
"""

from datetime import datetime, timezone
from decimal import Decimal


def get_now() -> datetime:
    """
    Current time in UTC

    Returns:
        timezone-aware datetime
    """
    return datetime.now(timezone.utc)


def format_amount(amount: Decimal | float | None) -> str:
    """
    Format a money amount with two decimals

    Args:
        amount: Amount

    Returns:
        Formatted string, "0.00" for None
    """
    if amount is None:
        return "0.00"
    return f"{Decimal(str(amount)):.2f}"


def as_utc(value: datetime | None) -> datetime | None:
    """
    Make a datetime timezone-aware

    Args:
        value: Datetime, naive values are taken as UTC

    Returns:
        Aware datetime or None
    """
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)
