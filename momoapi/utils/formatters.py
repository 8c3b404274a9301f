"""
Data formatting utilities for MoMo operations.
"""

from decimal import Decimal, InvalidOperation
from typing import Union


def format_currency(amount: Union[int, float, Decimal, str], currency: str = "EUR") -> str:
    """
    Format amount with currency code.

    Returns:
        Formatted string (e.g., "UGX 1,000.00")
    """
    try:
        amount = Decimal(str(amount))
        return f"{currency} {amount:,.2f}"
    except (InvalidOperation, ValueError, TypeError):
        return f"{currency} 0.00"


def mask_party_id(party_id: str, visible: int = 4) -> str:
    """Hide all but the last ``visible`` characters of a phone number or email."""
    party_id = str(party_id)
    if len(party_id) <= visible:
        return party_id
    return '*' * (len(party_id) - visible) + party_id[-visible:]
