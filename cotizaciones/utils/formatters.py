"""Jinja filters for number formatting."""
from decimal import Decimal


def money(value, places=2):
    """Format an amount with thousands separators: 1234.5 -> '1,234.50'."""
    if value is None:
        value = 0
    return '{:,.{places}f}'.format(Decimal(str(value)), places=places)
