"""Currency display helpers."""

from decimal import Decimal
from typing import Union

Number = Union[Decimal, float, int]


def format_money(value: Number, currency: str = "£") -> str:
    """Render the magnitude of ``value``, e.g. ``£1,234.50``. The sign is dropped."""
    return f"{currency}{abs(Decimal(str(value))):,.2f}"


def format_signed(value: Number, currency: str = "£") -> str:
    """Render with an explicit sign, e.g. ``+£3,500.00`` or ``-£65.40``."""
    sign = "-" if value < 0 else "+"
    return f"{sign}{format_money(value, currency)}"


def format_thousands(value: Number, currency: str = "£") -> str:
    """Axis label style, e.g. ``£42k``."""
    return f"{currency}{float(value) / 1000:.0f}k"
