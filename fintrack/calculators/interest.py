"""
Interest Calculators

Simple and compound growth of a single principal. Rates are percentages
per annum; ``years`` may be fractional.
"""

from enum import IntEnum

from fintrack.models.reports import InterestComparison


class CompoundingFrequency(IntEnum):
    """Compounding periods per year."""
    ANNUAL = 1
    MONTHLY = 12
    DAILY = 365


def simple_interest(principal: float, rate: float, years: float) -> float:
    """Final amount with simple interest: ``P * (1 + r/100 * years)``."""
    return principal * (1 + rate / 100 * years)


def compound_interest(
    principal: float,
    rate: float,
    years: float,
    frequency: CompoundingFrequency = CompoundingFrequency.ANNUAL,
) -> float:
    """Final amount compounded ``n`` times a year: ``P * (1 + r/100/n) ** (n * years)``."""
    n = int(frequency)
    return principal * (1 + rate / 100 / n) ** (n * years)


def interest_comparison(
    principal: float,
    rate: float,
    years: float,
    frequency: CompoundingFrequency = CompoundingFrequency.ANNUAL,
) -> InterestComparison:
    return InterestComparison(
        principal=principal,
        rate=rate,
        years=years,
        periods_per_year=int(frequency),
        simple_total=simple_interest(principal, rate, years),
        compound_total=compound_interest(principal, rate, years, frequency),
    )
