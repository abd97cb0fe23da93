"""
Growth Projections

Two forward-looking series:

PENSION VIEW - one point per year for a pension/investment balance under
three scenarios (expected, and two points either side of it).

PROJECTIONS VIEW - month-by-month value of a starting balance with a fixed
monthly contribution, compounded monthly. The contribution term is the
future value of an ordinary annuity; at 0% growth it degrades to a plain
sum so nothing divides by zero.

Neither series clamps its inputs: a negative starting value (net debt)
flows through the formulas unchanged.
"""

import math
from decimal import Decimal
from enum import Enum
from typing import Iterable, Optional, Union

from fintrack.models.finance import Account, AccountType
from fintrack.models.reports import PensionPoint, ProjectionPoint
from fintrack.queries.aggregations import balance_totals


DEFAULT_PENSION_RATE = 7.0
SCENARIO_SPREAD = 2.0
SNAPSHOT_YEARS = (5, 10, 20, 30)
SAMPLE_EVERY = 3


class ProjectionScenario(str, Enum):
    """Which balance the projections view starts from."""
    SAVINGS = "savings"
    NET_WORTH = "networth"


def _growth(balance: float, rate: float, years: int) -> float:
    return balance * (1 + rate / 100) ** years


def effective_pension_rate(rate: Optional[float]) -> float:
    """The account's rate, or the 7% default when none is set."""
    return DEFAULT_PENSION_RATE if rate is None else float(rate)


def pension_projection(
    balance: Union[Decimal, float],
    rate: Optional[float] = None,
    horizon_years: int = 20,
) -> list[PensionPoint]:
    """
    Yearly values for years ``0..horizon_years`` inclusive.

    ``conservative`` and ``optimistic`` use the rate minus/plus two
    percentage points.
    """
    balance = float(balance)
    rate = effective_pension_rate(rate)
    return [
        PensionPoint(
            year=year,
            expected=_growth(balance, rate, year),
            conservative=_growth(balance, rate - SCENARIO_SPREAD, year),
            optimistic=_growth(balance, rate + SCENARIO_SPREAD, year),
        )
        for year in range(horizon_years + 1)
    ]


def pension_snapshots(
    balance: Union[Decimal, float],
    rate: Optional[float] = None,
    years: Iterable[int] = SNAPSHOT_YEARS,
) -> dict[int, float]:
    """Expected value at each fixed horizon (5/10/20/30 years by default)."""
    balance = float(balance)
    rate = effective_pension_rate(rate)
    return {y: _growth(balance, rate, y) for y in years}


def projection_starting_value(
    scenario: Union[ProjectionScenario, str],
    accounts: Iterable[Account],
) -> Decimal:
    """
    Starting balance for the projections view.

    ``accounts`` must already be filtered to the active mode.
    """
    accounts = list(accounts)
    if ProjectionScenario(scenario) is ProjectionScenario.SAVINGS:
        return sum((a.balance for a in accounts if a.type == AccountType.SAVINGS), Decimal("0"))
    return balance_totals(accounts).net_worth


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +infinity."""
    return math.floor(value + 0.5)


def contribution_value(
    starting_value: float,
    month: int,
    monthly_contribution: float,
    annual_growth_rate: float,
) -> float:
    """Unrounded projected value at one month."""
    g = annual_growth_rate / 100 / 12
    factor = (1 + g) ** month
    base = starting_value * factor
    if g > 0:
        contrib = monthly_contribution * (factor - 1) / g
    else:
        contrib = monthly_contribution * month
    return base + contrib


def contribution_projection(
    starting_value: Union[Decimal, float],
    months: int,
    monthly_contribution: float,
    annual_growth_rate: float,
    sample_every: int = SAMPLE_EVERY,
) -> list[ProjectionPoint]:
    """
    Projected value for months ``0..months``, keeping every ``sample_every``-th.

    Month 0 is always kept. The final month is kept only when it falls on
    the sampling grid.
    """
    start = float(starting_value)
    return [
        ProjectionPoint(
            month=i,
            value=round_half_up(
                contribution_value(start, i, monthly_contribution, annual_growth_rate)
            ),
        )
        for i in range(months + 1)
        if i % sample_every == 0
    ]
