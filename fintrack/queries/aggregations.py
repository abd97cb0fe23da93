"""
Query and Aggregation Engine

DESIGN DECISION: Every function here is PURE. Given the same snapshot and
the same criteria it returns the same result, with no hidden state. The
dashboard simply calls them again whenever an input changes.

Conventions shared by every aggregation:
- The sign of ``amount`` decides direction (positive = inflow). The
  transaction ``type`` is never consulted.
- Dates are ``YYYY-MM-DD`` strings and are compared as strings.
- Accounts and transactions are partitioned by mode independently; a
  transaction whose account sits in the other mode is not corrected.
"""

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence, TypeVar, Union

from fintrack.models.categories import DEFAULT_CATEGORY
from fintrack.models.finance import (
    Account,
    AccountType,
    FinanceState,
    Mode,
    Pot,
    Transaction,
    to_cents,
)
from fintrack.models.reports import (
    AccountBalanceRow,
    AccountPartitions,
    BalanceTotals,
    CategoryShare,
    CategoryTotal,
    DashboardSummary,
    PeriodTotals,
    TransactionFilter,
    TrendBucket,
)


E = TypeVar("E", Account, Transaction)

ALL = "all"
TREND_MONTHS = 6
ZERO = Decimal("0")


def select_by_mode(entities: Iterable[E], mode: Union[Mode, str]) -> list[E]:
    """Keep the entities whose ``is_personal`` flag matches the mode."""
    personal = Mode(mode).is_personal
    return [e for e in entities if e.is_personal == personal]


def filter_transactions(
    transactions: Iterable[Transaction],
    mode: Union[Mode, str],
    account_filter: str = ALL,
    category_filter: str = ALL,
    search_text: str = "",
) -> list[Transaction]:
    """
    The transaction list pipeline.

    1. Mode partition
    2. Account filter (unless "all")
    3. Category filter (unless "all")
    4. Case-insensitive description search (unless empty)
    5. Newest first, by date string; equal dates keep their input order
    """
    txs = select_by_mode(transactions, mode)
    if account_filter != ALL:
        txs = [t for t in txs if t.account_id == account_filter]
    if category_filter != ALL:
        txs = [t for t in txs if t.category == category_filter]
    if search_text:
        needle = search_text.lower()
        txs = [t for t in txs if needle in t.description.lower()]
    return sorted(txs, key=lambda t: t.date, reverse=True)


def apply_filter(
    transactions: Iterable[Transaction],
    criteria: TransactionFilter,
) -> list[Transaction]:
    return filter_transactions(
        transactions,
        criteria.mode,
        account_filter=criteria.account_id,
        category_filter=criteria.category,
        search_text=criteria.search,
    )


def _sorted_totals(totals: dict[str, Decimal]) -> list[CategoryTotal]:
    rows = [CategoryTotal(name=name, value=to_cents(value)) for name, value in totals.items()]
    return sorted(rows, key=lambda row: row.value, reverse=True)


def category_spend(transactions: Iterable[Transaction]) -> list[CategoryTotal]:
    """
    Outflow per category, largest first.

    Only ``amount < 0`` counts; values are magnitudes. A blank category is
    reported as "Other".
    """
    totals: dict[str, Decimal] = defaultdict(Decimal)
    for t in transactions:
        if t.amount < 0:
            totals[t.category or DEFAULT_CATEGORY] += abs(t.amount)
    return _sorted_totals(totals)


def income_sources(transactions: Iterable[Transaction]) -> list[CategoryTotal]:
    """Inflow keyed by sub-category, falling back to category, then "Other"."""
    totals: dict[str, Decimal] = defaultdict(Decimal)
    for t in transactions:
        if t.amount > 0:
            totals[t.sub_category or t.category or DEFAULT_CATEGORY] += t.amount
    return _sorted_totals(totals)


def category_share(totals: Sequence[CategoryTotal]) -> list[CategoryShare]:
    """Percent of the grand total for each row (the breakdown table)."""
    grand_total = sum((row.value for row in totals), ZERO)
    shares = []
    for row in totals:
        percent = float(row.value / grand_total * 100) if grand_total else 0.0
        shares.append(CategoryShare(name=row.name, value=row.value, percent=percent))
    return shares


def monthly_trend(
    transactions: Iterable[Transaction],
    mode: Union[Mode, str],
    limit: int = TREND_MONTHS,
) -> list[TrendBucket]:
    """
    Income and spend per ``YYYY-MM`` month, oldest first.

    Only the mode partition applies; the list filters do not. Only the
    last ``limit`` months are kept; older months are dropped, not merged.
    """
    # month -> [income, spend]
    buckets: dict[str, list[Decimal]] = {}
    for t in select_by_mode(transactions, mode):
        bucket = buckets.setdefault(t.month, [ZERO, ZERO])
        if t.amount > 0:
            bucket[0] += t.amount
        else:
            bucket[1] += abs(t.amount)

    months = sorted(buckets)[-limit:] if limit > 0 else []
    return [
        TrendBucket(month=m, income=buckets[m][0], spend=buckets[m][1])
        for m in months
    ]


def period_totals(
    transactions: Iterable[Transaction],
    today: Union[date, str, None] = None,
) -> PeriodTotals:
    """
    Income and spend since the start of the current month.

    A transaction is in the period when its date string sorts at or after
    the current ``YYYY-MM``.
    """
    if today is None:
        today = date.today()
    if isinstance(today, date):
        today = today.isoformat()
    current_month = today[:7]

    monthly_income = ZERO
    monthly_spend = ZERO
    for t in transactions:
        if t.date < current_month:
            continue
        if t.amount > 0:
            monthly_income += t.amount
        elif t.amount < 0:
            monthly_spend += abs(t.amount)
    return PeriodTotals(monthly_income=monthly_income, monthly_spend=monthly_spend)


def balance_totals(accounts: Iterable[Account]) -> BalanceTotals:
    """Assets, debt and net worth of an (already mode-filtered) account set."""
    total_assets = ZERO
    total_debt = ZERO
    for a in accounts:
        if a.balance > 0:
            total_assets += a.balance
        elif a.balance < 0:
            total_debt += abs(a.balance)
    return BalanceTotals(
        total_assets=total_assets,
        total_debt=total_debt,
        net_worth=total_assets - total_debt,
    )


def partition_accounts(accounts: Iterable[Account]) -> AccountPartitions:
    """Split accounts into the savings / debts / pensions / regular sections."""
    accounts = list(accounts)
    debt_types = {AccountType.CREDIT_CARD, AccountType.LOAN}
    special_types = debt_types | {AccountType.SAVINGS, AccountType.PENSION}
    return AccountPartitions(
        savings=[a for a in accounts if a.type == AccountType.SAVINGS],
        debts=[a for a in accounts if a.type in debt_types or a.balance < 0],
        pensions=[a for a in accounts if a.type == AccountType.PENSION],
        regular=[a for a in accounts if a.type not in special_types],
    )


def account_balances(accounts: Iterable[Account]) -> list[AccountBalanceRow]:
    return [AccountBalanceRow(name=a.name, balance=a.balance, color=a.color) for a in accounts]


def growth_accounts(accounts: Iterable[Account]) -> list[Account]:
    """Accounts shown on the pension view: pensions and investments."""
    return [a for a in accounts if a.type in (AccountType.PENSION, AccountType.INVESTMENT)]


def pot_progress(pot: Pot) -> float:
    """Percent of target reached, capped at 100."""
    return min(100.0, float(pot.current / pot.target * 100))


def credit_utilisation(account: Account) -> Optional[float]:
    """Percent of the credit limit in use, or None without a positive limit."""
    if not account.credit_limit or account.credit_limit <= 0:
        return None
    used = -account.balance if account.balance < 0 else Decimal("0")
    return float(used / account.credit_limit * 100)


def dashboard_summary(
    state: FinanceState,
    mode: Union[Mode, str],
    criteria: Optional[TransactionFilter] = None,
    today: Union[date, str, None] = None,
) -> DashboardSummary:
    """
    Everything the dashboard header and charts need, for one mode.

    Period totals and category spend follow the active list filters; the
    trend and the balances only follow the mode.
    """
    mode = Mode(mode)
    criteria = (criteria or TransactionFilter()).model_copy(update={"mode": mode})
    accounts = select_by_mode(state.accounts, mode)
    transactions = apply_filter(state.transactions, criteria)
    return DashboardSummary(
        mode=mode,
        balances=balance_totals(accounts),
        period=period_totals(transactions, today),
        category_spend=category_spend(transactions),
        trend=monthly_trend(state.transactions, mode),
        account_count=len(accounts),
        transaction_count=len(transactions),
    )
