"""Query and aggregation package."""

from fintrack.queries.aggregations import (
    account_balances,
    apply_filter,
    balance_totals,
    category_share,
    category_spend,
    credit_utilisation,
    dashboard_summary,
    filter_transactions,
    growth_accounts,
    income_sources,
    monthly_trend,
    partition_accounts,
    period_totals,
    pot_progress,
    select_by_mode,
)

__all__ = [
    "account_balances",
    "apply_filter",
    "balance_totals",
    "category_share",
    "category_spend",
    "credit_utilisation",
    "dashboard_summary",
    "filter_transactions",
    "growth_accounts",
    "income_sources",
    "monthly_trend",
    "partition_accounts",
    "period_totals",
    "pot_progress",
    "select_by_mode",
]
