"""
Derived View Models

Shapes returned by the query engine and the calculators. None of these
are persisted; they are recomputed from the current snapshot whenever the
inputs change.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from fintrack.models.finance import Account, Mode, Money


class _View(BaseModel):
    model_config = ConfigDict(frozen=True)


# =============================================================================
# QUERY MODELS
# =============================================================================

class TransactionFilter(_View):
    """
    Criteria for the transaction list.

    ``"all"`` disables the account or category filter; an empty search
    disables the description filter.
    """

    mode: Mode = Mode.PERSONAL
    account_id: str = "all"
    category: str = "all"
    search: str = ""


class CategoryTotal(_View):
    """Spend (or income) total for one category, as a positive amount."""

    name: str
    value: Money


class CategoryShare(_View):
    name: str
    value: Money
    percent: float = Field(ge=0.0, le=100.0)


class TrendBucket(_View):
    """Income and spend of one ``YYYY-MM`` month."""

    month: str
    income: Money = Decimal("0")
    spend: Money = Decimal("0")

    @property
    def net(self) -> Decimal:
        return self.income - self.spend


class PeriodTotals(_View):
    monthly_income: Money = Decimal("0")
    monthly_spend: Money = Decimal("0")

    @property
    def monthly_net(self) -> Decimal:
        return self.monthly_income - self.monthly_spend


class BalanceTotals(_View):
    total_assets: Money = Decimal("0")
    total_debt: Money = Decimal("0")
    net_worth: Money = Decimal("0")


class DashboardSummary(_View):
    """Headline figures for the dashboard of one mode."""

    mode: Mode
    balances: BalanceTotals
    period: PeriodTotals
    category_spend: list[CategoryTotal] = Field(default_factory=list)
    trend: list[TrendBucket] = Field(default_factory=list)
    account_count: int = 0
    transaction_count: int = 0


class AccountPartitions(_View):
    """
    Display buckets of the accounts page.

    NOTE: ``debts`` overlaps the others; a savings account in overdraft
    shows in both ``savings`` and ``debts``.
    """

    savings: list[Account] = Field(default_factory=list)
    debts: list[Account] = Field(default_factory=list)
    pensions: list[Account] = Field(default_factory=list)
    regular: list[Account] = Field(default_factory=list)


class AccountBalanceRow(_View):
    name: str
    balance: Money
    color: str


# =============================================================================
# CALCULATOR MODELS
# =============================================================================

class InterestComparison(_View):
    """Simple vs compound growth of one principal."""

    principal: float
    rate: float
    years: float
    periods_per_year: int
    simple_total: float
    compound_total: float

    @property
    def simple_interest(self) -> float:
        return self.simple_total - self.principal

    @property
    def compound_interest(self) -> float:
        return self.compound_total - self.principal

    @property
    def compound_advantage(self) -> float:
        return self.compound_total - self.simple_total


class PensionPoint(_View):
    """Projected pension value at one year under three growth scenarios."""

    year: int
    expected: float
    conservative: float
    optimistic: float


class ProjectionPoint(_View):
    """Projected value (whole currency units) at one month."""

    month: int
    value: int

    @property
    def label(self) -> str:
        return f"Month {self.month}"


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(_View):
    """A single problem found in a form draft."""

    field: str = Field(..., description="Field with the issue")
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'invalid_value', 'unknown_reference')",
    )
    message: str = Field(..., description="Human-readable description of the issue")
    severity: str = Field(..., pattern="^(error|warning)$", description="Issue severity")


class ValidationResult(_View):
    """
    Outcome of validating one draft.

    Errors block the command; warnings are shown but do not.
    """

    entity: str = Field(..., description="Kind of draft validated (account, pot, ...)")
    issues: list[ValidationIssue] = Field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == "warning"]

    @property
    def is_valid(self) -> bool:
        return not self.errors
