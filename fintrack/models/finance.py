"""
Core Data Models for FinTrack

These models define the shape of everything stored in the root document:
users, accounts, transactions, savings pots and display preferences.

DESIGN DECISION: Every model is frozen. A user action never edits an
entity in place; it builds a new snapshot (see fintrack.state.commands).
This keeps every view a pure function of one value.

Money is held as Decimal with two minor-unit digits. The JSON document
keeps the camelCase keys and plain numbers of the backup format,
so exported files stay readable by older versions.
"""

import secrets
import string
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Annotated, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    model_validator,
)
from pydantic.alias_generators import to_camel


CENT = Decimal("0.01")

_ID_ALPHABET = string.digits + string.ascii_lowercase


def to_cents(value: Decimal) -> Decimal:
    """Quantize a monetary value to two decimal places (half up).

    Raises ValueError when the value has too many digits to hold cents,
    so pydantic reports it as a validation error.
    """
    try:
        return value.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise ValueError(f"Amount out of range: {value}") from e


Money = Annotated[
    Decimal,
    AfterValidator(to_cents),
    PlainSerializer(float, return_type=float, when_used="json"),
]


def new_id() -> str:
    """Random opaque 8-character identifier (lowercase base-36)."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(8))


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class Mode(str, Enum):
    """
    The personal/business partition.

    Every aggregation filters accounts and transactions by mode first.
    """
    PERSONAL = "personal"
    BUSINESS = "business"

    @property
    def is_personal(self) -> bool:
        return self is Mode.PERSONAL


class AccountType(str, Enum):
    """Supported account kinds."""
    CHECKING = "checking"
    SAVINGS = "savings"
    CREDIT_CARD = "credit_card"
    PENSION = "pension"
    INVESTMENT = "investment"
    BUSINESS = "business"
    LOAN = "loan"

    @property
    def label(self) -> str:
        return ACCOUNT_TYPE_LABELS[self]


ACCOUNT_TYPE_LABELS = {
    AccountType.CHECKING: "Current",
    AccountType.SAVINGS: "Savings",
    AccountType.CREDIT_CARD: "Credit Card",
    AccountType.PENSION: "Pension",
    AccountType.INVESTMENT: "Investment",
    AccountType.BUSINESS: "Business",
    AccountType.LOAN: "Loan",
}

# Account kinds whose form shows an interest/growth rate field
RATE_BEARING_TYPES = frozenset({
    AccountType.SAVINGS,
    AccountType.PENSION,
    AccountType.INVESTMENT,
    AccountType.CREDIT_CARD,
    AccountType.LOAN,
})

# Account kinds whose form shows a credit limit field
CREDIT_TYPES = frozenset({AccountType.CREDIT_CARD})


class TransactionType(str, Enum):
    """
    Transaction direction as chosen on the form.

    NOTE: This is metadata only. The sign of the amount is what every
    aggregation uses.
    """
    INCOME = "income"
    EXPENSE = "expense"
    TRANSFER = "transfer"


class UserRole(str, Enum):
    """User roles. Informational labels; nothing enforces them."""
    OWNER = "owner"
    EDITOR = "editor"
    VIEWER = "viewer"


# =============================================================================
# ENTITIES
# =============================================================================

class _Entity(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class User(_Entity):
    """A person with access to the dashboard."""

    id: str = Field(default_factory=new_id)
    name: str = Field(..., min_length=1, max_length=100)
    role: UserRole = UserRole.VIEWER
    email: str = ""


class Account(_Entity):
    """
    A named store of value.

    CRITICAL: ``balance`` is entered by the user and is the single source of
    truth. It is never recomputed from transactions.
    """

    id: str = Field(default_factory=new_id)
    name: str = Field(..., min_length=1, max_length=100)
    type: AccountType = AccountType.CHECKING
    balance: Money = Field(
        default=Decimal("0"),
        description="Signed current balance; negative means money owed"
    )
    currency: str = Field(default="£", max_length=5)
    color: str = "#6366f1"
    is_personal: bool = True
    interest_rate: Optional[float] = Field(
        default=None,
        description="Interest or growth rate, percent per annum"
    )
    credit_limit: Optional[Money] = None

    @property
    def is_debt(self) -> bool:
        return self.balance < 0


class Transaction(_Entity):
    """
    A single money movement against an account.

    ``date`` is an ISO ``YYYY-MM-DD`` string. It is kept as text because
    sorting and month bucketing work on the string, and imported rows may
    carry whatever the bank file had (including nothing).
    """

    id: str = Field(default_factory=new_id)
    account_id: str
    date: str = ""
    description: str = ""
    amount: Money = Field(
        ...,
        description="Positive for inflow, negative for outflow"
    )
    category: str = "Other"
    sub_category: str = ""
    type: TransactionType = TransactionType.EXPENSE
    is_personal: bool = True

    @property
    def month(self) -> str:
        return self.date[:7]


class Pot(_Entity):
    """A savings goal linked to an account."""

    id: str = Field(default_factory=new_id)
    name: str = Field(..., min_length=1, max_length=100)
    target: Money = Field(..., gt=0)
    current: Money = Field(default=Decimal("0"), ge=0)
    color: str = "#6366f1"
    account_id: str = ""

    @model_validator(mode='after')
    def validate_current(self) -> 'Pot':
        if self.current > self.target:
            raise ValueError("Pot current amount cannot exceed its target")
        return self

    @property
    def remaining(self) -> Decimal:
        return self.target - self.current


class Preferences(_Entity):
    """Cosmetic settings. Only the currency symbol reaches any output."""

    currency: str = Field(default="£", max_length=5)
    dark_mode: bool = True


# =============================================================================
# ROOT DOCUMENT
# =============================================================================

class FinanceState(_Entity):
    """
    The root document.

    Loaded once at startup, replaced by every command, saved after every
    replacement.
    """

    users: tuple[User, ...] = ()
    current_user: str = ""
    accounts: tuple[Account, ...] = ()
    transactions: tuple[Transaction, ...] = ()
    pots: tuple[Pot, ...] = ()
    settings: Preferences = Field(default_factory=Preferences)

    def account_by_id(self, account_id: str) -> Optional[Account]:
        return next((a for a in self.accounts if a.id == account_id), None)

    def user_by_id(self, user_id: str) -> Optional[User]:
        return next((u for u in self.users if u.id == user_id), None)

    def to_document(self) -> dict:
        """Convert to the JSON-ready dict stored under the state key."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
