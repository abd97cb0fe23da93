"""
Data Models Package

This package contains all Pydantic models used by FinTrack.
Everything stored in the root document must conform to these schemas.
"""

from fintrack.models.finance import (
    Account,
    AccountType,
    FinanceState,
    Mode,
    Money,
    Pot,
    Preferences,
    Transaction,
    TransactionType,
    User,
    UserRole,
    new_id,
    to_cents,
)
from fintrack.models.categories import (
    CATEGORIES,
    DEFAULT_CATEGORY,
    category_names,
    default_subcategory,
    subcategories_for,
)
from fintrack.models.seed import SEED_OWNER_ID, default_state

__all__ = [
    # Entities
    "Account",
    "AccountType",
    "FinanceState",
    "Mode",
    "Money",
    "Pot",
    "Preferences",
    "Transaction",
    "TransactionType",
    "User",
    "UserRole",
    "new_id",
    "to_cents",
    # Taxonomy
    "CATEGORIES",
    "DEFAULT_CATEGORY",
    "category_names",
    "default_subcategory",
    "subcategories_for",
    # Seed
    "SEED_OWNER_ID",
    "default_state",
]
