"""
First-run seed data.

Used when the store has no document yet, and by the "reset" action.
"""

from decimal import Decimal

from fintrack.models.finance import (
    Account,
    AccountType,
    FinanceState,
    Pot,
    Preferences,
    Transaction,
    TransactionType,
    User,
    UserRole,
)


SEED_OWNER_ID = "u1"


def default_state() -> FinanceState:
    """Build a fresh seed document."""
    return FinanceState(
        users=(
            User(id=SEED_OWNER_ID, name="Me", role=UserRole.OWNER, email=""),
        ),
        current_user=SEED_OWNER_ID,
        accounts=(
            Account(
                id="a1", name="Barclays Current", type=AccountType.CHECKING,
                balance=Decimal("3240.50"), color="#6366f1", is_personal=True,
            ),
            Account(
                id="a2", name="Monzo Savings", type=AccountType.SAVINGS,
                balance=Decimal("8500.00"), color="#10b981",
                interest_rate=4.5, is_personal=True,
            ),
            Account(
                id="a3", name="Visa Credit Card", type=AccountType.CREDIT_CARD,
                balance=Decimal("-1200.00"), color="#ef4444",
                interest_rate=22.9, credit_limit=Decimal("5000"), is_personal=True,
            ),
            Account(
                id="a4", name="Aviva Pension", type=AccountType.PENSION,
                balance=Decimal("42000.00"), color="#8b5cf6",
                interest_rate=7, is_personal=True,
            ),
            Account(
                id="a5", name="Business Account", type=AccountType.BUSINESS,
                balance=Decimal("15000.00"), color="#f59e0b", is_personal=False,
            ),
        ),
        transactions=(
            Transaction(
                id="t1", account_id="a1", date="2025-02-15", description="Tesco Groceries",
                amount=Decimal("-65.40"), category="Food", sub_category="Groceries",
                type=TransactionType.EXPENSE, is_personal=True,
            ),
            Transaction(
                id="t2", account_id="a1", date="2025-02-14", description="Netflix",
                amount=Decimal("-15.99"), category="Subscriptions", sub_category="Streaming",
                type=TransactionType.EXPENSE, is_personal=True,
            ),
            Transaction(
                id="t3", account_id="a1", date="2025-02-12", description="Salary",
                amount=Decimal("3500.00"), category="Income", sub_category="Salary",
                type=TransactionType.INCOME, is_personal=True,
            ),
            Transaction(
                id="t4", account_id="a5", date="2025-02-10", description="Client Invoice #42",
                amount=Decimal("5000.00"), category="Income", sub_category="Business Income",
                type=TransactionType.INCOME, is_personal=False,
            ),
            Transaction(
                id="t5", account_id="a5", date="2025-02-08", description="Office Supplies",
                amount=Decimal("-234.00"), category="Business", sub_category="Office Supplies",
                type=TransactionType.EXPENSE, is_personal=False,
            ),
        ),
        pots=(
            Pot(id="p1", name="Emergency Fund", target=Decimal("5000"),
                current=Decimal("3200"), color="#10b981", account_id="a2"),
            Pot(id="p2", name="Holiday 2025", target=Decimal("3000"),
                current=Decimal("800"), color="#06b6d4", account_id="a2"),
        ),
        settings=Preferences(currency="£", dark_mode=True),
    )
