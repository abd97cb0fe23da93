"""
State Commands

Every user action is a pure function ``FinanceState -> FinanceState``.

DESIGN DECISION: Commands never mutate. They return a new snapshot with
the matched entity replaced, added or removed, so each one can be tested
on its own without a UI or a store.

Unknown ids are no-ops: the same snapshot comes back unchanged.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Iterable, Optional, TypeVar, Union

from pydantic import BaseModel

from fintrack.models.categories import default_subcategory
from fintrack.models.finance import (
    CREDIT_TYPES,
    RATE_BEARING_TYPES,
    Account,
    AccountType,
    FinanceState,
    Mode,
    Pot,
    Transaction,
    TransactionType,
    User,
)
from fintrack.models.seed import SEED_OWNER_ID


M = TypeVar("M", bound=BaseModel)


def _revise(entity: M, changes: dict[str, Any]) -> M:
    """Copy ``entity`` with ``changes`` applied, re-running validation."""
    return type(entity).model_validate({**entity.model_dump(), **changes})


def _replace(items: tuple[M, ...], item_id: str, changes: dict[str, Any]) -> tuple[M, ...]:
    return tuple(_revise(i, changes) if i.id == item_id else i for i in items)


def _without(items: tuple[M, ...], item_id: str) -> tuple[M, ...]:
    return tuple(i for i in items if i.id != item_id)


def _has(items: Iterable[BaseModel], item_id: str) -> bool:
    return any(i.id == item_id for i in items)


# =============================================================================
# ACCOUNTS
# =============================================================================

def add_account(state: FinanceState, account: Account) -> FinanceState:
    return state.model_copy(update={"accounts": state.accounts + (account,)})


def update_account(state: FinanceState, account_id: str, **changes: Any) -> FinanceState:
    """Apply field changes to one account. The id itself cannot change."""
    changes.pop("id", None)
    if not _has(state.accounts, account_id):
        return state
    return state.model_copy(update={"accounts": _replace(state.accounts, account_id, changes)})


def delete_account(state: FinanceState, account_id: str) -> FinanceState:
    """
    Remove an account.

    Transactions and pots that reference it are left alone; nothing in
    the model enforces references.
    """
    return state.model_copy(update={"accounts": _without(state.accounts, account_id)})


def set_interest_rate(state: FinanceState, account_id: str, rate: float) -> FinanceState:
    """Edit an account's rate in place (pension view). Any rate is accepted."""
    return update_account(state, account_id, interest_rate=float(rate))


def build_account(
    name: str,
    type: Union[AccountType, str],
    balance: Union[Decimal, float, str, None] = 0,
    mode: Union[Mode, str] = Mode.PERSONAL,
    color: str = "#6366f1",
    interest_rate: Optional[float] = None,
    credit_limit: Union[Decimal, float, str, None] = None,
    account_id: Optional[str] = None,
) -> Account:
    """
    Build an account the way the account form does.

    A blank rate stays unset so pensions fall back to the default growth
    rate; an explicit 0 is kept. Rate and limit are only stored for the
    account types whose form shows them.
    """
    type = AccountType(type)
    fields = dict(
        name=name,
        type=type,
        balance=balance or 0,
        color=color,
        is_personal=Mode(mode).is_personal,
        interest_rate=(
            float(interest_rate)
            if interest_rate is not None and type in RATE_BEARING_TYPES
            else None
        ),
        credit_limit=credit_limit if credit_limit and type in CREDIT_TYPES else None,
    )
    if account_id:
        fields["id"] = account_id
    return Account(**fields)


# =============================================================================
# TRANSACTIONS
# =============================================================================

def build_transaction(
    description: str,
    amount: Union[Decimal, float, str],
    account_id: str,
    mode: Union[Mode, str] = Mode.PERSONAL,
    type: TransactionType = TransactionType.EXPENSE,
    date_str: Optional[str] = None,
    category: str = "Food",
    sub_category: Optional[str] = None,
    transaction_id: Optional[str] = None,
) -> Transaction:
    """
    Build a transaction the way the entry form does.

    The form takes a magnitude; an expense is stored negative, anything
    else is stored as entered.
    """
    amount = Decimal(str(amount))
    if TransactionType(type) is TransactionType.EXPENSE:
        amount = -abs(amount)
    fields = dict(
        account_id=account_id,
        date=date_str if date_str is not None else date.today().isoformat(),
        description=description,
        amount=amount,
        category=category,
        sub_category=default_subcategory(category) if sub_category is None else sub_category,
        type=type,
        is_personal=Mode(mode).is_personal,
    )
    if transaction_id:
        fields["id"] = transaction_id
    return Transaction(**fields)


def add_transaction(state: FinanceState, transaction: Transaction) -> FinanceState:
    return state.model_copy(update={"transactions": state.transactions + (transaction,)})


def append_transactions(state: FinanceState, transactions: Iterable[Transaction]) -> FinanceState:
    """Append a batch (CSV import). No de-duplication."""
    return state.model_copy(update={"transactions": state.transactions + tuple(transactions)})


def update_transaction(state: FinanceState, transaction_id: str, **changes: Any) -> FinanceState:
    changes.pop("id", None)
    if not _has(state.transactions, transaction_id):
        return state
    return state.model_copy(
        update={"transactions": _replace(state.transactions, transaction_id, changes)}
    )


def replace_transaction(state: FinanceState, transaction: Transaction) -> FinanceState:
    """Swap in an edited transaction with the same id."""
    if not _has(state.transactions, transaction.id):
        return state
    return state.model_copy(update={
        "transactions": tuple(
            transaction if t.id == transaction.id else t for t in state.transactions
        )
    })


def delete_transaction(state: FinanceState, transaction_id: str) -> FinanceState:
    return state.model_copy(update={"transactions": _without(state.transactions, transaction_id)})


# =============================================================================
# POTS
# =============================================================================

def build_pot(
    name: str,
    target: Union[Decimal, float, str],
    current: Union[Decimal, float, str] = 0,
    color: str = "#6366f1",
    account_id: str = "",
) -> Pot:
    """Build a pot, clamping the opening amount to the target."""
    target = Decimal(str(target))
    current = min(Decimal(str(current or 0)), target)
    return Pot(name=name, target=target, current=current, color=color, account_id=account_id)


def add_pot(state: FinanceState, pot: Pot) -> FinanceState:
    return state.model_copy(update={"pots": state.pots + (pot,)})


def add_to_pot(state: FinanceState, pot_id: str, amount: Union[Decimal, float, str]) -> FinanceState:
    """
    Pay into a pot.

    ``current`` never passes ``target``. Non-positive amounts are ignored
    so a pot never goes down through this action.
    """
    amount = Decimal(str(amount))
    if amount <= 0:
        return state
    pot = next((p for p in state.pots if p.id == pot_id), None)
    if pot is None:
        return state
    new_current = min(pot.target, pot.current + amount)
    return state.model_copy(update={"pots": _replace(state.pots, pot_id, {"current": new_current})})


def delete_pot(state: FinanceState, pot_id: str) -> FinanceState:
    return state.model_copy(update={"pots": _without(state.pots, pot_id)})


# =============================================================================
# USERS & PREFERENCES
# =============================================================================

def add_user(state: FinanceState, user: User) -> FinanceState:
    return state.model_copy(update={"users": state.users + (user,)})


def delete_user(state: FinanceState, user_id: str) -> FinanceState:
    """Remove a user. The seed owner cannot be removed."""
    if user_id == SEED_OWNER_ID:
        return state
    return state.model_copy(update={"users": _without(state.users, user_id)})


def rename_current_user(state: FinanceState, name: str) -> FinanceState:
    if not _has(state.users, state.current_user):
        return state
    return state.model_copy(
        update={"users": _replace(state.users, state.current_user, {"name": name})}
    )


def update_preferences(
    state: FinanceState,
    currency: Optional[str] = None,
    dark_mode: Optional[bool] = None,
) -> FinanceState:
    changes: dict[str, Any] = {}
    if currency is not None:
        changes["currency"] = currency
    if dark_mode is not None:
        changes["dark_mode"] = dark_mode
    if not changes:
        return state
    return state.model_copy(update={"settings": _revise(state.settings, changes)})
