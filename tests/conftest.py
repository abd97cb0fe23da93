"""Shared fixtures and builders."""

from decimal import Decimal

import pytest

from fintrack.config import get_settings
from fintrack.models import Account, AccountType, Transaction, TransactionType, default_state


def make_tx(tx_id, amount, date="2025-02-01", description="Test", category="Food",
            sub_category="", account_id="a1", is_personal=True):
    amount = Decimal(str(amount))
    return Transaction(
        id=tx_id,
        account_id=account_id,
        date=date,
        description=description,
        amount=amount,
        category=category,
        sub_category=sub_category,
        type=TransactionType.INCOME if amount > 0 else TransactionType.EXPENSE,
        is_personal=is_personal,
    )


def make_account(acc_id, balance, type=AccountType.CHECKING, is_personal=True, name=None):
    return Account(
        id=acc_id,
        name=name or acc_id,
        type=type,
        balance=Decimal(str(balance)),
        is_personal=is_personal,
    )


@pytest.fixture
def seed():
    return default_state()


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point storage at a temp dir and drop any cached settings."""
    monkeypatch.setenv("FINTRACK_STORAGE_DATA_DIR", str(tmp_path / "data"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
