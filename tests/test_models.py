"""
Tests for FinTrack

Test strategy:
1. Unit tests for individual components (models, queries, calculators)
2. Integration tests for the controller (with in-memory stores)
3. No real file system outside pytest's tmp_path
"""

import json
from decimal import Decimal

import pytest
from pydantic import ValidationError

from fintrack.models import (
    CATEGORIES,
    DEFAULT_CATEGORY,
    Account,
    AccountType,
    FinanceState,
    Mode,
    Pot,
    Transaction,
    User,
    UserRole,
    category_names,
    default_state,
    default_subcategory,
    new_id,
    subcategories_for,
    to_cents,
)
from fintrack.models.categories import is_valid_pair
from fintrack.models.reports import ValidationIssue, ValidationResult


class TestEntityModels:
    """Tests for the entity Pydantic models."""

    def test_account_defaults(self):
        """Test Account model defaults."""
        account = Account(name="Current")
        assert account.type == AccountType.CHECKING
        assert account.balance == Decimal("0.00")
        assert account.currency == "£"
        assert account.is_personal is True
        assert account.interest_rate is None
        assert len(account.id) == 8

    def test_account_strips_whitespace(self):
        """Test that whitespace is stripped from names."""
        account = Account(name="  Monzo  ")
        assert account.name == "Monzo"

    def test_account_requires_name(self):
        """Test that an empty name is rejected."""
        with pytest.raises(ValidationError):
            Account(name="")

    def test_money_is_quantized_to_cents(self):
        """Test that money rounds half up to two places."""
        account = Account(name="A", balance="10.005")
        assert account.balance == Decimal("10.01")

    def test_money_too_large_for_cents_rejected(self):
        """Test that a value with more digits than cents can hold is a validation error."""
        with pytest.raises(ValueError):
            to_cents(Decimal("1e30"))
        with pytest.raises(ValidationError):
            Account(name="A", balance="1e30")

    def test_negative_balance_is_debt(self):
        """Test the is_debt helper."""
        assert Account(name="Card", balance=-1).is_debt
        assert not Account(name="Cash", balance=0).is_debt

    def test_models_are_frozen(self):
        """Test that entities cannot be edited in place."""
        account = Account(name="A")
        with pytest.raises(ValidationError):
            account.name = "B"

    def test_transaction_month(self):
        """Test the YYYY-MM month key."""
        tx = Transaction(account_id="a1", date="2025-02-15", amount=-1)
        assert tx.month == "2025-02"

    def test_transaction_with_empty_date(self):
        """Test that imported rows without a date are accepted."""
        tx = Transaction(account_id="a1", amount=5)
        assert tx.date == ""
        assert tx.month == ""

    def test_pot_rejects_current_above_target(self):
        """Test that a pot cannot be over-filled."""
        with pytest.raises(ValidationError):
            Pot(name="Holiday", target=100, current=150)

    def test_pot_rejects_non_positive_target(self):
        """Test that a pot needs a positive target."""
        with pytest.raises(ValidationError):
            Pot(name="Holiday", target=0)

    def test_pot_remaining(self):
        """Test remaining amount."""
        pot = Pot(name="Holiday", target=3000, current=800)
        assert pot.remaining == Decimal("2200.00")

    def test_user_default_role(self):
        """Test that new users are viewers."""
        assert User(name="Sam").role == UserRole.VIEWER

    def test_mode_flags(self):
        """Test Mode.is_personal."""
        assert Mode.PERSONAL.is_personal
        assert not Mode.BUSINESS.is_personal

    def test_account_type_labels(self):
        """Test display labels."""
        assert AccountType.CHECKING.label == "Current"
        assert AccountType.CREDIT_CARD.label == "Credit Card"

    def test_new_id_format(self):
        """Test generated ids are short base-36 strings."""
        ids = {new_id() for _ in range(50)}
        assert len(ids) == 50
        assert all(len(i) == 8 and i.isalnum() and i == i.lower() for i in ids)


class TestRootDocument:
    """Tests for FinanceState serialization."""

    def test_document_uses_camel_case_keys(self, seed):
        """Test the stored key names."""
        doc = seed.to_document()
        assert doc["currentUser"] == "u1"
        tx = doc["transactions"][0]
        assert tx["accountId"] == "a1"
        assert tx["subCategory"] == "Groceries"
        assert tx["isPersonal"] is True
        assert doc["settings"] == {"currency": "£", "darkMode": True}

    def test_money_serializes_as_number(self, seed):
        """Test that amounts are plain JSON numbers."""
        doc = json.loads(seed.to_json())
        assert doc["transactions"][0]["amount"] == -65.4
        assert doc["accounts"][2]["creditLimit"] == 5000.0

    def test_unset_optionals_are_omitted(self, seed):
        """Test that None fields do not appear in the document."""
        doc = seed.to_document()
        assert "interestRate" not in doc["accounts"][0]
        assert "creditLimit" not in doc["accounts"][0]

    def test_json_round_trip(self, seed):
        """Test that a saved document loads back unchanged."""
        assert FinanceState.model_validate_json(seed.to_json()) == seed

    def test_lookup_helpers(self, seed):
        """Test account_by_id and user_by_id."""
        assert seed.account_by_id("a2").name == "Monzo Savings"
        assert seed.account_by_id("missing") is None
        assert seed.user_by_id("u1").role == UserRole.OWNER


class TestSeed:
    """Tests for the first-run document."""

    def test_seed_contents(self, seed):
        """Test seed sizes and owner."""
        assert [a.id for a in seed.accounts] == ["a1", "a2", "a3", "a4", "a5"]
        assert [t.id for t in seed.transactions] == ["t1", "t2", "t3", "t4", "t5"]
        assert [p.id for p in seed.pots] == ["p1", "p2"]
        assert seed.current_user == "u1"

    def test_only_business_account_is_business(self, seed):
        """Test the mode split of the seed."""
        business = [a.id for a in seed.accounts if not a.is_personal]
        assert business == ["a5"]

    def test_seed_is_fresh_each_call(self):
        """Test that default_state builds equal but separate documents."""
        assert default_state() == default_state()
        assert default_state() is not default_state()


class TestCategories:
    """Tests for the category taxonomy."""

    def test_every_category_has_subcategories(self):
        """Test the table shape."""
        assert len(CATEGORIES) == 11
        assert all(CATEGORIES[name] for name in category_names())

    def test_default_category_exists(self):
        """Test that the fallback category is in the table."""
        assert DEFAULT_CATEGORY in CATEGORIES
        assert "Unknown" in subcategories_for(DEFAULT_CATEGORY)

    def test_default_subcategory(self):
        """Test the form's auto-selected sub-category."""
        assert default_subcategory("Food") == "Groceries"
        assert default_subcategory("Nope") == ""

    def test_is_valid_pair(self):
        """Test category/sub-category membership."""
        assert is_valid_pair("Transport", "Fuel")
        assert not is_valid_pair("Transport", "Groceries")

    def test_table_is_read_only(self):
        """Test that the taxonomy cannot be modified."""
        with pytest.raises(TypeError):
            CATEGORIES["New"] = ("X",)


class TestValidationModels:
    """Tests for validation result models."""

    def test_validation_issue_creation(self):
        """Test ValidationIssue model creation."""
        issue = ValidationIssue(
            field="amount",
            issue_type="missing",
            message="Amount is required",
            severity="error",
        )
        assert issue.severity == "error"

    def test_validation_issue_rejects_unknown_severity(self):
        """Test the severity pattern."""
        with pytest.raises(ValidationError):
            ValidationIssue(field="x", issue_type="y", message="z", severity="fatal")

    def test_result_splits_errors_and_warnings(self):
        """Test ValidationResult helpers."""
        result = ValidationResult(entity="transaction", issues=[
            ValidationIssue(field="a", issue_type="missing", message="m", severity="error"),
            ValidationIssue(field="b", issue_type="unknown_category", message="m", severity="warning"),
        ])
        assert len(result.errors) == 1
        assert len(result.warnings) == 1
        assert not result.is_valid

    def test_empty_result_is_valid(self):
        """Test that no issues means valid."""
        assert ValidationResult(entity="pot").is_valid
