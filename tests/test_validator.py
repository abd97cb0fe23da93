"""Tests for form draft validation."""

import pytest

from fintrack.validation import EntryValidator


@pytest.fixture
def validator(seed):
    return EntryValidator(seed)


class TestAccountDraft:
    """Tests for account drafts."""

    def test_valid(self, validator):
        assert validator.validate_account("ISA", "100").is_valid

    def test_blank_name(self, validator):
        result = validator.validate_account("   ")
        assert not result.is_valid
        assert result.errors[0].field == "name"

    def test_bad_balance(self, validator):
        result = validator.validate_account("ISA", "lots")
        assert [i.field for i in result.errors] == ["balance"]

    def test_huge_balance(self, validator):
        result = validator.validate_account("ISA", "1e30")
        assert not result.is_valid
        assert result.errors[0].message == "Balance is too large"


class TestTransactionDraft:
    """Tests for transaction drafts."""

    def test_valid(self, validator):
        result = validator.validate_transaction("Lunch", "9.99", "a1", "Food", "Restaurants")
        assert result.is_valid
        assert result.issues == []

    def test_required_fields(self, validator):
        result = validator.validate_transaction("", "")
        assert {i.field for i in result.errors} == {"description", "amount"}

    def test_zero_amount(self, validator):
        result = validator.validate_transaction("Lunch", "0")
        assert result.errors[0].issue_type == "invalid_value"

    def test_unknown_category_is_warning(self, validator):
        result = validator.validate_transaction("Lunch", "5", category="Snacks")
        assert result.is_valid
        assert result.warnings[0].field == "category"

    def test_mismatched_subcategory_is_warning(self, validator):
        result = validator.validate_transaction("Lunch", "5", category="Food", sub_category="Fuel")
        assert result.is_valid
        assert result.warnings[0].field == "sub_category"

    def test_unknown_account_is_warning(self, validator):
        result = validator.validate_transaction("Lunch", "5", account_id="gone")
        assert result.is_valid
        assert result.warnings[0].issue_type == "unknown_reference"

    def test_account_not_checked_without_state(self):
        result = EntryValidator().validate_transaction("Lunch", "5", account_id="gone")
        assert result.issues == []

    @pytest.mark.parametrize("amount", ["1e30", "-1e15", "99999999999999999999"])
    def test_huge_amount_rejected(self, validator, amount):
        """Amounts the money type cannot hold never reach build_transaction."""
        result = validator.validate_transaction("Bonus", amount, "a1", "Income", "Salary")
        assert not result.is_valid
        assert [i.field for i in result.errors] == ["amount"]

    def test_large_but_representable_amount_passes(self, validator):
        assert validator.validate_transaction("House", "999999999999.99", "a1").is_valid


class TestPotDraft:
    """Tests for pot drafts."""

    def test_valid(self, validator):
        assert validator.validate_pot("Car", "1000", "0").is_valid

    @pytest.mark.parametrize("target", ["0", "-5"])
    def test_target_must_be_positive(self, validator, target):
        result = validator.validate_pot("Car", target)
        assert result.errors[0].field == "target"

    def test_missing_target(self, validator):
        assert validator.validate_pot("Car", None).errors[0].issue_type == "missing"

    def test_negative_current(self, validator):
        assert validator.validate_pot("Car", "10", "-1").errors[0].field == "current"

    @pytest.mark.parametrize("current", ["abc", "NaN", "1..2"])
    def test_non_numeric_current(self, validator, current):
        """A current amount that is not a number blocks the pot."""
        result = validator.validate_pot("Trip", "100", current)
        assert not result.is_valid
        assert result.errors[0].field == "current"
        assert result.errors[0].issue_type == "invalid_value"

    @pytest.mark.parametrize("current", [None, ""])
    def test_blank_current_allowed(self, validator, current):
        assert validator.validate_pot("Trip", "100", current).is_valid

    def test_huge_target_and_current(self, validator):
        assert validator.validate_pot("Moon", "1e30").errors[0].field == "target"
        assert validator.validate_pot("Moon", "100", "1e30").errors[0].field == "current"

    def test_current_above_target_warns(self, validator):
        result = validator.validate_pot("Car", "10", "20")
        assert result.is_valid
        assert result.warnings[0].issue_type == "clamped"


class TestUserDraft:
    """Tests for user drafts."""

    def test_blank_name(self, validator):
        assert not validator.validate_user("").is_valid

    def test_odd_email_warns(self, validator):
        result = validator.validate_user("Alex", "alex.example.com")
        assert result.is_valid
        assert result.warnings[0].field == "email"


class TestSummary:
    """Tests for the user-facing summary."""

    def test_empty_when_clean(self, validator):
        assert validator.get_user_friendly_summary(validator.validate_user("Alex")) == ""

    def test_errors_before_warnings(self, validator):
        result = validator.validate_transaction("", "5", category="Snacks")
        lines = validator.get_user_friendly_summary(result).splitlines()
        assert lines[0].startswith("❌")
        assert lines[1].startswith("⚠️")
