"""
Form Draft Validation

Checks what a user typed into an entry form before any command runs.

IMPORTANT: Validation NEVER silently fixes issues. It reports them and
the caller decides; the UI only dispatches a command when the result has
no errors.

Severity:
- error   - the command would build an invalid entity (missing name,
            zero amount, non-positive target)
- warning - the entity is valid but probably not what was meant
            (unknown category, account id that no longer exists)
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from fintrack.models.categories import CATEGORIES, is_valid_pair
from fintrack.models.finance import FinanceState
from fintrack.models.reports import ValidationIssue, ValidationResult

# Largest magnitude a form may enter. Sums of many such values still fit
# the default decimal context at cent precision.
MAX_AMOUNT = Decimal("1e15")


def _as_decimal(value: Any) -> Optional[Decimal]:
    if value is None or value == "":
        return None
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return number if number.is_finite() else None


def _missing(field: str, message: str) -> ValidationIssue:
    return ValidationIssue(field=field, issue_type="missing", message=message, severity="error")


def _not_a_number(field: str, label: str, value: Any) -> ValidationIssue:
    return ValidationIssue(
        field=field,
        issue_type="invalid_value",
        message=f"{label} '{value}' is not a number",
        severity="error",
    )


def _too_large(field: str, label: str) -> ValidationIssue:
    return ValidationIssue(
        field=field,
        issue_type="invalid_value",
        message=f"{label} is too large",
        severity="error",
    )


class EntryValidator:
    """
    Validates account, transaction, pot and user drafts.

    When a snapshot is given, references (the transaction's account) are
    checked against it too.
    """

    def __init__(self, state: Optional[FinanceState] = None):
        self._state = state

    def validate_account(self, name: str, balance: Any = 0) -> ValidationResult:
        issues = []
        if not (name or "").strip():
            issues.append(_missing("name", "Account name is required"))
        if balance not in (None, ""):
            value = _as_decimal(balance)
            if value is None:
                issues.append(_not_a_number("balance", "Balance", balance))
            elif abs(value) >= MAX_AMOUNT:
                issues.append(_too_large("balance", "Balance"))
        return ValidationResult(entity="account", issues=issues)

    def validate_transaction(
        self,
        description: str,
        amount: Any,
        account_id: str = "",
        category: str = "",
        sub_category: str = "",
    ) -> ValidationResult:
        issues = []

        if not (description or "").strip():
            issues.append(_missing("description", "Description is required"))

        value = _as_decimal(amount)
        if value is None:
            issues.append(_missing("amount", "Amount is required"))
        elif value == 0:
            issues.append(ValidationIssue(
                field="amount",
                issue_type="invalid_value",
                message="Amount must not be zero",
                severity="error",
            ))
        elif abs(value) >= MAX_AMOUNT:
            issues.append(_too_large("amount", "Amount"))

        if category and category not in CATEGORIES:
            issues.append(ValidationIssue(
                field="category",
                issue_type="unknown_category",
                message=f"'{category}' is not a known category",
                severity="warning",
            ))
        elif category and sub_category and not is_valid_pair(category, sub_category):
            issues.append(ValidationIssue(
                field="sub_category",
                issue_type="unknown_category",
                message=f"'{sub_category}' is not a sub-category of {category}",
                severity="warning",
            ))

        if (
            self._state is not None
            and account_id
            and self._state.account_by_id(account_id) is None
        ):
            issues.append(ValidationIssue(
                field="account_id",
                issue_type="unknown_reference",
                message=f"Account '{account_id}' does not exist",
                severity="warning",
            ))

        return ValidationResult(entity="transaction", issues=issues)

    def validate_pot(self, name: str, target: Any, current: Any = 0) -> ValidationResult:
        issues = []
        if not (name or "").strip():
            issues.append(_missing("name", "Pot name is required"))

        goal = _as_decimal(target)
        if goal is None:
            issues.append(_missing("target", "Target is required"))
        elif goal <= 0:
            issues.append(ValidationIssue(
                field="target",
                issue_type="invalid_value",
                message="Target must be greater than zero",
                severity="error",
            ))
        elif goal >= MAX_AMOUNT:
            issues.append(_too_large("target", "Target"))

        saved = _as_decimal(current)
        if saved is None and current not in (None, ""):
            issues.append(_not_a_number("current", "Current amount", current))
        elif saved is not None and saved < 0:
            issues.append(ValidationIssue(
                field="current",
                issue_type="invalid_value",
                message="Current amount cannot be negative",
                severity="error",
            ))
        elif saved is not None and saved >= MAX_AMOUNT:
            issues.append(_too_large("current", "Current amount"))
        elif saved is not None and goal is not None and goal > 0 and saved > goal:
            issues.append(ValidationIssue(
                field="current",
                issue_type="clamped",
                message="Current amount is above the target and will be capped",
                severity="warning",
            ))

        return ValidationResult(entity="pot", issues=issues)

    def validate_user(self, name: str, email: str = "") -> ValidationResult:
        issues = []
        if not (name or "").strip():
            issues.append(_missing("name", "Name is required"))
        if email and "@" not in email:
            issues.append(ValidationIssue(
                field="email",
                issue_type="invalid_format",
                message=f"'{email}' does not look like an email address",
                severity="warning",
            ))
        return ValidationResult(entity="user", issues=issues)

    def get_user_friendly_summary(self, result: ValidationResult) -> str:
        """One line per issue, errors first."""
        if result.is_valid and not result.warnings:
            return ""
        lines = [f"❌ {i.message}" for i in result.errors]
        lines += [f"⚠️ {i.message}" for i in result.warnings]
        return "\n".join(lines)
