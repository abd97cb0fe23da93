"""Form validation package."""

from fintrack.validation.validator import EntryValidator

__all__ = ["EntryValidator"]
