"""State transition commands."""

from fintrack.state.commands import (
    add_account,
    add_pot,
    add_to_pot,
    add_transaction,
    add_user,
    append_transactions,
    build_pot,
    build_transaction,
    delete_account,
    delete_pot,
    delete_transaction,
    delete_user,
    rename_current_user,
    replace_transaction,
    set_interest_rate,
    update_account,
    update_preferences,
    update_transaction,
)

__all__ = [
    "add_account",
    "add_pot",
    "add_to_pot",
    "add_transaction",
    "add_user",
    "append_transactions",
    "build_pot",
    "build_transaction",
    "delete_account",
    "delete_pot",
    "delete_transaction",
    "delete_user",
    "rename_current_user",
    "replace_transaction",
    "set_interest_rate",
    "update_account",
    "update_preferences",
    "update_transaction",
]
