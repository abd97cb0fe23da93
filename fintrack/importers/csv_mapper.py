"""
CSV Import Mapper

Turns a bank export into candidate transactions.

KNOWN LIMITATIONS (accepted, not goals):
- Lines are split on "\\n" and cells on ","; quoted fields and embedded
  commas are not supported.
- The column mapping is chosen by the user, never detected.
- Imported rows are appended as-is; there is no de-duplication against
  existing transactions.

DESIGN DECISION: The preview shows the header plus the first few data
lines, but the import itself maps the WHOLE file. The preview cap is a
display concern only.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from fintrack.models.categories import DEFAULT_CATEGORY
from fintrack.models.finance import (
    Mode,
    Transaction,
    TransactionType,
    new_id,
    to_cents,
)


Grid = list[list[str]]

IMPORT_CATEGORY = DEFAULT_CATEGORY
IMPORT_SUBCATEGORY = "Unknown"
PREVIEW_ROWS = 10

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_LEADING_NUMBER = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


class ColumnMapping(BaseModel):
    """Zero-based column index of each imported field."""

    model_config = ConfigDict(frozen=True)

    date: int = Field(default=0, ge=0)
    description: int = Field(default=1, ge=0)
    amount: int = Field(default=2, ge=0)


def read_grid(text: str, limit: Optional[int] = None) -> Grid:
    """
    Split raw file text into rows of cells.

    Blank lines are skipped. ``limit`` caps the number of lines returned,
    header included.
    """
    lines = [line for line in text.split("\n") if line]
    if limit is not None:
        lines = lines[:limit]
    return [line.split(",") for line in lines]


def preview_grid(text: str, rows: int = PREVIEW_ROWS) -> Grid:
    """Header plus the first ``rows`` data lines."""
    return read_grid(text, limit=rows + 1)


def column_options(header: Sequence[str]) -> list[tuple[int, str]]:
    """(index, label) pairs for the column pickers, e.g. ``(0, "Col 1: Date")``."""
    return [(i, f"Col {i + 1}: {cell.strip() or '?'}") for i, cell in enumerate(header)]


def parse_amount(cell: str) -> Decimal:
    """
    Parse a money cell leniently.

    Everything except digits, "." and "-" is stripped, then the leading
    number is read and rounded to cents. Anything unparseable, or too
    large to hold cents, is zero.
    """
    cleaned = _NON_NUMERIC.sub("", cell or "")
    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return Decimal("0")
    try:
        return to_cents(Decimal(match.group()))
    except (InvalidOperation, ValueError):
        return Decimal("0")


def _cell(row: Sequence[str], index: int) -> str:
    return row[index] if index < len(row) else ""


def map_row(
    row: Sequence[str],
    mapping: ColumnMapping,
    account_id: str,
    mode: Union[Mode, str],
) -> Transaction:
    """Build one candidate transaction from a data row."""
    amount = parse_amount(_cell(row, mapping.amount))
    return Transaction(
        id=new_id(),
        account_id=account_id,
        date=_cell(row, mapping.date).strip(),
        description=_cell(row, mapping.description).strip(),
        amount=amount,
        category=IMPORT_CATEGORY,
        sub_category=IMPORT_SUBCATEGORY,
        type=TransactionType.INCOME if amount >= 0 else TransactionType.EXPENSE,
        is_personal=Mode(mode).is_personal,
    )


def map_rows(
    grid: Sequence[Sequence[str]],
    mapping: ColumnMapping,
    account_id: str,
    mode: Union[Mode, str],
) -> list[Transaction]:
    """
    Map every data row (row 0 is the header) and drop the unusable ones.

    A candidate is dropped when its description is empty or its amount is
    zero. Amounts are already rounded to cents, so a cell under half a
    cent (such as "0.004") counts as zero and its row is dropped. Empty
    dates are kept.
    """
    candidates = (map_row(row, mapping, account_id, mode) for row in grid[1:])
    return [t for t in candidates if t.description and t.amount != 0]


def import_csv(
    text: str,
    mapping: ColumnMapping,
    account_id: str,
    mode: Union[Mode, str],
) -> list[Transaction]:
    """Map the whole file into new transactions."""
    return map_rows(read_grid(text), mapping, account_id, mode)
