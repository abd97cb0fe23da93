"""Import package."""

from fintrack.importers.csv_mapper import (
    ColumnMapping,
    column_options,
    import_csv,
    map_rows,
    parse_amount,
    preview_grid,
    read_grid,
)

__all__ = [
    "ColumnMapping",
    "column_options",
    "import_csv",
    "map_rows",
    "parse_amount",
    "preview_grid",
    "read_grid",
]
