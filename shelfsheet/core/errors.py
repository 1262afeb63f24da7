"""Error taxonomy for sheet export/import.

Every error is a ``ValueError`` so callers that already guard input failures
with ``except ValueError`` keep working.
"""


class ShelfsheetError(ValueError):
    pass


class SchemaMismatch(ShelfsheetError):
    def __init__(self, column: str, *, record_type: str | None = None, reason: str = "") -> None:
        self.column = column
        self.record_type = record_type
        target = f" on {record_type}" if record_type else ""
        message = reason or f"no matching field{target} and no accessor registered"
        super().__init__(f"Column '{column}': {message}.")


class CoercionError(ShelfsheetError):
    def __init__(self, column: str, *, record_index: int | None = None, reason: str = "") -> None:
        self.column = column
        self.record_index = record_index
        self.reason = reason
        location = f"Column '{column}'"
        if record_index is not None:
            location = f"{location} of record {record_index}"
        super().__init__(f"{location}: {reason or 'value cannot be coerced'}.")


class MalformedSheet(ShelfsheetError):
    def __init__(self, message: str, *, row: int | None = None, column: str | None = None) -> None:
        self.row = row
        self.column = column
        prefix = ""
        if row is not None:
            prefix = f"Row {row}"
            if column:
                prefix = f"{prefix}, column '{column}'"
            prefix = f"{prefix}: "
        super().__init__(f"{prefix}{message}")


class MissingColumn(ShelfsheetError):
    def __init__(self, field_name: str, *, record_type: str | None = None) -> None:
        self.field_name = field_name
        self.record_type = record_type
        qualified = f"{record_type}.{field_name}" if record_type else field_name
        super().__init__(f"The field '{qualified}' is not present in the sheet.")


__all__ = [
    "CoercionError",
    "MalformedSheet",
    "MissingColumn",
    "SchemaMismatch",
    "ShelfsheetError",
]
