import io
import logging
from collections.abc import Iterable, Sequence
from typing import Any, Literal

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter, quote_sheetname
from openpyxl.worksheet.datavalidation import DataValidation

from ..canonical.fields import FieldKind
from ..errors import CoercionError, SchemaMismatch
from ..schema.columns import Column
from .coercion import EMPTY, cell_text, to_cell
from .utils import rows_to_csv

logger = logging.getLogger(__name__)

TabularFormat = Literal["xlsx", "csv"]

DEFAULT_SHEET_TITLE = "Sheet1"
LOOKUP_SHEET_TITLE = "Lookups"
DEFAULT_DATE_NUMBER_FORMAT = "yyyy-mm-dd hh:mm:ss"


def _require_unique_names(columns: Sequence[Column]) -> None:
    seen: set[str] = set()
    for column in columns:
        if column.name in seen:
            raise SchemaMismatch(column.name, reason="column name is duplicated")
        seen.add(column.name)


def coerce_rows(records: Iterable[Any], columns: Sequence[Column], *, strict: bool = False) -> list[list[Any]]:
    """Coerce every record before any output is produced."""
    rows: list[list[Any]] = []
    for index, record in enumerate(records):
        row: list[Any] = []
        for column in columns:
            try:
                row.append(to_cell(column.value_of(record), column, strict=strict))
            except CoercionError as exc:
                raise CoercionError(column.name, record_index=index, reason=exc.reason) from exc
            except (AttributeError, TypeError, ValueError) as exc:
                raise CoercionError(column.name, record_index=index, reason=str(exc)) from exc
        rows.append(row)
    return rows


def _add_lookup_validations(workbook: Workbook, sheet: Any, columns: Sequence[Column], row_count: int) -> None:
    lookup_columns = [
        (position, column)
        for position, column in enumerate(columns, start=1)
        if column.kind is FieldKind.LOOKUP and column.lookup is not None and column.lookup.names
    ]
    if not lookup_columns:
        return

    lookup_sheet = workbook.create_sheet(LOOKUP_SHEET_TITLE)
    lookup_sheet.sheet_state = "hidden"
    last_row = max(row_count + 1, 2)
    for lookup_index, (position, column) in enumerate(lookup_columns, start=1):
        names = column.lookup.names
        lookup_letter = get_column_letter(lookup_index)
        lookup_sheet.cell(row=1, column=lookup_index, value=column.name)
        for offset, name in enumerate(names, start=2):
            lookup_sheet.cell(row=offset, column=lookup_index, value=name)

        source = f"{quote_sheetname(LOOKUP_SHEET_TITLE)}!${lookup_letter}$2:${lookup_letter}${len(names) + 1}"
        validation = DataValidation(type="list", formula1=source, allow_blank=True)
        validation.error = f"Pick a value from the {column.name} list."
        validation.showErrorMessage = False
        sheet.add_data_validation(validation)
        letter = get_column_letter(position)
        validation.add(f"{letter}2:{letter}{last_row}")


def _require_writable(columns: Sequence[Column], row: list[Any], *, record_index: int) -> None:
    for column, value in zip(columns, row):
        if isinstance(value, str) and ILLEGAL_CHARACTERS_RE.search(value):
            raise CoercionError(column.name, record_index=record_index, reason="text contains control characters")


def write_xlsx(
    columns: Sequence[Column],
    rows: list[list[Any]],
    *,
    sheet_title: str = DEFAULT_SHEET_TITLE,
    date_number_format: str = DEFAULT_DATE_NUMBER_FORMAT,
    lookups: bool = True,
) -> bytes:
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = sheet_title

    sheet.append([column.name for column in columns])
    for cell in sheet[1]:
        cell.font = Font(bold=True)
    sheet.freeze_panes = "A2"

    date_positions = [
        position for position, column in enumerate(columns, start=1) if column.kind is FieldKind.DATETIME
    ]
    for row_number, row in enumerate(rows, start=2):
        _require_writable(columns, row, record_index=row_number - 2)
        sheet.append([None if value == EMPTY else value for value in row])
        for position, value in enumerate(row, start=1):
            if isinstance(value, str) and value.startswith("="):
                sheet.cell(row=row_number, column=position).data_type = "s"
        for position in date_positions:
            cell = sheet.cell(row=row_number, column=position)
            if cell.value is not None:
                cell.number_format = date_number_format

    if lookups:
        _add_lookup_validations(workbook, sheet, columns, len(rows))

    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def write_csv(columns: Sequence[Column], rows: list[list[Any]]) -> bytes:
    text_rows = [[cell_text(value) for value in row] for row in rows]
    return rows_to_csv(text_rows, [column.name for column in columns]).encode("utf-8")


def encode(
    records: Iterable[Any],
    columns: Sequence[Column],
    *,
    fmt: TabularFormat = "xlsx",
    sheet_title: str = DEFAULT_SHEET_TITLE,
    date_number_format: str = DEFAULT_DATE_NUMBER_FORMAT,
    strict: bool = False,
    lookups: bool = True,
) -> bytes:
    """Write a header row followed by one row per record.

    All records are coerced up front, so a failing value raises
    ``CoercionError`` before any bytes are produced.
    """
    if fmt not in ("xlsx", "csv"):
        raise ValueError(f"Unsupported tabular format: {fmt}")
    columns = list(columns)
    if not columns:
        raise SchemaMismatch("", reason="at least one column is required")
    _require_unique_names(columns)
    rows = coerce_rows(records, columns, strict=strict)
    logger.debug("Encoding %d row(s) x %d column(s) as %s", len(rows), len(columns), fmt)

    if fmt == "xlsx":
        return write_xlsx(
            columns,
            rows,
            sheet_title=sheet_title,
            date_number_format=date_number_format,
            lookups=lookups,
        )
    return write_csv(columns, rows)


__all__ = [
    "DEFAULT_DATE_NUMBER_FORMAT",
    "DEFAULT_SHEET_TITLE",
    "LOOKUP_SHEET_TITLE",
    "TabularFormat",
    "coerce_rows",
    "encode",
    "write_csv",
    "write_xlsx",
]
