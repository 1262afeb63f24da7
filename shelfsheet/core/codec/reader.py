import csv
import io
import logging
import zipfile
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from ..canonical.fields import FieldKind
from ..errors import CoercionError, MalformedSheet
from ..schema.columns import Accessor, Column, Getter, Lookup
from ..schema.reflect import derive_columns
from .coercion import EMPTY, from_cell, to_field_value
from .utils import decode_csv_bytes
from .writer import TabularFormat

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SheetRow(Mapping[str, Any]):
    """Decoded values of one data row, keyed by column name in sheet order."""

    index: int
    values: dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        return self.values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def get_property(self, name: str) -> Any:
        try:
            return self.values[name]
        except KeyError:
            raise KeyError(f"Row {self.index} has no column named '{name}'") from None


@dataclass(frozen=True)
class DecodedSheet:
    columns: tuple[Column, ...]
    rows: list[SheetRow]

    @property
    def header(self) -> list[str]:
        return [column.name for column in self.columns]


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _is_absent(value: Any) -> bool:
    return value is None or value == EMPTY


def _last_data_row(raw_rows: list[list[Any]]) -> int:
    # Worksheets may report formatted but empty rows past the last record.
    last = len(raw_rows)
    while last > 1 and all(_is_absent(value) for value in raw_rows[last - 1]):
        last -= 1
    return last


def _read_xlsx_rows(data: bytes) -> list[list[Any]]:
    try:
        workbook = load_workbook(io.BytesIO(data), read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError, ValueError) as exc:
        raise MalformedSheet(f"Workbook cannot be opened: {exc}") from exc
    try:
        if not workbook.worksheets:
            raise MalformedSheet("No worksheet found.")
        sheet = workbook.worksheets[0]
        return [list(row) for row in sheet.iter_rows(values_only=True)]
    finally:
        workbook.close()


def _read_csv_rows(data: bytes) -> list[list[Any]]:
    try:
        text = decode_csv_bytes(data)
    except ValueError as exc:
        raise MalformedSheet(str(exc)) from exc
    return [row for row in csv.reader(io.StringIO(text)) if row]


def read_raw_rows(data: bytes, *, fmt: TabularFormat = "xlsx") -> list[list[Any]]:
    if fmt == "xlsx":
        return _read_xlsx_rows(data)
    if fmt == "csv":
        return _read_csv_rows(data)
    raise ValueError(f"Unsupported tabular format: {fmt}")


def _header_of(raw_rows: list[list[Any]]) -> list[str]:
    if not raw_rows:
        raise MalformedSheet("Sheet is empty; a header row is required.", row=0)
    header = list(raw_rows[0])
    while header and _is_blank(header[-1]):
        header.pop()
    if not header:
        raise MalformedSheet("Header row is empty.", row=0)
    for position, name in enumerate(header, start=1):
        if _is_blank(name):
            raise MalformedSheet(f"Header cell {position} is blank.", row=0)
    return [str(name).strip() for name in header]


def _fit_row(raw: list[Any], width: int, *, row_index: int, fmt: TabularFormat) -> list[Any]:
    cells = list(raw)
    if fmt == "csv" and len(cells) != width:
        raise MalformedSheet(f"Row has {len(cells)} cell(s) but the header has {width}.", row=row_index)
    overflow = cells[width:]
    if any(not _is_blank(value) for value in overflow):
        raise MalformedSheet(f"Row has values beyond the {width} header column(s).", row=row_index)
    cells = cells[:width]
    if len(cells) < width:
        cells.extend([None] * (width - len(cells)))
    return cells


def decode_sheet(
    data: bytes,
    record_type: type,
    start_row: int = 1,
    *,
    fmt: TabularFormat = "xlsx",
    replace_pairs: Mapping[str, str] | None = None,
    accessors: Mapping[str, Accessor | Getter] | None = None,
    lookups: Mapping[str, Lookup] | None = None,
) -> DecodedSheet:
    if start_row < 1:
        raise ValueError("start_row must point at a data row (1 or greater).")

    raw_rows = read_raw_rows(data, fmt=fmt)
    header = _header_of(raw_rows)
    columns = derive_columns(
        record_type,
        header,
        replace_pairs=replace_pairs,
        accessors=accessors,
        lookups=lookups,
    )

    rows: list[SheetRow] = []
    end = _last_data_row(raw_rows) if fmt == "xlsx" else len(raw_rows)
    for row_index in range(start_row, end):
        cells = _fit_row(raw_rows[row_index], len(columns), row_index=row_index, fmt=fmt)
        values: dict[str, Any] = {}
        for column, cell in zip(columns, cells):
            try:
                values[column.name] = from_cell(cell, column)
            except CoercionError as exc:
                raise MalformedSheet(exc.reason, row=row_index, column=column.name) from exc
        rows.append(SheetRow(index=row_index, values=values))

    logger.debug("Decoded %d row(s) of %s from %s", len(rows), record_type.__name__, fmt)
    return DecodedSheet(columns=columns, rows=rows)


def decode(
    data: bytes,
    record_type: type,
    start_row: int = 1,
    *,
    fmt: TabularFormat = "xlsx",
    replace_pairs: Mapping[str, str] | None = None,
    accessors: Mapping[str, Accessor | Getter] | None = None,
    lookups: Mapping[str, Lookup] | None = None,
) -> list[SheetRow]:
    """Read rows ``start_row..end`` into field-name/value pairs.

    Column order comes from the sheet's own header row. Values are the
    logical cell values: enum codes, serial dates, identifier text, lookup
    ids and ``""`` for empty cells.
    """
    return decode_sheet(
        data,
        record_type,
        start_row,
        fmt=fmt,
        replace_pairs=replace_pairs,
        accessors=accessors,
        lookups=lookups,
    ).rows


def populate_record(record: Any, row: SheetRow, columns: Sequence[Column]) -> Any:
    for column in columns:
        if column.setter is None or column.kind is FieldKind.REFERENCE:
            continue
        if column.name not in row:
            continue
        value = row[column.name]
        try:
            column.setter(record, to_field_value(value, column))
        except (TypeError, ValueError) as exc:
            raise MalformedSheet(str(exc), row=row.index, column=column.name) from exc
    return record


def decode_records(
    data: bytes,
    record_type: type,
    start_row: int = 1,
    *,
    fmt: TabularFormat = "xlsx",
    replace_pairs: Mapping[str, str] | None = None,
    accessors: Mapping[str, Accessor | Getter] | None = None,
    lookups: Mapping[str, Lookup] | None = None,
) -> list[Any]:
    """Decode rows into fresh ``record_type`` instances.

    Fields without a column keep the record type's defaults; nested
    references and synthetic columns without a setter are skipped.
    """
    sheet = decode_sheet(
        data,
        record_type,
        start_row,
        fmt=fmt,
        replace_pairs=replace_pairs,
        accessors=accessors,
        lookups=lookups,
    )
    return [populate_record(record_type(), row, sheet.columns) for row in sheet.rows]


__all__ = [
    "DecodedSheet",
    "EMPTY",
    "SheetRow",
    "decode",
    "decode_records",
    "decode_sheet",
    "populate_record",
    "read_raw_rows",
]
