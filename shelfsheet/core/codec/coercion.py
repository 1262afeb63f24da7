"""Conversions between record values and sheet cells.

Three representations are involved:

* the *field value* held by a record (``OrderStatus.COMPLETE``, ``datetime``,
  ``UUID``, a nested ``Country``);
* the *cell value* written to a sheet (``30``, a serial date, the GUID text,
  the country name, a lookup's display text);
* the *logical value* read back from a cell (``30``, the serial date, the
  GUID text, the lookup id, ``""`` for empty cells).

Dates use the Windows 1900 serial system: fractional days since 1899-12-30.
"""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any
from uuid import UUID

from openpyxl.utils.datetime import from_excel, to_excel

from ..canonical.fields import FieldKind
from ..errors import CoercionError
from ..schema.columns import Column
from .utils import format_bool, format_decimal, parse_bool

EMPTY = ""


def _fail(column: Column, reason: str) -> CoercionError:
    return CoercionError(column.name, reason=reason)


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _to_millisecond(value: datetime) -> datetime:
    # Worksheet readers resolve date cells to the millisecond.
    micro = value.microsecond
    if micro % 1000 == 0:
        return value
    return value.replace(microsecond=0) + timedelta(microseconds=round(micro, -3))


def to_serial(value: date | datetime) -> float:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        value = _to_millisecond(value)
    return float(to_excel(value))


def from_serial(serial: float) -> datetime:
    return from_excel(serial)


def _enum_code(value: Any, column: Column) -> int:
    if isinstance(value, Enum):
        if column.enum is not None and not isinstance(value, column.enum):
            raise _fail(column, f"{value!r} is not a {column.enum.__name__} member")
        return int(value.value)
    if not _is_int(value):
        raise _fail(column, f"expected an enum value, got {type(value).__name__}")
    if column.enum is not None:
        try:
            column.enum(value)
        except ValueError:
            raise _fail(column, f"{value} is not a valid {column.enum.__name__} code") from None
    return int(value)


def _reference_text(value: Any, column: Column) -> str:
    name = getattr(value, "name", None)
    if name is None:
        raise _fail(column, f"{type(value).__name__} has no display name")
    return str(name)


def to_cell(value: Any, column: Column, *, strict: bool = False) -> Any:
    """Convert a field value into the value written to the column's cell."""
    if value is None:
        return EMPTY

    kind = column.kind
    if kind is FieldKind.TEXT:
        if isinstance(value, Enum):
            return str(value.value)
        return value if isinstance(value, str) else str(value)
    if kind is FieldKind.INT:
        if isinstance(value, Enum) or not _is_int(value):
            raise _fail(column, f"expected an integer, got {type(value).__name__}")
        return int(value)
    if kind is FieldKind.BOOL:
        if not isinstance(value, bool):
            raise _fail(column, f"expected a boolean, got {type(value).__name__}")
        return value
    if kind is FieldKind.DECIMAL:
        if isinstance(value, Decimal):
            if not value.is_finite():
                raise _fail(column, f"{value} is not a finite number")
            return value
        if _is_int(value) or isinstance(value, float):
            return Decimal(str(value))
        raise _fail(column, f"expected a decimal, got {type(value).__name__}")
    if kind is FieldKind.ENUM:
        return _enum_code(value, column)
    if kind is FieldKind.DATETIME:
        if isinstance(value, (date, datetime)):
            return to_serial(value)
        raise _fail(column, f"expected a date, got {type(value).__name__}")
    if kind is FieldKind.GUID:
        if isinstance(value, UUID):
            return str(value)
        if isinstance(value, str):
            try:
                return str(UUID(value))
            except ValueError:
                raise _fail(column, f"'{value}' is not a valid identifier") from None
        raise _fail(column, f"expected an identifier, got {type(value).__name__}")
    if kind is FieldKind.REFERENCE:
        return _reference_text(value, column)
    if kind is FieldKind.LOOKUP:
        if not _is_int(value):
            raise _fail(column, f"expected a lookup id, got {type(value).__name__}")
        text = column.lookup.text_for(value) if column.lookup is not None else None
        if text is not None:
            return text
        if strict:
            raise _fail(column, f"id {value} has no entry in the lookup list")
        return int(value)
    raise _fail(column, f"unsupported column kind {kind!r}")


def normalize_value(value: Any, column: Column) -> Any:
    """Logical value that reading back ``to_cell(value)`` yields."""
    if column.kind is FieldKind.LOOKUP and value is not None:
        if not _is_int(value):
            raise _fail(column, f"expected a lookup id, got {type(value).__name__}")
        return int(value)
    return to_cell(value, column)


def _parse_integer(cell: Any, column: Column) -> int:
    if isinstance(cell, bool):
        raise _fail(column, "expected an integer, got a boolean")
    if _is_int(cell):
        return cell
    if isinstance(cell, float):
        if cell.is_integer():
            return int(cell)
        raise _fail(column, f"{cell} is not an integer")
    text = str(cell).strip()
    try:
        parsed = Decimal(text)
    except InvalidOperation:
        raise _fail(column, f"'{text}' is not an integer") from None
    if not parsed.is_finite() or parsed != parsed.to_integral_value():
        raise _fail(column, f"'{text}' is not an integer")
    return int(parsed)


def _parse_decimal(cell: Any, column: Column) -> Decimal:
    if isinstance(cell, bool):
        raise _fail(column, "expected a number, got a boolean")
    if isinstance(cell, Decimal):
        parsed = cell
    elif _is_int(cell) or isinstance(cell, float):
        parsed = Decimal(str(cell))
    else:
        text = str(cell).strip()
        try:
            parsed = Decimal(text)
        except InvalidOperation:
            raise _fail(column, f"'{text}' is not a number") from None
    if not parsed.is_finite():
        raise _fail(column, f"{parsed} is not a finite number")
    return parsed


def _parse_enum(cell: Any, column: Column) -> int:
    if isinstance(cell, str) and column.enum is not None:
        text = cell.strip()
        member = column.enum.__members__.get(text.upper())
        if member is not None:
            return int(member)
    code = _parse_integer(cell, column)
    return _enum_code(code, column)


def _parse_serial(cell: Any, column: Column) -> float:
    if isinstance(cell, (date, datetime)):
        return to_serial(cell)
    if isinstance(cell, bool):
        raise _fail(column, "expected a date, got a boolean")
    if _is_int(cell) or isinstance(cell, float):
        return float(cell)
    text = str(cell).strip()
    try:
        return float(text)
    except ValueError:
        pass
    try:
        return to_serial(datetime.fromisoformat(text))
    except ValueError:
        raise _fail(column, f"'{text}' is not a date") from None


def _parse_lookup(cell: Any, column: Column) -> int:
    if isinstance(cell, str) and column.lookup is not None:
        item_id = column.lookup.id_for(cell)
        if item_id is not None:
            return item_id
    try:
        return _parse_integer(cell, column)
    except CoercionError:
        raise _fail(column, f"'{cell}' is not in the lookup list") from None


def _text_of(cell: Any) -> str:
    if isinstance(cell, str):
        return cell
    if isinstance(cell, bool):
        return format_bool(cell)
    if isinstance(cell, datetime):
        return cell.isoformat()
    if isinstance(cell, float) and cell.is_integer():
        return str(int(cell))
    if isinstance(cell, Decimal):
        return format_decimal(cell)
    return str(cell)


def from_cell(cell: Any, column: Column) -> Any:
    """Convert a raw cell into the column's logical value."""
    kind = column.kind
    if kind in (FieldKind.TEXT, FieldKind.REFERENCE):
        # Whitespace is content for text columns.
        if cell is None:
            return EMPTY
        return _text_of(cell)
    if _is_empty(cell):
        return EMPTY
    if kind is FieldKind.INT:
        return _parse_integer(cell, column)
    if kind is FieldKind.BOOL:
        if isinstance(cell, bool):
            return cell
        if _is_int(cell) and cell in (0, 1):
            return bool(cell)
        parsed = parse_bool(cell)
        if parsed is None:
            raise _fail(column, f"'{cell}' is not a boolean")
        return parsed
    if kind is FieldKind.DECIMAL:
        return _parse_decimal(cell, column)
    if kind is FieldKind.ENUM:
        return _parse_enum(cell, column)
    if kind is FieldKind.DATETIME:
        return _parse_serial(cell, column)
    if kind is FieldKind.GUID:
        text = _text_of(cell).strip()
        try:
            return str(UUID(text))
        except ValueError:
            raise _fail(column, f"'{text}' is not a valid identifier") from None
    if kind is FieldKind.LOOKUP:
        return _parse_lookup(cell, column)
    raise _fail(column, f"unsupported column kind {kind!r}")


def to_field_value(value: Any, column: Column) -> Any:
    """Turn a logical value back into the value a record field holds."""
    if isinstance(value, str) and value == EMPTY:
        return None

    kind = column.kind
    if kind is FieldKind.ENUM and column.enum is not None:
        return column.enum(value)
    if kind is FieldKind.DATETIME:
        return from_serial(value)
    if kind is FieldKind.GUID:
        return UUID(value)
    return value


def cell_text(cell: Any) -> str:
    """Textual form of a cell for CSV output."""
    if cell is None:
        return EMPTY
    if isinstance(cell, bool):
        return format_bool(cell)
    if isinstance(cell, Decimal):
        return format_decimal(cell)
    if isinstance(cell, float):
        return repr(cell)
    return str(cell)


__all__ = [
    "EMPTY",
    "cell_text",
    "from_cell",
    "from_serial",
    "normalize_value",
    "to_cell",
    "to_field_value",
    "to_serial",
]
