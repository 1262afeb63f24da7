from collections.abc import Iterable
from typing import Any

from ..canonical.fields import field_table, record_type_of
from ..errors import MissingColumn
from .columns import Column


def missing_fields(record_or_type: Any, columns: Iterable[Column], ignore: Iterable[str] = ()) -> list[str]:
    record_type = record_type_of(record_or_type)
    ignored = set(ignore)
    covered: set[str] = set()
    for column in columns:
        covered.add(column.name)
        if column.field_name:
            covered.add(column.field_name)
    return sorted(
        name
        for name in field_table(record_type)
        if name not in ignored and name not in covered
    )


def verify_all_fields_covered(record_or_type: Any, columns: Iterable[Column], ignore: Iterable[str] = ()) -> None:
    """Fail when a non-ignored field of the record type has no column.

    This guards the sheet schema, not values: a field added to a record type
    must either gain a column or be listed in ``ignore``.
    """
    record_type = record_type_of(record_or_type)
    missing = missing_fields(record_type, columns, ignore)
    if missing:
        raise MissingColumn(missing[0], record_type=record_type.__name__)


__all__ = ["missing_fields", "verify_all_fields_covered"]
