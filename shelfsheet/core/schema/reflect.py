from collections.abc import Iterable, Mapping
from typing import Any

from ..canonical.fields import field_table
from ..errors import SchemaMismatch
from .columns import Accessor, Column, Getter, Lookup, field_column, synthetic_column


def bound_field_name(column_name: str, replace_pairs: Mapping[str, str] | None = None) -> str:
    if replace_pairs and column_name in replace_pairs:
        return replace_pairs[column_name]
    return column_name


def derive_columns(
    record_type: type,
    header_row: Iterable[Any],
    *,
    replace_pairs: Mapping[str, str] | None = None,
    accessors: Mapping[str, Accessor | Getter] | None = None,
    lookups: Mapping[str, Lookup] | None = None,
) -> tuple[Column, ...]:
    """Bind each header cell, left to right, to a field of ``record_type``.

    A header name is first translated through ``replace_pairs`` (for headers
    that differ from the field they carry, e.g. ``OrderId`` -> ``Id``), then
    matched exactly against the record type's field table. Names with no
    matching field become synthetic columns served by ``accessors``.
    """
    table = field_table(record_type)
    type_name = record_type.__name__
    accessors = accessors or {}
    lookups = lookups or {}

    columns: list[Column] = []
    seen: set[str] = set()
    bound: dict[str, str] = {}
    for raw in header_row:
        name = raw if isinstance(raw, str) else ("" if raw is None else str(raw))
        if not name.strip():
            raise SchemaMismatch(name, record_type=type_name, reason="header cell is blank")
        if name in seen:
            raise SchemaMismatch(name, record_type=type_name, reason="header name is duplicated")
        seen.add(name)

        lookup = lookups.get(name)
        field_name = bound_field_name(name, replace_pairs)
        spec = table.get(field_name)
        if spec is not None and name not in accessors:
            if field_name in bound:
                raise SchemaMismatch(
                    name,
                    record_type=type_name,
                    reason=f"field '{field_name}' is already bound to column '{bound[field_name]}'",
                )
            bound[field_name] = name
            columns.append(field_column(name, field_name, spec, lookup=lookup))
            continue

        accessor = accessors.get(name)
        if accessor is None:
            raise SchemaMismatch(name, record_type=type_name)
        columns.append(synthetic_column(name, accessor, lookup=lookup))

    return tuple(columns)


def column_names(columns: Iterable[Column]) -> list[str]:
    return [column.name for column in columns]


__all__ = ["bound_field_name", "column_names", "derive_columns"]
