from .columns import Accessor, Column, Lookup, as_accessor, field_column, synthetic_column
from .coverage import missing_fields, verify_all_fields_covered
from .reflect import bound_field_name, column_names, derive_columns

__all__ = [
    "Accessor",
    "Column",
    "Lookup",
    "as_accessor",
    "bound_field_name",
    "column_names",
    "derive_columns",
    "field_column",
    "missing_fields",
    "synthetic_column",
    "verify_all_fields_covered",
]
