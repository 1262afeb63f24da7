from .coercion import cell_text, from_cell, from_serial, normalize_value, to_cell, to_field_value, to_serial
from .reader import DecodedSheet, SheetRow, decode, decode_records, decode_sheet, populate_record, read_raw_rows
from .writer import TabularFormat, coerce_rows, encode

__all__ = [
    "DecodedSheet",
    "SheetRow",
    "TabularFormat",
    "cell_text",
    "coerce_rows",
    "decode",
    "decode_records",
    "decode_sheet",
    "encode",
    "from_cell",
    "from_serial",
    "normalize_value",
    "populate_record",
    "read_raw_rows",
    "to_cell",
    "to_field_value",
    "to_serial",
]
