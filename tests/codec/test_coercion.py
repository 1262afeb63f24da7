from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import UUID

import pytest

from shelfsheet.core.canonical import Manufacturer, Order, OrderStatus, PaymentStatus, Product
from shelfsheet.core.codec import cell_text, from_cell, from_serial, normalize_value, to_cell, to_field_value, to_serial
from shelfsheet.core.errors import CoercionError
from shelfsheet.core.schema import Lookup, derive_columns


def _order_column(name: str):
    return derive_columns(Order, [name])[0]


def _vendor_column():
    lookup = Lookup.from_mapping({1: "Default vendor", 2: "Acme Supply"})
    return derive_columns(Product, ["Vendor"], replace_pairs={"Vendor": "VendorId"}, lookups={"Vendor": lookup})[0]


def test_enum_is_written_as_its_integer_code() -> None:
    column = _order_column("OrderStatus")

    assert to_cell(OrderStatus.COMPLETE, column) == 30
    assert to_cell(20, column) == 20


def test_enum_rejects_unknown_code_and_foreign_member() -> None:
    column = _order_column("OrderStatus")

    with pytest.raises(CoercionError, match="OrderStatus"):
        to_cell(99, column)
    with pytest.raises(CoercionError):
        to_cell(PaymentStatus.PAID, column)


def test_enum_cell_accepts_code_or_member_name() -> None:
    column = _order_column("OrderStatus")

    assert from_cell(30, column) == 30
    assert from_cell("30", column) == 30
    assert from_cell("complete", column) == 30
    assert to_field_value(30, column) is OrderStatus.COMPLETE


def test_decimal_survives_float_cells() -> None:
    column = _order_column("OrderTotal")

    assert to_cell(Decimal("12.1"), column) == Decimal("12.1")
    assert from_cell(12.1, column) == Decimal("12.1")
    assert from_cell("12.10", column) == Decimal("12.10")
    with pytest.raises(CoercionError):
        from_cell("twelve", column)


def test_serial_dates_use_the_1900_system() -> None:
    assert to_serial(datetime(1900, 3, 1)) == 61.0
    assert from_serial(61.0) == datetime(1900, 3, 1)
    assert to_serial(datetime(2026, 1, 15, 12, 0)) == to_serial(datetime(2026, 1, 15)) + 0.5


def test_serials_are_resolved_to_the_millisecond() -> None:
    assert to_serial(datetime(2026, 1, 15, 10, 30, 0, 123456)) == to_serial(datetime(2026, 1, 15, 10, 30, 0, 123000))
    assert to_serial(datetime(2026, 1, 15, 10, 30, 59, 999999)) == to_serial(datetime(2026, 1, 15, 10, 31))
    assert from_serial(to_serial(datetime(2026, 1, 15, 10, 30, 0, 123456))) == datetime(2026, 1, 15, 10, 30, 0, 123000)


def test_aware_datetimes_are_converted_to_utc() -> None:
    aware = datetime(2026, 1, 15, 12, 0, tzinfo=timezone(timedelta(hours=2)))

    assert to_serial(aware) == to_serial(datetime(2026, 1, 15, 10, 0))


def test_date_cell_accepts_serial_datetime_or_iso_text() -> None:
    column = _order_column("CreatedOnUtc")
    expected = to_serial(datetime(2026, 1, 15, 10, 30))

    assert from_cell(expected, column) == expected
    assert from_cell(datetime(2026, 1, 15, 10, 30), column) == expected
    assert from_cell("2026-01-15T10:30:00", column) == expected
    assert to_field_value(expected, column) == datetime(2026, 1, 15, 10, 30)


def test_guid_is_written_as_text() -> None:
    column = _order_column("OrderGuid")
    guid = UUID("6f1a0c1e-8d2b-4c4e-9a57-1b2c3d4e5f60")

    assert to_cell(guid, column) == "6f1a0c1e-8d2b-4c4e-9a57-1b2c3d4e5f60"
    assert from_cell(" 6F1A0C1E-8D2B-4C4E-9A57-1B2C3D4E5F60 ", column) == str(guid)
    assert to_field_value(str(guid), column) == guid
    with pytest.raises(CoercionError):
        from_cell("not-a-guid", column)


def test_empty_values_round_trip_as_empty_text() -> None:
    column = derive_columns(Manufacturer, ["Description"])[0]

    assert to_cell(None, column) == ""
    assert from_cell(None, column) == ""
    assert to_field_value("", column) is None


def test_whitespace_is_kept_for_text_but_empty_for_typed_columns() -> None:
    text_column = derive_columns(Manufacturer, ["Description"])[0]
    int_column = _order_column("StoreId")

    assert from_cell("   ", text_column) == "   "
    assert to_field_value("   ", text_column) == "   "
    assert from_cell("   ", int_column) == ""


def test_bool_cells() -> None:
    column = _order_column("PickUpInStore")

    assert to_cell(True, column) is True
    assert from_cell("TRUE", column) is True
    assert from_cell(0, column) is False
    with pytest.raises(CoercionError):
        from_cell("maybe", column)
    with pytest.raises(CoercionError):
        to_cell("yes", column)


def test_integer_cells_reject_fractions() -> None:
    column = _order_column("StoreId")

    assert from_cell(3.0, column) == 3
    assert from_cell("4", column) == 4
    with pytest.raises(CoercionError):
        from_cell("3.5", column)
    with pytest.raises(CoercionError):
        to_cell(True, column)


def test_lookup_writes_display_text_and_reads_back_the_id() -> None:
    column = _vendor_column()

    assert to_cell(2, column) == "Acme Supply"
    assert normalize_value(2, column) == 2
    assert from_cell("Acme Supply", column) == 2
    assert from_cell(1, column) == 1


def test_lookup_without_entry_writes_raw_id_unless_strict() -> None:
    column = _vendor_column()

    assert to_cell(9, column) == 9
    with pytest.raises(CoercionError, match="lookup"):
        to_cell(9, column, strict=True)
    with pytest.raises(CoercionError):
        from_cell("Unknown vendor", column)


def test_reference_columns_write_the_display_name() -> None:
    column = _order_column("BillingAddress")

    with pytest.raises(CoercionError, match="display name"):
        to_cell(object(), column)


def test_cell_text_for_csv_output() -> None:
    assert cell_text(None) == ""
    assert cell_text(True) == "TRUE"
    assert cell_text(Decimal("12.10")) == "12.1"
    assert cell_text(0.5) == "0.5"
    assert cell_text(30) == "30"
