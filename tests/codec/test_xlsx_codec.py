import io
from datetime import datetime
from decimal import Decimal

import pytest
from openpyxl import load_workbook

from shelfsheet.core.canonical import Manufacturer, Order, OrderStatus
from shelfsheet.core.codec import decode, decode_records, encode, normalize_value
from shelfsheet.core.errors import CoercionError, SchemaMismatch
from shelfsheet.core.exporters.platforms.orders import ORDER_PROFILE
from shelfsheet.core.schema import derive_columns
from tests.helpers._record_builders import build_manufacturer, build_order, build_services
from tests.helpers._xlsx_helpers import read_frame, read_header


def _order_columns():
    return ORDER_PROFILE.build_columns(build_services())


def _decode_orders(data: bytes, start_row: int = 1):
    return decode(
        data,
        Order,
        start_row,
        replace_pairs=ORDER_PROFILE.replace_pairs,
        accessors=ORDER_PROFILE.accessors(build_services()),
    )


def test_round_trip_reproduces_every_logical_value() -> None:
    orders = [build_order(), build_order(id=1002, order_total=Decimal("99.95"), pick_up_in_store=True)]
    columns = _order_columns()

    rows = _decode_orders(encode(orders, columns))

    assert len(rows) == 2
    for order, row in zip(orders, rows):
        assert list(row) == [column.name for column in columns]
        for column in columns:
            assert row.get_property(column.name) == normalize_value(column.value_of(order), column), column.name


def test_order_scenario_reads_status_code_and_total() -> None:
    data = encode([build_order(order_status=OrderStatus.COMPLETE, order_total=Decimal("12.1"))], _order_columns())

    row = _decode_orders(data)[0]

    assert row.get_property("OrderStatusId") == 30
    assert row.get_property("OrderTotal") == Decimal("12.1")
    assert row.get_property("BillingCountry") == "United Kingdom"
    assert row.get_property("ShippingCity") == "Cambridge"


def test_header_row_matches_columns_and_pandas_sees_the_values() -> None:
    columns = _order_columns()
    data = encode([build_order()], columns)

    frame = read_frame(data)

    assert read_header(data) == [column.name for column in columns]
    assert list(frame.columns) == [column.name for column in columns]
    assert frame.loc[0, "OrderStatusId"] == 30
    assert frame.loc[0, "OrderTotal"] == pytest.approx(12.1)
    assert frame.loc[0, "CreatedOnUtc"] == datetime(2026, 1, 15, 10, 30)


def test_workbook_layout() -> None:
    data = encode([build_order()], _order_columns(), sheet_title="orders")

    workbook = load_workbook(io.BytesIO(data))
    sheet = workbook.worksheets[0]
    created_position = list(ORDER_PROFILE.columns).index("CreatedOnUtc") + 1

    assert sheet.title == "orders"
    assert sheet.freeze_panes == "A2"
    assert sheet.cell(row=1, column=1).font.b is True
    assert sheet.cell(row=2, column=created_position).number_format == "yyyy-mm-dd hh:mm:ss"


def test_decode_records_rebuilds_field_values() -> None:
    original = build_order()
    data = encode([original], _order_columns())

    decoded = decode_records(
        data,
        Order,
        replace_pairs=ORDER_PROFILE.replace_pairs,
        accessors=ORDER_PROFILE.accessors(build_services()),
    )[0]

    assert decoded.id == original.id
    assert decoded.order_guid == original.order_guid
    assert decoded.order_status is OrderStatus.COMPLETE
    assert decoded.order_total == Decimal("12.1")
    assert decoded.created_on_utc == original.created_on_utc
    assert decoded.billing_address is None


def test_datetimes_with_microseconds_round_trip() -> None:
    created = datetime(2026, 1, 15, 10, 30, 0, 123456)
    order = build_order(created_on_utc=created)
    columns = _order_columns()
    created_column = next(column for column in columns if column.name == "CreatedOnUtc")
    data = encode([order], columns)

    row = _decode_orders(data)[0]
    decoded = decode_records(
        data,
        Order,
        replace_pairs=ORDER_PROFILE.replace_pairs,
        accessors=ORDER_PROFILE.accessors(build_services()),
    )[0]

    assert row.get_property("CreatedOnUtc") == normalize_value(created, created_column)
    assert decoded.created_on_utc == datetime(2026, 1, 15, 10, 30, 0, 123000)


def test_interior_empty_record_keeps_its_row() -> None:
    columns = derive_columns(Manufacturer, ["Name", "Description"])
    records = [build_manufacturer(), Manufacturer(), build_manufacturer(name="Beta")]

    rows = decode(encode(records, columns), Manufacturer)

    assert [row.get_property("Name") for row in rows] == ["Acme Tools", "", "Beta"]


def test_encoding_is_stable_across_runs() -> None:
    columns = _order_columns()
    first = encode([build_order()], columns)
    second = encode([build_order()], columns)

    assert read_header(first) == read_header(second)
    assert [dict(row) for row in _decode_orders(first)] == [dict(row) for row in _decode_orders(second)]


def test_start_row_skips_earlier_data_rows() -> None:
    data = encode([build_order(id=1), build_order(id=2), build_order(id=3)], _order_columns())

    rows = _decode_orders(data, start_row=2)

    assert [row.get_property("OrderId") for row in rows] == [2, 3]
    assert [row.index for row in rows] == [2, 3]


def test_empty_record_list_writes_header_only() -> None:
    columns = _order_columns()
    data = encode([], columns)

    assert read_header(data) == [column.name for column in columns]
    assert _decode_orders(data) == []


def test_empty_values_come_back_as_empty_text() -> None:
    columns = derive_columns(Manufacturer, ["Id", "Description", "MetaTitle"])
    data = encode([build_manufacturer(description=None, meta_title="")], columns)

    row = decode(data, Manufacturer)[0]

    assert row.get_property("Description") == ""
    assert row.get_property("MetaTitle") == ""


def test_formula_like_text_is_stored_as_text() -> None:
    columns = derive_columns(Manufacturer, ["Id", "Name"])
    data = encode([build_manufacturer(name="=SUM(A1:A2)")], columns)

    assert decode(data, Manufacturer)[0].get_property("Name") == "=SUM(A1:A2)"


def test_control_characters_fail_before_any_output() -> None:
    columns = derive_columns(Manufacturer, ["Id", "Name"])

    with pytest.raises(CoercionError) as exc_info:
        encode([build_manufacturer(), build_manufacturer(name="bad\x01name")], columns)

    assert exc_info.value.column == "Name"
    assert exc_info.value.record_index == 1


def test_uncoercible_value_reports_column_and_record() -> None:
    columns = derive_columns(Order, ["Id", "OrderStatus"])

    with pytest.raises(CoercionError) as exc_info:
        encode([build_order(), build_order(order_status=77)], columns)

    assert exc_info.value.column == "OrderStatus"
    assert exc_info.value.record_index == 1


def test_encode_requires_columns_and_a_known_format() -> None:
    with pytest.raises(SchemaMismatch):
        encode([build_order()], [])
    with pytest.raises(ValueError, match="Unsupported"):
        encode([build_order()], _order_columns(), fmt="ods")
