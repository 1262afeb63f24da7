from decimal import Decimal

import pytest

from shelfsheet.core.canonical import Manufacturer, Order
from shelfsheet.core.codec import decode, encode, normalize_value
from shelfsheet.core.errors import MalformedSheet
from shelfsheet.core.exporters.platforms.orders import ORDER_PROFILE
from shelfsheet.core.schema import derive_columns
from tests.helpers._record_builders import build_manufacturer, build_order, build_services
from tests.helpers._xlsx_helpers import read_csv_frame


def test_csv_output_uses_plain_text_cells() -> None:
    columns = ORDER_PROFILE.build_columns(build_services())
    data = encode([build_order(pick_up_in_store=True)], columns, fmt="csv")

    frame = read_csv_frame(data)

    assert list(frame.columns) == [column.name for column in columns]
    assert frame.loc[0, "OrderStatusId"] == "30"
    assert frame.loc[0, "OrderTotal"] == "12.1"
    assert frame.loc[0, "ShippingPickUpInStore"] == "TRUE"
    assert frame.loc[0, "BillingAddress2"] == ""
    assert data.decode("utf-8").startswith("OrderId,StoreId,OrderGuid")


def test_csv_round_trip_matches_logical_values() -> None:
    order = build_order()
    columns = ORDER_PROFILE.build_columns(build_services())
    data = encode([order], columns, fmt="csv")

    row = decode(
        data,
        Order,
        fmt="csv",
        replace_pairs=ORDER_PROFILE.replace_pairs,
        accessors=ORDER_PROFILE.accessors(build_services()),
    )[0]

    for column in columns:
        assert row.get_property(column.name) == normalize_value(column.value_of(order), column), column.name
    assert row.get_property("OrderTotal") == Decimal("12.1")


def test_csv_rows_must_match_header_width() -> None:
    data = b"Id,Name\n1,Acme\n2\n"

    with pytest.raises(MalformedSheet) as exc_info:
        decode(data, Manufacturer, fmt="csv")

    assert exc_info.value.row == 2


def test_csv_with_byte_order_mark_is_accepted() -> None:
    columns = derive_columns(Manufacturer, ["Id", "Name"])
    data = b"\xef\xbb\xbf" + encode([build_manufacturer()], columns, fmt="csv")

    rows = decode(data, Manufacturer, fmt="csv")

    assert rows[0].get_property("Name") == "Acme Tools"


def test_csv_must_be_utf8() -> None:
    with pytest.raises(MalformedSheet, match="UTF-8"):
        decode("Id,Name\n1,Café\n".encode("latin-1"), Manufacturer, fmt="csv")


def test_csv_keeps_rows_of_empty_records() -> None:
    columns = derive_columns(Manufacturer, ["Name", "Description"])

    rows = decode(encode([Manufacturer()], columns, fmt="csv"), Manufacturer, fmt="csv")

    assert len(rows) == 1
    assert dict(rows[0]) == {"Name": "", "Description": ""}


def test_csv_keeps_whitespace_only_text() -> None:
    columns = derive_columns(Manufacturer, ["Id", "Description"])
    data = encode([build_manufacturer(description="   ")], columns, fmt="csv")

    row = decode(data, Manufacturer, fmt="csv")[0]

    assert row.get_property("Description") == "   "
