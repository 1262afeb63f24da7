import pytest

from shelfsheet.core.canonical import FieldKind, Manufacturer, Order, Product
from shelfsheet.core.errors import SchemaMismatch
from shelfsheet.core.schema import Accessor, Lookup, column_names, derive_columns
from tests.helpers._record_builders import build_manufacturer, build_order


def test_columns_follow_header_order_and_bind_fields() -> None:
    columns = derive_columns(Manufacturer, ["Name", "Id", "Published"])

    assert column_names(columns) == ["Name", "Id", "Published"]
    assert [column.field_name for column in columns] == ["Name", "Id", "Published"]
    assert columns[2].kind is FieldKind.BOOL
    assert columns[0].value_of(build_manufacturer()) == "Acme Tools"


def test_replace_pairs_translate_header_to_field() -> None:
    columns = derive_columns(Order, ["OrderId", "OrderStatusId"], replace_pairs={"OrderId": "Id", "OrderStatusId": "OrderStatus"})

    assert columns[0].field_name == "Id"
    assert columns[1].kind is FieldKind.ENUM
    assert columns[1].value_of(build_order()) == 30


def test_field_bound_by_two_headers_raises() -> None:
    with pytest.raises(SchemaMismatch, match="already bound") as exc_info:
        derive_columns(Manufacturer, ["Id", "ManufacturerId", "Name"], replace_pairs={"ManufacturerId": "Id"})

    assert exc_info.value.column == "ManufacturerId"


def test_unmatched_header_without_accessor_raises() -> None:
    with pytest.raises(SchemaMismatch) as exc_info:
        derive_columns(Manufacturer, ["Id", "Logo"])

    assert exc_info.value.column == "Logo"
    assert exc_info.value.record_type == "Manufacturer"


def test_accessor_serves_synthetic_column() -> None:
    columns = derive_columns(
        Manufacturer,
        ["Id", "Shout"],
        accessors={"Shout": lambda manufacturer: manufacturer.name.upper()},
    )

    assert columns[1].is_synthetic
    assert columns[1].value_of(build_manufacturer()) == "ACME TOOLS"


def test_accessor_takes_precedence_over_field() -> None:
    columns = derive_columns(Manufacturer, ["Name"], accessors={"Name": Accessor(lambda _: "override")})

    assert columns[0].is_synthetic
    assert columns[0].value_of(build_manufacturer()) == "override"


@pytest.mark.parametrize("header", [["Id", "Id"], ["Id", " "], ["Id", None]])
def test_duplicate_or_blank_header_raises(header: list) -> None:
    with pytest.raises(SchemaMismatch):
        derive_columns(Manufacturer, header)


def test_lookup_turns_integer_field_into_lookup_column() -> None:
    vendors = Lookup.from_mapping({1: "Default vendor", 2: "Acme Supply"})
    columns = derive_columns(Product, ["Vendor"], replace_pairs={"Vendor": "VendorId"}, lookups={"Vendor": vendors})

    assert columns[0].kind is FieldKind.LOOKUP
    assert columns[0].lookup is vendors
    assert columns[0].field_name == "VendorId"


def test_lookup_on_non_integer_field_raises() -> None:
    with pytest.raises(SchemaMismatch, match="integer"):
        derive_columns(Product, ["Name"], lookups={"Name": Lookup.from_mapping({1: "x"})})


def test_lookup_ignores_blank_and_repeated_entries() -> None:
    lookup = Lookup.from_mapping([(1, "Books"), (2, " "), (1, "Again"), (3, "Books")])

    assert lookup.names == ["Books", "Books"]
    assert lookup.text_for(1) == "Books"
    assert lookup.text_for(2) is None
    assert lookup.id_for("Books") == 1


def test_reference_fields_keep_reference_kind() -> None:
    columns = derive_columns(Order, ["BillingAddress"])

    assert columns[0].kind is FieldKind.REFERENCE
