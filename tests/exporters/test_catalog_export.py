from shelfsheet.core.canonical import Category, Manufacturer
from shelfsheet.core.codec import decode
from shelfsheet.core.exporters import StaticExportServices, export_categories_to_xlsx, export_manufacturers_to_xlsx
from shelfsheet.core.exporters.platforms.categories import CATEGORY_COLUMNS, CATEGORY_PROFILE
from shelfsheet.core.exporters.platforms.manufacturers import MANUFACTURER_PROFILE
from shelfsheet.core.schema import verify_all_fields_covered
from tests.helpers._record_builders import build_category, build_manufacturer, build_services
from tests.helpers._xlsx_helpers import read_frame


def test_manufacturer_picture_column_holds_the_resolved_path() -> None:
    services = build_services()

    data, filename = export_manufacturers_to_xlsx([build_manufacturer(picture_id=42)], services=services)
    rows = decode(data, Manufacturer, accessors=MANUFACTURER_PROFILE.accessors(services))

    assert filename == "manufacturers-20260208T000000Z.xlsx"
    assert rows[0].get_property("Picture") == r"c:\temp\picture.png"
    assert rows[0].get_property("Name") == "Acme Tools"


def test_manufacturer_without_picture_exports_empty_cell() -> None:
    services = build_services()

    data, _ = export_manufacturers_to_xlsx([build_manufacturer(picture_id=0)], services=services)
    rows = decode(data, Manufacturer, accessors=MANUFACTURER_PROFILE.accessors(services))

    assert rows[0].get_property("Picture") == ""


def test_se_name_defaults_to_slug_and_honours_overrides() -> None:
    services = StaticExportServices(se_names={("Manufacturer", 4): "custom-slug"})

    data, _ = export_manufacturers_to_xlsx(
        [build_manufacturer(id=3, name="Acme Tools & Co"), build_manufacturer(id=4)],
        services=services,
    )
    frame = read_frame(data)

    assert list(frame["SeName"]) == ["acme-tools-co", "custom-slug"]


def test_manufacturer_and_category_headers_cover_their_fields() -> None:
    services = build_services()
    for profile, record_type in ((MANUFACTURER_PROFILE, Manufacturer), (CATEGORY_PROFILE, Category)):
        verify_all_fields_covered(record_type, profile.build_columns(services), profile.ignore)


def test_category_export() -> None:
    services = build_services()

    data, filename = export_categories_to_xlsx([build_category()], services=services)
    frame = read_frame(data)
    rows = decode(data, Category, accessors=CATEGORY_PROFILE.accessors(services))

    assert filename == "categories-20260208T000000Z.xlsx"
    assert list(frame.columns) == list(CATEGORY_COLUMNS)
    assert rows[0].get_property("ParentCategoryId") == 4
    assert rows[0].get_property("IncludeInTopMenu") is True
    assert rows[0].get_property("Picture") == r"c:\temp\picture.png"
    assert rows[0].get_property("SeName") == "power-drills"
