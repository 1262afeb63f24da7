from collections.abc import Iterable

from ...canonical import Manufacturer
from ...config import CoreConfig
from ...schema.columns import Accessor
from ..shared.profile import ExportOptions, ExportProfile, export_with_profile
from ..shared.services import ExportServices

MANUFACTURER_COLUMNS: tuple[str, ...] = (
    "Id",
    "Name",
    "Description",
    "ManufacturerTemplateId",
    "MetaKeywords",
    "MetaDescription",
    "MetaTitle",
    "SeName",
    "Picture",
    "PageSize",
    "AllowCustomersToSelectPageSize",
    "PageSizeOptions",
    "PriceRanges",
    "Published",
    "DisplayOrder",
)

# Shared with categories: the picture column replaces the raw id.
CATALOG_IGNORE: frozenset[str] = frozenset(
    {
        "PictureId",
        "SubjectToAcl",
        "LimitedToStores",
        "Deleted",
        "CreatedOnUtc",
        "UpdatedOnUtc",
    }
)


def catalog_accessors(services: ExportServices) -> dict[str, Accessor]:
    return {
        "SeName": Accessor(services.se_name),
        "Picture": Accessor(lambda entity: services.picture_path(entity.picture_id)),
    }


MANUFACTURER_PROFILE = ExportProfile(
    kind="manufacturer",
    record_type=Manufacturer,
    columns=MANUFACTURER_COLUMNS,
    ignore=CATALOG_IGNORE,
    accessor_factory=catalog_accessors,
    sheet_title="manufacturers",
    filename_stem="manufacturers",
)


def export_manufacturers_to_xlsx(
    manufacturers: Iterable[Manufacturer],
    *,
    services: ExportServices | None = None,
    options: ExportOptions | None = None,
    config: CoreConfig | None = None,
) -> tuple[bytes, str]:
    return export_with_profile(
        MANUFACTURER_PROFILE,
        manufacturers,
        services=services,
        options=options,
        config=config,
    )


__all__ = [
    "CATALOG_IGNORE",
    "MANUFACTURER_COLUMNS",
    "MANUFACTURER_PROFILE",
    "catalog_accessors",
    "export_manufacturers_to_xlsx",
]
