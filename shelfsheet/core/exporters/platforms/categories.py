from collections.abc import Iterable

from ...canonical import Category
from ...config import CoreConfig
from ..shared.profile import ExportOptions, ExportProfile, export_with_profile
from ..shared.services import ExportServices
from .manufacturers import CATALOG_IGNORE, catalog_accessors

CATEGORY_COLUMNS: tuple[str, ...] = (
    "Id",
    "Name",
    "Description",
    "CategoryTemplateId",
    "MetaKeywords",
    "MetaDescription",
    "MetaTitle",
    "SeName",
    "ParentCategoryId",
    "Picture",
    "PageSize",
    "AllowCustomersToSelectPageSize",
    "PageSizeOptions",
    "PriceRanges",
    "ShowOnHomePage",
    "IncludeInTopMenu",
    "Published",
    "DisplayOrder",
)

CATEGORY_PROFILE = ExportProfile(
    kind="category",
    record_type=Category,
    columns=CATEGORY_COLUMNS,
    ignore=CATALOG_IGNORE,
    accessor_factory=catalog_accessors,
    sheet_title="categories",
    filename_stem="categories",
)


def export_categories_to_xlsx(
    categories: Iterable[Category],
    *,
    services: ExportServices | None = None,
    options: ExportOptions | None = None,
    config: CoreConfig | None = None,
) -> tuple[bytes, str]:
    return export_with_profile(CATEGORY_PROFILE, categories, services=services, options=options, config=config)


__all__ = ["CATEGORY_COLUMNS", "CATEGORY_PROFILE", "export_categories_to_xlsx"]
