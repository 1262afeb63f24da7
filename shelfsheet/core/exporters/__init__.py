"""Record exporters: one static profile per record type."""

from collections.abc import Iterable
from typing import Any

from ..codec.writer import TabularFormat
from ..config import CoreConfig
from .platforms import (
    export_categories_to_xlsx,
    export_customers_to_xlsx,
    export_manufacturers_to_xlsx,
    export_orders_to_csv,
    export_orders_to_xlsx,
    export_products_to_xlsx,
)
from .shared.profile import ExportOptions, ExportProfile, export_with_profile
from .shared.services import ExportServices, StaticExportServices


def export_records(
    kind: str,
    records: Iterable[Any],
    *,
    services: ExportServices | None = None,
    options: ExportOptions | None = None,
    fmt: TabularFormat = "xlsx",
    config: CoreConfig | None = None,
) -> tuple[bytes, str]:
    from ..registry import get_profile, list_profiles

    try:
        profile = get_profile(kind)
    except KeyError as exc:
        raise ValueError(f"kind must be one of: {', '.join(list_profiles())}") from exc
    return export_with_profile(profile, records, services=services, options=options, fmt=fmt, config=config)


__all__ = [
    "ExportOptions",
    "ExportProfile",
    "ExportServices",
    "StaticExportServices",
    "export_categories_to_xlsx",
    "export_customers_to_xlsx",
    "export_manufacturers_to_xlsx",
    "export_orders_to_csv",
    "export_orders_to_xlsx",
    "export_products_to_xlsx",
    "export_records",
    "export_with_profile",
]
