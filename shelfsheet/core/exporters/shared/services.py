"""Collaborators an export needs from the surrounding application.

Exports never reach into a service container: everything they resolve
(picture paths, lookup lists, per-product category names) comes through an
``ExportServices`` object handed in by the caller.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol

from slugify import slugify

from ...canonical import Customer

LOOKUP_VENDORS = "vendors"
LOOKUP_PRODUCT_TEMPLATES = "product_templates"
LOOKUP_DELIVERY_DATES = "delivery_dates"
LOOKUP_AVAILABILITY_RANGES = "product_availability_ranges"
LOOKUP_TAX_CATEGORIES = "tax_categories"
LOOKUP_MEASURE_WEIGHTS = "measure_weights"


class ExportServices(Protocol):
    def picture_path(self, picture_id: int) -> str | None: ...

    def product_picture_paths(self, product_id: int, *, limit: int) -> list[str]: ...

    def product_category_names(self, product_id: int) -> list[str]: ...

    def product_manufacturer_names(self, product_id: int) -> list[str]: ...

    def se_name(self, entity: Any) -> str: ...

    def customer_attribute(self, customer: Customer, key: str) -> str | None: ...

    def lookup_items(self, name: str) -> dict[int, str]: ...


@dataclass
class StaticExportServices:
    """In-memory ``ExportServices`` backed by plain dictionaries."""

    picture_paths: dict[int, str] = field(default_factory=dict)
    product_pictures: dict[int, list[str]] = field(default_factory=dict)
    product_categories: dict[int, list[str]] = field(default_factory=dict)
    product_manufacturers: dict[int, list[str]] = field(default_factory=dict)
    customer_attributes: dict[int, dict[str, str]] = field(default_factory=dict)
    se_names: dict[tuple[str, int], str] = field(default_factory=dict)
    lookups: dict[str, dict[int, str]] = field(default_factory=dict)

    def picture_path(self, picture_id: int) -> str | None:
        if not picture_id:
            return None
        return self.picture_paths.get(picture_id)

    def product_picture_paths(self, product_id: int, *, limit: int) -> list[str]:
        return list(self.product_pictures.get(product_id, []))[:limit]

    def product_category_names(self, product_id: int) -> list[str]:
        return list(self.product_categories.get(product_id, []))

    def product_manufacturer_names(self, product_id: int) -> list[str]:
        return list(self.product_manufacturers.get(product_id, []))

    def se_name(self, entity: Any) -> str:
        key = (type(entity).__name__, int(getattr(entity, "id", 0) or 0))
        if key in self.se_names:
            return self.se_names[key]
        return slugify(str(getattr(entity, "name", "") or ""))

    def customer_attribute(self, customer: Customer, key: str) -> str | None:
        return self.customer_attributes.get(customer.id, {}).get(key)

    def lookup_items(self, name: str) -> dict[int, str]:
        return dict(self.lookups.get(name, {}))


__all__ = [
    "ExportServices",
    "LOOKUP_AVAILABILITY_RANGES",
    "LOOKUP_DELIVERY_DATES",
    "LOOKUP_MEASURE_WEIGHTS",
    "LOOKUP_PRODUCT_TEMPLATES",
    "LOOKUP_TAX_CATEGORIES",
    "LOOKUP_VENDORS",
    "StaticExportServices",
]
