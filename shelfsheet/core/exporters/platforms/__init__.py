from .categories import CATEGORY_PROFILE, export_categories_to_xlsx
from .customers import CUSTOMER_PROFILE, export_customers_to_xlsx
from .manufacturers import MANUFACTURER_PROFILE, export_manufacturers_to_xlsx
from .orders import ORDER_PROFILE, export_orders_to_csv, export_orders_to_xlsx
from .products import PRODUCT_PROFILE, export_products_to_xlsx

DEFAULT_PROFILES = (
    ORDER_PROFILE,
    MANUFACTURER_PROFILE,
    CUSTOMER_PROFILE,
    CATEGORY_PROFILE,
    PRODUCT_PROFILE,
)

__all__ = [
    "CATEGORY_PROFILE",
    "CUSTOMER_PROFILE",
    "DEFAULT_PROFILES",
    "MANUFACTURER_PROFILE",
    "ORDER_PROFILE",
    "PRODUCT_PROFILE",
    "export_categories_to_xlsx",
    "export_customers_to_xlsx",
    "export_manufacturers_to_xlsx",
    "export_orders_to_csv",
    "export_orders_to_xlsx",
    "export_products_to_xlsx",
]
