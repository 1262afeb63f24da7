from .entities import (
    Address,
    Category,
    Country,
    Customer,
    Manufacturer,
    Order,
    Product,
    StateProvince,
)
from .enums import (
    BackorderMode,
    DownloadActivationType,
    GiftCardType,
    LowStockActivity,
    ManageInventoryMethod,
    OrderStatus,
    PaymentStatus,
    ProductType,
    RecurringProductCyclePeriod,
    RentalPricePeriod,
    ShippingStatus,
    TaxDisplayType,
)
from .fields import (
    FieldKind,
    FieldSpec,
    FieldTable,
    field_table,
    navigation_attributes,
    record_type_of,
    register_field_table,
)

__all__ = [
    "Address",
    "BackorderMode",
    "Category",
    "Country",
    "Customer",
    "DownloadActivationType",
    "FieldKind",
    "FieldSpec",
    "FieldTable",
    "GiftCardType",
    "LowStockActivity",
    "ManageInventoryMethod",
    "Manufacturer",
    "Order",
    "OrderStatus",
    "PaymentStatus",
    "Product",
    "ProductType",
    "RecurringProductCyclePeriod",
    "RentalPricePeriod",
    "ShippingStatus",
    "StateProvince",
    "TaxDisplayType",
    "field_table",
    "navigation_attributes",
    "record_type_of",
    "register_field_table",
]
