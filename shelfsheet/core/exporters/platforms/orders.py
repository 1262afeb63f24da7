from collections.abc import Iterable
from typing import Any

from ...canonical import Address, Order
from ...canonical.fields import ADDRESS_FIELDS
from ...codec.writer import TabularFormat
from ...config import CoreConfig
from ...schema.columns import Accessor
from ..shared.profile import ExportOptions, ExportProfile, export_with_profile
from ..shared.services import ExportServices

# Address fields repeated under the Billing/Shipping prefixes.
ADDRESS_COLUMN_FIELDS: tuple[str, ...] = (
    "FirstName",
    "LastName",
    "Email",
    "Company",
    "Country",
    "StateProvince",
    "City",
    "Address1",
    "Address2",
    "ZipPostalCode",
    "PhoneNumber",
    "FaxNumber",
)

ORDER_COLUMNS: tuple[str, ...] = (
    "OrderId",
    "StoreId",
    "OrderGuid",
    "CustomerId",
    "OrderStatusId",
    "PaymentStatusId",
    "ShippingStatusId",
    "OrderSubtotalInclTax",
    "OrderSubtotalExclTax",
    "OrderSubTotalDiscountInclTax",
    "OrderSubTotalDiscountExclTax",
    "OrderShippingInclTax",
    "OrderShippingExclTax",
    "PaymentMethodAdditionalFeeInclTax",
    "PaymentMethodAdditionalFeeExclTax",
    "TaxRates",
    "OrderTax",
    "OrderTotal",
    "RefundedAmount",
    "OrderDiscount",
    "CurrencyRate",
    "CustomerCurrencyCode",
    "AffiliateId",
    "PaymentMethodSystemName",
    "ShippingPickUpInStore",
    "ShippingMethod",
    "ShippingRateComputationMethodSystemName",
    "CustomValuesXml",
    "VatNumber",
    "CreatedOnUtc",
    *(f"Billing{name}" for name in ADDRESS_COLUMN_FIELDS),
    *(f"Shipping{name}" for name in ADDRESS_COLUMN_FIELDS),
)

ORDER_REPLACE_PAIRS: dict[str, str] = {
    "OrderId": "Id",
    "OrderStatusId": "OrderStatus",
    "PaymentStatusId": "PaymentStatus",
    "ShippingStatusId": "ShippingStatus",
    "ShippingPickUpInStore": "PickUpInStore",
}

ORDER_IGNORE: frozenset[str] = frozenset(
    {
        "CustomerTaxDisplayType",
        "RewardPointsHistoryEntryId",
        "CheckoutAttributeDescription",
        "CheckoutAttributesXml",
        "CustomerLanguageId",
        "CustomerIp",
        "AllowStoringCreditCardNumber",
        "CardType",
        "CardName",
        "CardNumber",
        "MaskedCreditCardNumber",
        "CardCvv2",
        "CardExpirationMonth",
        "CardExpirationYear",
        "AuthorizationTransactionId",
        "AuthorizationTransactionCode",
        "AuthorizationTransactionResult",
        "CaptureTransactionId",
        "CaptureTransactionResult",
        "SubscriptionTransactionId",
        "PaidDateUtc",
        "Deleted",
        "PickupAddress",
        "CustomOrderNumber",
        "Customer",
        "BillingAddress",
        "ShippingAddress",
    }
)


def address_replace_pairs(prefix: str) -> dict[str, str]:
    """Map prefixed order columns (``BillingCity``) back to ``Address`` field names."""
    return {f"{prefix}{name}": name for name in ADDRESS_COLUMN_FIELDS}


def _address_getter(address_attribute: str, field_attribute: str):
    def _get(order: Order) -> Any:
        address: Address | None = getattr(order, address_attribute)
        if address is None:
            return None
        return getattr(address, field_attribute)

    return _get


def _address_accessors(prefix: str, address_attribute: str) -> dict[str, Accessor]:
    accessors: dict[str, Accessor] = {}
    for name in ADDRESS_COLUMN_FIELDS:
        spec = ADDRESS_FIELDS[name]
        accessors[f"{prefix}{name}"] = Accessor(_address_getter(address_attribute, spec.attribute), kind=spec.kind)
    return accessors


def order_accessors(services: ExportServices) -> dict[str, Accessor]:
    return {
        **_address_accessors("Billing", "billing_address"),
        **_address_accessors("Shipping", "shipping_address"),
    }


ORDER_PROFILE = ExportProfile(
    kind="order",
    record_type=Order,
    columns=ORDER_COLUMNS,
    replace_pairs=ORDER_REPLACE_PAIRS,
    ignore=ORDER_IGNORE,
    accessor_factory=order_accessors,
    sheet_title="orders",
    filename_stem="orders",
)


def export_orders_to_xlsx(
    orders: Iterable[Order],
    *,
    services: ExportServices | None = None,
    options: ExportOptions | None = None,
    config: CoreConfig | None = None,
) -> tuple[bytes, str]:
    return export_with_profile(ORDER_PROFILE, orders, services=services, options=options, config=config)


def export_orders_to_csv(
    orders: Iterable[Order],
    *,
    services: ExportServices | None = None,
    options: ExportOptions | None = None,
    config: CoreConfig | None = None,
) -> tuple[bytes, str]:
    fmt: TabularFormat = "csv"
    return export_with_profile(ORDER_PROFILE, orders, services=services, options=options, fmt=fmt, config=config)


__all__ = [
    "ADDRESS_COLUMN_FIELDS",
    "ORDER_COLUMNS",
    "ORDER_IGNORE",
    "ORDER_PROFILE",
    "ORDER_REPLACE_PAIRS",
    "address_replace_pairs",
    "export_orders_to_csv",
    "export_orders_to_xlsx",
    "order_accessors",
]
