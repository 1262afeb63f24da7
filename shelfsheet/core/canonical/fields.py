"""Static field tables for every exportable record type.

Each table maps an exported field name (``"OrderTotal"``) to the dataclass
attribute that holds it and the kind of value stored there. Column binding and
completeness checks consult these tables only; record types are never
introspected at runtime.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any

from .entities import Address, Category, Customer, Manufacturer, Order, Product
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


class FieldKind(str, Enum):
    TEXT = "text"
    INT = "int"
    BOOL = "bool"
    DECIMAL = "decimal"
    ENUM = "enum"
    DATETIME = "datetime"
    GUID = "guid"
    REFERENCE = "reference"
    LOOKUP = "lookup"


@dataclass(frozen=True)
class FieldSpec:
    attribute: str
    kind: FieldKind = FieldKind.TEXT
    enum: type[IntEnum] | None = None


FieldTable = Mapping[str, FieldSpec]


def _text(attribute: str) -> FieldSpec:
    return FieldSpec(attribute, FieldKind.TEXT)


def _int(attribute: str) -> FieldSpec:
    return FieldSpec(attribute, FieldKind.INT)


def _bool(attribute: str) -> FieldSpec:
    return FieldSpec(attribute, FieldKind.BOOL)


def _decimal(attribute: str) -> FieldSpec:
    return FieldSpec(attribute, FieldKind.DECIMAL)


def _date(attribute: str) -> FieldSpec:
    return FieldSpec(attribute, FieldKind.DATETIME)


def _guid(attribute: str) -> FieldSpec:
    return FieldSpec(attribute, FieldKind.GUID)


def _ref(attribute: str) -> FieldSpec:
    return FieldSpec(attribute, FieldKind.REFERENCE)


def _enum(attribute: str, enum: type[IntEnum]) -> FieldSpec:
    return FieldSpec(attribute, FieldKind.ENUM, enum)


ADDRESS_FIELDS: FieldTable = {
    "Id": _int("id"),
    "FirstName": _text("first_name"),
    "LastName": _text("last_name"),
    "Email": _text("email"),
    "Company": _text("company"),
    "Country": _ref("country"),
    "StateProvince": _ref("state_province"),
    "City": _text("city"),
    "Address1": _text("address1"),
    "Address2": _text("address2"),
    "ZipPostalCode": _text("zip_postal_code"),
    "PhoneNumber": _text("phone_number"),
    "FaxNumber": _text("fax_number"),
    "CreatedOnUtc": _date("created_on_utc"),
}

CUSTOMER_FIELDS: FieldTable = {
    "Id": _int("id"),
    "CustomerGuid": _guid("customer_guid"),
    "Username": _text("username"),
    "Email": _text("email"),
    "EmailToRevalidate": _text("email_to_revalidate"),
    "AdminComment": _text("admin_comment"),
    "IsTaxExempt": _bool("is_tax_exempt"),
    "AffiliateId": _int("affiliate_id"),
    "VendorId": _int("vendor_id"),
    "HasShoppingCartItems": _bool("has_shopping_cart_items"),
    "RequireReLogin": _bool("require_re_login"),
    "FailedLoginAttempts": _int("failed_login_attempts"),
    "CannotLoginUntilDateUtc": _date("cannot_login_until_date_utc"),
    "Active": _bool("active"),
    "Deleted": _bool("deleted"),
    "IsSystemAccount": _bool("is_system_account"),
    "SystemName": _text("system_name"),
    "LastIpAddress": _text("last_ip_address"),
    "CreatedOnUtc": _date("created_on_utc"),
    "LastLoginDateUtc": _date("last_login_date_utc"),
    "LastActivityDateUtc": _date("last_activity_date_utc"),
    "RegisteredInStoreId": _int("registered_in_store_id"),
    "BillingAddress": _ref("billing_address"),
    "ShippingAddress": _ref("shipping_address"),
}

ORDER_FIELDS: FieldTable = {
    "Id": _int("id"),
    "OrderGuid": _guid("order_guid"),
    "StoreId": _int("store_id"),
    "CustomerId": _int("customer_id"),
    "Customer": _ref("customer"),
    "BillingAddress": _ref("billing_address"),
    "ShippingAddress": _ref("shipping_address"),
    "PickupAddress": _ref("pickup_address"),
    "PickUpInStore": _bool("pick_up_in_store"),
    "OrderStatus": _enum("order_status", OrderStatus),
    "ShippingStatus": _enum("shipping_status", ShippingStatus),
    "PaymentStatus": _enum("payment_status", PaymentStatus),
    "PaymentMethodSystemName": _text("payment_method_system_name"),
    "CustomerCurrencyCode": _text("customer_currency_code"),
    "CurrencyRate": _decimal("currency_rate"),
    "CustomerTaxDisplayType": _enum("customer_tax_display_type", TaxDisplayType),
    "VatNumber": _text("vat_number"),
    "OrderSubtotalInclTax": _decimal("order_subtotal_incl_tax"),
    "OrderSubtotalExclTax": _decimal("order_subtotal_excl_tax"),
    "OrderSubTotalDiscountInclTax": _decimal("order_sub_total_discount_incl_tax"),
    "OrderSubTotalDiscountExclTax": _decimal("order_sub_total_discount_excl_tax"),
    "OrderShippingInclTax": _decimal("order_shipping_incl_tax"),
    "OrderShippingExclTax": _decimal("order_shipping_excl_tax"),
    "PaymentMethodAdditionalFeeInclTax": _decimal("payment_method_additional_fee_incl_tax"),
    "PaymentMethodAdditionalFeeExclTax": _decimal("payment_method_additional_fee_excl_tax"),
    "TaxRates": _text("tax_rates"),
    "OrderTax": _decimal("order_tax"),
    "OrderDiscount": _decimal("order_discount"),
    "OrderTotal": _decimal("order_total"),
    "RefundedAmount": _decimal("refunded_amount"),
    "RewardPointsHistoryEntryId": _int("reward_points_history_entry_id"),
    "CheckoutAttributeDescription": _text("checkout_attribute_description"),
    "CheckoutAttributesXml": _text("checkout_attributes_xml"),
    "CustomerLanguageId": _int("customer_language_id"),
    "AffiliateId": _int("affiliate_id"),
    "CustomerIp": _text("customer_ip"),
    "AllowStoringCreditCardNumber": _bool("allow_storing_credit_card_number"),
    "CardType": _text("card_type"),
    "CardName": _text("card_name"),
    "CardNumber": _text("card_number"),
    "MaskedCreditCardNumber": _text("masked_credit_card_number"),
    "CardCvv2": _text("card_cvv2"),
    "CardExpirationMonth": _text("card_expiration_month"),
    "CardExpirationYear": _text("card_expiration_year"),
    "AuthorizationTransactionId": _text("authorization_transaction_id"),
    "AuthorizationTransactionCode": _text("authorization_transaction_code"),
    "AuthorizationTransactionResult": _text("authorization_transaction_result"),
    "CaptureTransactionId": _text("capture_transaction_id"),
    "CaptureTransactionResult": _text("capture_transaction_result"),
    "SubscriptionTransactionId": _text("subscription_transaction_id"),
    "PaidDateUtc": _date("paid_date_utc"),
    "ShippingMethod": _text("shipping_method"),
    "ShippingRateComputationMethodSystemName": _text("shipping_rate_computation_method_system_name"),
    "CustomValuesXml": _text("custom_values_xml"),
    "Deleted": _bool("deleted"),
    "CreatedOnUtc": _date("created_on_utc"),
    "CustomOrderNumber": _text("custom_order_number"),
}

MANUFACTURER_FIELDS: FieldTable = {
    "Id": _int("id"),
    "Name": _text("name"),
    "Description": _text("description"),
    "ManufacturerTemplateId": _int("manufacturer_template_id"),
    "MetaKeywords": _text("meta_keywords"),
    "MetaDescription": _text("meta_description"),
    "MetaTitle": _text("meta_title"),
    "PictureId": _int("picture_id"),
    "PageSize": _int("page_size"),
    "AllowCustomersToSelectPageSize": _bool("allow_customers_to_select_page_size"),
    "PageSizeOptions": _text("page_size_options"),
    "PriceRanges": _text("price_ranges"),
    "SubjectToAcl": _bool("subject_to_acl"),
    "LimitedToStores": _bool("limited_to_stores"),
    "Published": _bool("published"),
    "Deleted": _bool("deleted"),
    "DisplayOrder": _int("display_order"),
    "CreatedOnUtc": _date("created_on_utc"),
    "UpdatedOnUtc": _date("updated_on_utc"),
}

CATEGORY_FIELDS: FieldTable = {
    "Id": _int("id"),
    "Name": _text("name"),
    "Description": _text("description"),
    "CategoryTemplateId": _int("category_template_id"),
    "MetaKeywords": _text("meta_keywords"),
    "MetaDescription": _text("meta_description"),
    "MetaTitle": _text("meta_title"),
    "ParentCategoryId": _int("parent_category_id"),
    "PictureId": _int("picture_id"),
    "PageSize": _int("page_size"),
    "AllowCustomersToSelectPageSize": _bool("allow_customers_to_select_page_size"),
    "PageSizeOptions": _text("page_size_options"),
    "PriceRanges": _text("price_ranges"),
    "ShowOnHomePage": _bool("show_on_home_page"),
    "IncludeInTopMenu": _bool("include_in_top_menu"),
    "SubjectToAcl": _bool("subject_to_acl"),
    "LimitedToStores": _bool("limited_to_stores"),
    "Published": _bool("published"),
    "Deleted": _bool("deleted"),
    "DisplayOrder": _int("display_order"),
    "CreatedOnUtc": _date("created_on_utc"),
    "UpdatedOnUtc": _date("updated_on_utc"),
}

PRODUCT_FIELDS: FieldTable = {
    "Id": _int("id"),
    "ProductType": _enum("product_type", ProductType),
    "ParentGroupedProductId": _int("parent_grouped_product_id"),
    "VisibleIndividually": _bool("visible_individually"),
    "Name": _text("name"),
    "ShortDescription": _text("short_description"),
    "FullDescription": _text("full_description"),
    "VendorId": _int("vendor_id"),
    "ProductTemplateId": _int("product_template_id"),
    "ShowOnHomePage": _bool("show_on_home_page"),
    "MetaKeywords": _text("meta_keywords"),
    "MetaDescription": _text("meta_description"),
    "MetaTitle": _text("meta_title"),
    "AllowCustomerReviews": _bool("allow_customer_reviews"),
    "Published": _bool("published"),
    "Sku": _text("sku"),
    "ManufacturerPartNumber": _text("manufacturer_part_number"),
    "Gtin": _text("gtin"),
    "IsGiftCard": _bool("is_gift_card"),
    "GiftCardType": _enum("gift_card_type", GiftCardType),
    "OverriddenGiftCardAmount": _decimal("overridden_gift_card_amount"),
    "RequireOtherProducts": _bool("require_other_products"),
    "RequiredProductIds": _text("required_product_ids"),
    "AutomaticallyAddRequiredProducts": _bool("automatically_add_required_products"),
    "IsDownload": _bool("is_download"),
    "DownloadId": _int("download_id"),
    "UnlimitedDownloads": _bool("unlimited_downloads"),
    "MaxNumberOfDownloads": _int("max_number_of_downloads"),
    "DownloadActivationType": _enum("download_activation_type", DownloadActivationType),
    "HasSampleDownload": _bool("has_sample_download"),
    "SampleDownloadId": _int("sample_download_id"),
    "HasUserAgreement": _bool("has_user_agreement"),
    "UserAgreementText": _text("user_agreement_text"),
    "IsRecurring": _bool("is_recurring"),
    "RecurringCycleLength": _int("recurring_cycle_length"),
    "RecurringCyclePeriod": _enum("recurring_cycle_period", RecurringProductCyclePeriod),
    "RecurringTotalCycles": _int("recurring_total_cycles"),
    "IsRental": _bool("is_rental"),
    "RentalPriceLength": _int("rental_price_length"),
    "RentalPricePeriod": _enum("rental_price_period", RentalPricePeriod),
    "IsShipEnabled": _bool("is_ship_enabled"),
    "IsFreeShipping": _bool("is_free_shipping"),
    "ShipSeparately": _bool("ship_separately"),
    "AdditionalShippingCharge": _decimal("additional_shipping_charge"),
    "DeliveryDateId": _int("delivery_date_id"),
    "IsTaxExempt": _bool("is_tax_exempt"),
    "TaxCategoryId": _int("tax_category_id"),
    "IsTelecommunicationsOrBroadcastingOrElectronicServices": _bool(
        "is_telecommunications_or_broadcasting_or_electronic_services"
    ),
    "ManageInventoryMethod": _enum("manage_inventory_method", ManageInventoryMethod),
    "ProductAvailabilityRangeId": _int("product_availability_range_id"),
    "UseMultipleWarehouses": _bool("use_multiple_warehouses"),
    "WarehouseId": _int("warehouse_id"),
    "StockQuantity": _int("stock_quantity"),
    "DisplayStockAvailability": _bool("display_stock_availability"),
    "DisplayStockQuantity": _bool("display_stock_quantity"),
    "MinStockQuantity": _int("min_stock_quantity"),
    "LowStockActivity": _enum("low_stock_activity", LowStockActivity),
    "NotifyAdminForQuantityBelow": _int("notify_admin_for_quantity_below"),
    "BackorderMode": _enum("backorder_mode", BackorderMode),
    "AllowBackInStockSubscriptions": _bool("allow_back_in_stock_subscriptions"),
    "OrderMinimumQuantity": _int("order_minimum_quantity"),
    "OrderMaximumQuantity": _int("order_maximum_quantity"),
    "AllowedQuantities": _text("allowed_quantities"),
    "AllowAddingOnlyExistingAttributeCombinations": _bool("allow_adding_only_existing_attribute_combinations"),
    "NotReturnable": _bool("not_returnable"),
    "DisableBuyButton": _bool("disable_buy_button"),
    "DisableWishlistButton": _bool("disable_wishlist_button"),
    "AvailableForPreOrder": _bool("available_for_pre_order"),
    "PreOrderAvailabilityStartDateTimeUtc": _date("pre_order_availability_start_date_time_utc"),
    "CallForPrice": _bool("call_for_price"),
    "Price": _decimal("price"),
    "OldPrice": _decimal("old_price"),
    "ProductCost": _decimal("product_cost"),
    "CustomerEntersPrice": _bool("customer_enters_price"),
    "MinimumCustomerEnteredPrice": _decimal("minimum_customer_entered_price"),
    "MaximumCustomerEnteredPrice": _decimal("maximum_customer_entered_price"),
    "BasepriceEnabled": _bool("baseprice_enabled"),
    "BasepriceAmount": _decimal("baseprice_amount"),
    "BasepriceUnitId": _int("baseprice_unit_id"),
    "BasepriceBaseAmount": _decimal("baseprice_base_amount"),
    "BasepriceBaseUnitId": _int("baseprice_base_unit_id"),
    "MarkAsNew": _bool("mark_as_new"),
    "MarkAsNewStartDateTimeUtc": _date("mark_as_new_start_date_time_utc"),
    "MarkAsNewEndDateTimeUtc": _date("mark_as_new_end_date_time_utc"),
    "Weight": _decimal("weight"),
    "Length": _decimal("length"),
    "Width": _decimal("width"),
    "Height": _decimal("height"),
    "SubjectToAcl": _bool("subject_to_acl"),
    "LimitedToStores": _bool("limited_to_stores"),
    "Deleted": _bool("deleted"),
    "CreatedOnUtc": _date("created_on_utc"),
    "UpdatedOnUtc": _date("updated_on_utc"),
}

_FIELD_TABLES: dict[type, FieldTable] = {
    Address: ADDRESS_FIELDS,
    Category: CATEGORY_FIELDS,
    Customer: CUSTOMER_FIELDS,
    Manufacturer: MANUFACTURER_FIELDS,
    Order: ORDER_FIELDS,
    Product: PRODUCT_FIELDS,
}

# Collections held on a record that are never part of its field table.
_NAVIGATION_ATTRIBUTES: dict[type, frozenset[str]] = {
    Customer: frozenset({"customer_roles"}),
    Product: frozenset({"product_tags"}),
}


def register_field_table(record_type: type, table: FieldTable) -> None:
    _FIELD_TABLES[record_type] = dict(table)


def field_table(record_type: type) -> FieldTable:
    table = _FIELD_TABLES.get(record_type)
    if table is None:
        raise KeyError(f"No field table declared for record type: {record_type.__name__}")
    return table


def navigation_attributes(record_type: type) -> frozenset[str]:
    return _NAVIGATION_ATTRIBUTES.get(record_type, frozenset())


def record_type_of(record_or_type: Any) -> type:
    if isinstance(record_or_type, type):
        return record_or_type
    return type(record_or_type)


__all__ = [
    "ADDRESS_FIELDS",
    "CATEGORY_FIELDS",
    "CUSTOMER_FIELDS",
    "FieldKind",
    "FieldSpec",
    "FieldTable",
    "MANUFACTURER_FIELDS",
    "ORDER_FIELDS",
    "PRODUCT_FIELDS",
    "field_table",
    "navigation_attributes",
    "record_type_of",
    "register_field_table",
]
