from collections.abc import Iterable

from ...canonical import Product
from ...config import CoreConfig
from ...schema.columns import Accessor, Lookup
from ..shared.profile import ExportOptions, ExportProfile, export_with_profile, lookup_from_services
from ..shared.services import (
    LOOKUP_AVAILABILITY_RANGES,
    LOOKUP_DELIVERY_DATES,
    LOOKUP_MEASURE_WEIGHTS,
    LOOKUP_PRODUCT_TEMPLATES,
    LOOKUP_TAX_CATEGORIES,
    LOOKUP_VENDORS,
    ExportServices,
)

PICTURE_COLUMN_COUNT = 3
LIST_SEPARATOR = ";"

PRODUCT_COLUMNS: tuple[str, ...] = (
    "ProductId",
    "ProductType",
    "ParentGroupedProductId",
    "VisibleIndividually",
    "Name",
    "ShortDescription",
    "FullDescription",
    "Vendor",
    "ProductTemplate",
    "ShowOnHomePage",
    "MetaKeywords",
    "MetaDescription",
    "MetaTitle",
    "SeName",
    "AllowCustomerReviews",
    "Published",
    "SKU",
    "ManufacturerPartNumber",
    "Gtin",
    "IsGiftCard",
    "GiftCardType",
    "OverriddenGiftCardAmount",
    "RequireOtherProducts",
    "RequiredProductIds",
    "AutomaticallyAddRequiredProducts",
    "IsDownload",
    "DownloadId",
    "UnlimitedDownloads",
    "MaxNumberOfDownloads",
    "DownloadActivationType",
    "HasSampleDownload",
    "SampleDownloadId",
    "HasUserAgreement",
    "UserAgreementText",
    "IsRecurring",
    "RecurringCycleLength",
    "RecurringCyclePeriod",
    "RecurringTotalCycles",
    "IsRental",
    "RentalPriceLength",
    "RentalPricePeriod",
    "IsShipEnabled",
    "IsFreeShipping",
    "ShipSeparately",
    "AdditionalShippingCharge",
    "DeliveryDate",
    "IsTaxExempt",
    "TaxCategory",
    "IsTelecommunicationsOrBroadcastingOrElectronicServices",
    "ManageInventoryMethod",
    "ProductAvailabilityRange",
    "UseMultipleWarehouses",
    "WarehouseId",
    "StockQuantity",
    "DisplayStockAvailability",
    "DisplayStockQuantity",
    "MinStockQuantity",
    "LowStockActivity",
    "NotifyAdminForQuantityBelow",
    "BackorderMode",
    "AllowBackInStockSubscriptions",
    "OrderMinimumQuantity",
    "OrderMaximumQuantity",
    "AllowedQuantities",
    "AllowAddingOnlyExistingAttributeCombinations",
    "NotReturnable",
    "DisableBuyButton",
    "DisableWishlistButton",
    "AvailableForPreOrder",
    "PreOrderAvailabilityStartDateTimeUtc",
    "CallForPrice",
    "Price",
    "OldPrice",
    "ProductCost",
    "CustomerEntersPrice",
    "MinimumCustomerEnteredPrice",
    "MaximumCustomerEnteredPrice",
    "BasepriceEnabled",
    "BasepriceAmount",
    "BasepriceUnit",
    "BasepriceBaseAmount",
    "BasepriceBaseUnit",
    "MarkAsNew",
    "MarkAsNewStartDateTimeUtc",
    "MarkAsNewEndDateTimeUtc",
    "Weight",
    "Length",
    "Width",
    "Height",
    "Categories",
    "Manufacturers",
    "ProductTags",
    *(f"Picture{position}" for position in range(1, PICTURE_COLUMN_COUNT + 1)),
)

PRODUCT_REPLACE_PAIRS: dict[str, str] = {
    "ProductId": "Id",
    "SKU": "Sku",
    "Vendor": "VendorId",
    "ProductTemplate": "ProductTemplateId",
    "DeliveryDate": "DeliveryDateId",
    "TaxCategory": "TaxCategoryId",
    "ProductAvailabilityRange": "ProductAvailabilityRangeId",
    "BasepriceUnit": "BasepriceUnitId",
    "BasepriceBaseUnit": "BasepriceBaseUnitId",
}

# Lookup column -> name of the services list that backs it.
PRODUCT_LOOKUP_SOURCES: dict[str, str] = {
    "Vendor": LOOKUP_VENDORS,
    "ProductTemplate": LOOKUP_PRODUCT_TEMPLATES,
    "DeliveryDate": LOOKUP_DELIVERY_DATES,
    "ProductAvailabilityRange": LOOKUP_AVAILABILITY_RANGES,
    "TaxCategory": LOOKUP_TAX_CATEGORIES,
    "BasepriceUnit": LOOKUP_MEASURE_WEIGHTS,
    "BasepriceBaseUnit": LOOKUP_MEASURE_WEIGHTS,
}

PRODUCT_IGNORE: frozenset[str] = frozenset(
    {
        "SubjectToAcl",
        "LimitedToStores",
        "Deleted",
        "CreatedOnUtc",
        "UpdatedOnUtc",
    }
)


def _joined(names: Iterable[str]) -> str:
    return LIST_SEPARATOR.join(name for name in names if name)


def _picture_accessor(services: ExportServices, position: int) -> Accessor:
    def _get(product: Product) -> str | None:
        paths = services.product_picture_paths(product.id, limit=PICTURE_COLUMN_COUNT)
        if len(paths) < position:
            return None
        return paths[position - 1]

    return Accessor(_get)


def product_accessors(services: ExportServices) -> dict[str, Accessor]:
    accessors = {
        "SeName": Accessor(services.se_name),
        "Categories": Accessor(lambda product: _joined(services.product_category_names(product.id))),
        "Manufacturers": Accessor(lambda product: _joined(services.product_manufacturer_names(product.id))),
        "ProductTags": Accessor(lambda product: _joined(product.product_tags)),
    }
    for position in range(1, PICTURE_COLUMN_COUNT + 1):
        accessors[f"Picture{position}"] = _picture_accessor(services, position)
    return accessors


def product_lookups(services: ExportServices) -> dict[str, Lookup]:
    resolved: dict[str, Lookup] = {}
    for column, source in PRODUCT_LOOKUP_SOURCES.items():
        resolved[column] = lookup_from_services(services, source)
    return resolved


PRODUCT_PROFILE = ExportProfile(
    kind="product",
    record_type=Product,
    columns=PRODUCT_COLUMNS,
    replace_pairs=PRODUCT_REPLACE_PAIRS,
    ignore=PRODUCT_IGNORE,
    accessor_factory=product_accessors,
    lookup_factory=product_lookups,
    sheet_title="products",
    filename_stem="products",
)


def export_products_to_xlsx(
    products: Iterable[Product],
    *,
    services: ExportServices | None = None,
    options: ExportOptions | None = None,
    config: CoreConfig | None = None,
) -> tuple[bytes, str]:
    return export_with_profile(PRODUCT_PROFILE, products, services=services, options=options, config=config)


__all__ = [
    "LIST_SEPARATOR",
    "PICTURE_COLUMN_COUNT",
    "PRODUCT_COLUMNS",
    "PRODUCT_IGNORE",
    "PRODUCT_LOOKUP_SOURCES",
    "PRODUCT_PROFILE",
    "PRODUCT_REPLACE_PAIRS",
    "export_products_to_xlsx",
    "product_accessors",
    "product_lookups",
]
