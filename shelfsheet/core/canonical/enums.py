from enum import IntEnum


class OrderStatus(IntEnum):
    PENDING = 10
    PROCESSING = 20
    COMPLETE = 30
    CANCELLED = 40


class PaymentStatus(IntEnum):
    PENDING = 10
    AUTHORIZED = 20
    PAID = 30
    PARTIALLY_REFUNDED = 35
    REFUNDED = 40
    VOIDED = 50


class ShippingStatus(IntEnum):
    SHIPPING_NOT_REQUIRED = 10
    NOT_YET_SHIPPED = 20
    PARTIALLY_SHIPPED = 25
    SHIPPED = 30
    DELIVERED = 40


class TaxDisplayType(IntEnum):
    INCLUDING_TAX = 0
    EXCLUDING_TAX = 10


class ProductType(IntEnum):
    SIMPLE_PRODUCT = 5
    GROUPED_PRODUCT = 10


class GiftCardType(IntEnum):
    VIRTUAL = 0
    PHYSICAL = 1


class DownloadActivationType(IntEnum):
    WHEN_ORDER_IS_PAID = 0
    MANUALLY = 10


class RecurringProductCyclePeriod(IntEnum):
    DAYS = 0
    WEEKS = 10
    MONTHS = 20
    YEARS = 30


class RentalPricePeriod(IntEnum):
    DAYS = 0
    WEEKS = 10
    MONTHS = 20
    YEARS = 30


class ManageInventoryMethod(IntEnum):
    DONT_MANAGE_STOCK = 0
    MANAGE_STOCK = 1
    MANAGE_STOCK_BY_ATTRIBUTES = 2


class LowStockActivity(IntEnum):
    NOTHING = 0
    DISABLE_BUY_BUTTON = 1
    UNPUBLISH = 2


class BackorderMode(IntEnum):
    NO_BACKORDERS = 0
    ALLOW_QTY_BELOW_0 = 1
    ALLOW_QTY_BELOW_0_AND_NOTIFY_CUSTOMER = 2
