from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from uuid import UUID, uuid4

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


@dataclass
class Country:
    name: str
    allows_billing: bool = True
    allows_shipping: bool = True
    two_letter_iso_code: str | None = None
    three_letter_iso_code: str | None = None
    numeric_iso_code: int = 0
    subject_to_vat: bool = False
    published: bool = True
    display_order: int = 0


@dataclass
class StateProvince:
    name: str
    abbreviation: str | None = None
    published: bool = True
    display_order: int = 0


@dataclass
class Address:
    id: int = 0
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    company: str | None = None
    country: Country | None = None
    state_province: StateProvince | None = None
    city: str | None = None
    address1: str | None = None
    address2: str | None = None
    zip_postal_code: str | None = None
    phone_number: str | None = None
    fax_number: str | None = None
    created_on_utc: datetime | None = None


@dataclass
class Customer:
    id: int = 0
    customer_guid: UUID = field(default_factory=uuid4)
    username: str | None = None
    email: str | None = None
    email_to_revalidate: str | None = None
    admin_comment: str | None = None
    is_tax_exempt: bool = False
    affiliate_id: int = 0
    vendor_id: int = 0
    has_shopping_cart_items: bool = False
    require_re_login: bool = False
    failed_login_attempts: int = 0
    cannot_login_until_date_utc: datetime | None = None
    active: bool = False
    deleted: bool = False
    is_system_account: bool = False
    system_name: str | None = None
    last_ip_address: str | None = None
    created_on_utc: datetime | None = None
    last_login_date_utc: datetime | None = None
    last_activity_date_utc: datetime | None = None
    registered_in_store_id: int = 0
    billing_address: Address | None = None
    shipping_address: Address | None = None
    customer_roles: list[str] = field(default_factory=list)


@dataclass
class Order:
    id: int = 0
    order_guid: UUID = field(default_factory=uuid4)
    store_id: int = 0
    customer_id: int = 0
    customer: Customer | None = None
    billing_address: Address | None = None
    shipping_address: Address | None = None
    pickup_address: Address | None = None
    pick_up_in_store: bool = False
    order_status: OrderStatus = OrderStatus.PENDING
    shipping_status: ShippingStatus = ShippingStatus.NOT_YET_SHIPPED
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_method_system_name: str | None = None
    customer_currency_code: str | None = None
    currency_rate: Decimal = Decimal("1")
    customer_tax_display_type: TaxDisplayType = TaxDisplayType.INCLUDING_TAX
    vat_number: str | None = None
    order_subtotal_incl_tax: Decimal = Decimal("0")
    order_subtotal_excl_tax: Decimal = Decimal("0")
    order_sub_total_discount_incl_tax: Decimal = Decimal("0")
    order_sub_total_discount_excl_tax: Decimal = Decimal("0")
    order_shipping_incl_tax: Decimal = Decimal("0")
    order_shipping_excl_tax: Decimal = Decimal("0")
    payment_method_additional_fee_incl_tax: Decimal = Decimal("0")
    payment_method_additional_fee_excl_tax: Decimal = Decimal("0")
    tax_rates: str | None = None
    order_tax: Decimal = Decimal("0")
    order_discount: Decimal = Decimal("0")
    order_total: Decimal = Decimal("0")
    refunded_amount: Decimal = Decimal("0")
    reward_points_history_entry_id: int | None = None
    checkout_attribute_description: str | None = None
    checkout_attributes_xml: str | None = None
    customer_language_id: int = 0
    affiliate_id: int = 0
    customer_ip: str | None = None
    allow_storing_credit_card_number: bool = False
    card_type: str | None = None
    card_name: str | None = None
    card_number: str | None = None
    masked_credit_card_number: str | None = None
    card_cvv2: str | None = None
    card_expiration_month: str | None = None
    card_expiration_year: str | None = None
    authorization_transaction_id: str | None = None
    authorization_transaction_code: str | None = None
    authorization_transaction_result: str | None = None
    capture_transaction_id: str | None = None
    capture_transaction_result: str | None = None
    subscription_transaction_id: str | None = None
    paid_date_utc: datetime | None = None
    shipping_method: str | None = None
    shipping_rate_computation_method_system_name: str | None = None
    custom_values_xml: str | None = None
    deleted: bool = False
    created_on_utc: datetime | None = None
    custom_order_number: str | None = None


@dataclass
class Manufacturer:
    id: int = 0
    name: str | None = None
    description: str | None = None
    manufacturer_template_id: int = 0
    meta_keywords: str | None = None
    meta_description: str | None = None
    meta_title: str | None = None
    picture_id: int = 0
    page_size: int = 0
    allow_customers_to_select_page_size: bool = False
    page_size_options: str | None = None
    price_ranges: str | None = None
    subject_to_acl: bool = False
    limited_to_stores: bool = False
    published: bool = False
    deleted: bool = False
    display_order: int = 0
    created_on_utc: datetime | None = None
    updated_on_utc: datetime | None = None


@dataclass
class Category:
    id: int = 0
    name: str | None = None
    description: str | None = None
    category_template_id: int = 0
    meta_keywords: str | None = None
    meta_description: str | None = None
    meta_title: str | None = None
    parent_category_id: int = 0
    picture_id: int = 0
    page_size: int = 0
    allow_customers_to_select_page_size: bool = False
    page_size_options: str | None = None
    price_ranges: str | None = None
    show_on_home_page: bool = False
    include_in_top_menu: bool = False
    subject_to_acl: bool = False
    limited_to_stores: bool = False
    published: bool = False
    deleted: bool = False
    display_order: int = 0
    created_on_utc: datetime | None = None
    updated_on_utc: datetime | None = None


@dataclass
class Product:
    id: int = 0
    product_type: ProductType = ProductType.SIMPLE_PRODUCT
    parent_grouped_product_id: int = 0
    visible_individually: bool = False
    name: str | None = None
    short_description: str | None = None
    full_description: str | None = None
    vendor_id: int = 0
    product_template_id: int = 0
    show_on_home_page: bool = False
    meta_keywords: str | None = None
    meta_description: str | None = None
    meta_title: str | None = None
    allow_customer_reviews: bool = False
    published: bool = False
    sku: str | None = None
    manufacturer_part_number: str | None = None
    gtin: str | None = None
    is_gift_card: bool = False
    gift_card_type: GiftCardType = GiftCardType.VIRTUAL
    overridden_gift_card_amount: Decimal | None = None
    require_other_products: bool = False
    required_product_ids: str | None = None
    automatically_add_required_products: bool = False
    is_download: bool = False
    download_id: int = 0
    unlimited_downloads: bool = False
    max_number_of_downloads: int = 0
    download_activation_type: DownloadActivationType = DownloadActivationType.WHEN_ORDER_IS_PAID
    has_sample_download: bool = False
    sample_download_id: int = 0
    has_user_agreement: bool = False
    user_agreement_text: str | None = None
    is_recurring: bool = False
    recurring_cycle_length: int = 0
    recurring_cycle_period: RecurringProductCyclePeriod = RecurringProductCyclePeriod.DAYS
    recurring_total_cycles: int = 0
    is_rental: bool = False
    rental_price_length: int = 0
    rental_price_period: RentalPricePeriod = RentalPricePeriod.DAYS
    is_ship_enabled: bool = False
    is_free_shipping: bool = False
    ship_separately: bool = False
    additional_shipping_charge: Decimal = Decimal("0")
    delivery_date_id: int = 0
    is_tax_exempt: bool = False
    tax_category_id: int = 0
    is_telecommunications_or_broadcasting_or_electronic_services: bool = False
    manage_inventory_method: ManageInventoryMethod = ManageInventoryMethod.DONT_MANAGE_STOCK
    product_availability_range_id: int = 0
    use_multiple_warehouses: bool = False
    warehouse_id: int = 0
    stock_quantity: int = 0
    display_stock_availability: bool = False
    display_stock_quantity: bool = False
    min_stock_quantity: int = 0
    low_stock_activity: LowStockActivity = LowStockActivity.NOTHING
    notify_admin_for_quantity_below: int = 0
    backorder_mode: BackorderMode = BackorderMode.NO_BACKORDERS
    allow_back_in_stock_subscriptions: bool = False
    order_minimum_quantity: int = 0
    order_maximum_quantity: int = 0
    allowed_quantities: str | None = None
    allow_adding_only_existing_attribute_combinations: bool = False
    not_returnable: bool = False
    disable_buy_button: bool = False
    disable_wishlist_button: bool = False
    available_for_pre_order: bool = False
    pre_order_availability_start_date_time_utc: datetime | None = None
    call_for_price: bool = False
    price: Decimal = Decimal("0")
    old_price: Decimal = Decimal("0")
    product_cost: Decimal = Decimal("0")
    customer_enters_price: bool = False
    minimum_customer_entered_price: Decimal = Decimal("0")
    maximum_customer_entered_price: Decimal = Decimal("0")
    baseprice_enabled: bool = False
    baseprice_amount: Decimal = Decimal("0")
    baseprice_unit_id: int = 0
    baseprice_base_amount: Decimal = Decimal("0")
    baseprice_base_unit_id: int = 0
    mark_as_new: bool = False
    mark_as_new_start_date_time_utc: datetime | None = None
    mark_as_new_end_date_time_utc: datetime | None = None
    weight: Decimal = Decimal("0")
    length: Decimal = Decimal("0")
    width: Decimal = Decimal("0")
    height: Decimal = Decimal("0")
    subject_to_acl: bool = False
    limited_to_stores: bool = False
    deleted: bool = False
    created_on_utc: datetime | None = None
    updated_on_utc: datetime | None = None
    product_tags: list[str] = field(default_factory=list)
