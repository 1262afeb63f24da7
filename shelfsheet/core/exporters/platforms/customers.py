from collections.abc import Iterable

from ...canonical import Customer
from ...canonical.fields import FieldKind
from ...config import CoreConfig
from ...schema.columns import Accessor
from ..shared.profile import ExportOptions, ExportProfile, export_with_profile
from ..shared.services import ExportServices

ROLE_GUESTS = "Guests"
ROLE_REGISTERED = "Registered"
ROLE_ADMINISTRATORS = "Administrators"
ROLE_FORUM_MODERATORS = "ForumModerators"

# Generic attributes stored outside the customer record.
ATTRIBUTE_COLUMNS: tuple[str, ...] = (
    "FirstName",
    "LastName",
    "Gender",
    "Company",
    "StreetAddress",
    "StreetAddress2",
    "ZipPostalCode",
    "City",
    "Phone",
    "Fax",
)

CUSTOMER_COLUMNS: tuple[str, ...] = (
    "CustomerId",
    "CustomerGuid",
    "Email",
    "Username",
    "IsTaxExempt",
    "AffiliateId",
    "VendorId",
    "Active",
    "IsGuest",
    "IsRegistered",
    "IsAdministrator",
    "IsForumModerator",
    "CreatedOnUtc",
    *ATTRIBUTE_COLUMNS,
)

CUSTOMER_REPLACE_PAIRS: dict[str, str] = {"CustomerId": "Id"}

CUSTOMER_IGNORE: frozenset[str] = frozenset(
    {
        "EmailToRevalidate",
        "AdminComment",
        "HasShoppingCartItems",
        "RequireReLogin",
        "FailedLoginAttempts",
        "CannotLoginUntilDateUtc",
        "Deleted",
        "IsSystemAccount",
        "SystemName",
        "LastIpAddress",
        "LastLoginDateUtc",
        "LastActivityDateUtc",
        "RegisteredInStoreId",
        "BillingAddress",
        "ShippingAddress",
    }
)


def _role_flag(role: str) -> Accessor:
    return Accessor(lambda customer: role in customer.customer_roles, kind=FieldKind.BOOL)


def _attribute(services: ExportServices, key: str) -> Accessor:
    return Accessor(lambda customer: services.customer_attribute(customer, key))


def customer_accessors(services: ExportServices) -> dict[str, Accessor]:
    accessors = {
        "IsGuest": _role_flag(ROLE_GUESTS),
        "IsRegistered": _role_flag(ROLE_REGISTERED),
        "IsAdministrator": _role_flag(ROLE_ADMINISTRATORS),
        "IsForumModerator": _role_flag(ROLE_FORUM_MODERATORS),
    }
    for key in ATTRIBUTE_COLUMNS:
        accessors[key] = _attribute(services, key)
    return accessors


CUSTOMER_PROFILE = ExportProfile(
    kind="customer",
    record_type=Customer,
    columns=CUSTOMER_COLUMNS,
    replace_pairs=CUSTOMER_REPLACE_PAIRS,
    ignore=CUSTOMER_IGNORE,
    accessor_factory=customer_accessors,
    sheet_title="customers",
    filename_stem="customers",
)


def export_customers_to_xlsx(
    customers: Iterable[Customer],
    *,
    services: ExportServices | None = None,
    options: ExportOptions | None = None,
    config: CoreConfig | None = None,
) -> tuple[bytes, str]:
    return export_with_profile(CUSTOMER_PROFILE, customers, services=services, options=options, config=config)


__all__ = [
    "ATTRIBUTE_COLUMNS",
    "CUSTOMER_COLUMNS",
    "CUSTOMER_IGNORE",
    "CUSTOMER_PROFILE",
    "CUSTOMER_REPLACE_PAIRS",
    "ROLE_ADMINISTRATORS",
    "ROLE_FORUM_MODERATORS",
    "ROLE_GUESTS",
    "ROLE_REGISTERED",
    "customer_accessors",
    "export_customers_to_xlsx",
]
