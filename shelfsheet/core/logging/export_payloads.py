from collections.abc import Sequence
from dataclasses import asdict, is_dataclass
from decimal import Decimal
from typing import Any

from babel.numbers import get_currency_symbol

from ..canonical.entities import Order

_SUPPORTED_VERBOSITIES = {"low", "medium", "high", "extrahigh"}
_NAME_LIMITS = {
    "medium": 40,
    "high": 120,
}
_MEDIUM_ID_LIMIT = 10


def _normalize_verbosity(verbosity: str) -> str:
    normalized = str(verbosity or "").strip().lower()
    if normalized in _SUPPORTED_VERBOSITIES:
        return normalized
    return "medium"


def _truncate(value: str | None, *, limit: int) -> str:
    text = str(value or "").strip()
    if len(text) <= limit:
        return text
    return f"{text[:limit].rstrip()}... [truncated]"


def _format_number(value: Decimal | float | int | None) -> str:
    if value is None:
        return ""
    return f"{float(value):.2f}".rstrip("0").rstrip(".")


def _format_amount(value: Decimal | None, currency: str | None) -> str:
    if value is None:
        return ""
    number = _format_number(value)

    symbol = ""
    currency_code = str(currency or "").upper()
    if currency_code:
        try:
            symbol = get_currency_symbol(currency_code, locale="en_US")
        except Exception:
            symbol = currency_code

    if symbol:
        if symbol.isalpha():
            return f"{number} {symbol}"
        return f"{number}{symbol}"
    return number


def _order_totals(orders: Sequence[Order]) -> dict[str, str]:
    totals: dict[str, Decimal] = {}
    for order in orders:
        currency = str(order.customer_currency_code or "").strip().upper()
        totals[currency] = totals.get(currency, Decimal("0")) + (order.order_total or Decimal("0"))
    return {currency or "-": _format_amount(amount, currency) for currency, amount in sorted(totals.items())}


def _record_label(record: Any, *, limit: int) -> dict[str, Any]:
    label: dict[str, Any] = {"id": getattr(record, "id", None)}
    for attribute in ("name", "email", "custom_order_number"):
        value = getattr(record, attribute, None)
        if value:
            label[attribute] = _truncate(value, limit=limit)
            break
    if isinstance(record, Order):
        label["status"] = record.order_status.name if record.order_status is not None else None
        label["total"] = _format_amount(record.order_total, record.customer_currency_code)
    return label


def export_summary_to_loggable(
    kind: str,
    records: Sequence[Any],
    *,
    filename: str = "",
    verbosity: str | None = None,
    debug_enabled: bool | None = None,
) -> dict[str, Any] | None:
    """Log-safe description of an export, or ``None`` when debug is off."""
    if debug_enabled is None or verbosity is None:
        from ...config import get_settings

        settings = get_settings()
        if debug_enabled is None:
            debug_enabled = settings.debug
        if verbosity is None:
            verbosity = settings.log_verbosity

    if not debug_enabled:
        return None

    level = _normalize_verbosity(verbosity)
    summary: dict[str, Any] = {"kind": kind, "filename": filename, "count": len(records)}
    if level == "low":
        return summary

    orders = [record for record in records if isinstance(record, Order)]
    if orders:
        summary["totals"] = _order_totals(orders)

    if level == "extrahigh":
        summary["records"] = [asdict(record) if is_dataclass(record) else repr(record) for record in records]
        return summary

    if level == "high":
        summary["records"] = [_record_label(record, limit=_NAME_LIMITS["high"]) for record in records]
        return summary

    summary["ids"] = [getattr(record, "id", None) for record in records[:_MEDIUM_ID_LIMIT]]
    summary["records"] = [
        _record_label(record, limit=_NAME_LIMITS["medium"]) for record in records[:_MEDIUM_ID_LIMIT]
    ]
    return summary


__all__ = ["export_summary_to_loggable"]
