from decimal import Decimal

from shelfsheet.core.logging import export_summary_to_loggable
from tests.helpers._record_builders import build_manufacturer, build_order


def _orders():
    return [
        build_order(order_total=Decimal("12.1")),
        build_order(id=1002, order_total=Decimal("7.9")),
        build_order(id=1003, order_total=Decimal("5"), customer_currency_code="EUR"),
    ]


def test_summary_is_skipped_when_debug_is_off() -> None:
    assert export_summary_to_loggable("order", _orders(), debug_enabled=False) is None


def test_low_verbosity_keeps_counts_only() -> None:
    loggable = export_summary_to_loggable(
        "order", _orders(), filename="orders.xlsx", verbosity="low", debug_enabled=True
    )

    assert loggable == {"kind": "order", "filename": "orders.xlsx", "count": 3}


def test_medium_verbosity_formats_totals_with_currency_symbols() -> None:
    loggable = export_summary_to_loggable("order", _orders(), verbosity="medium", debug_enabled=True)

    assert loggable["totals"] == {"EUR": "5€", "USD": "20$"}
    assert loggable["ids"] == [1001, 1002, 1003]
    assert loggable["records"][0]["status"] == "COMPLETE"
    assert loggable["records"][0]["total"] == "12.1$"


def test_high_verbosity_truncates_long_names() -> None:
    records = [build_manufacturer(name="N" * 300)]

    loggable = export_summary_to_loggable("manufacturer", records, verbosity="high", debug_enabled=True)

    assert loggable["records"][0]["name"].endswith("... [truncated]")
    assert "totals" not in loggable


def test_extrahigh_verbosity_includes_full_records() -> None:
    loggable = export_summary_to_loggable("order", _orders(), verbosity="extrahigh", debug_enabled=True)

    assert loggable["records"][0]["order_total"] == Decimal("12.1")
    assert loggable["records"][0]["billing_address"]["city"] == "London"


def test_settings_drive_the_defaults(monkeypatch) -> None:
    from shelfsheet.config import get_settings

    monkeypatch.setenv("SHELFSHEET_DEBUG", "1")
    monkeypatch.setenv("LOG_VERBOSITY", "low")
    get_settings.cache_clear()

    assert export_summary_to_loggable("order", _orders()) == {"kind": "order", "filename": "", "count": 3}
