import json
from pathlib import Path

import pytest

from shelfsheet.cli.main import build_parser, main
from shelfsheet.core import export_xlsx
from shelfsheet.core.exporters.platforms.orders import ORDER_COLUMNS
from tests.helpers._record_builders import build_manufacturer, build_order


def test_columns_command_prints_export_header(capsys) -> None:
    assert main(["columns", "order"]) == 0

    assert json.loads(capsys.readouterr().out) == list(ORDER_COLUMNS)


def test_read_command_prints_decoded_rows(tmp_path: Path, capsys) -> None:
    result = export_xlsx([build_order()], kind="order")
    path = tmp_path / "orders.xlsx"
    path.write_bytes(result.data)

    assert main(["read", str(path), "--kind", "order"]) == 0
    payload = json.loads(capsys.readouterr().out)

    assert payload["kind"] == "order"
    assert payload["rows"][0]["OrderStatusId"] == 30
    assert payload["rows"][0]["OrderTotal"] == "12.1"


def test_read_command_detects_csv_by_extension(tmp_path: Path, capsys) -> None:
    result = export_xlsx([build_order()], kind="order", fmt="csv")
    path = tmp_path / "orders.csv"
    path.write_bytes(result.data)

    assert main(["read", str(path), "--kind", "order"]) == 0

    assert json.loads(capsys.readouterr().out)["rows"][0]["OrderId"] == 1001


def test_verify_command(tmp_path: Path, capsys) -> None:
    result = export_xlsx([build_manufacturer()], kind="manufacturer")
    path = tmp_path / "manufacturers.xlsx"
    path.write_bytes(result.data)

    assert main(["verify", str(path), "--kind", "manufacturer"]) == 0

    assert json.loads(capsys.readouterr().out)["valid"] is True


def test_errors_exit_with_status_two(tmp_path: Path, capsys) -> None:
    path = tmp_path / "broken.xlsx"
    path.write_bytes(b"not a workbook")

    with pytest.raises(SystemExit) as exc_info:
        main(["read", str(path), "--kind", "order"])

    assert exc_info.value.code == 2
    assert "error:" in capsys.readouterr().err


def test_parser_rejects_unknown_kind() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["columns", "invoice"])
