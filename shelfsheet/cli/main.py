"""Command-line frontend for the shelfsheet core engine."""

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from shelfsheet.config import get_settings
from shelfsheet.core import get_profile, list_profiles, read_xlsx, verify_export

load_dotenv(Path(__file__).resolve().parents[2] / ".env")


def _json_dump(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2, default=str))


def _configure_logging() -> None:
    settings = get_settings()
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("shelfsheet").setLevel(logging.DEBUG if settings.debug else logging.WARNING)


def _fmt_for(path: str, explicit: str | None) -> str:
    if explicit:
        return explicit
    return "csv" if Path(path).suffix.lower() == ".csv" else "xlsx"


def _cmd_columns(args: argparse.Namespace) -> int:
    profile = get_profile(args.kind)
    _json_dump(list(profile.columns))
    return 0


def _cmd_read(args: argparse.Namespace) -> int:
    result = read_xlsx(
        args.input,
        kind=args.kind,
        start_row=args.start_row,
        fmt=_fmt_for(args.input, args.format),
    )
    _json_dump(
        {
            "kind": result.kind,
            "header": result.header,
            "rows": [dict(row) for row in result.rows],
        }
    )
    return 0


def _cmd_verify(args: argparse.Namespace) -> int:
    header = verify_export(args.input, kind=args.kind, fmt=_fmt_for(args.input, args.format))
    _json_dump({"valid": True, "columns": len(header)})
    return 0


def build_parser() -> argparse.ArgumentParser:
    kinds = list_profiles()
    parser = argparse.ArgumentParser(prog="shelfsheet", description="shelfsheet spreadsheet export CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    columns = subparsers.add_parser("columns", help="Print the export header for a record kind")
    columns.add_argument("kind", choices=kinds)
    columns.set_defaults(func=_cmd_columns)

    read = subparsers.add_parser("read", help="Decode an exported sheet into JSON rows")
    read.add_argument("input", help="xlsx or csv file path")
    read.add_argument("--kind", required=True, choices=kinds)
    read.add_argument("--format", default=None, choices=["xlsx", "csv"])
    read.add_argument("--start-row", type=int, default=1)
    read.set_defaults(func=_cmd_read)

    verify = subparsers.add_parser("verify", help="Check that a sheet has a column for every exported field")
    verify.add_argument("input", help="xlsx or csv file path")
    verify.add_argument("--kind", required=True, choices=kinds)
    verify.add_argument("--format", default=None, choices=["xlsx", "csv"])
    verify.set_defaults(func=_cmd_verify)

    return parser


def main(argv: list[str] | None = None) -> int:
    _configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args) or 0)
    except Exception as exc:
        parser.exit(status=2, message=f"error: {exc}\n")


if __name__ == "__main__":
    raise SystemExit(main())
