import csv
import io
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from slugify import slugify


def format_decimal(value: Decimal | None) -> str:
    if value is None:
        return ""
    if not value.is_finite():
        return ""

    text = format(value.normalize(), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in {"", "-0"}:
        return "0"
    return text


def format_bool(value: bool) -> str:
    return "TRUE" if value else "FALSE"


def parse_bool(value: Any) -> bool | None:
    text = str(value or "").strip().lower()
    if not text:
        return None
    if text in {"1", "true", "yes", "y"}:
        return True
    if text in {"0", "false", "no", "n"}:
        return False
    return None


def rows_to_csv(rows: list[list[str]], columns: list[str]) -> str:
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(columns)
    writer.writerows(rows)
    return output.getvalue()


def decode_csv_bytes(data: bytes) -> str:
    for encoding in ("utf-8-sig", "utf-8"):
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    raise ValueError("CSV must be UTF-8 encoded.")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def utc_timestamp_compact(now: datetime | None = None) -> str:
    dt = now or _utcnow()
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y%m%dT%H%M%SZ")


def make_export_filename(destination: str, *, extension: str = "xlsx", now: datetime | None = None) -> str:
    cleaned = slugify(destination or "", separator="-")
    if not cleaned:
        cleaned = "export"
    return f"{cleaned}-{utc_timestamp_compact(now)}.{extension}"
