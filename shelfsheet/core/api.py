"""Stable public API facade for the shelfsheet core engine."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .codec.reader import SheetRow, decode_sheet, populate_record
from .codec.writer import TabularFormat
from .config import CoreConfig, config_from_env
from .exporters import export_records
from .exporters.shared.profile import ExportOptions, ExportProfile
from .exporters.shared.services import ExportServices, StaticExportServices
from .logging.export_payloads import export_summary_to_loggable
from .registry import get_profile, list_profiles
from .schema.coverage import verify_all_fields_covered

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportResult:
    data: bytes
    filename: str


@dataclass
class ReadResult:
    kind: str
    header: list[str] = field(default_factory=list)
    rows: list[SheetRow] = field(default_factory=list)
    records: list[Any] = field(default_factory=list)


def _resolve_profile(kind: str) -> ExportProfile:
    try:
        return get_profile(kind)
    except KeyError as exc:
        raise ValueError(f"kind must be one of: {', '.join(list_profiles())}") from exc


def _coerce_bytes(value: bytes | str | Path) -> bytes:
    if isinstance(value, bytes):
        return value
    return Path(value).read_bytes()


def export_xlsx(
    records: Any | list[Any],
    *,
    kind: str,
    services: ExportServices | None = None,
    exclude: Iterable[str] = (),
    strict: bool = False,
    fmt: TabularFormat = "xlsx",
) -> ExportResult:
    items = list(records) if isinstance(records, (list, tuple)) else [records]
    config = config_from_env(strict=strict)
    data, filename = export_records(
        kind,
        items,
        services=services,
        options=ExportOptions(exclude=frozenset(exclude), strict=strict),
        fmt=fmt,
        config=config,
    )
    logger.info("Exported %d %s record(s) to %s", len(items), kind, filename)
    payload = export_summary_to_loggable(kind, items, filename=filename)
    if payload is not None:
        logger.debug("Export summary: %s", payload)
    return ExportResult(data=data, filename=filename)


def read_xlsx(
    sheet_input: bytes | str | Path,
    *,
    kind: str,
    services: ExportServices | None = None,
    start_row: int = 1,
    fmt: TabularFormat = "xlsx",
) -> ReadResult:
    profile = _resolve_profile(kind)
    resolved_services = services if services is not None else StaticExportServices()
    sheet = decode_sheet(
        _coerce_bytes(sheet_input),
        profile.record_type,
        start_row,
        fmt=fmt,
        replace_pairs=profile.replace_pairs,
        accessors=profile.accessors(resolved_services),
        lookups=profile.lookups(resolved_services),
    )
    records = [populate_record(profile.record_type(), row, sheet.columns) for row in sheet.rows]
    return ReadResult(kind=profile.kind, header=sheet.header, rows=sheet.rows, records=records)


def verify_export(
    sheet_input: bytes | str | Path,
    *,
    kind: str,
    services: ExportServices | None = None,
    fmt: TabularFormat = "xlsx",
) -> list[str]:
    """Check that the sheet has a column for every non-ignored field.

    Returns the header on success; raises ``MissingColumn`` otherwise.
    """
    profile = _resolve_profile(kind)
    resolved_services = services if services is not None else StaticExportServices()
    sheet = decode_sheet(
        _coerce_bytes(sheet_input),
        profile.record_type,
        fmt=fmt,
        replace_pairs=profile.replace_pairs,
        accessors=profile.accessors(resolved_services),
        lookups=profile.lookups(resolved_services),
    )
    verify_all_fields_covered(profile.record_type, sheet.columns, profile.ignore)
    return sheet.header


__all__ = [
    "CoreConfig",
    "ExportResult",
    "ReadResult",
    "config_from_env",
    "export_xlsx",
    "read_xlsx",
    "verify_export",
]
