"""Core engine API.

The core layer is framework-agnostic and safe to import from scripts, tests
and CLI commands.
"""

from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "CoreConfig": ("shelfsheet.core.config", "CoreConfig"),
    "ExportOptions": ("shelfsheet.core.exporters", "ExportOptions"),
    "ExportProfile": ("shelfsheet.core.exporters", "ExportProfile"),
    "ExportResult": ("shelfsheet.core.api", "ExportResult"),
    "ExportServices": ("shelfsheet.core.exporters", "ExportServices"),
    "ReadResult": ("shelfsheet.core.api", "ReadResult"),
    "StaticExportServices": ("shelfsheet.core.exporters", "StaticExportServices"),
    "config_from_env": ("shelfsheet.core.config", "config_from_env"),
    "decode": ("shelfsheet.core.codec", "decode"),
    "decode_records": ("shelfsheet.core.codec", "decode_records"),
    "derive_columns": ("shelfsheet.core.schema", "derive_columns"),
    "encode": ("shelfsheet.core.codec", "encode"),
    "export_records": ("shelfsheet.core.exporters", "export_records"),
    "export_xlsx": ("shelfsheet.core.api", "export_xlsx"),
    "get_profile": ("shelfsheet.core.registry", "get_profile"),
    "list_profiles": ("shelfsheet.core.registry", "list_profiles"),
    "read_xlsx": ("shelfsheet.core.api", "read_xlsx"),
    "register_profile": ("shelfsheet.core.registry", "register_profile"),
    "verify_all_fields_covered": ("shelfsheet.core.schema", "verify_all_fields_covered"),
    "verify_export": ("shelfsheet.core.api", "verify_export"),
}

__all__ = [
    "CoreConfig",
    "ExportOptions",
    "ExportProfile",
    "ExportResult",
    "ExportServices",
    "ReadResult",
    "StaticExportServices",
    "config_from_env",
    "decode",
    "decode_records",
    "derive_columns",
    "encode",
    "export_records",
    "export_xlsx",
    "get_profile",
    "list_profiles",
    "read_xlsx",
    "register_profile",
    "verify_all_fields_covered",
    "verify_export",
]


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
