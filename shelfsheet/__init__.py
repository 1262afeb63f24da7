"""Public package entrypoint for the shelfsheet engine.

Exports store records (orders, customers, catalog entities) to spreadsheet
files through static column profiles, and reads those files back.
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "ExportResult": ("shelfsheet.core", "ExportResult"),
    "ReadResult": ("shelfsheet.core", "ReadResult"),
    "StaticExportServices": ("shelfsheet.core", "StaticExportServices"),
    "export_records": ("shelfsheet.core", "export_records"),
    "export_xlsx": ("shelfsheet.core", "export_xlsx"),
    "read_xlsx": ("shelfsheet.core", "read_xlsx"),
    "verify_export": ("shelfsheet.core", "verify_export"),
}

try:
    __version__ = version("shelfsheet")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "ExportResult",
    "ReadResult",
    "StaticExportServices",
    "__version__",
    "export_records",
    "export_xlsx",
    "read_xlsx",
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
