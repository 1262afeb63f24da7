from .profile import ExportOptions, ExportProfile, export_with_profile, lookup_from_services
from .services import ExportServices, StaticExportServices

__all__ = [
    "ExportOptions",
    "ExportProfile",
    "ExportServices",
    "StaticExportServices",
    "export_with_profile",
    "lookup_from_services",
]
