from .export_payloads import export_summary_to_loggable

__all__ = ["export_summary_to_loggable"]
