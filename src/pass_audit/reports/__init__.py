"""Reports — render check, generation and edit results."""

from pass_audit.reports.exporters import EXPORT_FORMATS, export_result

__all__ = [
    "EXPORT_FORMATS",
    "export_result",
]
