"""Infrastructure layer - output formatting."""

from .formatters import CutListFormatter, JsonExporter, MaterialReportFormatter

__all__ = [
    "CutListFormatter",
    "JsonExporter",
    "MaterialReportFormatter",
]
