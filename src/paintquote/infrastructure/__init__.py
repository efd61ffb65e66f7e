"""Infrastructure layer - external concerns and formatters."""

from .formatters import (
    JsonExporter,
    LabourReportFormatter,
    MaterialReportFormatter,
    QuotationFormatter,
    RoomAreaFormatter,
)

__all__ = [
    "JsonExporter",
    "LabourReportFormatter",
    "MaterialReportFormatter",
    "QuotationFormatter",
    "RoomAreaFormatter",
]
