"""Services module."""
from dentist_finder.services.report_service import DentistReportService

__all__ = [
    "DentistReportService",
]
