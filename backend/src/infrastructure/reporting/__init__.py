"""Reporting infrastructure module."""

from .csv_exporter import RosterCSVExporter, HEADERS

__all__ = ["RosterCSVExporter", "HEADERS"]
