"""Checklist export formats."""

from .csv_exporter import CSV_HEADER, csv_filename, export_to_csv

__all__ = ["CSV_HEADER", "csv_filename", "export_to_csv"]
