"""Reporting: per-timepoint CSV/Excel output."""

from .output_writer import create_output_row, build_report_rows, write_results_csv, write_results_excel

__all__ = ["create_output_row", "build_report_rows", "write_results_csv", "write_results_excel"]
