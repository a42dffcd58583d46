"""Styled Excel workbook output."""
from .formatters import add_kpi_card, auto_column_width, format_data_cell, format_header_row
from .writer import ExcelWriter
