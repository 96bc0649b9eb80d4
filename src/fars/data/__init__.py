"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS tools.

Modules:
- reader:  File name resolution, single-file and multi-year loading
- summary: Monthly summary orchestration and CSV export
"""

from .reader import (
    FILENAME_TEMPLATE,
    YearResult,
    make_filename,
    resolve_path,
    read_accidents,
    read_year,
    read_years,
    report_failures,
)

from .summary import summarize_years

__all__ = [
    # Reader
    'FILENAME_TEMPLATE',
    'YearResult',
    'make_filename',
    'resolve_path',
    'read_accidents',
    'read_year',
    'read_years',
    'report_failures',
    # Summary
    'summarize_years',
]
