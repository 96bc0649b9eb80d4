"""
FARS - Fatality Analysis Reporting System tools

A small Python package for summarizing and mapping yearly traffic
fatality census files, using the Functional Core, Imperative Shell
architecture.

Structure:
- data/     : Imperative Shell (file resolution and loading)
- analysis/ : Functional Core (validation, counts, geography)
- plotting/ : (plotting functions)
- reports/  : map orchestration and HTML output
"""

__version__ = "0.1.0"
