"""
Data loading and parsing module.

This package handles all file I/O and sheet row parsing.
"""

from .loader import DataLoader
from .parser import SheetRowParser, mentee_key

__all__ = ["DataLoader", "SheetRowParser", "mentee_key"]
