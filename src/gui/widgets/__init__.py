"""
Reusable input widgets for numeric fields.
"""

from .numeric_line_edit import NumericLineEdit

__all__ = ["NumericLineEdit"]
