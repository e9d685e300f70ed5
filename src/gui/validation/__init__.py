"""
Qt validation adapters for numeric input fields.

This package exposes the incremental integer and decimal rules as
QValidator subclasses.
"""

from .validators import (
    IncrementalDoubleValidator,
    IncrementalIntValidator,
    validator_for_mode,
)

__all__ = [
    "IncrementalDoubleValidator",
    "IncrementalIntValidator",
    "validator_for_mode",
]
