"""
Test utilities for Fynctions.

This package contains shared testing helpers. They live at module level so
that pickle can locate them by qualified name.
"""

from .helpers import (
    CallCounter,
    IsEven,
    Recorder,
    double,
    explode,
    increment,
)

__all__ = [
    "CallCounter",
    "IsEven",
    "Recorder",
    "double",
    "explode",
    "increment",
]
