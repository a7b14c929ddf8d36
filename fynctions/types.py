"""
Fynctions Common Types - Shared Type Definitions
================================================

This module contains shared type definitions used across the Fynctions package.
It helps avoid circular imports and provides a single source of truth for common types.
"""

from typing import Any, Callable, TypeVar

# ============================================================================
# TYPE VARIABLES
# ============================================================================

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")  # Used in compositions
T = TypeVar("T")

A_contra = TypeVar("A_contra", contravariant=True)
B_co = TypeVar("B_co", covariant=True)
T_contra = TypeVar("T_contra", contravariant=True)

# ============================================================================
# CALLABLE TYPES
# ============================================================================

TransformFunction = Callable[[A], B]
PredicateCallable = Callable[[T], Any]
