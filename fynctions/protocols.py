"""
Fynctions Protocols - Capability Interface Definitions
======================================================

This module defines Protocol-based interfaces for the two capabilities the
function adapters compose against:

- `FunctionLike` - anything offering `apply(input) -> output`
- `PredicateLike` - anything offering `test(input) -> bool`

Both protocols are `@runtime_checkable`, so factories can use `isinstance()`
to recognise a capability without requiring inheritance from a library class.
"""

from typing import Any, Protocol, runtime_checkable

from .types import A_contra, B_co, T_contra

# ============================================================================
# FUNCTION CAPABILITY
# ============================================================================


@runtime_checkable
class FunctionLike(Protocol[A_contra, B_co]):
    """
    Protocol for a single-argument transformation.

    Example:
        ```python
        class Upper:
            def apply(self, text: str) -> str:
                return text.upper()

        isinstance(Upper(), FunctionLike)  # True
        ```
    """

    def apply(self, value: A_contra) -> B_co:
        """Transform `value`."""
        ...


# ============================================================================
# PREDICATE CAPABILITY
# ============================================================================


@runtime_checkable
class PredicateLike(Protocol[T_contra]):
    """Protocol for a single-argument boolean test."""

    def test(self, value: T_contra) -> Any:
        """Return a truthy result when `value` satisfies the predicate."""
        ...


def is_function_like(obj: Any) -> bool:
    """
    Check if an object offers the function capability.

    Args:
        obj: The object to check

    Returns:
        True if obj is an instance with an `apply` method, False otherwise.
        Classes defining `apply` are not function-like themselves.
    """
    return not isinstance(obj, type) and isinstance(obj, FunctionLike)


def is_predicate_like(obj: Any) -> bool:
    """Check if an object (not a class) offers the predicate capability."""
    return not isinstance(obj, type) and isinstance(obj, PredicateLike)
