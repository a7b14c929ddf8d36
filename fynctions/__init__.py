"""
Fynctions - Function Objects and Adapters

Static factories for small immutable function objects: identity, to-string,
constant, map-backed lookup, composition, predicate adaptation, and a
type-narrowing cast.
"""

from .base import Function
from .exceptions import FynctionsError, InvalidArgumentError, NullReferenceError
from .functions import (
    TO_STRING,
    Functions,
    compose,
    constant,
    for_map,
    for_predicate,
    identity,
    narrow,
    to_string_function,
)
from .protocols import FunctionLike, PredicateLike

__all__ = [
    # Core types
    "Function",
    "FunctionLike",
    "PredicateLike",
    # Factories
    "Functions",
    "identity",
    "to_string_function",
    "for_map",
    "compose",
    "for_predicate",
    "constant",
    "narrow",
    # Singletons
    "TO_STRING",
    # Exceptions
    "FynctionsError",
    "InvalidArgumentError",
    "NullReferenceError",
]
