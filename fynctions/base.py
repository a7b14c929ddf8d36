"""
Fynctions Base - Abstract Function Object and Chaining Operators
================================================================

This module provides the `Function` abstract base class every function object
built by `Functions` derives from. It supplies:

Natural Language Methods:
- `apply(value)` - Transform a value (abstract)
- `then(func)` - Compose so that `func` runs on this function's result

Operator Protocols:
- `__call__` - `f(x)` is `f.apply(x)`
- `__rshift__` - `f >> g` is `f.then(g)`

Function objects are immutable: their state is assigned once through
`_freeze()` and any later attribute assignment raises AttributeError.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Union

from .protocols import FunctionLike
from .types import A, B, C, TransformFunction


class Function(ABC, Generic[A, B]):
    """
    Immutable single-argument transformation.

    Subclasses declare their captured state in `__slots__`, set it with
    `_freeze()` from `__init__`, and implement `apply()`.

    Example:
        ```python
        from fynctions import Functions

        inc = Functions.constant(1)
        inc.apply("anything")     # 1
        inc("anything")           # 1
        (inc >> str)("anything")  # "1"
        ```
    """

    __slots__ = ()

    @abstractmethod
    def apply(self, value: A) -> B:
        """Transform `value`."""

    def __call__(self, value: A) -> B:
        return self.apply(value)

    def then(self, func: Union[FunctionLike[B, C], TransformFunction[B, C]]) -> "Function[A, C]":
        """
        Return a function that applies this function, then `func`.

        Equivalent to `Functions.compose(func, self)`.
        """
        from .functions import Functions

        return Functions.compose(func, self)

    def __rshift__(self, func: Union[FunctionLike[B, C], TransformFunction[B, C]]) -> "Function[A, C]":
        """Support >> operator."""
        return self.then(func)

    def _freeze(self, **state: Any) -> None:
        for name, value in state.items():
            object.__setattr__(self, name, value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")
