"""
Fynctions Factories - Static Constructors for Function Objects
==============================================================

This module provides `Functions`, a namespace of static factories that build
small immutable function objects:

- `identity()` - x => x (shared singleton)
- `to_string_function()` - x => str(x), raising on None (shared singleton)
- `for_map(mapping[, default])` - key => mapping lookup
- `compose(g, f)` - x => g(f(x))
- `for_predicate(predicate)` - x => bool(predicate.test(x))
- `constant(value)` - _ => value
- `narrow(function)` - static retyping, returns its argument

Every factory is also importable as a module-level function. Required
arguments are validated when the function object is built, never when it
is applied.

Example:
    ```python
    from fynctions import Functions

    prices = {"apple": 3, "pear": 4}
    price_of = Functions.for_map(prices, 0)
    doubled = Functions.compose(lambda p: p * 2, price_of)

    doubled("apple")  # 6
    doubled("plum")   # 0
    ```
"""

from typing import Any, Callable, Generic, Mapping, Optional, TypeVar, Union, cast, overload

from .base import Function
from .exceptions import NullReferenceError
from .preconditions import check_argument, check_not_none
from .protocols import FunctionLike, PredicateLike, is_function_like, is_predicate_like
from .types import A, B, C, T, PredicateCallable, TransformFunction

E = TypeVar("E")

# Marks "no default given" so that for_map(mapping, None) keeps its default
_NO_DEFAULT: Any = object()

# ============================================================================
# SINGLETON FUNCTIONS
# ============================================================================


class IdentityFunction(Function[Any, Any]):
    """
    Function returning its argument unchanged.

    A single instance serves every type instantiation; `identity()` casts it
    to the caller's `Function[E, E]`.
    """

    __slots__ = ()

    def apply(self, value: Any) -> Any:
        return value

    def __reduce__(self):
        return (identity, ())

    def __repr__(self) -> str:
        return "Functions.identity()"


class ToStringFunction(Function[Any, str]):
    """
    Function returning `str()` of its argument.

    Applying it to None raises NullReferenceError rather than producing
    the string ``"None"``.
    """

    __slots__ = ()

    def apply(self, value: Any) -> str:
        if value is None:
            raise NullReferenceError("cannot convert None to a string")
        return str(value)

    def __reduce__(self):
        return (to_string_function, ())

    def __repr__(self) -> str:
        return "Functions.to_string_function()"


_IDENTITY = IdentityFunction()

TO_STRING: Function[Any, str] = ToStringFunction()

# ============================================================================
# MAP LOOKUP
# ============================================================================


class ForMapFunction(Function[A, Optional[B]]):
    """
    Key-to-value lookup on a mapping, returning None for unknown keys.

    The mapping is held by reference: later changes to it are visible
    through the function.
    """

    __slots__ = ("_mapping",)

    def __init__(self, mapping: Mapping[A, B]):
        self._freeze(_mapping=mapping)

    def apply(self, value: A) -> Optional[B]:
        return self._mapping.get(value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ForMapFunction):
            return self._mapping is other._mapping
        return NotImplemented

    def __hash__(self) -> int:
        return hash((ForMapFunction, id(self._mapping)))

    def __reduce__(self):
        return (ForMapFunction, (self._mapping,))

    def __repr__(self) -> str:
        return f"Functions.for_map({self._mapping!r})"


class ForMapWithDefaultFunction(Function[A, B]):
    """
    Key-to-value lookup on a mapping, returning `default` for unknown keys.

    Membership decides the branch: a key stored with the value None yields
    None, not the default.
    """

    __slots__ = ("_mapping", "_default")

    def __init__(self, mapping: Mapping[A, B], default: Optional[B]):
        self._freeze(_mapping=mapping, _default=default)

    def apply(self, value: A) -> B:
        mapping = self._mapping
        return mapping[value] if value in mapping else self._default

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ForMapWithDefaultFunction):
            return self._mapping is other._mapping and self._default == other._default
        return NotImplemented

    def __hash__(self) -> int:
        return hash((ForMapWithDefaultFunction, id(self._mapping)))

    def __reduce__(self):
        return (ForMapWithDefaultFunction, (self._mapping, self._default))

    def __repr__(self) -> str:
        return f"Functions.for_map({self._mapping!r}, {self._default!r})"


# ============================================================================
# COMPOSITION
# ============================================================================


class CallableFunction(Function[A, B]):
    """Adapts a plain Python callable to the function capability."""

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[A], B]):
        self._freeze(_func=func)

    def apply(self, value: A) -> B:
        return self._func(value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CallableFunction):
            return self._func == other._func
        return NotImplemented

    def __hash__(self) -> int:
        return hash((CallableFunction, self._func))

    def __reduce__(self):
        return (CallableFunction, (self._func,))

    def __repr__(self) -> str:
        return getattr(self._func, "__qualname__", None) or repr(self._func)


class FunctionComposition(Function[A, C]):
    """
    Composition g∘f: applies `f`, then `g` to its result.

    `f` always runs first, so an exception raised by `f` propagates before
    `g` is invoked.
    """

    __slots__ = ("_g", "_f")

    def __init__(self, g: FunctionLike[B, C], f: FunctionLike[A, B]):
        self._freeze(_g=g, _f=f)

    def apply(self, value: A) -> C:
        return self._g.apply(self._f.apply(value))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FunctionComposition):
            return self._g == other._g and self._f == other._f
        return NotImplemented

    def __hash__(self) -> int:
        return hash((FunctionComposition, self._g, self._f))

    def __reduce__(self):
        return (FunctionComposition, (self._g, self._f))

    def __repr__(self) -> str:
        return f"Functions.compose({self._g!r}, {self._f!r})"


def _as_function(func: Any, name: str) -> FunctionLike:
    check_not_none(func, name)
    if is_function_like(func):
        return func
    if isinstance(func, type) and hasattr(func, "apply"):
        check_argument(False, f"{name} must be an instance, got the class {func.__name__}")
    check_argument(
        callable(func), f"{name} must provide apply() or be callable, got {type(func).__name__}"
    )
    return CallableFunction(func)


# ============================================================================
# PREDICATES
# ============================================================================


class CallablePredicate(Generic[T]):
    """Adapts a plain Python callable to the predicate capability."""

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[T], Any]):
        object.__setattr__(self, "_func", func)

    def test(self, value: T) -> Any:
        return self._func(value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CallablePredicate):
            return self._func == other._func
        return NotImplemented

    def __hash__(self) -> int:
        return hash((CallablePredicate, self._func))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (CallablePredicate, (self._func,))

    def __repr__(self) -> str:
        return getattr(self._func, "__qualname__", None) or repr(self._func)


class PredicateFunction(Function[T, bool]):
    """
    Boolean-valued function evaluating to the same result as a predicate.

    Holds nothing but the predicate, so it pickles whenever the predicate does.
    """

    __slots__ = ("_predicate",)

    def __init__(self, predicate: PredicateLike[T]):
        self._freeze(_predicate=predicate)

    def apply(self, value: T) -> bool:
        return bool(self._predicate.test(value))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PredicateFunction):
            return self._predicate == other._predicate
        return NotImplemented

    def __hash__(self) -> int:
        return hash((PredicateFunction, self._predicate))

    def __reduce__(self):
        return (PredicateFunction, (self._predicate,))

    def __repr__(self) -> str:
        return f"Functions.for_predicate({self._predicate!r})"


def _as_predicate(predicate: Any, name: str) -> PredicateLike:
    check_not_none(predicate, name)
    if is_predicate_like(predicate):
        return predicate
    if isinstance(predicate, type) and hasattr(predicate, "test"):
        check_argument(False, f"{name} must be an instance, got the class {predicate.__name__}")
    check_argument(
        callable(predicate),
        f"{name} must provide test() or be callable, got {type(predicate).__name__}",
    )
    return CallablePredicate(predicate)


# ============================================================================
# CONSTANT
# ============================================================================


class ConstantFunction(Function[Any, E]):
    """Function returning the same captured value for every input."""

    __slots__ = ("_value",)

    def __init__(self, value: Optional[E]):
        self._freeze(_value=value)

    def apply(self, value: Any) -> E:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ConstantFunction):
            return self._value is other._value or self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash((ConstantFunction, self._value))

    def __reduce__(self):
        return (ConstantFunction, (self._value,))

    def __repr__(self) -> str:
        return f"Functions.constant({self._value!r})"


# ============================================================================
# FACTORIES
# ============================================================================


def identity() -> Function[E, E]:
    """Return the identity function."""
    return cast(Function[E, E], _IDENTITY)


def to_string_function() -> Function[Any, str]:
    """
    Return a function that converts its argument with `str()`.

    The returned function raises NullReferenceError when applied to None.
    """
    return TO_STRING


@overload
def for_map(mapping: Mapping[A, B]) -> Function[A, Optional[B]]: ...


@overload
def for_map(mapping: Mapping[A, B], default: Optional[B]) -> Function[A, B]: ...


def for_map(mapping, default=_NO_DEFAULT):
    """
    Return a function that performs key-to-value lookup on `mapping`.

    The difference between a mapping and a function is that a mapping is
    defined on a set of keys, while a function is defined on a type. Keys
    outside the mapping yield `default` when one is given, None otherwise.

    The mapping is not copied.

    Args:
        mapping: Source mapping, must not be None
        default: Value returned for keys not in `mapping`, may be None

    Returns:
        Function `f` with `f(a) == mapping[a]` if `a in mapping`

    Raises:
        InvalidArgumentError: If mapping is None
    """
    check_not_none(mapping, "mapping")
    if default is _NO_DEFAULT:
        return ForMapFunction(mapping)
    return ForMapWithDefaultFunction(mapping, default)


def compose(
    g: Union[FunctionLike[B, C], TransformFunction[B, C]],
    f: Union[FunctionLike[A, B], TransformFunction[A, B]],
) -> Function[A, C]:
    """
    Return the composition of two functions, `f: A->B` and `g: B->C`.

    Composition is defined as a function `h` such that `h(x) == g(f(x))`
    for each `x`.

    Args:
        g: Function applied second
        f: Function applied first

    Returns:
        Function composing `f` and `g`

    Raises:
        InvalidArgumentError: If either function is None
    """
    g = _as_function(g, "g")
    f = _as_function(f, "f")
    return FunctionComposition(g, f)


def for_predicate(predicate: Union[PredicateLike[T], PredicateCallable[T]]) -> Function[T, bool]:
    """
    Return a boolean-valued function that evaluates to the same result as
    the given predicate.

    Raises:
        InvalidArgumentError: If predicate is None
    """
    return PredicateFunction(_as_predicate(predicate, "predicate"))


def constant(value: Optional[E]) -> Function[Any, E]:
    """
    Return a function that returns `value` for any input.

    Args:
        value: The constant value for the function to return, may be None
    """
    return ConstantFunction(value)


def narrow(function: Optional[FunctionLike[Any, Any]]) -> Optional[Function[A, B]]:
    """
    Retype a function to a more restrictive `Function[A, B]`.

    A function that accepts any supertype of `A` and returns a subtype of
    `B` is already usable as `Function[A, B]`; this only tells the type
    checker so. No check or wrapping happens at runtime, and None is
    returned as None.
    """
    return cast(Optional[Function[A, B]], function)


class Functions:
    """
    Static factories for function objects.

    This class is a namespace; it is never instantiated.
    """

    TO_STRING = TO_STRING

    identity = staticmethod(identity)
    to_string_function = staticmethod(to_string_function)
    for_map = staticmethod(for_map)
    compose = staticmethod(compose)
    for_predicate = staticmethod(for_predicate)
    constant = staticmethod(constant)
    narrow = staticmethod(narrow)

    def __init__(self):
        raise TypeError("Functions is a namespace and cannot be instantiated")
