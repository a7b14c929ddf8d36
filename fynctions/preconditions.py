"""
Construction-time argument checks shared by the function factories.
"""

import logging
from typing import Optional, TypeVar

from .exceptions import InvalidArgumentError

T = TypeVar("T")


def check_not_none(value: Optional[T], name: str = "argument") -> T:
    """
    Return `value` unchanged, or raise InvalidArgumentError if it is None.

    Args:
        value: The argument to validate
        name: Argument name used in the error message

    Returns:
        The validated value
    """
    if value is None:
        logging.debug(f"Rejected None for required argument '{name}'")
        raise InvalidArgumentError(f"{name} cannot be None")
    return value


def check_argument(condition: bool, message: str) -> None:
    """Raise InvalidArgumentError with `message` unless `condition` holds."""
    if not condition:
        logging.debug(f"Rejected argument: {message}")
        raise InvalidArgumentError(message)
