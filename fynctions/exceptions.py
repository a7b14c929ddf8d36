"""
Fynctions Exceptions
====================

Error taxonomy for the function adapters:

- `InvalidArgumentError` - a factory received a missing or unusable argument
- `NullReferenceError` - the to-string function was applied to `None`
"""


class FynctionsError(Exception):
    """Base class for all errors raised by Fynctions."""


class InvalidArgumentError(FynctionsError, ValueError):
    """
    Raised at construction time when a required factory argument is `None`
    or does not offer the capability the factory needs.
    """


class NullReferenceError(FynctionsError, TypeError):
    """
    Raised when the to-string function is applied to `None`.

    The function never renders `None` as the string ``"None"``.
    """
