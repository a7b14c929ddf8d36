"""
Tests for the capability protocols.
"""

import pytest

from fynctions import FunctionLike, Functions, PredicateLike
from fynctions.protocols import is_function_like, is_predicate_like
from tests.utils import IsEven, Recorder


@pytest.mark.unit
def test_function_objects_are_function_like():
    """Every built function offers the apply capability."""
    assert isinstance(Functions.identity(), FunctionLike)
    assert is_function_like(Functions.constant(None))


@pytest.mark.unit
def test_duck_typed_apply_is_function_like():
    assert is_function_like(Recorder("r", []))


@pytest.mark.unit
def test_plain_callables_are_not_function_like():
    assert not is_function_like(len)
    assert not is_function_like(lambda x: x)


@pytest.mark.unit
def test_predicate_like():
    assert isinstance(IsEven(), PredicateLike)
    assert is_predicate_like(IsEven())
    assert not is_predicate_like(Functions.identity())


@pytest.mark.unit
def test_classes_are_not_capabilities():
    """A class defining apply() or test() is not itself function- or predicate-like."""
    assert not is_function_like(Recorder)
    assert not is_predicate_like(IsEven)
