"""
Integration tests for pickling function objects.
"""

import pickle

import pytest

from fynctions import TO_STRING, Functions
from fynctions.functions import ForMapFunction
from tests.utils import IsEven, double, increment


def roundtrip(obj):
    return pickle.loads(pickle.dumps(obj))


@pytest.mark.integration
class TestPickling:
    """Function objects survive pickling whenever their state does."""

    def test_predicate_function_roundtrip(self):
        restored = roundtrip(Functions.for_predicate(IsEven()))

        assert restored.apply(4) is True
        assert restored.apply(3) is False
        assert restored == Functions.for_predicate(IsEven())

    def test_identity_restores_singleton(self):
        assert roundtrip(Functions.identity()) is Functions.identity()

    def test_to_string_restores_singleton(self):
        assert roundtrip(TO_STRING) is TO_STRING

    def test_composition_of_module_functions(self):
        restored = roundtrip(Functions.compose(double, increment))

        assert restored.apply(3) == 8

    def test_for_map_roundtrip_snapshots_mapping(self):
        mapping = {"a": 1}
        restored = roundtrip(Functions.for_map(mapping, 0))
        mapping["b"] = 2

        assert restored.apply("a") == 1
        assert restored.apply("b") == 0

    def test_for_map_without_default_roundtrip(self):
        restored = roundtrip(Functions.for_map({"a": 1}))

        assert restored.apply("a") == 1
        assert restored.apply("z") is None
        assert isinstance(restored, ForMapFunction)

    def test_constant_roundtrip(self):
        assert roundtrip(Functions.constant(("x", 1))) == Functions.constant(("x", 1))

    def test_lambda_predicate_is_not_picklable(self):
        with pytest.raises((pickle.PicklingError, AttributeError, TypeError)):
            pickle.dumps(Functions.for_predicate(lambda x: x))
