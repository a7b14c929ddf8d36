"""
Tests for construction-time argument checks.
"""

import logging

import pytest

from fynctions import FynctionsError, InvalidArgumentError
from fynctions.preconditions import check_argument, check_not_none


@pytest.mark.unit
class TestCheckNotNone:
    def test_returns_value(self):
        value = object()
        assert check_not_none(value, "value") is value

    @pytest.mark.parametrize("falsy", [0, "", [], False])
    def test_falsy_values_pass(self, falsy):
        """Only None is rejected."""
        assert check_not_none(falsy) is falsy

    def test_none_raises_with_name(self):
        with pytest.raises(InvalidArgumentError, match="mapping cannot be None"):
            check_not_none(None, "mapping")

    def test_error_hierarchy(self):
        with pytest.raises(FynctionsError):
            check_not_none(None)

    def test_rejection_is_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG):
            with pytest.raises(InvalidArgumentError):
                check_not_none(None, "predicate")

        assert "predicate" in caplog.text


@pytest.mark.unit
class TestCheckArgument:
    def test_true_condition_passes(self):
        assert check_argument(True, "unused") is None

    def test_false_condition_raises(self):
        with pytest.raises(InvalidArgumentError, match="must be callable"):
            check_argument(False, "must be callable")
