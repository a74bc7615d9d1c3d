"""Tests for infrastructure.i18n.arguments module."""

from decimal import Decimal

import pytest

from infrastructure.i18n.arguments import (
    NO_ARGUMENT,
    CountArgument,
    NamedArgument,
    PositionalArgument,
    ScalarArgument,
    argument_count,
    classify_argument,
)

pytestmark = pytest.mark.unit


class TestClassifyArgument:
    """Tests for classify_argument()."""

    def test_none(self):
        assert classify_argument(None) is NO_ARGUMENT

    @pytest.mark.parametrize("value", [0, 5, 2.5, Decimal("3")])
    def test_number_is_legacy_count(self, value):
        argument = classify_argument(value)
        assert isinstance(argument, CountArgument)
        assert argument.count == value
        assert argument.legacy

    def test_bool_is_scalar(self):
        assert isinstance(classify_argument(True), ScalarArgument)

    def test_complex_is_scalar(self):
        argument = classify_argument(1j)
        assert isinstance(argument, ScalarArgument)
        assert argument.value == 1j

    def test_mapping_with_count(self):
        argument = classify_argument({"name": "Nicola", "count": 1})
        assert isinstance(argument, CountArgument)
        assert argument.count == 1
        assert not argument.legacy
        assert argument.values == {"name": "Nicola", "count": 1}

    def test_mapping_with_none_count_is_named(self):
        assert isinstance(classify_argument({"count": None}), NamedArgument)

    def test_mapping_without_count(self):
        argument = classify_argument({"name": "Nicola"})
        assert isinstance(argument, NamedArgument)
        assert argument.values == {"name": "Nicola"}

    @pytest.mark.parametrize("value", [["a", 1], ("a", 1)])
    def test_sequence_is_positional(self, value):
        argument = classify_argument(value)
        assert isinstance(argument, PositionalArgument)
        assert argument.values == ("a", 1)

    def test_string_is_scalar(self):
        assert classify_argument("Nicola") == ScalarArgument("Nicola")

    def test_classified_argument_passes_through(self):
        argument = PositionalArgument(("a",))
        assert classify_argument(argument) is argument


class TestArgumentCount:
    """Tests for argument_count()."""

    def test_count_variants(self):
        assert argument_count(classify_argument(4)) == 4
        assert argument_count(classify_argument({"count": 0})) == 0

    def test_other_variants(self):
        assert argument_count(classify_argument("x")) is None
        assert argument_count(classify_argument(["x"])) is None
        assert argument_count(NO_ARGUMENT) is None
