"""Tests for predicate expressions and parameter extraction."""

import pytest

from core.domain.account_types import AccountType
from core.domain.errors import ConfigurationError
from core.query.predicate import And, Comparison, F, FieldRef, ParameterFinder, encode_value, get_parameters


class TestExpressions:
    """Tests for building predicate trees."""

    def test_field_equality_builds_comparison(self):
        """`F.Type == x` should produce a Comparison, not a bool."""
        expr = F.Type == AccountType.SETTINGS
        assert isinstance(expr, Comparison)
        assert expr.op == "=="
        assert expr.field.name == "Type"
        assert expr.value is AccountType.SETTINGS

    def test_and_combines_nodes(self):
        """`&` should build an And node."""
        expr = (F.Type == AccountType.TOTALS) & (F.Count > 3)
        assert isinstance(expr, And)

    def test_call_syntax(self):
        """`F("Type")` should be equivalent to `F.Type`."""
        assert isinstance(F("Type"), FieldRef)
        assert F("Type").name == "Type"


class TestParameterFinder:
    """Tests for ParameterFinder."""

    def test_extracts_allowed_equality(self):
        """An equality against an allowed field should be recorded."""
        finder = ParameterFinder(F.Type == AccountType.SETTINGS, ["Type"])
        assert finder.parameters == {"Type": "Settings"}

    def test_reversed_operands(self):
        """Literal on the left should still be recorded."""
        finder = ParameterFinder(AccountType.TOTALS == F.Type, ["Type"])
        assert finder.parameters == {"Type": "Totals"}

    def test_ignores_fields_outside_allow_list(self):
        """Fields not in the allow-list should be skipped."""
        expr = (F.Type == AccountType.TOTALS) & (F.ScreenName == "jack")
        assert ParameterFinder(expr, ["Type"]).parameters == {"Type": "Totals"}

    def test_ignores_non_equality(self):
        """Only == comparisons count."""
        expr = (F.Type != AccountType.TOTALS) & (F.Count >= 3)
        assert ParameterFinder(expr, ["Type", "Count"]).parameters == {}

    def test_walks_or_and_not(self):
        """Or/Not nodes should be traversed."""
        expr = (F.Type == AccountType.TOTALS) | ~(F.Count == 5)
        assert ParameterFinder(expr, ["Type", "Count"]).parameters == {"Type": "Totals", "Count": "5"}

    def test_last_comparison_wins(self):
        """Repeated fields keep the last value in a left-to-right walk."""
        expr = (F.Type == AccountType.TOTALS) & (F.Type == AccountType.SETTINGS)
        assert ParameterFinder(expr, ["Type"]).parameters == {"Type": "Settings"}

    def test_field_to_field_comparison_ignored(self):
        """Comparing two fields carries no literal."""
        assert ParameterFinder(F.Type == F.Other, ["Type"]).parameters == {}


class TestEncodeValue:
    """Tests for literal encoding."""

    def test_enum_uses_value(self):
        assert encode_value(AccountType.RATE_LIMIT_STATUS) == "RateLimitStatus"

    def test_bool(self):
        assert encode_value(True) == "True"
        assert encode_value(False) == "False"

    def test_other_values_use_str(self):
        assert encode_value(42) == "42"
        assert encode_value("jack") == "jack"


class TestGetParameters:
    """Tests for get_parameters."""

    def test_missing_type_raises(self):
        """A predicate without Type should raise ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            get_parameters(F.ScreenName == "jack", ["Type", "ScreenName"])
        assert exc_info.value.parameter == "Type"

    def test_non_expression_raises(self):
        """Plain values are not predicates."""
        with pytest.raises(ConfigurationError):
            get_parameters(True, ["Type"])

    def test_returns_parameters(self):
        assert get_parameters(F.Type == AccountType.TOTALS, ["Type"]) == {"Type": "Totals"}


class TestTruthiness:
    """Predicates cannot be combined with Python's boolean operators."""

    def test_and_keyword_raises(self):
        with pytest.raises(TypeError, match="&"):
            (F.Type == AccountType.TOTALS) and (F.Count == 1)

    def test_or_keyword_raises(self):
        with pytest.raises(TypeError):
            (F.Type == AccountType.TOTALS) or (F.Count == 1)

    def test_bool_on_field_raises(self):
        with pytest.raises(TypeError):
            bool(F.Type)
