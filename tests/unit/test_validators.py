"""
Unit tests for built-in rules and the custom rule bridge.

Includes property-based testing with hypothesis for validators.
"""

import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from inputguard import (
    ConfigurationError,
    CustomValidator,
    EmailValidator,
    LengthValidator,
    RangeValidator,
    RegexValidator,
    RequiredFieldValidator,
    RuleExecutionError,
    TypeValidator,
    make_rule,
    required_if,
)
from inputguard.core.groups import resolve_group_steps

DEFAULT_STEP = resolve_group_steps(None)[0]


class TestRequiredFieldValidator:
    """Tests for RequiredFieldValidator"""

    def test_present_value_passes(self):
        """Test validation passes for a present value"""
        assert RequiredFieldValidator().evaluate("John Doe").ok is True

    def test_none_fails(self):
        """Test validation fails for None"""
        result = RequiredFieldValidator().evaluate(None)

        assert result.ok is False
        assert result.message == "This value should not be blank."

    def test_blank_string_fails(self):
        """Test validation fails for whitespace-only strings by default"""
        assert RequiredFieldValidator().evaluate("   ").ok is False

    def test_empty_string_allowed_when_configured(self):
        """Test empty string passes when allow_empty_string=True"""
        validator = RequiredFieldValidator({"allow_empty_string": True})
        assert validator.evaluate("").ok is True

    def test_empty_container_fails(self):
        """Test empty lists and dicts count as missing"""
        assert RequiredFieldValidator().evaluate([]).ok is False
        assert RequiredFieldValidator().evaluate({}).ok is False

    def test_zero_is_present(self):
        """Test numeric zero and False are provided values"""
        assert RequiredFieldValidator().evaluate(0).ok is True
        assert RequiredFieldValidator().evaluate(False).ok is True

    def test_custom_message(self):
        """Test custom message is reported"""
        result = RequiredFieldValidator(message="Email is required").evaluate("")
        assert result.message == "Email is required"

    @given(st.text(min_size=1).filter(lambda s: s.strip() != ""))
    def test_property_any_nonempty_string_passes(self, value):
        """Property test: any non-empty, non-whitespace string should pass"""
        assert RequiredFieldValidator().evaluate(value).ok is True


class TestTypeValidator:
    """Tests for TypeValidator"""

    def test_valid_integer_type(self):
        """Test validation passes for correct integer type"""
        assert TypeValidator({"expected_type": "integer"}).evaluate(42).ok is True

    def test_numeric_string_is_not_coerced(self):
        """Test numeric strings are rejected; values are never converted"""
        result = TypeValidator({"expected_type": "int"}).evaluate("42")

        assert result.ok is False
        assert result.message == "This value should be of type int."

    def test_bool_is_not_an_int(self):
        """Test booleans are rejected for integer fields"""
        assert TypeValidator({"expected_type": int}).evaluate(True).ok is False

    def test_int_is_acceptable_float(self):
        """Test integers pass float checks"""
        assert TypeValidator({"expected_type": "float"}).evaluate(3).ok is True

    def test_none_is_skipped(self):
        """Test None values are left to the required field validator"""
        assert TypeValidator({"expected_type": "str"}).evaluate(None).ok is True

    def test_missing_expected_type_raises(self):
        """Test TypeValidator requires expected_type"""
        with pytest.raises(ConfigurationError):
            TypeValidator()

    def test_unsupported_type_name_raises(self):
        """Test unknown type names are rejected"""
        with pytest.raises(ConfigurationError, match="Unsupported type"):
            TypeValidator({"expected_type": "uuid"})


class TestRangeValidator:
    """Tests for RangeValidator"""

    def test_value_within_range(self):
        """Test validation passes for value within range"""
        validator = RangeValidator({"min": 0, "max": 100})
        assert validator.evaluate(50).ok is True
        assert validator.evaluate(0).ok is True
        assert validator.evaluate(100).ok is True

    def test_value_below_minimum(self):
        """Test validation fails for value below minimum"""
        result = RangeValidator({"min": 0}).evaluate(-1)

        assert result.ok is False
        assert "less than minimum" in result.message

    def test_value_above_maximum(self):
        """Test validation fails for value above maximum"""
        result = RangeValidator({"max": 100}).evaluate(101)
        assert "exceeds maximum" in result.message

    def test_exclusive_bounds(self):
        """Test exclusive bounds reject the boundary value"""
        validator = RangeValidator({"min_exclusive": 0, "max_exclusive": 10})
        assert validator.evaluate(0).ok is False
        assert validator.evaluate(10).ok is False
        assert validator.evaluate(5).ok is True

    def test_non_numeric_fails(self):
        """Test non-numeric values fail"""
        result = RangeValidator({"min": 0}).evaluate("ten")
        assert "numeric" in result.message

    def test_custom_message_overrides_bounds(self):
        """Test an explicit message replaces per-bound messages"""
        result = RangeValidator({"min": 18}, message="Too young").evaluate(12)
        assert result.message == "Too young"

    def test_requires_a_bound(self):
        """Test at least one bound is required"""
        with pytest.raises(ConfigurationError):
            RangeValidator({})

    @given(st.integers(min_value=0, max_value=100))
    def test_property_values_within_range_pass(self, value):
        """Property test: all values within range should pass"""
        assert RangeValidator({"min": 0, "max": 100}).evaluate(value).ok is True


class TestLengthValidator:
    """Tests for LengthValidator"""

    def test_length_within_bounds(self):
        """Test validation passes for length within bounds"""
        assert LengthValidator({"min": 2, "max": 5}).evaluate("abc").ok is True

    def test_too_short(self):
        """Test the minimum message"""
        result = LengthValidator({"min": 8}).evaluate("sdf23")
        assert result.message == "Minimum 8 characters are required"

    def test_too_long(self):
        """Test the maximum message"""
        result = LengthValidator({"max": 20}).evaluate("x" * 21)
        assert result.message == "Maximum 20 characters exceeded"

    @pytest.mark.parametrize(
        "parameters, message",
        [({"min": 8}, "Too short"), ({"min": 8, "message": "Too short"}, None)],
    )
    def test_custom_message_replaces_bound_messages(self, parameters, message):
        """Test a custom message is reported for either bound"""
        rule = LengthValidator({**parameters, "max": 10}, message=message)

        assert rule.evaluate("sdf23").message == "Too short"
        assert rule.evaluate("x" * 11).message == "Too short"

    def test_bound_message_wins_over_custom_message(self):
        rule = LengthValidator({"min": 8, "min_message": "Need 8"}, message="Too short")
        assert rule.evaluate("sdf23").message == "Need 8"

    def test_collections_use_their_length(self):
        """Test lists are measured by item count"""
        assert LengthValidator({"max": 2}).evaluate([1, 2, 3]).ok is False

    def test_min_greater_than_max_raises(self):
        """Test inverted bounds are rejected"""
        with pytest.raises(ConfigurationError):
            LengthValidator({"min": 5, "max": 2})


class TestRegexValidator:
    """Tests for RegexValidator"""

    def test_matching_value(self):
        """Test validation passes for matching value"""
        assert RegexValidator({"pattern": r"^\w+$"}).evaluate("abcd12345").ok is True

    def test_non_matching_value(self):
        """Test validation fails with the default message"""
        result = RegexValidator({"pattern": r"^\w+$"}).evaluate("abcd12345@#$")

        assert result.ok is False
        assert result.message == "Invalid value"

    def test_pattern_is_searched(self):
        """Test unanchored patterns match anywhere in the value"""
        assert RegexValidator({"pattern": r"\d"}).evaluate("abc1").ok is True

    def test_compiled_pattern_with_flags(self):
        """Test compiled patterns are accepted"""
        validator = RegexValidator({"pattern": re.compile(r"^abc$", re.IGNORECASE)})
        assert validator.evaluate("ABC").ok is True

    def test_inverted_match(self):
        """Test match=False fails when the pattern matches"""
        validator = RegexValidator({"pattern": r"<script", "match": False})
        assert validator.evaluate("<script>").ok is False
        assert validator.evaluate("hello").ok is True

    def test_invalid_pattern_raises(self):
        """Test invalid patterns fail at construction"""
        with pytest.raises(ConfigurationError, match="Invalid regex"):
            RegexValidator({"pattern": "[unclosed"})


class TestEmailValidator:
    """Tests for EmailValidator"""

    def test_valid_email(self):
        """Test a well-formed address passes"""
        assert EmailValidator().evaluate("abc@gmail.com").ok is True

    def test_invalid_email(self):
        """Test a malformed address fails"""
        result = EmailValidator(message="Invalid email").evaluate("abcd12312313")

        assert result.ok is False
        assert result.message == "Invalid email"

    def test_empty_values_are_skipped(self):
        """Test None and empty strings are left to the required field validator"""
        assert EmailValidator().evaluate(None).ok is True
        assert EmailValidator().evaluate("").ok is True

    def test_non_string_fails(self):
        """Test non-string values fail"""
        assert EmailValidator().evaluate(12345).ok is False


class TestCustomValidator:
    """Tests for the custom predicate bridge"""

    @staticmethod
    def alphanumeric(value, fail):
        if not re.search(r"^\w+$", value):
            fail("Invalid value")

    def test_predicate_not_calling_fail_passes(self):
        """Test returning normally signals success"""
        assert make_rule(self.alphanumeric).evaluate("abcd12345").ok is True

    def test_predicate_calling_fail_fails(self):
        """Test fail(message) marks the value invalid"""
        result = make_rule(self.alphanumeric).evaluate("abcd12345@#$%")

        assert result.ok is False
        assert result.message == "Invalid value"

    def test_last_fail_message_wins(self):
        """Test repeated fail() calls keep the last message"""
        def predicate(value, fail):
            fail("first")
            fail("second")

        assert make_rule(predicate).evaluate("x").message == "second"

    def test_value_placeholder_rendered(self):
        """Test the {{ value }} placeholder is replaced with the value"""
        def predicate(value, fail):
            fail("Invalid: {{ value }}.")

        assert make_rule(predicate).evaluate("abc").message == "Invalid: abc."
        assert make_rule(predicate).evaluate(None).message == "Invalid: ."

    def test_evaluations_are_independent(self):
        """Test a failure does not leak into the next evaluation"""
        rule = make_rule(self.alphanumeric)

        assert rule.evaluate("bad value").ok is False
        assert rule.evaluate("good").ok is True

    def test_non_callable_raises_configuration_error(self):
        """Test the bridge rejects non-callables"""
        with pytest.raises(ConfigurationError, match="valid callable"):
            CustomValidator("not a function")

    def test_predicate_exception_becomes_rule_execution_error(self):
        """Test predicate exceptions are wrapped, not reported as failures"""
        def broken(value, fail):
            raise KeyError("boom")

        rule = make_rule(broken)
        with pytest.raises(RuleExecutionError) as exc_info:
            rule.evaluate("x")

        assert isinstance(exc_info.value.__cause__, KeyError)
        assert exc_info.value.rule is rule

    def test_groups_are_attached(self):
        """Test rules carry their group tags"""
        assert make_rule(self.alphanumeric, groups=["admin"]).groups == ("admin",)


class TestRequiredIf:
    """Tests for required_if"""

    @pytest.mark.parametrize(
        "condition, value, expected",
        [
            (True, "aa", True),
            (True, "", False),
            (True, "   ", False),
            (False, "aa", True),
            (False, "", True),
            (lambda: False, "", True),
            (lambda: True, "", False),
            (True, 0, False),
            (True, 0.0, False),
            (True, False, False),
            (True, "0", False),
            (True, " 0 ", False),
            (True, None, False),
            (True, [], False),
            (True, {}, False),
            (True, 1, True),
            (True, True, True),
            (True, "00", True),
            (True, [0], True),
            (False, 0, True),
        ],
    )
    def test_required_if(self, condition, value, expected):
        """Test the condition decides whether an empty value fails"""
        result = required_if(condition).evaluate(value)

        assert result.ok is expected
        if not expected:
            assert result.message == "This field is required."

    def test_condition_is_evaluated_once_at_construction(self):
        """Test callable conditions are resolved when the rule is made"""
        calls = []

        def condition():
            calls.append(1)
            return True

        rule = required_if(condition, message="Needed")
        rule.evaluate("")
        rule.evaluate("")

        assert len(calls) == 1
        assert rule.evaluate("").message == "Needed"


class TestGroupFiltering:
    """Tests for check() group filtering"""

    def test_untagged_rule_applies_to_any_group(self):
        """Test rules without groups always apply"""
        rule = RegexValidator({"pattern": r"^\d+$"})
        for group in (None, "admin", ["a", "b"]):
            step = resolve_group_steps(group)[0]
            assert rule.check("abc", step).ok is False

    def test_tagged_rule_skipped_outside_its_group(self):
        """Test tagged rules pass when their group is not requested"""
        rule = RegexValidator({"pattern": r"^\d+$"}, groups="admin")

        assert rule.check("abc", DEFAULT_STEP).ok is True
        assert rule.check("abc", resolve_group_steps("default")[0]).ok is True
        assert rule.check("abc", resolve_group_steps("admin")[0]).ok is False

    def test_group_names_are_case_insensitive(self):
        """Test group matching ignores case"""
        rule = RegexValidator({"pattern": r"^\d+$"}, groups="Admin")
        assert rule.check("abc", resolve_group_steps("ADMIN")[0]).ok is False

    def test_unexpected_exception_is_wrapped(self):
        """Test check() wraps exceptions raised by evaluate()"""
        class Exploding(RequiredFieldValidator):
            def evaluate(self, value):
                raise ZeroDivisionError("division by zero")

        with pytest.raises(RuleExecutionError, match="ZeroDivisionError"):
            Exploding().check("x", DEFAULT_STEP)
