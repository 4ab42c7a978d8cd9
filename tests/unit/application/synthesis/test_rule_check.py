"""Tests for application/synthesis/rule_check.py."""

import re

import pytest

from archmeta.application.synthesis.rule_check import (
    Rule,
    RuleClause,
    check_value,
    parse_rule,
)
from archmeta.domain.exceptions.rule import RuleSyntaxError


class TestParseRule:
    """Tests for parse_rule()."""

    def test_full_chain(self) -> None:
        rule = parse_rule("Joi.number().integer().min(1).max(10).required()")

        assert rule.namespace == "Joi"
        assert rule.kind == "number"
        assert rule.is_required
        assert rule.clause_names == ("number", "integer", "min", "max", "required")
        assert rule.find("min") == RuleClause("min", (1,))

    def test_optional_rule(self) -> None:
        rule = parse_rule("Joi.string()")
        assert not rule.is_required
        assert rule.find("required") is None

    def test_argument_literals(self) -> None:
        rule = parse_rule("""Joi.any().valid('a', "b", true, -1.5)""")
        assert rule.clauses[1].args == ("a", "b", True, -1.5)

    def test_regex_argument(self) -> None:
        rule = parse_rule(r"Joi.string().pattern(/^\d+$/i)")
        pattern = rule.clauses[1].args[0]

        assert isinstance(pattern, re.Pattern)
        assert pattern.flags & re.IGNORECASE

    def test_spaces_inside_arguments(self) -> None:
        assert parse_rule("Joi.number().min( 1 )").find("min") == RuleClause("min", (1,))

    def test_clause_str(self) -> None:
        assert str(RuleClause("min", (1,))) == "min(1)"
        assert str(RuleClause("valid", ("a", 2))) == 'valid("a", 2)'

    @pytest.mark.parametrize(
        ("expression", "reason"),
        [
            ("Joi.string()required()", "expected '.' at offset 12"),
            ("Joi.number().min(1)max(10)", "expected '.' at offset 19"),
            ("Joi", "no clauses"),
            ("Joi.", "expected clause name at offset 4"),
            ("Joi.string", "expected '(' after 'string'"),
            ("Joi.number().min(1", "unterminated argument list"),
            ("Joi.number().min(1 2)", "expected ',' or ')'"),
            ("Joi.number().min(x)", "unreadable argument"),
            (".string()", "must start with a namespace identifier"),
        ],
    )
    def test_malformed(self, expression: str, reason: str) -> None:
        with pytest.raises(RuleSyntaxError, match=re.escape(reason)):
            parse_rule(expression)

    def test_rule_needs_clauses(self) -> None:
        with pytest.raises(ValueError, match="at least a base clause"):
            Rule(namespace="Joi", clauses=())


class TestCheckValue:
    """Tests for check_value()."""

    RULE = "Joi.number().integer().min(1).max(10).required()"

    @pytest.mark.parametrize("value", [1, 5, 10])
    def test_accepts_in_range(self, value: int) -> None:
        assert check_value(self.RULE, value)

    @pytest.mark.parametrize("value", [0, 11, 2.5, "5", True])
    def test_rejects_out_of_range_or_wrong_type(self, value: object) -> None:
        assert not check_value(self.RULE, value)

    def test_required_rejects_missing(self) -> None:
        assert not check_value(self.RULE, present=False)

    def test_optional_accepts_missing(self) -> None:
        assert check_value("Joi.string()", present=False)

    def test_string_length(self) -> None:
        assert check_value("Joi.string().min(2).max(3)", "abc")
        assert not check_value("Joi.string().min(2).max(3)", "abcd")

    def test_email(self) -> None:
        assert check_value("Joi.string().email()", "nova.7@example.com")
        assert not check_value("Joi.string().email()", "not-an-email")

    def test_uri(self) -> None:
        assert check_value("Joi.string().uri()", "https://www.example.com/a")
        assert not check_value("Joi.string().uri()", "example")

    def test_guid(self) -> None:
        assert check_value("Joi.string().guid()", "12345678-1234-4234-8234-123456789abc")
        assert not check_value("Joi.string().guid()", "1234")

    def test_iso_date(self) -> None:
        assert check_value("Joi.date().iso()", "2021-03-04T05:06:00")
        assert not check_value("Joi.date().iso()", "yesterday")

    def test_pattern(self) -> None:
        assert check_value(r"Joi.string().pattern(/^\d+$/)", "123")
        assert not check_value(r"Joi.string().pattern(/^\d+$/)", "12a")

    def test_boolean_and_object(self) -> None:
        assert check_value("Joi.boolean()", False)
        assert check_value("Joi.object()", {})
        assert not check_value("Joi.object()", [])

    def test_accepts_parsed_rule(self) -> None:
        assert check_value(parse_rule("Joi.any()"), object())

    def test_unsupported_clause_raises(self) -> None:
        with pytest.raises(RuleSyntaxError, match="unsupported clause 'positive'"):
            check_value("Joi.number().positive()", 1)

    def test_unsupported_kind_raises(self) -> None:
        with pytest.raises(RuleSyntaxError, match="unsupported base kind 'binary'"):
            check_value("Joi.binary()", b"")

    def test_malformed_rule_raises(self) -> None:
        with pytest.raises(RuleSyntaxError):
            check_value("Joi.string()required()", "x")
