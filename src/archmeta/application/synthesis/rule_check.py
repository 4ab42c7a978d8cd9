"""Rule checker for assembled validation expressions.

Parses a chain like ``Joi.number().integer().min(1).max(10).required()``
into clauses and evaluates values against it. Lets callers prove that a
generated rule is well delimited and behaves as intended without a
JavaScript runtime.
"""

from __future__ import annotations

import json
import re
import uuid
from dataclasses import dataclass
from datetime import date, datetime
from urllib.parse import urlparse

from archmeta.domain.exceptions.rule import RuleSyntaxError

_NAME = re.compile(r"[A-Za-z_]\w*")
_NUMBER = re.compile(r"-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?")
_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[A-Za-z]{2,}$")
_REGEX_FLAGS = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL}

RuleArg = int | float | str | bool | re.Pattern[str]


@dataclass(frozen=True, slots=True)
class RuleClause:
    """One ``.name(args)`` link of a rule chain."""

    name: str
    args: tuple[RuleArg, ...] = ()

    def __str__(self) -> str:
        """Format as name(args)."""
        rendered = ", ".join(
            f"/{a.pattern}/" if isinstance(a, re.Pattern) else json.dumps(a) for a in self.args
        )
        return f"{self.name}({rendered})"


@dataclass(frozen=True, slots=True)
class Rule:
    """Parsed rule chain.

    Attributes:
        namespace: Leading identifier (e.g. "Joi")
        clauses: Chain links, the first one naming the base kind
    """

    namespace: str
    clauses: tuple[RuleClause, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.clauses:
            raise ValueError("rule must have at least a base clause")

    @property
    def kind(self) -> str:
        """Base structural kind."""
        return self.clauses[0].name

    @property
    def is_required(self) -> bool:
        """Check if the rule rejects missing input."""
        return any(clause.name == "required" for clause in self.clauses)

    @property
    def clause_names(self) -> tuple[str, ...]:
        """Names of all clauses in chain order."""
        return tuple(clause.name for clause in self.clauses)

    def find(self, name: str) -> RuleClause | None:
        """First clause with given name. Returns None if not found."""
        for clause in self.clauses:
            if clause.name == name:
                return clause
        return None


def parse_rule(expression: str) -> Rule:
    """Parse a rule chain.

    Raises:
        RuleSyntaxError: If a clause is not delimited by '.' or an
            argument cannot be read
    """
    match = _NAME.match(expression)
    if match is None:
        raise RuleSyntaxError(expression, "must start with a namespace identifier")
    namespace = match.group()
    pos = match.end()

    clauses: list[RuleClause] = []
    while pos < len(expression):
        if expression[pos] != ".":
            raise RuleSyntaxError(expression, f"expected '.' at offset {pos}")
        match = _NAME.match(expression, pos + 1)
        if match is None:
            raise RuleSyntaxError(expression, f"expected clause name at offset {pos + 1}")
        pos = match.end()
        if pos >= len(expression) or expression[pos] != "(":
            raise RuleSyntaxError(expression, f"expected '(' after '{match.group()}'")
        args, pos = _scan_args(expression, pos + 1)
        clauses.append(RuleClause(match.group(), args))

    if not clauses:
        raise RuleSyntaxError(expression, "no clauses")
    return Rule(namespace=namespace, clauses=tuple(clauses))


def check_value(rule: Rule | str, value: object = None, present: bool = True) -> bool:
    """Evaluate a value against a rule.

    Args:
        rule: Parsed rule or expression
        value: Candidate value
        present: False to check a missing input

    Returns:
        True if the rule accepts the input

    Raises:
        RuleSyntaxError: If the expression is malformed or uses a clause
            this checker does not know
    """
    if isinstance(rule, str):
        rule = parse_rule(rule)
    if not present:
        return not rule.is_required

    if not _matches_kind(rule, value):
        return False
    return all(_check_clause(rule, clause, value) for clause in rule.clauses[1:])


def _matches_kind(rule: Rule, value: object) -> bool:
    kind = rule.kind
    if kind == "any":
        return True
    if kind == "string":
        return isinstance(value, str)
    if kind == "number":
        return isinstance(value, int | float) and not isinstance(value, bool)
    if kind == "boolean":
        return isinstance(value, bool)
    if kind == "date":
        return isinstance(value, date) or (isinstance(value, str) and _is_iso(value))
    if kind == "object":
        return isinstance(value, dict)
    if kind == "array":
        return isinstance(value, list)
    raise RuleSyntaxError(str(rule.clauses[0]), f"unsupported base kind '{kind}'")


def _check_clause(rule: Rule, clause: RuleClause, value: object) -> bool:
    name = clause.name
    if name == "required":
        return True
    if name in ("min", "max"):
        limit = _single_number(clause)
        size = len(value) if isinstance(value, str | list) else value
        return size >= limit if name == "min" else size <= limit
    if name == "integer":
        return isinstance(value, int) or (isinstance(value, float) and value.is_integer())
    if name == "email":
        return isinstance(value, str) and _EMAIL.match(value) is not None
    if name == "uri":
        parsed = urlparse(value) if isinstance(value, str) else None
        return parsed is not None and bool(parsed.scheme) and bool(parsed.netloc)
    if name in ("guid", "uuid"):
        return isinstance(value, str) and _is_uuid(value)
    if name == "iso":
        return isinstance(value, date) or (isinstance(value, str) and _is_iso(value))
    if name == "pattern":
        if len(clause.args) != 1 or not isinstance(clause.args[0], re.Pattern):
            raise RuleSyntaxError(str(clause), "pattern expects one regex literal")
        return isinstance(value, str) and clause.args[0].search(value) is not None
    raise RuleSyntaxError(str(clause), f"unsupported clause '{name}' on {rule.kind}")


def _single_number(clause: RuleClause) -> int | float:
    if len(clause.args) != 1:
        raise RuleSyntaxError(str(clause), f"{clause.name} expects one argument")
    arg = clause.args[0]
    if isinstance(arg, bool) or not isinstance(arg, int | float):
        raise RuleSyntaxError(str(clause), f"{clause.name} expects a number")
    return arg


def _is_iso(text: str) -> bool:
    try:
        datetime.fromisoformat(text)
    except ValueError:
        return False
    return True


def _is_uuid(text: str) -> bool:
    try:
        uuid.UUID(text)
    except ValueError:
        return False
    return True


def _scan_args(expression: str, pos: int) -> tuple[tuple[RuleArg, ...], int]:
    """Read arguments up to the closing parenthesis.

    Returns:
        (arguments, offset after ')')
    """
    args: list[RuleArg] = []
    while True:
        pos = _skip_spaces(expression, pos)
        if pos >= len(expression):
            raise RuleSyntaxError(expression, "unterminated argument list")
        if expression[pos] == ")" and not args:
            return (), pos + 1

        arg, pos = _scan_arg(expression, pos)
        args.append(arg)
        pos = _skip_spaces(expression, pos)
        if pos >= len(expression):
            raise RuleSyntaxError(expression, "unterminated argument list")
        if expression[pos] == ")":
            return tuple(args), pos + 1
        if expression[pos] != ",":
            raise RuleSyntaxError(expression, f"expected ',' or ')' at offset {pos}")
        pos += 1


def _scan_arg(expression: str, pos: int) -> tuple[RuleArg, int]:
    char = expression[pos]
    if char in "'\"":
        end = _find_unescaped(expression, char, pos + 1)
        body = expression[pos + 1 : end]
        if char == "'":
            body = body.replace('\\"', '"').replace('"', '\\"').replace("\\'", "'")
        try:
            return json.loads(f'"{body}"'), end + 1
        except json.JSONDecodeError as e:
            raise RuleSyntaxError(expression, f"bad string literal at offset {pos}") from e
    if char == "/":
        end = _find_unescaped(expression, "/", pos + 1)
        flags = 0
        cursor = end + 1
        while cursor < len(expression) and expression[cursor] in _REGEX_FLAGS:
            flags |= _REGEX_FLAGS[expression[cursor]]
            cursor += 1
        try:
            return re.compile(expression[pos + 1 : end], flags), cursor
        except re.error as e:
            raise RuleSyntaxError(expression, f"bad regex literal at offset {pos}: {e}") from e
    for word, literal in (("true", True), ("false", False)):
        if expression.startswith(word, pos):
            return literal, pos + len(word)
    match = _NUMBER.match(expression, pos)
    if match is None:
        raise RuleSyntaxError(expression, f"unreadable argument at offset {pos}")
    text = match.group()
    number = float(text) if any(c in text for c in ".eE") else int(text)
    return number, match.end()


def _find_unescaped(expression: str, quote: str, pos: int) -> int:
    while pos < len(expression):
        if expression[pos] == "\\":
            pos += 2
            continue
        if expression[pos] == quote:
            return pos
        pos += 1
    raise RuleSyntaxError(expression, f"unterminated {quote} literal")


def _skip_spaces(expression: str, pos: int) -> int:
    while pos < len(expression) and expression[pos].isspace():
        pos += 1
    return pos
