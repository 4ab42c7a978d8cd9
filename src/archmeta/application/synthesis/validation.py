"""Validation rule synthesizer.

Builds a chainable rule expression (Joi syntax) for a parameter, to be
embedded verbatim in generated code. Clause order is fixed:
base kind, type add-on, min bound, max bound, required.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archmeta.domain.model.parameter import Parameter
    from archmeta.domain.model.type_descriptor import TypeDescriptor


def build_validation_spec(
    parameter: Parameter,
    descriptor: TypeDescriptor,
    namespace: str = "Joi",
) -> str:
    """Assemble the rule expression for a parameter.

    Args:
        parameter: Parameter carrying bounds and required flag
        descriptor: Structural description of the parameter type
        namespace: Identifier the expression starts from

    Returns:
        Expression like ``Joi.number().integer().min(1).max(10).required()``
    """
    clauses = [f"{namespace}.{descriptor.structural_kind}()"]
    if descriptor.constraint_add_on:
        clauses.append(normalize_add_on(descriptor.constraint_add_on))
    if parameter.has_min_value:
        clauses.append(f".min({bound_literal(parameter.min_value)})")
    if parameter.has_max_value:
        clauses.append(f".max({bound_literal(parameter.max_value)})")
    if parameter.is_required:
        clauses.append(".required()")
    return "".join(clauses)


def normalize_add_on(add_on: str) -> str:
    """Make an add-on start with the clause separator."""
    add_on = add_on.strip()
    if not add_on.startswith("."):
        return "." + add_on
    return add_on


def bound_literal(value: int | float | None) -> str:
    """Render a bound as a code literal.

    Raises:
        TypeError: If value is not a number
    """
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise TypeError(f"bound must be a number, got {type(value).__name__}")
    return json.dumps(value)
