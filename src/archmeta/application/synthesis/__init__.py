"""Synthesizers deriving validation rules and mock values from types.

rule_check (parse_rule, check_value) is importable from its module for
callers that want to evaluate generated rules; it is not part of the
package surface.
"""

from archmeta.application.synthesis.mock import build_mock_value
from archmeta.application.synthesis.validation import build_validation_spec

__all__ = [
    "build_mock_value",
    "build_validation_spec",
]
