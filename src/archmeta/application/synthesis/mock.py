"""Mock-value synthesizer."""

from __future__ import annotations

import json
from datetime import date, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archmeta.domain.model.type_descriptor import TypeDescriptor


def build_mock_value(descriptor: TypeDescriptor) -> str:
    """Invoke the type's mock generator once and render it as a literal.

    Args:
        descriptor: Structural description carrying the generator

    Returns:
        JSON literal of the generated value (strings quoted)
    """
    return json.dumps(descriptor.mock_generator(), default=_encode, sort_keys=True)


def _encode(value: object) -> str:
    if isinstance(value, datetime | date):
        return value.isoformat()
    raise TypeError(f"mock value of type {type(value).__name__} is not serializable")
