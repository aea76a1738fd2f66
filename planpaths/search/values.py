"""
Interpretation helpers for raw values reported by a key search.

Terraform encodes the same logical field differently depending on the plan
section: ``planned_values`` and ``resource_changes`` hold bare values, while
``configuration`` wraps literals as ``{"constant_value": ...}`` and
expressions as ``{"references": [...]}``. The traversal reports whatever it
finds; these helpers are for callers that want to compare across sections.
"""

from __future__ import annotations

import json
from typing import Any

CONSTANT_VALUE_KEY = "constant_value"
REFERENCES_KEY = "references"


def is_constant_wrapper(value: Any) -> bool:
    return isinstance(value, dict) and len(value) == 1 and CONSTANT_VALUE_KEY in value


def unwrap_constant_value(value: Any) -> Any:
    """
    Return the literal inside a ``constant_value`` wrapper.

    Any other value is returned unchanged, so this is safe to apply to values
    from every plan section.

    Examples:
        >>> unwrap_constant_value({"constant_value": True})
        True
        >>> unwrap_constant_value(True)
        True
    """
    if is_constant_wrapper(value):
        return value[CONSTANT_VALUE_KEY]
    return value


def is_reference_expression(value: Any) -> bool:
    return isinstance(value, dict) and REFERENCES_KEY in value


def describe_value(value: Any) -> str:
    """Short one-line label for a raw value."""
    if is_constant_wrapper(value):
        return f"{{constant_value: {describe_value(value[CONSTANT_VALUE_KEY])}}}"
    if isinstance(value, dict):
        if is_reference_expression(value):
            refs = value.get(REFERENCES_KEY) or []
            return "{references: " + ", ".join(str(r) for r in refs) + "}"
        noun = "key" if len(value) == 1 else "keys"
        return f"{{{len(value)} {noun}}}"
    if isinstance(value, (list, tuple)):
        noun = "item" if len(value) == 1 else "items"
        return f"[{len(value)} {noun}]"
    return json.dumps(value)
