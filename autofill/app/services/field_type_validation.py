"""Check that a resolved profile value can be written into a field of a given input type."""
from __future__ import annotations

import math
from typing import Optional

from autofill.app.schemas.form import FieldDescriptor
from autofill.app.services.pattern_registry import ProfilePath
from autofill.app.services.profile_values import ListValue, ProfileValue, ScalarValue

SELECT_TYPES = frozenset({"select", "select-one"})


def _is_numeric(value: ProfileValue) -> bool:
    if not isinstance(value, ScalarValue):
        return False
    raw = value.value
    if isinstance(raw, (int, float)):
        return not math.isnan(raw)
    try:
        return not math.isnan(float(raw.strip()))
    except ValueError:
        return False


def _is_string(value: ProfileValue) -> bool:
    return isinstance(value, ScalarValue) and isinstance(value.value, str)


def validate_field_type(
    field_descriptor: FieldDescriptor,
    profile_path: ProfilePath,
    value: Optional[ProfileValue],
) -> bool:
    """
    Rules are checked in priority order; the first one that applies decides.
    An unresolved value (None) is never compatible.
    """
    if value is None:
        return False

    input_type = field_descriptor.inputType
    path = profile_path.value.lower()

    if input_type == "email" and "email" in path:
        return _is_string(value) and "@" in value.value
    if input_type == "tel" and "phone" in path:
        return _is_string(value)
    if input_type == "number":
        return _is_numeric(value)
    if input_type == "url":
        return _is_string(value) and value.value.startswith(("http://", "https://"))
    if input_type == "file" and "resume" in path:
        # Upload itself is the executor's job
        return True
    if input_type in SELECT_TYPES:
        return _is_string(value) and len(value.value) > 0
    if input_type == "textarea":
        return _is_string(value) or isinstance(value, ListValue)
    return isinstance(value, ScalarValue)
