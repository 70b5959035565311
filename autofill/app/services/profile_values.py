"""Profile leaf access: dotted-path lookup and the two shapes a leaf value can take."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel

from autofill.app.services.pattern_registry import ProfilePath


@dataclass(frozen=True)
class ScalarValue:
    """A single string (or number) leaf."""

    value: Union[str, int, float]

    @property
    def is_empty(self) -> bool:
        return self.value == ""

    def display(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ListValue:
    """A list-of-strings leaf, e.g. skills."""

    items: tuple[str, ...]

    @property
    def is_empty(self) -> bool:
        return not self.items

    def display(self) -> str:
        return ", ".join(self.items)


ProfileValue = Union[ScalarValue, ListValue]


def profile_as_mapping(profile: Any) -> Optional[Mapping[str, Any]]:
    """Plain mapping view of a profile dict or pydantic model; None for anything else."""
    if isinstance(profile, BaseModel):
        return profile.model_dump()
    if isinstance(profile, Mapping):
        return profile
    return None


def _to_value(raw: Any) -> Optional[ProfileValue]:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (str, int, float)):
        return ScalarValue(raw)
    if isinstance(raw, (list, tuple)):
        return ListValue(tuple(str(item) for item in raw))
    return None


def resolve_profile_value(profile: Mapping[str, Any], path: ProfilePath) -> Optional[ProfileValue]:
    """
    Walk the dotted path through nested mappings.
    Returns None when a segment is missing or the leaf is not a string, number or list.
    """
    node: Any = profile
    for segment in path.segments:
        if not isinstance(node, Mapping) or segment not in node:
            return None
        node = node[segment]
    return _to_value(node)


def is_empty_value(value: Optional[ProfileValue]) -> bool:
    return value is None or value.is_empty
