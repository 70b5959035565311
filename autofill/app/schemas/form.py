"""
Scanned form schemas - the shape produced by the page scanner.
Raw scanner keys `type` and `selector` are accepted for inputType / selectorHandle.
"""
from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class FieldDescriptor(BaseModel):
    """One input discovered in a form. selectorHandle is opaque and only passed through."""

    id: str = ""
    name: str = ""
    inputType: str = Field("text", validation_alias=AliasChoices("inputType", "type"))
    label: Optional[str] = None
    placeholder: Optional[str] = None
    ariaLabel: Optional[str] = None
    required: bool = False
    selectorHandle: Any = Field(None, validation_alias=AliasChoices("selectorHandle", "selector"))

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @field_validator("id", "name", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("inputType", mode="before")
    @classmethod
    def _canonical_type(cls, value: Any) -> Any:
        if value is None:
            return "text"
        if isinstance(value, str):
            return value.strip().lower() or "text"
        return value

    @property
    def display_label(self) -> str:
        """Best-effort human label for review screens."""
        return self.label or self.placeholder or self.name or self.ariaLabel or self.id


class ScannedForm(BaseModel):
    """
    One form on the page. Fields stay raw here and are validated one by one while
    mapping, so a single malformed descriptor cannot fail the whole scan.
    """

    id: str = ""
    type: Optional[str] = None
    hasCaptcha: bool = False
    inaccessible: bool = False
    fields: List[Any] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    @field_validator("id", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("hasCaptcha", "inaccessible", mode="before")
    @classmethod
    def _none_to_false(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("fields", mode="before")
    @classmethod
    def _none_to_list(cls, value: Any) -> Any:
        return [] if value is None else value


class ScanResult(BaseModel):
    """
    Scanner envelope. url and timestamp are caller bookkeeping, echoed into the report
    untouched. Forms stay raw like fields: each is validated on its own while mapping.
    """

    url: Any = None
    timestamp: Any = None
    forms: List[Any] = Field(default_factory=list)

    model_config = {"extra": "ignore"}
