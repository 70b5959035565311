"""
Mapping report schemas - consumed by the review UI and by the field executor.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from autofill.app.services.pattern_registry import ProfilePath


class FieldMatch(BaseModel):
    """One accepted field -> profile value pairing."""

    fieldId: str
    selectorHandle: Any = None
    fieldLabel: str = ""
    fieldType: str = ""
    profilePath: ProfilePath
    value: str
    confidence: float = Field(ge=0.0, le=1.0)
    matchedOnAttribute: Optional[str] = None
    requiresReview: bool


class UnmatchedField(BaseModel):
    id: str = ""
    label: str = ""
    inputType: str = ""
    selectorHandle: Any = None


class UnmatchedProfilePath(BaseModel):
    path: ProfilePath
    value: str


class MappingReport(BaseModel):
    matches: List[FieldMatch] = Field(default_factory=list)
    unmatchedFields: List[UnmatchedField] = Field(default_factory=list)
    unmatchedProfilePaths: List[UnmatchedProfilePath] = Field(default_factory=list)
    aggregateConfidence: float = 0.0
    needsReview: bool = True
    url: Any = None
    timestamp: Any = None
    # Set only when the input itself was unusable
    error: Optional[str] = None

    @classmethod
    def invalid(cls, reason: str, url: Any = None, timestamp: Any = None) -> "MappingReport":
        """Empty, review-required report for input that could not be read."""
        return cls(needsReview=True, url=url, timestamp=timestamp, error=f"Invalid input data: {reason}")

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict for the review UI / executor."""
        return self.model_dump(mode="json")
