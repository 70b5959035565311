"""
Confidence scoring - how strongly a form field corresponds to one pattern rule.

Each text attribute of the field is compared against the rule's phrases; the best
similarity per attribute is weighted (label dominates, aria-label barely counts) and
the weighted contributions are summed. A negative keyword anywhere in the field's
label/placeholder/name zeroes the score outright, however strong the similarity.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from autofill.app.core.config import ATTRIBUTE_WEIGHTS, MATCHED_ON_THRESHOLDS
from autofill.app.schemas.form import FieldDescriptor
from autofill.app.services.pattern_registry import PatternRule
from autofill.app.services.similarity import best_similarity
from autofill.app.utils.text import combined_text


@dataclass(frozen=True)
class MatchCandidateScore:
    """Weighted per-attribute contributions, before summing."""

    label: float = 0.0
    placeholder: float = 0.0
    name: float = 0.0
    ariaLabel: float = 0.0

    def total(self) -> float:
        return self.label + self.placeholder + self.name + self.ariaLabel


@dataclass(frozen=True)
class ConfidenceResult:
    score: float
    matchedOnAttribute: Optional[str] = None
    details: MatchCandidateScore = field(default_factory=MatchCandidateScore)
    vetoed: bool = False


def is_vetoed(field_descriptor: FieldDescriptor, rule: PatternRule) -> bool:
    """True when a negative keyword of the rule occurs in the field's label, placeholder or name."""
    if not rule.negative_keywords:
        return False
    haystack = combined_text(
        field_descriptor.label,
        field_descriptor.placeholder,
        field_descriptor.name,
    )
    return any(keyword.lower() in haystack for keyword in rule.negative_keywords)


def score_attribute(field_descriptor: FieldDescriptor, rule: PatternRule, attribute: str) -> float:
    """Best phrase similarity for one attribute, times that attribute's weight."""
    text = getattr(field_descriptor, attribute, None)
    if not text:
        return 0.0
    return best_similarity(text, rule.phrases) * ATTRIBUTE_WEIGHTS[attribute]


def _matched_on(details: MatchCandidateScore) -> Optional[str]:
    for attribute, threshold in MATCHED_ON_THRESHOLDS:
        if getattr(details, attribute) > threshold:
            return attribute
    return None


def calculate_confidence(field_descriptor: FieldDescriptor, rule: PatternRule) -> ConfidenceResult:
    if is_vetoed(field_descriptor, rule):
        return ConfidenceResult(score=0.0, vetoed=True)

    details = MatchCandidateScore(
        label=score_attribute(field_descriptor, rule, "label"),
        placeholder=score_attribute(field_descriptor, rule, "placeholder"),
        name=score_attribute(field_descriptor, rule, "name"),
        ariaLabel=score_attribute(field_descriptor, rule, "ariaLabel"),
    )
    return ConfidenceResult(
        score=min(details.total(), 1.0),
        matchedOnAttribute=_matched_on(details),
        details=details,
    )
