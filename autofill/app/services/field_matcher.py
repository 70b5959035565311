"""Pick the single best profile value for one form field."""
from __future__ import annotations

from typing import Any, Collection, Optional

from autofill.app.core.config import HIGH_CONFIDENCE_THRESHOLD, settings
from autofill.app.core.logging_config import get_logger
from autofill.app.schemas.form import FieldDescriptor
from autofill.app.schemas.mapping import FieldMatch
from autofill.app.services.confidence import calculate_confidence
from autofill.app.services.field_type_validation import validate_field_type
from autofill.app.services.pattern_registry import FIELD_RULES, ProfilePath
from autofill.app.services.profile_values import profile_as_mapping, resolve_profile_value

logger = get_logger("services.field_matcher")


def match_field(
    field_descriptor: FieldDescriptor,
    profile: Any,
    exclude: Collection[ProfilePath] = (),
) -> Optional[FieldMatch]:
    """
    Scan every pattern rule in registry order and return the best type-compatible,
    non-empty match, or None.

    A candidate replaces the running best only on a strictly greater score, so on an
    exact tie the earlier rule wins. Paths in `exclude` (already claimed by another
    field of the same report) are never considered.
    """
    profile_map = profile_as_mapping(profile)
    if profile_map is None:
        return None

    trace = settings.match_trace_logging
    best: Optional[FieldMatch] = None
    best_score = 0.0

    for rule in FIELD_RULES:
        path = rule.profile_path
        if path in exclude:
            continue
        if not rule.accepts_input_type(field_descriptor.inputType):
            continue

        result = calculate_confidence(field_descriptor, rule)
        score = min(result.score * rule.weight, 1.0)
        if trace:
            logger.debug(
                "Rule scored field_id=%s path=%s score=%.3f matched_on=%s vetoed=%s",
                field_descriptor.id, path.value, score, result.matchedOnAttribute, result.vetoed,
            )
        if score <= best_score:
            continue

        value = resolve_profile_value(profile_map, path)
        if not validate_field_type(field_descriptor, path, value):
            if trace:
                logger.debug("Candidate rejected field_id=%s path=%s reason=type", field_descriptor.id, path.value)
            continue
        if value.is_empty:
            if trace:
                logger.debug("Candidate rejected field_id=%s path=%s reason=empty", field_descriptor.id, path.value)
            continue

        best_score = score
        best = FieldMatch(
            fieldId=field_descriptor.id,
            selectorHandle=field_descriptor.selectorHandle,
            fieldLabel=field_descriptor.display_label,
            fieldType=field_descriptor.inputType,
            profilePath=path,
            value=value.display(),
            confidence=score,
            matchedOnAttribute=result.matchedOnAttribute,
            requiresReview=score < HIGH_CONFIDENCE_THRESHOLD,
        )

    if trace:
        logger.debug(
            "Field matched field_id=%s path=%s confidence=%s",
            field_descriptor.id,
            best.profilePath.value if best else None,
            f"{best.confidence:.3f}" if best else None,
        )
    return best
