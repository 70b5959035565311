"""Map a profile onto every fillable field of a scanned page and report what matched."""
from __future__ import annotations

import logging
import time
from typing import Any, Mapping

from pydantic import ValidationError

from autofill.app.core.config import (
    HIGH_CONFIDENCE_THRESHOLD,
    INACCESSIBLE_FORM_TYPES,
    MEDIUM_CONFIDENCE_THRESHOLD,
)
from autofill.app.schemas.form import FieldDescriptor, ScannedForm, ScanResult
from autofill.app.schemas.mapping import (
    FieldMatch,
    MappingReport,
    UnmatchedField,
    UnmatchedProfilePath,
)
from autofill.app.services.field_matcher import match_field
from autofill.app.services.pattern_registry import ProfilePath, all_profile_paths
from autofill.app.services.profile_values import profile_as_mapping, resolve_profile_value

logger = logging.getLogger(__name__)


class MalformedInputError(ValueError):
    """Profile or scan payload that cannot be read at all."""


def _coerce_profile(profile: Any) -> Mapping[str, Any]:
    profile_map = profile_as_mapping(profile)
    if profile_map is None:
        raise MalformedInputError(f"profile must be a mapping, got {type(profile).__name__}")
    return profile_map


def _coerce_scan(scanned_forms: Any) -> ScanResult:
    if isinstance(scanned_forms, ScanResult):
        return scanned_forms
    if isinstance(scanned_forms, (list, tuple)):
        scanned_forms = {"forms": list(scanned_forms)}
    if not isinstance(scanned_forms, Mapping):
        raise MalformedInputError(f"scan must be a mapping or list of forms, got {type(scanned_forms).__name__}")
    if not isinstance(scanned_forms.get("forms"), (list, tuple)):
        raise MalformedInputError("scan has no forms list")
    try:
        return ScanResult.model_validate(scanned_forms)
    except ValidationError as exc:
        raise MalformedInputError(f"scan failed validation ({exc.error_count()} errors)") from exc


def _bookkeeping(scanned_forms: Any) -> tuple[Any, Any]:
    """url/timestamp from whatever the caller passed, for the error report."""
    if isinstance(scanned_forms, ScanResult):
        return scanned_forms.url, scanned_forms.timestamp
    if isinstance(scanned_forms, Mapping):
        return scanned_forms.get("url"), scanned_forms.get("timestamp")
    return None, None


def is_form_skipped(form: ScannedForm) -> bool:
    """Captcha-protected and embedded/cross-origin forms are left alone entirely."""
    return form.hasCaptcha or form.inaccessible or (form.type or "") in INACCESSIBLE_FORM_TYPES


def _parse_form(raw: Any) -> ScannedForm:
    if isinstance(raw, ScannedForm):
        return raw
    return ScannedForm.model_validate(raw)


def _parse_field(raw: Any) -> FieldDescriptor:
    if isinstance(raw, FieldDescriptor):
        return raw
    return FieldDescriptor.model_validate(raw)


def _unmatched_from_descriptor(field_descriptor: FieldDescriptor) -> UnmatchedField:
    return UnmatchedField(
        id=field_descriptor.id,
        label=field_descriptor.display_label,
        inputType=field_descriptor.inputType,
        selectorHandle=field_descriptor.selectorHandle,
    )


def _unmatched_from_raw(raw: Any) -> UnmatchedField:
    if not isinstance(raw, Mapping):
        return UnmatchedField()
    label = raw.get("label") or raw.get("placeholder") or raw.get("name") or raw.get("ariaLabel") or ""
    return UnmatchedField(
        id=str(raw.get("id") or ""),
        label=str(label),
        inputType=str(raw.get("inputType") or raw.get("type") or ""),
        selectorHandle=raw.get("selectorHandle", raw.get("selector")),
    )


def map_profile_to_form(profile: Any, scanned_forms: Any) -> MappingReport:
    """
    Match every field of every fillable form against the profile.

    Never raises on bad input: an unreadable profile or scan yields an empty report
    with `error` set and needsReview=True, so callers can tell "nothing matched"
    apart from "input was garbage".
    """
    started_at = time.monotonic()
    try:
        profile_map = _coerce_profile(profile)
        scan = _coerce_scan(scanned_forms)
    except MalformedInputError as exc:
        logger.warning("Field mapping rejected input reason=%s", exc)
        url, timestamp = _bookkeeping(scanned_forms)
        return MappingReport.invalid(str(exc), url=url, timestamp=timestamp)

    matches: list[FieldMatch] = []
    unmatched_fields: list[UnmatchedField] = []
    consumed: set[ProfilePath] = set()
    skipped_forms = 0
    malformed_forms = 0
    field_count = 0

    for raw_form in scan.forms:
        try:
            form = _parse_form(raw_form)
        except ValidationError as exc:
            malformed_forms += 1
            logger.warning("Malformed form skipped errors=%d", exc.error_count())
            continue

        if is_form_skipped(form):
            skipped_forms += 1
            logger.info(
                "Skipping form form_id=%s captcha=%s type=%s",
                form.id, form.hasCaptcha, form.type,
            )
            continue

        for raw_field in form.fields:
            field_count += 1
            try:
                field_descriptor = _parse_field(raw_field)
            except ValidationError as exc:
                logger.warning(
                    "Malformed field descriptor form_id=%s errors=%d",
                    form.id, exc.error_count(),
                )
                unmatched_fields.append(_unmatched_from_raw(raw_field))
                continue

            match = match_field(field_descriptor, profile_map, exclude=consumed)
            if match is not None and match.confidence >= MEDIUM_CONFIDENCE_THRESHOLD:
                matches.append(match)
                consumed.add(match.profilePath)
            else:
                unmatched_fields.append(_unmatched_from_descriptor(field_descriptor))

    unmatched_paths: list[UnmatchedProfilePath] = []
    for path in all_profile_paths():
        if path in consumed:
            continue
        value = resolve_profile_value(profile_map, path)
        if value is not None and not value.is_empty:
            unmatched_paths.append(UnmatchedProfilePath(path=path, value=value.display()))

    aggregate = sum(m.confidence for m in matches) / len(matches) if matches else 0.0
    needs_review = any(m.requiresReview for m in matches) or aggregate < HIGH_CONFIDENCE_THRESHOLD

    logger.info(
        "Field mapping completed forms=%d skipped_forms=%d malformed_forms=%d fields=%d matches=%d "
        "unmatched_fields=%d unmatched_paths=%d aggregate=%.3f elapsed_ms=%d",
        len(scan.forms),
        skipped_forms,
        malformed_forms,
        field_count,
        len(matches),
        len(unmatched_fields),
        len(unmatched_paths),
        aggregate,
        int((time.monotonic() - started_at) * 1000),
    )
    return MappingReport(
        matches=matches,
        unmatchedFields=unmatched_fields,
        unmatchedProfilePaths=unmatched_paths,
        aggregateConfidence=aggregate,
        needsReview=needs_review,
        url=scan.url,
        timestamp=scan.timestamp,
    )
