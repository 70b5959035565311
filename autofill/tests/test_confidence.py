"""Tests for confidence scoring, the negative-keyword veto and matched-on reporting."""
import pytest

from autofill.app.core.config import MEDIUM_CONFIDENCE_THRESHOLD
from autofill.app.services.confidence import calculate_confidence, is_vetoed
from autofill.app.services.pattern_registry import ProfilePath, get_rule

FIRST_NAME_RULE = get_rule(ProfilePath.FIRST_NAME)


def test_exact_label_scores_label_weight(make_field):
    result = calculate_confidence(make_field("First Name"), FIRST_NAME_RULE)
    assert result.score == pytest.approx(0.5)
    assert result.details.label == pytest.approx(0.5)
    assert result.matchedOnAttribute == "label"
    assert not result.vetoed


def test_weighted_sum_of_all_attributes(make_field):
    field = make_field("First Name", placeholder="First name", name="first_name", ariaLabel="First name")
    result = calculate_confidence(field, FIRST_NAME_RULE)
    # label 0.5 + placeholder 0.3 + name 0.9 * 0.15 + aria 0.05
    assert result.score == pytest.approx(0.985)
    assert result.details.name == pytest.approx(0.135)


def test_score_capped_at_one(make_field):
    field = make_field("First Name", placeholder="First Name", name="first name", ariaLabel="First Name")
    result = calculate_confidence(field, FIRST_NAME_RULE)
    assert result.score <= 1.0
    assert result.score == pytest.approx(1.0)


def test_veto_beats_strong_similarity(make_field):
    """'last' in the label zeroes the first-name rule even though 'first name' is contained."""
    field = make_field("First Name (of spouse's last employer)")
    result = calculate_confidence(field, FIRST_NAME_RULE)
    assert result.score == 0.0
    assert result.vetoed
    assert result.matchedOnAttribute is None


def test_veto_reads_name_attribute(make_field):
    field = make_field("Name", name="last_name")
    assert is_vetoed(field, FIRST_NAME_RULE)
    assert calculate_confidence(field, FIRST_NAME_RULE).score == 0.0


def test_veto_ignores_aria_label(make_field):
    field = make_field("Given name", ariaLabel="last")
    result = calculate_confidence(field, FIRST_NAME_RULE)
    assert not result.vetoed
    assert result.score == pytest.approx(0.5)


def test_rule_without_negative_keywords_never_vetoed(make_field):
    assert not is_vetoed(make_field("Last city lived in"), get_rule(ProfilePath.CITY))


def test_field_without_text_scores_zero(make_field):
    result = calculate_confidence(make_field(None), FIRST_NAME_RULE)
    assert result.score == 0.0
    assert result.matchedOnAttribute is None
    assert not result.vetoed


def test_placeholder_only_reports_placeholder(make_field):
    result = calculate_confidence(make_field(None, placeholder="First name"), FIRST_NAME_RULE)
    assert result.score == pytest.approx(0.3)
    assert result.matchedOnAttribute == "placeholder"


def test_label_contribution_at_threshold_is_not_reported(make_field):
    """A transposition typo scores 0.8 * 0.5 = 0.4, which does not exceed the 0.4 label bar."""
    result = calculate_confidence(make_field("Frist Name"), FIRST_NAME_RULE)
    assert result.details.label == pytest.approx(0.4)
    assert result.matchedOnAttribute is None


def test_matched_on_thresholds_independent_of_acceptance(make_field):
    """
    Reporting thresholds (0.4/0.2/0.1/0) and the acceptance threshold (0.6) are separate
    scales: an attribute can be named as the match source of a score that is too low to
    ever be accepted.
    """
    name_only = calculate_confidence(make_field(None, name="fname"), FIRST_NAME_RULE)
    assert name_only.matchedOnAttribute == "name"
    assert name_only.score == pytest.approx(0.15)
    assert name_only.score < MEDIUM_CONFIDENCE_THRESHOLD

    partial_label = calculate_confidence(make_field("Legal first name"), FIRST_NAME_RULE)
    assert partial_label.matchedOnAttribute == "label"
    assert partial_label.score == pytest.approx(0.425)
    assert partial_label.score < MEDIUM_CONFIDENCE_THRESHOLD
