"""Tests for text normalization and similarity scoring."""
import pytest

from autofill.app.core.config import CONTAINS_SCORE, EXACT_SCORE
from autofill.app.services.similarity import best_similarity, edit_distance, similarity
from autofill.app.utils.text import combined_text, normalize


# --- normalize ---


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  First   Name: ", "first name"),
        ("E-mail", "email"),
        ("first_name", "firstname"),
        ("( Name", "name"),
        ("Café", "caf"),
        ("a \tb", "a b"),
        ("--", ""),
        ("", ""),
    ],
)
def test_normalize(raw, expected):
    assert normalize(raw) == expected


def test_normalize_non_string_is_empty():
    """None and non-strings normalize to empty string instead of raising."""
    assert normalize(None) == ""
    assert normalize(123) == ""
    assert normalize(["First Name"]) == ""


@pytest.mark.parametrize(
    "raw",
    ["First Name", "  ( Name ) ", "İstanbul", "e-MAIL address", "***", "Zip/Postal  Code", ""],
)
def test_normalize_idempotent(raw):
    once = normalize(raw)
    assert normalize(once) == once


def test_combined_text_keeps_punctuation():
    assert combined_text("First Name", None, "", "first_name") == "first name first_name"


# --- edit distance ---


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("kitten", "sitting", 3),
        ("", "abc", 3),
        ("abc", "", 3),
        ("abc", "abc", 0),
        ("flaw", "lawn", 2),
    ],
)
def test_edit_distance(a, b, expected):
    assert edit_distance(a, b) == expected
    assert edit_distance(b, a) == expected


# --- similarity ---


def test_similarity_exact_after_normalization():
    assert similarity("First Name", "first name") == EXACT_SCORE
    assert similarity("E-mail", "email") == EXACT_SCORE


def test_similarity_contains_either_direction():
    assert similarity("Your first name", "first name") == CONTAINS_SCORE
    assert similarity("name", "first name") == CONTAINS_SCORE


def test_similarity_fuzzy():
    """One edit over ten characters scores 0.9."""
    assert similarity("firstname", "first name") == pytest.approx(0.9)
    assert similarity("abcd", "abcx") == pytest.approx(0.75)


def test_similarity_weak_fuzzy_discarded():
    """A ratio at or below 0.5 is reported as no match at all."""
    assert similarity("abcd", "abxy") == 0.0
    assert similarity("fname", "first name") == 0.0


def test_similarity_empty_sides():
    assert similarity("", "name") == 0.0
    assert similarity(None, "name") == 0.0
    assert similarity("!!!", "name") == 0.0


def test_best_similarity():
    assert best_similarity("Email", ["phone", "e-mail"]) == EXACT_SCORE
    assert best_similarity("", ["email"]) == 0.0
    assert best_similarity("Email", []) == 0.0
