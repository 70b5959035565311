"""Text canonicalization shared by the similarity scorer and the confidence calculator."""
import re
from typing import Any

_DISALLOWED = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: Any) -> str:
    """
    Lowercase, trim, drop anything outside [a-z0-9 ] and collapse whitespace.
    Non-string input (None included) normalizes to "".
    """
    if not text or not isinstance(text, str):
        return ""
    text = _DISALLOWED.sub("", text.lower().strip())
    # Dropping punctuation can expose edge spaces ("( name" -> " name")
    return _WHITESPACE.sub(" ", text).strip()


def combined_text(*parts: str | None) -> str:
    """Space-join the non-empty parts and lowercase them, without stripping punctuation."""
    return " ".join(p for p in parts if p).lower()
