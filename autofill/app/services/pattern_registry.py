"""
Pattern registry - the static vocabulary that recognizes each profile field in form text.

One PatternRule per ProfilePath, declared in a fixed order. Matching walks the rules
in this order and keeps the first strictly-better score, so reordering FIELD_RULES
changes which rule wins an exact tie.

FIELD_ALIASES and expand_aliases are exposed for callers that build their own
vocabularies (e.g. a review UI suggesting labels). They are not merged into rule
phrases, so adding an alias never moves a match score.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union


class ProfilePath(str, Enum):
    """Dotted path of one profile leaf."""

    FIRST_NAME = "personal.firstName"
    LAST_NAME = "personal.lastName"
    EMAIL = "personal.email"
    PHONE = "personal.phone"
    ADDRESS = "personal.address"
    CITY = "personal.city"
    STATE = "personal.state"
    ZIP_CODE = "personal.zipCode"
    COUNTRY = "personal.country"
    DEGREE = "education.degree"
    MAJOR = "education.major"
    UNIVERSITY = "education.university"
    GRADUATION_YEAR = "education.graduationYear"
    GPA = "education.gpa"
    CURRENT_ROLE = "experience.currentRole"
    CURRENT_COMPANY = "experience.currentCompany"
    YEARS_OF_EXPERIENCE = "experience.yearsOfExperience"
    SKILLS = "experience.skills"
    LINKEDIN = "links.linkedin"
    GITHUB = "links.github"
    PORTFOLIO = "links.portfolio"
    WEBSITE = "links.website"
    RESUME = "documents.resume"

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(self.value.split("."))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PatternRule:
    """
    Static descriptor recognizing one profile field.

    Attributes:
        profile_path: Profile leaf this rule fills
        phrases: Synonyms compared against field label/placeholder/name/aria-label
        accepted_input_types: Input types this rule may fill; empty means any type
        weight: Multiplier on the confidence score (1.0 for every rule today)
        negative_keywords: Any of these in the field's label+placeholder+name vetoes the rule
    """

    profile_path: ProfilePath
    phrases: tuple[str, ...]
    accepted_input_types: tuple[str, ...] = ()
    weight: float = 1.0
    negative_keywords: tuple[str, ...] = ()

    def accepts_input_type(self, input_type: str) -> bool:
        return not self.accepted_input_types or input_type in self.accepted_input_types


FIELD_RULES: tuple[PatternRule, ...] = (
    # Personal information
    PatternRule(
        ProfilePath.FIRST_NAME,
        phrases=("first name", "first", "fname", "given name", "forename"),
        accepted_input_types=("text",),
        negative_keywords=("last", "surname", "family"),
    ),
    PatternRule(
        ProfilePath.LAST_NAME,
        phrases=("last name", "last", "lname", "surname", "family name"),
        accepted_input_types=("text",),
        negative_keywords=("first", "given", "forename"),
    ),
    PatternRule(
        ProfilePath.EMAIL,
        phrases=("email", "email address", "e-mail", "mail"),
        accepted_input_types=("email", "text"),
        negative_keywords=("phone", "mobile", "address"),
    ),
    PatternRule(
        ProfilePath.PHONE,
        phrases=("phone", "phone number", "mobile", "telephone", "cell", "contact number"),
        accepted_input_types=("tel", "text"),
        negative_keywords=("email", "mail"),
    ),
    PatternRule(
        ProfilePath.ADDRESS,
        phrases=("address", "street", "street address", "address line", "location"),
        accepted_input_types=("text", "textarea"),
        negative_keywords=("email", "phone"),
    ),
    PatternRule(
        ProfilePath.CITY,
        phrases=("city", "town"),
        accepted_input_types=("text",),
    ),
    PatternRule(
        ProfilePath.STATE,
        phrases=("state", "province", "region"),
        accepted_input_types=("text", "select"),
    ),
    PatternRule(
        ProfilePath.ZIP_CODE,
        phrases=("zip", "zip code", "postal code", "postcode", "postal"),
        accepted_input_types=("text", "number"),
    ),
    PatternRule(
        ProfilePath.COUNTRY,
        phrases=("country", "nation"),
        accepted_input_types=("text", "select"),
    ),
    # Education
    PatternRule(
        ProfilePath.DEGREE,
        phrases=("degree", "qualification", "education level", "highest degree"),
        accepted_input_types=("text", "select"),
        negative_keywords=("major", "university", "year"),
    ),
    PatternRule(
        ProfilePath.MAJOR,
        phrases=("major", "field of study", "specialization", "subject", "area of study"),
        accepted_input_types=("text",),
        negative_keywords=("degree", "university", "year"),
    ),
    PatternRule(
        ProfilePath.UNIVERSITY,
        phrases=("university", "college", "school", "institution", "alma mater"),
        accepted_input_types=("text",),
        negative_keywords=("degree", "major", "year"),
    ),
    PatternRule(
        ProfilePath.GRADUATION_YEAR,
        phrases=("graduation year", "grad year", "year of graduation", "graduation date"),
        accepted_input_types=("text", "number", "date"),
    ),
    PatternRule(
        ProfilePath.GPA,
        phrases=("gpa", "grade point average", "grades", "cgpa"),
        accepted_input_types=("text", "number"),
    ),
    # Experience
    PatternRule(
        ProfilePath.CURRENT_ROLE,
        phrases=("current role", "job title", "position", "role", "current position", "title"),
        accepted_input_types=("text",),
        negative_keywords=("company", "employer"),
    ),
    PatternRule(
        ProfilePath.CURRENT_COMPANY,
        phrases=("company", "employer", "organization", "current company", "current employer"),
        accepted_input_types=("text",),
        negative_keywords=("role", "title", "position"),
    ),
    PatternRule(
        ProfilePath.YEARS_OF_EXPERIENCE,
        phrases=("years of experience", "experience", "years", "work experience", "total experience"),
        accepted_input_types=("text", "number"),
    ),
    PatternRule(
        ProfilePath.SKILLS,
        phrases=("skills", "technical skills", "expertise", "competencies", "abilities"),
        accepted_input_types=("text", "textarea"),
    ),
    # Links
    PatternRule(
        ProfilePath.LINKEDIN,
        phrases=("linkedin", "linkedin url", "linkedin profile", "linkedin link"),
        accepted_input_types=("url", "text"),
        negative_keywords=("github", "portfolio"),
    ),
    PatternRule(
        ProfilePath.GITHUB,
        phrases=("github", "github url", "github profile", "github link"),
        accepted_input_types=("url", "text"),
        negative_keywords=("linkedin", "portfolio"),
    ),
    PatternRule(
        ProfilePath.PORTFOLIO,
        phrases=("portfolio", "portfolio url", "portfolio link", "work samples"),
        accepted_input_types=("url", "text"),
        negative_keywords=("linkedin", "github"),
    ),
    PatternRule(
        ProfilePath.WEBSITE,
        phrases=("website", "personal website", "url", "web page", "homepage"),
        accepted_input_types=("url", "text"),
    ),
    # Documents
    PatternRule(
        ProfilePath.RESUME,
        phrases=("resume", "cv", "curriculum vitae", "upload resume", "attach resume"),
        accepted_input_types=("file",),
    ),
)


# Common label -> alternative wordings
FIELD_ALIASES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "phone": ("mobile", "telephone", "cell", "contact number", "tel"),
    "first name": ("given name", "forename", "christian name"),
    "last name": ("surname", "family name"),
    "email": ("e-mail", "mail", "email address"),
    "address": ("street", "street address", "location"),
    "zip": ("postal code", "postcode", "zip code"),
    "state": ("province", "region"),
    "university": ("college", "school", "institution"),
    "degree": ("qualification", "education level"),
    "major": ("field of study", "specialization"),
    "company": ("employer", "organization"),
    "role": ("job title", "position", "title"),
    "skills": ("technical skills", "expertise"),
    "resume": ("cv", "curriculum vitae"),
})


def _build_index(rules: tuple[PatternRule, ...]) -> Mapping[ProfilePath, PatternRule]:
    index: dict[ProfilePath, PatternRule] = {}
    for rule in rules:
        if rule.profile_path in index:
            raise RuntimeError(f"Duplicate pattern rule for {rule.profile_path.value}")
        index[rule.profile_path] = rule
    missing = [path.value for path in ProfilePath if path not in index]
    if missing:
        raise RuntimeError(f"Profile paths without a pattern rule: {', '.join(missing)}")
    return MappingProxyType(index)


_RULES_BY_PATH = _build_index(FIELD_RULES)
_PATH_ORDER: tuple[ProfilePath, ...] = tuple(rule.profile_path for rule in FIELD_RULES)


def _coerce_path(path: Union[ProfilePath, str]) -> Optional[ProfilePath]:
    if isinstance(path, ProfilePath):
        return path
    try:
        return ProfilePath(path)
    except ValueError:
        return None


def all_profile_paths() -> tuple[ProfilePath, ...]:
    """Every profile path, in matching order."""
    return _PATH_ORDER


def get_rule(path: Union[ProfilePath, str]) -> Optional[PatternRule]:
    resolved = _coerce_path(path)
    return _RULES_BY_PATH[resolved] if resolved is not None else None


def get_negative_keywords(path: Union[ProfilePath, str]) -> tuple[str, ...]:
    rule = get_rule(path)
    return rule.negative_keywords if rule else ()


def is_valid_profile_path(path: Union[ProfilePath, str]) -> bool:
    return _coerce_path(path) is not None


def expand_aliases(phrase: str) -> tuple[str, ...]:
    """The phrase followed by its known alternative wordings (lowercased key lookup)."""
    key = (phrase or "").lower().strip()
    return (key,) + FIELD_ALIASES.get(key, ())
