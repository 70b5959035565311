"""
Profile schema - the structured profile the engine reads values from.
Mirrors the dotted ProfilePath layout (personal.*, education.*, ...).
"""
from typing import List

from pydantic import BaseModel, Field


# --- Nested schemas ---
class Personal(BaseModel):
    firstName: str = ""
    lastName: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zipCode: str = ""
    country: str = ""


class Education(BaseModel):
    degree: str = ""
    major: str = ""
    university: str = ""
    graduationYear: str = ""
    gpa: str = ""


class Experience(BaseModel):
    currentRole: str = ""
    currentCompany: str = ""
    yearsOfExperience: str = ""
    skills: List[str] = Field(default_factory=list)


class Links(BaseModel):
    linkedin: str = ""
    github: str = ""
    portfolio: str = ""
    website: str = ""


class Documents(BaseModel):
    resume: str = ""


class ProfilePayload(BaseModel):
    """Full profile. Read-only input to matching; persistence lives elsewhere."""

    personal: Personal = Field(default_factory=Personal)
    education: Education = Field(default_factory=Education)
    experience: Experience = Field(default_factory=Experience)
    links: Links = Field(default_factory=Links)
    documents: Documents = Field(default_factory=Documents)

    model_config = {"extra": "ignore"}
