"""Structured CV profile produced by the extraction pipeline (remote AI or local heuristics)."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from interview_sim_ai.utils.helpers import unique_sorted

SUMMARY_SEPARATOR = " • "
SUMMARY_TOP_SKILLS = 3


class ExtractionPath(str, Enum):
    """Which strategy produced a profile."""

    REMOTE = "remote"
    LOCAL = "local"


class ExtractedProfile(BaseModel):
    """Immutable CV profile. String lists are unique and sorted; summary is derived."""

    model_config = ConfigDict(frozen=True)

    technical_skills: List[str] = Field(default_factory=list, description="Technical skills (dictionary casing)")
    soft_skills: List[str] = Field(default_factory=list, description="Soft skills (dictionary casing)")
    work_experience: List[str] = Field(default_factory=list, description="Role titles held")
    years_of_experience: int = Field(default=0, ge=0, description="Years of professional experience")
    education: List[str] = Field(default_factory=list, description="Education lines or keywords")
    certifications: List[str] = Field(default_factory=list, description="Certification lines")
    projects: List[str] = Field(default_factory=list, description="Project descriptions (bullet-stripped)")
    achievements: List[str] = Field(default_factory=list, description="Quantifiable achievements (bullet-stripped)")
    languages: List[str] = Field(default_factory=list, description="Spoken languages")

    @field_validator(
        "technical_skills",
        "soft_skills",
        "work_experience",
        "education",
        "certifications",
        "projects",
        "achievements",
        "languages",
        mode="before",
    )
    @classmethod
    def _dedupe_and_sort(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        return unique_sorted(value)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def summary(self) -> str:
        """'<N>+ years of experience • Skills: a, b, c • Role: x' with absent parts omitted."""
        parts = []
        if self.years_of_experience > 0:
            parts.append(f"{self.years_of_experience}+ years of experience")
        if self.technical_skills:
            parts.append("Skills: " + ", ".join(self.technical_skills[:SUMMARY_TOP_SKILLS]))
        if self.work_experience:
            parts.append(f"Role: {self.work_experience[0]}")
        return SUMMARY_SEPARATOR.join(parts)

    def is_empty(self) -> bool:
        return not (
            self.technical_skills
            or self.soft_skills
            or self.work_experience
            or self.years_of_experience
            or self.education
            or self.certifications
            or self.projects
            or self.achievements
            or self.languages
        )


class ExtractionResult(BaseModel):
    """A profile plus the record of which extraction path produced it."""

    model_config = ConfigDict(frozen=True)

    profile: ExtractedProfile
    path: ExtractionPath
    fallback_reason: Optional[str] = Field(
        default=None, description="Why the remote path was not used (error kind or 'empty_input')"
    )
    provider_summary: Optional[str] = Field(
        default=None, description="Free-form summary returned by the remote provider, if any"
    )

    @property
    def used_fallback(self) -> bool:
        return self.path == ExtractionPath.LOCAL
