"""Wire schema of the JSON object embedded in the remote provider's reply."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from interview_sim_ai.schemas.extracted_profile import ExtractedProfile


class RemoteCVAnalysis(BaseModel):
    """All ten fields are required; a reply missing any of them is malformed."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    technical_skills: List[str] = Field(..., alias="technicalSkills")
    soft_skills: List[str] = Field(..., alias="softSkills")
    work_experience: List[str] = Field(..., alias="workExperience")
    years_of_experience: int = Field(..., alias="yearsOfExperience", ge=0)
    education: List[str] = Field(..., alias="education")
    certifications: List[str] = Field(..., alias="certifications")
    projects: List[str] = Field(..., alias="projects")
    achievements: List[str] = Field(..., alias="achievements")
    languages: List[str] = Field(..., alias="languages")
    summary: str = Field(..., alias="summary")

    @field_validator(
        "technical_skills",
        "soft_skills",
        "work_experience",
        "education",
        "certifications",
        "projects",
        "achievements",
        "languages",
    )
    @classmethod
    def _strip_entries(cls, value: List[str]) -> List[str]:
        return [v.strip() for v in value if v and v.strip()]

    def to_profile(self) -> ExtractedProfile:
        return ExtractedProfile(
            technical_skills=self.technical_skills,
            soft_skills=self.soft_skills,
            work_experience=self.work_experience,
            years_of_experience=self.years_of_experience,
            education=self.education,
            certifications=self.certifications,
            projects=self.projects,
            achievements=self.achievements,
            languages=self.languages,
        )
