import asyncio
import json

import pytest

from interview_sim_ai.config import ExtractionConfig
from interview_sim_ai.cv_pipeline.remote_client import RemoteExtractionClient

SAMPLE_CV = """Jane Appleseed
Senior Software Engineer
jane@example.com

PROFESSIONAL SUMMARY
Experienced engineer with 7+ years of experience in full-stack development and team leadership.

TECHNICAL SKILLS
• Languages: Python, TypeScript, Swift
• Databases: PostgreSQL, Redis
• Cloud: AWS, Docker, Kubernetes

PROFESSIONAL EXPERIENCE
Senior Software Engineer | TechCorp Inc. | 2021 - Present
• Led development of microservices serving 2M+ daily users
• Reduced deployment time by 60% with CI/CD pipelines
Backend Developer | StartupXYZ | 2018 - 2021

EDUCATION
Bachelor of Science in Computer Science
University of California, Berkeley | 2013 - 2017
GPA: 3.8/4.0

CERTIFICATIONS
• AWS Certified Solutions Architect - Professional (2022)

PROJECTS
• Task Management App - Developed cross-platform mobile app with offline sync

LANGUAGES
• English (Native)
• Spanish (Conversational)
"""

REMOTE_PAYLOAD = {
    "technicalSkills": ["Python", "AWS", "Python"],
    "softSkills": ["Leadership"],
    "workExperience": ["Senior Software Engineer"],
    "yearsOfExperience": 7,
    "education": ["Bachelor of Science in Computer Science"],
    "certifications": ["AWS Certified Solutions Architect"],
    "projects": ["Task Management App"],
    "achievements": ["Reduced deployment time by 60%"],
    "languages": ["English", "Spanish"],
    "summary": "Senior engineer with 7 years of experience.",
}


class StubRemoteClient(RemoteExtractionClient):
    """Remote client whose provider call is a plain callable (reply text or exception)."""

    def __init__(self, config, reply=None, error=None, delay=0.0):
        super().__init__(config)
        self.reply = reply
        self.error = error
        self.delay = delay
        self.calls = 0

    async def _complete(self, text):
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def sample_cv():
    return SAMPLE_CV


@pytest.fixture
def remote_reply():
    return "Here is the analysis:\n```json\n" + json.dumps(REMOTE_PAYLOAD) + "\n```"


@pytest.fixture
def gemini_config():
    return ExtractionConfig(api_key="test-key", provider="gemini", model="gemini-test", timeout_seconds=5.0)


@pytest.fixture
def openai_config():
    return ExtractionConfig(api_key="sk-test", provider="openai", model="gpt-test", timeout_seconds=5.0)


@pytest.fixture
def offline_config():
    return ExtractionConfig(api_key="", provider="gemini")


@pytest.fixture
def stub_client_cls():
    return StubRemoteClient
