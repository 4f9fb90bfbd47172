import pytest

from interview_sim_ai.cv_pipeline.heuristic_extractor import (
    _compile_all,
    extract_achievements,
    extract_certifications,
    extract_education,
    extract_languages,
    extract_profile_locally,
    extract_projects,
    extract_soft_skills,
    extract_technical_skills,
    extract_work_experience,
    extract_years_of_experience,
)
from interview_sim_ai.cv_pipeline.text_normalizer import normalize


@pytest.mark.parametrize("spelling", ["SWIFT", "swift", "Swift"])
def test_technical_skill_matching_is_case_insensitive(spelling):
    skills = extract_technical_skills(normalize(f"I write {spelling} daily. {spelling} forever."))
    assert skills == ["Swift"]


def test_technical_skills_use_custom_dictionary():
    skills = extract_technical_skills(normalize("Elixir and Phoenix"), terms=("Elixir", "Phoenix", "Erlang"))
    assert skills == ["Elixir", "Phoenix"]


def test_soft_skills():
    assert extract_soft_skills(normalize("Strong LEADERSHIP and communication")) == ["Communication", "Leadership"]


def test_work_experience_keeps_first_dictionary_title_per_line():
    assert extract_work_experience(normalize("Senior Software Engineer | Acme")) == ["Software Engineer"]
    text = normalize(
        "Senior Software Engineer | TechCorp | 2021 - Present\n"
        "Software Engineer | StartupXYZ\n"
        "Worked closely with the product manager"
    )
    assert extract_work_experience(text) == ["Product Manager", "Software Engineer"]


def test_work_experience_follows_custom_dictionary_order():
    titles = ("Senior Software Engineer", "Software Engineer")
    text = normalize("Senior Software Engineer | Acme")
    assert extract_work_experience(text, titles=titles) == ["Senior Software Engineer"]


def test_extended_dictionary_terms():
    text = normalize(
        "Go, DevOps, Apache, GitLab, Slack, IntelliJ\n"
        "Test Engineer\n"
        "Presentation Skills, Training"
    )
    technical = extract_technical_skills(text)
    for skill in ("Apache", "DevOps", "GitLab", "IntelliJ", "Slack"):
        assert skill in technical
    assert "Go" not in technical
    assert extract_work_experience(text) == ["Test Engineer"]
    soft = extract_soft_skills(text)
    assert "Presentation Skills" in soft
    assert "Training" in soft


def test_years_first_pattern_wins_not_sum():
    text = normalize("5+ years of experience building apps.\nLed a team for 3 years.")
    assert extract_years_of_experience(text) == 5


def test_years_priority_over_text_order():
    text = normalize("Over 3 years at Acme.\nIn total 5+ years of experience in iOS.")
    assert extract_years_of_experience(text) == 5


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("10 yrs experience in banking", 10),
        ("Experience: 7 years at a bank", 7),
        ("No numbers here", 0),
        ("", 0),
    ],
)
def test_years_patterns(raw, expected):
    assert extract_years_of_experience(normalize(raw)) == expected


def test_education_patterns_and_keyword_density():
    text = normalize(
        "EDUCATION\n"
        "Bachelor of Science in Computer Science\n"
        "Stanford University | 2017 - 2019\n"
        "GPA: 3.8/4.0\n"
        "Major in Mathematics, minor in Physics\n"
        "University\n"
        "Graduate school enthusiast"
    )
    assert extract_education(text) == [
        "Bachelor of Science in Computer Science",
        "GPA: 3.8/4.0",
        "Major in Mathematics, minor in Physics",
        "Stanford University | 2017 - 2019",
    ]


def test_education_skips_overlong_lines():
    long_line = "Bachelor of Science in " + "Computer Science " * 20
    assert extract_education(normalize(long_line)) == []


def test_certification_keyword_without_year_is_rejected():
    assert extract_certifications(normalize("AWS Certified Professional")) == []


def test_certification_vendor_pattern_needs_no_year():
    assert extract_certifications(normalize("AWS Certified Developer - Associate")) == [
        "AWS Certified Developer - Associate"
    ]


def test_certification_keyword_and_year_heuristic():
    text = normalize("Scrum Alliance member 2021\nAttended workshop in 2021\nCert")
    assert extract_certifications(text) == ["Scrum Alliance member 2021"]


def test_certification_patterns_are_compiled_once():
    text = normalize("Scrum Alliance member 2021")
    extract_certifications(text)
    hits = _compile_all.cache_info().hits
    assert extract_certifications(text) == ["Scrum Alliance member 2021"]
    assert _compile_all.cache_info().hits == hits + 2


def test_projects_require_bullet():
    text = normalize(
        "Developed a new platform for payments\n"
        "• developed a new platform\n"
        "- Built an iOS app\n"
        "* " + "Created " + "x" * 160 + "\n"
        "•"
    )
    assert extract_projects(text) == ["Built an iOS app", "developed a new platform"]


def test_achievements_require_bullet_and_verb():
    text = normalize(
        "Increased revenue without a bullet\n"
        "• Increased revenue by 20%\n"
        "• Attended meetings\n"
        "- Led " + "a" * 250
    )
    assert extract_achievements(text) == ["Increased revenue by 20%"]


def test_languages_from_bullets_and_header_line():
    text = normalize(
        "LANGUAGES\n• English (Native)\n• Spanish (Conversational)\nLanguages: French, German\n• Polished UI components"
    )
    assert extract_languages(text) == ["English", "French", "German", "Spanish"]


def test_empty_text_profile_is_all_empty():
    profile = extract_profile_locally("")
    assert profile.technical_skills == []
    assert profile.soft_skills == []
    assert profile.work_experience == []
    assert profile.education == []
    assert profile.certifications == []
    assert profile.projects == []
    assert profile.achievements == []
    assert profile.languages == []
    assert profile.years_of_experience == 0
    assert profile.summary == ""
    assert profile.is_empty()


def test_local_extraction_is_deterministic(sample_cv):
    assert extract_profile_locally(sample_cv) == extract_profile_locally(sample_cv)


def test_sample_cv_profile(sample_cv):
    profile = extract_profile_locally(sample_cv)
    for skill in ("AWS", "Docker", "Kubernetes", "PostgreSQL", "Python", "Redis", "Swift", "TypeScript"):
        assert skill in profile.technical_skills
    assert "Leadership" in profile.soft_skills
    assert profile.years_of_experience == 7
    assert "Software Engineer" in profile.work_experience
    assert "Senior Software Engineer" not in profile.work_experience
    assert "Backend Developer" in profile.work_experience
    assert "Bachelor of Science in Computer Science" in profile.education
    assert "University of California, Berkeley | 2013 - 2017" in profile.education
    assert "• AWS Certified Solutions Architect - Professional (2022)" in profile.certifications
    assert profile.projects == ["Task Management App - Developed cross-platform mobile app with offline sync"]
    assert profile.achievements == [
        "Led development of microservices serving 2M+ daily users",
        "Reduced deployment time by 60% with CI/CD pipelines",
    ]
    assert profile.languages == ["English", "Spanish"]
