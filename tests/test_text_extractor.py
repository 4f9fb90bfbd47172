from io import BytesIO

from docx import Document

from interview_sim_ai.cv_pipeline import run_cv_pipeline
from interview_sim_ai.cv_pipeline.text_extractor import extract_text_from_file
from interview_sim_ai.schemas.extracted_profile import ExtractionPath


def _docx_bytes(*paragraphs):
    doc = Document()
    for p in paragraphs:
        doc.add_paragraph(p)
    buf = BytesIO()
    doc.save(buf)
    return buf.getvalue()


def test_unsupported_extension():
    assert extract_text_from_file(b"whatever", "resume.doc") is None
    assert extract_text_from_file(b"whatever", "resume.png") is None


def test_empty_upload():
    assert extract_text_from_file(b"", "resume.txt") is None


def test_txt_is_cleaned():
    raw = "Jane   Doe\n\n\n\nSenior\tSoftware Engineer\n".encode("utf-8")
    assert extract_text_from_file(raw, "CV.TXT") == "Jane Doe\n\nSenior Software Engineer"


def test_docx_paragraphs():
    data = _docx_bytes("Jane Doe", "", "5+ years of experience")
    assert extract_text_from_file(data, "cv.docx") == "Jane Doe\n5+ years of experience"


def test_invalid_pdf_returns_none():
    assert extract_text_from_file(b"not a pdf at all", "cv.pdf") is None


def test_run_cv_pipeline_offline(offline_config):
    data = _docx_bytes("• Built TaskManager Pro app", "5+ years of experience")
    result = run_cv_pipeline(data, "cv.docx", config=offline_config)
    assert result.path is ExtractionPath.LOCAL
    assert result.profile.years_of_experience == 5
    assert result.profile.projects == ["Built TaskManager Pro app"]


def test_run_cv_pipeline_unreadable(offline_config):
    assert run_cv_pipeline(b"", "cv.txt", config=offline_config) is None
