"""Extract raw text from uploaded CV files (PDF, DOCX, TXT). In-memory only."""

import re
import unicodedata
from io import BytesIO
from typing import Optional

import pdfplumber
from docx import Document

from interview_sim_ai.utils.logger import get_logger

logger = get_logger(__name__)

SUPPORTED_EXTENSIONS = (".pdf", ".docx", ".txt")


def _clean_cv_text(text: str, max_chars: int = 50000) -> str:
    """NFC-normalize, collapse runs of spaces and blank lines, truncate very long input."""
    if not text or not text.strip():
        return ""
    t = unicodedata.normalize("NFC", text)
    t = re.sub(r"[ \t]+", " ", t)
    t = re.sub(r"\n\s*\n\s*\n", "\n\n", t)
    t = t.strip()
    if len(t) > max_chars:
        t = t[:max_chars]
    return t


def _extract_pdf(bytes_io: BytesIO) -> Optional[str]:
    try:
        with pdfplumber.open(bytes_io) as pdf:
            parts = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        logger.exception("PDF extraction failed: %s", e)
        return None
    parts = [p for p in parts if p.strip()]
    return "\n".join(parts) if parts else None


def _extract_docx(bytes_io: BytesIO) -> Optional[str]:
    try:
        doc = Document(bytes_io)
    except Exception as e:
        logger.exception("DOCX extraction failed: %s", e)
        return None
    parts = [p.text for p in doc.paragraphs if p.text.strip()]
    return "\n".join(parts) if parts else None


def _extract_txt(file_bytes: bytes) -> Optional[str]:
    try:
        return file_bytes.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        logger.warning("Text file is not valid UTF-8: %s", e)
        return None


def extract_text_from_file(file_bytes: bytes, filename: str) -> Optional[str]:
    """
    Extract and clean text from an uploaded CV file.
    Returns cleaned text, or None for unsupported types, unreadable files or empty documents.
    """
    name_lower = (filename or "").lower().strip()
    if not name_lower.endswith(SUPPORTED_EXTENSIONS):
        logger.warning("Unsupported file type: %s", filename)
        return None
    if not file_bytes:
        logger.warning("Empty upload: %s", filename)
        return None

    if name_lower.endswith(".pdf"):
        raw = _extract_pdf(BytesIO(file_bytes))
    elif name_lower.endswith(".docx"):
        raw = _extract_docx(BytesIO(file_bytes))
    else:
        raw = _extract_txt(file_bytes)

    if not raw or not raw.strip():
        return None
    return _clean_cv_text(raw)
