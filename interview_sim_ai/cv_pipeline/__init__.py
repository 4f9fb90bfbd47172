"""CV analysis pipeline: document text, heuristic extractors, remote AI extraction, orchestration."""

from typing import Optional

from interview_sim_ai.config import ExtractionConfig
from interview_sim_ai.cv_pipeline.heuristic_extractor import extract_profile_locally
from interview_sim_ai.cv_pipeline.orchestrator import CVExtractionOrchestrator, analyze_cv_text
from interview_sim_ai.cv_pipeline.remote_client import (
    GeminiExtractionClient,
    OpenAIExtractionClient,
    RemoteErrorKind,
    RemoteExtractionClient,
    RemoteExtractionError,
    get_remote_client,
)
from interview_sim_ai.cv_pipeline.text_extractor import extract_text_from_file
from interview_sim_ai.cv_pipeline.text_normalizer import NormalizedText, normalize
from interview_sim_ai.schemas.extracted_profile import ExtractionResult
from interview_sim_ai.utils.logger import get_logger

logger = get_logger(__name__)


def run_cv_pipeline(
    file_bytes: bytes,
    filename: str,
    config: Optional[ExtractionConfig] = None,
) -> Optional[ExtractionResult]:
    """
    Run the full CV pipeline: extract text from the uploaded file, then analyse it.
    Returns None only when no text could be read from the file.
    """
    raw_text = extract_text_from_file(file_bytes, filename)
    if not raw_text:
        logger.warning("No text extracted from %s", filename)
        return None
    result = analyze_cv_text(raw_text, config=config)
    if result.profile.is_empty():
        logger.info("No CV attributes recognised in %s", filename)
    logger.info("CV pipeline finished: file=%s path=%s", filename, result.path.value)
    return result


__all__ = [
    "run_cv_pipeline",
    "analyze_cv_text",
    "extract_text_from_file",
    "extract_profile_locally",
    "normalize",
    "NormalizedText",
    "CVExtractionOrchestrator",
    "RemoteExtractionClient",
    "GeminiExtractionClient",
    "OpenAIExtractionClient",
    "RemoteExtractionError",
    "RemoteErrorKind",
    "get_remote_client",
]
