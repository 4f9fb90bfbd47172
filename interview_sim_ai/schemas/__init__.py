"""Schema exports."""

from .extracted_profile import ExtractedProfile, ExtractionPath, ExtractionResult
from .remote_analysis import RemoteCVAnalysis

__all__ = ["ExtractedProfile", "ExtractionPath", "ExtractionResult", "RemoteCVAnalysis"]
