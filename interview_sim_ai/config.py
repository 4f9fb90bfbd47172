"""Configuration loaded from environment variables."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


# Feature toggle + provider selection
REMOTE_EXTRACTION_ENABLED: bool = _env_bool("REMOTE_EXTRACTION_ENABLED", True)
EXTRACTION_PROVIDER: str = os.getenv("EXTRACTION_PROVIDER", "gemini")

# API keys – never hardcode
GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-1.5-flash-latest")
GEMINI_BASE_URL: str = os.getenv(
    "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta/models"
)
GEMINI_MAX_TOKENS: int = _env_int("GEMINI_MAX_TOKENS", 2048)
GEMINI_TEMPERATURE: float = _env_float("GEMINI_TEMPERATURE", 0.1)

OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
MODEL_NAME: str = os.getenv("MODEL_NAME", "gpt-4o-mini")
OPENAI_TEMPERATURE: float = _env_float("OPENAI_TEMPERATURE", 0.1)

# HTTP settings (single bounded attempt, no retries for extraction)
HTTP_TIMEOUT_SECONDS: float = _env_float("HTTP_TIMEOUT_SECONDS", 30.0)

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# Values shipped in .env templates; treated as "no key"
PLACEHOLDER_API_KEYS: frozenset = frozenset(
    {"YOUR_GEMINI_API_KEY_HERE", "YOUR_OPENAI_API_KEY_HERE"}
)


class ExtractionConfig(BaseModel):
    """Settings handed to the extraction orchestrator (no global lookups inside the core)."""

    model_config = ConfigDict(frozen=True)

    remote_enabled: bool = Field(default=True, description="Feature toggle for remote AI extraction")
    provider: str = Field(default="gemini", description="Remote provider: gemini or openai")
    api_key: str = Field(default="", description="Credential for the selected provider")
    model: str = Field(default="gemini-1.5-flash-latest", description="Model id for the provider")
    base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta/models",
        description="Endpoint root (Gemini only)",
    )
    temperature: float = Field(default=0.1, ge=0.0)
    max_output_tokens: int = Field(default=2048, gt=0)
    timeout_seconds: float = Field(default=30.0, gt=0.0)

    @property
    def remote_available(self) -> bool:
        """True when the remote path is switched on and holds a usable credential."""
        key = (self.api_key or "").strip()
        return self.remote_enabled and bool(key) and key not in PLACEHOLDER_API_KEYS


def load_extraction_config(provider: Optional[str] = None) -> ExtractionConfig:
    """
    Build an ExtractionConfig from the environment-backed constants.
    provider: override EXTRACTION_PROVIDER (gemini | openai).
    """
    p = (provider or EXTRACTION_PROVIDER or "gemini").strip().lower()
    if p == "openai":
        return ExtractionConfig(
            remote_enabled=REMOTE_EXTRACTION_ENABLED,
            provider="openai",
            api_key=OPENAI_API_KEY,
            model=MODEL_NAME,
            temperature=OPENAI_TEMPERATURE,
            timeout_seconds=HTTP_TIMEOUT_SECONDS,
        )
    return ExtractionConfig(
        remote_enabled=REMOTE_EXTRACTION_ENABLED,
        provider="gemini",
        api_key=GEMINI_API_KEY,
        model=GEMINI_MODEL,
        base_url=GEMINI_BASE_URL,
        temperature=GEMINI_TEMPERATURE,
        max_output_tokens=GEMINI_MAX_TOKENS,
        timeout_seconds=HTTP_TIMEOUT_SECONDS,
    )
