"""Remote (generative AI) extraction of a structured CV profile, single attempt, no retries."""

import json
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional

import httpx
from openai import APIConnectionError, APIStatusError, AsyncOpenAI
from pydantic import ValidationError

from interview_sim_ai.config import ExtractionConfig
from interview_sim_ai.schemas.remote_analysis import RemoteCVAnalysis
from interview_sim_ai.utils.logger import get_logger

logger = get_logger(__name__)

CV_ANALYSIS_INSTRUCTIONS = """Analyze the following CV/Resume text and extract structured information. Return ONLY a valid JSON object with the following structure:

{
  "technicalSkills": ["skill1", "skill2"],
  "softSkills": ["skill1", "skill2"],
  "workExperience": ["position1", "position2"],
  "yearsOfExperience": number,
  "education": ["degree1", "degree2"],
  "certifications": ["cert1", "cert2"],
  "projects": ["project1", "project2"],
  "achievements": ["achievement1", "achievement2"],
  "languages": ["language1", "language2"],
  "summary": "brief professional summary"
}

Guidelines for extraction:
- technicalSkills: programming languages, frameworks, libraries, tools, platforms, databases.
- softSkills: leadership, communication, teamwork, problem-solving, mentoring and similar.
- workExperience: job titles only, with seniority (Junior, Senior, Lead); no company names.
- yearsOfExperience: total professional experience as an integer (0 if unknown).
- education: full degree names, institutions, graduation years, GPA, honors.
- certifications: full certification names with issuer and year if mentioned.
- projects: project names with a brief description.
- achievements: quantifiable accomplishments, awards, publications, talks.
- languages: spoken languages with proficiency; programming languages belong in technicalSkills.
- summary: 2-3 sentences covering experience, key skills and focus area.
Use empty arrays when nothing is found. Do not wrap the JSON in markdown."""


class RemoteErrorKind(str, Enum):
    MISSING_CREDENTIAL = "missing_credential"
    TRANSPORT_ERROR = "transport_error"
    HTTP_ERROR = "http_error"
    EMPTY_RESPONSE = "empty_response"
    MALFORMED_PAYLOAD = "malformed_payload"


class RemoteExtractionError(Exception):
    """Any failure of the remote path. The orchestrator recovers from all of them."""

    def __init__(
        self,
        kind: RemoteErrorKind,
        message: str = "",
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        self.kind = kind
        self.status_code = status_code
        self.body = body
        detail = message or kind.value
        if status_code is not None:
            detail = f"{detail} (HTTP {status_code})"
        super().__init__(detail)


def build_cv_analysis_prompt(cv_text: str) -> str:
    """Single natural-language prompt: instructions, schema, then the CV text."""
    return f"{CV_ANALYSIS_INSTRUCTIONS}\n\nCV Text:\n{cv_text}"


def _locate_json_object(text: str) -> Optional[dict]:
    """
    Slice from the first '{' to the last '}' and parse it. If that slice is not valid JSON
    (e.g. stray braces after the object), decode exactly one object from the first '{'.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        return None
    try:
        data = json.loads(text[start : end + 1])
    except json.JSONDecodeError:
        try:
            data, _ = json.JSONDecoder().raw_decode(text, start)
        except json.JSONDecodeError:
            return None
    return data if isinstance(data, dict) else None


def parse_analysis_payload(text: Optional[str]) -> RemoteCVAnalysis:
    """Extract and validate the JSON object embedded in a free-form model reply."""
    if not text or not text.strip():
        raise RemoteExtractionError(RemoteErrorKind.EMPTY_RESPONSE, "Remote reply contained no text")
    data = _locate_json_object(text)
    if data is None:
        logger.warning("No JSON object found in remote reply: %s", text[:200])
        raise RemoteExtractionError(RemoteErrorKind.MALFORMED_PAYLOAD, "No JSON object in remote reply")
    try:
        return RemoteCVAnalysis.model_validate(data)
    except ValidationError as e:
        logger.warning("Remote payload validation failed: %s", e)
        raise RemoteExtractionError(RemoteErrorKind.MALFORMED_PAYLOAD, "Remote payload failed validation") from e


class RemoteExtractionClient(ABC):
    """Abstract remote extraction provider."""

    def __init__(self, config: ExtractionConfig) -> None:
        self._config = config

    async def extract(self, text: str) -> RemoteCVAnalysis:
        """One attempt: build prompt, call provider, parse and validate. Raises RemoteExtractionError."""
        if not self._config.remote_available:
            reason = "Remote extraction disabled" if not self._config.remote_enabled else "API key is missing"
            raise RemoteExtractionError(RemoteErrorKind.MISSING_CREDENTIAL, reason)
        reply = await self._complete(text)
        return parse_analysis_payload(reply)

    @abstractmethod
    async def _complete(self, text: str) -> str:
        """Send the CV text to the provider and return the raw reply text."""
        ...


class GeminiExtractionClient(RemoteExtractionClient):
    """Gemini generateContent over HTTPS (httpx); API key passed as the `key` query param."""

    def __init__(self, config: ExtractionConfig, http_client: Optional[httpx.AsyncClient] = None) -> None:
        super().__init__(config)
        self._http_client = http_client

    @property
    def endpoint(self) -> str:
        return f"{self._config.base_url.rstrip('/')}/{self._config.model}:generateContent"

    def _request_body(self, text: str) -> dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": build_cv_analysis_prompt(text)}]}],
            "generationConfig": {
                "temperature": self._config.temperature,
                "topK": 1,
                "topP": 1,
                "maxOutputTokens": self._config.max_output_tokens,
            },
        }

    async def _post(self, client: httpx.AsyncClient, text: str) -> httpx.Response:
        response = await client.post(
            self.endpoint,
            params={"key": self._config.api_key},
            json=self._request_body(text),
            headers={"Content-Type": "application/json"},
        )
        logger.info("Gemini response status: %s", response.status_code)
        response.raise_for_status()
        return response

    async def _complete(self, text: str) -> str:
        try:
            if self._http_client is not None:
                response = await self._post(self._http_client, text)
            else:
                async with httpx.AsyncClient(timeout=self._config.timeout_seconds) as client:
                    response = await self._post(client, text)
        except httpx.HTTPStatusError as e:
            body = e.response.text
            logger.warning("Gemini HTTP error: %s %s", e.response.status_code, body[:500])
            raise RemoteExtractionError(
                RemoteErrorKind.HTTP_ERROR,
                "Gemini API error",
                status_code=e.response.status_code,
                body=body,
            ) from e
        except httpx.TransportError as e:
            # TimeoutException is a TransportError subclass
            logger.warning("Gemini request failed: %s", e)
            raise RemoteExtractionError(RemoteErrorKind.TRANSPORT_ERROR, str(e) or type(e).__name__) from e

        try:
            data = response.json()
        except ValueError as e:
            raise RemoteExtractionError(RemoteErrorKind.MALFORMED_PAYLOAD, "Gemini envelope is not JSON") from e
        return _gemini_reply_text(data)


def _gemini_reply_text(data: Any) -> str:
    """candidates[0].content.parts[0].text, or EMPTY_RESPONSE."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        text = None
    if not isinstance(text, str) or not text.strip():
        raise RemoteExtractionError(RemoteErrorKind.EMPTY_RESPONSE, "No content in Gemini response")
    return text


class OpenAIExtractionClient(RemoteExtractionClient):
    """OpenAI chat completions (AsyncOpenAI); instructions as system prompt, CV as user message."""

    def __init__(self, config: ExtractionConfig, client: Optional[AsyncOpenAI] = None) -> None:
        super().__init__(config)
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self._config.api_key, timeout=self._config.timeout_seconds)
        return self._client

    async def _complete(self, text: str) -> str:
        try:
            response = await self._get_client().chat.completions.create(
                model=self._config.model,
                messages=[
                    {"role": "system", "content": CV_ANALYSIS_INSTRUCTIONS},
                    {"role": "user", "content": f"CV Text:\n\n{text}"},
                ],
                temperature=self._config.temperature,
            )
        except APIStatusError as e:
            body = e.response.text if e.response is not None else None
            logger.warning("OpenAI HTTP error: %s", e.status_code)
            raise RemoteExtractionError(
                RemoteErrorKind.HTTP_ERROR, "OpenAI API error", status_code=e.status_code, body=body
            ) from e
        except APIConnectionError as e:
            logger.warning("OpenAI request failed: %s", e)
            raise RemoteExtractionError(RemoteErrorKind.TRANSPORT_ERROR, str(e)) from e
        choice = response.choices[0] if response.choices else None
        if not choice or not choice.message or not choice.message.content:
            raise RemoteExtractionError(RemoteErrorKind.EMPTY_RESPONSE, "No content in OpenAI response")
        return choice.message.content


def get_remote_client(config: ExtractionConfig) -> RemoteExtractionClient:
    """Return the provider named by config.provider (dependency injection)."""
    p = (config.provider or "").strip().lower()
    if p == "openai":
        return OpenAIExtractionClient(config)
    if p != "gemini":
        logger.warning("Unknown extraction provider %r; using gemini", config.provider)
    return GeminiExtractionClient(config)
