"""Extraction orchestrator: one remote attempt, heuristic fallback on any failure."""

import asyncio
from typing import Any, Callable, Dict, Optional

from interview_sim_ai.config import ExtractionConfig, load_extraction_config
from interview_sim_ai.cv_pipeline.heuristic_extractor import extract_profile_locally
from interview_sim_ai.cv_pipeline.remote_client import (
    RemoteErrorKind,
    RemoteExtractionClient,
    RemoteExtractionError,
    get_remote_client,
)
from interview_sim_ai.schemas.extracted_profile import ExtractedProfile, ExtractionPath, ExtractionResult
from interview_sim_ai.utils.logger import get_logger

logger = get_logger(__name__)

EMPTY_INPUT_REASON = "empty_input"

EventHook = Callable[[str, Dict[str, Any]], None]


class CVExtractionOrchestrator:
    """
    AttemptingRemote -> Done(remote) | FallingBack -> Done(local).
    Holds no per-request state, so one instance can serve concurrent extractions.
    """

    def __init__(
        self,
        config: ExtractionConfig,
        remote_client: Optional[RemoteExtractionClient] = None,
        on_event: Optional[EventHook] = None,
    ) -> None:
        self._config = config
        self._remote = remote_client or get_remote_client(config)
        self._on_event = on_event

    def _emit(self, name: str, **payload: Any) -> None:
        if self._on_event is None:
            return
        try:
            self._on_event(name, payload)
        except Exception:
            logger.exception("Extraction event hook failed for %s", name)

    @staticmethod
    def extract_locally(text: str) -> ExtractedProfile:
        return extract_profile_locally(text)

    async def _attempt_remote(self, text: str) -> ExtractionResult:
        self._emit("remote_attempt", provider=self._config.provider, chars=len(text))
        try:
            analysis = await asyncio.wait_for(self._remote.extract(text), timeout=self._config.timeout_seconds)
        except asyncio.TimeoutError as e:
            raise RemoteExtractionError(
                RemoteErrorKind.TRANSPORT_ERROR, f"Timed out after {self._config.timeout_seconds}s"
            ) from e
        except asyncio.CancelledError as e:
            # Cancelling the remote leg still leaves the local path reachable.
            raise RemoteExtractionError(RemoteErrorKind.TRANSPORT_ERROR, "Remote call cancelled") from e
        return ExtractionResult(
            profile=analysis.to_profile(),
            path=ExtractionPath.REMOTE,
            provider_summary=analysis.summary or None,
        )

    async def _fall_back(self, text: str, reason: str) -> ExtractionResult:
        profile = await asyncio.to_thread(extract_profile_locally, text)
        self._emit("local_completed", reason=reason, years=profile.years_of_experience)
        return ExtractionResult(profile=profile, path=ExtractionPath.LOCAL, fallback_reason=reason)

    async def extract(self, text: str) -> ExtractionResult:
        """Produce exactly one ExtractionResult for the text. Never raises for remote failures."""
        text = text or ""
        if not text.strip():
            logger.info("Empty CV text; skipping remote extraction")
            return await self._fall_back(text, EMPTY_INPUT_REASON)

        try:
            result = await self._attempt_remote(text)
        except RemoteExtractionError as e:
            logger.warning("Remote extraction failed (%s): %s; using local analysis", e.kind.value, e)
            self._emit("remote_failed", kind=e.kind.value, status_code=e.status_code)
            return await self._fall_back(text, e.kind.value)
        except Exception as e:
            logger.exception("Unexpected remote extraction failure: %s", e)
            self._emit("remote_failed", kind=RemoteErrorKind.TRANSPORT_ERROR.value, status_code=None)
            return await self._fall_back(text, RemoteErrorKind.TRANSPORT_ERROR.value)

        self._emit("remote_succeeded", provider=self._config.provider)
        logger.info(
            "Remote extraction succeeded: technical=%s roles=%s years=%s",
            len(result.profile.technical_skills),
            len(result.profile.work_experience),
            result.profile.years_of_experience,
        )
        return result


def analyze_cv_text(
    text: str,
    config: Optional[ExtractionConfig] = None,
    remote_client: Optional[RemoteExtractionClient] = None,
) -> ExtractionResult:
    """
    Run the orchestrator for one CV text.
    Uses a private event loop; safe to call from sync context (scripts, worker threads).
    """
    orchestrator = CVExtractionOrchestrator(config or load_extraction_config(), remote_client=remote_client)
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(orchestrator.extract(text))
    finally:
        loop.run_until_complete(loop.shutdown_default_executor())
        loop.close()
