"""
Analysis orchestrator: the single-flight state machine around the review
analysis workflow.

    Idle / Succeeded / Failed --submit--> Analyzing --> Succeeded | Failed

A submission while Analyzing, or with blank text, is ignored. The guard and
the switch to Analyzing happen synchronously inside ``submit`` so two
submissions can never both be accepted.
"""

import asyncio
import logging
from typing import Callable, List, Optional

from pydantic import ValidationError

from agents.analysis_orchestrator.models import PipelineState
from agents.review_analysis_agent import (
    AUTO_DETECT,
    AnalysisClient,
    AnalysisRequest,
    ReviewStrength,
    run_review_analysis,
    score_review_strength,
)
from utils.helpers import generate_job_id, truncate_text

logger = logging.getLogger(__name__)

StateListener = Callable[[PipelineState], None]


class AnalysisOrchestrator:
    """Owns the PipelineState and is its only writer."""

    def __init__(self, client: AnalysisClient):
        self._client = client
        self._state = PipelineState.idle()
        self._listeners: List[StateListener] = []

    def current_state(self) -> PipelineState:
        return self._state

    def current_strength(self, raw_text: str) -> ReviewStrength:
        return score_review_strength(raw_text)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener called with the new state after every transition.

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def submit(self, raw_text: str, source_language: Optional[str] = AUTO_DETECT) -> Optional["asyncio.Task[PipelineState]"]:
        """
        Start an analysis of ``raw_text`` if the pipeline is free.

        Must be called from a running event loop.

        Returns:
            The task running the analysis, or None if the submission was ignored
            (blank text, unsupported language, or an analysis already in flight)
        """
        loop = asyncio.get_running_loop()

        if self._state.is_analyzing:
            logger.info(f"⏭️  Analysis {self._state.job_id} still running, ignoring new submission")
            return None

        if not (raw_text or "").strip():
            logger.debug("Ignoring submission with empty review text")
            return None

        try:
            request = AnalysisRequest(raw_text=raw_text, source_language=source_language)
        except ValidationError as e:
            logger.warning(f"Ignoring invalid submission: {e.errors()[0]['msg']}")
            return None

        job_id = generate_job_id()
        logger.info(f"🚀 [{job_id}] Starting analysis: {truncate_text(request.raw_text.strip(), 60)!r}")
        self._transition(PipelineState.analyzing(job_id))

        return loop.create_task(self._run(request, job_id))

    async def analyze(self, raw_text: str, source_language: Optional[str] = AUTO_DETECT) -> PipelineState:
        """Submit and wait for the terminal state. Returns the current state if the submission was ignored."""
        task = self.submit(raw_text, source_language)
        if task is None:
            return self._state
        return await task

    async def _run(self, request: AnalysisRequest, job_id: str) -> PipelineState:
        try:
            outcome = await run_review_analysis(request, self._client, job_id=job_id)
        except Exception as e:
            logger.exception(f"❌ [{job_id}] Unexpected error during analysis")
            new_state = PipelineState.failed(job_id, "unexpected", f"{type(e).__name__}: {e}")
        else:
            if outcome.get("error_kind"):
                new_state = PipelineState.failed(job_id, outcome["error_kind"], outcome.get("error_reason") or "")
            else:
                new_state = PipelineState.succeeded(job_id, outcome["result"], outcome["summary"])

        self._transition(new_state)
        return new_state

    def _transition(self, new_state: PipelineState) -> None:
        self._state = new_state
        for listener in list(self._listeners):
            try:
                listener(new_state)
            except Exception:
                logger.exception(f"State listener {listener!r} failed")
