"""
Analysis Controller

Owns the process-wide orchestrator and maps its state to API responses.
"""

import logging
from typing import Optional

from agents.analysis_orchestrator import AnalysisOrchestrator, PipelineState, PipelineStatus
from agents.review_analysis_agent import create_default_client
from models.schemas import PipelineStateResponse, SubmissionResponse

logger = logging.getLogger(__name__)


EXAMPLE_REVIEWS = """- The checkout process is too long and confusing. I almost gave up.
- I love the product but shipping took 3 weeks without any updates.
- Customer support didn't respond to my email for 4 days.
- The mobile app crashes whenever I try to apply a discount code.
- Prices are a bit higher than competitors, but the quality is better.
- I wish there was a subscription option for recurring orders.
- The website is slow to load on my phone.
- Finding specific items in the search bar is frustratingly difficult."""


# Singleton orchestrator instance
_orchestrator: Optional[AnalysisOrchestrator] = None


def get_orchestrator() -> AnalysisOrchestrator:
    """Get or create the orchestrator (one capability handle for the process lifetime)."""
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = AnalysisOrchestrator(create_default_client())
        _orchestrator.subscribe(_log_transition)
    return _orchestrator


def _log_transition(state: PipelineState) -> None:
    if state.status == PipelineStatus.FAILED:
        logger.error(f"Analysis {state.job_id} failed ({state.failure_kind}): {state.failure_reason}")
    else:
        logger.info(f"Analysis {state.job_id} -> {state.status.value}")


def to_state_response(state: PipelineState) -> PipelineStateResponse:
    """Public view of the state: failure diagnostics stay server-side."""
    return PipelineStateResponse(
        status=state.status.value,
        job_id=state.job_id,
        result=state.result,
        summary=state.summary,
        error=state.message,
    )


async def submit_reviews(
    orchestrator: AnalysisOrchestrator,
    reviews: str,
    language: Optional[str],
    wait: bool = False
) -> SubmissionResponse:
    """
    Submit reviews to the orchestrator.

    Args:
        orchestrator: Pipeline to submit to
        reviews: Raw review text
        language: Declared review language
        wait: If True, wait for the accepted analysis to finish before responding

    Returns:
        SubmissionResponse with the acceptance flag and the resulting state
    """
    task = orchestrator.submit(reviews, language)
    if task is not None and wait:
        await task

    return SubmissionResponse(
        accepted=task is not None,
        state=to_state_response(orchestrator.current_state())
    )
