"""
Analysis Routes

Review analysis workflow:
1. Live strength feedback while the user types
2. Submission (single analysis at a time)
3. State polling for the report
"""
import logging

from fastapi import APIRouter, Depends

from agents.analysis_orchestrator import AnalysisOrchestrator
from agents.review_analysis_agent import AUTO_DETECT, SUPPORTED_LANGUAGES
from models.schemas import (
    LanguagesResponse,
    PipelineStateResponse,
    ReviewStrengthRequest,
    ReviewStrengthResponse,
    ReviewSubmissionRequest,
    SubmissionResponse,
)
from src.controllers.analysis_controller import (
    EXAMPLE_REVIEWS,
    get_orchestrator,
    submit_reviews,
    to_state_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analysis", tags=["Analysis"])


@router.get("/languages", response_model=LanguagesResponse)
async def list_languages() -> LanguagesResponse:
    """Languages the reviews can be declared in."""
    return LanguagesResponse(languages=SUPPORTED_LANGUAGES)


@router.post("/strength", response_model=ReviewStrengthResponse)
async def review_strength(
    request: ReviewStrengthRequest,
    orchestrator: AnalysisOrchestrator = Depends(get_orchestrator)
) -> ReviewStrengthResponse:
    """
    Score the current review input.

    Cheap enough to call on every keystroke.
    """
    strength = orchestrator.current_strength(request.reviews)
    return ReviewStrengthResponse(
        label=strength.label.value,
        width=strength.width,
        word_count=strength.word_count
    )


@router.post("/submit", response_model=SubmissionResponse, status_code=202)
async def submit_analysis(
    request: ReviewSubmissionRequest,
    wait: bool = False,
    orchestrator: AnalysisOrchestrator = Depends(get_orchestrator)
) -> SubmissionResponse:
    """
    Submit reviews for analysis.

    Parameters:
    - reviews: Raw review text (required, must not be blank)
    - language: Declared language (default: "Auto-detect")
    - wait: Query flag; when true the response carries the finished state

    A submission while another analysis is running is ignored and reported
    with accepted=false.
    """
    return await submit_reviews(orchestrator, request.reviews, request.language, wait=wait)


@router.post("/example", response_model=SubmissionResponse, status_code=202)
async def submit_example(
    wait: bool = False,
    orchestrator: AnalysisOrchestrator = Depends(get_orchestrator)
) -> SubmissionResponse:
    """Analyze the built-in example reviews."""
    return await submit_reviews(orchestrator, EXAMPLE_REVIEWS, AUTO_DETECT, wait=wait)


@router.get("/state", response_model=PipelineStateResponse)
async def analysis_state(
    orchestrator: AnalysisOrchestrator = Depends(get_orchestrator)
) -> PipelineStateResponse:
    """Current pipeline state (idle, analyzing, succeeded or failed)."""
    return to_state_response(orchestrator.current_state())
