"""
Data models and schemas for the review analyzer API.

This module defines the Pydantic models used for API requests and responses.
Pipeline models live with the agents that own them.
"""

from pydantic import BaseModel, Field
from typing import Optional, List

from agents.review_analysis_agent.models import AUTO_DETECT, AnalysisResult, AnalysisSummary


# API Request/Response Models

class ReviewSubmissionRequest(BaseModel):
    """Request model for the /analysis/submit endpoint."""
    reviews: str = Field(
        ...,
        description="Customer reviews pasted by the user, any format",
        examples=["- Shipping took 3 weeks without any updates.\n- Support never answered my email."]
    )
    language: Optional[str] = Field(
        AUTO_DETECT,
        description="Language the reviews are written in",
        examples=["Auto-detect", "Spanish"]
    )


class ReviewStrengthRequest(BaseModel):
    """Request model for the /analysis/strength endpoint."""
    reviews: str = Field(
        "",
        description="Current contents of the review input"
    )


class ReviewStrengthResponse(BaseModel):
    """Response model for the /analysis/strength endpoint."""
    label: str = Field(
        ...,
        description="Strength label",
        examples=["Empty", "Weak", "Fair", "Good", "Excellent"]
    )
    width: float = Field(
        ...,
        description="Fraction of the strength meter to fill",
        ge=0.0,
        le=1.0
    )
    word_count: int = Field(
        ...,
        description="Number of whitespace-separated words",
        ge=0
    )


class PipelineStateResponse(BaseModel):
    """Current state of the analysis pipeline."""
    status: str = Field(
        ...,
        description="Pipeline status",
        examples=["idle", "analyzing", "succeeded", "failed"]
    )
    job_id: Optional[str] = Field(
        None,
        description="Identifier of the current or last analysis"
    )
    result: Optional[AnalysisResult] = Field(
        None,
        description="Strategy report, present when status is 'succeeded'"
    )
    summary: Optional[AnalysisSummary] = Field(
        None,
        description="Derived display metrics, present when status is 'succeeded'"
    )
    error: Optional[str] = Field(
        None,
        description="Generic error message, present when status is 'failed'"
    )


class SubmissionResponse(BaseModel):
    """Response model for submission endpoints."""
    accepted: bool = Field(
        ...,
        description="False when the submission was ignored (empty text, bad language or analysis in progress)"
    )
    state: PipelineStateResponse


class LanguagesResponse(BaseModel):
    languages: List[str]


class HealthResponse(BaseModel):
    """Response model for the /health endpoint."""
    status: str = Field(
        ...,
        description="Health status of the system",
        examples=["healthy"]
    )
    version: str = Field(
        ...,
        description="Application version",
        examples=["1.0.0"]
    )
